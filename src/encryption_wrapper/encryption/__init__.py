"""
Encryption utilities for the encryption wrapper.

This package holds the crypto provider contract and the stored value
encoding. The cryptography-backed provider lives in the openssl module and
is loaded on first use through default_provider().
"""

from .base import CipherProvider, default_provider
from .stored_value import EncodingMode, StoredValue, encoded_iv_length, expected_iv_padding

__all__ = [
    "CipherProvider",
    "default_provider",
    "EncodingMode",
    "StoredValue",
    "encoded_iv_length",
    "expected_iv_padding",
]
