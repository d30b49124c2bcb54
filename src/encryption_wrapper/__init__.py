"""
Encryption wrapper - transparent field-level encryption for arbitrary entities.

This package provides EncryptedProxy, which wraps an object or mapping so
that selected fields are stored encrypted while code using the proxy keeps
reading and writing plain text.
"""

from .config import WrapperConfig
from .encryption import CipherProvider, EncodingMode, default_provider
from .entities import FieldStore, MappingStore, ObjectStore
from .errors import (
    CryptoUnavailableError,
    DecryptionError,
    EncryptionError,
    EncryptionWrapperError,
    MalformedStoredValueError,
    UnsupportedCipherError,
    WeakRandomnessError,
)
from .models import ProxyOptions
from .proxy import EncryptedProxy

__version__ = "0.1.0"

__all__ = [
    "WrapperConfig",
    "EncryptedProxy",
    "ProxyOptions",
    "EncodingMode",
    "CipherProvider",
    "default_provider",
    "FieldStore",
    "MappingStore",
    "ObjectStore",
    "EncryptionWrapperError",
    "CryptoUnavailableError",
    "UnsupportedCipherError",
    "WeakRandomnessError",
    "EncryptionError",
    "DecryptionError",
    "MalformedStoredValueError",
]
