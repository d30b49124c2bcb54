"""
Error types raised by the encryption wrapper.

Construction errors (CryptoUnavailableError, UnsupportedCipherError) mean no
proxy was built. Write errors leave the wrapped entity unmodified. Read errors
produce no partial result.
"""


class EncryptionWrapperError(Exception):
    """Base class for all encryption wrapper errors."""


class CryptoUnavailableError(EncryptionWrapperError):
    """No crypto provider is available in the runtime environment."""


class UnsupportedCipherError(EncryptionWrapperError, ValueError):
    """The requested cipher is not supported by the crypto provider."""

    def __init__(self, cipher: str) -> None:
        super().__init__(
            f"The cipher '{cipher}' is not available. "
            "Use supported_ciphers() on the provider for a list of available methods."
        )
        self.cipher = cipher


class WeakRandomnessError(EncryptionWrapperError):
    """The random source reported an initialisation vector as not cryptographically strong."""


class EncryptionError(EncryptionWrapperError):
    """The cipher failed to encrypt a plaintext value."""


class DecryptionError(EncryptionWrapperError):
    """A stored value could not be decoded or decrypted."""


class MalformedStoredValueError(DecryptionError):
    """A stored value could not be split into initialisation vector and cipher text."""
