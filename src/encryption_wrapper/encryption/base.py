"""
Crypto provider contract.

A provider supplies everything the proxy needs from a crypto library: the set
of supported ciphers, their IV lengths, encryption, decryption and a random
source that reports whether its output is cryptographically strong.
"""

from abc import ABC, abstractmethod

from ..errors import CryptoUnavailableError, UnsupportedCipherError


class CipherProvider(ABC):
    """Abstract crypto provider used by EncryptedProxy."""

    @abstractmethod
    def supported_ciphers(self) -> frozenset[str]:
        """Canonical names of all ciphers usable with this provider."""

    @abstractmethod
    def iv_length(self, cipher: str) -> int:
        """IV length in bytes for a supported cipher."""

    @abstractmethod
    def key_length(self, cipher: str) -> int:
        """Key length in bytes for a supported cipher."""

    @abstractmethod
    def encrypt(
        self,
        plain_text: bytes,
        cipher: str,
        key: bytes | str,
        iv: bytes,
        raw: bool,
        padding: bool = True,
    ) -> bytes | str:
        """
        Encrypt plain_text.

        Returns:
            Raw cipher text bytes when raw is True, otherwise base64 text
        """

    @abstractmethod
    def decrypt(
        self,
        cipher_text: bytes | str,
        cipher: str,
        key: bytes | str,
        iv: bytes,
        raw: bool,
        padding: bool = True,
    ) -> bytes:
        """
        Decrypt cipher_text, which is base64 text unless raw is True.

        Returns:
            The plain text bytes
        """

    @abstractmethod
    def random_bytes(self, length: int) -> tuple[bytes, bool]:
        """
        Draw length random bytes.

        Returns:
            Tuple of (bytes, whether the source is cryptographically strong)
        """

    def resolve(self, cipher: str) -> str:
        """
        Map a cipher identifier onto its canonical supported name.

        Matching ignores case, as OpenSSL cipher names do.

        Raises:
            UnsupportedCipherError: If the provider does not support the cipher
        """
        if isinstance(cipher, str):
            wanted = cipher.strip().upper()
            if wanted in self.supported_ciphers():
                return wanted
        raise UnsupportedCipherError(str(cipher))


_default_provider: CipherProvider | None = None


def default_provider() -> CipherProvider:
    """
    Get the process-wide provider backed by the cryptography package.

    Raises:
        CryptoUnavailableError: If the cryptography package cannot be imported
    """
    global _default_provider
    if _default_provider is None:
        try:
            from .openssl import OpenSSLCipherProvider
        except ImportError as e:
            raise CryptoUnavailableError(
                "The 'cryptography' package is required for field encryption."
            ) from e
        _default_provider = OpenSSLCipherProvider()
    return _default_provider
