"""
OpenSSL-style crypto provider.

This module implements the provider contract on top of the cryptography
package, naming ciphers the way OpenSSL does and mirroring the behaviour of
PHP's openssl_encrypt()/openssl_decrypt(): keys are truncated or NUL-padded
to the cipher's key size, block modes use PKCS#7 padding unless disabled and
cipher text is base64 text unless raw output is requested.
"""

import base64
import binascii
import os
from dataclasses import dataclass

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.decrepit.ciphers.algorithms import CAST5, Blowfish, Camellia, TripleDES
from cryptography.hazmat.primitives import padding as sym_padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..errors import DecryptionError, EncryptionError
from .base import CipherProvider


@dataclass(frozen=True)
class CipherEntry:
    """Static description of one named cipher."""

    name: str

    # Algorithm class from cryptography
    algorithm: type

    # Mode class, or None for stream ciphers that take the IV themselves
    mode: type | None

    key_length: int
    iv_length: int

    @property
    def padded(self) -> bool:
        """Whether PKCS#7 padding applies (block modes only)."""
        return self.mode in (modes.CBC, modes.ECB)

    @property
    def block_size(self) -> int:
        return self.algorithm.block_size


def _build_registry() -> dict[str, CipherEntry]:
    entries = []
    for bits in (128, 192, 256):
        size = bits // 8
        entries += [
            CipherEntry(f"AES-{bits}-CBC", algorithms.AES, modes.CBC, size, 16),
            CipherEntry(f"AES-{bits}-ECB", algorithms.AES, modes.ECB, size, 0),
            CipherEntry(f"AES-{bits}-CTR", algorithms.AES, modes.CTR, size, 16),
            CipherEntry(f"CAMELLIA-{bits}-CBC", Camellia, modes.CBC, size, 16),
        ]
    entries += [
        CipherEntry("SM4-CBC", algorithms.SM4, modes.CBC, 16, 16),
        CipherEntry("CHACHA20", algorithms.ChaCha20, None, 32, 16),
        CipherEntry("DES-EDE3-CBC", TripleDES, modes.CBC, 24, 8),
        CipherEntry("BF-CBC", Blowfish, modes.CBC, 16, 8),
        CipherEntry("CAST5-CBC", CAST5, modes.CBC, 16, 8),
    ]
    return {entry.name: entry for entry in entries}


CIPHER_REGISTRY: dict[str, CipherEntry] = _build_registry()


def fit_key(key: bytes | str, length: int) -> bytes:
    """
    Fit key material to a cipher's key size.

    Longer keys are truncated and shorter keys are padded with NUL bytes,
    as openssl_encrypt() does.
    """
    if isinstance(key, str):
        key = key.encode("utf-8")
    key = bytes(key)
    return key[:length].ljust(length, b"\0")


def _to_bytes(plain_text: object) -> bytes:
    if isinstance(plain_text, str):
        return plain_text.encode("utf-8")
    if isinstance(plain_text, (bytes, bytearray, memoryview)):
        return bytes(plain_text)
    raise TypeError(
        f"Plain text must be str or bytes, got {type(plain_text).__name__}"
    )


class OpenSSLCipherProvider(CipherProvider):
    """
    Crypto provider backed by the cryptography package.

    Every registry entry is checked against the linked OpenSSL the first time
    the supported set is requested; entries the library refuses (such as
    Blowfish without the legacy provider) are left out.
    """

    def __init__(self, registry: dict[str, CipherEntry] | None = None) -> None:
        self._registry = CIPHER_REGISTRY if registry is None else registry
        self._supported: frozenset[str] | None = None
        self._backend = default_backend()

    def supported_ciphers(self) -> frozenset[str]:
        if self._supported is None:
            self._supported = frozenset(
                name for name, entry in self._registry.items() if self._is_usable(entry)
            )
        return self._supported

    def _is_usable(self, entry: CipherEntry) -> bool:
        try:
            self._cipher(entry, bytes(entry.key_length), bytes(entry.iv_length)).encryptor()
        except UnsupportedAlgorithm:
            return False
        return True

    def _entry(self, cipher: str) -> CipherEntry:
        return self._registry[self.resolve(cipher)]

    def _cipher(self, entry: CipherEntry, key: bytes, iv: bytes) -> Cipher:
        if entry.mode is None:
            return Cipher(entry.algorithm(key, iv), None, backend=self._backend)
        if entry.mode is modes.ECB:
            return Cipher(entry.algorithm(key), modes.ECB(), backend=self._backend)
        return Cipher(entry.algorithm(key), entry.mode(iv), backend=self._backend)

    def iv_length(self, cipher: str) -> int:
        return self._entry(cipher).iv_length

    def key_length(self, cipher: str) -> int:
        return self._entry(cipher).key_length

    def encrypt(
        self,
        plain_text: bytes,
        cipher: str,
        key: bytes | str,
        iv: bytes,
        raw: bool,
        padding: bool = True,
    ) -> bytes | str:
        entry = self._entry(cipher)
        data = _to_bytes(plain_text)

        try:
            if entry.padded and padding:
                padder = sym_padding.PKCS7(entry.block_size).padder()
                data = padder.update(data) + padder.finalize()
            encryptor = self._cipher(entry, fit_key(key, entry.key_length), iv).encryptor()
            cipher_text = encryptor.update(data) + encryptor.finalize()
        except ValueError as e:
            raise EncryptionError(f"{entry.name} encryption failed: {e}") from e

        if raw:
            return cipher_text
        return base64.b64encode(cipher_text).decode("ascii")

    def decrypt(
        self,
        cipher_text: bytes | str,
        cipher: str,
        key: bytes | str,
        iv: bytes,
        raw: bool,
        padding: bool = True,
    ) -> bytes:
        entry = self._entry(cipher)

        if not raw:
            try:
                cipher_text = base64.b64decode(cipher_text, validate=True)
            except (binascii.Error, ValueError) as e:
                raise DecryptionError(f"Cipher text is not valid base64: {e}") from e

        try:
            decryptor = self._cipher(entry, fit_key(key, entry.key_length), iv).decryptor()
            data = decryptor.update(bytes(cipher_text)) + decryptor.finalize()
            if entry.padded and padding:
                unpadder = sym_padding.PKCS7(entry.block_size).unpadder()
                data = unpadder.update(data) + unpadder.finalize()
        except ValueError as e:
            raise DecryptionError(f"{entry.name} decryption failed: {e}") from e

        return data

    def random_bytes(self, length: int) -> tuple[bytes, bool]:
        # os.urandom is the OS CSPRNG, so every draw is strong
        return os.urandom(length), True
