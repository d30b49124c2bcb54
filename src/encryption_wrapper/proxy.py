"""
Encrypted proxy implementation.

This module provides EncryptedProxy, which wraps an entity so that a chosen
set of fields is encrypted before being stored on it and decrypted when read
back, while every other field and method call passes straight through.
"""

import sys
from collections.abc import Mapping

from .encryption.base import CipherProvider, default_provider
from .encryption.stored_value import EncodingMode, StoredValue, pack, split
from .entities.adapters import FieldStore, as_field_store
from .errors import DecryptionError, WeakRandomnessError
from .models.proxy_options import ProxyOptions


class EncryptedProxy:
    """
    Field-level encryption wrapper around an entity.

    Each encrypted write draws a fresh IV, encrypts the value and stores
    the IV and cipher text together as one value on the wrapped entity.
    Reads split that value again and decrypt it. Whether a field is
    encrypted is fixed at construction and applies to reads and writes
    alike.

    Example:
        proxy = EncryptedProxy(record, key, "AES-128-CBC", {"encrypted": ["secret"]})
        proxy.set("secret", "hello")   # record.secret holds IV + cipher text
        proxy.get("secret")            # "hello"
    """

    def __init__(
        self,
        inner: object,
        key: bytes | str,
        cipher: str,
        config: ProxyOptions | Mapping[str, object] | None = None,
        provider: CipherProvider | None = None,
    ) -> None:
        """
        Initialize the proxy.

        Args:
            inner: The entity to wrap; it stays owned by the caller
            key: Symmetric key material, used as given
            cipher: Cipher name, e.g. "AES-128-CBC"
            config: ProxyOptions, or a mapping of option names to values
            provider: Crypto provider, defaults to the cryptography-backed one

        Raises:
            CryptoUnavailableError: If no crypto provider is available
            UnsupportedCipherError: If the provider does not support the cipher
            ValueError: If the key is empty or an option is invalid
        """
        if provider is None:
            provider = default_provider()
        if not isinstance(key, (bytes, str)) or not key:
            raise ValueError("Encryption key must be a non-empty str or bytes")

        self._provider = provider
        self._cipher = provider.resolve(cipher)
        self._options = ProxyOptions.from_config(config)
        self._key = key
        self._inner: FieldStore = as_field_store(inner)

    @property
    def cipher(self) -> str:
        return self._cipher

    @property
    def options(self) -> ProxyOptions:
        return self._options

    @property
    def encrypted_fields(self) -> frozenset[str]:
        return self._options.encrypted

    @property
    def encoding(self) -> EncodingMode:
        return self._options.encoding

    @property
    def inner(self) -> object:
        """The wrapped entity."""
        return self._inner.target

    def use_raw(self) -> bool:
        """Whether cipher text and IV are stored as raw bytes rather than base64 text."""
        return self._options.encoding.is_raw

    def is_encrypted(self, field: str) -> bool:
        """Check if a field is encrypted before storage."""
        return field in self._options.encrypted

    def set(self, field: str, plain_text: object) -> None:
        """
        Store a value on the wrapped entity, encrypting it if required.

        Args:
            field: Name of the field being set
            plain_text: The value; str or bytes for encrypted fields

        Raises:
            WeakRandomnessError: If the IV source was weak and that is not allowed
            EncryptionError: If the cipher rejects the value
            TypeError: If an encrypted value is not str or bytes
        """
        if not self.is_encrypted(field):
            self._inner.set_field(field, plain_text)
            return

        self._inner.set_field(field, self._encrypt(plain_text))

    def _encrypt(self, plain_text: object) -> StoredValue:
        if not isinstance(plain_text, (str, bytes, bytearray)):
            raise TypeError(
                f"Encrypted fields hold str or bytes, got {type(plain_text).__name__}"
            )

        iv_length = self._provider.iv_length(self._cipher)
        iv, strong = self._provider.random_bytes(iv_length)
        if not strong:
            if not self._options.allow_weak_iv:
                raise WeakRandomnessError(
                    "A cryptographically weak algorithm was used in the generation "
                    "of the initialisation vector."
                )
            print(
                f"WARNING: Using a weak initialisation vector for {self._cipher}",
                file=sys.stderr,
            )

        cipher_text = self._provider.encrypt(
            plain_text,
            self._cipher,
            self._key,
            iv,
            self.use_raw(),
            self._options.padding,
        )
        return pack(iv, cipher_text, self._options.encoding)

    def get(self, field: str) -> object:
        """
        Read a value from the wrapped entity, decrypting it if required.

        An encrypted field must have been written through a proxy before it
        is read. Anything else stored there, including None, is not a stored
        value and is rejected.

        Args:
            field: Name of the field being read

        Returns:
            The plain text value

        Raises:
            MalformedStoredValueError: If the stored value cannot be split
            DecryptionError: If the stored value cannot be decrypted
        """
        stored = self._inner.get_field(field)
        if not self.is_encrypted(field):
            return stored
        return self._decrypt(stored)

    def _decrypt(self, stored: object) -> bytes | str:
        iv_length = self._provider.iv_length(self._cipher)
        iv, cipher_text = split(stored, iv_length, self._options.encoding)

        plain_text = self._provider.decrypt(
            cipher_text,
            self._cipher,
            self._key,
            iv,
            self.use_raw(),
            self._options.padding,
        )
        if not self._options.decode_text:
            return plain_text
        try:
            return plain_text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecryptionError("Decrypted value is not valid UTF-8 text") from e

    def call(self, name: str, *args: object, **kwargs: object) -> object:
        """Call a method of the wrapped entity and return its result unchanged."""
        return self._inner.invoke(name, *args, **kwargs)

    def has(self, field: str) -> bool:
        """Check whether the wrapped entity has the field set."""
        return self._inner.has_field(field)

    def remove(self, field: str) -> None:
        """Remove a field from the wrapped entity."""
        self._inner.remove_field(field)

    def __getitem__(self, field: str) -> object:
        return self.get(field)

    def __setitem__(self, field: str, value: object) -> None:
        self.set(field, value)

    def __delitem__(self, field: str) -> None:
        self.remove(field)

    def __contains__(self, field: object) -> bool:
        return isinstance(field, str) and self.has(field)

    def __repr__(self) -> str:
        # never include the key
        return (
            f"{type(self).__name__}(cipher={self._cipher!r}, "
            f"encoding={self._options.encoding.value!r}, "
            f"encrypted={sorted(self._options.encrypted)!r})"
        )
