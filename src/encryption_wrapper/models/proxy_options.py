"""
Proxy options.

This module provides the configuration struct for EncryptedProxy, with named
fields and explicit defaults validated when the proxy is built.
"""

import sys
from collections.abc import Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import WrapperConfig
from ..encryption.stored_value import EncodingMode


class ProxyOptions(BaseModel):
    """
    Options for an EncryptedProxy.

    Options left out take their value from WrapperConfig, so a YAML file or
    the environment can change the defaults for a whole process.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Names of the fields to encrypt
    encrypted: frozenset[str] = Field(default_factory=frozenset)

    # How the IV and cipher text are stored together
    encoding: EncodingMode = Field(
        default_factory=WrapperConfig.get_default_encoding, validate_default=True
    )

    # Accept IVs the random source does not report as strong
    allow_weak_iv: bool = Field(
        default_factory=WrapperConfig.allows_weak_iv, validate_default=True
    )

    # PKCS#7 padding for block modes; False behaves like OPENSSL_ZERO_PADDING
    padding: bool = Field(default_factory=WrapperConfig.padding_enabled)

    # Return decrypted values as UTF-8 text instead of bytes
    decode_text: bool = Field(default_factory=WrapperConfig.decodes_text)

    @field_validator("encrypted", mode="before")
    @classmethod
    def _coerce_encrypted(cls, value: object) -> frozenset[str]:
        """Accept any iterable of names, or a bare scalar as a single name."""
        if value is None:
            return frozenset()
        if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Iterable):
            value = [value]
        if isinstance(value, Mapping):
            value = value.values()
        return frozenset(
            bytes(name).decode("utf-8") if isinstance(name, (bytes, bytearray)) else str(name)
            for name in value
        )

    @field_validator("encoding", mode="before")
    @classmethod
    def _coerce_encoding(cls, value: object) -> EncodingMode:
        """Unrecognised modes fall back to TEXT_SAFE instead of failing."""
        mode = EncodingMode.coerce(value)
        if mode is None:
            print(
                f"WARNING: Unrecognised encoding mode {value!r}, using '{EncodingMode.TEXT_SAFE.value}'",
                file=sys.stderr,
            )
            return EncodingMode.TEXT_SAFE
        return mode

    @field_validator("allow_weak_iv", mode="before")
    @classmethod
    def _strict_weak_iv(cls, value: object) -> bool:
        # only a literal True relaxes the policy
        return value is True

    @classmethod
    def from_config(cls, config: "ProxyOptions | Mapping[str, object] | None") -> "ProxyOptions":
        """
        Build options from an options instance, a mapping or None.

        Args:
            config: Existing options, a mapping of option names, or None

        Returns:
            A ProxyOptions instance
        """
        if isinstance(config, ProxyOptions):
            return config
        if config is None:
            return cls()
        return cls(**dict(config))
