"""
Stored value encoding.

An encrypted field is persisted as a single value holding the initialisation
vector followed directly by the cipher text, with no length prefix and no
delimiter. The boundary is recovered from the encoding mode and the cipher's
fixed IV length.
"""

import base64
import binascii
from enum import Enum

from ..errors import MalformedStoredValueError


StoredValue = bytes | str


class EncodingMode(str, Enum):
    """How the IV and cipher text are concatenated into one stored value."""

    # bytes: iv || cipher text
    RAW = "raw"

    # str: base64(iv) || base64(cipher text)
    TEXT_SAFE = "text_safe"

    @property
    def is_raw(self) -> bool:
        """Whether the cipher itself should produce raw bytes rather than base64 text."""
        return self is EncodingMode.RAW

    @classmethod
    def coerce(cls, value: object) -> "EncodingMode | None":
        """
        Match a mode by member, value or name, ignoring case.

        Returns:
            The matching mode, or None when nothing matches
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().lower().replace("-", "_")
            for mode in cls:
                if wanted in (mode.value, mode.name.lower()):
                    return mode
        return None


def encoded_iv_length(iv_length: int) -> int:
    """Number of base64 characters produced for an IV of iv_length bytes."""
    return 4 * ((iv_length + 2) // 3)


def expected_iv_padding(iv_length: int) -> str:
    """
    Padding suffix of base64(iv) for an IV of iv_length bytes.

    Base64 works on 3-byte groups, so the padding depends on the length
    modulo 3: a full final group needs none, one spare byte needs "==" and
    two spare bytes need "=".
    """
    return ("", "==", "=")[iv_length % 3]


def pack(iv: bytes, cipher_text: bytes | str, mode: EncodingMode) -> StoredValue:
    """
    Concatenate an IV and cipher text into a stored value.

    Args:
        iv: Raw IV bytes
        cipher_text: Cipher output, raw bytes in RAW mode, base64 text otherwise
        mode: The encoding mode

    Returns:
        bytes in RAW mode, str in TEXT_SAFE mode
    """
    if mode is EncodingMode.RAW:
        return bytes(iv) + bytes(cipher_text)

    if isinstance(cipher_text, (bytes, bytearray)):
        cipher_text = bytes(cipher_text).decode("ascii")
    return base64.b64encode(iv).decode("ascii") + cipher_text


def split(stored: object, iv_length: int, mode: EncodingMode) -> tuple[bytes, bytes | str]:
    """
    Split a stored value into its IV and cipher text.

    Args:
        stored: A value produced by pack() for the same cipher and mode
        iv_length: The cipher's IV length in bytes
        mode: The encoding mode

    Returns:
        Tuple of (raw IV bytes, cipher text)

    Raises:
        MalformedStoredValueError: If the value cannot hold an IV of the
            expected size in the expected encoding
    """
    if mode is EncodingMode.RAW:
        return _split_raw(stored, iv_length)
    return _split_text_safe(stored, iv_length)


def _split_raw(stored: object, iv_length: int) -> tuple[bytes, bytes]:
    if not isinstance(stored, (bytes, bytearray, memoryview)):
        raise MalformedStoredValueError(
            f"Raw stored value must be bytes, got {type(stored).__name__}"
        )
    stored = bytes(stored)
    if len(stored) < iv_length:
        raise MalformedStoredValueError(
            f"Stored value of {len(stored)} bytes is shorter than the {iv_length}-byte IV"
        )
    return stored[:iv_length], stored[iv_length:]


def _split_text_safe(stored: object, iv_length: int) -> tuple[bytes, str]:
    if isinstance(stored, (bytes, bytearray)):
        try:
            stored = bytes(stored).decode("ascii")
        except UnicodeDecodeError as e:
            raise MalformedStoredValueError("Text-safe stored value is not ASCII") from e
    if not isinstance(stored, str):
        raise MalformedStoredValueError(
            f"Text-safe stored value must be a string, got {type(stored).__name__}"
        )

    boundary = encoded_iv_length(iv_length)
    padding = expected_iv_padding(iv_length)

    if padding:
        found = stored.find(padding)
        if found == -1:
            raise MalformedStoredValueError(
                f"No '{padding}' IV padding found in text-safe stored value"
            )
        if found + len(padding) != boundary:
            raise MalformedStoredValueError(
                f"IV padding found at offset {found}, expected {boundary - len(padding)}"
            )
    elif len(stored) < boundary:
        raise MalformedStoredValueError(
            f"Stored value of {len(stored)} characters is shorter than the encoded IV"
        )

    try:
        iv = base64.b64decode(stored[:boundary], validate=True)
    except binascii.Error as e:
        raise MalformedStoredValueError(f"Invalid base64 IV: {e}") from e

    if len(iv) != iv_length:
        raise MalformedStoredValueError(
            f"Decoded IV is {len(iv)} bytes, expected {iv_length}"
        )
    return iv, stored[boundary:]
