"""
Shared helpers for fixed-size byte validation and hex handling.

Keys, nonces and signatures all go through the same two checks: decode
(for hex input) and exact length. Both raise the error type the caller
names, so each primitive reports failures in its own vocabulary.
"""

import binascii
import secrets
from typing import Type, Union

from ..errors import ValidationError

BytesLike = Union[bytes, bytearray, memoryview]


def require_length(data: BytesLike, expected: int, error: Type[ValidationError],
                   label: str) -> bytes:
    """
    Check that a raw byte value has exactly the expected length.

    Args:
        data: Bytes-like value to check
        expected: Required length in bytes
        error: Exception type raised on mismatch
        label: Human-readable name used in the error message

    Returns:
        The value as immutable bytes

    Raises:
        error: If data is not bytes-like or has the wrong length
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise error(f"{label} must be bytes, got {type(data).__name__}")

    value = bytes(data)
    if len(value) != expected:
        raise error(f"{label} must be {expected} bytes, got {len(value)}")
    return value


def decode_fixed_hex(value: str, expected: int, error: Type[ValidationError],
                     label: str) -> bytes:
    """
    Decode a hex string and check the decoded length.

    Accepts upper or lower case digits. Prefixes, separators and
    whitespace are rejected.

    Args:
        value: Hex string (2 characters per byte)
        expected: Required decoded length in bytes
        error: Exception type raised on failure
        label: Human-readable name used in the error message

    Returns:
        Decoded bytes of exactly `expected` length

    Raises:
        error: If the string is not valid hex or decodes to the wrong length
    """
    if not isinstance(value, str):
        raise error(f"{label} must be a hex string, got {type(value).__name__}")

    try:
        decoded = binascii.unhexlify(value)
    except (binascii.Error, ValueError) as e:
        raise error(f"Invalid hex in {label}: {e}") from e

    return require_length(decoded, expected, error, label)


def encode_hex(data: BytesLike) -> str:
    """Encode bytes as lowercase hex without prefix or separators."""
    return bytes(data).hex()


def constant_time_compare(a: BytesLike, b: BytesLike) -> bool:
    """
    Compare two byte sequences in constant time.

    Args:
        a: First byte sequence
        b: Second byte sequence

    Returns:
        True if sequences are equal, False otherwise
    """
    return secrets.compare_digest(bytes(a), bytes(b))
