"""
Password-based key derivation.

Derives 256-bit symmetric keys from a password and salt with
PBKDF2-HMAC-SHA256. The output is suitable as an AES-256-GCM key.
"""

from typing import Optional, Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ..config import get_config

KEY_LENGTH = 32  # 256-bit keys

TextOrBytes = Union[str, bytes, bytearray]


def _as_bytes(value: TextOrBytes, label: str) -> bytes:
    if isinstance(value, str):
        return value.encode('utf-8')
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise TypeError(f"{label} must be str or bytes, got {type(value).__name__}")


def derive_key(password: TextOrBytes, salt: TextOrBytes,
               iterations: Optional[int] = None, length: int = KEY_LENGTH) -> bytes:
    """
    Derive a key from a password using PBKDF2-HMAC-SHA256.

    Args:
        password: Password as text (UTF-8 encoded) or bytes
        salt: Salt as text (UTF-8 encoded) or bytes, must not be empty
        iterations: PBKDF2 iteration count (defaults to configured value)
        length: Output length in bytes

    Returns:
        Derived key of `length` bytes

    Raises:
        ValueError: If salt is empty, or iterations or length is not positive
    """
    password_bytes = _as_bytes(password, "Password")
    salt_bytes = _as_bytes(salt, "Salt")

    if not salt_bytes:
        raise ValueError("Salt must not be empty")
    if iterations is None:
        iterations = get_config().pbkdf2_iterations
    if iterations < 1:
        raise ValueError("Iterations must be positive")
    if length < 1:
        raise ValueError("Key length must be positive")

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=length,
        salt=salt_bytes,
        iterations=iterations,
    )
    return kdf.derive(password_bytes)
