"""
SHA-256 digests.
"""

import hashlib

from .utils import BytesLike

DIGEST_SIZE = 32


def sha256(data: BytesLike) -> bytes:
    """
    Compute the SHA-256 digest of data.

    Args:
        data: Bytes to hash (may be empty)

    Returns:
        32-byte digest
    """
    return hashlib.sha256(data).digest()


def sha256_hex(data: BytesLike) -> str:
    """Compute the SHA-256 digest of data as lowercase hex."""
    return hashlib.sha256(data).hexdigest()
