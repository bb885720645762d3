"""
Lossless compression using zstd frames.

Every blob produced by compress() is a self-describing zstd frame that
decompress() restores exactly, including the empty input. Anything that
is not a complete frame is rejected instead of being partially decoded.
"""

import logging

import zstd

from .crypto.utils import BytesLike
from .errors import CompressionError, DecompressionError

COMPRESSION_LEVEL = 3  # zstd compression level (1-22)

logger = logging.getLogger(__name__)


def compress(data: BytesLike) -> bytes:
    """
    Compress data into a zstd frame.

    Incompressible input still succeeds and may grow slightly.

    Args:
        data: Bytes to compress (may be empty)

    Returns:
        Compressed frame

    Raises:
        CompressionError: If the encoder fails
    """
    try:
        return zstd.compress(bytes(data), COMPRESSION_LEVEL)
    except zstd.Error as e:
        logger.debug("zstd compression of %d bytes failed: %s", len(data), e)
        raise CompressionError(f"Compression failed: {e}") from e


def decompress(blob: BytesLike) -> bytes:
    """
    Decompress a zstd frame.

    Args:
        blob: Compressed frame as produced by compress()

    Returns:
        The original bytes

    Raises:
        DecompressionError: If the frame is malformed, truncated or not zstd
    """
    blob = bytes(blob)
    if not blob:
        raise DecompressionError("Decompression failed: empty input is not a zstd frame")

    try:
        return zstd.decompress(blob)
    except zstd.Error as e:
        logger.debug("zstd decompression of %d bytes failed: %s", len(blob), e)
        raise DecompressionError(f"Decompression failed: {e}") from e


def compression_ratio(original_size: int, compressed_size: int) -> float:
    """
    Ratio of original size to compressed size.

    Args:
        original_size: Size of the uncompressed data in bytes
        compressed_size: Size of the compressed frame in bytes

    Returns:
        original_size / compressed_size, or 0.0 when original_size is 0

    Raises:
        ValueError: If a size is negative, or compressed_size is 0 for
            non-empty original data
    """
    if original_size < 0 or compressed_size < 0:
        raise ValueError("Sizes must be non-negative")
    if original_size == 0:
        return 0.0
    if compressed_size == 0:
        raise ValueError("Compressed size must be positive for non-empty data")
    return float(original_size) / float(compressed_size)
