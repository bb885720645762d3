"""
Cryptographically secure random byte generation.

The OS generator is reached through a provider callable so that callers
(and tests) can substitute a deterministic source. Failures are never
masked: there is no fallback to a weaker generator and no retry.
"""

import logging
import secrets
from typing import Callable, Optional

from ..errors import RandomGenerationError

RandomProvider = Callable[[int], bytes]

logger = logging.getLogger(__name__)


class RandomSource:
    """
    Random byte generator backed by a provider callable.

    The default provider is the operating system CSPRNG via
    `secrets.token_bytes`. The source itself holds no state beyond the
    provider reference.
    """

    def __init__(self, provider: Optional[RandomProvider] = None):
        """
        Initialize random source.

        Args:
            provider: Callable returning exactly n random bytes for input n.
                Defaults to the OS CSPRNG.
        """
        self._provider = provider if provider is not None else secrets.token_bytes

    def generate(self, length: int) -> bytes:
        """
        Generate exactly `length` random bytes.

        Args:
            length: Number of bytes to generate (0 is allowed)

        Returns:
            Random bytes of the requested length

        Raises:
            ValueError: If length is not a non-negative integer
            RandomGenerationError: If the provider fails or returns the wrong size
        """
        if isinstance(length, bool) or not isinstance(length, int):
            raise ValueError(f"Length must be an integer, got {type(length).__name__}")
        if length < 0:
            raise ValueError("Length must be non-negative")
        if length == 0:
            return b""

        try:
            data = self._provider(length)
        except Exception as e:
            logger.debug("Random provider failed for %d bytes: %s", length, e)
            raise RandomGenerationError(f"Random generation failed: {e}") from e

        if not isinstance(data, (bytes, bytearray)) or len(data) != length:
            got = len(data) if isinstance(data, (bytes, bytearray)) else type(data).__name__
            raise RandomGenerationError(
                f"Random provider returned {got} instead of {length} bytes"
            )

        return bytes(data)

    __call__ = generate


def generate_random_bytes(length: int, source: Optional[RandomSource] = None) -> bytes:
    """
    Generate cryptographically secure random bytes.

    Args:
        length: Number of random bytes to generate
        source: Random source to draw from (defaults to the OS CSPRNG)

    Returns:
        Cryptographically secure random bytes
    """
    if source is None:
        source = RandomSource()
    return source.generate(length)
