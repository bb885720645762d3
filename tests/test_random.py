"""
Tests for secure random byte generation.
"""

import pytest

from ciphercore.crypto.rng import RandomSource, generate_random_bytes
from ciphercore.errors import RandomGenerationError


class TestGenerateRandomBytes:
    """Test the OS-backed default source."""

    def test_zero_length_is_empty(self):
        """Zero length returns empty bytes without error."""
        assert generate_random_bytes(0) == b""

    def test_exact_length(self):
        """Requested length is honoured."""
        for length in (1, 12, 32, 1000):
            data = generate_random_bytes(length)
            assert isinstance(data, bytes)
            assert len(data) == length

    def test_successive_calls_differ(self):
        """Two 32-byte draws differ with overwhelming probability."""
        assert generate_random_bytes(32) != generate_random_bytes(32)

    def test_negative_length_rejected(self):
        """Negative lengths are a caller error."""
        with pytest.raises(ValueError):
            generate_random_bytes(-1)

    def test_non_integer_length_rejected(self):
        """Lengths must be integers."""
        with pytest.raises(ValueError):
            generate_random_bytes(3.5)
        with pytest.raises(ValueError):
            generate_random_bytes(True)


class TestInjectedProvider:
    """Test substitution of the provider."""

    def test_deterministic_provider(self, counting_provider):
        """Same provider seed gives the same bytes."""
        first = RandomSource(counting_provider).generate(48)
        counting_provider.counter = 0
        second = RandomSource(counting_provider).generate(48)
        assert first == second
        assert len(first) == 48

    def test_source_passed_to_module_function(self, deterministic_source, counting_provider):
        """generate_random_bytes draws from the given source."""
        generate_random_bytes(16, source=deterministic_source)
        assert counting_provider.calls == [16]

    def test_zero_length_skips_provider(self, deterministic_source, counting_provider):
        """An empty request never touches the provider."""
        assert deterministic_source.generate(0) == b""
        assert counting_provider.calls == []

    def test_provider_failure_is_typed(self):
        """OS entropy faults surface as RandomGenerationError."""
        def failing(length):
            raise OSError("entropy source unavailable")

        with pytest.raises(RandomGenerationError) as exc_info:
            RandomSource(failing).generate(32)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_short_provider_output_rejected(self):
        """A provider returning too few bytes is never silently accepted."""
        with pytest.raises(RandomGenerationError):
            RandomSource(lambda n: b"\x00" * (n - 1)).generate(32)

    def test_source_is_callable(self, deterministic_source):
        """A RandomSource can itself be used where a provider is expected."""
        nested = RandomSource(deterministic_source)
        assert len(nested.generate(8)) == 8
