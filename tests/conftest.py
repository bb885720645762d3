"""
Shared fixtures for ciphercore tests.
"""

import hashlib

import pytest

from ciphercore.crypto.rng import RandomSource


class CountingProvider:
    """Deterministic provider: SHA-256 of a seed and a running counter."""

    def __init__(self, seed: bytes = b"ciphercore-test"):
        self.seed = seed
        self.counter = 0
        self.calls = []

    def __call__(self, length: int) -> bytes:
        self.calls.append(length)
        output = b""
        while len(output) < length:
            output += hashlib.sha256(self.seed + self.counter.to_bytes(8, 'big')).digest()
            self.counter += 1
        return output[:length]


@pytest.fixture
def counting_provider():
    """A fresh deterministic random provider."""
    return CountingProvider()


@pytest.fixture
def deterministic_source(counting_provider):
    """RandomSource backed by the deterministic provider."""
    return RandomSource(counting_provider)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove CIPHERCORE_* variables so defaults apply."""
    for name in ("LOG_LEVEL", "BUNDLE_MAX_AGE", "BUNDLE_VERSION", "PBKDF2_ITERATIONS"):
        monkeypatch.delenv(f"CIPHERCORE_{name}", raising=False)
    return monkeypatch
