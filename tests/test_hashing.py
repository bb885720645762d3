"""
Tests for SHA-256 digests.
"""

import hashlib

from ciphercore.crypto.hashing import DIGEST_SIZE, sha256, sha256_hex


class TestSha256:
    """Test SHA-256 digest function."""

    def test_empty_input_digest(self):
        """Empty input gives the well-known empty-string digest."""
        assert sha256(b"").hex() == (
            "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        )

    def test_known_vector(self):
        """'abc' matches the FIPS 180-2 test vector."""
        assert sha256(b"abc").hex() == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_length_and_determinism(self):
        """Digests are always 32 bytes and repeatable."""
        for message in (b"", b"x", b"hello world", bytes(range(256)) * 100):
            digest = sha256(message)
            assert len(digest) == DIGEST_SIZE
            assert digest == sha256(message)

    def test_accepts_bytes_like(self):
        """bytearray and memoryview hash the same as bytes."""
        data = b"bytes-like input"
        assert sha256(bytearray(data)) == sha256(data)
        assert sha256(memoryview(data)) == sha256(data)

    def test_hex_variant(self):
        """sha256_hex is the lowercase hex of sha256."""
        data = b"bundle contents"
        assert sha256_hex(data) == hashlib.sha256(data).hexdigest()
        assert sha256_hex(data) == sha256(data).hex()
