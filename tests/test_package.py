"""
Tests for the top-level API and error taxonomy.
"""

from pathlib import Path

import pytest

import ciphercore
from ciphercore import errors


class TestPublicApi:
    """Test the functions exported at package level."""

    def test_full_pipeline(self):
        """Sign, compress and encrypt a payload, then reverse it."""
        pair = ciphercore.generate_keypair()
        payload = b"release artifact " * 100
        signature = ciphercore.sign(pair.private_key, payload)

        key = ciphercore.generate_random_bytes(32)
        nonce = ciphercore.generate_random_bytes(12)
        sealed = ciphercore.encrypt(key, nonce, ciphercore.compress(payload))

        restored = ciphercore.decompress(ciphercore.decrypt(key, nonce, sealed))
        assert restored == payload
        assert ciphercore.verify(pair.public_key, signature, restored)
        assert len(ciphercore.sha256(restored)) == 32

    def test_exports_exist(self):
        for name in ciphercore.__all__:
            assert hasattr(ciphercore, name), name


class TestPackaging:
    """Test that source distributions carry the files setup.py reads."""

    @pytest.mark.parametrize("name", ["README.md", "requirements.txt"])
    def test_manifest_includes_setup_inputs(self, name):
        root = Path(__file__).resolve().parent.parent
        manifest = (root / "MANIFEST.in").read_text(encoding="utf-8").splitlines()
        assert f"include {name}" in manifest
        assert (root / name).is_file()


class TestErrorTaxonomy:
    """Test the exception hierarchy."""

    @pytest.mark.parametrize("error", [errors.InvalidKeyError, errors.InvalidSignatureError])
    def test_validation_errors(self, error):
        assert issubclass(error, errors.ValidationError)
        assert issubclass(error, errors.CipherCoreError)

    @pytest.mark.parametrize("error", [
        errors.EncryptionError,
        errors.DecryptionError,
        errors.CompressionError,
        errors.DecompressionError,
        errors.RandomGenerationError,
        errors.IOFailureError,
    ])
    def test_operation_errors(self, error):
        assert issubclass(error, errors.OperationError)
        assert not issubclass(error, errors.ValidationError)

    def test_config_error(self):
        assert issubclass(errors.ConfigError, errors.CipherCoreError)

    def test_typed_error_catchable_as_base(self):
        with pytest.raises(ciphercore.CipherCoreError):
            ciphercore.decrypt(bytes(32), bytes(12), bytes(16))
