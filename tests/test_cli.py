"""
Tests for the ciphercore command-line interface.
"""

import json

import pytest

from ciphercore.cli import EXIT_ERROR, EXIT_MISMATCH, EXIT_OK, main, read_input
from ciphercore.compression import decompress
from ciphercore.crypto.aead import decrypt
from ciphercore.crypto.signing import generate_keypair, sign, verify
from ciphercore.errors import IOFailureError

KEY_HEX = "11" * 32
NONCE_HEX = "22" * 12


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "input.bin"
    path.write_bytes(b"command line payload " * 20)
    return path


class TestCommands:
    """Test each subcommand through main()."""

    def test_hash(self, sample_file, tmp_path):
        out = tmp_path / "digest.txt"
        assert main(['hash', '-i', str(sample_file), '-o', str(out)]) == EXIT_OK
        assert len(out.read_text().strip()) == 64

    def test_keygen(self, capsys):
        assert main(['keygen']) == EXIT_OK
        pair = json.loads(capsys.readouterr().out)
        assert len(pair['publicKey']) == 64
        assert len(pair['privateKey']) == 64

    def test_sign_and_verify(self, sample_file, tmp_path):
        pair = generate_keypair()
        sig_file = tmp_path / "sig.txt"
        assert main(['sign', '--key', pair.private_key, '-i', str(sample_file),
                     '-o', str(sig_file)]) == EXIT_OK
        signature = sig_file.read_text().strip()
        assert verify(pair.public_key, signature, sample_file.read_bytes())

        assert main(['verify', '--key', pair.public_key, '--signature', signature,
                     '-i', str(sample_file)]) == EXIT_OK

    def test_verify_mismatch_exit_code(self, sample_file):
        pair = generate_keypair()
        other = generate_keypair()
        signature = sign(other.private_key, sample_file.read_bytes())
        assert main(['verify', '--key', pair.public_key, '--signature', signature,
                     '-i', str(sample_file)]) == EXIT_MISMATCH

    def test_encrypt_decrypt(self, sample_file, tmp_path):
        encrypted = tmp_path / "data.enc"
        decrypted = tmp_path / "data.dec"
        assert main(['encrypt', '--key', KEY_HEX, '--nonce', NONCE_HEX,
                     '-i', str(sample_file), '-o', str(encrypted)]) == EXIT_OK
        assert decrypt(bytes.fromhex(KEY_HEX), bytes.fromhex(NONCE_HEX),
                       encrypted.read_bytes()) == sample_file.read_bytes()
        assert main(['decrypt', '--key', KEY_HEX, '--nonce', NONCE_HEX,
                     '-i', str(encrypted), '-o', str(decrypted)]) == EXIT_OK
        assert decrypted.read_bytes() == sample_file.read_bytes()

    def test_decrypt_tampered_fails(self, sample_file, tmp_path, capsys):
        encrypted = tmp_path / "data.enc"
        main(['encrypt', '--key', KEY_HEX, '--nonce', NONCE_HEX,
              '-i', str(sample_file), '-o', str(encrypted)])
        data = bytearray(encrypted.read_bytes())
        data[-1] ^= 0x01
        encrypted.write_bytes(bytes(data))
        assert main(['decrypt', '--key', KEY_HEX, '--nonce', NONCE_HEX,
                     '-i', str(encrypted), '-o', str(tmp_path / "out")]) == EXIT_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_encrypt_short_key_fails(self, sample_file, tmp_path):
        assert main(['encrypt', '--key', "11" * 31, '--nonce', NONCE_HEX,
                     '-i', str(sample_file), '-o', str(tmp_path / "out")]) == EXIT_ERROR

    def test_random_hex(self, tmp_path):
        out = tmp_path / "random.txt"
        assert main(['random', '16', '-o', str(out)]) == EXIT_OK
        assert len(bytes.fromhex(out.read_text().strip())) == 16

    def test_random_raw(self, tmp_path):
        out = tmp_path / "random.bin"
        assert main(['random', '24', '--raw', '-o', str(out)]) == EXIT_OK
        assert len(out.read_bytes()) == 24

    def test_random_negative_length(self, tmp_path):
        assert main(['random', '-1', '-o', str(tmp_path / "x")]) == EXIT_ERROR

    def test_compress_decompress(self, sample_file, tmp_path):
        blob = tmp_path / "data.zst"
        restored = tmp_path / "data.out"
        assert main(['compress', '-i', str(sample_file), '-o', str(blob)]) == EXIT_OK
        assert decompress(blob.read_bytes()) == sample_file.read_bytes()
        assert main(['decompress', '-i', str(blob), '-o', str(restored)]) == EXIT_OK
        assert restored.read_bytes() == sample_file.read_bytes()

    def test_decompress_garbage_fails(self, sample_file, tmp_path):
        assert main(['decompress', '-i', str(sample_file),
                     '-o', str(tmp_path / "out")]) == EXIT_ERROR

    def test_missing_input_file(self, tmp_path, capsys):
        assert main(['hash', '-i', str(tmp_path / "missing.bin")]) == EXIT_ERROR
        assert "Failed to read" in capsys.readouterr().err

    def test_no_command_prints_help(self, capsys):
        assert main([]) == EXIT_ERROR
        assert "usage" in capsys.readouterr().out.lower()


class TestIO:
    """Test file helpers."""

    def test_read_input_missing_file(self, tmp_path):
        with pytest.raises(IOFailureError):
            read_input(str(tmp_path / "nope"))
