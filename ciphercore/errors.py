"""
Exception hierarchy for ciphercore.

Errors are grouped by cause:
- ValidationError: malformed caller input, detected before any
  cryptographic work runs (bad hex, wrong length, non-canonical encodings)
- OperationError: the underlying transform itself failed (tag mismatch,
  corrupted frame, entropy-source fault, file access)

A signature mismatch is not an error: verify() returns False for it.
"""


class CipherCoreError(Exception):
    """Base class for every error raised by ciphercore."""
    pass


class ValidationError(CipherCoreError):
    """Raised when caller input is malformed."""
    pass


class InvalidKeyError(ValidationError):
    """Raised when a key or nonce has a bad encoding or the wrong length."""
    pass


class InvalidSignatureError(ValidationError):
    """Raised when a signature has a bad encoding or the wrong length."""
    pass


class OperationError(CipherCoreError):
    """Raised when a primitive fails while processing valid input."""
    pass


class EncryptionError(OperationError):
    """Raised when the AEAD backend fails to encrypt."""
    pass


class DecryptionError(OperationError):
    """Raised when authenticated decryption fails."""
    pass


class CompressionError(OperationError):
    """Raised when the zstd encoder fails."""
    pass


class DecompressionError(OperationError):
    """Raised when input is not a complete, valid zstd frame."""
    pass


class RandomGenerationError(OperationError):
    """Raised when the secure random source cannot deliver bytes."""
    pass


class IOFailureError(OperationError):
    """Raised when reading or writing a byte stream fails."""
    pass


class ConfigError(CipherCoreError):
    """Raised when configuration values are missing or invalid."""
    pass


__all__ = [
    'CipherCoreError',
    'ValidationError',
    'InvalidKeyError',
    'InvalidSignatureError',
    'OperationError',
    'EncryptionError',
    'DecryptionError',
    'CompressionError',
    'DecompressionError',
    'RandomGenerationError',
    'IOFailureError',
    'ConfigError',
]
