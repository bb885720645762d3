"""
ciphercore: stateless cryptography and compression primitives.

Every operation takes complete in-memory buffers, performs one transform
and returns a result or raises a typed CipherCoreError. Nothing is cached
or kept between calls.

Basic Usage:
    >>> import ciphercore
    >>> pair = ciphercore.generate_keypair()
    >>> sig = ciphercore.sign(pair.private_key, b"hello")
    >>> ciphercore.verify(pair.public_key, sig, b"hello")
    True
    >>> key = ciphercore.generate_random_bytes(32)
    >>> nonce = ciphercore.generate_random_bytes(12)
    >>> ct = ciphercore.encrypt(key, nonce, b"secret")
    >>> ciphercore.decrypt(key, nonce, ct)
    b'secret'
    >>> ciphercore.decompress(ciphercore.compress(b"data"))
    b'data'
"""

__version__ = "0.1.0"

from .compression import compress, compression_ratio, decompress
from .crypto.aead import decrypt, encrypt
from .crypto.hashing import sha256
from .crypto.kdf import derive_key
from .crypto.rng import RandomSource, generate_random_bytes
from .crypto.signing import KeyPair, generate_keypair, sign, verify
from .bundle import BundleSignature, BundleSigner, verify_bundle_signature
from .errors import (
    CipherCoreError,
    CompressionError,
    ConfigError,
    DecompressionError,
    DecryptionError,
    EncryptionError,
    InvalidKeyError,
    InvalidSignatureError,
    IOFailureError,
    RandomGenerationError,
)

__all__ = [
    '__version__',

    # Primitives
    'sha256',
    'generate_keypair',
    'sign',
    'verify',
    'encrypt',
    'decrypt',
    'generate_random_bytes',
    'compress',
    'decompress',
    'compression_ratio',
    'derive_key',

    # Types
    'KeyPair',
    'RandomSource',
    'BundleSignature',
    'BundleSigner',
    'verify_bundle_signature',

    # Errors
    'CipherCoreError',
    'InvalidKeyError',
    'InvalidSignatureError',
    'EncryptionError',
    'DecryptionError',
    'CompressionError',
    'DecompressionError',
    'RandomGenerationError',
    'IOFailureError',
    'ConfigError',
]
