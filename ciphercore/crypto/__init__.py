"""
Cryptographic primitives for ciphercore.

This module provides:
- Secure random bytes (injectable provider)
- SHA-256 digests
- Ed25519 signatures with hex keys
- AES-256-GCM authenticated encryption
- PBKDF2 key derivation
"""

from .aead import decrypt, encrypt
from .hashing import sha256, sha256_hex
from .kdf import derive_key
from .rng import RandomSource, generate_random_bytes
from .signing import KeyPair, generate_keypair, public_key_from_private, sign, verify

__all__ = [
    'RandomSource',
    'generate_random_bytes',
    'sha256',
    'sha256_hex',
    'KeyPair',
    'generate_keypair',
    'public_key_from_private',
    'sign',
    'verify',
    'encrypt',
    'decrypt',
    'derive_key',
]
