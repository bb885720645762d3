"""
Ed25519 key generation, signing and verification.

Keys and signatures cross the API as lowercase hex: 64 characters for a
32-byte key, 128 characters for a 64-byte signature. Malformed input is a
caller bug and raises; a signature that simply does not match returns False.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from ..errors import InvalidKeyError, InvalidSignatureError
from .rng import RandomSource
from .utils import BytesLike, decode_fixed_hex, encode_hex

KEY_SIZE = 32
SIGNATURE_SIZE = 64

# edwards25519 field prime, curve constant d and sqrt(-1) mod p
_P = 2 ** 255 - 19
_D = -121665 * pow(121666, _P - 2, _P) % _P
_SQRT_M1 = pow(2, (_P - 1) // 4, _P)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyPair:
    """Ed25519 key pair as lowercase hex strings."""
    public_key: str
    private_key: str

    def __repr__(self) -> str:
        return f"KeyPair(public_key={self.public_key!r}, private_key=<redacted>)"


def _load_private_key(private_key_hex: str) -> ed25519.Ed25519PrivateKey:
    seed = decode_fixed_hex(private_key_hex, KEY_SIZE, InvalidKeyError, "Private key")
    return ed25519.Ed25519PrivateKey.from_private_bytes(seed)


def _public_hex(private_key: ed25519.Ed25519PrivateKey) -> str:
    raw = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )
    return encode_hex(raw)


def _decodes_to_point(encoded: bytes) -> bool:
    """
    Check that a 32-byte encoding decompresses to an edwards25519 point.

    Follows the point decoding of RFC 8032 section 5.1.3: y must be
    canonical and (y^2 - 1) / (d*y^2 + 1) must have a square root whose
    parity matches the sign bit.
    """
    y = int.from_bytes(encoded, 'little')
    sign_bit = y >> 255
    y &= (1 << 255) - 1
    if y >= _P:
        return False

    u = (y * y - 1) % _P
    v = (_D * y * y + 1) % _P
    x = u * pow(v, 3, _P) * pow(u * pow(v, 7, _P), (_P - 5) // 8, _P) % _P

    vx2 = v * x * x % _P
    if vx2 == u:
        pass
    elif vx2 == (-u) % _P:
        x = x * _SQRT_M1 % _P
    else:
        return False

    return not (x == 0 and sign_bit)


def generate_keypair(source: Optional[RandomSource] = None) -> KeyPair:
    """
    Generate a new Ed25519 key pair.

    The private key is a 32-byte seed drawn from the random source; the
    public key is derived from it.

    Args:
        source: Random source for the seed (defaults to the OS CSPRNG)

    Returns:
        KeyPair with hex-encoded public and private keys

    Raises:
        RandomGenerationError: If the random source fails
    """
    if source is None:
        source = RandomSource()

    seed = source.generate(KEY_SIZE)
    private_key = ed25519.Ed25519PrivateKey.from_private_bytes(seed)

    return KeyPair(public_key=_public_hex(private_key), private_key=encode_hex(seed))


def public_key_from_private(private_key_hex: str) -> str:
    """
    Derive the hex public key belonging to a hex private key.

    Raises:
        InvalidKeyError: If the private key is malformed
    """
    return _public_hex(_load_private_key(private_key_hex))


def sign(private_key_hex: str, message: BytesLike) -> str:
    """
    Sign a message with an Ed25519 private key.

    Ed25519 signing is deterministic: the same key and message always give
    the same signature.

    Args:
        private_key_hex: 64-character hex private key (seed)
        message: Message bytes to sign

    Returns:
        128-character hex signature

    Raises:
        InvalidKeyError: If the key is not valid hex or not 32 bytes
    """
    private_key = _load_private_key(private_key_hex)
    return encode_hex(private_key.sign(bytes(message)))


def verify(public_key_hex: str, signature_hex: str, message: BytesLike) -> bool:
    """
    Verify an Ed25519 signature.

    Args:
        public_key_hex: 64-character hex public key
        signature_hex: 128-character hex signature
        message: Message bytes that were signed

    Returns:
        True if the signature is valid for this key and message, False otherwise

    Raises:
        InvalidKeyError: If the public key is not valid hex, not 32 bytes,
            or not the encoding of a curve point
        InvalidSignatureError: If the signature is not valid hex or not 64 bytes
    """
    public_bytes = decode_fixed_hex(public_key_hex, KEY_SIZE, InvalidKeyError, "Public key")
    if not _decodes_to_point(public_bytes):
        raise InvalidKeyError("Public key is not a valid Ed25519 point")
    signature = decode_fixed_hex(signature_hex, SIGNATURE_SIZE, InvalidSignatureError, "Signature")

    public_key = ed25519.Ed25519PublicKey.from_public_bytes(public_bytes)

    try:
        public_key.verify(signature, bytes(message))
    except InvalidSignature:
        logger.debug("Ed25519 signature mismatch for %d-byte message", len(message))
        return False

    return True
