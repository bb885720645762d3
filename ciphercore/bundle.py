"""
Signed bundle records.

A bundle is an opaque blob identified by its SHA-256 hex hash. Signing a
bundle produces a BundleSignature that carries the hash, the Ed25519
signature over it, the signer's public key, a timestamp and a format
version. Verification rejects records that are too old, that belong to a
different bundle, or whose signature does not check out.

The signer keeps the caller's key pair only for its own lifetime; nothing
is persisted.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .config import get_config
from .crypto.hashing import sha256_hex
from .crypto.rng import RandomSource
from .crypto.signing import KeyPair, public_key_from_private, sign, verify
from .crypto.utils import BytesLike, constant_time_compare, encode_hex

TOKEN_SIZE = 32

Clock = Callable[[], float]

logger = logging.getLogger(__name__)


@dataclass
class SignatureResult:
    """Signature over a message together with the signer's public key."""
    signature: str
    public_key: str


@dataclass
class BundleSignature:
    """
    Signature record for a bundle.

    Attributes:
        bundle_hash: SHA-256 hex hash of the bundle
        signature: Ed25519 signature (hex) over the UTF-8 bundle hash
        public_key: Signer's public key (hex)
        timestamp: Signing time in milliseconds since the epoch
        version: Record format version
    """
    bundle_hash: str
    signature: str
    public_key: str
    timestamp: int
    version: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with camelCase keys."""
        return {
            'bundleHash': self.bundle_hash,
            'signature': self.signature,
            'publicKey': self.public_key,
            'timestamp': self.timestamp,
            'version': self.version,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BundleSignature":
        """
        Build a record from its camelCase dictionary form.

        Raises:
            ValueError: If a field is missing
        """
        try:
            return cls(
                bundle_hash=data['bundleHash'],
                signature=data['signature'],
                public_key=data['publicKey'],
                timestamp=int(data['timestamp']),
                version=data['version'],
            )
        except KeyError as e:
            raise ValueError(f"Bundle signature is missing field {e}") from e


def _now_ms(clock: Optional[Clock]) -> int:
    return int((clock or time.time)() * 1000)


def generate_bundle_hash(bundle_data: BytesLike) -> str:
    """Hash bundle contents as SHA-256 hex."""
    return sha256_hex(bundle_data)


def generate_secure_token(source: Optional[RandomSource] = None) -> str:
    """Generate a 32-byte random token as hex."""
    if source is None:
        source = RandomSource()
    return encode_hex(source.generate(TOKEN_SIZE))


class BundleSigner:
    """
    Signs bundle hashes and messages with a caller-supplied key pair.
    """

    def __init__(self, key_pair: KeyPair, version: Optional[str] = None,
                 clock: Optional[Clock] = None):
        """
        Initialize bundle signer.

        Args:
            key_pair: Ed25519 key pair to sign with
            version: Version stamped on records (defaults to configured value)
            clock: Callable returning seconds since the epoch (defaults to time.time)

        Raises:
            InvalidKeyError: If the private key is malformed
            ValueError: If the public key does not belong to the private key
        """
        if public_key_from_private(key_pair.private_key) != key_pair.public_key.lower():
            raise ValueError("Public key does not match private key")

        self._key_pair = key_pair
        self.version = version or get_config().bundle_version
        self._clock = clock

    @property
    def public_key(self) -> str:
        """Hex public key of this signer."""
        return self._key_pair.public_key

    def sign_bundle(self, bundle_hash: str) -> BundleSignature:
        """
        Sign a bundle hash.

        Args:
            bundle_hash: SHA-256 hex hash of the bundle

        Returns:
            Timestamped signature record
        """
        signature = sign(self._key_pair.private_key, bundle_hash.encode('utf-8'))
        record = BundleSignature(
            bundle_hash=bundle_hash,
            signature=signature,
            public_key=self._key_pair.public_key,
            timestamp=_now_ms(self._clock),
            version=self.version,
        )
        logger.info("Bundle signed: %s...", bundle_hash[:8])
        return record

    def sign_message(self, message: BytesLike) -> SignatureResult:
        """Sign arbitrary message bytes."""
        return SignatureResult(
            signature=sign(self._key_pair.private_key, message),
            public_key=self._key_pair.public_key,
        )


def verify_bundle_signature(bundle_hash: str, bundle_signature: BundleSignature,
                            max_age: Optional[int] = None,
                            clock: Optional[Clock] = None) -> bool:
    """
    Verify a bundle signature record.

    Args:
        bundle_hash: SHA-256 hex hash of the bundle being checked
        bundle_signature: Record produced by BundleSigner.sign_bundle
        max_age: Maximum record age in seconds (defaults to configured value)
        clock: Callable returning seconds since the epoch (defaults to time.time)

    Returns:
        True if the record is fresh, matches the bundle and is validly signed

    Raises:
        InvalidKeyError: If the record's public key is malformed
        InvalidSignatureError: If the record's signature is malformed
    """
    if max_age is None:
        max_age = get_config().bundle_max_age

    age_ms = _now_ms(clock) - bundle_signature.timestamp
    if age_ms > max_age * 1000:
        logger.warning("Bundle signature expired")
        return False

    if not constant_time_compare(bundle_hash.encode('utf-8'),
                                 bundle_signature.bundle_hash.encode('utf-8')):
        logger.warning("Bundle hash mismatch")
        return False

    valid = verify(
        bundle_signature.public_key,
        bundle_signature.signature,
        bundle_signature.bundle_hash.encode('utf-8'),
    )
    if valid:
        logger.info("Bundle signature verified: %s...", bundle_signature.public_key[:8])
    else:
        logger.warning("Bundle signature verification failed")
    return valid


__all__ = [
    'BundleSignature',
    'BundleSigner',
    'SignatureResult',
    'generate_bundle_hash',
    'generate_secure_token',
    'verify_bundle_signature',
]
