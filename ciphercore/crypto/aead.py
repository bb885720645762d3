"""
AES-256-GCM authenticated encryption.

Ciphertext is the encrypted data with the 16-byte GCM tag appended. There
is no associated data. The nonce is supplied by the caller and must never
repeat under the same key; only its length is checked here.
"""

import logging

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ..errors import DecryptionError, EncryptionError, InvalidKeyError
from .utils import BytesLike, require_length

KEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16

logger = logging.getLogger(__name__)


def _validate(key: BytesLike, nonce: BytesLike):
    key = require_length(key, KEY_SIZE, InvalidKeyError, "AES-256 key")
    nonce = require_length(nonce, NONCE_SIZE, InvalidKeyError, "AES-GCM nonce")
    return key, nonce


def encrypt(key: BytesLike, nonce: BytesLike, plaintext: BytesLike) -> bytes:
    """
    Encrypt a message using AES-256-GCM.

    Args:
        key: 32-byte encryption key
        nonce: 12-byte nonce, unique per encryption under this key
        plaintext: Data to encrypt (may be empty)

    Returns:
        Ciphertext with the 16-byte authentication tag appended

    Raises:
        InvalidKeyError: If the key or nonce has the wrong length
        EncryptionError: If the cipher backend fails
    """
    key, nonce = _validate(key, nonce)

    try:
        return AESGCM(key).encrypt(nonce, bytes(plaintext), None)
    except (ValueError, OverflowError) as e:
        logger.debug("AES-GCM encryption of %d bytes failed: %s", len(plaintext), e)
        raise EncryptionError(f"Encryption failed: {e}") from e


def decrypt(key: BytesLike, nonce: BytesLike, ciphertext: BytesLike) -> bytes:
    """
    Decrypt and authenticate a message using AES-256-GCM.

    Either the exact original plaintext is returned or an error is raised;
    tampered, truncated or mis-keyed input never yields data.

    Args:
        key: 32-byte encryption key
        nonce: 12-byte nonce used for encryption
        ciphertext: Encrypted data with the tag appended

    Returns:
        Decrypted plaintext

    Raises:
        InvalidKeyError: If the key or nonce has the wrong length
        DecryptionError: If authentication fails or the input is too short
    """
    key, nonce = _validate(key, nonce)

    if len(ciphertext) < TAG_SIZE:
        raise DecryptionError("Ciphertext too short to contain authentication tag")

    try:
        return AESGCM(key).decrypt(nonce, bytes(ciphertext), None)
    except InvalidTag as e:
        logger.debug("AES-GCM tag check failed for %d-byte ciphertext", len(ciphertext))
        raise DecryptionError("Authentication verification failed - message may be tampered") from e
    except (ValueError, OverflowError) as e:
        raise DecryptionError(f"Decryption failed: {e}") from e
