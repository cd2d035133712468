"""
Cryptographic primitives used by pairseal.

This module is the only place that talks to third-party crypto libraries.
Everything above it works with plain bytes and pairseal's own error types.

Security Properties:
- All randomness from secrets module (CSPRNG)
- secp256k1 ECDH via the `cryptography` package
- SHA-256 via the `cryptography` package
- XChaCha20 (ChaCha20 with a 24-byte nonce) via pycryptodome

Library errors are translated at this boundary:
- Malformed key bytes -> KeyFormatError
- Any other primitive failure -> CryptoPrimitiveError
"""

from dataclasses import dataclass
from typing import Union
import secrets

from Crypto.Cipher import ChaCha20
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec

from pairseal.constants import (
    COMPRESSED_POINT_PREFIXES,
    COMPRESSED_PUBLIC_KEY_BYTES,
    NONCE_BYTES,
    PRIVATE_KEY_BYTES,
    SECP256K1_ORDER,
    SHARED_SECRET_BYTES,
    XONLY_PUBLIC_KEY_BYTES,
)
from pairseal.crypto.exceptions import CryptoPrimitiveError, KeyFormatError

KeyInput = Union[bytes, bytearray, memoryview, str]


# =============================================================================
# Data Structures
# =============================================================================


@dataclass(frozen=True)
class KeyPair:
    """
    secp256k1 keypair container.

    Attributes:
        private_key: 32-byte big-endian scalar (KEEP SECRET)
        public_key: 33-byte SEC1 compressed point (safe to share)
    """

    private_key: bytes  # 32 bytes
    public_key: bytes  # 33 bytes

    def __post_init__(self):
        if len(self.private_key) != PRIVATE_KEY_BYTES:
            raise ValueError("Private key must be 32 bytes")
        if len(self.public_key) != COMPRESSED_PUBLIC_KEY_BYTES:
            raise ValueError("Public key must be 33 bytes")


# =============================================================================
# Key Handling
# =============================================================================


def coerce_key(value: KeyInput, name: str = "Key") -> bytes:
    """
    Normalize key input to bytes.

    Accepts raw bytes-like objects or a hex string.

    Raises:
        KeyFormatError: If the value is neither bytes-like nor valid hex
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        try:
            return bytes.fromhex(value)
        except ValueError:
            raise KeyFormatError(f"{name} must be a valid hex string") from None
    raise KeyFormatError(f"{name} must be bytes or a hex string")


def load_private_key(private_key: KeyInput) -> ec.EllipticCurvePrivateKey:
    """
    Load a 32-byte secp256k1 private scalar.

    Raises:
        KeyFormatError: If the key is the wrong length or not in [1, n)
        CryptoPrimitiveError: If the backend does not support secp256k1
    """
    raw = coerce_key(private_key, "Private key")
    if len(raw) != PRIVATE_KEY_BYTES:
        raise KeyFormatError("Private key must be 32 bytes")

    scalar = int.from_bytes(raw, "big")
    if not 0 < scalar < SECP256K1_ORDER:
        raise KeyFormatError("Private key is not a valid secp256k1 scalar")

    try:
        return ec.derive_private_key(scalar, ec.SECP256K1())
    except UnsupportedAlgorithm as exc:
        raise CryptoPrimitiveError("secp256k1 is not supported by the crypto backend") from exc
    except ValueError as exc:
        raise KeyFormatError("Private key is not a valid secp256k1 scalar") from exc


def load_public_key(public_key: KeyInput) -> ec.EllipticCurvePublicKey:
    """
    Load a secp256k1 public key.

    Accepts a 33-byte compressed point, or a 32-byte x-only key which is
    interpreted as the point with even Y (prefix 0x02).

    Raises:
        KeyFormatError: If the encoding is wrong or the point is not on the curve
        CryptoPrimitiveError: If the backend does not support secp256k1
    """
    raw = coerce_key(public_key, "Public key")
    if len(raw) == XONLY_PUBLIC_KEY_BYTES:
        raw = b"\x02" + raw

    if len(raw) != COMPRESSED_PUBLIC_KEY_BYTES or raw[0] not in COMPRESSED_POINT_PREFIXES:
        raise KeyFormatError("Public key must be a 33-byte compressed point")

    try:
        return ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), raw)
    except UnsupportedAlgorithm as exc:
        raise CryptoPrimitiveError("secp256k1 is not supported by the crypto backend") from exc
    except ValueError as exc:
        raise KeyFormatError("Public key is not a valid secp256k1 point") from exc


def get_public_key(private_key: KeyInput) -> bytes:
    """
    Compute the 33-byte compressed public key for a private key.

    Example:
        >>> get_public_key(bytes(31) + b"\\x01").hex()[:4]
        '0279'
    """
    return _compress(load_private_key(private_key).public_key())


def generate_keypair() -> KeyPair:
    """
    Generate a new secp256k1 keypair.

    Uses the backend's cryptographically secure key generation.

    Returns:
        KeyPair with a 32-byte private key and 33-byte compressed public key
    """
    try:
        private_key = ec.generate_private_key(ec.SECP256K1())
    except UnsupportedAlgorithm as exc:
        raise CryptoPrimitiveError("secp256k1 is not supported by the crypto backend") from exc

    scalar = private_key.private_numbers().private_value
    return KeyPair(
        private_key=scalar.to_bytes(PRIVATE_KEY_BYTES, "big"),
        public_key=_compress(private_key.public_key()),
    )


def _compress(public_key: ec.EllipticCurvePublicKey) -> bytes:
    return public_key.public_bytes(
        serialization.Encoding.X962,
        serialization.PublicFormat.CompressedPoint,
    )


# =============================================================================
# External Primitives
# =============================================================================


def ec_shared_x(private_key: KeyInput, public_key: KeyInput) -> bytes:
    """
    Compute the X coordinate of the ECDH shared point d * P.

    The 32 returned bytes are the compressed encoding of the shared point
    with its leading format byte dropped.

    Args:
        private_key: Our secp256k1 private key (32 bytes)
        public_key: Their secp256k1 public key (33-byte compressed or 32-byte x-only)

    Returns:
        32-byte big-endian X coordinate

    Raises:
        KeyFormatError: If either key is malformed
        CryptoPrimitiveError: If the ECDH computation itself fails
    """
    private = load_private_key(private_key)
    public = load_public_key(public_key)

    try:
        return private.exchange(ec.ECDH(), public)
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise CryptoPrimitiveError("ECDH computation failed") from exc
    finally:
        del private


def hash256(data: Union[bytes, bytearray]) -> bytes:
    """SHA-256 digest (32 bytes)."""
    try:
        digest = hashes.Hash(hashes.SHA256())
        digest.update(data)
        return digest.finalize()
    except (TypeError, UnsupportedAlgorithm) as exc:
        raise CryptoPrimitiveError("SHA-256 computation failed") from exc


def stream_cipher_apply(key: Union[bytes, bytearray], nonce: bytes, data: bytes) -> bytes:
    """
    Apply the XChaCha20 keystream to data.

    The keystream starts at block counter 0. Applying this twice with the
    same key and nonce returns the original input, so the same function
    encrypts and decrypts. There is NO authentication tag.

    Args:
        key: 32-byte key
        nonce: 24-byte nonce (never reuse with the same key)
        data: Bytes to transform

    Returns:
        Transformed bytes, same length as data

    Raises:
        CryptoPrimitiveError: If the key/nonce are rejected or the cipher fails
    """
    if len(key) != SHARED_SECRET_BYTES:
        raise CryptoPrimitiveError("Stream cipher key must be 32 bytes")
    if len(nonce) != NONCE_BYTES:
        raise CryptoPrimitiveError("Stream cipher nonce must be 24 bytes")

    if not data:
        return b""

    try:
        cipher = ChaCha20.new(key=key, nonce=nonce)
        return cipher.encrypt(data)
    except (ValueError, TypeError) as exc:
        raise CryptoPrimitiveError("XChaCha20 keystream application failed") from exc


def random_bytes(length: int) -> bytes:
    """
    Generate cryptographically secure random bytes.

    Args:
        length: Number of bytes to generate

    Returns:
        Random bytes of specified length
    """
    return secrets.token_bytes(length)


# =============================================================================
# Utilities
# =============================================================================


def zeroize(buffer: bytearray) -> None:
    """
    Overwrite a mutable buffer with zeros in place.

    Immutable bytes cannot be cleared; keep secrets in a bytearray when
    they need to be wiped.
    """
    for i in range(len(buffer)):
        buffer[i] = 0
