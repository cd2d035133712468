"""
Versioned cipher engine.

Public operations:
- encrypt(own_private_key, peer_public_key, plaintext, version=1) -> payload JSON
- decrypt(own_private_key, peer_public_key, payload) -> plaintext

Each payload version maps to a CipherSuite. Version 1 is the only
executable suite:

    secret     = SHA256(X(ECDH(own_private_key, peer_public_key)))
    nonce      = 24 random bytes
    ciphertext = XChaCha20(secret, nonce) XOR utf8(plaintext)

Security Note:
    Version 1 provides confidentiality only. There is NO MAC or
    authentication tag, so tampered ciphertext or a wrong key is not
    detected cryptographically. Decrypting with the wrong keypair yields
    garbled text or TextDecodingError; garbled output is the only symptom.
    Do not treat a successful decrypt as proof of origin or integrity.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from pairseal.config import settings
from pairseal.constants import NONCE_BYTES, RESERVED_VERSIONS, TEXT_ENCODING
from pairseal.crypto.exceptions import (
    MalformedPayloadError,
    TextDecodingError,
    TextEncodingError,
    UnsupportedVersionError,
)
from pairseal.crypto.primitives import KeyInput, random_bytes, stream_cipher_apply
from pairseal.crypto.shared_secret import shared_secret_scope
from pairseal.schemas.payload import PayloadHeader, PayloadV1, build_payload, dump_payload, parse

logger = logging.getLogger(__name__)


# =============================================================================
# Version Suites
# =============================================================================


class CipherSuite(ABC):
    """One payload version's algorithm."""

    version: int

    @abstractmethod
    def seal(self, secret: bytearray, plaintext: bytes) -> PayloadHeader:
        """Encrypt plaintext bytes under the shared secret into a payload model."""
        ...

    @abstractmethod
    def open(self, secret: bytearray, payload: PayloadHeader) -> bytes:
        """Recover plaintext bytes from a payload model of this version."""
        ...


class XChaCha20SuiteV1(CipherSuite):
    """XChaCha20 keystream over the ECDH-derived secret. No authentication."""

    version = 1

    def seal(self, secret: bytearray, plaintext: bytes) -> PayloadV1:
        return self.seal_with_nonce(secret, random_bytes(NONCE_BYTES), plaintext)

    def seal_with_nonce(self, secret: bytearray, nonce: bytes, plaintext: bytes) -> PayloadV1:
        """Encrypt with a caller-supplied nonce. Only for generating test vectors."""
        ciphertext = stream_cipher_apply(secret, nonce, plaintext)
        return build_payload(self.version, nonce=nonce, ciphertext=ciphertext)

    def open(self, secret: bytearray, payload: PayloadV1) -> bytes:
        return stream_cipher_apply(secret, payload.nonce, payload.ciphertext)


_SUITES: Dict[int, CipherSuite] = {
    XChaCha20SuiteV1.version: XChaCha20SuiteV1(),
}


def get_suite(version: object) -> CipherSuite:
    """
    Look up the suite for a payload version.

    Raises:
        UnsupportedVersionError: For reserved versions, unknown versions,
            and anything that is not an int (bool included)
    """
    if isinstance(version, bool) or not isinstance(version, int) or version in RESERVED_VERSIONS:
        raise UnsupportedVersionError(version)
    suite = _SUITES.get(version)
    if suite is None:
        raise UnsupportedVersionError(version)
    return suite


# =============================================================================
# Public API
# =============================================================================


def encrypt(
    own_private_key: KeyInput,
    peer_public_key: KeyInput,
    plaintext: str,
    version: Optional[int] = 1,
) -> str:
    """
    Encrypt a text message for a peer.

    The version is checked before any key derivation or randomness is
    consumed. Every call draws a fresh random nonce, so encrypting the same
    message twice gives different payloads.

    Args:
        own_private_key: Sender's private key (32 bytes or hex)
        peer_public_key: Recipient's public key (33-byte compressed, 32-byte x-only, or hex)
        plaintext: Message text (may be empty)
        version: Payload version. None uses settings.DEFAULT_VERSION.

    Returns:
        Serialized payload, e.g. '{"ciphertext":"...","nonce":"...","v":1}'

    Raises:
        UnsupportedVersionError: If version is not executable (including 0)
        KeyFormatError: If either key is malformed
        CryptoPrimitiveError: If a primitive fails
        TextEncodingError: If plaintext holds characters UTF-8 cannot encode
        TypeError: If plaintext is not a str

    Example:
        >>> alice, bob = generate_keypair(), generate_keypair()
        >>> payload = encrypt(alice.private_key, bob.public_key, "hello")
        >>> decrypt(bob.private_key, alice.public_key, payload)
        'hello'
    """
    if version is None:
        version = settings.DEFAULT_VERSION

    try:
        suite = get_suite(version)
    except UnsupportedVersionError:
        logger.debug("Refusing to encrypt with unsupported version %r", version)
        raise

    if not isinstance(plaintext, str):
        raise TypeError("Plaintext must be a str")

    try:
        data = plaintext.encode(TEXT_ENCODING)
    except UnicodeEncodeError:
        raise TextEncodingError("Plaintext is not encodable as UTF-8") from None

    with shared_secret_scope(own_private_key, peer_public_key) as secret:
        payload = suite.seal(secret, data)

    logger.debug("Encrypted %d bytes as v%d payload", len(data), suite.version)
    return dump_payload(payload)


def decrypt(own_private_key: KeyInput, peer_public_key: KeyInput, payload: str) -> str:
    """
    Decrypt a payload produced by encrypt().

    Version 1 has no integrity check. A wrong keypair does not raise a
    crypto error: it produces garbled text or a TextDecodingError.

    Args:
        own_private_key: Recipient's private key (32 bytes or hex)
        peer_public_key: Sender's public key (33-byte compressed, 32-byte x-only, or hex)
        payload: Serialized payload text

    Returns:
        Recovered plaintext

    Raises:
        MalformedPayloadError: If the payload cannot be parsed or lacks required fields
        UnsupportedVersionError: If the payload version is unknown or reserved
        KeyFormatError: If either key is malformed
        CryptoPrimitiveError: If a primitive fails
        TextDecodingError: If the recovered bytes are not valid UTF-8
    """
    try:
        parsed = parse(payload)
    except MalformedPayloadError as exc:
        logger.debug("Rejecting malformed payload: %s", exc)
        raise

    try:
        suite = get_suite(parsed.v)
    except UnsupportedVersionError:
        logger.debug("Rejecting payload with unsupported version %r", parsed.v)
        raise

    with shared_secret_scope(own_private_key, peer_public_key) as secret:
        data = suite.open(secret, parsed)

    logger.debug("Decrypted v%d payload (%d bytes)", suite.version, len(data))

    try:
        return data.decode(TEXT_ENCODING)
    except UnicodeDecodeError:
        raise TextDecodingError(
            "Decrypted bytes are not valid UTF-8; the keypair probably does not match the sender's"
        ) from None
