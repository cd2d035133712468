"""
pairseal: versioned encryption between two secp256k1 keypairs.

Party A encrypts for party B with A's private key and B's public key; B
decrypts with B's private key and A's public key. Both sides derive the
same key, SHA256 of the ECDH shared point's X coordinate, so no key
exchange round trip is needed.

    >>> from pairseal import encrypt, decrypt, generate_keypair
    >>> alice, bob = generate_keypair(), generate_keypair()
    >>> payload = encrypt(alice.private_key, bob.public_key, "hi bob")
    >>> decrypt(bob.private_key, alice.public_key, payload)
    'hi bob'

Version 1 (XChaCha20, random 24-byte nonce) gives confidentiality only: it
has no authentication tag, so a wrong key shows up as garbled text or
TextDecodingError rather than a crypto failure.
"""

from pairseal.constants import SUPPORTED_VERSIONS
from pairseal.crypto import (
    PairsealError,
    KeyFormatError,
    UnsupportedVersionError,
    MalformedPayloadError,
    TextEncodingError,
    TextDecodingError,
    CryptoPrimitiveError,
    KeyPair,
    generate_keypair,
    get_public_key,
    derive_shared_secret,
    encrypt,
    decrypt,
)

__version__ = "0.1.0"

__all__ = [
    "SUPPORTED_VERSIONS",
    "PairsealError",
    "KeyFormatError",
    "UnsupportedVersionError",
    "MalformedPayloadError",
    "TextEncodingError",
    "TextDecodingError",
    "CryptoPrimitiveError",
    "KeyPair",
    "generate_keypair",
    "get_public_key",
    "derive_shared_secret",
    "encrypt",
    "decrypt",
]
