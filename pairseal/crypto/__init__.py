"""Cryptographic core: key handling, shared-secret derivation, versioned cipher."""

from .exceptions import (
    PairsealError,
    KeyFormatError,
    UnsupportedVersionError,
    MalformedPayloadError,
    TextEncodingError,
    TextDecodingError,
    CryptoPrimitiveError,
)
from .primitives import (
    KeyPair,
    generate_keypair,
    get_public_key,
    ec_shared_x,
    hash256,
    stream_cipher_apply,
    random_bytes,
    zeroize,
)
from .shared_secret import derive_shared_secret, shared_secret_scope
from .cipher import (
    CipherSuite,
    XChaCha20SuiteV1,
    get_suite,
    encrypt,
    decrypt,
)

__all__ = [
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
    "ec_shared_x",
    "hash256",
    "stream_cipher_apply",
    "random_bytes",
    "zeroize",
    "derive_shared_secret",
    "shared_secret_scope",
    "CipherSuite",
    "XChaCha20SuiteV1",
    "get_suite",
    "encrypt",
    "decrypt",
]
