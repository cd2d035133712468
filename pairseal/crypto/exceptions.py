"""
Error types raised by pairseal.

Callers can tell three situations apart:
- Bad input: KeyFormatError, UnsupportedVersionError, MalformedPayloadError,
  TextEncodingError
- Backend fault: CryptoPrimitiveError
- Probable key mismatch: TextDecodingError

None of these messages ever include key material or plaintext.
"""

from typing import Any


class PairsealError(Exception):
    """Base class for all pairseal errors."""


class KeyFormatError(PairsealError, ValueError):
    """Private or public key bytes are malformed, out of range, or off-curve."""


class UnsupportedVersionError(PairsealError, ValueError):
    """Payload version is not executable (unknown, or the reserved version 0)."""

    def __init__(self, version: Any):
        self.version = version
        super().__init__(f"Unsupported payload version: {version!r}")


class MalformedPayloadError(PairsealError, ValueError):
    """Serialized payload cannot be parsed or lacks fields its version requires."""


class TextEncodingError(PairsealError, ValueError):
    """Plaintext cannot be encoded as UTF-8 (for example, it holds a lone surrogate)."""


class TextDecodingError(PairsealError, ValueError):
    """
    Decrypted bytes are not valid UTF-8.

    Version 1 has no integrity check, so this is the usual symptom of
    decrypting with the wrong keypair.
    """


class CryptoPrimitiveError(PairsealError):
    """An underlying EC, hash or cipher primitive reported a failure."""
