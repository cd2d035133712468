"""
Protocol constants.

These values are part of the wire format and key encoding; changing any of
them breaks interoperability with existing payloads.
"""

# secp256k1 group order n. Valid private scalars satisfy 1 <= d < n.
SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

PRIVATE_KEY_BYTES = 32
COMPRESSED_PUBLIC_KEY_BYTES = 33
XONLY_PUBLIC_KEY_BYTES = 32
COMPRESSED_POINT_PREFIXES = (0x02, 0x03)

SHARED_SECRET_BYTES = 32
NONCE_BYTES = 24  # XChaCha20

TEXT_ENCODING = "utf-8"

# Versions with an executable algorithm.
SUPPORTED_VERSIONS = frozenset({1})

# Versions that must never be processed.
RESERVED_VERSIONS = frozenset({0})
