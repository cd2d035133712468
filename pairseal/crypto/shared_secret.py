"""
Shared-secret derivation.

secret = SHA256(X(d_own * P_peer))

Only the X coordinate of the ECDH point is hashed (the compressed point
with its format byte dropped). The raw, unhashed point is never used as a
key.
"""

from contextlib import contextmanager
from typing import Iterator

from pairseal.crypto.primitives import KeyInput, ec_shared_x, hash256, zeroize


@contextmanager
def shared_secret_scope(own_private_key: KeyInput, peer_public_key: KeyInput) -> Iterator[bytearray]:
    """
    Derive the shared secret into a buffer that is zeroed when the block exits.

    The buffer is cleared on every exit path, including exceptions raised
    inside the block.

    Example:
        >>> with shared_secret_scope(alice.private_key, bob.public_key) as secret:
        ...     ciphertext = stream_cipher_apply(secret, nonce, data)
    """
    secret = bytearray(hash256(ec_shared_x(own_private_key, peer_public_key)))
    try:
        yield secret
    finally:
        zeroize(secret)


def derive_shared_secret(own_private_key: KeyInput, peer_public_key: KeyInput) -> bytes:
    """
    Derive the 32-byte symmetric key shared by two secp256k1 keypairs.

    Both parties get the same value:
        derive_shared_secret(a.priv, b.pub) == derive_shared_secret(b.priv, a.pub)

    The result is deterministic for a given pair of keys; message freshness
    comes from the per-message nonce, never from the key.

    Args:
        own_private_key: Our private key (32 bytes or hex)
        peer_public_key: Their public key (33-byte compressed, 32-byte x-only, or hex)

    Returns:
        32-byte shared secret. The caller owns this copy and should discard
        it as soon as possible.

    Raises:
        KeyFormatError: If either key is malformed or off-curve
        CryptoPrimitiveError: If the EC or hash primitive fails
    """
    with shared_secret_scope(own_private_key, peer_public_key) as secret:
        return bytes(secret)
