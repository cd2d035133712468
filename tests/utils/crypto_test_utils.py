"""
Cryptographic test utilities.

Known-answer data for secp256k1. The generator multiples 1G, 2G and 3G
are published constants, so tests can check ECDH and hashing against
values computed independently of pairseal (with hashlib).
"""
import hashlib

from pairseal.constants import SECP256K1_ORDER

# X coordinates of k*G. All three points have even Y.
G1_X = "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
G2_X = "c6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5"
G3_X = "f9308a019258c31049344f85f89d5229b531c845836f99b08601f113bce036f9"

# Example payload from an existing implementation. Its keys are not
# published, so only its shape can be checked.
GOLDEN_PAYLOAD = (
    '{"ciphertext":"FvQi1H4atMwU+FzUR/0CJ7kowjs+",'
    '"nonce":"3dBKd83Pg2Q4Tu2A2e8N++c+ZW2IBc2f","v":1}'
)


def scalar_key(n: int) -> bytes:
    """32-byte big-endian private key for scalar n."""
    return n.to_bytes(32, "big")


def compressed(x_hex: str, odd_y: bool = False) -> bytes:
    """Compressed public key bytes for an X coordinate."""
    return bytes([0x03 if odd_y else 0x02]) + bytes.fromhex(x_hex)


def expected_shared_secret(x_hex: str) -> bytes:
    """SHA256 of the shared point's X coordinate, computed with hashlib."""
    return hashlib.sha256(bytes.fromhex(x_hex)).digest()


# n - 1 is the negation of 1, so its public key is -G (same X, odd Y)
NEGATIVE_ONE = scalar_key(SECP256K1_ORDER - 1)
