"""Tests for shared-secret derivation."""
import hashlib

import pytest

from pairseal.crypto.exceptions import KeyFormatError
from pairseal.crypto.shared_secret import derive_shared_secret, shared_secret_scope
from tests.utils.crypto_test_utils import (
    G1_X,
    G2_X,
    G3_X,
    NEGATIVE_ONE,
    compressed,
    expected_shared_secret,
    scalar_key,
)


class TestKnownAnswers:
    """Derivation checked against hashlib over published curve points."""

    def test_one_times_2g(self):
        """secret = SHA256(X(1 * 2G)) = SHA256(X(2G))."""
        assert derive_shared_secret(scalar_key(1), compressed(G2_X)) == expected_shared_secret(G2_X)

    def test_two_times_g(self):
        assert derive_shared_secret(scalar_key(2), compressed(G1_X)) == expected_shared_secret(G2_X)

    def test_three_times_g(self):
        assert derive_shared_secret(scalar_key(3), compressed(G1_X)) == expected_shared_secret(G3_X)

    def test_hashes_x_coordinate_not_compressed_point(self):
        """The format byte is not part of the hash input."""
        secret = derive_shared_secret(scalar_key(1), compressed(G2_X))
        assert secret != hashlib.sha256(compressed(G2_X)).digest()
        assert secret != bytes.fromhex(G2_X)

    def test_point_negation_does_not_change_secret(self):
        """-P has the same X coordinate as P, so the secret is unchanged."""
        even = derive_shared_secret(scalar_key(2), compressed(G1_X))
        odd = derive_shared_secret(scalar_key(2), compressed(G1_X, odd_y=True))
        negated_scalar = derive_shared_secret(NEGATIVE_ONE, compressed(G2_X))
        assert even == odd == negated_scalar == expected_shared_secret(G2_X)

    def test_xonly_and_hex_inputs(self):
        expected = expected_shared_secret(G2_X)
        assert derive_shared_secret(scalar_key(1).hex(), G2_X) == expected
        assert derive_shared_secret(scalar_key(1), bytes.fromhex(G2_X)) == expected


class TestSymmetry:
    """Both parties derive the same key."""

    def test_symmetric(self, alice, bob):
        assert derive_shared_secret(alice.private_key, bob.public_key) == derive_shared_secret(
            bob.private_key, alice.public_key
        )

    def test_deterministic(self, alice, bob):
        first = derive_shared_secret(alice.private_key, bob.public_key)
        second = derive_shared_secret(alice.private_key, bob.public_key)
        assert first == second
        assert len(first) == 32

    def test_different_peers_different_secrets(self, alice, bob, carol):
        assert derive_shared_secret(alice.private_key, bob.public_key) != derive_shared_secret(
            alice.private_key, carol.public_key
        )

    def test_small_scalar_symmetry(self):
        """2 * 3G == 3 * 2G."""
        assert derive_shared_secret(scalar_key(2), compressed(G3_X)) == derive_shared_secret(
            scalar_key(3), compressed(G2_X)
        )


class TestInvalidKeys:
    """Malformed keys raise KeyFormatError."""

    def test_rejects_short_private_key(self, bob):
        with pytest.raises(KeyFormatError):
            derive_shared_secret(b'\x01' * 31, bob.public_key)

    def test_rejects_zero_private_key(self, bob):
        with pytest.raises(KeyFormatError):
            derive_shared_secret(bytes(32), bob.public_key)

    def test_rejects_off_curve_public_key(self, alice):
        with pytest.raises(KeyFormatError):
            derive_shared_secret(alice.private_key, b'\x02' + b'\xff' * 32)

    def test_rejects_bad_prefix(self, alice):
        with pytest.raises(KeyFormatError):
            derive_shared_secret(alice.private_key, b'\x05' + bytes.fromhex(G1_X))


class TestSecretScope:
    """The scoped buffer is wiped on every exit path."""

    def test_buffer_zeroed_after_block(self, alice, bob):
        with shared_secret_scope(alice.private_key, bob.public_key) as secret:
            captured = secret
            assert any(captured)
            assert bytes(secret) == derive_shared_secret(alice.private_key, bob.public_key)
        assert captured == bytearray(32)

    def test_buffer_zeroed_on_exception(self, alice, bob):
        with pytest.raises(RuntimeError):
            with shared_secret_scope(alice.private_key, bob.public_key) as secret:
                captured = secret
                raise RuntimeError("boom")
        assert captured == bytearray(32)

    def test_returned_copy_survives_scope(self, alice, bob):
        """derive_shared_secret returns an independent copy."""
        secret = derive_shared_secret(alice.private_key, bob.public_key)
        assert isinstance(secret, bytes)
        assert secret != bytes(32)
