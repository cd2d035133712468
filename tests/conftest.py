"""
Shared test fixtures for pairseal tests.

Keypairs are generated fresh per test; nothing is cached between tests.
"""
import pytest

from pairseal.crypto import KeyPair, generate_keypair


@pytest.fixture
def alice() -> KeyPair:
    """Sender keypair."""
    return generate_keypair()


@pytest.fixture
def bob() -> KeyPair:
    """Recipient keypair."""
    return generate_keypair()


@pytest.fixture
def carol() -> KeyPair:
    """Unrelated third party."""
    return generate_keypair()
