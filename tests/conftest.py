"""
Test bootstrap:
- Reset the process-wide network selection around every test
- Provide shared accounts, key pairs and a frozen builder clock
"""

import pytest

from osch_client.network import Network
from osch_client.tx import builder

from helpers import ACCOUNT_ID, ISSUER_ID, FIXED_NOW, mk_account, mk_keypair, mk_operation


@pytest.fixture(autouse=True)
def _reset_network():
    Network.clear()
    yield
    Network.clear()


@pytest.fixture
def account_id():
    return ACCOUNT_ID


@pytest.fixture
def issuer_id():
    return ISSUER_ID


@pytest.fixture
def account():
    """Fresh source account at sequence 100."""
    return mk_account("100")


@pytest.fixture
def fake_keypair():
    """Provide a deterministic Ed25519 key pair for testing."""
    return mk_keypair(b"test_seed_for_deterministic_key_pair")


@pytest.fixture
def raw_operation():
    return mk_operation(1)


@pytest.fixture
def fixed_clock(monkeypatch):
    """Freeze the builder's wall clock at FIXED_NOW."""
    monkeypatch.setattr(builder, "_now_seconds", lambda: FIXED_NOW)
    return FIXED_NOW
