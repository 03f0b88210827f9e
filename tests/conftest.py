"""Pytest configuration and shared fixtures for all tests."""

from unittest.mock import MagicMock

import pytest
from eth_account import Account

from testnode.common.config import TestnodeConfig as Config
from testnode.coordinator import priorities
from testnode.l1.provider import FeeData, L1Provider

from tests.fixtures.chain import (
    TEST_CHAIN_ID,
    TEST_GAS_ESTIMATE,
    TEST_MAX_FEE,
    TEST_NONCE,
    TEST_PRIORITY_FEE,
    TEST_TX_HASH,
)
from tests.fixtures.fake_redis import FakeRedis
from tests.fixtures.keys import (
    FUNNEL_PRIVATE_KEY,
    SEQUENCER_PRIVATE_KEY,
    VALIDATOR_PRIVATE_KEY,
    TEST_PASSPHRASE,
    TEST_PRIVATE_KEYS,
    write_keystore,
)


# =============================================================================
# Accounts
# =============================================================================

@pytest.fixture
def funnel():
    """Funnel account (0x01...01)."""
    return Account.from_key(FUNNEL_PRIVATE_KEY)


@pytest.fixture
def sequencer():
    """Sequencer account (0x02...02)."""
    return Account.from_key(SEQUENCER_PRIVATE_KEY)


@pytest.fixture
def validator():
    """Validator account (0x03...03)."""
    return Account.from_key(VALIDATOR_PRIVATE_KEY)


@pytest.fixture
def keystore_dir(tmp_path):
    """Keystore directory holding funnel, sequencer and validator keys."""
    directory = tmp_path / "l1keystore"
    directory.mkdir()
    for filename, key in TEST_PRIVATE_KEYS.items():
        write_keystore(directory, filename, key)
    return directory


# =============================================================================
# Configuration
# =============================================================================

@pytest.fixture
def config_dir(tmp_path):
    directory = tmp_path / "config"
    directory.mkdir()
    return directory


@pytest.fixture
def testnode_config(keystore_dir, config_dir):
    """Config pointing at temporary keystore and config directories."""
    return Config(
        l1_keystore=str(keystore_dir),
        l1_passphrase=TEST_PASSPHRASE,
        config_path=str(config_dir),
    )


# =============================================================================
# L1 provider
# =============================================================================

@pytest.fixture
def provider():
    """Mocked L1Provider answering with fixed chain values."""
    provider = MagicMock(spec=L1Provider)
    provider.get_transaction_count.return_value = TEST_NONCE
    provider.get_chain_id.return_value = TEST_CHAIN_ID
    provider.estimate_gas.return_value = TEST_GAS_ESTIMATE
    provider.get_fee_data.return_value = FeeData(
        gas_price=TEST_MAX_FEE,
        max_fee_per_gas=TEST_MAX_FEE,
        max_priority_fee_per_gas=TEST_PRIORITY_FEE,
    )
    provider.send_raw_transaction.return_value = TEST_TX_HASH
    return provider


# =============================================================================
# Redis
# =============================================================================

@pytest.fixture
def redis_store(monkeypatch):
    """Backing dict for every Redis client opened during the test."""
    store: dict = {}
    clients: list[FakeRedis] = []

    def _open_client(url):
        client = FakeRedis(store)
        clients.append(client)
        return client

    monkeypatch.setattr(priorities, "open_client", _open_client)
    return {"data": store, "clients": clients}
