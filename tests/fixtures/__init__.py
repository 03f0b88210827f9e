"""Test fixtures for the testnode bootstrap tool."""

from .keys import (
    FUNNEL_PRIVATE_KEY,
    SEQUENCER_PRIVATE_KEY,
    VALIDATOR_PRIVATE_KEY,
    TEST_PASSPHRASE,
    TEST_PRIVATE_KEYS,
    derive_address,
    write_keystore,
)
from .chain import (
    TEST_CHAIN_ID,
    TEST_GAS_ESTIMATE,
    TEST_INBOX_ADDRESS,
    TEST_MAX_FEE,
    TEST_NONCE,
    TEST_PRIORITY_FEE,
    TEST_TX_HASH,
)
from .fake_redis import FakeRedis

__all__ = [
    # Keys
    "FUNNEL_PRIVATE_KEY",
    "SEQUENCER_PRIVATE_KEY",
    "VALIDATOR_PRIVATE_KEY",
    "TEST_PASSPHRASE",
    "TEST_PRIVATE_KEYS",
    "derive_address",
    "write_keystore",
    # Chain
    "TEST_CHAIN_ID",
    "TEST_GAS_ESTIMATE",
    "TEST_INBOX_ADDRESS",
    "TEST_MAX_FEE",
    "TEST_NONCE",
    "TEST_PRIORITY_FEE",
    "TEST_TX_HASH",
    # Redis
    "FakeRedis",
]
