"""Test private keys and keystore helpers.

Keys are 32 bytes and match the usual 0x01.., 0x02.., 0x03.. test vectors.
"""

import json
from pathlib import Path

from eth_account import Account
from eth_keys import keys
from eth_utils import to_checksum_address

FUNNEL_PRIVATE_KEY = bytes.fromhex("01" * 32)
SEQUENCER_PRIVATE_KEY = bytes.fromhex("02" * 32)
VALIDATOR_PRIVATE_KEY = bytes.fromhex("03" * 32)

TEST_PASSPHRASE = "passphrase"

# Keystore filename -> private key; sorted filenames give funnel, sequencer, validator
TEST_PRIVATE_KEYS = {
    "UTC--2022-01-01T00-00-00.000000000Z--funnel": FUNNEL_PRIVATE_KEY,
    "UTC--2022-01-01T00-00-01.000000000Z--sequencer": SEQUENCER_PRIVATE_KEY,
    "UTC--2022-01-01T00-00-02.000000000Z--validator": VALIDATOR_PRIVATE_KEY,
}


def derive_address(private_key: bytes) -> str:
    """Derive the checksummed address for a private key."""
    pk = keys.PrivateKey(private_key)
    return to_checksum_address(pk.public_key.to_canonical_address())


def write_keystore(directory: Path, filename: str, private_key: bytes,
                   passphrase: str = TEST_PASSPHRASE) -> Path:
    """Encrypt private_key into directory/filename.

    Uses pbkdf2 with a tiny iteration count so tests stay fast.
    """
    keyfile = Account.encrypt(private_key, passphrase, kdf="pbkdf2", iterations=2)
    path = directory / filename
    path.write_text(json.dumps(keyfile))
    return path
