"""
L1 account loading from an encrypted keystore directory.

Filenames are sorted lexicographically and that order fixes the role of
each account (see ACCOUNT_ROLES).
"""

from __future__ import annotations

import json
import logging
import os

from eth_account import Account
from eth_account.signers.local import LocalAccount

from testnode.common.config import ACCOUNT_ROLES

logger = logging.getLogger(__name__)


def load_account(path: str, passphrase: str) -> LocalAccount:
    with open(path) as f:
        keyfile = json.load(f)
    private_key = Account.decrypt(keyfile, passphrase)
    return Account.from_key(private_key)


def load_accounts(keystore_dir: str, passphrase: str) -> list[LocalAccount]:
    """Decrypt every keystore file in keystore_dir, ordered by filename."""
    filenames = sorted(os.listdir(keystore_dir))
    accounts = [
        load_account(os.path.join(keystore_dir, name), passphrase)
        for name in filenames
    ]
    logger.debug("Loaded %d accounts from %s", len(accounts), keystore_dir)
    return accounts


def account_for_role(accounts: list[LocalAccount], role: str) -> LocalAccount:
    index = ACCOUNT_ROLES[role]
    if index >= len(accounts):
        raise IndexError(
            f"no keystore for {role} account (need {index + 1}, found {len(accounts)})"
        )
    return accounts[index]
