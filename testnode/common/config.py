"""
Test network configuration.

Holds the fixed paths, URLs and passphrase the bootstrap actions share.
One TestnodeConfig is built at startup and handed to every component.
"""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Defaults (match the docker-compose test network layout)
# ---------------------------------------------------------------------------

DEFAULT_L1_KEYSTORE = "/l1keystore"
DEFAULT_L1_PASSPHRASE = "passphrase"
DEFAULT_CONFIG_PATH = "/config"
DEFAULT_REDIS_URL = "redis://redis:6379"
DEFAULT_L1_URL = "ws://geth:8546"

# Keystore index for each L1 role (keystore files are sorted by name)
ACCOUNT_ROLES: dict[str, int] = {
    "funnel": 0,
    "sequencer": 1,
    "validator": 2,
}


@dataclass(frozen=True)
class TestnodeConfig:
    l1_keystore: str = DEFAULT_L1_KEYSTORE
    l1_passphrase: str = DEFAULT_L1_PASSPHRASE
    config_path: str = DEFAULT_CONFIG_PATH
    redis_url: str = DEFAULT_REDIS_URL
    l1_url: str = DEFAULT_L1_URL

    @property
    def deployment_file(self) -> str:
        return os.path.join(self.config_path, "deployment.json")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> TestnodeConfig:
        """Build a config from parsed CLI arguments; the parser supplies defaults."""
        return cls(
            l1_keystore=args.l1keystore,
            l1_passphrase=args.l1passphrase,
            config_path=args.configpath,
            redis_url=args.redisurl,
            l1_url=args.l1url,
        )
