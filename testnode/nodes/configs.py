"""
Node configuration files for the L2 test network.

Three documents are derived from one base template:
  - validator_config.json      validator role enabled
  - unsafe_staker_config.json  validator that skips block validation
  - sequencer_config.json      sequencer plus seq-coordinator enabled

Files are written as compact JSON and overwrite whatever is already there.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from typing import Any

from testnode.common.config import TestnodeConfig

logger = logging.getLogger(__name__)


VALIDATOR_CONFIG_FILE = "validator_config.json"
UNSAFE_STAKER_CONFIG_FILE = "unsafe_staker_config.json"
SEQUENCER_CONFIG_FILE = "sequencer_config.json"

# Shared by every sequencer replica in the test network
COORDINATOR_SIGNING_KEY = "0123456789abcdef" * 4


def base_config(config: TestnodeConfig) -> dict[str, Any]:
    return {
        "l1": {
            "deployment": config.deployment_file,
            "url": config.l1_url,
            "wallet": {
                "account": "",
                "password": config.l1_passphrase,
                "pathname": config.l1_keystore,
            },
        },
        "node": {
            "archive": True,
            "forwarding-target": "null",
            "validator": {
                "dangerous": {
                    "without-block-validator": False,
                },
                "disable-challenge": False,
                "enable": False,
                "staker-interval": "10s",
                "strategy": "MakeNodes",
                "target-machine-count": 4,
            },
            "sequencer": {
                "enable": False,
            },
            "seq-coordinator": {
                "enable": False,
                "redis-url": config.redis_url,
                "lockout-duration": "30s",
                "lockout-spare": "1s",
                "my-url": "",
                "retry-interval": "0.5s",
                "seq-num-duration": "24h0m0s",
                "update-interval": "3s",
                "signing-key": COORDINATOR_SIGNING_KEY,
            },
        },
        "persistent": {
            "data": "/data",
        },
        "ws": {
            "addr": "0.0.0.0",
        },
        "http": {
            "addr": "0.0.0.0",
        },
    }


def validator_config(config: TestnodeConfig, validator_address: str) -> dict[str, Any]:
    doc = base_config(config)
    doc["l1"]["wallet"]["account"] = validator_address
    doc["node"]["validator"]["enable"] = True
    return doc


def unsafe_staker_config(validator_doc: dict[str, Any]) -> dict[str, Any]:
    doc = copy.deepcopy(validator_doc)
    doc["node"]["validator"]["dangerous"]["without-block-validator"] = True
    return doc


def sequencer_config(config: TestnodeConfig, sequencer_address: str) -> dict[str, Any]:
    doc = base_config(config)
    doc["l1"]["wallet"]["account"] = sequencer_address
    doc["node"]["sequencer"]["enable"] = True
    doc["node"]["seq-coordinator"]["enable"] = True
    return doc


def _write_json(path: str, doc: dict[str, Any]) -> None:
    with open(path, "w") as f:
        json.dump(doc, f, separators=(",", ":"))
    logger.debug("Wrote %s", path)


def write_configs(
    config: TestnodeConfig,
    sequencer_address: str,
    validator_address: str,
) -> list[str]:
    """Write the three node config files; returns the paths written."""
    validator_doc = validator_config(config, validator_address)
    documents = [
        (VALIDATOR_CONFIG_FILE, validator_doc),
        (UNSAFE_STAKER_CONFIG_FILE, unsafe_staker_config(validator_doc)),
        (SEQUENCER_CONFIG_FILE, sequencer_config(config, sequencer_address)),
    ]

    written = []
    for filename, doc in documents:
        path = os.path.join(config.config_path, filename)
        _write_json(path, doc)
        written.append(path)
    return written
