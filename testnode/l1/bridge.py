"""Deposit ETH from L1 into the L2 Inbox contract."""

from __future__ import annotations

import json
import logging

from eth_account.signers.local import LocalAccount

from testnode.common.config import TestnodeConfig
from testnode.l1.provider import L1Provider
from testnode.l1.transactions import SentTransaction, create_send_transaction, parse_ether

logger = logging.getLogger(__name__)


# depositEth(uint256) with a fixed max submission cost
DEPOSIT_ETH_CALLDATA = bytes.fromhex(
    "0f4d14e9000000000000000000000000000000000000000000000000000082f79cd90000"
)


def read_inbox_address(deployment_file: str) -> str:
    with open(deployment_file) as f:
        deployment = json.load(f)
    return deployment["Inbox"]


async def bridge_funds(
    config: TestnodeConfig,
    provider: L1Provider,
    sender: LocalAccount,
    eth_amount: str,
) -> SentTransaction:
    inbox = read_inbox_address(config.deployment_file)
    logger.info("Bridging %s ETH from %s to inbox %s", eth_amount, sender.address, inbox)
    return await create_send_transaction(
        provider, sender, inbox, parse_ether(eth_amount), DEPOSIT_ETH_CALLDATA
    )
