"""
L1 transaction construction and submission.

Builds a type-2 (EIP-1559) transaction, pads the estimated gas and the
current fees by 20%, signs it locally and broadcasts it. No receipt is
awaited.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

from eth_account.signers.local import LocalAccount
from eth_utils import to_checksum_address, to_hex, to_wei

from testnode.l1.provider import L1Provider

logger = logging.getLogger(__name__)


# 1.2x safety margin, as a fraction so rounding stays exact
MARGIN_NUMERATOR = 6
MARGIN_DENOMINATOR = 5


def apply_margin(value: int) -> int:
    """Return ceil(value * 1.2)."""
    return -(-value * MARGIN_NUMERATOR // MARGIN_DENOMINATOR)


def parse_ether(amount: str) -> int:
    return to_wei(amount, "ether")


@dataclass
class SentTransaction:
    """A broadcast transaction; not yet confirmed."""
    hash: str
    from_address: str
    to: str
    value: int
    data: str
    nonce: int
    chain_id: int
    gas_limit: int
    max_fee_per_gas: int
    max_priority_fee_per_gas: int

    def to_dict(self) -> dict:
        return asdict(self)


async def create_send_transaction(
    provider: L1Provider,
    sender: LocalAccount,
    to: str,
    value: int,
    data: bytes = b"",
) -> SentTransaction:
    """Sign and broadcast a transaction from sender to `to`.

    Raises:
        ValueError: if the provider returns no EIP-1559 fee data.
    """
    to = to_checksum_address(to)
    nonce = await provider.get_transaction_count(sender.address, "latest")
    chain_id = await provider.get_chain_id()

    tx = {
        "type": 2,
        "from": sender.address,
        "to": to,
        "value": value,
        "data": data,
        "nonce": nonce,
        "chainId": chain_id,
    }
    gas_estimate = await provider.estimate_gas(tx)

    fee_data = await provider.get_fee_data()
    if fee_data.max_priority_fee_per_gas is None or fee_data.max_fee_per_gas is None:
        raise ValueError("bad L1 fee data")

    tx["gas"] = apply_margin(gas_estimate)
    tx["maxPriorityFeePerGas"] = apply_margin(fee_data.max_priority_fee_per_gas)
    tx["maxFeePerGas"] = apply_margin(fee_data.max_fee_per_gas)

    signed = sender.sign_transaction(tx)
    tx_hash = await provider.send_raw_transaction(signed.raw_transaction)
    logger.info("Sent transaction %s (nonce %d, gas %d)", tx_hash, nonce, tx["gas"])

    return SentTransaction(
        hash=tx_hash,
        from_address=sender.address,
        to=to,
        value=value,
        data=to_hex(data),
        nonce=nonce,
        chain_id=chain_id,
        gas_limit=tx["gas"],
        max_fee_per_gas=tx["maxFeePerGas"],
        max_priority_fee_per_gas=tx["maxPriorityFeePerGas"],
    )
