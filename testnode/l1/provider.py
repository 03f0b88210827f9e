"""
L1 JSON-RPC provider.

Thin async wrapper over web3's AsyncWeb3 exposing just the calls the
bootstrap actions need. WebSocket and HTTP endpoints are both accepted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from eth_utils import to_hex
from web3 import AsyncHTTPProvider, AsyncWeb3, WebSocketProvider

logger = logging.getLogger(__name__)


# Request fields sent as quantities on the wire
_QUANTITY_FIELDS = (
    "type",
    "value",
    "nonce",
    "chainId",
    "gas",
    "maxFeePerGas",
    "maxPriorityFeePerGas",
)

# Tip ethers v5 getFeeData always suggests
DEFAULT_PRIORITY_FEE = 1_500_000_000


@dataclass
class FeeData:
    """Current fee market values; EIP-1559 fields are None on pre-London chains."""
    gas_price: Optional[int] = None
    max_fee_per_gas: Optional[int] = None
    max_priority_fee_per_gas: Optional[int] = None


def to_rpc_request(tx: dict[str, Any]) -> dict[str, Any]:
    """Hex-encode integer and byte fields of a transaction request."""
    request = dict(tx)
    for key in _QUANTITY_FIELDS:
        if isinstance(request.get(key), int):
            request[key] = hex(request[key])
    if isinstance(request.get("data"), (bytes, bytearray)):
        request["data"] = to_hex(request["data"])
    return request


class L1Provider:
    """Connection to the L1 chain, held for the lifetime of one CLI run."""

    def __init__(self, w3: AsyncWeb3) -> None:
        self.w3 = w3

    @classmethod
    async def connect(cls, url: str) -> L1Provider:
        if url.startswith(("ws://", "wss://")):
            w3 = AsyncWeb3(WebSocketProvider(url))
            await w3.provider.connect()
        else:
            w3 = AsyncWeb3(AsyncHTTPProvider(url))
        logger.debug("Connected to L1 at %s", url)
        return cls(w3)

    async def get_transaction_count(self, address: str, block: str = "latest") -> int:
        return await self.w3.eth.get_transaction_count(address, block)

    async def get_chain_id(self) -> int:
        return await self.w3.eth.chain_id

    async def estimate_gas(self, tx: dict[str, Any]) -> int:
        return await self.w3.eth.estimate_gas(to_rpc_request(tx))

    async def get_fee_data(self) -> FeeData:
        """Fee data the way ethers' getFeeData derives it.

        The tip is a fixed 1.5 gwei; maxFeePerGas is twice the latest base
        fee plus that tip.
        """
        block = await self.w3.eth.get_block("latest")
        gas_price = await self.w3.eth.gas_price
        base_fee = block.get("baseFeePerGas")
        if base_fee is None:
            return FeeData(gas_price=gas_price)
        return FeeData(
            gas_price=gas_price,
            max_fee_per_gas=base_fee * 2 + DEFAULT_PRIORITY_FEE,
            max_priority_fee_per_gas=DEFAULT_PRIORITY_FEE,
        )

    async def send_raw_transaction(self, raw_tx: bytes) -> str:
        tx_hash = await self.w3.eth.send_raw_transaction(raw_tx)
        return to_hex(tx_hash)

    async def close(self) -> None:
        await self.w3.provider.disconnect()
        logger.debug("L1 provider closed")
