"""L1 chain access: provider, transaction sender and bridge deposits."""

from .provider import FeeData, L1Provider
from .transactions import SentTransaction, apply_margin, create_send_transaction, parse_ether
from .bridge import bridge_funds

__all__ = [
    "FeeData",
    "L1Provider",
    "SentTransaction",
    "apply_margin",
    "create_send_transaction",
    "parse_ether",
    "bridge_funds",
]
