"""Shared configuration and account handling."""

from .config import TestnodeConfig, ACCOUNT_ROLES
from .accounts import load_accounts, account_for_role

__all__ = [
    "TestnodeConfig",
    "ACCOUNT_ROLES",
    "load_accounts",
    "account_for_role",
]
