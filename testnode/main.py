"""
testnode — bootstrap helper for the local L1/L2 test network.

Each flag enables one action; actions run in a fixed order:
  1. --l1fund          fund the chosen account from the funnel
  2. --writeconfig     write validator / unsafe-staker / sequencer configs
  3. --bridgefunds     deposit ETH from the chosen account into the Inbox
  4. --initredisprios  store coordinator priorities in Redis
  5. --readredis       print a Redis key
  6. --printaddress    print the chosen account's address

Any failure aborts the run with exit status 1.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from eth_account.signers.local import LocalAccount

from testnode.common.accounts import account_for_role, load_accounts
from testnode.common.config import (
    ACCOUNT_ROLES,
    DEFAULT_CONFIG_PATH,
    DEFAULT_L1_KEYSTORE,
    DEFAULT_L1_PASSPHRASE,
    DEFAULT_L1_URL,
    DEFAULT_REDIS_URL,
    TestnodeConfig,
)
from testnode.coordinator.priorities import read_redis, write_priorities
from testnode.l1.bridge import bridge_funds
from testnode.l1.provider import L1Provider
from testnode.l1.transactions import SentTransaction, create_send_transaction, parse_ether
from testnode.nodes.configs import write_configs


logger = logging.getLogger("testnode")


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

@dataclass
class RunContext:
    """Read-only state shared by every action in one invocation."""
    config: TestnodeConfig
    accounts: list[LocalAccount]
    provider: L1Provider
    l1_account: str = "funnel"
    eth_amount: str = "10"

    @property
    def chosen_account(self) -> LocalAccount:
        return account_for_role(self.accounts, self.l1_account)


Action = Callable[[RunContext], Awaitable[None]]


def print_transaction(tx: SentTransaction) -> None:
    print(json.dumps(tx.to_dict(), indent=2))


async def fund_account(ctx: RunContext) -> None:
    funnel = account_for_role(ctx.accounts, "funnel")
    response = await create_send_transaction(
        ctx.provider,
        funnel,
        ctx.chosen_account.address,
        parse_ether(ctx.eth_amount),
    )
    logger.info("sent %s funding", ctx.l1_account)
    print_transaction(response)


async def write_config_files(ctx: RunContext) -> None:
    write_configs(
        ctx.config,
        account_for_role(ctx.accounts, "sequencer").address,
        account_for_role(ctx.accounts, "validator").address,
    )
    logger.info("config files written")


async def bridge(ctx: RunContext) -> None:
    response = await bridge_funds(ctx.config, ctx.provider, ctx.chosen_account, ctx.eth_amount)
    logger.info("bridged funds")
    print_transaction(response)


async def print_address(ctx: RunContext) -> None:
    print(ctx.chosen_account.address)


def build_actions(args: argparse.Namespace) -> list[tuple[str, Action]]:
    """Turn parsed flags into the ordered list of actions to run."""
    actions: list[tuple[str, Action]] = []
    if args.l1fund:
        actions.append(("l1fund", fund_account))
    if args.writeconfig:
        actions.append(("writeconfig", write_config_files))
    if args.bridgefunds:
        actions.append(("bridgefunds", bridge))
    if args.initredisprios is not None:
        prios = args.initredisprios

        async def init_prios(ctx: RunContext) -> None:
            await write_priorities(ctx.config.redis_url, prios)

        actions.append(("initredisprios", init_prios))
    if args.readredis is not None:
        key = args.readredis

        async def read_key(ctx: RunContext) -> None:
            await read_redis(ctx.config.redis_url, key)

        actions.append(("readredis", read_key))
    if args.printaddress:
        actions.append(("printaddress", print_address))
    return actions


async def run(args: argparse.Namespace, config: Optional[TestnodeConfig] = None) -> None:
    config = config or TestnodeConfig.from_args(args)
    accounts = load_accounts(config.l1_keystore, config.l1_passphrase)
    provider = await L1Provider.connect(config.l1_url)

    ctx = RunContext(
        config=config,
        accounts=accounts,
        provider=provider,
        l1_account=args.l1account,
        eth_amount=args.ethamount,
    )
    try:
        for name, action in build_actions(args):
            logger.debug("Running %s", name)
            await action(ctx)
    finally:
        await provider.close()


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="testnode",
        description="Bootstrap helper for the local L1/L2 test network",
    )
    parser.add_argument("--writeconfig", action="store_true", help="write config")
    parser.add_argument("--bridgefunds", action="store_true", help="bridge funds")
    parser.add_argument(
        "--ethamount",
        type=str,
        default="10",
        help="amount to transfer (in eth) (default: 10)",
    )
    parser.add_argument(
        "--l1account",
        choices=list(ACCOUNT_ROLES),
        default="funnel",
        help="L1 account to fund, bridge from or print (default: funnel)",
    )
    parser.add_argument("--l1fund", action="store_true", help="send funds from funnel")
    parser.add_argument("--printaddress", action="store_true", help="print address")
    parser.add_argument(
        "--initredisprios",
        type=int,
        default=None,
        help="initialize redis priorities (0-only one, 1-3 using priorities)",
    )
    parser.add_argument("--readredis", type=str, default=None, help="read redis key")
    parser.add_argument(
        "--l1keystore",
        default=DEFAULT_L1_KEYSTORE,
        help=f"L1 keystore directory (default: {DEFAULT_L1_KEYSTORE})",
    )
    parser.add_argument(
        "--l1passphrase",
        default=DEFAULT_L1_PASSPHRASE,
        help="passphrase for every keystore file",
    )
    parser.add_argument(
        "--configpath",
        default=DEFAULT_CONFIG_PATH,
        help=f"config directory (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--l1url",
        default=DEFAULT_L1_URL,
        help=f"L1 JSON-RPC endpoint (default: {DEFAULT_L1_URL})",
    )
    parser.add_argument(
        "--redisurl",
        default=DEFAULT_REDIS_URL,
        help=f"Redis URL (default: {DEFAULT_REDIS_URL})",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        asyncio.run(run(args))
    except Exception as e:
        logger.error("%s: %s", type(e).__name__, e)
        logger.debug("Traceback:", exc_info=True)
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
