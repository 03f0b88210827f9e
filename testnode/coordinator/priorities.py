"""
Sequencer coordinator priorities.

The seq-coordinator elects its leader from an ordered, comma-separated list
of sequencer endpoints stored under a single Redis key. Each call here opens
its own client and closes it before returning.
"""

from __future__ import annotations

import logging
from typing import Optional

import redis.asyncio as redis

logger = logging.getLogger(__name__)


PRIORITIES_KEY = "coordinator.priorities"

# Lone sequencer used when no failover replicas are requested
SINGLE_SEQUENCER_URL = "ws://sequencer:7546"

# Replica suffixes in priority order
PRIORITY_SEQUENCERS = "bcd"


def sequencer_url(replica: str) -> str:
    return f"ws://sequencer_{replica}:7546"


def priority_list(priorities: int) -> str:
    """Build the priority string for `priorities` replicas (at most 3).

    Negative counts yield an empty list.
    """
    if priorities == 0:
        return SINGLE_SEQUENCER_URL
    if priorities < 0:
        return ""
    priorities = min(priorities, len(PRIORITY_SEQUENCERS))
    return ",".join(sequencer_url(r) for r in PRIORITY_SEQUENCERS[:priorities])


def open_client(url: str) -> redis.Redis:
    return redis.from_url(url, decode_responses=True)


async def read_redis(redis_url: str, key: str) -> Optional[str]:
    client = open_client(redis_url)
    try:
        value = await client.get(key)
    finally:
        await client.aclose()
    print(f"redis[{key}]:{value}")
    return value


async def write_priorities(redis_url: str, priorities: int) -> str:
    """Store the coordinator priority list, then read it back for the log."""
    value = priority_list(priorities)
    client = open_client(redis_url)
    try:
        await client.set(PRIORITIES_KEY, value)
    finally:
        await client.aclose()
    logger.info("Set %s to %s", PRIORITIES_KEY, value)

    await read_redis(redis_url, PRIORITIES_KEY)
    return value
