"""Sequencer coordinator state kept in Redis."""

from .priorities import (
    PRIORITIES_KEY,
    priority_list,
    read_redis,
    write_priorities,
)

__all__ = ["PRIORITIES_KEY", "priority_list", "read_redis", "write_priorities"]
