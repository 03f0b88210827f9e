"""Node role configuration files."""

from .configs import (
    base_config,
    sequencer_config,
    unsafe_staker_config,
    validator_config,
    write_configs,
)

__all__ = [
    "base_config",
    "sequencer_config",
    "unsafe_staker_config",
    "validator_config",
    "write_configs",
]
