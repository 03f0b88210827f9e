"""testnode — local L1/L2 test network bootstrap tooling."""

__version__ = "0.1.0"
