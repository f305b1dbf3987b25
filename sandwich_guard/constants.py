"""
Constants and enums for the bundle sandwich screener.
"""

from enum import Enum


class EntryKind(Enum):
    """Classified entry in a pool's per-bundle sequence."""

    BUY = "buy"  # token0 -> token1
    SELL = "sell"  # token1 -> token0
    LIQUIDITY_CHANGE = "liquidity_change"


class PatternKind(Enum):
    """Which check flagged a pool."""

    SWAP = "swap"
    LIQUIDITY = "liquidity"


# A sandwich needs a front-run, a victim and a back-run
MIN_BUNDLE_SIZE = 3

# Shortest per-pool sequence that can hold a pattern
MIN_SEQUENCE_LENGTH = 3

DEFAULT_CONFIG = {
    "min_bundle_size": MIN_BUNDLE_SIZE,
    "sort_pools": False,
    "liquidity_check": True,
    "log_level": "INFO",
}

CONFIG_ENV_VAR = "SANDWICH_GUARD_CONFIG"
