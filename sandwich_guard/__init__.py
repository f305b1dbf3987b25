"""
Bundle Sandwich Screener.

Decodes the logs produced by simulating a candidate bundle, groups swap and
liquidity events per pool, and flags bundles whose per-pool ordering matches
a sandwich pattern before the bundle is admitted into a block.
"""

PROJECT_NAME = "bundle-sandwich-guard"
VERSION = "0.3.0"
__version__ = VERSION

from sandwich_guard.aggregator import PoolSequences, aggregate_bundle
from sandwich_guard.config_schema import DetectorConfig, load_config
from sandwich_guard.constants import EntryKind, PatternKind
from sandwich_guard.detector import (
    CLEAN,
    SandwichDetector,
    Verdict,
    detect_sandwich_for_bundle,
    has_liquidity_sandwich_pattern,
    has_sandwich_pattern,
    screen_bundle,
)
from sandwich_guard.exceptions import (
    ConfigurationError,
    DecodeError,
    SandwichDetectedError,
    SandwichGuardError,
)

__all__ = [
    "PROJECT_NAME",
    "VERSION",
    "PoolSequences",
    "aggregate_bundle",
    "DetectorConfig",
    "load_config",
    "EntryKind",
    "PatternKind",
    "CLEAN",
    "SandwichDetector",
    "Verdict",
    "detect_sandwich_for_bundle",
    "has_liquidity_sandwich_pattern",
    "has_sandwich_pattern",
    "screen_bundle",
    "ConfigurationError",
    "DecodeError",
    "SandwichDetectedError",
    "SandwichGuardError",
]
