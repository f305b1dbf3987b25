"""
Common helpers for the bundle sandwich screener.

Logger construction in the project's structured format, plus conversion of
JSON/RPC shaped bundles into in-memory Log objects.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from dex.types import Log

from .constants import EntryKind
from .exceptions import DecodeError


# Logging utilities
def get_logger(
    name: str,
    level: Union[str, int] = logging.INFO,
    extra: Optional[Dict[str, Any]] = None,
) -> Union[logging.Logger, logging.LoggerAdapter]:
    """
    Get a structured logger with consistent formatting and extra context.

    Args:
        name: Logger name (typically __name__)
        level: Logging level
        extra: Additional context fields to include in all log messages

    Returns:
        Configured logger, or a LoggerAdapter carrying ``extra``
    """
    logger = logging.getLogger(name)

    if logger.level == logging.NOTSET:
        logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        format_str = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"

        if extra:
            extra_fields = " | ".join([f"{k}=%(extra_{k})s" for k in extra.keys()])
            format_str = format_str.replace(
                " | %(message)s", f" | {extra_fields} | %(message)s"
            )

        handler.setFormatter(logging.Formatter(format_str, datefmt="%H:%M:%S"))
        logger.addHandler(handler)

    if extra:
        return logging.LoggerAdapter(
            logger, {"extra_" + k: v for k, v in extra.items()}
        )
    return logger


# Bundle input utilities
def bundle_from_json(raw: Any) -> List[List[Log]]:
    """
    Convert a JSON-shaped bundle into Log objects.

    Args:
        raw: List of transactions, each a list of log mappings with
            'address', 'topics' and 'data' hex fields

    Returns:
        Bundle as a list of transactions

    Raises:
        DecodeError: If the structure or any log is malformed
    """
    if not isinstance(raw, list):
        raise DecodeError("Bundle must be a list of transactions")

    bundle = []
    for tx_index, tx in enumerate(raw):
        if not isinstance(tx, list):
            raise DecodeError(
                f"Transaction {tx_index} must be a list of logs",
                details={"tx_index": tx_index},
            )
        logs = []
        for log_index, entry in enumerate(tx):
            if not isinstance(entry, dict):
                raise DecodeError(
                    f"Log {log_index} of transaction {tx_index} must be an object",
                    details={"tx_index": tx_index, "log_index": log_index},
                )
            logs.append(Log.from_rpc(entry))
        bundle.append(logs)
    return bundle


def load_bundle_file(path: Union[str, Path]) -> List[List[Log]]:
    """Read a bundle from a JSON file (see bundle_from_json)."""
    path = Path(path)
    try:
        with open(path, "r") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Failed to parse bundle JSON {path}: {e}") from e
    return bundle_from_json(raw)


def format_sequence(entries: Sequence[EntryKind]) -> str:
    """Compact text form of a pool sequence, e.g. 'B B L S'."""
    symbols = {
        EntryKind.BUY: "B",
        EntryKind.SELL: "S",
        EntryKind.LIQUIDITY_CHANGE: "L",
    }
    return " ".join(symbols[e] for e in entries)
