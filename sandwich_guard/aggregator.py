"""
Per-pool aggregation of normalized events across a bundle.

Events are appended in strict bundle order: transaction order, then log order
within the transaction. Two views are kept per pool: a swaps-only sequence for
the plain sandwich check and a combined sequence that also places liquidity
changes at their true position.

Malformed input never raises here: transactions that are not lists of logs and
records that are neither Log objects nor RPC-style log mappings are skipped.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional

from dex.registry import Protocol, parse_swap_events
from dex.types import Bundle, LiquidityChange, Log, NormalizedEvent, PoolId

from .constants import EntryKind
from .exceptions import DecodeError
from .utils import get_logger

logger = get_logger(__name__)


def classify(event: NormalizedEvent) -> EntryKind:
    """Map a normalized event onto BUY / SELL / LIQUIDITY_CHANGE."""
    if isinstance(event, LiquidityChange):
        return EntryKind.LIQUIDITY_CHANGE
    return EntryKind.BUY if event.is_token0_to_1 else EntryKind.SELL


@dataclass
class PoolSequences:
    """
    Ordered per-pool entries for one bundle.

    Attributes:
        swaps: Pool -> BUY/SELL entries only
        combined: Pool -> BUY/SELL/LIQUIDITY_CHANGE entries
        has_liquidity_change: True if any pool saw a liquidity change
        event_count: Number of recognized events in the bundle
    """

    swaps: Dict[PoolId, List[EntryKind]] = field(default_factory=dict)
    combined: Dict[PoolId, List[EntryKind]] = field(default_factory=dict)
    has_liquidity_change: bool = False
    event_count: int = 0

    def add(self, event: NormalizedEvent) -> None:
        kind = classify(event)
        self.event_count += 1
        self.combined.setdefault(event.pool_id, []).append(kind)
        if kind is EntryKind.LIQUIDITY_CHANGE:
            self.has_liquidity_change = True
        else:
            self.swaps.setdefault(event.pool_id, []).append(kind)

    def pools(self, sort: bool = False) -> List[PoolId]:
        """Pools in first-seen order, or byte order when sort is True."""
        pools = list(self.combined)
        return sorted(pools) if sort else pools


def _is_collection(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, Mapping))


def bundle_transactions(bundle: Any) -> List[Any]:
    """Materialize a bundle as a list of transactions; non-lists become empty."""
    if not _is_collection(bundle):
        if bundle is not None:
            logger.debug(f"Ignoring bundle of type {type(bundle).__name__}")
        return []
    return list(bundle)


def transaction_logs(tx: Any, tx_index: int = 0) -> List[Log]:
    """
    Collect the usable logs of one transaction.

    Log objects pass through, RPC-style mappings are converted with
    Log.from_rpc, anything else is skipped.

    Args:
        tx: Transaction entry from a bundle
        tx_index: Position in the bundle, for log messages

    Returns:
        Logs in emission order (empty for a malformed transaction)
    """
    if not _is_collection(tx):
        logger.debug(f"Skipping transaction {tx_index}: not a list of logs ({type(tx).__name__})")
        return []

    logs = []
    for log_index, entry in enumerate(tx):
        if isinstance(entry, Log):
            logs.append(entry)
        elif isinstance(entry, Mapping):
            try:
                logs.append(Log.from_rpc(entry))
            except DecodeError as e:
                logger.debug(f"Skipping log {log_index} of transaction {tx_index}: {e}")
        else:
            logger.debug(
                f"Skipping log {log_index} of transaction {tx_index}: "
                f"unsupported type {type(entry).__name__}"
            )
    return logs


def aggregate_bundle(
    bundle: Bundle, protocols: Optional[FrozenSet[Protocol]] = None
) -> PoolSequences:
    """
    Build per-pool sequences for a bundle.

    Args:
        bundle: Ordered transactions, each an ordered list of logs
        protocols: Optional protocol filter passed to the dispatcher

    Returns:
        Fresh PoolSequences for this bundle
    """
    sequences = PoolSequences()
    for tx_index, tx in enumerate(bundle_transactions(bundle)):
        for event in parse_swap_events(transaction_logs(tx, tx_index), protocols):
            sequences.add(event)

    logger.debug(
        f"Aggregated {sequences.event_count} events across {len(sequences.combined)} pools "
        f"(liquidity_change={sequences.has_liquidity_change})"
    )
    return sequences
