"""
Sandwich pattern detection over a bundle's per-pool event sequences.

Two patterns are checked per pool, each as an existence test over ordered
(not necessarily adjacent) triples i < j < k:

* swap sandwich: BUY, BUY ... SELL or SELL, SELL ... BUY
* liquidity sandwich: BUY ... LIQUIDITY_CHANGE ... SELL or the mirror image,
  only when the bundle contains a liquidity change at all

Both checks are single linear passes.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from dex.types import Bundle, PoolId

from .aggregator import PoolSequences, aggregate_bundle, bundle_transactions
from .config_schema import DetectorConfig
from .constants import MIN_SEQUENCE_LENGTH, EntryKind, PatternKind
from .exceptions import SandwichDetectedError
from .utils import format_sequence, get_logger

logger = get_logger(__name__)


def has_sandwich_pattern(entries: Sequence[EntryKind]) -> bool:
    """
    Check for two same-direction swaps followed later by an opposite one.

    Args:
        entries: A pool's swaps-only sequence (LIQUIDITY_CHANGE is ignored)

    Returns:
        True if BUY,BUY..SELL or SELL,SELL..BUY occurs in order
    """
    if len(entries) < MIN_SEQUENCE_LENGTH:
        return False

    buys = 0
    sells = 0
    for entry in entries:
        if entry is EntryKind.BUY:
            if sells >= 2:
                return True
            buys += 1
        elif entry is EntryKind.SELL:
            if buys >= 2:
                return True
            sells += 1
    return False


def has_liquidity_sandwich_pattern(entries: Sequence[EntryKind]) -> bool:
    """
    Check for a swap, a later liquidity change, then a later opposite swap.

    Args:
        entries: A pool's combined sequence

    Returns:
        True if BUY..LIQ..SELL or SELL..LIQ..BUY occurs in order
    """
    if len(entries) < MIN_SEQUENCE_LENGTH:
        return False

    seen_buy = seen_sell = False
    buy_then_liq = sell_then_liq = False
    for entry in entries:
        if entry is EntryKind.LIQUIDITY_CHANGE:
            buy_then_liq = buy_then_liq or seen_buy
            sell_then_liq = sell_then_liq or seen_sell
        elif entry is EntryKind.SELL:
            if buy_then_liq:
                return True
            seen_sell = True
        elif entry is EntryKind.BUY:
            if sell_then_liq:
                return True
            seen_buy = True
    return False


@dataclass(frozen=True)
class Verdict:
    """
    Outcome of screening one bundle.

    Attributes:
        pool: Implicated pool, or None when the bundle is clean
        pattern: Which check flagged the pool
    """

    pool: Optional[PoolId] = None
    pattern: Optional[PatternKind] = None

    @property
    def flagged(self) -> bool:
        return self.pool is not None

    @property
    def pool_hex(self) -> Optional[str]:
        return self.pool.hex() if self.pool is not None else None

    def __bool__(self) -> bool:
        return self.flagged


CLEAN = Verdict()


class SandwichDetector:
    """
    Screens bundles for sandwich patterns.

    Holds only immutable configuration, so one instance can screen
    independent bundles concurrently.
    """

    def __init__(self, config: Optional[DetectorConfig] = None):
        self.config = config or DetectorConfig()
        self._protocols = self.config.enabled_protocols

    def find(self, sequences: PoolSequences) -> Verdict:
        """
        Run both checks over already aggregated sequences.

        Every pool's swap check runs before any liquidity check, so a plain
        sandwich anywhere in the bundle is reported ahead of a liquidity one.
        """
        pools = sequences.pools(sort=self.config.sort_pools)

        for pool in pools:
            if has_sandwich_pattern(sequences.swaps.get(pool, ())):
                return Verdict(pool=pool, pattern=PatternKind.SWAP)

        if self.config.liquidity_check and sequences.has_liquidity_change:
            for pool in pools:
                if has_liquidity_sandwich_pattern(sequences.combined[pool]):
                    return Verdict(pool=pool, pattern=PatternKind.LIQUIDITY)

        return CLEAN

    def screen(self, bundle: Bundle) -> Verdict:
        """
        Screen a bundle.

        Args:
            bundle: Ordered transactions, each an ordered list of logs

        Returns:
            CLEAN, or a Verdict naming the first implicated pool
        """
        transactions = bundle_transactions(bundle)
        if len(transactions) < self.config.min_bundle_size:
            return CLEAN

        sequences = aggregate_bundle(transactions, self._protocols)
        verdict = self.find(sequences)

        if verdict.flagged:
            logger.info(
                f"Sandwich ({verdict.pattern.value}) on pool {verdict.pool_hex}: "
                f"{format_sequence(sequences.combined[verdict.pool])}"
            )
        else:
            logger.debug(f"Bundle of {len(transactions)} txs is clean")
        return verdict

    def check(self, bundle: Bundle) -> None:
        """
        Screen a bundle, raising if it contains a sandwich.

        Raises:
            SandwichDetectedError: With the implicated pool's display form
        """
        transactions = bundle_transactions(bundle)
        verdict = self.screen(transactions)
        if verdict.flagged:
            raise SandwichDetectedError(
                verdict.pool_hex,
                pattern=verdict.pattern.value,
                details={"pool": verdict.pool_hex, "bundle_size": len(transactions)},
            )


def screen_bundle(bundle: Bundle, config: Optional[DetectorConfig] = None) -> Verdict:
    """Screen a bundle with a one-off detector."""
    return SandwichDetector(config).screen(bundle)


def detect_sandwich_for_bundle(bundle: Bundle) -> None:
    """Raise SandwichDetectedError if the bundle contains a sandwich."""
    SandwichDetector().check(bundle)
