"""
Decoder registry: signature hash -> protocol -> decode function.

The decoder set is a fixed table. Adding a protocol means adding a Protocol
member, its signatures and its decode function below.
"""

import logging
from enum import Enum
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional

from .adapters import dodo, four_meme, liquidity, v2, v3, v4
from .types import Log, NormalizedEvent

logger = logging.getLogger(__name__)


class Protocol(Enum):
    """Decoder families known to the registry."""

    UNISWAP_V2 = "uniswap_v2"
    UNISWAP_V3 = "uniswap_v3"
    UNISWAP_V4 = "uniswap_v4"
    DODO = "dodo"
    FOUR_MEME = "four_meme"
    LIQUIDITY_CHANGE = "liquidity_change"


Decoder = Callable[[Log], Optional[NormalizedEvent]]

DECODERS: Dict[Protocol, Decoder] = {
    Protocol.UNISWAP_V2: v2.decode,
    Protocol.UNISWAP_V3: v3.decode,
    Protocol.UNISWAP_V4: v4.decode,
    Protocol.DODO: dodo.decode,
    Protocol.FOUR_MEME: four_meme.decode,
    Protocol.LIQUIDITY_CHANGE: liquidity.decode,
}

_PROTOCOL_SIGNATURES: Dict[Protocol, FrozenSet[bytes]] = {
    Protocol.UNISWAP_V2: v2.SWAP_SIGNATURES,
    Protocol.UNISWAP_V3: v3.SWAP_SIGNATURES,
    Protocol.UNISWAP_V4: v4.SWAP_SIGNATURES,
    Protocol.DODO: dodo.SWAP_SIGNATURES,
    Protocol.FOUR_MEME: four_meme.SWAP_SIGNATURES,
    Protocol.LIQUIDITY_CHANGE: liquidity.LIQUIDITY_SIGNATURES,
}


def _build_signature_table() -> Dict[bytes, Protocol]:
    table: Dict[bytes, Protocol] = {}
    for protocol, signatures in _PROTOCOL_SIGNATURES.items():
        for signature in signatures:
            if signature in table:
                raise ValueError(
                    f"Signature 0x{signature.hex()} registered for both "
                    f"{table[signature].value} and {protocol.value}"
                )
            table[signature] = protocol
    return table


SIGNATURE_TABLE: Dict[bytes, Protocol] = _build_signature_table()


def protocol_for(signature: bytes) -> Optional[Protocol]:
    """Return the protocol owning a signature hash, if any."""
    return SIGNATURE_TABLE.get(bytes(signature))


def known_signatures(protocols: Optional[Iterable[Protocol]] = None) -> FrozenSet[bytes]:
    """All registered signatures, optionally limited to some protocols."""
    if protocols is None:
        return frozenset(SIGNATURE_TABLE)
    wanted = set(protocols)
    return frozenset(sig for sig, proto in SIGNATURE_TABLE.items() if proto in wanted)


def decode_log(
    log: Log, protocols: Optional[FrozenSet[Protocol]] = None
) -> Optional[NormalizedEvent]:
    """
    Decode a single log with the decoder owning its signature.

    Args:
        log: Raw log
        protocols: If given, only these protocols are decoded

    Returns:
        Normalized event, or None for anonymous, unknown, disabled or
        malformed logs
    """
    if not log.topics:
        return None

    protocol = SIGNATURE_TABLE.get(log.topics[0])
    if protocol is None:
        return None
    if protocols is not None and protocol not in protocols:
        return None

    event = DECODERS[protocol](log)
    if event is None:
        logger.debug(
            f"Skipping malformed {protocol.value} log from 0x{log.address.hex()}: "
            f"{len(log.topics)} topics, {len(log.data)} data bytes"
        )
    return event


def parse_swap_events(
    logs: Iterable[Log], protocols: Optional[FrozenSet[Protocol]] = None
) -> List[NormalizedEvent]:
    """
    Extract normalized events from one transaction's logs, in emission order.

    Args:
        logs: Logs of a single transaction
        protocols: Optional protocol filter (see decode_log)

    Returns:
        Recognized events; unrecognized logs contribute nothing
    """
    events: List[NormalizedEvent] = []
    for log in logs:
        event = decode_log(log, protocols)
        if event is not None:
            events.append(event)
    return events
