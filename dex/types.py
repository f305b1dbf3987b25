"""
Core data types for bundle log decoding.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Sequence, Tuple, Union

from hexbytes import HexBytes
from web3 import Web3

ADDRESS_SIZE = 20
POOL_ID_SIZE = 32
TOPIC_SIZE = 32
MAX_TOPICS = 4

BytesLike = Union[bytes, bytearray, str]


def _to_bytes(value: BytesLike) -> bytes:
    # HexBytes accepts both raw bytes and 0x-prefixed hex strings
    return bytes(HexBytes(value))


@dataclass(frozen=True)
class Log:
    """
    A raw log record emitted while executing a transaction.

    Attributes:
        address: 20-byte address of the emitting contract
        topics: Ordered 32-byte topics; topics[0] is the event signature
        data: Opaque non-indexed payload
    """

    address: bytes
    topics: Tuple[bytes, ...] = ()
    data: bytes = b""

    def __post_init__(self):
        address = bytes(self.address)
        topics = tuple(bytes(t) for t in self.topics)
        if len(address) != ADDRESS_SIZE:
            raise ValueError(f"Log address must be {ADDRESS_SIZE} bytes, got {len(address)}")
        if len(topics) > MAX_TOPICS:
            raise ValueError(f"Log has {len(topics)} topics, at most {MAX_TOPICS} allowed")
        for topic in topics:
            if len(topic) != TOPIC_SIZE:
                raise ValueError(f"Log topic must be {TOPIC_SIZE} bytes, got {len(topic)}")
        object.__setattr__(self, "address", address)
        object.__setattr__(self, "topics", topics)
        object.__setattr__(self, "data", bytes(self.data))

    @property
    def signature(self) -> bytes:
        """Leading topic, or empty bytes for anonymous logs."""
        return self.topics[0] if self.topics else b""

    @classmethod
    def from_rpc(cls, raw: Mapping[str, Any]) -> "Log":
        """
        Build a Log from a web3/JSON-RPC style log mapping.

        Args:
            raw: Mapping with 'address', 'topics' and 'data' entries, each
                given as hex strings or HexBytes

        Returns:
            Log instance

        Raises:
            DecodeError: If a field is missing or not valid hex
        """
        from sandwich_guard.exceptions import DecodeError

        try:
            return cls(
                address=_to_bytes(raw["address"]),
                topics=tuple(_to_bytes(t) for t in raw.get("topics", [])),
                data=_to_bytes(raw.get("data", b"")),
            )
        except KeyError as e:
            raise DecodeError(f"Log missing field {e}", details={"log": dict(raw)}) from e
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Invalid log encoding: {e}", details={"log": dict(raw)}) from e


Transaction = Sequence[Log]
Bundle = Sequence[Transaction]


@dataclass(frozen=True, order=True)
class PoolId:
    """
    Canonical 32-byte pool identifier.

    20-byte pool addresses are stored zero-extended on the left so that every
    decoder produces comparable values regardless of the source protocol.
    """

    raw: bytes = field(default=bytes(POOL_ID_SIZE))

    def __post_init__(self):
        raw = bytes(self.raw)
        if len(raw) != POOL_ID_SIZE:
            raise ValueError(f"PoolId must be {POOL_ID_SIZE} bytes, got {len(raw)}")
        object.__setattr__(self, "raw", raw)

    @classmethod
    def from_address(cls, address: bytes) -> "PoolId":
        if len(address) != ADDRESS_SIZE:
            raise ValueError(f"Address must be {ADDRESS_SIZE} bytes, got {len(address)}")
        return cls(bytes(POOL_ID_SIZE - ADDRESS_SIZE) + bytes(address))

    @classmethod
    def from_bytes32(cls, value: bytes) -> "PoolId":
        return cls(bytes(value))

    @property
    def is_address(self) -> bool:
        """True when the identifier is a zero-extended 20-byte address."""
        return not any(self.raw[: POOL_ID_SIZE - ADDRESS_SIZE])

    def to_address(self) -> bytes:
        return self.raw[POOL_ID_SIZE - ADDRESS_SIZE :]

    def hex(self) -> str:
        """Display form: checksummed address, or full 32-byte hex."""
        if self.is_address:
            return Web3.to_checksum_address(self.to_address())
        return "0x" + self.raw.hex()

    def __str__(self) -> str:
        return self.hex()


class SwapDirection(Enum):
    """Token flow of a swap relative to the pool's token ordering."""

    ZERO_TO_ONE = "zero_to_one"
    ONE_TO_ZERO = "one_to_zero"


@dataclass(frozen=True)
class SwapEvent:
    """
    Normalized swap.

    Attributes:
        pool_id: Pool the swap executed against
        direction: Token0 -> token1 or token1 -> token0
        amount_in: Input amount (0 when the protocol does not expose it)
        amount_out: Output amount (0 when the protocol does not expose it)

    Amounts are non-negative for every family except Uniswap V4, whose
    in/out are taken straight from the signed pool deltas and can be
    negative (e.g. amount0 == 0, amount1 > 0 gives amount_in == -amount1).
    The pattern checks only use direction.
    """

    pool_id: PoolId
    direction: SwapDirection
    amount_in: int = 0
    amount_out: int = 0

    @property
    def is_token0_to_1(self) -> bool:
        return self.direction is SwapDirection.ZERO_TO_ONE


@dataclass(frozen=True)
class LiquidityChange:
    """Mint, burn or modify-liquidity against a pool (no direction, no amounts)."""

    pool_id: PoolId

    amount_in = 0
    amount_out = 0


NormalizedEvent = Union[SwapEvent, LiquidityChange]
