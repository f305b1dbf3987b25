"""
Uniswap V4 style swap decoder (singleton pool manager, id-addressed pools).

Swap(PoolId indexed id, address indexed sender, int128 amount0, int128 amount1,
     uint160 sqrtPriceX96, uint128 liquidity, int24 tick, uint24 fee)

All pools share the manager contract, so the pool is identified by topic[1].
The 32-byte id is reduced to its first 20 bytes so it compares with the
address-keyed identifiers of the other decoders.
"""

from typing import Optional

from ..codec import decode_signed256, word
from ..types import ADDRESS_SIZE, Log, PoolId, SwapDirection, SwapEvent

SWAP_SIGNATURES = frozenset(
    {
        # Uniswap V4
        bytes.fromhex("40e9cecb9f5f1f1c5b9c97dec2917b7ee92e57ba5563708daca94dd84ad7112f"),
        # PancakeSwap Infinity CL
        bytes.fromhex("04206ad2b7c0f463bff3dd4f33c5735b0f2957a351e4f79763a4fa9e775dd237"),
    }
)

TOPIC_COUNT = 3
MIN_DATA_LENGTH = 64


def pool_id_from_topic(topic: bytes) -> PoolId:
    """Reduce a 32-byte pool id topic to its leading 20 bytes."""
    return PoolId.from_address(bytes(topic[:ADDRESS_SIZE]))


def decode(log: Log) -> Optional[SwapEvent]:
    if len(log.topics) != TOPIC_COUNT or len(log.data) < MIN_DATA_LENGTH:
        return None

    amount0 = decode_signed256(word(log.data, 0))
    amount1 = decode_signed256(word(log.data, 1))

    # amount0 > 0: token0 enters the pool
    zero_for_one = amount0 > 0

    return SwapEvent(
        pool_id=pool_id_from_topic(log.topics[1]),
        direction=SwapDirection.ZERO_TO_ONE if zero_for_one else SwapDirection.ONE_TO_ZERO,
        amount_in=amount0 if zero_for_one else -amount1,
        amount_out=-amount0 if amount0 < 0 else amount1,
    )
