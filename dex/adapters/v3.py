"""
Uniswap V3 style swap decoder (signed-delta payload).

Swap(address indexed sender, address indexed recipient, int256 amount0,
     int256 amount1, uint160 sqrtPriceX96, uint128 liquidity, int24 tick)

Amounts are from the pool's point of view: positive means the pool received
the token.
"""

from typing import Optional

from ..codec import decode_signed256, word
from ..types import Log, PoolId, SwapDirection, SwapEvent

SWAP_SIGNATURES = frozenset(
    {
        # Uniswap V3
        bytes.fromhex("c42079f94a6350d7e6235f29174924f928cc2ac818eb64fed8004e115fbcca67"),
        # PancakeSwap V3
        bytes.fromhex("19b47279256b2a23a1665c810c8d55a1758940ee09377d4f8d26497a3577dc83"),
    }
)

MIN_DATA_LENGTH = 160


def decode(log: Log) -> Optional[SwapEvent]:
    """
    Decode a V3 swap log.

    Direction uses a signed comparison of the two deltas (amount0 > amount1
    means token0 went in). Equal deltas classify as ONE_TO_ZERO.
    """
    if len(log.data) < MIN_DATA_LENGTH:
        return None

    amount0 = decode_signed256(word(log.data, 0))
    amount1 = decode_signed256(word(log.data, 1))

    if amount0 > amount1:
        return SwapEvent(
            pool_id=PoolId.from_address(log.address),
            direction=SwapDirection.ZERO_TO_ONE,
            amount_in=abs(amount0),
            amount_out=abs(amount1),
        )

    return SwapEvent(
        pool_id=PoolId.from_address(log.address),
        direction=SwapDirection.ONE_TO_ZERO,
        amount_in=abs(amount1),
        amount_out=abs(amount0),
    )
