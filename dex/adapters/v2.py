"""
Uniswap V2 style swap decoder (reserve-delta payload).

Swap(address indexed sender, uint256 amount0In, uint256 amount1In,
     uint256 amount0Out, uint256 amount1Out, address indexed to)

Direction is derived from the net token deltas seen by the caller rather than
from comparing the raw "in" amounts, so that swaps which route part of the
output back through the pair are still classified by their net effect.
"""

from typing import Optional

from ..codec import decode_unsigned, word
from ..types import Log, PoolId, SwapDirection, SwapEvent

SWAP_SIGNATURES = frozenset(
    {
        # Uniswap V2 / PancakeSwap V2
        bytes.fromhex("d78ad95fa46c994b6551d0da85fc275fe613ce37657fb8d5e3d130840159d822"),
        bytes.fromhex("606ecd02b3e3b4778f8e97b2e03351de14224efaa5fa64e62200afc9395c2499"),
    }
)

MIN_DATA_LENGTH = 128


def decode(log: Log) -> Optional[SwapEvent]:
    """
    Decode a V2 swap log.

    Args:
        log: Raw log whose signature is in SWAP_SIGNATURES

    Returns:
        SwapEvent keyed by the pair address, or None if the payload is short
    """
    if len(log.data) < MIN_DATA_LENGTH:
        return None

    amount0_in = decode_unsigned(word(log.data, 0))
    amount1_in = decode_unsigned(word(log.data, 1))
    amount0_out = decode_unsigned(word(log.data, 2))
    amount1_out = decode_unsigned(word(log.data, 3))

    delta0 = amount0_out - amount0_in
    delta1 = amount1_out - amount1_in

    if delta0 < 0 and delta1 > 0:
        direction = SwapDirection.ZERO_TO_ONE
    else:
        direction = SwapDirection.ONE_TO_ZERO

    # Input is the leg the pool gained, output the leg it paid out
    amount_in = -min(delta0, delta1, 0)
    amount_out = max(delta0, delta1, 0)

    return SwapEvent(
        pool_id=PoolId.from_address(log.address),
        direction=direction,
        amount_in=amount_in,
        amount_out=amount_out,
    )
