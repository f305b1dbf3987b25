"""
DODO swap decoder.

DODOSwap(address fromToken, address toToken, uint256 fromAmount,
         uint256 toAmount, address trader, address receiver)

The event carries no indexed fields and is emitted by the proxy rather than a
per-pair contract, so the pool is identified by the token pair itself.
"""

from typing import Optional, Tuple

from web3 import Web3

from ..codec import address_from_word, decode_unsigned, word
from ..types import Log, PoolId, SwapDirection, SwapEvent

SWAP_SIGNATURE = bytes(
    Web3.keccak(text="DODOSwap(address,address,uint256,uint256,address,address)")
)
SWAP_SIGNATURES = frozenset({SWAP_SIGNATURE})

TOPIC_COUNT = 1
MIN_DATA_LENGTH = 128

_TOKEN_PREFIX = 10


def sort_tokens(token_a: bytes, token_b: bytes) -> Tuple[bytes, bytes]:
    """Order two token addresses by numeric value."""
    if int.from_bytes(token_a, "big") < int.from_bytes(token_b, "big"):
        return token_a, token_b
    return token_b, token_a


def pair_pool_id(token_a: bytes, token_b: bytes) -> PoolId:
    """
    Derive a pseudo pool address from a token pair.

    The first 10 bytes of the lower token followed by the first 10 bytes of
    the higher one; argument order does not matter.
    """
    low, high = sort_tokens(token_a, token_b)
    return PoolId.from_address(low[:_TOKEN_PREFIX] + high[:_TOKEN_PREFIX])


def decode(log: Log) -> Optional[SwapEvent]:
    if len(log.topics) != TOPIC_COUNT or len(log.data) < MIN_DATA_LENGTH:
        return None

    from_token = address_from_word(word(log.data, 0))
    to_token = address_from_word(word(log.data, 1))
    amount_from = decode_unsigned(word(log.data, 2))
    amount_to = decode_unsigned(word(log.data, 3))

    from_is_token0 = int.from_bytes(from_token, "big") < int.from_bytes(to_token, "big")

    if from_is_token0:
        direction = SwapDirection.ZERO_TO_ONE
        amount_in, amount_out = amount_from, amount_to
    else:
        direction = SwapDirection.ONE_TO_ZERO
        amount_in, amount_out = amount_to, amount_from

    return SwapEvent(
        pool_id=pair_pool_id(from_token, to_token),
        direction=direction,
        amount_in=amount_in,
        amount_out=amount_out,
    )
