"""
four.meme bonding-curve trade decoder.

Buys and sells are separate events; neither exposes amounts in a form we
normalize, so only the token and the side are reported.
"""

from typing import Optional

from ..codec import address_from_word, word
from ..types import Log, PoolId, SwapDirection, SwapEvent

BUY_SIGNATURE = bytes.fromhex(
    "7db52723a3b2cdd6164364b3b766e65e540d7be48ffa89582956d8eaebe62942"
)
SELL_SIGNATURE = bytes.fromhex(
    "0a5575b3648bae2210cee56bf33254cc1ddfbc7bf637c0af2ac18b14fb1bae19"
)
SWAP_SIGNATURES = frozenset({BUY_SIGNATURE, SELL_SIGNATURE})

TOPIC_COUNT = 1
MIN_DATA_LENGTH = 32


def decode(log: Log) -> Optional[SwapEvent]:
    if len(log.topics) != TOPIC_COUNT or len(log.data) < MIN_DATA_LENGTH:
        return None

    token = address_from_word(word(log.data, 0))
    is_buy = log.topics[0] == BUY_SIGNATURE

    return SwapEvent(
        pool_id=PoolId.from_address(token),
        direction=SwapDirection.ZERO_TO_ONE if is_buy else SwapDirection.ONE_TO_ZERO,
    )
