"""
Liquidity mutation decoder (mint, burn, modify-liquidity).

These events change a pool's reserves outside of a swap. They are reported as
LiquidityChange markers so the detector can spot swap/liquidity/swap brackets.
"""

from typing import Optional

from ..types import Log, LiquidityChange, PoolId
from .v4 import pool_id_from_topic

# Mint(address indexed sender, uint256 amount0, uint256 amount1)
UNISWAP_V2_MINT = bytes.fromhex(
    "4c209b5fc8ad50758f13e2e1088ba56a560dff690a1c6fef26394f4c03821c4f"
)
# Burn(address indexed sender, uint256 amount0, uint256 amount1, address indexed to)
UNISWAP_V2_BURN = bytes.fromhex(
    "dccd412f0b1252819cb1fd330b93224ca42612892bb3f4f789976e6d81936496"
)
# Mint(address sender, address indexed owner, int24 indexed tickLower,
#      int24 indexed tickUpper, uint128 amount, uint256 amount0, uint256 amount1)
UNISWAP_V3_MINT = bytes.fromhex(
    "7a53080ba414158be7ec69b987b5fb7d07dee101fe85488f0853ae16239d0bde"
)
# Burn(address indexed owner, int24 indexed tickLower, int24 indexed tickUpper,
#      uint128 amount, uint256 amount0, uint256 amount1)
UNISWAP_V3_BURN = bytes.fromhex(
    "0c396cd989a39f4459b5fa1aed6a9a8dcdbc45908acfd67e028cd568da98982c"
)
# ModifyLiquidity(PoolId indexed id, address indexed sender, int24 tickLower,
#                 int24 tickUpper, int256 liquidityDelta, bytes32 salt)
UNISWAP_V4_MODIFY_LIQUIDITY = bytes.fromhex(
    "f208f4912782fd25c7f114ca3723a2d5dd6f3bcc3ac8db5af63baa85f711d5ec"
)

LIQUIDITY_SIGNATURES = frozenset(
    {
        UNISWAP_V2_MINT,
        UNISWAP_V2_BURN,
        UNISWAP_V3_MINT,
        UNISWAP_V3_BURN,
        UNISWAP_V4_MODIFY_LIQUIDITY,
    }
)

MIN_TOPIC_COUNT = 2
MIN_DATA_LENGTH = 64


def decode(log: Log) -> Optional[LiquidityChange]:
    if len(log.topics) < MIN_TOPIC_COUNT or len(log.data) < MIN_DATA_LENGTH:
        return None

    if log.topics[0] == UNISWAP_V4_MODIFY_LIQUIDITY:
        return LiquidityChange(pool_id=pool_id_from_topic(log.topics[1]))
    return LiquidityChange(pool_id=PoolId.from_address(log.address))
