"""
Protocol decoders turning raw logs into normalized swap/liquidity events.

Every decoder is a pure ``decode(log) -> Optional[event]`` function that
returns None when the log does not meet the protocol's minimum topic count or
payload length.
"""

from . import dodo, four_meme, liquidity, v2, v3, v4

__all__ = ["dodo", "four_meme", "liquidity", "v2", "v3", "v4"]
