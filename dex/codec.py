"""
Numeric codec for 32-byte EVM words.

Log payloads are sequences of big-endian 32-byte words. Unsigned fields are a
plain big-endian read; signed fields (int256) use two's complement over the
full 256-bit field. Encoding goes through eth_abi.
"""

from eth_abi import encode as abi_encode
from eth_abi.exceptions import EncodingError

WORD_SIZE = 32

_TWO_256 = 1 << 256


def decode_unsigned(data: bytes) -> int:
    """
    Decode a big-endian byte span as an unsigned integer.

    Args:
        data: Non-empty byte span (callers pass fixed 32-byte slices)

    Returns:
        Unsigned integer value

    Raises:
        ValueError: If data is empty
    """
    if not data:
        raise ValueError("Cannot decode an empty byte span")
    return int.from_bytes(data, "big")


def decode_signed256(data: bytes) -> int:
    """
    Decode a 32-byte word as a two's-complement int256.

    Args:
        data: Exactly 32 bytes

    Returns:
        Signed integer in [-2**255, 2**255 - 1]

    Raises:
        ValueError: If data is not 32 bytes long
    """
    if len(data) != WORD_SIZE:
        raise ValueError(f"int256 word must be {WORD_SIZE} bytes, got {len(data)}")

    value = int.from_bytes(data, "big")
    if data[0] & 0x80:
        value -= _TWO_256
    return value


def encode_uint256(value: int) -> bytes:
    """Encode a non-negative integer as a 32-byte big-endian word."""
    try:
        return abi_encode(["uint256"], [value])
    except EncodingError as e:
        raise ValueError(f"uint256 out of range: {value}") from e


def encode_int256(value: int) -> bytes:
    """Encode a signed integer as a 32-byte two's-complement word."""
    try:
        return abi_encode(["int256"], [value])
    except EncodingError as e:
        raise ValueError(f"int256 out of range: {value}") from e


def word(data: bytes, index: int) -> bytes:
    """Return the index-th 32-byte word of a payload (caller checks length)."""
    start = index * WORD_SIZE
    return data[start : start + WORD_SIZE]


def address_from_word(data: bytes) -> bytes:
    """Return the low-order 20 bytes of an ABI-encoded address word."""
    return bytes(data[-20:])
