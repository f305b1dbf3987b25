"""Tests for the 32-byte word codec."""

import pytest
from eth_abi import decode as abi_decode
from hypothesis import given
from hypothesis import strategies as st

from dex.codec import (
    address_from_word,
    decode_signed256,
    decode_unsigned,
    encode_int256,
    encode_uint256,
    word,
)


def test_decode_unsigned_big_endian():
    assert decode_unsigned(b"\x01\x00") == 256
    assert decode_unsigned(bytes(32)) == 0
    assert decode_unsigned(b"\xff" * 32) == 2**256 - 1


def test_decode_unsigned_rejects_empty():
    with pytest.raises(ValueError):
        decode_unsigned(b"")


@pytest.mark.parametrize(
    "data,expected",
    [
        (bytes(32), 0),
        (b"\x7f" + b"\xff" * 31, 2**255 - 1),
        (b"\x80" + bytes(31), -(2**255)),
        (b"\xff" * 32, -1),
    ],
)
def test_decode_signed256_boundaries(data, expected):
    assert decode_signed256(data) == expected


def test_decode_signed256_requires_full_word():
    with pytest.raises(ValueError):
        decode_signed256(b"\xff" * 31)


@given(st.binary(min_size=32, max_size=32))
def test_decode_signed256_matches_twos_complement(data):
    value = decode_signed256(data)
    assert -(2**255) <= value < 2**255
    assert value % 2**256 == int.from_bytes(data, "big")
    assert (value < 0) == bool(data[0] & 0x80)


@given(st.integers(min_value=-(2**255), max_value=2**255 - 1))
def test_encode_int256_inverts_decode(value):
    assert decode_signed256(encode_int256(value)) == value


def test_encode_range_checks():
    with pytest.raises(ValueError):
        encode_uint256(-1)
    with pytest.raises(ValueError):
        encode_uint256(2**256)
    with pytest.raises(ValueError):
        encode_int256(2**255)
    assert encode_int256(-1) == b"\xff" * 32


def test_word_and_address_slicing():
    payload = encode_uint256(1) + encode_uint256(2)
    assert decode_unsigned(word(payload, 1)) == 2
    assert word(payload, 2) == b""

    padded = bytes(12) + b"\xab" * 20
    assert address_from_word(padded) == b"\xab" * 20


@given(st.binary(min_size=32, max_size=32))
def test_decoders_agree_with_eth_abi(data):
    assert decode_signed256(data) == abi_decode(["int256"], data)[0]
    assert decode_unsigned(data) == abi_decode(["uint256"], data)[0]
