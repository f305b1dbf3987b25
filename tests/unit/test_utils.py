"""Tests for bundle conversion and formatting helpers."""

import json

import pytest
from hexbytes import HexBytes

from dex.types import Log, PoolId
from sandwich_guard.constants import EntryKind
from sandwich_guard.exceptions import DecodeError
from sandwich_guard.utils import bundle_from_json, format_sequence, load_bundle_file

ADDRESS = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
TOPIC = "0x" + "ab" * 32


def rpc_log(**overrides):
    log = {"address": ADDRESS, "topics": [TOPIC], "data": "0x" + "00" * 64}
    log.update(overrides)
    return log


def test_log_from_rpc_hex_strings():
    log = Log.from_rpc(rpc_log())

    assert log.address == bytes.fromhex(ADDRESS[2:])
    assert log.topics == (bytes.fromhex("ab" * 32),)
    assert log.data == bytes(64)
    assert log.signature == bytes.fromhex("ab" * 32)


def test_log_from_rpc_hexbytes():
    raw = {"address": HexBytes(ADDRESS), "topics": [HexBytes(TOPIC)], "data": HexBytes("0x")}
    log = Log.from_rpc(raw)

    assert log.data == b""
    assert len(log.topics) == 1


@pytest.mark.parametrize(
    "raw",
    [
        {"topics": [TOPIC], "data": "0x"},
        rpc_log(address="0x1234"),
        rpc_log(topics=["0x" + "ab" * 31]),
        rpc_log(topics=[TOPIC] * 5),
        rpc_log(data="0xzz"),
    ],
)
def test_log_from_rpc_rejects_malformed(raw):
    with pytest.raises(DecodeError):
        Log.from_rpc(raw)


def test_anonymous_log_has_empty_signature():
    assert Log(address=bytes(20)).signature == b""


def test_bundle_from_json():
    bundle = bundle_from_json([[rpc_log(), rpc_log()], [], [rpc_log()]])

    assert [len(tx) for tx in bundle] == [2, 0, 1]
    assert all(isinstance(log, Log) for tx in bundle for log in tx)


@pytest.mark.parametrize("raw", [{}, [{}], [[1]]])
def test_bundle_from_json_rejects_bad_shapes(raw):
    with pytest.raises(DecodeError):
        bundle_from_json(raw)


def test_load_bundle_file(tmp_path):
    path = tmp_path / "bundle.json"
    path.write_text(json.dumps([[rpc_log()]]))
    assert len(load_bundle_file(path)) == 1

    path.write_text("not json")
    with pytest.raises(DecodeError):
        load_bundle_file(path)


def test_format_sequence():
    entries = [EntryKind.BUY, EntryKind.LIQUIDITY_CHANGE, EntryKind.SELL]
    assert format_sequence(entries) == "B L S"


def test_pool_id_display_forms():
    short = PoolId.from_address(bytes.fromhex(ADDRESS[2:]))
    full = PoolId.from_bytes32(b"\x01" + bytes(31))

    assert short.is_address
    assert str(short) == ADDRESS
    assert not full.is_address
    assert full.hex() == "0x01" + "00" * 31


def test_pool_id_size_checked():
    with pytest.raises(ValueError):
        PoolId(bytes(31))
    with pytest.raises(ValueError):
        PoolId.from_address(bytes(32))
