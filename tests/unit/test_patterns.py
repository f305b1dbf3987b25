"""Tests for the per-pool sandwich pattern checks."""

from itertools import combinations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sandwich_guard.constants import EntryKind
from sandwich_guard.detector import (
    has_liquidity_sandwich_pattern,
    has_sandwich_pattern,
)

B, S, L = EntryKind.BUY, EntryKind.SELL, EntryKind.LIQUIDITY_CHANGE


def brute_force_swap(entries):
    return any(
        (a, b, c) in ((B, B, S), (S, S, B)) for a, b, c in combinations(entries, 3)
    )


def brute_force_liquidity(entries):
    return any(
        (a, b, c) in ((B, L, S), (S, L, B)) for a, b, c in combinations(entries, 3)
    )


@pytest.mark.parametrize(
    "entries,expected",
    [
        ([B, B, S], True),
        ([S, S, B], True),
        ([S, B, S], False),
        ([B, S, B], False),
        ([B, S, B, S], True),
        ([B, S, S, B], True),
        ([B, S, B, B, S], True),
        ([B, B], False),
        ([], False),
        ([B, B, B], False),
    ],
)
def test_swap_pattern(entries, expected):
    assert has_sandwich_pattern(entries) is expected


@pytest.mark.parametrize(
    "entries,expected",
    [
        ([B, L, S], True),
        ([S, L, B], True),
        ([L, B, S], False),
        ([B, S, L], False),
        ([B, L, B], False),
        ([B, S, L, B], True),
        ([B, L], False),
    ],
)
def test_liquidity_pattern(entries, expected):
    assert has_liquidity_sandwich_pattern(entries) is expected


@given(st.lists(st.sampled_from([B, S]), max_size=12))
def test_swap_pattern_matches_triple_enumeration(entries):
    assert has_sandwich_pattern(entries) == brute_force_swap(entries)


@given(st.lists(st.sampled_from([B, S, L]), max_size=12))
def test_liquidity_pattern_matches_triple_enumeration(entries):
    assert has_liquidity_sandwich_pattern(entries) == brute_force_liquidity(entries)
