"""Tests for :mod:`matchcase.engine.utils`."""

from __future__ import annotations

import itertools
from collections.abc import Iterator

import pytest

from matchcase.engine.utils import chunked, is_empty, keys_of, strict_equals


def test_chunked_is_lazy_generator() -> None:
    groups = chunked(1, [10, 11, 12])
    assert isinstance(groups, Iterator)
    assert not isinstance(groups, list)


@pytest.mark.parametrize(
    "size,items,expected",
    [
        (1, [10, 11], [[10], [11]]),
        (2, [10, 11, 12], [[10, 11], [12]]),
        (2, [10, 11, 12, 13], [[10, 11], [12, 13]]),
        (3, [10, 11, 12, 13], [[10, 11, 12], [13]]),
        (3, [10, 11, 12, 13, 14, 15, 16, 17], [[10, 11, 12], [13, 14, 15], [16, 17]]),
        (3, [10], [[10]]),
        (2, [], []),
        (-1, [10, 11, 12], []),
        (0, [10, 11, 12], []),
    ],
)
def test_chunked_groups(size: int, items: list[int], expected: list[list[int]]) -> None:
    assert list(chunked(size, items)) == expected


def test_chunked_does_not_exhaust_unbounded_source() -> None:
    groups = chunked(2, itertools.count())
    assert next(groups) == [0, 1]
    assert next(groups) == [2, 3]


def test_is_empty_treats_sequences_and_mappings_alike() -> None:
    assert is_empty([])
    assert is_empty(())
    assert is_empty({})
    assert not is_empty([0])
    assert not is_empty("")
    assert not is_empty(0)
    assert not is_empty(None)


def test_keys_of() -> None:
    assert list(keys_of(["a", "b"])) == [0, 1]
    assert list(keys_of({"x": 1})) == ["x"]


def test_strict_equals_keeps_bools_apart() -> None:
    assert strict_equals(1, 1)
    assert strict_equals(1, 1.0)
    assert strict_equals("a", "a")
    assert not strict_equals(1, True)
    assert not strict_equals(False, 0)
    assert not strict_equals(False, None)
    assert strict_equals(None, None)
