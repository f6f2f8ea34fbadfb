"""Collection helpers shared by the matching engine."""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from itertools import islice
from typing import Any, TypeVar

T = TypeVar("T")


def chunked(size: int, items: Iterable[T]) -> Iterator[list[T]]:
    """Lazily split ``items`` into lists of ``size`` elements.

    Args:
        size: Group size; values below one produce no groups
        items: Any finite or unbounded iterable

    Returns:
        Generator of lists; the last one may be shorter than ``size``

    Examples:
        >>> list(chunked(2, [10, 11, 12]))
        [[10, 11], [12]]
        >>> list(chunked(-1, [10, 11, 12]))
        []
    """
    if size <= 0:
        return
    iterator = iter(items)
    while True:
        group = list(islice(iterator, size))
        if not group:
            return
        yield group


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_container(value: Any) -> bool:
    return is_array(value) or is_mapping(value)


def is_empty(value: Any) -> bool:
    """Return True for a list, tuple or mapping without keys.

    Emptiness is judged by key count alone, so ``[]`` and ``{}`` are
    interchangeable wherever this check is used.

    Examples:
        >>> is_empty([]), is_empty({}), is_empty("")
        (True, True, False)
    """
    return is_container(value) and len(value) == 0


def keys_of(value: list | tuple | Mapping) -> Iterable[Any]:
    """Indices of a sequence or keys of a mapping."""
    if is_mapping(value):
        return value.keys()
    return range(len(value))


def strict_equals(a: Any, b: Any) -> bool:
    """Scalar equality that keeps booleans apart from numbers.

    Examples:
        >>> strict_equals(1, 1.0)
        True
        >>> strict_equals(1, True)
        False
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    return bool(a == b)
