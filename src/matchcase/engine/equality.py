"""Structural equality that tolerates self-referential containers."""
from __future__ import annotations

from typing import Any

from .utils import is_container, keys_of, strict_equals

_Ancestors = tuple[tuple[Any, Any], ...]


def _paired_ancestor(node: Any, ancestors: _Ancestors) -> tuple[Any, Any] | None:
    for pair in ancestors:
        if pair[0] is node:
            return pair
    return None


def _deep_equals(a: Any, b: Any, ancestors: _Ancestors) -> bool:
    if a is b:
        return True
    if not (is_container(a) and is_container(b)):
        return strict_equals(a, b)

    a_keys = set(keys_of(a))
    b_keys = set(keys_of(b))
    if a_keys != b_keys:
        return False

    parents = ((a, b), *ancestors)
    for key in keys_of(a):
        child = a[key]
        seen = _paired_ancestor(child, ancestors)
        if seen is not None:
            # a loops back to an ancestor: b must loop back to that ancestor's partner
            if not _deep_equals(b[key], seen[1], ()):
                return False
        elif not _deep_equals(child, b[key], parents):
            return False
    return True


def deep_equals(a: Any, b: Any) -> bool:
    """Compare two values structurally.

    Lists, tuples and mappings are equal when they expose the same keys
    (indices for sequences) with recursively equal values. Everything else
    uses :func:`~matchcase.engine.utils.strict_equals`.

    Cycles are followed by remembering the ``(a, b)`` pairs on the current
    path: when a child of ``a`` is one of its own ancestors, the child of
    ``b`` is compared against the ancestor's partner instead of descending
    again. Two structures whose cycles close the same way compare equal.
    """
    return _deep_equals(a, b, ())


__all__ = ["deep_equals"]
