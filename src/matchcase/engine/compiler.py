"""Compile literal Python patterns into the explicit pattern tree."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..errors import ConstructionError
from .models import (
    REST,
    ArrayNode,
    Capture,
    Literal,
    Node,
    ObjectNode,
    OptionalNode,
    RestNode,
    WildcardNode,
)
from .utils import is_array
from .variables import Rest, Variable


def _rest_variable(marker: Any) -> Variable:
    if isinstance(marker, Rest):
        return marker.variable
    if isinstance(marker, Variable):
        return marker
    raise ConstructionError(f"Object rest must be a variable, got {marker!r}.")


def _compile_variable(var: Variable, element: bool) -> Node:
    node: Node = WildcardNode() if var.is_wildcard else Capture(var)
    if not var.is_optional:
        return node
    if not element:
        raise ConstructionError("Optional patterns only allowed in array patterns.")
    return OptionalNode(node)


def _compile(pattern: Any, element: bool) -> Node:
    if isinstance(pattern, Node):
        if isinstance(pattern, (OptionalNode, RestNode)) and not element:
            raise ConstructionError(f"{type(pattern).__name__} only allowed as an array element.")
        return pattern
    if isinstance(pattern, Variable):
        return _compile_variable(pattern, element)
    if isinstance(pattern, Rest):
        if not element:
            raise ConstructionError("Rest variables only allowed as array elements.")
        return RestNode(pattern.variable)
    if is_array(pattern):
        return ArrayNode(tuple(_compile(item, True) for item in pattern))
    if isinstance(pattern, Mapping):
        fields = {key: _compile(value, False) for key, value in pattern.items() if key is not REST}
        rest = _rest_variable(pattern[REST]) if REST in pattern else None
        return ObjectNode(fields, rest)
    return Literal(pattern)


def compile_pattern(pattern: Any) -> Node:
    """Translate a pattern literal into a tree of :class:`Node` objects.

    Lists and tuples become :class:`ArrayNode`, mappings :class:`ObjectNode`
    (the :data:`REST` key naming the rest variable), variables become
    captures or wildcards, and anything else is a :class:`Literal`. Already
    compiled nodes pass through unchanged.

    Raises:
        ConstructionError: for a misplaced optional or rest marker, or a
            second rest marker in one array.
    """
    return _compile(pattern, False)


__all__ = ["compile_pattern"]
