"""Structural binding generator used by the case dispatcher."""
from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from ..errors import ConstructionError, NoMatch
from .compiler import compile_pattern
from .equality import deep_equals
from .models import (
    Alternation,
    ArrayNode,
    Capture,
    Guard,
    Literal,
    MatchResult,
    Negation,
    Node,
    ObjectNode,
    Operation,
    OptionalNode,
    RestNode,
    Transform,
    WildcardNode,
)
from .utils import is_array, is_empty, strict_equals
from .variables import Variable

Binding = tuple[Variable, Any]


def _attempt(node: Node, value: Any) -> list[Binding] | None:
    """Fully match ``node`` against ``value``; None on a structural miss."""
    try:
        return list(_gen(node, value))
    except NoMatch:
        return None


def _apply(operation: Operation, value: Any) -> tuple[Any, list[Binding]]:
    if isinstance(operation, Guard):
        for predicate in operation.predicates:
            if not predicate(value):
                raise NoMatch(f"Input fails a guard.\nInput: {value!r}")
        return value, []
    if isinstance(operation, Transform):
        for function in operation.functions:
            value = function(value)
        return value, []
    if isinstance(operation, Negation):
        for pattern in operation.patterns:
            if _attempt(pattern, value) is not None:
                raise NoMatch(f"Input matches a negated pattern.\nInput: {value!r}")
        return value, []
    if isinstance(operation, Alternation):
        if not operation.patterns:
            return value, []
        for pattern in operation.patterns:
            found = _attempt(pattern, value)
            if found is not None:
                return value, found
        raise NoMatch(f"Input does not match provided or-patterns.\nInput: {value!r}")
    raise TypeError(f"unknown operation {operation!r}")


def _emit(var: Variable, value: Any) -> Iterator[Binding]:
    for operation in var.operations:
        value, inner = _apply(operation, value)
        yield from inner
    if var.emits:
        yield var.root, value


def _gen_optional(optional: OptionalNode, tail: tuple[Node, ...], values: Sequence[Any]) -> Iterator[Binding]:
    # absent first, then present
    for elements in (tail, (optional.inner, *tail)):
        try:
            found = list(_gen_elements(elements, values))
        except NoMatch:
            continue
        yield from found
        return
    raise NoMatch(f"Input does not match the optional element.\nInput: {values!r}")


def _gen_elements(elements: tuple[Node, ...], values: Sequence[Any]) -> Iterator[Binding]:
    position = 0
    for index, element in enumerate(elements):
        if isinstance(element, RestNode):
            end = len(values) - (len(elements) - index - 1)
            if end < position:
                raise NoMatch(f"Input is too short for the rest variable.\nInput: {values!r}")
            if not element.variable.is_wildcard:
                yield from _emit(element.variable, values[position:end])
            position = end
        elif isinstance(element, OptionalNode):
            yield from _gen_optional(element, elements[index + 1:], values[position:])
            return
        elif position >= len(values):
            raise NoMatch(f"Input is missing index: {position}\nInput: {values!r}")
        else:
            yield from _gen(element, values[position])
            position += 1

    if position < len(values):
        raise NoMatch(f"Pattern is missing index: {position}")


def _gen_object(node: ObjectNode, value: Any) -> Iterator[Binding]:
    if not isinstance(value, Mapping):
        raise NoMatch(f"Input is not a mapping.\nInput: {value!r}")
    for key, child in node.fields.items():
        if key not in value:
            raise NoMatch(f"Input is missing key: {key!r}\nInput: {value!r}")
        yield from _gen(child, value[key])

    if node.rest is not None:
        if not node.rest.is_wildcard:
            remainder = {key: item for key, item in value.items() if key not in node.fields}
            yield from _emit(node.rest, remainder)
        return
    for key in value:
        if key not in node.fields:
            raise NoMatch(f"Pattern is missing key: {key!r}")


def _gen(node: Node, value: Any) -> Iterator[Binding]:
    if isinstance(node, WildcardNode):
        return
    if isinstance(node, Capture):
        yield from _emit(node.variable, value)
    elif isinstance(node, ArrayNode):
        if not node.elements:
            if not is_empty(value):
                raise NoMatch(f"Input is not empty.\nInput: {value!r}")
        elif not is_array(value):
            raise NoMatch(f"Input is not an array.\nInput: {value!r}")
        else:
            yield from _gen_elements(node.elements, value)
    elif isinstance(node, ObjectNode):
        if not node.fields and node.rest is None:
            if not is_empty(value):
                raise NoMatch(f"Input is not empty.\nInput: {value!r}")
        else:
            yield from _gen_object(node, value)
    elif isinstance(node, (OptionalNode, RestNode)):
        raise ConstructionError("Optional patterns only allowed in array patterns.")
    elif isinstance(node, Literal):
        if not strict_equals(node.value, value):
            raise NoMatch(
                "Input does not match provided pattern.\n"
                f"Pattern: {node.value!r}\nInput: {value!r}"
            )
    else:
        raise TypeError(f"unknown pattern node {node!r}")


def iter_bindings(pattern: Any, value: Any) -> Iterator[Binding]:
    """Lazily yield ``(root_variable, value)`` pairs for ``pattern``.

    Raises :class:`NoMatch` at the first structural mismatch and
    :class:`ConstructionError` for malformed patterns. Repeated variables are
    yielded as often as they occur; consistency is checked by :func:`bind`.
    """
    yield from _gen(compile_pattern(pattern), value)


def bind(pattern: Any, value: Any) -> MatchResult:
    """Match ``pattern`` against ``value`` and collect the bindings.

    A structural mismatch is reported as ``MatchResult(matched=False)``.
    Binding the same variable to values that are not deep-equal is a
    :class:`ConstructionError` and is raised.
    """
    bound: dict[Variable, Any] = {}
    try:
        for var, found in iter_bindings(pattern, value):
            if var in bound and not deep_equals(bound[var], found):
                raise ConstructionError(
                    f"Variable cannot be bound to multiple values: {bound[var]!r} and {found!r}"
                )
            bound[var] = found
    except NoMatch as exc:
        return MatchResult(matched=False, reason=str(exc))
    return MatchResult(matched=True, bindings=bound)


__all__ = ["bind", "iter_bindings"]
