"""Tests for pattern compilation and construction checks."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from matchcase import (
    REST,
    ArrayNode,
    Capture,
    ConstructionError,
    Literal,
    ObjectNode,
    OptionalNode,
    RestNode,
    Variable,
    WildcardNode,
    compile_pattern,
    variable,
    wildcard,
)


def test_scalars_become_literals() -> None:
    assert compile_pattern(3) == Literal(3)
    assert compile_pattern("a") == Literal("a")
    assert compile_pattern(None) == Literal(None)


def test_variables_and_wildcards() -> None:
    capture = variable()
    assert compile_pattern(capture) == Capture(capture)
    assert compile_pattern(wildcard()) == WildcardNode()


def test_nested_collections() -> None:
    x = variable()
    node = compile_pattern({"a": [1, x], "b": {}})
    assert isinstance(node, ObjectNode)
    assert node.rest is None
    assert node.fields["a"] == ArrayNode((Literal(1), Capture(x)))
    assert node.fields["b"] == ObjectNode({}, None)


def test_tuples_compile_like_lists() -> None:
    assert compile_pattern((1, 2)) == compile_pattern([1, 2])


def test_array_rest_and_optional_elements() -> None:
    rest, maybe = variable(), variable()
    node = compile_pattern([1, rest.rest, maybe.optional])
    assert isinstance(node, ArrayNode)
    assert node.rest_index == 1
    assert node.elements[1] == RestNode(rest)
    assert isinstance(node.elements[2], OptionalNode)
    assert node.elements[2].inner.variable.root is maybe


def test_optional_wildcard_element() -> None:
    node = compile_pattern([wildcard().optional])
    assert node.elements == (OptionalNode(WildcardNode()),)


def test_object_rest_key() -> None:
    others = variable()
    node = compile_pattern({"id": 1, REST: others})
    assert node.rest is others
    assert list(node.fields) == ["id"]

    # rest markers and optional rest variables are accepted too
    assert compile_pattern({REST: others.rest}).rest is others
    assert compile_pattern({REST: others.optional}).rest.root is others


def test_two_rest_markers_in_array() -> None:
    first, second = variable(), variable()
    with pytest.raises(ConstructionError, match="Only one rest variable allowed in array"):
        compile_pattern(["a", first.rest, second.rest, "d"])


def test_two_rest_fields_in_object_node() -> None:
    first, second = variable(), variable()
    with pytest.raises(ConstructionError, match="Only one rest variable allowed in object"):
        ObjectNode({"x": Literal("a"), REST: Capture(first)}, rest=second)


def test_object_rest_must_be_a_variable() -> None:
    with pytest.raises(ConstructionError):
        compile_pattern({REST: "nope"})


@pytest.mark.parametrize(
    "build",
    [
        lambda x: {"foo": x.optional},
        lambda x: x.optional,
        lambda x: [{"foo": x.optional}],
    ],
)
def test_optional_outside_array(build: Callable[[Variable], object]) -> None:
    with pytest.raises(ConstructionError, match="Optional patterns only allowed in array patterns"):
        compile_pattern(build(variable()))


def test_rest_outside_array() -> None:
    x = variable()
    with pytest.raises(ConstructionError):
        compile_pattern(x.rest)
    with pytest.raises(ConstructionError):
        compile_pattern({"a": x.rest})


def test_compiled_nodes_pass_through() -> None:
    node = ArrayNode((Literal(1),))
    assert compile_pattern(node) is node
    with pytest.raises(ConstructionError):
        compile_pattern(OptionalNode(Literal(1)))
