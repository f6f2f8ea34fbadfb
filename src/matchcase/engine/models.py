"""Data models shared across the matchcase engine."""
from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

from ..errors import ConstructionError

if TYPE_CHECKING:
    from .variables import Variable


class _RestKey:
    __slots__ = ()

    def __repr__(self) -> str:
        return "REST"


# Mapping-pattern key whose value is the variable collecting unvisited keys.
REST = _RestKey()


# ---------------------------------------------------------------------------
# Operations attached to variables, interpreted by the matcher in order.
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Guard:
    predicates: tuple[Callable[[Any], Any], ...]


@dataclass(frozen=True)
class Transform:
    functions: tuple[Callable[[Any], Any], ...]


@dataclass(frozen=True)
class Alternation:
    """First sub-pattern that matches wins; its bindings are kept."""

    patterns: tuple[Node, ...]


@dataclass(frozen=True)
class Negation:
    """Fails when any sub-pattern matches; sub-pattern bindings are dropped."""

    patterns: tuple[Node, ...]


Operation = Union[Guard, Transform, Alternation, Negation]


# ---------------------------------------------------------------------------
# Compiled pattern tree.
# ---------------------------------------------------------------------------


class Node:
    """Base class of compiled pattern nodes."""

    __slots__ = ()


@dataclass(frozen=True)
class Literal(Node):
    value: Any


@dataclass(frozen=True)
class Capture(Node):
    variable: Variable


@dataclass(frozen=True)
class WildcardNode(Node):
    pass


@dataclass(frozen=True)
class RestNode(Node):
    """Array element standing for the contiguous remainder of the input."""

    variable: Variable


@dataclass(frozen=True)
class OptionalNode(Node):
    """Array element that may be absent; absence is tried first."""

    inner: Node


@dataclass(frozen=True)
class ArrayNode(Node):
    elements: tuple[Node, ...]

    def __post_init__(self) -> None:
        if sum(isinstance(element, RestNode) for element in self.elements) > 1:
            raise ConstructionError("Only one rest variable allowed in array.")

    @property
    def rest_index(self) -> int | None:
        for index, element in enumerate(self.elements):
            if isinstance(element, RestNode):
                return index
        return None


@dataclass(frozen=True)
class ObjectNode(Node):
    fields: Mapping[Any, Node] = field(default_factory=dict)
    rest: Variable | None = None

    def __post_init__(self) -> None:
        if REST in self.fields:
            if self.rest is not None:
                raise ConstructionError("Only one rest variable allowed in object.")
            raise ConstructionError("Object rest variable must be given as rest=, not as a field.")
        for key, node in self.fields.items():
            if isinstance(node, OptionalNode):
                raise ConstructionError(
                    f"Optional patterns only allowed in array patterns (key {key!r})."
                )
            if isinstance(node, RestNode):
                raise ConstructionError(f"Rest variables only allowed as array elements (key {key!r}).")


# ---------------------------------------------------------------------------
# Outcome of a single match attempt.
# ---------------------------------------------------------------------------


@dataclass
class MatchResult:
    matched: bool
    bindings: dict[Variable, Any] = field(default_factory=dict)
    reason: str | None = None

    def values_for(self, variables: Iterable[Variable]) -> list[Any]:
        """Bound values of ``variables`` in order, ``None`` where unbound."""
        return [self.bindings.get(variable.root) for variable in variables]
