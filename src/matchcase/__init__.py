"""matchcase: structural pattern matching as an expression."""

from .engine.compiler import compile_pattern
from .engine.dispatch import Helpers, match
from .engine.equality import deep_equals
from .engine.matcher import bind, iter_bindings
from .engine.models import (
    REST,
    Alternation,
    ArrayNode,
    Capture,
    Guard,
    Literal,
    MatchResult,
    Negation,
    Node,
    ObjectNode,
    OptionalNode,
    RestNode,
    Transform,
    WildcardNode,
)
from .engine.utils import chunked
from .engine.variables import Rest, Variable, Variables, variable, wildcard
from .errors import ConstructionError, MatchError, NoMatch, NoValidMatch

__version__ = "0.1.0"

__all__ = [
    "match",
    "variable",
    "wildcard",
    "Variable",
    "Variables",
    "Helpers",
    "Rest",
    "REST",
    "bind",
    "iter_bindings",
    "compile_pattern",
    "deep_equals",
    "chunked",
    "MatchResult",
    "Node",
    "Literal",
    "Capture",
    "WildcardNode",
    "RestNode",
    "OptionalNode",
    "ArrayNode",
    "ObjectNode",
    "Guard",
    "Transform",
    "Alternation",
    "Negation",
    "MatchError",
    "NoMatch",
    "ConstructionError",
    "NoValidMatch",
]
