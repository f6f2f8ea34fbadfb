"""Case dispatch: try (pattern, result) alternatives in order."""
from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, Union

from ..errors import NoValidMatch
from .compiler import compile_pattern
from .matcher import bind
from .utils import chunked
from .variables import Variable, Variables, variable, wildcard

logger = logging.getLogger(__name__)

CaseBuilder = Callable[["Variables", "Helpers"], Sequence[Callable[..., Any]]]
Cases = Union[CaseBuilder, Sequence[Callable[..., Any]]]


class Helpers:
    """Per-call pattern helpers handed to case builders.

    ``_`` is one wildcard shared by every case of the call; the other helpers
    build throwaway non-capturing variables carrying a single operation, for
    use directly as pattern leaves.
    """

    def __init__(self) -> None:
        self._ = wildcard()

    def or_(self, *patterns: Any) -> Variable:
        return variable(emits=False).or_(*patterns)

    def not_(self, *patterns: Any) -> Variable:
        return variable(emits=False).not_(*patterns)

    def when(self, *predicates: Callable[[Any], Any]) -> Variable:
        return variable(emits=False).when(*predicates)

    def of_type(self, kind: Any) -> Variable:
        return variable(emits=False).of_type(kind)

    def regex(self, expression: Any) -> Variable:
        return variable(emits=False).regex(expression)


def match(value: Any, cases: Cases) -> Any:
    """Evaluate the first case whose pattern matches ``value``.

    ``cases`` is either a builder called once as ``cases(variables, helpers)``
    that returns a flat ``[pattern, result, ...]`` list of zero-argument
    pattern thunks and result callables, or such a flat list directly, in
    which case every pattern entry is itself called with
    ``(variables, helpers)``. A trailing entry without a partner is the
    default case and is called with no arguments.

    Each pattern is built at most once. The winning result is called with the
    bound value of every variable taken from ``variables`` so far, in the
    order they were taken (``None`` for variables the pattern left unbound).

    Raises:
        NoValidMatch: when no case matches and there is no default.
        ConstructionError: as soon as any tried pattern is malformed.

    Example:
        >>> def cases(v, h):
        ...     first, = v.take(1)
        ...     return [lambda: [1, first, h._], lambda first: first * 10]
        >>> match([1, 2, 3], cases)
        20
    """
    variables = Variables()
    helpers = Helpers()

    if callable(cases):
        entries = cases(variables, helpers)

        def build(entry: Callable[..., Any]) -> Any:
            return entry()
    else:
        entries = cases

        def build(entry: Callable[..., Any]) -> Any:
            return entry(variables, helpers)

    for index, pair in enumerate(chunked(2, entries)):
        if len(pair) == 1:
            logger.debug("case %d: falling back to default", index)
            return pair[0]()

        pattern_entry, result = pair
        outcome = bind(compile_pattern(build(pattern_entry)), value)
        if outcome.matched:
            logger.debug("case %d matched", index)
            return result(*outcome.values_for(variables.requested))
        logger.debug("case %d did not match: %s", index, outcome.reason)

    raise NoValidMatch()


__all__ = ["Helpers", "match"]
