"""Capture variables, wildcards and the per-call variable supply."""
from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from .models import Alternation, Guard, Negation, Operation, Transform
from .utils import is_array


def _mro_names(value: Any) -> set[str]:
    return {cls.__name__ for cls in type(value).__mro__}


# Special names accepted by ``Variable.of_type``; any other string is
# compared against the class names of the value's MRO.
TYPE_CHECKS: dict[str, Callable[[Any], bool]] = {
    "array": is_array,
    "mapping": lambda value: isinstance(value, Mapping),
    "callable": callable,
}


def _type_predicate(kind: Any) -> Callable[[Any], bool]:
    if isinstance(kind, str):
        check = TYPE_CHECKS.get(kind)
        if check is not None:
            return check
        return lambda value: kind in _mro_names(value)
    return lambda value: isinstance(value, kind)


def _regex_predicate(expression: str | re.Pattern[str]) -> Callable[[Any], bool]:
    compiled = re.compile(expression) if isinstance(expression, str) else expression
    return lambda value: isinstance(value, str) and compiled.search(value) is not None


def _compile_all(patterns: tuple[Any, ...]) -> tuple[Any, ...]:
    from .compiler import compile_pattern

    return tuple(compile_pattern(pattern) for pattern in patterns)


@dataclass(frozen=True, eq=False)
class Variable:
    """A capture site in a pattern.

    Variables hash and compare by identity. Every chaining method returns a
    new derived variable that shares the binding slot of its root, so
    ``age`` and ``age.when(...)`` both bind to ``age``.
    """

    emits: bool = True
    is_optional: bool = False
    operations: tuple[Operation, ...] = ()
    name: str | None = None
    kind: str = "variable"
    base: Variable | None = field(default=None, repr=False)

    @property
    def root(self) -> Variable:
        return self.base if self.base is not None else self

    @property
    def is_wildcard(self) -> bool:
        return self.kind == "wildcard" and not self.operations

    def _derive(self, *operations: Operation, optional: bool | None = None) -> Variable:
        return replace(
            self,
            operations=self.operations + operations,
            is_optional=self.is_optional if optional is None else optional,
            base=self.root,
        )

    def when(self, *predicates: Callable[[Any], Any]) -> Variable:
        return self._derive(Guard(tuple(predicates)))

    def then(self, *functions: Callable[[Any], Any]) -> Variable:
        return self._derive(Transform(tuple(functions)))

    def not_(self, *patterns: Any) -> Variable:
        return self._derive(Negation(_compile_all(patterns)))

    def or_(self, *patterns: Any) -> Variable:
        return self._derive(Alternation(_compile_all(patterns)))

    def of_type(self, kind: Any) -> Variable:
        """Guard on the value's type.

        ``kind`` may be a class or tuple of classes, one of the names in
        :data:`TYPE_CHECKS` (``"array"``, ``"mapping"``, ``"callable"``), or a
        class name looked up in the value's MRO (``"int"``, ``"str"``).
        """
        return self.when(_type_predicate(kind))

    def regex(self, expression: str | re.Pattern[str]) -> Variable:
        return self.when(_regex_predicate(expression))

    @property
    def optional(self) -> Variable:
        return self._derive(optional=True)

    @property
    def opt(self) -> Variable:
        return self.optional

    @property
    def rest(self) -> Rest:
        return Rest(self)

    def __repr__(self) -> str:
        label = self.root.name or hex(id(self.root))
        flags = "?" if self.is_optional else ""
        kind = "_" if self.kind == "wildcard" else "Variable"
        return f"{kind}({label}{flags}, ops={len(self.operations)})"


@dataclass(frozen=True, eq=False)
class Rest:
    """Array element marker: bind the remaining slice to ``variable``."""

    variable: Variable


def variable(emits: bool = True, name: str | None = None) -> Variable:
    return Variable(emits=emits, name=name)


def wildcard() -> Variable:
    return Variable(emits=False, kind="wildcard", name="_")


class Variables:
    """Lazily minted capture variables for one ``match`` call.

    Every access path (``take``, indexing, iteration) hands out the same
    variables in the same order, minting new ones only past the end.

    >>> supply = Variables()
    >>> first, second = supply.take(2)
    >>> supply[0] is first
    True
    """

    def __init__(self) -> None:
        self._minted: list[Variable] = []

    def _mint(self) -> Variable:
        minted = variable(name=f"v{len(self._minted)}")
        self._minted.append(minted)
        return minted

    def __getitem__(self, index: int) -> Variable:
        if index < 0:
            raise IndexError("variable supply does not support negative indexes")
        while len(self._minted) <= index:
            self._mint()
        return self._minted[index]

    def __iter__(self) -> Iterator[Variable]:
        index = 0
        while True:
            yield self[index]
            index += 1

    def take(self, count: int) -> tuple[Variable, ...]:
        return tuple(self[index] for index in range(count))

    @property
    def requested(self) -> tuple[Variable, ...]:
        return tuple(self._minted)
