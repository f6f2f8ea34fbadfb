"""Error types raised while building and matching patterns."""

from __future__ import annotations


class MatchError(Exception):
    """Base class for matchcase errors."""


class NoMatch(MatchError):
    """The input does not structurally match a pattern.

    Recoverable: the dispatcher moves on to the next case, ``or_`` to the next
    alternative, and ``not_`` counts it as success.
    """


class ConstructionError(MatchError):
    """A pattern is malformed or binds one variable to conflicting values.

    Never caught by the engine; it aborts every remaining case trial.
    """


class NoValidMatch(MatchError):
    """Every case failed and no default case was provided."""

    def __init__(self, message: str = "No valid matches for any patterns and no default case provided.") -> None:
        super().__init__(message)


__all__ = ["MatchError", "NoMatch", "ConstructionError", "NoValidMatch"]
