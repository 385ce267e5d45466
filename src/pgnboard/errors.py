"""Error types raised by the notation pipeline.

All three are :class:`ValueError` subclasses sharing :class:`PgnError` as a
base, so callers can catch one type for any rejected input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pgnboard.notation.nodes import HalfMove


class PgnError(ValueError):
    """Base class for every error raised while reading notation."""

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        super().__init__(self._format())

    def _format(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"{self.message} (line {self.line})"
        return f"{self.message} (line {self.line}, column {self.column})"


class LexicalError(PgnError):
    """Malformed character-level input."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(message, line=line, column=column)


class PgnSyntaxError(PgnError):
    """Token sequence does not match the header/movetext grammar."""


class InterpretError(PgnError):
    """A well-formed half-move that cannot be applied to the position."""

    def __init__(
        self,
        message: str,
        *,
        half_move: HalfMove | None = None,
        ply: int | None = None,
    ) -> None:
        self.half_move = half_move
        self.ply = ply
        super().__init__(message)
