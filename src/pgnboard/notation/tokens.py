"""Lexical units produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TokenKind(StrEnum):
    """Alphabet of lexical units."""

    LETTER = "letter"
    NUMBER = "number"
    DOT = "dot"
    SLASH = "slash"
    EQUALS = "equals"
    MOVE_NUMBER = "move_number"
    BLACK_MOVE = "black_move"
    CASTLE_KINGSIDE = "castle_kingside"
    CASTLE_QUEENSIDE = "castle_queenside"
    RESULT = "result"
    HEADER = "header"
    COMMENT = "comment"
    VARIATION = "variation"


# Kinds that only guide lexing or carry annotations; the parser drops them.
SKIPPED_KINDS = frozenset(
    {TokenKind.BLACK_MOVE, TokenKind.COMMENT, TokenKind.VARIATION}
)


@dataclass(frozen=True, slots=True)
class Token:
    """A lexical unit and the position (1-based) where it started.

    For ``HEADER`` tokens *key* is the unquoted tag name and *text* the raw
    value as written, quotes included.
    """

    kind: TokenKind
    text: str
    line: int = 1
    column: int = 1
    key: str = ""

    def __str__(self) -> str:
        if self.kind == TokenKind.HEADER:
            return f"[{self.key} {self.text}]"
        return self.text or self.kind.value
