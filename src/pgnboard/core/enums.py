"""Core enumerations for the board model."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def letter(self) -> str:
        """Single-letter code used in cell codes, e.g. ``W``."""
        return "W" if self is Color.WHITE else "B"

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Notation letter, ``P`` for pawns."""
        return _PIECE_LETTERS[self]

    @classmethod
    def from_letter(cls, letter: str) -> PieceType:
        """Piece type for an upper-case notation letter, e.g. ``N``."""
        try:
            return _LETTER_PIECES[letter]
        except KeyError:
            raise ValueError(f"Invalid piece letter: {letter!r}") from None


_PIECE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_LETTER_PIECES: dict[str, PieceType] = {v: k for k, v in _PIECE_LETTERS.items()}


class CastleSide(StrEnum):
    """Which wing a castle goes to."""

    KINGSIDE = "O-O"
    QUEENSIDE = "O-O-O"


class GameResult(StrEnum):
    """Outcome of a game, valued by its notation literal.

    ``UNKNOWN`` is the not-yet-known sentinel: it is what a record holds
    until a result literal is read, and what ``*`` denotes.
    """

    WHITE_WINS = "1-0"
    BLACK_WINS = "0-1"
    DRAW = "1/2-1/2"
    UNKNOWN = "*"

    @property
    def is_decided(self) -> bool:
        return self is not GameResult.UNKNOWN
