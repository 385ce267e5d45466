"""Parsed syntax units: header details, move pairs and results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from pgnboard.core.enums import CastleSide, GameResult, PieceType
from pgnboard.core.types import FILE_NAMES, Square, square_name


@dataclass(frozen=True, slots=True)
class PieceMove:
    """A half-move that names a piece and a target square.

    *from_file* / *from_rank* are the optional origin disambiguators (0–7).
    For pawns *from_file* is the origin file of a capture and *promotion* the
    piece the pawn turns into.
    """

    piece: PieceType
    target: Square
    from_file: int | None = None
    from_rank: int | None = None
    promotion: PieceType | None = None

    def __str__(self) -> str:
        text = "" if self.piece == PieceType.PAWN else self.piece.letter
        if self.from_file is not None:
            text += FILE_NAMES[self.from_file]
        if self.from_rank is not None:
            text += str(self.from_rank + 1)
        text += square_name(self.target)
        if self.promotion is not None:
            text += "=" + self.promotion.letter
        return text


@dataclass(frozen=True, slots=True)
class CastleMove:
    """A castling half-move."""

    side: CastleSide

    def __str__(self) -> str:
        return self.side.value


HalfMove: TypeAlias = PieceMove | CastleMove


@dataclass(frozen=True, slots=True)
class DetailNode:
    """A header detail, e.g. ``[White "Player 1"]``, with quotes removed."""

    key: str
    value: str


@dataclass(frozen=True, slots=True)
class MoveNode:
    """A numbered move: White's half-move and, if played, Black's."""

    number: int
    white: HalfMove
    black: HalfMove | None = None


@dataclass(frozen=True, slots=True)
class ResultNode:
    result: GameResult


Node: TypeAlias = DetailNode | MoveNode | ResultNode
