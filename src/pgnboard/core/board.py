"""Board - piece placement on an 8x8 board.

:class:`Board` is the mutable working copy the engine edits; :class:`Snapshot`
is the frozen position stored in a game's history.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from pgnboard.core.enums import Color, PieceType
from pgnboard.core.piece import Piece
from pgnboard.core.types import Square, make_square, parse_square

Cell = Piece | None

# Start-position ranks as FEN piece characters, file a first.
_BACK_RANK = "RNBQKBNR"
_PAWN_RANK = "P" * 8


def _holds(cell: Cell, color: Color, piece_type: PieceType) -> bool:
    return cell == Piece(color, piece_type)


def _diagram(cells: Sequence[Cell]) -> str:
    rows: list[str] = []
    for rank in range(7, -1, -1):
        row = []
        for file in range(8):
            p = cells[make_square(file, rank)]
            row.append(str(p) if p else ".")
        rows.append(f"{rank + 1} {' '.join(row)}")
    rows.append("  a b c d e f g h")
    return "\n".join(rows)


class Board:
    """Mutable 64-square board."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Cell] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Cell:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Cell) -> None:
        self._squares[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def holds(self, sq: Square, color: Color, piece_type: PieceType) -> bool:
        """Whether *sq* holds *color*'s *piece_type*."""
        return _holds(self._squares[sq], color, piece_type)

    # -- Freezing -----------------------------------------------------------

    def freeze(self) -> Snapshot:
        """Immutable copy of the current placement."""
        return Snapshot(self._squares)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for rank, chars in ((0, _BACK_RANK), (1, _PAWN_RANK)):
            for f, char in enumerate(chars):
                b[make_square(f, rank)] = Piece.from_char(char)
                b[make_square(f, 7 - rank)] = Piece.from_char(char.lower())
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Board):
            return self._squares == other._squares
        if isinstance(other, Snapshot):
            return tuple(self._squares) == other.squares
        return NotImplemented

    def __repr__(self) -> str:
        return _diagram(self._squares)


class Snapshot:
    """One immutable board position in a game's history."""

    __slots__ = ("_squares",)

    def __init__(self, squares: Sequence[Cell]) -> None:
        if len(squares) != 64:
            raise ValueError(f"Snapshot needs 64 squares, got {len(squares)}")
        self._squares: tuple[Cell, ...] = tuple(squares)

    @classmethod
    def initial(cls) -> Snapshot:
        return Board.initial().freeze()

    @property
    def squares(self) -> tuple[Cell, ...]:
        return self._squares

    @property
    def grid(self) -> tuple[tuple[Cell, ...], ...]:
        """8 rows of 8 cells; row 0 is rank 1, column 0 is file a."""
        return tuple(self._squares[row * 8 : row * 8 + 8] for row in range(8))

    def __getitem__(self, sq: Square) -> Cell:
        return self._squares[sq]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def holds(self, sq: Square, color: Color, piece_type: PieceType) -> bool:
        """Whether *sq* holds *color*'s *piece_type*."""
        return _holds(self._squares[sq], color, piece_type)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._squares)

    def piece_at(self, name: str) -> Cell:
        """Cell contents by square name, e.g. ``piece_at("e4")``."""
        return self._squares[parse_square(name)]

    def thaw(self) -> Board:
        """Mutable working copy of this position."""
        b = Board()
        for sq, piece in enumerate(self._squares):
            b[sq] = piece
        return b

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Snapshot):
            return self._squares == other._squares
        if isinstance(other, Board):
            return other == self
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        return _diagram(self._squares)
