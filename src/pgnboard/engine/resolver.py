"""Move resolution: find the origin square of a notated half-move.

Notation names only the target square, the piece kind and sometimes a file
or rank disambiguator. The resolver looks at the current position and works
out which piece of the mover's color makes the move. It does not check
whether the move leaves the mover's king in check.

Candidates are produced in a fixed order and the first one that satisfies
the disambiguators wins:

* rook rays: west, east, south, north;
* bishop rays: north-west, north-east, south-west, south-east;
* queen: the rook rays, then the bishop rays;
* knight and king: the order of :data:`KNIGHT_OFFSETS` / :data:`KING_OFFSETS`.

Sliding pieces only see the first occupied square along each ray, so a
blocked rook, bishop or queen is never a candidate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pgnboard.core.board import Board, Snapshot
from pgnboard.core.enums import Color, PieceType
from pgnboard.core.types import (
    Square,
    file_of,
    make_square,
    on_board,
    rank_of,
    square_name,
)
from pgnboard.errors import InterpretError
from pgnboard.notation.nodes import PieceMove

_LOGGER = logging.getLogger(__name__)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, 1),
    (-1, 2),
    (1, 2),
    (2, 1),
    (-2, -1),
    (-1, -2),
    (1, -2),
    (2, -1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, 1),
    (0, -1),
    (-1, 1),
    (1, 1),
    (-1, -1),
    (1, -1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, 1), (1, 1), (-1, -1), (1, -1))

# Rank index a pawn reaches with a double step, and its last rank.
_DOUBLE_STEP_RANK = {Color.WHITE: 3, Color.BLACK: 4}
_LAST_RANK = {Color.WHITE: 7, Color.BLACK: 0}


def _build_sources(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    sources: list[tuple[Square, ...]] = []
    for sq in range(64):
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        squares: list[Square] = []
        for df, dr in offsets:
            af = file_idx + df
            ar = rank_idx + dr
            if on_board(af, ar):
                squares.append(make_square(af, ar))
        sources.append(tuple(squares))
    return tuple(sources)


# Knight and king moves are symmetric, so the squares a piece could have
# come from are the squares it could move to.
_KNIGHT_SOURCES = _build_sources(KNIGHT_OFFSETS)
_KING_SOURCES = _build_sources(KING_OFFSETS)


@dataclass(frozen=True, slots=True)
class Resolution:
    """A resolved half-move, ready to apply to a working copy.

    *en_passant_capture* is the square of a pawn taken en passant, which the
    apply step clears in addition to moving the piece.
    """

    origin: Square
    target: Square
    promotion: PieceType | None = None
    en_passant_capture: Square | None = None

    def __str__(self) -> str:
        return square_name(self.origin) + square_name(self.target)


class MoveResolver:
    """Resolves half-moves against one fixed position."""

    __slots__ = ("_board",)

    def __init__(self, board: Board | Snapshot) -> None:
        self._board = board

    def resolve(self, move: PieceMove, color: Color) -> Resolution:
        """Locate the piece that plays *move* for *color*.

        Raises :class:`InterpretError` when no piece can be found.
        """
        if move.piece == PieceType.PAWN:
            return self.find_pawn(move, color)
        finders = {
            PieceType.KNIGHT: self.find_knight,
            PieceType.BISHOP: self.find_bishop,
            PieceType.ROOK: self.find_rook,
            PieceType.QUEEN: self.find_queen,
            PieceType.KING: self.find_king,
        }
        origin = finders[move.piece](move, color)
        return Resolution(origin, move.target)

    # ── Pieces ───────────────────────────────────────────────────────────

    def find_knight(self, move: PieceMove, color: Color) -> Square:
        candidates = [
            sq
            for sq in _KNIGHT_SOURCES[move.target]
            if self._board.holds(sq, color, PieceType.KNIGHT)
        ]
        return self._pick(candidates, move, color)

    def find_king(self, move: PieceMove, color: Color) -> Square:
        candidates = [
            sq
            for sq in _KING_SOURCES[move.target]
            if self._board.holds(sq, color, PieceType.KING)
        ]
        return self._pick(candidates, move, color)

    def find_rook(self, move: PieceMove, color: Color) -> Square:
        candidates = self._slide(move.target, ROOK_DIRS, color, PieceType.ROOK)
        return self._pick(candidates, move, color)

    def find_bishop(self, move: PieceMove, color: Color) -> Square:
        candidates = self._slide(move.target, BISHOP_DIRS, color, PieceType.BISHOP)
        return self._pick(candidates, move, color)

    def find_queen(self, move: PieceMove, color: Color) -> Square:
        candidates = self._slide(move.target, ROOK_DIRS, color, PieceType.QUEEN)
        candidates += self._slide(move.target, BISHOP_DIRS, color, PieceType.QUEEN)
        return self._pick(candidates, move, color)

    def find_pawn(self, move: PieceMove, color: Color) -> Resolution:
        """Resolve a pawn push or capture, inferring en passant.

        A push (no origin file, or origin file equal to the target file)
        comes from one square behind the target, or two squares behind when
        the target is on the double-step rank and the square in between is
        empty. A capture comes from the origin file one rank behind; an
        empty target square means the capture is en passant.
        """
        target = move.target
        t_file = file_of(target)
        t_rank = rank_of(target)
        forward = 1 if color == Color.WHITE else -1
        behind = t_rank - forward

        if move.promotion is not None and t_rank != _LAST_RANK[color]:
            raise self._fail(move, color, "promotion needs the last rank")
        if not 0 <= behind < 8:
            raise self._fail(move, color, "no pawn can reach the target square")

        from_file = t_file if move.from_file is None else move.from_file
        if from_file == t_file:
            return self._pawn_push(move, color, behind, forward)

        if abs(from_file - t_file) != 1:
            raise self._fail(move, color, "pawn captures move to an adjacent file")
        origin = make_square(from_file, behind)
        if not self._board.holds(origin, color, PieceType.PAWN):
            raise self._fail(move, color, f"no pawn on {square_name(origin)}")

        if not self._board.is_empty(target):
            return Resolution(origin, target, move.promotion)

        passed = make_square(t_file, behind)
        if not self._board.holds(passed, color.opposite, PieceType.PAWN):
            raise self._fail(move, color, "nothing to capture on the target square")
        return Resolution(origin, target, move.promotion, en_passant_capture=passed)

    def _pawn_push(
        self, move: PieceMove, color: Color, behind: int, forward: int
    ) -> Resolution:
        target = move.target
        t_file = file_of(target)
        if not self._board.is_empty(target):
            raise self._fail(move, color, "the target square is occupied")

        one_back = make_square(t_file, behind)
        if self._board.holds(one_back, color, PieceType.PAWN):
            return Resolution(one_back, target, move.promotion)

        double_step = rank_of(target) == _DOUBLE_STEP_RANK[color]
        if double_step and self._board.is_empty(one_back):
            two_back = make_square(t_file, behind - forward)
            if self._board.holds(two_back, color, PieceType.PAWN):
                return Resolution(two_back, target, move.promotion)

        raise self._fail(move, color, "no pawn can reach the target square")

    # ── Helpers ──────────────────────────────────────────────────────────

    def _slide(
        self,
        target: Square,
        directions: tuple[tuple[int, int], ...],
        color: Color,
        piece_type: PieceType,
    ) -> list[Square]:
        """First piece on each ray from *target*, kept if it is the mover's."""
        found: list[Square] = []
        for df, dr in directions:
            f = file_of(target) + df
            r = rank_of(target) + dr
            while on_board(f, r):
                sq = make_square(f, r)
                if not self._board.is_empty(sq):
                    if self._board.holds(sq, color, piece_type):
                        found.append(sq)
                    break
                f += df
                r += dr
        return found

    def _pick(
        self, candidates: list[Square], move: PieceMove, color: Color
    ) -> Square:
        matching = [sq for sq in candidates if _fits(sq, move)]
        if not matching:
            raise self._fail(
                move,
                color,
                f"no {move.piece.name.lower()} can reach {square_name(move.target)}",
            )
        if len(matching) > 1:
            _LOGGER.debug(
                "Ambiguous %s move %s: candidates %s, picked %s",
                color,
                move,
                [square_name(sq) for sq in matching],
                square_name(matching[0]),
            )
        return matching[0]

    def _fail(self, move: PieceMove, color: Color, reason: str) -> InterpretError:
        return InterpretError(
            f"Cannot interpret {color} move {move}: {reason}", half_move=move
        )


def _fits(sq: Square, move: PieceMove) -> bool:
    """Whether *sq* agrees with the move's file/rank disambiguators."""
    if move.from_file is not None and file_of(sq) != move.from_file:
        return False
    if move.from_rank is not None and rank_of(sq) != move.from_rank:
        return False
    return True
