"""Core domain layer: board model with zero external dependencies.

Quick start::

    from pgnboard.core import BoardHistory
    from pgnboard.core.types import E2, E4

    history = BoardHistory()
    board = history.apply(E2, E4, history.fresh())
    history.record(board)
    print(history.latest)
"""

from pgnboard.core.board import Board, Cell, Snapshot
from pgnboard.core.enums import CastleSide, Color, GameResult, PieceType
from pgnboard.core.history import BoardHistory
from pgnboard.core.piece import Piece
from pgnboard.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "CastleSide",
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "BoardHistory",
    "Cell",
    "Piece",
    "Snapshot",
]
