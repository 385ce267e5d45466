"""Interpreter: parsed nodes → game record."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import assert_never

from pgnboard.core.enums import CastleSide, Color, GameResult, PieceType
from pgnboard.core.history import BoardHistory
from pgnboard.core.piece import Piece
from pgnboard.core.types import (
    A1,
    A8,
    C1,
    C8,
    D1,
    D8,
    E1,
    E8,
    F1,
    F8,
    G1,
    G8,
    H1,
    H8,
    Square,
)
from pgnboard.engine.resolver import MoveResolver
from pgnboard.errors import InterpretError
from pgnboard.game.record import GameRecord, PlyRecord
from pgnboard.notation.nodes import (
    CastleMove,
    DetailNode,
    HalfMove,
    MoveNode,
    Node,
    PieceMove,
    ResultNode,
)

_LOGGER = logging.getLogger(__name__)

# (king from, king to, rook from, rook to)
_CastlePath = tuple[Square, Square, Square, Square]

_CASTLE_SQUARES: dict[tuple[Color, CastleSide], _CastlePath] = {
    (Color.WHITE, CastleSide.KINGSIDE): (E1, G1, H1, F1),
    (Color.WHITE, CastleSide.QUEENSIDE): (E1, C1, A1, D1),
    (Color.BLACK, CastleSide.KINGSIDE): (E8, G8, H8, F8),
    (Color.BLACK, CastleSide.QUEENSIDE): (E8, C8, A8, D8),
}


class Interpreter:
    """Replays parsed nodes onto a fresh board history.

    One interpreter reads one game. It tracks, per color, whether the king
    has moved (castling included) so that a second castle is rejected.
    """

    __slots__ = ("_history", "_header", "_result", "_king_moved", "_plies")

    def __init__(self) -> None:
        self._history = BoardHistory()
        self._header: dict[str, str] = {}
        self._result = GameResult.UNKNOWN
        self._king_moved: dict[Color, bool] = {Color.WHITE: False, Color.BLACK: False}
        self._plies: list[PlyRecord] = []

    def run(self, nodes: Iterable[Node]) -> GameRecord:
        """Interpret every node in order and return the finished record."""
        for node in nodes:
            self.interpret(node)
        return self.record()

    def interpret(self, node: Node) -> None:
        if isinstance(node, DetailNode):
            self._header[node.key.lower()] = node.value
        elif isinstance(node, MoveNode):
            self._play(node.number, node.white, Color.WHITE)
            if node.black is not None:
                self._play(node.number, node.black, Color.BLACK)
        elif isinstance(node, ResultNode):
            self._result = node.result
        else:
            assert_never(node)

    def record(self) -> GameRecord:
        return GameRecord(
            header=self._header,
            history=self._history.snapshots(),
            result=self._result,
            plies=tuple(self._plies),
        )

    # ── Half-moves ───────────────────────────────────────────────────────

    def _play(self, move_number: int, half_move: HalfMove, color: Color) -> None:
        ply = len(self._history)
        if isinstance(half_move, CastleMove):
            origin, target = self._castle(half_move, color, ply)
        elif isinstance(half_move, PieceMove):
            origin, target = self._move_piece(half_move, color, move_number, ply)
        else:
            assert_never(half_move)

        self._plies.append(
            PlyRecord(
                ply=ply,
                move_number=move_number,
                color=color,
                half_move=half_move,
                origin=origin,
                target=target,
            )
        )
        _LOGGER.debug("Ply %d: %s %s", ply, color, half_move)

    def _move_piece(
        self, move: PieceMove, color: Color, move_number: int, ply: int
    ) -> tuple[Square, Square]:
        resolver = MoveResolver(self._history.latest)
        try:
            resolution = resolver.resolve(move, color)
        except InterpretError as exc:
            raise InterpretError(
                f"Move {move_number}: {exc.message}", half_move=move, ply=ply
            ) from exc

        board = self._history.apply(
            resolution.origin,
            resolution.target,
            self._history.fresh(),
            promote_to=resolution.promotion,
            en_passant_capture=resolution.en_passant_capture,
        )
        self._history.record(board)
        if move.piece == PieceType.KING:
            self._king_moved[color] = True
        return resolution.origin, resolution.target

    def _castle(
        self, move: CastleMove, color: Color, ply: int
    ) -> tuple[Square, Square]:
        if self._king_moved[color]:
            wing = "kingside" if move.side == CastleSide.KINGSIDE else "queenside"
            raise InterpretError(
                f"{color.name.title()} cannot castle {wing} because the king "
                "already moved",
                half_move=move,
                ply=ply,
            )

        king_from, king_to, rook_from, rook_to = _CASTLE_SQUARES[(color, move.side)]
        board = self._history.fresh()
        board[king_from] = None
        board[rook_from] = None
        board[king_to] = Piece(color, PieceType.KING)
        board[rook_to] = Piece(color, PieceType.ROOK)
        self._history.record(board)
        self._king_moved[color] = True
        return king_from, king_to


def interpret(nodes: Iterable[Node]) -> GameRecord:
    """Interpret *nodes*, raising :class:`InterpretError` on unresolvable moves."""
    return Interpreter().run(nodes)
