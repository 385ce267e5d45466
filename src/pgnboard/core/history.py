"""Append-only sequence of board snapshots."""

from __future__ import annotations

from collections.abc import Iterator

from pgnboard.core.board import Board, Snapshot
from pgnboard.core.enums import PieceType
from pgnboard.core.piece import Piece
from pgnboard.core.types import Square, square_name


class BoardHistory:
    """Snapshot history of one game, starting at the standard position.

    Recorded snapshots are never mutated. The engine edits a :meth:`fresh`
    working copy, then :meth:`record` freezes it as the new latest snapshot.
    """

    __slots__ = ("_snapshots",)

    def __init__(self) -> None:
        self._snapshots: list[Snapshot] = [Snapshot.initial()]

    @property
    def latest(self) -> Snapshot:
        return self._snapshots[-1]

    def fresh(self) -> Board:
        """Mutable working copy of the latest snapshot."""
        return self.latest.thaw()

    def record(self, board: Board) -> Snapshot:
        """Freeze *board* and append it as the latest snapshot."""
        snapshot = board.freeze()
        self._snapshots.append(snapshot)
        return snapshot

    def apply(
        self,
        from_sq: Square,
        to_sq: Square,
        board: Board,
        promote_to: PieceType | None = None,
        en_passant_capture: Square | None = None,
    ) -> Board:
        """Move the piece on *from_sq* to *to_sq* on the working copy *board*.

        A promotion replaces the mover with *promote_to* of the same color.
        *en_passant_capture*, when given, is the square of the pawn taken en
        passant and is cleared as well.
        """
        piece = board[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {square_name(from_sq)}")

        board[from_sq] = None
        if promote_to is not None:
            piece = Piece(piece.color, promote_to)
        board[to_sq] = piece
        if en_passant_capture is not None:
            board[en_passant_capture] = None
        return board

    def snapshots(self) -> tuple[Snapshot, ...]:
        return tuple(self._snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)

    def __getitem__(self, index: int) -> Snapshot:
        return self._snapshots[index]

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(self._snapshots)
