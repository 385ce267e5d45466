"""Game record: header data, snapshot history and result of one game."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from pgnboard.core.board import Snapshot
from pgnboard.core.enums import Color, GameResult
from pgnboard.core.types import Square, square_name
from pgnboard.notation.nodes import HalfMove


@dataclass(frozen=True, slots=True)
class PlyRecord:
    """One interpreted half-move.

    ``history[ply]`` is the position after this half-move. For castles
    *origin*/*target* are the king's squares.
    """

    ply: int
    move_number: int
    color: Color
    half_move: HalfMove
    origin: Square
    target: Square

    @property
    def uci(self) -> str:
        """Origin and target squares, e.g. ``e2e4``."""
        return square_name(self.origin) + square_name(self.target)


@dataclass(frozen=True, slots=True)
class GameRecord:
    """Finished result of reading one game's notation.

    *history* always starts with the standard starting position and holds one
    more snapshot than there are entries in *plies*. Header keys are lower
    case.
    """

    header: Mapping[str, str]
    history: tuple[Snapshot, ...]
    result: GameResult = GameResult.UNKNOWN
    plies: tuple[PlyRecord, ...] = field(default=())

    def __post_init__(self) -> None:
        if not self.history:
            raise ValueError("Game history must contain the starting position")
        if len(self.history) != len(self.plies) + 1:
            raise ValueError(
                f"History has {len(self.history)} snapshots "
                f"for {len(self.plies)} plies"
            )
        object.__setattr__(self, "header", MappingProxyType(dict(self.header)))
        object.__setattr__(self, "history", tuple(self.history))
        object.__setattr__(self, "plies", tuple(self.plies))

    @property
    def white(self) -> str:
        return self.header.get("white", "")

    @property
    def black(self) -> str:
        return self.header.get("black", "")

    @property
    def ply_count(self) -> int:
        return len(self.plies)

    @property
    def final(self) -> Snapshot:
        """Position after the last interpreted half-move."""
        return self.history[-1]

    def snapshot(self, index: int) -> Snapshot:
        """Position at *index*, where 0 is the starting position."""
        if not 0 <= index < len(self.history):
            raise IndexError(
                f"Snapshot index {index} out of range [0, {len(self.history)})"
            )
        return self.history[index]
