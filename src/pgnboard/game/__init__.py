"""Game layer: the record produced by reading a game's notation."""

from pgnboard.game.record import GameRecord, PlyRecord

__all__ = [
    "GameRecord",
    "PlyRecord",
]
