"""Engine package: move resolution and game interpretation.

The Qt worker lives in :mod:`pgnboard.engine.qt_bridge` and is imported
explicitly so the core stays usable without a Qt event loop.
"""

from pgnboard.engine.interpreter import Interpreter, interpret
from pgnboard.engine.resolver import (
    BISHOP_DIRS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    ROOK_DIRS,
    MoveResolver,
    Resolution,
)

__all__ = [
    "BISHOP_DIRS",
    "Interpreter",
    "KING_OFFSETS",
    "KNIGHT_OFFSETS",
    "MoveResolver",
    "ROOK_DIRS",
    "Resolution",
    "interpret",
]
