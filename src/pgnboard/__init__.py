"""pgnboard: replay PGN game notation into a history of board positions.

Quick start::

    from pgnboard import read_pgn

    record = read_pgn('[White "Player 1"] 1. e4 e5 2. Nf3 Nc6 1-0')
    print(record.white)           # Player 1
    print(record.final)           # board diagram after 2... Nc6
    print(len(record.history))    # 5 (start position + 4 half-moves)
"""

from pgnboard.core.enums import GameResult
from pgnboard.errors import InterpretError, LexicalError, PgnError, PgnSyntaxError
from pgnboard.game.record import GameRecord, PlyRecord
from pgnboard.notation.lexer import LexerSettings
from pgnboard.reader import load_pgn_file, read_pgn

__all__ = [
    "GameRecord",
    "GameResult",
    "InterpretError",
    "LexerSettings",
    "LexicalError",
    "PgnError",
    "PgnSyntaxError",
    "PlyRecord",
    "load_pgn_file",
    "read_pgn",
]
