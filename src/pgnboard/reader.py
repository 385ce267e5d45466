"""Reader: the lexer → parser → interpreter pipeline for one game."""

from __future__ import annotations

import logging
from pathlib import Path

from pgnboard.engine.interpreter import Interpreter
from pgnboard.errors import PgnError
from pgnboard.game.record import GameRecord
from pgnboard.notation.lexer import LexerSettings, tokenize
from pgnboard.notation.parser import parse

_LOGGER = logging.getLogger(__name__)


def read_pgn(text: str, *, settings: LexerSettings | None = None) -> GameRecord:
    """Read one game from *text* and return its record.

    Raises a :class:`~pgnboard.errors.PgnError` subclass naming the first
    stage that rejected the input.
    """
    stage = "lexing"
    try:
        tokens = tokenize(text, settings)
        _LOGGER.debug("Lexed %d tokens", len(tokens))
        stage = "parsing"
        nodes = parse(tokens)
        _LOGGER.debug("Parsed %d nodes", len(nodes))
        stage = "interpreting"
        record = Interpreter().run(nodes)
    except PgnError as exc:
        _LOGGER.debug("Reading failed while %s: %s", stage, exc)
        raise

    _LOGGER.debug(
        "Read game with %d plies, result %s", record.ply_count, record.result
    )
    return record


def load_pgn_file(
    path: str | Path, *, settings: LexerSettings | None = None
) -> GameRecord:
    """Read the game stored in the UTF-8 file at *path*."""
    file_path = Path(path)
    _LOGGER.info("Loading %s", file_path)
    return read_pgn(file_path.read_text(encoding="utf-8"), settings=settings)
