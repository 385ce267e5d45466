"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from pgnboard.core.board import Board
from pgnboard.core.piece import Piece
from pgnboard.core.types import parse_square

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def pgn_file(tmp_path: Path) -> Iterator[Path]:
    """A short two-move game written to disk."""
    path = tmp_path / "game.pgn"
    path.write_text(
        '[Event "Casual"]\n[White "Player 1"]\n[Black "Player 2"]\n\n'
        "1. e4 e5 2. Nf3 Nc6 1-0\n",
        encoding="utf-8",
    )
    yield path


BoardFactory = Callable[[dict[str, str]], Board]


@pytest.fixture
def make_board() -> BoardFactory:
    """Build an otherwise empty board from ``{"e1": "K", "e8": "k"}``."""

    def _make(placement: dict[str, str]) -> Board:
        board = Board()
        for name, char in placement.items():
            board[parse_square(name)] = Piece.from_char(char)
        return board

    return _make
