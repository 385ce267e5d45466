"""Qt bridge to read game notation in a worker thread."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from pgnboard.errors import PgnError
from pgnboard.notation.lexer import LexerSettings
from pgnboard.reader import read_pgn


class PgnReaderWorker(QObject):
    """Thread-affine worker that reads games on demand.

    Move it to a ``QThread`` and connect a queued signal to
    :meth:`request_read`; results come back through :attr:`game_ready`
    (request id, :class:`~pgnboard.game.record.GameRecord`) or
    :attr:`read_error` (request id, message).
    """

    game_ready = pyqtSignal(int, object)
    read_error = pyqtSignal(int, str)

    __slots__ = ("_settings",)

    def __init__(self, *, settings: LexerSettings | None = None) -> None:
        super().__init__()
        self._settings = settings or LexerSettings()

    @pyqtSlot(str, int)
    def request_read(self, text: str, request_id: int) -> None:
        """Read the game in *text* and emit the record or the error."""
        try:
            record = read_pgn(text, settings=self._settings)
        except PgnError as exc:
            self.read_error.emit(request_id, str(exc))
            return
        self.game_ready.emit(request_id, record)

    @pyqtSlot(bool, bool)
    def set_settings(self, emit_comments: bool, emit_variations: bool) -> None:
        """Update lexer settings (takes effect on the next read)."""
        self._settings = LexerSettings(
            emit_comments=emit_comments, emit_variations=emit_variations
        )
