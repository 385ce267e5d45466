"""Lexer: raw notation text → token stream."""

from __future__ import annotations

from dataclasses import dataclass

from pgnboard.errors import LexicalError
from pgnboard.notation.tokens import Token, TokenKind

_BLANKS = frozenset(" \t\r\f\v")
_DIGITS = frozenset("0123456789")
# Files, piece letters, and the lower-case piece letters seen in promotions.
_LETTERS = frozenset("abcdefgh" "RNBQK" "rnqk")
# Notation noise: check/mate marks, annotation glyphs and capture marks.
_NOISE = frozenset("+#!?x")
_CASTLE_LETTERS = "oO"
_CASTLE_ZEROS = "0"


@dataclass(frozen=True, slots=True)
class LexerSettings:
    """Which skippable spans are emitted as tokens instead of discarded."""

    emit_comments: bool = False
    emit_variations: bool = False


@dataclass(frozen=True, slots=True)
class Checkpoint:
    """Saved cursor state for speculative scans."""

    index: int
    line: int
    column: int


class Cursor:
    """Character cursor over the input with line/column tracking."""

    __slots__ = ("_text", "index", "line", "column")

    def __init__(self, text: str) -> None:
        self._text = text
        self.index = 0
        self.line = 1
        self.column = 1

    @property
    def current(self) -> str | None:
        if self.index >= len(self._text):
            return None
        return self._text[self.index]

    def peek(self, offset: int = 1) -> str | None:
        """Character *offset* places past the current one, if any."""
        pos = self.index + offset
        if pos >= len(self._text):
            return None
        return self._text[pos]

    def advance(self) -> str | None:
        """Consume and return the current character."""
        ch = self.current
        if ch is None:
            return None
        self.index += 1
        if ch == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def checkpoint(self) -> Checkpoint:
        return Checkpoint(self.index, self.line, self.column)

    def restore(self, checkpoint: Checkpoint) -> None:
        self.index = checkpoint.index
        self.line = checkpoint.line
        self.column = checkpoint.column


class Lexer:
    """Converts notation text into :class:`Token` objects.

    Whitespace and notation noise (``+ # ! ? x`` and ``$n`` glyphs) are
    dropped. Comment and variation spans are consumed whole and only emitted
    when :class:`LexerSettings` asks for them.
    """

    __slots__ = ("_cursor", "_settings", "_tokens")

    def __init__(self, text: str, settings: LexerSettings | None = None) -> None:
        self._cursor = Cursor(text)
        self._settings = settings or LexerSettings()
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        cursor = self._cursor
        while (ch := cursor.current) is not None:
            if ch in _BLANKS or ch == "\n":
                cursor.advance()
                continue

            line, column = cursor.line, cursor.column
            if ch in _DIGITS:
                self._lex_number(line, column)
            elif ch in _LETTERS:
                self._single(TokenKind.LETTER, line, column)
            elif ch == ".":
                self._single(TokenKind.DOT, line, column)
            elif ch == "/":
                self._single(TokenKind.SLASH, line, column)
            elif ch == "=":
                self._single(TokenKind.EQUALS, line, column)
            elif ch in _NOISE:
                cursor.advance()
            elif ch == "$":
                self._skip_glyph(line, column)
            elif ch == "*":
                self._single(TokenKind.RESULT, line, column)
            elif ch == "[":
                self._lex_header(line, column)
            elif ch in _CASTLE_LETTERS:
                cursor.advance()
                self._lex_castle(_CASTLE_LETTERS, line, column)
            elif ch == "{":
                self._lex_comment(line, column)
            elif ch == ";":
                self._lex_line_comment(line, column)
            elif ch == "(":
                self._lex_variation(line, column)
            else:
                raise LexicalError(f"Unknown token {ch!r}", line, column)
        return self._tokens

    # ── Helpers ──────────────────────────────────────────────────────────

    def _emit(
        self, kind: TokenKind, text: str, line: int, column: int, key: str = ""
    ) -> None:
        self._tokens.append(Token(kind, text, line, column, key))

    def _single(self, kind: TokenKind, line: int, column: int) -> None:
        self._emit(kind, self._cursor.advance() or "", line, column)

    def _error(self, message: str) -> LexicalError:
        return LexicalError(message, self._cursor.line, self._cursor.column)

    def _read_digits(self) -> str:
        cursor = self._cursor
        digits = ""
        while cursor.current is not None and cursor.current in _DIGITS:
            digits += cursor.advance() or ""
        return digits

    # ── Numbers, move numbers and results ────────────────────────────────

    def _lex_number(self, line: int, column: int) -> None:
        cursor = self._cursor
        digits = self._read_digits()

        if cursor.current == ".":
            if cursor.peek(1) == "." and cursor.peek(2) == ".":
                for _ in range(3):
                    cursor.advance()
                self._emit(TokenKind.BLACK_MOVE, digits, line, column)
            else:
                cursor.advance()
                self._emit(TokenKind.MOVE_NUMBER, digits, line, column)
            return

        if digits in ("0", "1"):
            result = scan_result(cursor, digits)
            if result is not None:
                self._emit(TokenKind.RESULT, result, line, column)
                return
            if digits == "0" and cursor.current == "-":
                self._lex_castle(_CASTLE_ZEROS, line, column)
                return

        self._emit(TokenKind.NUMBER, digits, line, column)

    # ── Headers ──────────────────────────────────────────────────────────

    def _lex_header(self, line: int, column: int) -> None:
        cursor = self._cursor
        cursor.advance()  # '['
        key = ""
        value = ""
        in_value = False

        while True:
            ch = cursor.current
            if ch is None:
                raise self._error("Expected ']' to close game detail")
            if ch == "\n":
                raise self._error("Unterminated game detail")
            if ch == "]":
                break
            cursor.advance()
            if ch == " " and not in_value:
                in_value = True
            elif in_value:
                value += ch
            else:
                key += ch

        cursor.advance()  # ']'
        if not key:
            raise LexicalError("Game detail is missing its name", line, column)
        self._emit(TokenKind.HEADER, value, line, column, key)

    # ── Castling ─────────────────────────────────────────────────────────

    def _lex_castle(self, marks: str, line: int, column: int) -> None:
        """Finish a castle token; the first mark has been consumed."""
        self._expect("-", "Expected '-' in castle notation")
        self._expect_mark(marks)
        if self._cursor.current != "-":
            self._emit(TokenKind.CASTLE_KINGSIDE, "O-O", line, column)
            return
        self._cursor.advance()
        self._expect_mark(marks)
        self._emit(TokenKind.CASTLE_QUEENSIDE, "O-O-O", line, column)

    def _expect(self, char: str, message: str) -> None:
        if self._cursor.current != char:
            raise self._error(message)
        self._cursor.advance()

    def _expect_mark(self, marks: str) -> None:
        ch = self._cursor.current
        if ch is None or ch not in marks:
            raise self._error(f"Expected {marks[0]!r} in castle notation")
        self._cursor.advance()

    # ── Skippable spans ──────────────────────────────────────────────────

    def _skip_glyph(self, line: int, column: int) -> None:
        self._cursor.advance()  # '$'
        if not self._read_digits():
            raise LexicalError("Expected digits after '$'", line, column)

    def _lex_comment(self, line: int, column: int) -> None:
        cursor = self._cursor
        cursor.advance()  # '{'
        text = ""
        while cursor.current != "}":
            if cursor.current is None or cursor.current == "\n":
                raise self._error("Unterminated comment: expected '}'")
            text += cursor.advance() or ""
        cursor.advance()  # '}'
        if self._settings.emit_comments:
            self._emit(TokenKind.COMMENT, text, line, column)

    def _lex_line_comment(self, line: int, column: int) -> None:
        cursor = self._cursor
        cursor.advance()  # ';'
        text = ""
        while cursor.current is not None and cursor.current != "\n":
            text += cursor.advance() or ""
        if self._settings.emit_comments:
            self._emit(TokenKind.COMMENT, text, line, column)

    def _lex_variation(self, line: int, column: int) -> None:
        cursor = self._cursor
        cursor.advance()  # '('
        text = ""
        depth = 1
        while True:
            ch = cursor.current
            if ch is None:
                raise self._error("Unterminated variation: expected ')'")
            cursor.advance()
            if ch == "{":
                rest = self._read_through("}")
                if rest is None:
                    raise self._error("Unterminated comment: expected '}'")
                ch += rest
            elif ch == ";":
                ch += self._read_through("\n") or ""
            elif ch == "(":
                depth += 1
            elif ch == ")":
                depth -= 1
                if depth == 0:
                    break
            text += ch
        if self._settings.emit_variations:
            self._emit(TokenKind.VARIATION, text, line, column)

    def _read_through(self, end: str) -> str | None:
        """Consume up to and including *end*; ``None`` if input runs out."""
        cursor = self._cursor
        text = ""
        while (ch := cursor.advance()) is not None:
            text += ch
            if ch == end:
                return text
        return None


def tokenize(text: str, settings: LexerSettings | None = None) -> list[Token]:
    """Tokenize *text*, raising :class:`LexicalError` on malformed input."""
    return Lexer(text, settings).tokenize()


def scan_result(cursor: Cursor, first: str) -> str | None:
    """Try to finish a result literal whose first digit was already consumed.

    Only ``1-0``, ``0-1`` and ``1/2-1/2`` are recognised; spaces between
    characters are tolerated. On success the cursor is left just past the
    literal and the literal is returned. On failure the cursor is restored to
    where the scan started and ``None`` is returned.
    """
    tails = ("-0", "/2-1/2") if first == "1" else ("-1",)
    start = cursor.checkpoint()
    for tail in tails:
        if _match_spaced(cursor, tail):
            return first + tail
        cursor.restore(start)
    return None


def _match_spaced(cursor: Cursor, expected: str) -> bool:
    for char in expected:
        while cursor.current == " ":
            cursor.advance()
        if cursor.current != char:
            return False
        cursor.advance()
    return True
