"""Parser: token stream → ordered sequence of nodes.

Grammar (informally)::

    game      := (detail | move | result)*
    move      := MOVE_NUMBER half [half]
    half      := CASTLE | piece_half | pawn_half
    piece_half:= PIECE [FILE FILE | FILE | RANK FILE] RANK
    pawn_half := FILE [FILE] RANK [EQUALS PIECE]

A move ends at the next move number, at a result, or at the end of input.
Black-move markers, comments and variations are dropped before parsing.
"""

from __future__ import annotations

from collections.abc import Iterable

from pgnboard.core.enums import CastleSide, GameResult, PieceType
from pgnboard.core.types import make_square, parse_file, parse_rank
from pgnboard.errors import PgnSyntaxError
from pgnboard.notation.nodes import (
    CastleMove,
    DetailNode,
    HalfMove,
    MoveNode,
    Node,
    PieceMove,
    ResultNode,
)
from pgnboard.notation.tokens import SKIPPED_KINDS, Token, TokenKind

_PIECE_LETTERS = frozenset("RNBQK")
_PROMOTION_LETTERS = frozenset("NBRQ")
_MOVE_END_KINDS = frozenset({TokenKind.MOVE_NUMBER, TokenKind.RESULT})


class Parser:
    """Consumes tokens into detail, move and result nodes."""

    __slots__ = ("_tokens", "_index")

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = [t for t in tokens if t.kind not in SKIPPED_KINDS]
        self._index = 0

    def parse(self) -> list[Node]:
        nodes: list[Node] = []
        while (token := self._current) is not None:
            if token.kind == TokenKind.HEADER:
                nodes.append(self._parse_detail())
            elif token.kind == TokenKind.MOVE_NUMBER:
                nodes.append(self._parse_move())
            elif token.kind == TokenKind.RESULT:
                self._advance()
                nodes.append(ResultNode(GameResult(token.text)))
            else:
                raise self._error(
                    f"Unexpected {token.kind.value} {token.text!r}", token
                )
        return nodes

    # ── Cursor helpers ───────────────────────────────────────────────────

    @property
    def _current(self) -> Token | None:
        if self._index >= len(self._tokens):
            return None
        return self._tokens[self._index]

    def _advance(self) -> Token:
        token = self._current
        if token is None:
            raise self._error("Unexpected end of notation")
        self._index += 1
        return token

    def _at(self, kind: TokenKind) -> bool:
        token = self._current
        return token is not None and token.kind == kind

    def _expect(self, kind: TokenKind, message: str) -> Token:
        if not self._at(kind):
            raise self._error(message, self._current)
        return self._advance()

    def _error(self, message: str, token: Token | None = None) -> PgnSyntaxError:
        if token is None and self._tokens:
            # Input ended early; point at the last token seen.
            token = self._tokens[min(self._index, len(self._tokens)) - 1]
        if token is None:
            return PgnSyntaxError(message)
        return PgnSyntaxError(message, line=token.line, column=token.column)

    # ── Productions ──────────────────────────────────────────────────────

    def _parse_detail(self) -> DetailNode:
        token = self._advance()
        value = token.text
        if len(value) < 2 or value[0] != '"' or value[-1] != '"':
            raise self._error(
                f'Game detail "{token.key}" is missing quotes for its value', token
            )
        return DetailNode(token.key, value[1:-1])

    def _parse_move(self) -> MoveNode:
        number_token = self._advance()
        if self._at_move_end():
            raise self._error(
                f"Move {number_token.text} has no half-moves", number_token
            )
        white = self._parse_half_move()
        black = None if self._at_move_end() else self._parse_half_move()
        return MoveNode(int(number_token.text), white, black)

    def _at_move_end(self) -> bool:
        token = self._current
        return token is None or token.kind in _MOVE_END_KINDS

    def _parse_half_move(self) -> HalfMove:
        token = self._current
        if token is None:
            raise self._error("Expected a half-move")
        if token.kind == TokenKind.CASTLE_KINGSIDE:
            self._advance()
            return CastleMove(CastleSide.KINGSIDE)
        if token.kind == TokenKind.CASTLE_QUEENSIDE:
            self._advance()
            return CastleMove(CastleSide.QUEENSIDE)
        if token.kind == TokenKind.LETTER and token.text in _PIECE_LETTERS:
            return self._parse_piece_move()
        return self._parse_pawn_move()

    def _parse_piece_move(self) -> PieceMove:
        piece = PieceType.from_letter(self._advance().text)
        from_file: int | None = None
        from_rank: int | None = None

        token = self._current
        if token is not None and token.kind == TokenKind.LETTER:
            file_token = self._advance()
            if self._at(TokenKind.LETTER):
                # The first letter was the origin file, not the target file.
                from_file = self._file(file_token)
                file_token = self._advance()
        elif token is not None and token.kind == TokenKind.NUMBER:
            from_rank = self._rank(self._advance())
            file_token = self._expect(
                TokenKind.LETTER, "Expected target file after rank disambiguator"
            )
        else:
            raise self._error(
                f"Expected a square after piece letter {piece.letter!r}", token
            )

        rank_token = self._expect(TokenKind.NUMBER, "Expected target rank")
        target = make_square(self._file(file_token), self._rank(rank_token))
        return PieceMove(piece, target, from_file, from_rank)

    def _parse_pawn_move(self) -> PieceMove:
        file_token = self._expect(TokenKind.LETTER, "Invalid pawn notation")
        from_file: int | None = None
        if self._at(TokenKind.LETTER):
            # A second file letter means a capture from the first file.
            from_file = self._file(file_token)
            file_token = self._advance()

        rank_token = self._expect(
            TokenKind.NUMBER, "Expected target rank in pawn move"
        )
        target = make_square(self._file(file_token), self._rank(rank_token))

        promotion: PieceType | None = None
        if self._at(TokenKind.EQUALS):
            self._advance()
            piece_token = self._expect(
                TokenKind.LETTER, "Pawn promotion piece not detected"
            )
            promotion = self._promotion(piece_token)
        return PieceMove(PieceType.PAWN, target, from_file, None, promotion)

    # ── Token conversions ────────────────────────────────────────────────

    def _file(self, token: Token) -> int:
        try:
            return parse_file(token.text)
        except ValueError:
            raise self._error(
                f"Expected a file letter a-h, got {token.text!r}", token
            ) from None

    def _rank(self, token: Token) -> int:
        try:
            return parse_rank(token.text)
        except ValueError:
            raise self._error(
                f"Expected a rank digit 1-8, got {token.text!r}", token
            ) from None

    def _promotion(self, token: Token) -> PieceType:
        letter = token.text.upper()
        if letter not in _PROMOTION_LETTERS:
            raise self._error(f"Invalid promotion piece {token.text!r}", token)
        return PieceType.from_letter(letter)


def parse(tokens: Iterable[Token]) -> list[Node]:
    """Parse *tokens*, raising :class:`PgnSyntaxError` on grammar violations."""
    return Parser(tokens).parse()
