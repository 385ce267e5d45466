"""Tests for the notation lexer."""

import pytest

from pgnboard.errors import LexicalError, PgnError
from pgnboard.notation.lexer import Cursor, LexerSettings, scan_result, tokenize
from pgnboard.notation.tokens import Token, TokenKind


def _kinds(text: str, settings: LexerSettings | None = None) -> list[TokenKind]:
    return [t.kind for t in tokenize(text, settings)]


def _texts(text: str) -> list[str]:
    return [t.text for t in tokenize(text)]


class TestMovetext:
    def test_simple_move(self) -> None:
        assert _kinds("1. e4 e5") == [
            TokenKind.MOVE_NUMBER,
            TokenKind.LETTER,
            TokenKind.NUMBER,
            TokenKind.LETTER,
            TokenKind.NUMBER,
        ]
        assert _texts("1. e4 e5") == ["1", "e", "4", "e", "5"]

    def test_multi_digit_move_number(self) -> None:
        tokens = tokenize("12. Nf3")
        assert tokens[0] == Token(TokenKind.MOVE_NUMBER, "12", 1, 1)

    def test_black_move_marker(self) -> None:
        tokens = tokenize("3... Nc6")
        assert tokens[0].kind == TokenKind.BLACK_MOVE
        assert tokens[0].text == "3"
        assert _texts("3... Nc6")[1:] == ["N", "c", "6"]

    def test_noise_is_dropped(self) -> None:
        assert _texts("exd5+ Qxf7# Nc3!? Bb5?? $14") == [
            "e", "d", "5", "Q", "f", "7", "N", "c", "3", "B", "b", "5",
        ]

    def test_promotion(self) -> None:
        assert _kinds("e8=Q") == [
            TokenKind.LETTER,
            TokenKind.NUMBER,
            TokenKind.EQUALS,
            TokenKind.LETTER,
        ]

    def test_newlines_are_whitespace(self) -> None:
        assert _texts("1. e4\n\te5\r\n") == ["1", "e", "4", "e", "5"]


class TestResults:
    @pytest.mark.parametrize("literal", ["1-0", "0-1", "1/2-1/2", "*"])
    def test_result_literals(self, literal: str) -> None:
        assert tokenize(literal) == [Token(TokenKind.RESULT, literal, 1, 1)]

    def test_spaces_inside_result(self) -> None:
        tokens = tokenize("1 - 0")
        assert [(t.kind, t.text) for t in tokens] == [(TokenKind.RESULT, "1-0")]

    def test_result_after_rank_digit(self) -> None:
        assert _texts("Rf1 1-0") == ["R", "f", "1", "1-0"]

    def test_rank_one_before_result_is_a_number(self) -> None:
        tokens = tokenize("Qe1 0-1")
        assert tokens[2] == Token(TokenKind.NUMBER, "1", 1, 3)
        assert tokens[3].kind == TokenKind.RESULT

    def test_one_one_is_not_a_result(self) -> None:
        with pytest.raises(LexicalError, match="Unknown token '-'"):
            tokenize("1-1")


class TestCastling:
    @pytest.mark.parametrize("text", ["O-O", "o-o", "0-0"])
    def test_kingside(self, text: str) -> None:
        assert tokenize(text) == [Token(TokenKind.CASTLE_KINGSIDE, "O-O", 1, 1)]

    @pytest.mark.parametrize("text", ["O-O-O", "o-o-o", "0-0-0"])
    def test_queenside(self, text: str) -> None:
        assert tokenize(text) == [
            Token(TokenKind.CASTLE_QUEENSIDE, "O-O-O", 1, 1)
        ]

    def test_castle_with_check(self) -> None:
        assert _kinds("O-O+") == [TokenKind.CASTLE_KINGSIDE]

    @pytest.mark.parametrize("text", ["O", "O-", "O-X", "O-O-", "OO"])
    def test_malformed_castle(self, text: str) -> None:
        with pytest.raises(LexicalError, match="castle notation"):
            tokenize(text)


class TestHeaders:
    def test_header_token(self) -> None:
        (token,) = tokenize('[White "Player 1"]')
        assert token.kind == TokenKind.HEADER
        assert token.key == "White"
        assert token.text == '"Player 1"'

    def test_headers_then_moves(self) -> None:
        kinds = _kinds('[Event "Casual"]\n[Site "?"]\n\n1. d4')
        assert kinds[:2] == [TokenKind.HEADER, TokenKind.HEADER]
        assert kinds[2] == TokenKind.MOVE_NUMBER

    def test_unterminated_header_at_end(self) -> None:
        with pytest.raises(LexicalError, match="Expected ']'"):
            tokenize('[White "Player 1"')

    def test_header_cannot_span_lines(self) -> None:
        with pytest.raises(LexicalError, match="Unterminated game detail"):
            tokenize('[White "Player\n1"]')

    def test_header_needs_a_name(self) -> None:
        with pytest.raises(LexicalError, match="missing its name"):
            tokenize('[ "Player 1"]')


class TestSkippableSpans:
    def test_comment_is_dropped(self) -> None:
        assert _texts("1. e4 {best by test} e5") == ["1", "e", "4", "e", "5"]

    def test_comment_emitted_when_enabled(self) -> None:
        settings = LexerSettings(emit_comments=True)
        tokens = tokenize("e4 {good}", settings)
        assert tokens[-1] == Token(TokenKind.COMMENT, "good", 1, 4)

    def test_comment_cannot_span_lines(self) -> None:
        with pytest.raises(LexicalError, match="Unterminated comment"):
            tokenize("1. e4 {first\nsecond}")

    def test_unterminated_comment(self) -> None:
        with pytest.raises(LexicalError, match="expected '}'"):
            tokenize("1. e4 {open")

    def test_line_comment(self) -> None:
        assert _texts("1. e4 ; king pawn\ne5") == ["1", "e", "4", "e", "5"]

    def test_nested_variation_dropped(self) -> None:
        text = "1. e4 (1. d4 d5 (1... Nf6 {?}) 2. c4) e5"
        assert _texts(text) == ["1", "e", "4", "e", "5"]

    def test_variation_emitted_with_nested_text(self) -> None:
        settings = LexerSettings(emit_variations=True)
        tokens = tokenize("(1. c4 (1. d4) e5)", settings)
        assert tokens == [Token(TokenKind.VARIATION, "1. c4 (1. d4) e5", 1, 1)]

    def test_variation_may_span_lines(self) -> None:
        assert _texts("1. e4 (1. c4\n c5) e5") == ["1", "e", "4", "e", "5"]

    def test_variation_interior_is_not_lexed(self) -> None:
        assert _texts("1. e4 (%%% ~~~) e5") == ["1", "e", "4", "e", "5"]

    def test_parenthesis_inside_variation_comment(self) -> None:
        assert _texts("1. e4 (1. d4 {a)b}) e5") == ["1", "e", "4", "e", "5"]

    def test_parenthesis_inside_variation_line_comment(self) -> None:
        text = "1. e4 (1. d4 ; a)b\n d5) e5"
        assert _texts(text) == ["1", "e", "4", "e", "5"]

    def test_variation_text_keeps_its_comments(self) -> None:
        settings = LexerSettings(emit_variations=True)
        tokens = tokenize("(1. d4 {a)b})", settings)
        assert tokens == [Token(TokenKind.VARIATION, "1. d4 {a)b}", 1, 1)]

    def test_unterminated_comment_inside_variation(self) -> None:
        with pytest.raises(LexicalError, match="Unterminated comment"):
            tokenize("1. e4 (1. d4 {open)")

    def test_unterminated_variation(self) -> None:
        with pytest.raises(LexicalError, match="expected '\\)'"):
            tokenize("1. e4 (1. d4 (1... d5)")

    def test_glyph_needs_digits(self) -> None:
        with pytest.raises(LexicalError, match="digits after"):
            tokenize("e4 $")


class TestErrors:
    def test_unknown_character_position(self) -> None:
        with pytest.raises(LexicalError) as excinfo:
            tokenize("1. e4\n  %")
        assert excinfo.value.line == 2
        assert excinfo.value.column == 3
        assert "(line 2, column 3)" in str(excinfo.value)

    def test_lexical_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            tokenize("@")
        with pytest.raises(PgnError):
            tokenize("@")


class TestCursor:
    def test_tracks_lines_and_columns(self) -> None:
        cursor = Cursor("a\nbc")
        assert cursor.advance() == "a"
        assert (cursor.line, cursor.column) == (1, 2)
        assert cursor.advance() == "\n"
        assert (cursor.line, cursor.column) == (2, 1)
        assert cursor.peek() == "c"
        assert cursor.current == "b"

    def test_advance_at_end(self) -> None:
        cursor = Cursor("")
        assert cursor.current is None
        assert cursor.advance() is None
        assert cursor.peek() is None

    def test_checkpoint_restore(self) -> None:
        cursor = Cursor("ab\ncd")
        saved = cursor.checkpoint()
        for _ in range(4):
            cursor.advance()
        cursor.restore(saved)
        assert cursor.current == "a"
        assert (cursor.index, cursor.line, cursor.column) == (0, 1, 1)


class TestScanResult:
    def test_commits_on_success(self) -> None:
        cursor = Cursor("-0 rest")
        assert scan_result(cursor, "1") == "1-0"
        assert cursor.current == " "

    def test_draw(self) -> None:
        cursor = Cursor("/2 - 1/2")
        assert scan_result(cursor, "1") == "1/2-1/2"
        assert cursor.current is None

    def test_black_win(self) -> None:
        assert scan_result(Cursor("-1"), "0") == "0-1"

    @pytest.mark.parametrize(
        ("first", "rest"),
        [("1", "-1"), ("0", "-0"), ("1", "/2-1/3"), ("1", " e4"), ("0", "")],
    )
    def test_restores_on_failure(self, first: str, rest: str) -> None:
        cursor = Cursor(rest)
        assert scan_result(cursor, first) is None
        assert cursor.index == 0
        assert (cursor.line, cursor.column) == (1, 1)
