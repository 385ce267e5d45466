"""Tests for the game interpreter."""

import pytest

from pgnboard.core.board import Snapshot
from pgnboard.core.enums import CastleSide, Color, GameResult, PieceType
from pgnboard.core.piece import Piece
from pgnboard.core.types import A8, C8, D8, E1, E8, F1, F6, G1, H1
from pgnboard.engine.interpreter import Interpreter, interpret
from pgnboard.errors import InterpretError
from pgnboard.notation.lexer import tokenize
from pgnboard.notation.nodes import (
    CastleMove,
    DetailNode,
    MoveNode,
    PieceMove,
    ResultNode,
)
from pgnboard.notation.parser import parse

ITALIAN = "1. e4 e5 2. Nf3 Nc6 3. Bc4 Bc5 4. O-O Nf6"


def _run(text: str):
    return interpret(parse(tokenize(text)))


class TestInterpreter:
    def test_empty_game(self) -> None:
        record = Interpreter().run([])
        assert record.history == (Snapshot.initial(),)
        assert record.result == GameResult.UNKNOWN
        assert dict(record.header) == {}

    def test_one_snapshot_per_half_move(self) -> None:
        record = _run(ITALIAN)
        assert len(record.history) == 9
        assert record.ply_count == 8

    def test_header_keys_lower_cased(self) -> None:
        record = Interpreter().run([DetailNode("White", "Player 1")])
        assert record.header["white"] == "Player 1"
        assert record.white == "Player 1"

    def test_later_header_overrides_earlier(self) -> None:
        record = Interpreter().run(
            [DetailNode("Event", "A"), DetailNode("event", "B")]
        )
        assert dict(record.header) == {"event": "B"}

    def test_result_node(self) -> None:
        record = Interpreter().run([ResultNode(GameResult.DRAW)])
        assert record.result == GameResult.DRAW
        assert len(record.history) == 1

    def test_interpret_single_nodes(self) -> None:
        interpreter = Interpreter()
        interpreter.interpret(
            MoveNode(1, PieceMove(PieceType.PAWN, 28), PieceMove(PieceType.PAWN, 36))
        )
        record = interpreter.record()
        assert record.ply_count == 2
        assert [p.uci for p in record.plies] == ["e2e4", "e7e5"]


class TestPlyRecords:
    def test_ply_fields(self) -> None:
        record = _run("1. e4 e5 2. Nf3")
        last = record.plies[-1]
        assert last.ply == 3
        assert last.move_number == 2
        assert last.color == Color.WHITE
        assert last.uci == "g1f3"
        assert record.history[last.ply][last.target] == Piece(
            Color.WHITE, PieceType.KNIGHT
        )

    def test_castle_ply_uses_king_squares(self) -> None:
        record = _run(ITALIAN)
        castle = record.plies[6]
        assert castle.half_move == CastleMove(CastleSide.KINGSIDE)
        assert castle.uci == "e1g1"


class TestCastling:
    def test_kingside(self) -> None:
        record = _run(ITALIAN)
        after = record.history[7]
        assert after[G1] == Piece(Color.WHITE, PieceType.KING)
        assert after[F1] == Piece(Color.WHITE, PieceType.ROOK)
        assert after[E1] is None
        assert after[H1] is None
        assert record.final[F6] == Piece(Color.BLACK, PieceType.KNIGHT)

    def test_queenside_black(self) -> None:
        record = _run("1. e4 O-O-O")
        final = record.final
        assert final[C8] == Piece(Color.BLACK, PieceType.KING)
        assert final[D8] == Piece(Color.BLACK, PieceType.ROOK)
        assert final[E8] is None
        assert final[A8] is None

    def test_second_castle_raises(self) -> None:
        with pytest.raises(InterpretError, match="cannot castle") as excinfo:
            _run("1. O-O O-O 2. O-O")
        assert excinfo.value.ply == 3
        assert excinfo.value.half_move == CastleMove(CastleSide.KINGSIDE)

    def test_castle_after_king_move_raises(self) -> None:
        with pytest.raises(InterpretError, match="White cannot castle kingside"):
            _run("1. e4 e5 2. Ke2 Ke7 3. Ke1 Ke8 4. O-O")

    def test_other_color_may_still_castle(self) -> None:
        record = _run("1. O-O O-O")
        assert record.final[G1] == Piece(Color.WHITE, PieceType.KING)
        assert record.ply_count == 2


class TestErrors:
    def test_unresolvable_move(self) -> None:
        with pytest.raises(InterpretError) as excinfo:
            _run("1. e4 e5 2. Nf6")
        error = excinfo.value
        assert error.ply == 3
        assert error.half_move == PieceMove(PieceType.KNIGHT, F6)
        assert str(error).startswith("Move 2: Cannot interpret white move Nf6")
        assert isinstance(error.__cause__, InterpretError)

    def test_black_move_error(self) -> None:
        with pytest.raises(InterpretError, match="black move e4"):
            _run("1. e4 e4")
