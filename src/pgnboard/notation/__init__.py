"""Notation package: lexing and parsing of PGN-style game text."""

from pgnboard.notation.lexer import (
    Checkpoint,
    Cursor,
    Lexer,
    LexerSettings,
    scan_result,
    tokenize,
)
from pgnboard.notation.nodes import (
    CastleMove,
    DetailNode,
    HalfMove,
    MoveNode,
    Node,
    PieceMove,
    ResultNode,
)
from pgnboard.notation.parser import Parser, parse
from pgnboard.notation.tokens import Token, TokenKind

__all__ = [
    # Tokens
    "Token",
    "TokenKind",
    # Lexer
    "Checkpoint",
    "Cursor",
    "Lexer",
    "LexerSettings",
    "scan_result",
    "tokenize",
    # Nodes
    "CastleMove",
    "DetailNode",
    "HalfMove",
    "MoveNode",
    "Node",
    "PieceMove",
    "ResultNode",
    # Parser
    "Parser",
    "parse",
]
