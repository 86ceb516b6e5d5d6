"""Unit tests for /chessrules/chess/pieces.py"""

import pytest

from chessrules.chess.pieces import (
    PIECE_TO_SYMBOL,
    SYMBOL_TO_PIECE,
    Color,
    Piece,
    PieceType,
)


@pytest.mark.parametrize("char", [char.upper() for char in SYMBOL_TO_PIECE.keys()])
def test_creating_white_piece_from_symbol(char: str) -> None:
    """Capital letters are used for white pieces"""
    piece = Piece.from_symbol(char)
    assert piece.type == SYMBOL_TO_PIECE[char.lower()]
    assert piece.color == Color.WHITE
    assert not piece.has_moved


@pytest.mark.parametrize("char", [char.lower() for char in SYMBOL_TO_PIECE.keys()])
def test_creating_black_piece_from_symbol(char: str) -> None:
    """Lower case letters are used for black pieces"""
    piece = Piece.from_symbol(char)
    assert piece.type == SYMBOL_TO_PIECE[char.lower()]
    assert piece.color == Color.BLACK


@pytest.mark.parametrize("piece_type", [piece_type for piece_type in PieceType])
def test_pieces_to_symbol(piece_type: PieceType) -> None:
    """Capital letters for the white pieces, lower case for the black ones"""
    assert Piece(piece_type, Color.WHITE).to_symbol() == PIECE_TO_SYMBOL[piece_type].upper()
    assert Piece(piece_type, Color.BLACK).to_symbol() == PIECE_TO_SYMBOL[piece_type].lower()


@pytest.mark.parametrize(
    "piece_type, points",
    [
        (PieceType.PAWN, 10),
        (PieceType.KNIGHT, 30),
        (PieceType.BISHOP, 30),
        (PieceType.ROOK, 50),
        (PieceType.QUEEN, 90),
        (PieceType.KING, 900),
    ],
)
def test_piece_points(piece_type: PieceType, points: int) -> None:
    assert Piece(piece_type, Color.BLACK).points == points


@pytest.mark.parametrize("color", [c for c in Color])
def test_moved_returns_a_new_value(color: Color) -> None:
    """Marking a piece as moved must not change the original (the board owns pieces by value)"""
    piece = Piece(PieceType.KNIGHT, color)
    moved = piece.moved()
    assert moved.has_moved
    assert not piece.has_moved
    assert moved.type == piece.type
    assert moved.color == piece.color
    assert moved != piece


def test_opponent_color() -> None:
    assert Color.WHITE.opponent == Color.BLACK
    assert Color.BLACK.opponent == Color.WHITE
