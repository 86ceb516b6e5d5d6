"""
Pytest will auto-discover / import this file called 'conftest.py'. ]
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from chessrules.chess.board import Board
from chessrules.chess.game import Game
from chessrules.chess.pieces import Color, Piece, PieceType
from chessrules.chess.position import Position

EMPTY_FEN = "/".join(["8"] * 8)


@pytest.fixture
def new_game() -> Game:
    return Game.new_game()


@pytest.fixture
def board_with_single_piece() -> Callable[[PieceType, Color, Position], Board]:
    """Call the inner function that will be returned with the desired piece type, color, and position"""

    def _create_board(
        piece_type: PieceType,
        color: Color,
        position: Position = Position(4, 3),
    ) -> Board:
        board = Board.from_fen(EMPTY_FEN)
        board.place_piece(Piece(piece_type, color), position)
        return board

    return _create_board


@pytest.fixture
def game_from_fen() -> Callable[..., Game]:
    """Build a Game from a piece placement string, with the requested side to move"""

    def _create_game(
        fen: str, to_move: Color = Color.WHITE, king_safety: bool = False
    ) -> Game:
        return Game(Board.from_fen(fen), current_player=to_move, king_safety=king_safety)

    return _create_game
