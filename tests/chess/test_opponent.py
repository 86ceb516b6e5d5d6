"""Unit tests for /chessrules/chess/opponent.py"""

from copy import deepcopy
from random import Random
from typing import Callable

import pytest

from chessrules.chess.game import Game
from chessrules.chess.opponent import (
    Opponent,
    choose_opponent_move,
    positional_bonus,
    score_move,
    score_moves,
)
from chessrules.chess.pieces import Color, Piece, PieceType
from chessrules.chess.position import Position
from chessrules.core.exceptions import NoLegalMovesError, NotYourTurnError

GameFactory = Callable[..., Game]

# black rook can take the white queen along row 4
QUEEN_HANGS = "4k3/8/8/8/r4Q2/8/8/4K3"
DOUBLE_PUSHES = {
    (Position(6, 3), Position(4, 3)),
    (Position(6, 4), Position(4, 4)),
}


@pytest.mark.parametrize(
    "position, bonus",
    [
        (Position(3, 3), 5),
        (Position(4, 4), 5),
        (Position(2, 5), 2),
        (Position(5, 2), 2),
        (Position(2, 1), 0),
        (Position(0, 0), 0),
        (Position(7, 4), 0),
    ],
)
def test_positional_bonus(position: Position, bonus: int) -> None:
    assert positional_bonus(position) == bonus


@pytest.mark.parametrize(
    "from_position, to_position, expected_score",
    [
        (Position(6, 4), Position(4, 4), 7),  # centre + two rows of pawn advancement
        (Position(6, 4), Position(5, 4), 3),  # inner ring + one row
        (Position(7, 6), Position(5, 5), 5),  # inner ring + development
        (Position(7, 1), Position(5, 0), 3),  # development only
        (Position(6, 0), Position(4, 0), 2),  # pawn advancement only
    ],
)
def test_score_move_in_starting_position(
    new_game: Game, from_position: Position, to_position: Position, expected_score: int
) -> None:
    assert score_move(new_game.board, from_position, to_position) == expected_score


def test_score_move_counts_captured_material(game_from_fen: GameFactory) -> None:
    game = game_from_fen(QUEEN_HANGS, to_move=Color.BLACK)
    # queen (90) + inner ring (2)
    assert score_move(game.board, Position(4, 0), Position(4, 5)) == 92


def test_black_pawn_advancement_counts_downwards(new_game: Game) -> None:
    assert score_move(new_game.board, Position(1, 0), Position(3, 0)) == 2


def test_score_moves_only_for_moves_the_game_accepts(new_game: Game) -> None:
    scored = score_moves(new_game, Color.WHITE)
    assert len(scored) == 20
    assert all(new_game.is_valid_move(s.from_position, s.to_position) for s in scored)


@pytest.mark.parametrize("seed", range(10))
def test_opponent_takes_the_queen(game_from_fen: GameFactory, seed: int) -> None:
    game = game_from_fen(QUEEN_HANGS, to_move=Color.BLACK)
    assert choose_opponent_move(game, Color.BLACK, Random(seed)) == (
        Position(4, 0),
        Position(4, 5),
    )


@pytest.mark.parametrize("seed", range(10))
def test_first_move_is_a_central_double_push(new_game: Game, seed: int) -> None:
    assert choose_opponent_move(new_game, Color.WHITE, Random(seed)) in DOUBLE_PUSHES


def test_same_seed_same_move(new_game: Game) -> None:
    first = choose_opponent_move(new_game, Color.WHITE, Random(1234))
    second = choose_opponent_move(new_game, Color.WHITE, Random(1234))
    assert first == second


def test_choosing_does_not_change_the_game(new_game: Game) -> None:
    before = deepcopy(new_game)
    _ = choose_opponent_move(new_game, Color.WHITE, Random(0))
    assert new_game == before


def test_not_your_turn(new_game: Game) -> None:
    with pytest.raises(NotYourTurnError):
        choose_opponent_move(new_game, Color.BLACK, Random(0))


def test_no_legal_moves(game_from_fen: GameFactory) -> None:
    """A black pawn on White's back rank cannot go anywhere"""
    game = game_from_fen("8/8/8/8/8/8/8/p7", to_move=Color.BLACK)
    with pytest.raises(NoLegalMovesError):
        choose_opponent_move(game, Color.BLACK, Random(0))


def test_opponent_plays_through_the_game(new_game: Game) -> None:
    opponent = Opponent.from_seed(Color.WHITE, seed=42)
    move = opponent.play(new_game)

    assert (move.from_position, move.to_position) in DOUBLE_PUSHES
    assert new_game.current_player == Color.BLACK
    assert new_game.history.last() == move
    assert new_game.piece_at(move.to_position) == Piece(
        PieceType.PAWN, Color.WHITE, has_moved=True
    )


def test_seeded_opponents_play_the_same_game() -> None:
    """Two games between two seeded computer players are identical"""
    played = []
    for _ in range(2):
        game = Game.new_game()
        white = Opponent.from_seed(Color.WHITE, seed=3)
        black = Opponent.from_seed(Color.BLACK, seed=4)
        for _ in range(3):
            white.play(game)
            black.play(game)
        played.append(list(game.history))
    assert played[0] == played[1]
