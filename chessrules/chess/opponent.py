"""
Computer opponent: static, single-ply move scoring.

Every move the opponent could make right now gets a score, based only on the board as it is:

- material: the value of the piece that gets captured (if any)
- centre control: landing in the middle of the board
- development: getting a piece off the back rank
- pawn advancement: how far a pawn has marched from its home row

There is no look-ahead: the replies of the other side are not considered.
The highest score wins, and ties are broken at random. The random source is passed in, so that a fixed seed
always produces the same game.
"""

from dataclasses import dataclass
from random import Random
from typing import Optional, Self

from loguru import logger

from chessrules.chess.board import Board
from chessrules.chess.game import Game, MovePair
from chessrules.chess.moves import Move
from chessrules.chess.pieces import (
    BACK_ROWS,
    FORWARD,
    PAWN_HOME_ROWS,
    Color,
    PieceType,
)
from chessrules.chess.position import Position, all_positions
from chessrules.core.exceptions import NoLegalMovesError, NotYourTurnError

# --- SCORING CONSTANTS ---
CENTER_BONUS = 5  # central 2x2
INNER_RING_BONUS = 2  # central 4x4 (outside the 2x2)
DEVELOPMENT_BONUS = 3
PAWN_ADVANCE_BONUS = 1  # per row away from the pawn's home row

CENTER = range(3, 5)
INNER_RING = range(2, 6)


@dataclass(frozen=True)
class ScoredMove:
    from_position: Position
    to_position: Position
    score: int


def positional_bonus(position: Position) -> int:
    if position.row in CENTER and position.col in CENTER:
        return CENTER_BONUS
    if position.row in INNER_RING and position.col in INNER_RING:
        return INNER_RING_BONUS
    return 0


def score_move(board: Board, from_position: Position, to_position: Position) -> int:
    """Static score of a single move. The board is only read, never changed."""
    piece = board.piece(from_position)
    if piece is None:
        return 0

    score = 0

    # material
    target = board.piece(to_position)
    if target is not None:
        score += target.points

    # centre control
    score += positional_bonus(to_position)

    # development
    if from_position.row == BACK_ROWS[piece.color]:
        score += DEVELOPMENT_BONUS

    # pawn advancement
    if piece.type == PieceType.PAWN:
        rows_advanced = (to_position.row - PAWN_HOME_ROWS[piece.color]) * FORWARD[
            piece.color
        ]
        score += PAWN_ADVANCE_BONUS * max(rows_advanced, 0)

    return score


def candidate_moves(game: Game, color: Color) -> list[MovePair]:
    """All moves the game would accept right now from the pieces of `color`, in row-major order"""
    return [
        (from_position, to_position)
        for from_position in game.board.locate_color(color)
        for to_position in all_positions()
        if game.is_valid_move(from_position, to_position)
    ]


def score_moves(game: Game, color: Color) -> list[ScoredMove]:
    return [
        ScoredMove(
            from_position,
            to_position,
            score_move(game.board, from_position, to_position),
        )
        for from_position, to_position in candidate_moves(game, color)
    ]


def choose_opponent_move(game: Game, color: Color, rng: Random) -> MovePair:
    """
    Pick the move to play (but do not play it).
    ---

    Uniform random choice among all moves that share the highest score.
    """
    if game.current_player != color:
        raise NotYourTurnError(
            f"Cannot choose a move for {color.name}: it is {game.current_player.name}'s turn."
        )

    scored_moves = score_moves(game, color)
    if not scored_moves:
        raise NoLegalMovesError(f"{color.name} has no move to play.")

    best_score = max(scored.score for scored in scored_moves)
    best_moves = [scored for scored in scored_moves if scored.score == best_score]
    choice = rng.choice(best_moves)
    logger.debug(
        "Opponent ({}) picked {} -> {} with score {} out of {} tied move(s)",
        color.name,
        choice.from_position,
        choice.to_position,
        choice.score,
        len(best_moves),
    )
    return choice.from_position, choice.to_position


@dataclass
class Opponent:
    """A computer player for one side of the board, with its own random source"""

    color: Color
    rng: Random

    @classmethod
    def from_seed(cls, color: Color, seed: Optional[int] = None) -> Self:
        return cls(color, Random(seed))

    def choose_move(self, game: Game) -> MovePair:
        return choose_opponent_move(game, self.color, self.rng)

    def play(self, game: Game) -> Move:
        """Choose a move and submit it through the same entry point a human player uses"""
        from_position, to_position = self.choose_move(game)
        accepted = game.make_move(from_position, to_position)
        # the move came out of game.is_valid_move, so the game cannot refuse it
        assert accepted
        played = game.history.last()
        assert played is not None
        return played
