"""
Orchestration of communication from a front end to the business logic (and the reverse direction).

Two ways in:
* plain functions on a Game (start_game, make_move, ...) for front ends that hold the Game themselves
* ChessService, which holds the Game (+ computer opponent) and speaks in request/response models
"""

from random import Random
from typing import Optional

from loguru import logger

from chessrules.api.models import (
    GameResponse,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveModel,
    MoveRequest,
    MoveResponse,
    NewGameRequest,
    PieceModel,
    SquareModel,
)
from chessrules.chess import opponent as evaluator
from chessrules.chess.game import Game, MovePair
from chessrules.chess.moves import Move
from chessrules.chess.opponent import Opponent
from chessrules.chess.pieces import Color, Piece
from chessrules.chess.position import Position, all_positions
from chessrules.core.exceptions import GameStateError
from chessrules.core.models import GameModel
from chessrules.core.shared_types import GAME_OVER_STATUSES
from chessrules.core.shared_types import Color as ColorName
from chessrules.core.shared_types import PieceType as PieceTypeName


# -- Functional interface ---
def start_game(king_safety: bool = False) -> Game:
    return Game.new_game(king_safety=king_safety)


def current_player(game: Game) -> Color:
    return game.current_player


def piece_at(game: Game, position: Position) -> Optional[Piece]:
    return game.piece_at(position)


def is_valid_move(game: Game, from_position: Position, to_position: Position) -> bool:
    return game.is_valid_move(from_position, to_position)


def make_move(game: Game, from_position: Position, to_position: Position) -> bool:
    return game.make_move(from_position, to_position)


def undo_move(game: Game) -> None:
    game.undo_move()


def is_in_check(game: Game, color: Color) -> bool:
    return game.is_in_check(color)


def is_checkmate(game: Game, color: Color) -> bool:
    return game.is_checkmate(color)


def is_stalemate(game: Game, color: Color) -> bool:
    return game.is_stalemate(color)


def choose_opponent_move(game: Game, color: Color, rng: Random) -> MovePair:
    return evaluator.choose_opponent_move(game, color, rng)


class ChessService:
    """Orchestration of layers for a single chess game."""

    def __init__(self) -> None:
        self.game: Optional[Game] = None
        self.opponent: Optional[Opponent] = None

    # -- Front end logic ---
    def new_game(self, request: NewGameRequest) -> GameResponse:
        """(Re)start from the standard starting position. Any game in progress is discarded."""
        self.game = Game.new_game(king_safety=request.king_safety)
        self.opponent = (
            Opponent.from_seed(Color[request.opponent_color.name], request.seed)
            if request.opponent_color is not None
            else None
        )
        logger.info(
            "Service started a new game, computer opponent: {}",
            request.opponent_color or "none",
        )
        return self._create_game_response(self.game.to_model())

    def get_game_state(self) -> GameResponse:
        """Retrieve current game state."""
        game = self._fetch_game()
        return self._create_game_response(game.to_model())

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """
        Squares the piece on the requested square may move to (e.g. to highlight them).
        Empty square, or a piece of the player not to move? No destinations.
        """
        game = self._fetch_game()
        from_position = self._to_position(request.square)
        destinations = [
            to_position
            for to_position in all_positions()
            if game.is_valid_move(from_position, to_position)
        ]
        return LegalMovesResponse(
            square=request.square,
            piece=self._piece_model(game.piece_at(from_position)),
            destinations=[self._square_model(position) for position in destinations],
        )

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """Make a move attempt. A refused move is reported back, the game does not change."""
        game = self._fetch_game()
        from_position = self._to_position(request.from_square)
        to_position = self._to_position(request.to_square)

        accepted = game.make_move(from_position, to_position)
        move = game.history.last() if accepted else None
        return self._create_move_response(accepted, move, game)

    def undo_move(self) -> GameResponse:
        """Take back the last move (of either side). Nothing to take back? Nothing happens."""
        game = self._fetch_game()
        game.undo_move()
        return self._create_game_response(game.to_model())

    def is_opponent_turn(self) -> bool:
        game = self._fetch_game()
        return self.opponent is not None and self.opponent.color == game.current_player

    def play_opponent_move(self) -> MoveResponse:
        """Let the computer opponent make its move."""
        game = self._fetch_game()
        if self.opponent is None:
            raise GameStateError("This game has no computer opponent.")
        move = self.opponent.play(game)
        return self._create_move_response(True, move, game)

    # -- Internal helpers --
    def _fetch_game(self) -> Game:
        """The game must be started before anything else can be asked."""
        if self.game is None:
            raise GameStateError("No game in progress. Start a new game first.")
        return self.game

    def _create_game_response(self, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse"""
        return GameResponse(
            placement=model.placement,
            board=model.board_rows,
            current_player=ColorName(model.current_player),
            status=model.status,
            winner=ColorName(model.winner) if model.winner else None,
            move_history=[
                MoveModel(
                    from_square=SquareModel(row=from_row, col=from_col),
                    to_square=SquareModel(row=to_row, col=to_col),
                )
                for from_row, from_col, to_row, to_col in model.moves
            ],
            material={ColorName(color): points for color, points in model.material.items()},
        )

    def _create_move_response(
        self, accepted: bool, move: Optional[Move], game: Game
    ) -> MoveResponse:
        move_model = (
            MoveModel(
                from_square=self._square_model(move.from_position),
                to_square=self._square_model(move.to_position),
            )
            if move is not None
            else None
        )
        game_response = self._create_game_response(game.to_model())
        if accepted and game_response.status in GAME_OVER_STATUSES:
            logger.info(
                "Game over: {} (winner: {})",
                game_response.status,
                game_response.winner or "none",
            )
        return MoveResponse(
            accepted=accepted,
            move=move_model,
            captured=self._piece_model(move.captured) if move is not None else None,
            game=game_response,
        )

    @staticmethod
    def _to_position(square: SquareModel) -> Position:
        return Position(square.row, square.col)

    @staticmethod
    def _square_model(position: Position) -> SquareModel:
        return SquareModel(row=position.row, col=position.col)

    @staticmethod
    def _piece_model(piece: Optional[Piece]) -> Optional[PieceModel]:
        if piece is None:
            return None
        return PieceModel(
            type=PieceTypeName[piece.type.name],
            color=ColorName[piece.color.name],
            has_moved=piece.has_moved,
        )
