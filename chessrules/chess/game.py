"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of the board game -->
passes this information to the service layer, which can then pass it onwards to a front end.
"""

from dataclasses import dataclass, field
from typing import Optional, Self

from loguru import logger

from chessrules.chess.board import Board
from chessrules.chess.history import MoveHistory
from chessrules.chess.moves import Move, is_valid_piece_move
from chessrules.chess.pieces import Color, Piece
from chessrules.chess.position import Position, all_positions
from chessrules.core.models import GameModel
from chessrules.core.shared_types import Status

MovePair = tuple[Position, Position]


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    current_player: Color = Color.WHITE
    history: MoveHistory = field(default_factory=MoveHistory)
    # When switched on, a move that leaves (or puts) your own king in check is refused.
    king_safety: bool = False

    @classmethod
    def new_game(cls, king_safety: bool = False) -> Self:
        """Standard starting position, White to move, nothing played yet."""
        logger.info("New game started (king safety: {})", king_safety)
        return cls(board=Board.starting_position(), king_safety=king_safety)

    def to_model(self) -> GameModel:
        """Encode into a format the Service layer uses"""
        status = self.status
        winner = self._winner_for(status)
        return GameModel(
            placement=self.board.to_fen(),
            board_rows=self.board.render().splitlines(),
            current_player=self.current_player.name.lower(),
            moves=[
                (
                    move.from_position.row,
                    move.from_position.col,
                    move.to_position.row,
                    move.to_position.col,
                )
                for move in self.history
            ],
            status=status.value,
            winner=winner.name.lower() if winner else None,
            material={
                color.name.lower(): points
                for color, points in self.board.count_material().items()
            },
        )

    def piece_at(self, position: Position) -> Optional[Piece]:
        return self.board.piece(position)

    def is_valid_move(self, from_position: Position, to_position: Position) -> bool:
        """
        Read-only check of a move for the player whose turn it is.
        ----

        1. There must be a piece to move
        2. It must be yours
        3. Its movement rule must allow the move
        4. (only with king safety) Your king may not be in check after the move
        """
        piece = self.board.piece(from_position)
        if piece is None:
            return False

        if piece.color != self.current_player:
            return False

        if not is_valid_piece_move(piece, from_position, to_position, self.board):
            return False

        if self.king_safety and self._is_putting_yourself_in_check(
            from_position, to_position
        ):
            return False

        return True

    def make_move(self, from_position: Position, to_position: Position) -> bool:
        """
        Attempt to make a move
        -----

        Nothing changes if the move is refused. Otherwise:
        1. update the board (the captured piece, if any, is kept in the move record)
        2. update the history of moves
        3. hand the turn to the opponent
        """
        if not self.is_valid_move(from_position, to_position):
            logger.debug(
                "Move refused for {}: {} -> {}",
                self.current_player.name,
                from_position,
                to_position,
            )
            return False

        # Store move info before update
        had_moved = self._piece_has_moved(from_position)

        # update the board
        captured = self.board.move_piece(from_position, to_position)

        # update the list of moves in this game
        move = Move(from_position, to_position, captured=captured, had_moved=had_moved)
        self.history.push(move)

        logger.debug(
            "{} played {} -> {}{}",
            self.current_player.name,
            from_position,
            to_position,
            f" capturing {captured.to_symbol()}" if captured else "",
        )
        self._switch_player()
        return True

    def undo_move(self) -> Optional[Move]:
        """
        Take back the last move. Returns the move that was taken back (None if nothing was played yet).
        ----

        1. put the moving piece back (with its has_moved flag as it was)
        2. put the captured piece back, or leave the square empty
        3. hand the turn back to the player who made the move
        """
        move = self.history.pop()
        if move is None:
            return None

        piece = self.board.remove_piece(move.to_position)
        if piece is not None:
            restored = Piece(piece.type, piece.color, has_moved=move.had_moved)
            self.board.place_piece(restored, move.from_position)
        if move.captured is not None:
            self.board.place_piece(move.captured, move.to_position)

        self._switch_player()
        logger.debug(
            "Took back {} -> {}, {} to move",
            move.from_position,
            move.to_position,
            self.current_player.name,
        )
        return move

    def candidate_moves(self, color: Color) -> list[MovePair]:
        """
        Every move the movement rules allow for the pieces of `color`, regardless of whose turn it is.
        ---

        Plain scan: every own piece against every square on the board.
        """
        return [
            (from_position, to_position)
            for from_position in self.board.locate_color(color)
            for to_position in all_positions()
            if is_valid_piece_move(
                self.board.position[from_position],
                from_position,
                to_position,
                self.board,
            )
        ]

    def safe_moves(self, color: Color) -> list[MovePair]:
        """Candidate moves that do not leave the king of `color` in check"""
        return [
            (from_position, to_position)
            for from_position, to_position in self.candidate_moves(color)
            if not self._leaves_in_check(color, from_position, to_position)
        ]

    def is_in_check(self, color: Color) -> bool:
        return self.board.is_check(color)

    def is_checkmate(self, color: Color) -> bool:
        return self.is_in_check(color) and not self._has_safe_move(color)

    def is_stalemate(self, color: Color) -> bool:
        return not self.is_in_check(color) and not self._has_safe_move(color)

    @property
    def status(self) -> Status:
        """Status from the perspective of the player to move"""
        if self._color_without_king() is not None:
            return Status.KING_CAPTURED

        in_check = self.is_in_check(self.current_player)
        has_safe_move = self._has_safe_move(self.current_player)
        if in_check and not has_safe_move:
            return Status.CHECKMATE
        if not has_safe_move:
            return Status.STALEMATE
        if in_check:
            return Status.CHECK
        return Status.IN_PROGRESS

    @property
    def winner(self) -> Optional[Color]:
        """
        Only exists once the game is over with a result:
        * checkmate: the player who is requested to move just got mated, so the opponent wins
        * king captured: the side that still has its king wins
        """
        return self._winner_for(self.status)

    # -- PRIVATE HELPERS ---
    def _switch_player(self) -> None:
        self.current_player = self.current_player.opponent

    def _piece_has_moved(self, position: Position) -> bool:
        piece = self.board.piece(position)
        return piece is not None and piece.has_moved

    def _winner_for(self, status: Status) -> Optional[Color]:
        if status == Status.CHECKMATE:
            return self.current_player.opponent
        if status == Status.KING_CAPTURED:
            loser = self._color_without_king()
            return loser.opponent if loser is not None else None
        return None

    def _color_without_king(self) -> Optional[Color]:
        """The side whose king was taken. Boards without any king (test fixtures) have no such side."""
        missing = [color for color in Color if self.board.locate_king(color) is None]
        return missing[0] if len(missing) == 1 else None

    # -- LEGAL MOVES HELPERS ---
    def _is_putting_yourself_in_check(
        self, from_position: Position, to_position: Position
    ) -> bool:
        return self._leaves_in_check(self.current_player, from_position, to_position)

    def _leaves_in_check(
        self, color: Color, from_position: Position, to_position: Position
    ) -> bool:
        """Return True if, after the move, the king of `color` is in check

        plan:
        1. Copy the board
        2. make the candidate move
        3. determine if king is in check on the new board
        """
        board = self.board.copy()
        board.move_piece(from_position, to_position)
        return board.is_check(color)

    # --- CHECKS FOR ENDING THE GAME ---
    def _has_safe_move(self, color: Color) -> bool:
        return any(
            not self._leaves_in_check(color, from_position, to_position)
            for from_position, to_position in self.candidate_moves(color)
        )
