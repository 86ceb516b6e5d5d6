"""
Geometry/Base movement rules

Key idea: Use strategy pattern to define a legality predicate for each piece type.
Every rule answers the same question: "may this piece go from here to there on this board?"

Whose turn it is, and whether the move exposes your own king, is checked later by Game
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from chessrules.chess.pieces import FORWARD, PAWN_HOME_ROWS, Piece, PieceType
from chessrules.chess.position import Position


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, position: Position) -> Optional[Piece]: ...
    def is_empty(self, position: Position) -> bool: ...
    def is_path_clear(self, from_position: Position, to_position: Position) -> bool: ...


@dataclass(frozen=True)
class Move:
    """
    Record of a single applied move.
    ---

    * captured: the piece that stood on the target square right before the move (None if it was empty)
    * had_moved: the `has_moved` flag of the moving piece before the move, so undo can put it back
    """

    from_position: Position
    to_position: Position
    captured: Optional[Piece] = None
    had_moved: bool = False

    @property
    def is_capture(self) -> bool:
        return self.captured is not None


# --- HELPERS ---
def is_straight_line(from_position: Position, to_position: Position) -> bool:
    d_row, d_col = from_position.delta(to_position)
    return (d_row == 0) != (d_col == 0)


def is_diagonal_line(from_position: Position, to_position: Position) -> bool:
    d_row, d_col = from_position.delta(to_position)
    return abs(d_row) == abs(d_col) != 0


def is_destination_available(piece: Piece, to_position: Position, board: Board) -> bool:
    """Destination must be empty or hold an opponent's piece. Never your own."""
    target = board.piece(to_position)
    return target is None or target.color != piece.color


# --- MOVEMENT RULES ---
def pawn_move_rule(
    piece: Piece, from_position: Position, to_position: Position, board: Board
) -> bool:
    """
    A pawn:
    - moves by a single square forward, onto an empty square.
    - It can move by two from its home row, if both squares are empty
    - takes diagonally (one square forward), and only if there is an enemy piece to take

    NOTE: No en passant, no promotion.
    """
    direction = FORWARD[piece.color]
    d_row, d_col = from_position.delta(to_position)

    # Pawn push
    if d_col == 0 and d_row == direction:
        return board.is_empty(to_position)

    # Double pawn push
    if (
        d_col == 0
        and d_row == 2 * direction
        and from_position.row == PAWN_HOME_ROWS[piece.color]
    ):
        in_between = from_position.offset(direction, 0)
        return board.is_empty(in_between) and board.is_empty(to_position)

    # pawns take diagonally:
    if abs(d_col) == 1 and d_row == direction:
        target = board.piece(to_position)
        return target is not None and target.color != piece.color

    return False


def rook_move_rule(
    piece: Piece, from_position: Position, to_position: Position, board: Board
) -> bool:
    """Rooks move either horizontally or vertically"""
    if not is_straight_line(from_position, to_position):
        return False
    if not board.is_path_clear(from_position, to_position):
        return False
    return is_destination_available(piece, to_position, board)


def knight_move_rule(
    piece: Piece, from_position: Position, to_position: Position, board: Board
) -> bool:
    """Knights jump in an L: two squares one way, one square the other. Nothing in between matters."""
    d_row, d_col = from_position.delta(to_position)
    if (abs(d_row), abs(d_col)) not in [(2, 1), (1, 2)]:
        return False
    return is_destination_available(piece, to_position, board)


def bishop_move_rule(
    piece: Piece, from_position: Position, to_position: Position, board: Board
) -> bool:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    if not is_diagonal_line(from_position, to_position):
        return False
    if not board.is_path_clear(from_position, to_position):
        return False
    return is_destination_available(piece, to_position, board)


def queen_move_rule(
    piece: Piece, from_position: Position, to_position: Position, board: Board
) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return rook_move_rule(piece, from_position, to_position, board) or bishop_move_rule(
        piece, from_position, to_position, board
    )


def king_move_rule(
    piece: Piece, from_position: Position, to_position: Position, board: Board
) -> bool:
    """
    The king can move by a single square at the time.

    NOTE: No castling.
    """
    d_row, d_col = from_position.delta(to_position)
    if abs(d_row) > 1 or abs(d_col) > 1 or (d_row, d_col) == (0, 0):
        return False
    return is_destination_available(piece, to_position, board)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MovementRuleFn = Callable[[Piece, Position, Position, Board], bool]
MOVEMENT_RULES: dict[PieceType, MovementRuleFn] = {
    PieceType.PAWN: pawn_move_rule,
    PieceType.KNIGHT: knight_move_rule,
    PieceType.BISHOP: bishop_move_rule,
    PieceType.ROOK: rook_move_rule,
    PieceType.QUEEN: queen_move_rule,
    PieceType.KING: king_move_rule,
}


def is_valid_piece_move(
    piece: Piece, from_position: Position, to_position: Position, board: Board
) -> bool:
    """
    Entry point: select the rule belonging to the piece type.

    Staying put, or stepping off the board, is never a move.
    """
    if from_position == to_position:
        return False
    if not (from_position.is_valid() and to_position.is_valid()):
        return False
    movement_rule = MOVEMENT_RULES[piece.type]
    return movement_rule(piece, from_position, to_position, board)
