"""The Game board implements all rules that effect the `position` (in chess: the configuration of pieces on the board)"""

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Optional, Self

from chessrules.chess.moves import is_valid_piece_move
from chessrules.chess.pieces import Color, Piece, PieceType
from chessrules.chess.position import BOARD_DIMENSIONS, Position
from chessrules.core.exceptions import InvalidBoardError

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_SQUARE_SYMBOL = "."


@dataclass
class Board:
    # NOTE: only occupied squares are stored. A missing key is an empty square.
    position: dict[Position, Piece] = field(default_factory=dict)

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_PLACEMENT)

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board from the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * row 0 (top of the board) holds the black pieces, starting with the rook in column 0
        * pawns cover row 1 entirely
        * rows 2 through 5 have 8 consecutive empty squares
        * row 6 are the white pawns (capital letters)
        * row 7 are the white pieces.
        """
        fen_by_rows = fen_str.split("/")
        if len(fen_by_rows) != BOARD_DIMENSIONS[0]:
            raise InvalidBoardError(
                f"Expected {BOARD_DIMENSIONS[0]} rows, got {len(fen_by_rows)}: {fen_str!r}"
            )

        position: dict[Position, Piece] = {}
        for row, fen_one_row in enumerate(fen_by_rows):
            col = 0
            for character in fen_one_row:
                if character.isdigit():
                    # A number denotes the amount of empty squares after each other
                    col += int(character)
                elif character.lower() in "pnbrqk":
                    position[Position(row, col)] = Piece.from_symbol(character)
                    col += 1
                else:
                    raise InvalidBoardError(
                        f"Unknown piece symbol {character!r} in row {row}: {fen_str!r}"
                    )
            if col != BOARD_DIMENSIONS[1]:
                raise InvalidBoardError(
                    f"Row {row} describes {col} squares instead of {BOARD_DIMENSIONS[1]}: {fen_str!r}"
                )
        return cls(position)

    def to_fen(self) -> str:
        """Rows are separated by slashes in FEN string."""
        return "/".join(self._row_to_fen(row) for row in range(BOARD_DIMENSIONS[0]))

    def _row_to_fen(self, row: int) -> str:
        """FEN string of a single row"""
        fen_characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_DIMENSIONS[1]):
            piece = self.piece(Position(row, col))

            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_symbol())
            else:
                empty_count += 1

        # if the entire row is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def render(self) -> str:
        """
        Text grid for debugging / a terminal front end.
        One character per square ('.' if empty), row numbers on both sides, column numbers above and below.
        """
        column_labels = "  " + " ".join(str(col) for col in range(BOARD_DIMENSIONS[1]))
        lines = [column_labels]
        for row in range(BOARD_DIMENSIONS[0]):
            symbols = [
                piece.to_symbol() if piece is not None else EMPTY_SQUARE_SYMBOL
                for piece in (
                    self.piece(Position(row, col)) for col in range(BOARD_DIMENSIONS[1])
                )
            ]
            lines.append(f"{row} {' '.join(symbols)} {row}")
        lines.append(column_labels)
        return "\n".join(lines)

    # --- OCCUPANCY ---
    def piece(self, position: Position) -> Optional[Piece]:
        if not position.is_valid():
            return None
        return self.position.get(position)

    def is_empty(self, position: Position) -> bool:
        return self.piece(position) is None

    def place_piece(self, piece: Piece, position: Position) -> None:
        """Put the piece on the square. Whatever stood there is gone."""
        if not position.is_valid():
            return
        self.position[position] = piece

    def remove_piece(self, position: Position) -> Optional[Piece]:
        """Clear the square, handing the piece that stood there (if any) to the caller"""
        if not position.is_valid():
            return None
        return self.position.pop(position, None)

    def move_piece(
        self, from_position: Position, to_position: Position
    ) -> Optional[Piece]:
        """Update the position on the board. Returns the captured piece (if any)."""
        piece_that_moved = self.remove_piece(from_position)
        if piece_that_moved is None:
            return None
        captured = self.remove_piece(to_position)
        self.place_piece(piece_that_moved.moved(), to_position)
        return captured

    def locate_pieces(self, piece_type: PieceType, color: Color) -> list[Position]:
        return sorted(
            (
                position
                for position, piece in self.position.items()
                if piece.type == piece_type and piece.color == color
            ),
            key=lambda p: (p.row, p.col),
        )

    def locate_color(self, color: Color) -> list[Position]:
        return sorted(
            (
                position
                for position, piece in self.position.items()
                if piece.color == color
            ),
            key=lambda p: (p.row, p.col),
        )

    def locate_king(self, color: Color) -> Optional[Position]:
        kings = self.locate_pieces(PieceType.KING, color)
        return kings[0] if kings else None

    def is_path_clear(self, from_position: Position, to_position: Position) -> bool:
        """
        Are all squares strictly in between the two squares empty?
        ---

        Only defined for horizontal, vertical and diagonal lines. Anything else (like a knight jump) is never a clear path.
        Neighbouring squares have nothing in between, so their path is always clear.
        """
        d_row, d_col = from_position.delta(to_position)
        is_line = (d_row == 0) or (d_col == 0) or (abs(d_row) == abs(d_col))
        if not is_line or (d_row, d_col) == (0, 0):
            return False

        step_row = (d_row > 0) - (d_row < 0)
        step_col = (d_col > 0) - (d_col < 0)
        square = from_position.offset(step_row, step_col)
        while square != to_position:
            if not self.is_empty(square):
                return False
            square = square.offset(step_row, step_col)
        return True

    # --- CHECK ---
    def is_check(self, color: Color) -> bool:
        """
        Is the king of the given color attacked?
        ---

        Any opposing piece whose movement rule allows it to move onto the king's square gives check.
        Without a king on the board, there is nothing to check.
        """
        king_position = self.locate_king(color)
        if king_position is None:
            return False

        for attacker_position in self.locate_color(color.opponent):
            attacker = self.position[attacker_position]
            if is_valid_piece_move(attacker, attacker_position, king_position, self):
                return True
        return False

    def copy(self) -> Self:
        """Independent copy, used to try out moves without touching the real board"""
        return deepcopy(self)

    # --- MATERIAL ---
    def count_material(self) -> dict[Color, int]:
        """Tally the points of material each player has on the board"""
        return {color: self._count_material_player(color) for color in Color}

    def _player_pieces(self, color: Color) -> list[Piece]:
        """find all pieces of a given color"""
        return [piece for piece in self.position.values() if piece.color == color]

    def _count_material_player(self, color: Color) -> int:
        """Tally the points of material for a specific player. The king is not counted."""
        return sum(
            piece.points
            for piece in self._player_pieces(color)
            if piece.type != PieceType.KING
        )
