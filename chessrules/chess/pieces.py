"""Defines the types of chess pieces"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Self


class PieceType(Enum):
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()

    @property
    def opponent(self) -> Color:
        return Color.BLACK if self == Color.WHITE else Color.WHITE


SYMBOL_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_SYMBOL: dict[PieceType, str] = {
    value: key for key, value in SYMBOL_TO_PIECE.items()
}

# Capture values used by the opponent's static evaluation
PIECE_POINTS: dict[PieceType, int] = {
    PieceType.PAWN: 10,
    PieceType.KNIGHT: 30,
    PieceType.BISHOP: 30,
    PieceType.ROOK: 50,
    PieceType.QUEEN: 90,
    PieceType.KING: 900,
}

# --- ORIENTATION ---
# White sits at the bottom of the board (row 7) and moves UP (towards row 0). Black the reverse.
BACK_ROWS: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}
PAWN_HOME_ROWS: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
FORWARD: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}


@dataclass(frozen=True)
class Piece:
    """
    A piece is a value: it does not know where it stands (the Board does).

    `has_moved` is not consulted by any movement rule yet (the pawn double step looks at the home row instead),
    but is kept consistent through make/undo so later rules can rely on it.
    """

    type: PieceType
    color: Color
    has_moved: bool = False

    @classmethod
    def from_symbol(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = SYMBOL_TO_PIECE[character.lower()]
        return cls(piece_type, color)

    def to_symbol(self) -> str:
        return (
            PIECE_TO_SYMBOL[self.type].upper()
            if self.color == Color.WHITE
            else PIECE_TO_SYMBOL[self.type].lower()
        )

    @property
    def points(self) -> int:
        return PIECE_POINTS[self.type]

    def moved(self) -> Piece:
        """Copy of this piece with the moved flag set"""
        return replace(self, has_moved=True)
