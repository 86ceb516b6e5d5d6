"""
A position (square) on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8 (rows, columns). Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)

Vector = tuple[int, int]


@dataclass(frozen=True)
class Position:
    """
    Row 0 is the top of the board (Black's back rank), row 7 the bottom (White's back rank).
    Columns run left to right.

    NOTE: Out-of-range positions can be constructed, but the Board and Game never accept them.
    """

    row: int
    col: int

    def is_valid(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def offset(self, d_row: int, d_col: int) -> Position:
        return Position(self.row + d_row, self.col + d_col)

    def delta(self, other: Position) -> Vector:
        """(row difference, column difference) when moving from self to other"""
        return other.row - self.row, other.col - self.col


def all_positions() -> list[Position]:
    """Every square of the board, in row-major order"""
    return [
        Position(row, col)
        for row in range(BOARD_DIMENSIONS[0])
        for col in range(BOARD_DIMENSIONS[1])
    ]
