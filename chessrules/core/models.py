"""
Boundary layer data model(s).

These objects are handed from the domain layer (Game) to the Service.
(Decouples the data model specific to the domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
PieceColor = str
MoveCoordinates = tuple[int, int, int, int]  # from row, from col, to row, to col


@dataclass
class GameModel:
    """Transport-safe representation of a chess game used between the Game and Service layers."""

    placement: str
    board_rows: list[str]
    current_player: PieceColor
    moves: list[MoveCoordinates]
    status: str
    winner: Optional[PieceColor]
    material: dict[PieceColor, int]
