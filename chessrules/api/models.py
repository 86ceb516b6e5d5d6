"""Requests and Response models"""

from typing import Any, Optional

from pydantic import BaseModel, field_validator

from chessrules.core.exceptions import InvalidRequestError
from chessrules.core.shared_types import Color, PieceType, Status


class SquareModel(BaseModel):
    """
    Coordinates of a square. Row 0 is the top of the board (Black's back rank).

    NOTE: coordinates outside the board are accepted here on purpose. The Game refuses moves to/from them.
    """

    row: int
    col: int


def parse_square(value: Any) -> Any:
    """
    Front ends may send a square as {"row": r, "col": c}, as a pair (r, c), or as text "r,c" / "r c".
    Text that does not contain exactly two integers is rejected.
    """
    if isinstance(value, str):
        parts = value.replace(",", " ").split()
        if len(parts) != 2 or not all(part.lstrip("-").isdigit() for part in parts):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a square. Expected two numbers: 'row,col'."
            )
        return {"row": int(parts[0]), "col": int(parts[1])}
    if isinstance(value, (tuple, list)):
        if len(value) != 2:
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a square. Expected (row, col)."
            )
        return {"row": value[0], "col": value[1]}
    return value


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    # None: two human players
    opponent_color: Optional[Color] = Color.BLACK
    seed: Optional[int] = None
    king_safety: bool = False


class LegalMovesRequest(BaseModel):
    square: SquareModel

    @field_validator("square", mode="before")
    @classmethod
    def validate_square(cls, value: Any) -> Any:
        return parse_square(value)


class MoveRequest(BaseModel):
    from_square: SquareModel
    to_square: SquareModel

    @field_validator(*["from_square", "to_square"], mode="before")
    @classmethod
    def validate_square(cls, value: Any) -> Any:
        return parse_square(value)


# --- RESPONSE MODELS ---
class PieceModel(BaseModel):
    type: PieceType
    color: Color
    has_moved: bool


class MoveModel(BaseModel):
    from_square: SquareModel
    to_square: SquareModel


class GameResponse(BaseModel):
    placement: str
    board: list[str]
    current_player: Color
    status: Status
    winner: Optional[Color]
    move_history: list[MoveModel]
    material: dict[Color, int]


class MoveResponse(BaseModel):
    accepted: bool
    move: Optional[MoveModel]
    captured: Optional[PieceModel] = None
    game: GameResponse


class LegalMovesResponse(BaseModel):
    square: SquareModel
    piece: Optional[PieceModel]
    destinations: list[SquareModel]
