"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    CHECK = "check"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    # only reachable without king safety: a king was left en prise and taken
    KING_CAPTURED = "king captured"


# --- Color and PieceType mirror the enums of the domain layer (chessrules/chess/pieces.py), but use readable string values
# --- NOTE Same names as in the domain layer as that reads clearly. Let the imports show which versions are used in what part of the code


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


# No more moves are played once the game reaches one of these
GAME_OVER_STATUSES = (Status.CHECKMATE, Status.STALEMATE, Status.KING_CAPTURED)
