"""
Settings, read from the environment (a `.env` file in the working directory is picked up as well).

Every field reads its environment variable when the settings object is created, so a changed environment
is respected by the next `Settings()`.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from chessrules.core.exceptions import ConfigurationError
from chessrules.core.shared_types import Color

load_dotenv()

NO_OPPONENT = "none"


def _env_bool(name: str, default: str) -> bool:
    value = os.getenv(name, default).strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ConfigurationError(f"{name}={value!r} is not a boolean.")


def _env_optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name}={value!r} is not an integer.") from exc


def parse_opponent_color(value: Optional[str]) -> Optional[Color]:
    """'white' / 'black' -> that color. 'none' (or nothing) -> two human players."""
    if value is None or value.strip().lower() in ("", NO_OPPONENT):
        return None
    try:
        return Color(value.strip().lower())
    except ValueError as exc:
        raise ConfigurationError(
            f"Opponent color {value!r} not in {', '.join([*Color, NO_OPPONENT])}."
        ) from exc


@dataclass
class EngineConfig:
    # refuse moves that leave your own king in check
    king_safety: bool = field(
        default_factory=lambda: _env_bool("CHESS_KING_SAFETY", "false")
    )


@dataclass
class OpponentConfig:
    color: Optional[Color] = field(
        default_factory=lambda: parse_opponent_color(
            os.getenv("CHESS_OPPONENT_COLOR", "black")
        )
    )
    seed: Optional[int] = field(
        default_factory=lambda: _env_optional_int("CHESS_OPPONENT_SEED")
    )


@dataclass
class LoggingConfig:
    level: str = field(
        default_factory=lambda: os.getenv("CHESS_LOG_LEVEL", "WARNING").upper()
    )


@dataclass
class Settings:
    engine: EngineConfig = field(default_factory=EngineConfig)
    opponent: OpponentConfig = field(default_factory=OpponentConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
