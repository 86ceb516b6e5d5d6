"""
Text-mode front end: play against the computer (or another human) in a terminal.

Moves are typed as four numbers: from row, from column, to row, to column. ex. "6 4 4 4" pushes White's e-pawn two squares.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Callable, Optional

from loguru import logger

from chessrules.api.models import (
    GameResponse,
    LegalMovesRequest,
    MoveRequest,
    MoveResponse,
    NewGameRequest,
)
from chessrules.core.config import NO_OPPONENT, Settings, parse_opponent_color
from chessrules.core.exceptions import GameError, InvalidRequestError
from chessrules.core.log import configure_logging
from chessrules.core.shared_types import GAME_OVER_STATUSES, Color, Status
from chessrules.services.chess_service import ChessService

HELP_TEXT = """Commands:
  r c r c     move the piece on (r, c) to (r, c), ex. 6 4 4 4
  moves r c   list the squares the piece on (r, c) can move to
  undo        take back the last move (against the computer: your last move and its reply)
  help        show this text
  quit        stop playing"""

ReadLine = Callable[[str], str]
WriteLine = Callable[[str], None]


@dataclass
class PlayConfig:
    opponent_color: Optional[Color]
    seed: Optional[int]
    king_safety: bool
    log_level: str


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play chess in the terminal",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--opponent",
        type=str,
        choices=[*Color, NO_OPPONENT],
        default=settings.opponent.color or NO_OPPONENT,
        help="color played by the computer",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.opponent.seed,
        help="random seed for the computer's tie-breaks",
    )
    parser.add_argument(
        "--king-safety",
        action=argparse.BooleanOptionalAction,
        default=settings.engine.king_safety,
        help="refuse moves that leave your own king in check",
    )
    parser.add_argument("--log-level", type=str, default=settings.logging.level)
    return parser


def parse_args(args: list[str] | None = None) -> PlayConfig:
    parser = build_parser(Settings())
    namespace = parser.parse_args(args=args)
    return PlayConfig(
        opponent_color=parse_opponent_color(namespace.opponent),
        seed=namespace.seed,
        king_safety=namespace.king_safety,
        log_level=namespace.log_level,
    )


def describe_move(response: MoveResponse) -> str:
    assert response.move is not None
    origin = response.move.from_square
    target = response.move.to_square
    text = f"{origin.row} {origin.col} -> {target.row} {target.col}"
    if response.captured is not None:
        text += f" (takes {response.captured.color} {response.captured.type})"
    return text


def describe_result(state: GameResponse) -> str:
    if state.status == Status.CHECKMATE:
        return f"Checkmate, {state.winner} wins."
    if state.status == Status.KING_CAPTURED:
        return f"King captured, {state.winner} wins."
    return "Stalemate."


def show(state: GameResponse, write: WriteLine) -> None:
    write("\n".join(state.board))
    if state.status == Status.CHECK:
        write(f"{state.current_player} is in check.")
    write(f"{state.current_player} to move.")


def _handle_command(
    line: str, service: ChessService, against_computer: bool, write: WriteLine
) -> bool:
    """Act on one line of input. Returns False when the player wants to stop."""
    tokens = line.replace(",", " ").split()
    if not tokens:
        return True

    command = tokens[0].lower()
    if command in ("quit", "exit"):
        return False

    if command == "help":
        write(HELP_TEXT)
    elif command == "undo":
        state = service.undo_move()
        # against the computer, also take back its reply so it is your turn again
        if against_computer and service.is_opponent_turn() and state.move_history:
            state = service.undo_move()
        show(state, write)
    elif command == "moves" and len(tokens) == 3:
        response = service.legal_moves(
            LegalMovesRequest(square=f"{tokens[1]},{tokens[2]}")
        )
        squares = ", ".join(f"{sq.row} {sq.col}" for sq in response.destinations)
        write(f"Moves: {squares}" if squares else "No moves from that square.")
    elif len(tokens) == 4:
        response = service.make_move(
            MoveRequest(
                from_square=f"{tokens[0]},{tokens[1]}",
                to_square=f"{tokens[2]},{tokens[3]}",
            )
        )
        if response.accepted:
            write(f"Played {describe_move(response)}")
            show(response.game, write)
        else:
            write("Illegal move.")
    else:
        write("Unknown command. Type 'help' for the list of commands.")
    return True


def run(
    service: ChessService,
    request: NewGameRequest,
    read_line: ReadLine = input,
    write: WriteLine = print,
) -> Optional[Status]:
    """
    Game loop. Returns the final status (checkmate / stalemate / king captured), or None if the player stopped early.
    """
    state = service.new_game(request)
    show(state, write)
    against_computer = request.opponent_color is not None

    while True:
        state = service.get_game_state()
        if state.status in GAME_OVER_STATUSES:
            write(describe_result(state))
            return state.status

        if service.is_opponent_turn():
            response = service.play_opponent_move()
            write(f"Computer plays {describe_move(response)}")
            show(response.game, write)
            continue

        try:
            line = read_line("> ")
        except EOFError:
            return None

        try:
            keep_playing = _handle_command(line, service, against_computer, write)
        except InvalidRequestError as exc:
            write(str(exc))
            continue
        if not keep_playing:
            return None


def main(argv: list[str] | None = None) -> int:
    try:
        config = parse_args(argv)
    except GameError as exc:
        logger.error("Invalid settings: {}", exc)
        return 2

    configure_logging(config.log_level)
    request = NewGameRequest(
        opponent_color=config.opponent_color,
        seed=config.seed,
        king_safety=config.king_safety,
    )
    run(ChessService(), request)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
