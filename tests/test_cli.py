"""Unit tests for chessrules/cli.py: the game loop is driven by scripted input lines"""

from typing import Callable, Iterator

import pytest

from chessrules.api.models import NewGameRequest
from chessrules.chess.board import STARTING_PLACEMENT
from chessrules.cli import main, parse_args, run
from chessrules.core.shared_types import Color, Status
from chessrules.services.chess_service import ChessService

FOOLS_MATE = ["6 5 5 5", "1 4 3 4", "6 6 4 6", "0 3 4 7"]


def scripted(lines: list[str]) -> Callable[[str], str]:
    """Feed the lines one by one, then behave like a closed terminal"""
    remaining: Iterator[str] = iter(lines)

    def _read_line(_prompt: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    return _read_line


@pytest.fixture
def output() -> list[str]:
    return []


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ["CHESS_KING_SAFETY", "CHESS_OPPONENT_COLOR", "CHESS_OPPONENT_SEED"]:
        monkeypatch.delenv(name, raising=False)


def test_fools_mate_between_two_humans(output: list[str]) -> None:
    status = run(
        ChessService(),
        NewGameRequest(opponent_color=None),
        read_line=scripted(FOOLS_MATE),
        write=output.append,
    )
    assert status == Status.CHECKMATE
    assert output[-1] == "Checkmate, black wins."


def test_quit_stops_the_game(output: list[str]) -> None:
    status = run(
        ChessService(),
        NewGameRequest(opponent_color=None),
        read_line=scripted(["quit"]),
        write=output.append,
    )
    assert status is None


def test_end_of_input_stops_the_game(output: list[str]) -> None:
    assert (
        run(
            ChessService(),
            NewGameRequest(opponent_color=None),
            read_line=scripted([]),
            write=output.append,
        )
        is None
    )


def test_illegal_and_malformed_input(output: list[str]) -> None:
    service = ChessService()
    run(
        service,
        NewGameRequest(opponent_color=None),
        read_line=scripted(["6 4 3 4", "6 4 x y", "dance", "quit"]),
        write=output.append,
    )
    assert "Illegal move." in output
    assert any(line.startswith("Cannot interpret") for line in output)
    assert any(line.startswith("Unknown command") for line in output)
    assert service.get_game_state().placement == STARTING_PLACEMENT


def test_list_moves(output: list[str]) -> None:
    run(
        ChessService(),
        NewGameRequest(opponent_color=None),
        read_line=scripted(["moves 7 1", "moves 4 4", "quit"]),
        write=output.append,
    )
    assert "Moves: 5 0, 5 2" in output
    assert "No moves from that square." in output


def test_computer_playing_white_moves_first(output: list[str]) -> None:
    service = ChessService()
    run(
        service,
        NewGameRequest(opponent_color=Color.WHITE, seed=5),
        read_line=scripted(["quit"]),
        write=output.append,
    )
    assert any(line.startswith("Computer plays") for line in output)
    state = service.get_game_state()
    assert len(state.move_history) == 1
    assert state.current_player == Color.BLACK


def test_undo_against_the_computer_takes_back_both_moves(output: list[str]) -> None:
    service = ChessService()
    run(
        service,
        NewGameRequest(opponent_color=Color.BLACK, seed=5),
        read_line=scripted(["6 4 4 4", "undo", "quit"]),
        write=output.append,
    )
    state = service.get_game_state()
    assert state.placement == STARTING_PLACEMENT
    assert state.current_player == Color.WHITE


def test_parse_args() -> None:
    config = parse_args(["--opponent", "none", "--seed", "3", "--king-safety"])
    assert config.opponent_color is None
    assert config.seed == 3
    assert config.king_safety

    config = parse_args([])
    assert config.opponent_color == Color.BLACK
    assert not config.king_safety


def test_main_rejects_invalid_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHESS_KING_SAFETY", "maybe")
    assert main([]) == 2


def test_captured_king_ends_the_loop(output: list[str]) -> None:
    status = run(
        ChessService(),
        NewGameRequest(opponent_color=None),
        read_line=scripted(["6 4 4 4", "1 5 3 5", "7 3 3 7", "1 0 2 0", "3 7 0 4"]),
        write=output.append,
    )
    assert status == Status.KING_CAPTURED
    assert output[-1] == "King captured, white wins."
