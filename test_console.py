"""
Tests for the TicTacToe console: reading moves, drawing the board,
and playing whole games through the CLI.
"""

import io

import pytest
from colorama import Fore, Style

import main as cli
from console.config import ConsoleConfig
from console.input_reader import InputClosedError, InputReader
from console.renderer import BoardRenderer
from logic.cell import Cell
from logic.game_state import GameState
from logic.move_validator import MoveValidator
from main import TicTacToeGame


def lines_of(*moves) -> io.StringIO:
    return io.StringIO("".join(f"{m}\n" for m in moves))


def plain_renderer() -> BoardRenderer:
    return BoardRenderer(ConsoleConfig(), use_color=False)


def run_game(*moves, strict=False):
    output = io.StringIO()
    game = TicTacToeGame(
        reader=InputReader(lines_of(*moves)),
        renderer=plain_renderer(),
        validator=MoveValidator(strict=strict),
        output=output,
    )
    state = game.play()
    return state, output.getvalue()


@pytest.fixture(autouse=True)
def no_env_overrides(monkeypatch):
    for name in ("TICTACTOE_NO_COLOR", "NO_COLOR", "TICTACTOE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


# ==================== CONFIG ====================

def test_config_defaults():
    config = ConsoleConfig()
    assert config.USE_COLOR
    assert config.LOG_LEVEL == "WARNING"


def test_config_env_overrides(monkeypatch):
    monkeypatch.setenv("TICTACTOE_NO_COLOR", "1")
    monkeypatch.setenv("TICTACTOE_LOG_LEVEL", "debug")
    config = ConsoleConfig()
    assert not config.USE_COLOR
    assert config.LOG_LEVEL == "DEBUG"
    # class defaults stay untouched
    assert ConsoleConfig.USE_COLOR


def test_config_honors_no_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    assert not ConsoleConfig().USE_COLOR


# ==================== INPUT READER ====================

def test_read_line_strips_newline():
    reader = InputReader(io.StringIO("4\r\nabc\n"))
    assert reader.read_line() == "4"
    assert reader.read_line() == "abc"
    assert reader.lines_read == 2


def test_read_line_at_end_of_input():
    reader = InputReader(io.StringIO(""))
    with pytest.raises(InputClosedError):
        reader.read_line()


def undecodable_input() -> io.TextIOWrapper:
    return io.TextIOWrapper(io.BytesIO(b"\xff\xfe\n"), encoding="utf-8")


def test_read_line_with_undecodable_bytes():
    reader = InputReader(undecodable_input())
    with pytest.raises(OSError) as excinfo:
        reader.read_line()
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
    assert reader.lines_read == 0


def test_reader_closes_its_stream():
    stream = io.StringIO("1\n")
    with InputReader(stream) as reader:
        reader.read_line()
    assert stream.closed


# ==================== RENDERER ====================

def test_render_empty_board():
    assert plain_renderer().render(GameState()) == "\n".join([
        "0 1 2 ",
        "-----",
        "3 4 5 ",
        "-----",
        "6 7 8 ",
        "-----",
    ])


def test_render_marks():
    game = GameState()
    for index in (4, 0):
        game.apply_move(index)
    rendered = plain_renderer().render(game).splitlines()
    assert rendered[0] == "O 1 2 "
    assert rendered[2] == "3 X 5 "


def test_render_colors():
    game = GameState()
    for index in (4, 0):
        game.apply_move(index)
    rendered = BoardRenderer(ConsoleConfig(), use_color=True).render(game)
    assert f"{Fore.GREEN}X{Style.RESET_ALL}" in rendered
    assert f"{Fore.RED}O{Style.RESET_ALL}" in rendered


def test_render_highlights_winning_line():
    game = GameState()
    for index in (0, 1, 3, 2, 6):
        game.apply_move(index)
    rendered = BoardRenderer(ConsoleConfig(), use_color=True).render(game)
    bright_x = f"{Fore.GREEN}{Style.BRIGHT}X{Style.RESET_ALL}"
    assert rendered.count(bright_x) == 3
    assert f"{Fore.RED}{Style.BRIGHT}O" not in rendered


def test_prompt_and_results():
    renderer = plain_renderer()
    game = GameState()
    assert renderer.prompt(game) == "Player X, enter your move (0-8):"
    game.apply_move(0)
    assert renderer.prompt(game) == "Player O, enter your move (0-8):"

    assert renderer.result_message(GameState(winner=Cell.X)) == "Player X wins!"
    assert renderer.result_message(GameState(winner=Cell.O)) == "Player O wins!"
    assert renderer.result_message(GameState(turn=9, is_game_over=True)) == "It's a tie!"


# ==================== GAME LOOP ====================

def test_game_won():
    state, output = run_game(0, 1, 3, 2, 6)
    assert state.winner == Cell.X
    assert output.rstrip().endswith("Player X wins!")
    assert output.count("enter your move") == 5


def test_game_tied():
    state, output = run_game(0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert state.winner == Cell.EMPTY
    assert state.turn == 9
    assert output.rstrip().endswith("It's a tie!")


def test_bad_input_does_not_spend_a_turn():
    state, output = run_game("hello", 20, "", 0, 1, 3, 2, 6)
    assert state.winner == Cell.X
    assert state.turn == 5
    assert output.count("Invalid input, please enter a number between 0 and 8") == 2
    assert "Invalid position 20. Must be 0-8." in output


def test_occupied_cell_spends_a_turn_by_default():
    state, output = run_game(0, 0, 1, 3, 2)
    assert state.winner == Cell.X
    assert state.turn == 5
    assert "already taken" not in output


def test_strict_mode_asks_again_for_occupied_cell():
    state, output = run_game(0, 0, 3, 1, 4, 2, strict=True)
    assert state.winner == Cell.X
    assert state.turn == 5
    assert "Cell 0 is already taken by X" in output


def test_input_ending_mid_game():
    with pytest.raises(InputClosedError):
        run_game(0, 1)


# ==================== CLI ====================

@pytest.fixture
def quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda level, config=None: None)


def test_main_plays_a_game(monkeypatch, capsys, quiet_logging):
    monkeypatch.setattr("sys.stdin", lines_of(0, 1, 3, 2, 6))
    assert cli.main(["--no-color"]) == 0
    out = capsys.readouterr().out
    assert "Player X wins!" in out
    assert "\x1b[" not in out


def test_main_strict_flag(monkeypatch, capsys, quiet_logging):
    monkeypatch.setattr("sys.stdin", lines_of(0, 0, 3, 1, 4, 2))
    assert cli.main(["--no-color", "--strict"]) == 0
    assert "already taken" in capsys.readouterr().out


def test_main_fails_when_input_ends(monkeypatch, quiet_logging):
    monkeypatch.setattr("sys.stdin", lines_of(4))
    assert cli.main(["--no-color"]) == 1


def test_main_fails_on_undecodable_input(monkeypatch, quiet_logging):
    monkeypatch.setattr("sys.stdin", undecodable_input())
    assert cli.main(["--no-color"]) == 1


def test_main_interrupted(monkeypatch, capsys, quiet_logging):
    def interrupt(self):
        raise KeyboardInterrupt

    monkeypatch.setattr(InputReader, "read_line", interrupt)
    assert cli.main(["--no-color"]) == 130
    assert "Goodbye!" in capsys.readouterr().out


def test_main_rejects_unknown_log_level(quiet_logging):
    with pytest.raises(SystemExit):
        cli.main(["--log-level", "LOUD"])


def test_setup_logging_level():
    import logging

    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        cli.setup_logging("DEBUG")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
