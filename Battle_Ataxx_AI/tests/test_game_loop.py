"""Tests for Ataxxgame state handling, command dispatch, and reporting."""

import importlib
import io
import re

from Battle_Ataxx_AI.Ataxxgame import Ataxxgame, FINISHED, PLAYING, SETUP
from Battle_Ataxx_AI.AIPlayer import AIPlayer
from Battle_Ataxx_AI.Board import BLUE, RED
from Battle_Ataxx_AI.Player import HumanPlayer
from Battle_Ataxx_AI.engine.sources import ReaderSource

# The package re-exports the Ataxxgame class under the module's name.
game_mod = importlib.import_module("Battle_Ataxx_AI.Ataxxgame")


class ListSource:
    """Scripted input: hands out lines in order, then reports end of input."""

    def __init__(self, lines):
        self.lines = list(lines)

    def read_line(self, prompt):
        return self.lines.pop(0) if self.lines else None


class RecordingReporter:
    def __init__(self):
        self.messages = []

    def _record(self, kind, fmt, args):
        self.messages.append((kind, fmt % args if args else fmt))

    def err_msg(self, fmt, *args):
        self._record("error", fmt, args)

    def move_msg(self, fmt, *args):
        self._record("move", fmt, args)

    def outcome_msg(self, fmt, *args):
        self._record("outcome", fmt, args)

    def of(self, kind):
        return [msg for k, msg in self.messages if k == kind]


# Blocking these fills every square except the corners and a2, g2, a6, g6.
CRAMPED_BLOCKS = [
    "block " + sq
    for sq in ("b1", "c1", "d1", "b2", "c2", "d2", "a3", "b3", "c3", "d3", "a4", "b4", "c4", "d4")
]


def run(lines, **kwargs):
    reporter = RecordingReporter()
    game = Ataxxgame(source=ListSource(lines), reporter=reporter, **kwargs)
    game.process()
    return game, reporter


def test_defaults_after_construction():
    game = Ataxxgame(source=ListSource([]), reporter=RecordingReporter())
    assert game.state == SETUP
    assert isinstance(game.players[RED], HumanPlayer)
    assert isinstance(game.players[BLUE], AIPlayer)


def test_manual_game_moves_and_dump():
    game, reporter = run(["manual blue", "start", "a7-b7", "g7-f6", "dump", "quit"])
    assert game.state == PLAYING
    assert reporter.of("error") == []
    assert reporter.of("outcome") == [
        "===\n"
        "  r r - - - - b\n"
        "  - - - - - b -\n"
        "  - - - - - - -\n"
        "  - - - - - - -\n"
        "  - - - - - - -\n"
        "  - - - - - - -\n"
        "  b - - - - - r\n"
        "==="
    ]


def test_end_of_input_quits():
    game, reporter = run(["start"], red_player="manual", blue_player="manual")
    assert game.state == PLAYING
    assert reporter.messages == []


def test_commands_rejected_in_the_wrong_state():
    game, reporter = run(["a7-b7", "pass", "manual blue", "start", "start", "block c3", "auto red", "seed 3"])
    assert reporter.of("error") == [
        "'move' command is not allowed now.",
        "'pass' command is not allowed now.",
        "'start' command is not allowed now.",
        "'block' command is not allowed now.",
        "'auto' command is not allowed now.",
        "'seed' command is not allowed now.",
    ]
    assert game.board.get("b", "7").symbol == "-"


def test_illegal_moves_are_reported_and_retried():
    game, reporter = run(["manual blue", "start", "a1-a2", "a7-a3", "a7-a9", "pass", "nonsense", "a7-a6"])
    assert reporter.of("error") == [
        "illegal piece movement, not a Red piece",
        "illegal piece movement, out of range",
        "illegal piece movement, square out of board",
        "cannot pass at this time.",
        "command not understood.",
    ]
    assert game.board.get("a", "6") is RED
    assert game.board.turn is BLUE


def test_bad_block_is_reported_without_change():
    game, reporter = run(["block a1", "block b3"])
    assert reporter.of("error") == ["block placement is not allowed."]
    assert game.board.get("f", "5").symbol == "X"
    assert game.board.get("a", "1") is BLUE


def test_start_on_a_terminal_position_finishes_at_once():
    blocks = CRAMPED_BLOCKS + ["block a2"]
    game, reporter = run(blocks + ["start", "a7-a6", "clear"])
    assert reporter.of("outcome") == ["Draw."]
    assert reporter.of("error") == ["'move' command is not allowed now."]
    assert game.state == SETUP
    assert game.board.get("b", "2").symbol == "-"


def test_game_played_to_the_end():
    lines = ["manual blue"] + CRAMPED_BLOCKS + ["start", "a7-a6", "a1-a2", "g1-g2", "g7-g6", "a6-a5", "dump"]
    game, reporter = run(lines)
    assert game.state == FINISHED
    assert reporter.of("outcome")[0] == "Draw."
    assert "'move' command is not allowed now." in reporter.of("error")
    assert reporter.of("outcome")[1].startswith("===")


def test_ai_moves_are_reported():
    game, reporter = run(CRAMPED_BLOCKS + ["start", "a7-a6", "quit"], depth=2)
    moves = reporter.of("move")
    assert moves
    assert re.fullmatch(r"Blue moves [a-g][1-7]-[a-g][1-7]\.", moves[0])
    assert game.board.turn is RED


def test_ai_against_ai_reaches_a_result():
    game, reporter = run(CRAMPED_BLOCKS + ["auto red", "start", "quit"], depth=3)
    assert game.state == FINISHED
    assert len(reporter.of("move")) == 4
    assert reporter.of("outcome") == ["Draw."]


def test_renderer_sees_each_change():
    seen = []

    def renderer(board, last_move, current_color, game_result):
        seen.append((str(last_move) if last_move else None, current_color, game_result))

    run(["manual blue", "start", "a7-b7", "quit"], renderer=renderer)
    assert seen[-1] == ("a7-b7", BLUE, None)


def test_renderer_sees_the_opening_position_before_any_command():
    seen = []

    def renderer(board, last_move, current_color, game_result):
        seen.append((board.to_string(), last_move, current_color, game_result))

    run([], renderer=renderer)
    assert len(seen) == 1
    layout, last_move, current_color, game_result = seen[0]
    assert layout.splitlines()[1] == "  r - - - - - b"
    assert (last_move, current_color, game_result) == (None, RED, None)


def test_closer_called_once():
    calls = []
    run(["quit"], closer=lambda: calls.append(1))
    assert calls == [1]


def test_load_runs_file_commands_first(tmp_path):
    script = tmp_path / "setup.txt"
    script.write_text("manual blue\nblock c3\n# comment\nstart\n", encoding="utf-8")
    game, reporter = run([f"load {script}", "a7-b7"])
    assert reporter.of("error") == []
    assert game.board.get("e", "5").symbol == "X"
    assert game.board.get("b", "7") is RED


def test_quit_inside_a_script_closes_it():
    script = io.StringIO("manual blue\nquit\nstart\n")
    game = Ataxxgame(source=ListSource(["start"]), reporter=RecordingReporter())
    game.add_source(ReaderSource(script))
    game.process()
    assert script.closed
    assert game.state == SETUP


def test_load_missing_file_is_reported(tmp_path):
    missing = tmp_path / "nope.txt"
    game, reporter = run([f"load {missing}"])
    assert reporter.of("error") == [f"Cannot open file {missing}"]


def test_help_prints_help_file():
    game, reporter = run(["help"])
    outcome = reporter.of("outcome")
    assert outcome[0].startswith("Ataxx commands")
    assert any("block <square>" in line for line in outcome)


def test_help_missing_file(monkeypatch, tmp_path):
    monkeypatch.setattr(game_mod, "PROJECT_DIR", tmp_path)
    game, reporter = run(["help"])
    assert reporter.of("error") == ["No help available."]


def test_seed_makes_randoms_reproducible():
    game, _ = run(["seed 7"])
    first = [game.next_random(100) for _ in range(5)]
    game, _ = run(["seed 7"])
    assert [game.next_random(100) for _ in range(5)] == first


def test_clear_restores_default_players():
    game, _ = run(["auto red", "manual blue", "clear"])
    assert isinstance(game.players[RED], HumanPlayer)
    assert isinstance(game.players[BLUE], AIPlayer)
