"""Game controller: setup/playing/finished states, command dispatch, and turn management."""

import random

try:
    from Board import Board, PieceColor, RED, BLUE
    from Move import Move
    from Player import HumanPlayer
    from AIPlayer import AIPlayer
    from ai.search_minimax import MAX_DEPTH
    from engine import referee
    from engine.commands import CommandType, parse_command
    from engine.sources import CommandSources, ReaderSource
    from utils.logger import ConsoleReporter
    from utils.settings import PROJECT_DIR
except ImportError:
    from Battle_Ataxx_AI.Board import Board, PieceColor, RED, BLUE
    from Battle_Ataxx_AI.Move import Move
    from Battle_Ataxx_AI.Player import HumanPlayer
    from Battle_Ataxx_AI.AIPlayer import AIPlayer
    from Battle_Ataxx_AI.ai.search_minimax import MAX_DEPTH
    from Battle_Ataxx_AI.engine import referee
    from Battle_Ataxx_AI.engine.commands import CommandType, parse_command
    from Battle_Ataxx_AI.engine.sources import CommandSources, ReaderSource
    from Battle_Ataxx_AI.utils.logger import ConsoleReporter
    from Battle_Ataxx_AI.utils.settings import PROJECT_DIR


SETUP = "setup"
PLAYING = "playing"
FINISHED = "finished"

HELP_FILE = "help.txt"


class Ataxxgame:
    def __init__(
        self,
        source=None,
        reporter=None,
        board=None,
        depth=MAX_DEPTH,
        red_player="manual",
        blue_player="ai",
        seed=None,
        renderer=None,
        closer=None,
        stats=None,
    ):
        self.board = board if board is not None else Board()
        self.reporter = reporter if reporter is not None else ConsoleReporter()
        self.depth = depth
        self.default_players = {RED: red_player, BLUE: blue_player}
        self.random = random.Random(seed)
        self.renderer = renderer
        self.closer = closer
        self.stats = stats
        self.state = SETUP
        self.players = {}
        self.last_move = None
        self._quit = False
        self._inputs = CommandSources()
        if source is not None:
            self._inputs.add_source(source)
        self._commands = {
            CommandType.AUTO: self.do_auto,
            CommandType.MANUAL: self.do_manual,
            CommandType.BLOCK: self.do_block,
            CommandType.SEED: self.do_seed,
            CommandType.START: self.do_start,
            CommandType.CLEAR: self.do_clear,
            CommandType.DUMP: self.do_dump,
            CommandType.PASS: self.do_pass,
            CommandType.LOAD: self.do_load,
            CommandType.QUIT: self.do_quit,
            CommandType.HELP: self.do_help,
            CommandType.PIECEMOVE: self.do_move,
            CommandType.EOF: self.do_quit,
        }
        self._reset()

    def add_source(self, source):
        """Push a command source; it is read until exhausted before earlier ones."""
        self._inputs.add_source(source)

    def process(self):
        """
        Run a session: show the board, then set up, play, and repeat after each
        clear until quit. Input files still open at quit are closed.
        """
        self._changed()
        try:
            while not self._quit:
                if self.state == PLAYING:
                    self._play_turn()
                else:
                    self.do_command()
        finally:
            self._inputs.close()
            if self.closer:
                self.closer()

    def _play_turn(self):
        player = self.players[self.board.turn]
        move = player.next_move(self.board)
        if self.state != PLAYING or self._quit:
            return
        try:
            self._make_move(move, player)
        except ValueError as exc:
            self.reporter.err_msg(str(exc))

    def _make_move(self, move, player):
        referee.check_move(move, self.board)
        self.board.make_move(move)
        self.last_move = move
        if isinstance(player, AIPlayer):
            if move.is_pass():
                self.reporter.move_msg("%s passes.", player)
            else:
                self.reporter.move_msg("%s moves %s.", player, move)
        if self.board.game_over():
            self.state = FINISHED
            self.report_winner()
        self._changed()

    def do_command(self):
        """Read and perform one command from the input sources."""
        try:
            cmnd = parse_command(self._inputs.get_line("ataxx: "))
            if cmnd is not None:
                self._commands[cmnd.type](cmnd.operands)
        except ValueError as exc:
            self.reporter.err_msg(str(exc))

    def get_move_command(self, prompt):
        """
        Read and execute commands until a move or pass arrives, and return it.
        Returns None if the game leaves the playing state first.
        """
        while self.state == PLAYING and not self._quit:
            try:
                cmnd = parse_command(self._inputs.get_line(prompt))
                if cmnd is None:
                    continue
                if cmnd.type in (CommandType.PIECEMOVE, CommandType.PASS):
                    return cmnd
                self._commands[cmnd.type](cmnd.operands)
            except ValueError as exc:
                self.reporter.err_msg(str(exc))
        return None

    def next_random(self, limit):
        """Random integer in [0, limit) from the session generator."""
        return self.random.randrange(limit)

    def report_winner(self):
        winner = self.board.winner()
        self.reporter.outcome_msg("%s wins." % winner if winner else "Draw.")

    def _check_state(self, cmnd, *states):
        if self.state not in states:
            raise ValueError(f"'{cmnd}' command is not allowed now.")

    def _changed(self):
        if self.renderer:
            self.renderer(self.board, self.last_move, self.board.turn, self._result())

    def _result(self):
        if self.state != FINISHED:
            return None
        winner = self.board.winner()
        return str(winner) if winner else "Draw"

    def _make_player(self, kind, color):
        if kind == "ai":
            return AIPlayer(self, color, depth=self.depth, stats=self.stats)
        return HumanPlayer(self, color)

    def _reset(self):
        self.players = {color: self._make_player(kind, color) for color, kind in self.default_players.items()}
        self.board.clear()
        self.last_move = None
        self.state = SETUP

    # Command processors

    def do_auto(self, operands):
        self._check_state("auto", SETUP)
        color = PieceColor.parse(operands[0])
        self.players[color] = self._make_player("ai", color)

    def do_manual(self, operands):
        self._check_state("manual", SETUP)
        color = PieceColor.parse(operands[0])
        self.players[color] = self._make_player("manual", color)

    def do_block(self, operands):
        self._check_state("block", SETUP)
        referee.place_block(operands[0], self.board)
        self._changed()

    def do_seed(self, operands):
        self._check_state("seed", SETUP)
        self.random = random.Random(int(operands[0]))

    def do_start(self, operands):
        self._check_state("start", SETUP)
        self.state = PLAYING
        if self.board.game_over():
            self.state = FINISHED
            self.report_winner()
        self._changed()

    def do_clear(self, operands=()):
        self._reset()
        self._changed()

    def do_dump(self, operands):
        self.reporter.outcome_msg("%s", self.board.to_string(legend=False))

    def do_move(self, operands):
        self._check_state("move", PLAYING)
        col0, row0, col1, row1 = operands
        self._make_move(Move.move(col0, row0, col1, row1), self.players[self.board.turn])

    def do_pass(self, operands):
        self._check_state("pass", PLAYING)
        self._make_move(Move.pass_move(), self.players[self.board.turn])

    def do_load(self, operands):
        path = operands[0]
        try:
            stream = open(path, "r", encoding="utf-8")
        except OSError:
            self.reporter.err_msg("Cannot open file %s", path)
            return
        self._inputs.add_source(ReaderSource(stream))

    def do_help(self, operands):
        path = PROJECT_DIR / HELP_FILE
        try:
            with open(path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except OSError:
            self.reporter.err_msg("No help available.")
            return
        for line in lines:
            self.reporter.outcome_msg("%s", line)

    def do_quit(self, operands):
        self._quit = True
