"""Abstract player interface for manual or AI controllers."""

try:
    from Move import Move, PASS
    from engine.commands import CommandType
except ImportError:
    from Battle_Ataxx_AI.Move import Move, PASS
    from Battle_Ataxx_AI.engine.commands import CommandType


class Player:
    def __init__(self, game, color):
        self.game = game
        self.color = color

    def next_move(self, board):
        """Return the next Move (possibly PASS), or None if play was interrupted."""
        raise NotImplementedError

    def __str__(self):
        return str(self.color)


class HumanPlayer(Player):
    """Takes moves from the game's command input; other commands typed meanwhile are executed."""

    def next_move(self, board):
        cmnd = self.game.get_move_command(f"{self.color}: ")
        if cmnd is None:
            return None
        if cmnd.type is CommandType.PASS:
            return PASS
        col0, row0, col1, row1 = cmnd.operands
        # None for squares that can never be a move apart; the referee reports it.
        return Move.move(col0, row0, col1, row1)
