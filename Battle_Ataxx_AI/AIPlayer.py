"""Search-driven Ataxx player."""

try:
    from Player import Player
    from Move import PASS
    from ai import search_minimax
except ImportError:
    from Battle_Ataxx_AI.Player import Player
    from Battle_Ataxx_AI.Move import PASS
    from Battle_Ataxx_AI.ai import search_minimax


class AIPlayer(Player):
    def __init__(self, game, color, depth=search_minimax.MAX_DEPTH, stats=None):
        super().__init__(game, color)
        self.depth = depth
        self.stats = stats

    def next_move(self, board):
        if not board.can_move(self.color):
            return PASS
        return search_minimax.choose_move(
            board,
            color=self.color,
            depth=self.depth,
            stats=self.stats,
        )
