"""Depth-limited alpha-beta search over a private copy of the board."""

import time

from . import heuristic


INF = heuristic.INF
MAX_DEPTH = 4


class MinimaxSearcher:
    """Encapsulates the state and logic for a minimax search."""

    def __init__(self, color, depth=MAX_DEPTH, stats=None):
        self.color = color
        self.depth = depth
        self.stats_list = stats

        # Internal state
        self.best_move = None
        self.node_counter = 0
        self.start_time = None

    def choose_move(self, board):
        """
        Return the move found for self.color from board. The board passed in is
        never touched; the search runs on a clone. Returns None when none of
        self.color's moves is legal in board (it is the other side's turn).
        """
        if not board.can_move(board.turn):
            raise ValueError(f"{board.turn} has no legal move to search")

        self.best_move = None
        self.node_counter = 0
        self.start_time = time.time()

        scratch = board.clone()
        sense = 1 if scratch.turn is self.color else -1
        self._search(scratch, self.depth, sense, -INF, INF, save_move=True)

        if self.stats_list is not None:
            self._record_stats()

        return self.best_move

    def _search(self, board, depth, sense, alpha, beta, save_move=False):
        """
        Alpha-beta value of board. Every node tries self.color's moves in
        generation order, skipping any the board rejects, and keeps the same
        sense: 1 raises alpha, -1 lowers beta. A move scoring equal to the
        current bound replaces the saved one, so the last of equal moves wins.
        """
        self.node_counter += 1
        if depth == 0 or board.game_over():
            return heuristic.static_score(board, self.color)

        for move in board.moves_for(self.color):
            if not board.legal_move(move):
                continue
            board.make_move(move)
            try:
                score = self._search(board, depth - 1, sense, alpha, beta)
            finally:
                board.undo()

            if sense == 1:
                if alpha <= score:
                    if save_move:
                        self.best_move = move
                    alpha = score
            elif beta > score:
                if save_move:
                    self.best_move = move
                beta = score

            if beta <= alpha:
                break

        return alpha if sense == 1 else beta

    def _record_stats(self):
        total_time = max(time.time() - self.start_time, 1e-9)
        self.stats_list.append({
            "color": str(self.color),
            "depth": self.depth,
            "nodes": self.node_counter,
            "time": total_time,
            "nps": self.node_counter / total_time,
        })


def choose_move(board, color=None, depth=MAX_DEPTH, stats=None):
    """
    Public function to start a search for the side to move. color, if given,
    is the player the search works for; it defaults to board.turn.
    """
    searcher = MinimaxSearcher(
        color=board.turn if color is None else color,
        depth=depth,
        stats=stats,
    )
    return searcher.choose_move(board)
