"""Static evaluation for Ataxx positions (piece-count differential)."""

# Larger than any reachable piece differential on a 7x7 board.
INF = 10 ** 9


def piece_differential(board):
    """Pieces of the side to move minus pieces of its opponent."""
    mover = board.turn
    return board.num_pieces(mover) - board.num_pieces(mover.opposite())


def static_score(board, color):
    """
    Score board from the point of view of the side to move.
    Finished games score +INF / -INF / 0 by piece count. While the game goes on,
    a position where `color` (the evaluating player) is stuck counts for half.
    """
    diff = piece_differential(board)
    if board.game_over():
        if diff > 0:
            return INF
        if diff < 0:
            return -INF
        return 0
    if not board.can_move(color):
        return int(diff / 2)
    return diff

