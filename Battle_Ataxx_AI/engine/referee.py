"""Move, pass, and block validation for the game controller."""


def check_move(move, board):
    """
    Validate a move for the side to move. Raises ValueError with a message
    suitable for the player on any illegal move.
    """
    if move is None:
        raise ValueError("illegal piece movement, out of range")
    if move.is_pass():
        return check_pass(board)
    if not board.legal_move(move):
        raise ValueError(board.info_message)
    return True


def check_pass(board):
    if board.can_move(board.turn):
        raise ValueError("cannot pass at this time.")
    return True


def place_block(square, board):
    """Block square and its reflections, or raise ValueError leaving board unchanged."""
    if not board.set_block(square):
        raise ValueError("block placement is not allowed.")
    return True
