"""Ataxx board: bordered cell array, move legality, captures, undo, and blocks.

Squares are labeled by column ('a'..'g') and row ('1'..'7'). Internally the
7x7 board sits inside an 11x11 flat array whose two outermost rings are always
BLOCKED, so every scan within two squares of a real square can index freely:
off-board probes simply read as blocked.
"""

from collections import namedtuple
from enum import Enum

try:
    from Move import Move, PASS, SIDE, EXTENDED_SIDE
except ImportError:
    from Battle_Ataxx_AI.Move import Move, PASS, SIDE, EXTENDED_SIDE


# Consecutive jumps (no intervening extend) after which the game ends.
JUMP_LIMIT = 25


class PieceColor(Enum):
    EMPTY = "-"
    BLOCKED = "X"
    RED = "r"
    BLUE = "b"

    @property
    def symbol(self):
        return self.value

    def is_piece(self):
        return self in (PieceColor.RED, PieceColor.BLUE)

    def opposite(self):
        if self is PieceColor.RED:
            return PieceColor.BLUE
        if self is PieceColor.BLUE:
            return PieceColor.RED
        return self

    @classmethod
    def parse(cls, name):
        """'red' / 'blue' (any case) to a piece color; raise ValueError otherwise."""
        lookup = {"red": cls.RED, "blue": cls.BLUE}
        try:
            return lookup[name.lower()]
        except (KeyError, AttributeError):
            raise ValueError(f"unknown color: {name!r}") from None

    def __str__(self):
        return self.name.capitalize()


EMPTY = PieceColor.EMPTY
BLOCKED = PieceColor.BLOCKED
RED = PieceColor.RED
BLUE = PieceColor.BLUE


# Undo log entry: the move, squares flipped by capture, jump count before the move.
UndoRecord = namedtuple("UndoRecord", ["move", "flipped", "jump_count"])


def index(col, row):
    """Linearized index of square col row, e.g. index('a', '1') == 24."""
    return (ord(row) - ord("1") + 2) * EXTENDED_SIDE + (ord(col) - ord("a") + 2)


def col_of(sq):
    return chr(sq % EXTENDED_SIDE - 2 + ord("a"))


def row_of(sq):
    return chr(sq // EXTENDED_SIDE - 2 + ord("1"))


def neighbor(sq, dc, dr):
    """Index of the square dc columns and dr rows away from sq."""
    return sq + dc + dr * EXTENDED_SIDE


def in_board(col, row):
    return "a" <= col <= "g" and "1" <= row <= "7"


def reflect_col(col):
    return chr(ord("a") + (ord("g") - ord(col)))


def reflect_row(row):
    return chr(ord("1") + (ord("7") - ord(row)))


class Board:
    def __init__(self):
        self.cells = [BLOCKED] * (EXTENDED_SIDE * EXTENDED_SIDE)
        self.turn = RED
        self.move_count = 0
        self.jump_count = 0
        self.history = []
        self.info_message = None
        self.clear()

    def clear(self):
        """Reset to the starting layout: no blocks, red on a7/g1, blue on a1/g7, red to move."""
        for r in range(SIDE):
            for c in range(SIDE):
                self.cells[(r + 2) * EXTENDED_SIDE + c + 2] = EMPTY
        self._set("a", "7", RED)
        self._set("g", "1", RED)
        self._set("a", "1", BLUE)
        self._set("g", "7", BLUE)
        self.turn = RED
        self.move_count = 0
        self.jump_count = 0
        self.history = []
        self.info_message = None

    def clone(self):
        new_board = Board.__new__(Board)
        new_board.cells = self.cells[:]
        new_board.turn = self.turn
        new_board.move_count = self.move_count
        new_board.jump_count = self.jump_count
        new_board.history = [UndoRecord(rec.move, rec.flipped[:], rec.jump_count) for rec in self.history]
        new_board.info_message = self.info_message
        return new_board

    def get(self, col, row):
        """Contents of square col row; anything outside a1-g7 (up to two squares out) is BLOCKED."""
        return self.cells[index(col, row)]

    def get_index(self, sq):
        return self.cells[sq]

    def _set(self, col, row, value):
        self.cells[index(col, row)] = value

    def num_pieces(self, color):
        return self.cells.count(color)

    def red_pieces(self):
        return self.num_pieces(RED)

    def blue_pieces(self):
        return self.num_pieces(BLUE)

    def piece_counts(self):
        return {RED: self.red_pieces(), BLUE: self.blue_pieces()}

    def legal_move(self, move):
        """
        Return True iff move is legal for the side to move. On failure the reason
        is left in info_message.
        """
        if move is None:
            self.info_message = "move is null"
            return False
        if move.is_pass():
            if self.can_move(self.turn):
                self.info_message = "cannot pass at this time."
                return False
            return True
        if self.get(move.col0, move.row0) is not self.turn:
            self.info_message = f"illegal piece movement, not a {self.turn} piece"
            return False
        if not in_board(move.col0, move.row0) or not in_board(move.col1, move.row1):
            self.info_message = "illegal piece movement, square out of board"
            return False
        if self.get(move.col1, move.row1) is not EMPTY:
            self.info_message = "illegal piece movement, end square not empty"
            return False
        return True

    def can_move(self, color):
        """True iff some piece of color has an empty square within two rows and columns."""
        for sq, value in enumerate(self.cells):
            if value is color and self._empty_around(sq):
                return True
        return False

    def _empty_around(self, sq):
        for dr in range(-2, 3):
            for dc in range(-2, 3):
                if self.cells[neighbor(sq, dc, dr)] is EMPTY:
                    return True
        return False

    def moves_for(self, color):
        return get_move_array(self, color)

    def make_move(self, move):
        """Apply move, assumed legal. A pass only takes effect when the mover is stuck."""
        if move.is_pass():
            self.pass_turn()
            return
        mover = self.turn
        prior_jumps = self.jump_count
        if move.is_jump():
            self.cells[move.from_index] = EMPTY
            self.jump_count += 1
        else:
            self.move_count += 1
            self.jump_count = 0
        self.cells[move.to_index] = mover
        flipped = self._capture(move.to_index, mover)
        self.history.append(UndoRecord(move, flipped, prior_jumps))
        self.turn = mover.opposite()

    def _capture(self, sq, mover):
        """Flip every opponent piece adjacent to sq; return the flipped indices."""
        flipped = []
        opponent = mover.opposite()
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                spot = neighbor(sq, dc, dr)
                if self.cells[spot] is opponent:
                    self.cells[spot] = mover
                    flipped.append(spot)
        return flipped

    def pass_turn(self):
        if not self.can_move(self.turn):
            self.turn = self.turn.opposite()

    def undo(self):
        """Reverse the most recent move."""
        if not self.history:
            raise ValueError("no move to undo")
        record = self.history.pop()
        move = record.move
        mover = self.turn.opposite()
        if move.is_jump():
            self.cells[move.from_index] = mover
        else:
            self.move_count -= 1
        self.jump_count = record.jump_count
        self.cells[move.to_index] = EMPTY
        for sq in record.flipped:
            self.cells[sq] = self.turn
        self.turn = mover

    def legal_block(self, col, row):
        return in_board(col, row) and self.get(col, row) is EMPTY

    def set_block(self, col, row=None):
        """
        Block col row and its reflections across the middle row and column.
        Accepts set_block('b', '3') or set_block('b3'). All four squares must be
        empty, otherwise nothing changes and False is returned.
        """
        if row is None:
            if len(col) != 2:
                return False
            col, row = col[0], col[1]
        if not in_board(col, row):
            return False
        squares = {
            (col, row),
            (reflect_col(col), row),
            (col, reflect_row(row)),
            (reflect_col(col), reflect_row(row)),
        }
        if not all(self.legal_block(c, r) for c, r in squares):
            return False
        for c, r in squares:
            self._set(c, r, BLOCKED)
        return True

    def game_over(self):
        """Jump limit reached, one side wiped out, or neither side able to move."""
        if self.jump_count == JUMP_LIMIT:
            return True
        if self.red_pieces() == 0 or self.blue_pieces() == 0:
            return True
        return not self.can_move(RED) and not self.can_move(BLUE)

    def winner(self):
        """RED or BLUE by piece count, None on a draw. Meaningful once game_over()."""
        red, blue = self.red_pieces(), self.blue_pieces()
        if red > blue:
            return RED
        if blue > red:
            return BLUE
        return None

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.turn is other.turn
            and self.move_count == other.move_count
            and self.jump_count == other.jump_count
            and self.history == other.history
            and self.cells == other.cells
        )

    def __hash__(self):
        return hash(tuple(self.cells))

    def __str__(self):
        return self.to_string(legend=False)

    def to_string(self, legend=False):
        """Text depiction: '===' header, rows 7 down to 1, '===' footer."""
        lines = ["==="]
        for r in range(SIDE - 1, -1, -1):
            row = chr(ord("1") + r)
            spots = " ".join(self.get(chr(ord("a") + c), row).symbol for c in range(SIDE))
            lines.append(f"  {row} {spots}" if legend else f"  {spots}")
        if legend:
            lines.append("    a b c d e f g")
        lines.append("===")
        return "\n".join(lines)


def get_move_array(board, color):
    """
    All moves for color to empty squares, in generation order: origins
    column by column (a1, a2, ..., a7, b1, ...), then row offset -2..2 outer,
    column offset -2..2 inner.
    """
    out = []
    for c in range(SIDE):
        col = chr(ord("a") + c)
        for r in range(SIDE):
            row = chr(ord("1") + r)
            sq = index(col, row)
            if board.cells[sq] is not color:
                continue
            for dr in range(-2, 3):
                for dc in range(-2, 3):
                    if dc == 0 and dr == 0:
                        continue
                    if board.cells[neighbor(sq, dc, dr)] is EMPTY:
                        out.append(Move.move(col, row, chr(ord(col) + dc), chr(ord(row) + dr)))
    return out
