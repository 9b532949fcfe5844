"""Ataxx move values: from/to square pairs plus a shared pass sentinel."""

SIDE = 7
EXTENDED_SIDE = SIDE + 4


def _linear(col, row):
    """Linearized index of (col, row) given as 0-based offsets into the bordered array."""
    return row * EXTENDED_SIDE + col


class Move:
    """
    One from/to square pair. Instances are interned: Move.move() always returns
    the same object for the same squares, so moves compare and hash cheaply.
    """

    __slots__ = ("_col0", "_row0", "_col1", "_row1", "_from_index", "_to_index")

    def __init__(self, col0=None, row0=None, col1=None, row1=None):
        # Arguments are offsets into the 11x11 array; None builds the pass.
        if col0 is None:
            self._col0 = self._row0 = self._col1 = self._row1 = None
            self._from_index = self._to_index = -1
            return
        self._col0 = chr(col0 + ord("a") - 2)
        self._row0 = chr(row0 + ord("1") - 2)
        self._col1 = chr(col1 + ord("a") - 2)
        self._row1 = chr(row1 + ord("1") - 2)
        self._from_index = _linear(col0, row0)
        self._to_index = _linear(col1, row1)

    @staticmethod
    def move(col0, row0, col1, row1):
        """
        Return the Move col0 row0 - col1 row1 (e.g. 'a', '7', 'b', '6'), or None
        when no such move can exist: an origin outside a1-g7 or squares more
        than two rows/columns apart.
        """
        key = (
            ord(col0) - ord("a") + 2,
            ord(row0) - ord("1") + 2,
            ord(col1) - ord("a") + 2,
            ord(row1) - ord("1") + 2,
        )
        return _ALL_MOVES.get(key)

    @staticmethod
    def pass_move():
        return PASS

    @staticmethod
    def parse(text):
        """Parse 'c0r0-c1r1' or '-'. Raises ValueError on malformed text."""
        text = text.strip()
        if text == "-":
            return PASS
        if len(text) != 5 or text[2] != "-":
            raise ValueError(f"malformed move: {text!r}")
        col0, row0, col1, row1 = text[0], text[1], text[3], text[4]
        if not (col0.isalpha() and col1.isalpha() and row0.isdigit() and row1.isdigit()):
            raise ValueError(f"malformed move: {text!r}")
        return Move.move(col0.lower(), row0, col1.lower(), row1)

    def is_pass(self):
        return self is PASS

    def is_extend(self):
        """True for a move to an adjacent square (Chebyshev distance 1)."""
        if self.is_pass():
            return False
        col_dif = abs(ord(self._col0) - ord(self._col1))
        row_dif = abs(ord(self._row0) - ord(self._row1))
        if col_dif > 1 or row_dif > 1:
            return False
        return not (col_dif == 0 and row_dif == 0)

    def is_jump(self):
        """True for a move two rows or columns away."""
        if self.is_pass():
            return False
        col_dif = abs(ord(self._col0) - ord(self._col1))
        row_dif = abs(ord(self._row0) - ord(self._row1))
        return col_dif == 2 or row_dif == 2

    @property
    def col0(self):
        return self._col0

    @property
    def row0(self):
        return self._row0

    @property
    def col1(self):
        return self._col1

    @property
    def row1(self):
        return self._row1

    @property
    def from_index(self):
        return self._from_index

    @property
    def to_index(self):
        return self._to_index

    def __eq__(self, other):
        if not isinstance(other, Move):
            return NotImplemented
        return self._from_index == other._from_index and self._to_index == other._to_index

    def __hash__(self):
        return hash((self._from_index, self._to_index))

    def __repr__(self):
        return f"Move({str(self)!r})"

    def __str__(self):
        if self.is_pass():
            return "-"
        return f"{self._col0}{self._row0}-{self._col1}{self._row1}"


PASS = Move()


def _build_all_moves():
    # Every origin inside the 7x7 area to every square within two steps,
    # border squares included so legality can reject them later.
    table = {}
    for c in range(2, SIDE + 2):
        for r in range(2, SIDE + 2):
            for dc in range(-2, 3):
                for dr in range(-2, 3):
                    if dc != 0 or dr != 0:
                        table[(c, r, c + dc, r + dr)] = Move(c, r, c + dc, r + dr)
    return table


_ALL_MOVES = _build_all_moves()
