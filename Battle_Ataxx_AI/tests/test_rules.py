"""Referee checks: illegal moves, passes, and blocks raise ValueError without side effects."""

import pytest

from Battle_Ataxx_AI.Board import Board, BLOCKED, EMPTY
from Battle_Ataxx_AI.Move import Move, PASS
from Battle_Ataxx_AI.engine import referee


def test_valid_move_passes():
    b = Board()
    assert referee.check_move(Move.parse("a7-b6"), b) is True


def test_wrong_piece_rejected():
    b = Board()
    with pytest.raises(ValueError, match="not a Red piece"):
        referee.check_move(Move.parse("g7-g6"), b)


def test_out_of_range_move_rejected():
    b = Board()
    with pytest.raises(ValueError, match="out of range"):
        referee.check_move(Move.parse("a7-a3"), b)


def test_pass_rejected_while_a_move_exists():
    b = Board()
    with pytest.raises(ValueError, match="cannot pass at this time"):
        referee.check_move(PASS, b)


def test_block_failure_leaves_board_unchanged():
    b = Board()
    before = b.clone()
    with pytest.raises(ValueError, match="block placement is not allowed"):
        referee.place_block("g7", b)
    assert b == before


def test_block_success():
    b = Board()
    assert referee.place_block("d4", b) is True
    assert b.get("d", "4") is BLOCKED
    assert b.get("d", "3") is EMPTY
