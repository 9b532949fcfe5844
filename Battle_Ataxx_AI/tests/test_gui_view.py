"""Mouse position to square mapping for the pygame view; needs no display."""

from Battle_Ataxx_AI.gui.pygame_view import square_at


def test_corners_map_to_squares():
    assert square_at((10, 10), (0, 0), 80) == "a7"
    assert square_at((6 * 80 + 5, 6 * 80 + 5), (0, 0), 80) == "g1"


def test_origin_offset():
    assert square_at((100 + 2 * 50 + 1, 20 + 3 * 50 + 1), (100, 20), 50) == "c4"


def test_outside_the_board():
    assert square_at((5, 5), (10, 10), 50) is None
    assert square_at((7 * 80, 10), (0, 0), 80) is None
    assert square_at((10, 7 * 80 + 1), (0, 0), 80) is None
