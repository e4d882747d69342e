import pytest

from tomatochess.bitboard import Bitboard
from tomatochess.color import Color
from tomatochess.direction import Direction


def test_opposite_color():
    white = Color(0)
    black = Color(1)
    assert white == ~black
    assert black == ~white
    assert (~black).pawn_direction() == Direction.NORTH


@pytest.mark.parametrize("value", [0, 1])
def test_double_inversion_is_identity(value):
    color = Color(value)
    assert ~~color is color
    assert (~~color).pawn_start_rank() == color.pawn_start_rank()


def test_directions():
    assert Color.WHITE.pawn_direction() == Direction.NORTH
    assert Color.BLACK.pawn_direction() == Direction.SOUTH


def test_directions_are_opposite():
    assert -Color.WHITE.pawn_direction() == Color.BLACK.pawn_direction()


def test_pawn_promote_rank():
    assert Bitboard(0xFF00_0000_0000_0000) == Color.WHITE.pawn_promote_rank()
    assert Bitboard(0x0000_0000_0000_00FF) == Color.BLACK.pawn_promote_rank()


def test_pawn_start_rank():
    assert Color.WHITE.pawn_start_rank() == Bitboard(0x0000_0000_0000_FF00)
    assert Color.BLACK.pawn_start_rank() == Bitboard(0x00FF_0000_0000_0000)


@pytest.mark.parametrize("value", [0, 1])
def test_start_rank_is_one_step_from_home_rank(value):
    color = Color(value)
    home = (~color).pawn_promote_rank()
    start = color.pawn_start_rank()
    step = color.pawn_direction().offset
    shifted = home << step if step > 0 else home >> -step
    assert shifted == start
    assert len(start) == 8


def test_colors_index_sequences():
    pair = ("white", "black")
    white = Color(0)
    assert pair[white] == "white"
    assert pair[~white] == "black"