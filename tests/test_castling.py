import pytest
from hypothesis import given
from hypothesis import strategies as st

from tomatochess.castling import CastleRights
from tomatochess.color import Color

rights_values = st.integers(min_value=0, max_value=15)


def test_white_and_black_make_all():
    assert CastleRights(3) | CastleRights(12) == CastleRights.ALL
    assert CastleRights(3) & CastleRights(12) == CastleRights.NONE


def test_single_rights_compose_sides():
    assert CastleRights(1) | CastleRights(2) == CastleRights.WHITE
    assert CastleRights(4) | CastleRights(8) == CastleRights.BLACK


def test_invert():
    assert ~CastleRights(15) == CastleRights.NONE
    assert ~CastleRights(3) == CastleRights.BLACK


@pytest.mark.parametrize("color", list(Color))
def test_all_rights_allow_everything(color):
    assert CastleRights.ALL.kingside(color)
    assert CastleRights.ALL.queenside(color)
    assert not CastleRights.NONE.kingside(color)
    assert not CastleRights.NONE.queenside(color)


def test_side_specific_rights():
    white = CastleRights.WHITE
    assert white.kingside(Color.WHITE) and white.queenside(Color.WHITE)
    assert not white.kingside(Color.BLACK)
    assert not white.queenside(Color.BLACK)


def test_kingside_only():
    only = CastleRights.BLACK_KINGSIDE
    assert only.kingside(Color.BLACK)
    assert not only.queenside(Color.BLACK)
    assert not only.kingside(Color.WHITE)


def test_removing_rights():
    remaining = CastleRights(15) & ~CastleRights(2)
    assert remaining.kingside(Color.WHITE)
    assert not remaining.queenside(Color.WHITE)
    assert remaining.kingside(Color.BLACK) and remaining.queenside(Color.BLACK)


@pytest.mark.parametrize("value", [-1, 16])
def test_out_of_range_rejected(value):
    with pytest.raises(ValueError):
        CastleRights(value)


@given(rights_values)
def test_double_invert_identity(value):
    r = CastleRights(value)
    assert ~~r == r


@given(rights_values)
def test_complement_laws(value):
    r = CastleRights(value)
    assert r & ~r == CastleRights.NONE
    assert r | ~r == CastleRights.ALL


@given(rights_values, rights_values)
def test_union_keeps_rights(a_value, b_value):
    a = CastleRights(a_value)
    b = CastleRights(b_value)
    union = a | b
    for color in Color:
        assert union.kingside(color) == (a.kingside(color) or b.kingside(color))
        assert union.queenside(color) == (a.queenside(color) or b.queenside(color))