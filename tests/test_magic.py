import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tomatochess.bitboard import Bitboard
from tomatochess.direction import Direction
from tomatochess.magic import (
    AttacksTable,
    attacks_table,
    get_bishop_mask,
    get_rook_mask,
    index_to_occupancy,
)
from tomatochess.rays import directional_attacks

A1, C1, E1, F1 = 0, 2, 4, 5
E4 = 28
E5 = 36
A8 = 56


@pytest.fixture(scope="module")
def table():
    return attacks_table()


def test_rook_mask():
    assert get_rook_mask(A1) == Bitboard(0x0001_0101_0101_017E)
    assert get_rook_mask(E1) == Bitboard(0x0010_1010_1010_106E)
    assert get_rook_mask(E5) == Bitboard(0x0010_106E_1010_1000)


def test_bishop_mask():
    assert get_bishop_mask(A1) == Bitboard(0x0040_2010_0804_0200)
    assert get_bishop_mask(E1) == Bitboard(0x0000_0000_0244_2800)
    assert get_bishop_mask(E5) == Bitboard(0x0044_2800_2844_0200)


def test_valid_index_to_occupancy():
    mask = Bitboard(0b1111)
    for i in range(16):
        assert index_to_occupancy(i, mask) == Bitboard(i)


def test_index_to_occupancy_spreads_bits():
    mask = Bitboard((1 << 0) | (1 << 9))
    assert index_to_occupancy(0b10, mask) == Bitboard(1 << 9)
    assert index_to_occupancy(0b01, mask) == Bitboard(1)


@given(st.integers(min_value=0, max_value=(1 << 12) - 1))
def test_index_to_occupancy_is_subset_of_mask(index):
    mask = get_rook_mask(A1)
    occ = index_to_occupancy(index, mask)
    assert (occ & ~mask).is_empty()
    assert len(occ) == bin(index).count("1")


@pytest.mark.parametrize(
    "occupancy, square, expected",
    [(0x103, A1, 0x102), (0x1FC3, A1, 0x102)],
)
def test_magic_rook_attacks(table, occupancy, square, expected):
    assert table.rook_attacks(Bitboard(occupancy), square) == Bitboard(expected)


BISHOP_CASES = [
    (0x0000_0000_0000_0201, A1, 0x0000_0000_0000_0200),
    (0x0102_0000_0000_0000, A8, 0x0002_0000_0000_0000),
    (0xFFFF_0000_0000_FFFF, C1, 0x0000_0000_0000_0A00),
    (0xFFFF_0000_0000_FFFF, F1, 0x0000_0000_0000_5000),
]


@pytest.mark.parametrize("occupancy, square, expected", BISHOP_CASES)
def test_bishop_attacks(table, occupancy, square, expected):
    assert table.bishop_attacks(Bitboard(occupancy), square) == Bitboard(expected)


@pytest.mark.parametrize("occupancy, square, expected", BISHOP_CASES)
def test_magic_bishop_directional_attacks(occupancy, square, expected):
    result = directional_attacks(square, Direction.BISHOP_DIRECTIONS, Bitboard(occupancy))
    assert result == expected


def test_empty_board_attacks(table):
    assert table.rook_attacks(Bitboard.EMPTY, A1) == Bitboard.hv(A1)
    assert table.bishop_attacks(Bitboard.EMPTY, E4) == Bitboard.diags(E4)


@settings(max_examples=200, deadline=None)
@given(
    st.integers(min_value=0, max_value=(1 << 64) - 1),
    st.integers(min_value=0, max_value=63),
)
def test_table_matches_ray_casting(occupancy, square):
    table = attacks_table()
    assert table.rook_attacks(Bitboard(occupancy), square).value == directional_attacks(
        square, Direction.ROOK_DIRECTIONS, occupancy
    )
    assert table.bishop_attacks(Bitboard(occupancy), square).value == directional_attacks(
        square, Direction.BISHOP_DIRECTIONS, occupancy
    )


def test_attacks_table_is_shared():
    first = attacks_table()
    second = attacks_table()
    assert first is second
    assert second.rook_attacks(Bitboard(0x103), A1) == Bitboard(0x102)


def test_make_fails_without_tries():
    with pytest.raises(RuntimeError):
        AttacksTable.make(0)


def test_out_of_range_square(table):
    with pytest.raises(ValueError):
        table.rook_attacks(Bitboard.EMPTY, 64)
    with pytest.raises(ValueError):
        get_rook_mask(-1)