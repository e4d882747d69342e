"""Player and piece colours."""

from __future__ import annotations

from enum import IntEnum

from tomatochess.bitboard import Bitboard
from tomatochess.direction import Direction

_PROMOTE_RANKS = (
    Bitboard(0xFF00_0000_0000_0000),
    Bitboard(0x0000_0000_0000_00FF),
)

_START_RANKS = (
    Bitboard(0x0000_0000_0000_FF00),
    Bitboard(0x00FF_0000_0000_0000),
)


class Color(IntEnum):
    """The colour of a piece or player. White moves first."""

    WHITE = 0
    BLACK = 1

    def __invert__(self) -> Color:
        """Return the opposing colour."""
        return Color(self.value ^ 1)

    def pawn_direction(self) -> Direction:
        """Return the direction in which a pawn of this colour advances."""
        return Direction.NORTH if self is Color.WHITE else Direction.SOUTH

    def pawn_promote_rank(self) -> Bitboard:
        """Return the rank on which a pawn of this colour promotes."""
        return _PROMOTE_RANKS[self.value]

    def pawn_start_rank(self) -> Bitboard:
        """Return the rank on which pawns of this colour start."""
        return _START_RANKS[self.value]