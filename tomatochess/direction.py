"""Directions: signed offsets that describe motion between squares.

Squares are numbered 0..63, with A1 as 0, B1 as 1 and H8 as 63, so a step
of one rank is an offset of 8 and a step of one file is an offset of 1.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Direction:
    """A difference between two squares, expressed as a signed square offset."""

    offset: int

    NONE: ClassVar[Direction]
    NORTH: ClassVar[Direction]
    EAST: ClassVar[Direction]
    SOUTH: ClassVar[Direction]
    WEST: ClassVar[Direction]
    NORTHWEST: ClassVar[Direction]
    NORTHEAST: ClassVar[Direction]
    SOUTHEAST: ClassVar[Direction]
    SOUTHWEST: ClassVar[Direction]
    NNW: ClassVar[Direction]
    NNE: ClassVar[Direction]
    ENE: ClassVar[Direction]
    ESE: ClassVar[Direction]
    SSE: ClassVar[Direction]
    SSW: ClassVar[Direction]
    WSW: ClassVar[Direction]
    WNW: ClassVar[Direction]
    ROOK_DIRECTIONS: ClassVar[tuple[Direction, ...]]
    BISHOP_DIRECTIONS: ClassVar[tuple[Direction, ...]]
    KNIGHT_STEPS: ClassVar[tuple[Direction, ...]]
    KING_STEPS: ClassVar[tuple[Direction, ...]]

    @staticmethod
    def from_steps(rank_step: int, file_step: int) -> Direction:
        """Build a direction as ``rank_step + 8 * file_step``."""
        return Direction(rank_step + file_step * 8)

    def __add__(self, other: object) -> Direction:
        if isinstance(other, Direction):
            return Direction(self.offset + other.offset)
        return NotImplemented

    def __sub__(self, other: object) -> Direction:
        if isinstance(other, Direction):
            return Direction(self.offset - other.offset)
        return NotImplemented

    def __neg__(self) -> Direction:
        return Direction(-self.offset)

    def __rmul__(self, factor: object) -> Direction:
        if isinstance(factor, int) and not isinstance(factor, bool):
            return Direction(factor * self.offset)
        return NotImplemented

    def step_from(self, square: int) -> int:
        """Return the square index reached by moving from ``square`` in this direction.

        The result is not checked against the board edges.
        """
        return square + self.offset


Direction.NONE = Direction(0)
Direction.NORTH = Direction(8)
Direction.EAST = Direction(1)
Direction.SOUTH = Direction(-8)
Direction.WEST = Direction(-1)

Direction.NORTHWEST = Direction.NORTH + Direction.WEST
Direction.NORTHEAST = Direction.NORTH + Direction.EAST
Direction.SOUTHEAST = Direction.SOUTH + Direction.EAST
Direction.SOUTHWEST = Direction.SOUTH + Direction.WEST

Direction.NNW = 2 * Direction.NORTH + Direction.WEST
Direction.NNE = 2 * Direction.NORTH + Direction.EAST
Direction.ENE = Direction.NORTH + 2 * Direction.EAST
Direction.ESE = Direction.SOUTH + 2 * Direction.EAST
Direction.SSE = 2 * Direction.SOUTH + Direction.EAST
Direction.SSW = 2 * Direction.SOUTH + Direction.WEST
Direction.WSW = Direction.SOUTH + 2 * Direction.WEST
Direction.WNW = Direction.NORTH + 2 * Direction.WEST

Direction.ROOK_DIRECTIONS = (
    Direction.NORTH,
    Direction.SOUTH,
    Direction.EAST,
    Direction.WEST,
)

Direction.BISHOP_DIRECTIONS = (
    Direction.NORTHWEST,
    Direction.NORTHEAST,
    Direction.SOUTHWEST,
    Direction.SOUTHEAST,
)

Direction.KNIGHT_STEPS = (
    Direction.NNW,
    Direction.NNE,
    Direction.ENE,
    Direction.ESE,
    Direction.SSE,
    Direction.SSW,
    Direction.WSW,
    Direction.WNW,
)

Direction.KING_STEPS = (
    Direction.NORTH,
    Direction.NORTHEAST,
    Direction.EAST,
    Direction.SOUTHEAST,
    Direction.SOUTH,
    Direction.SOUTHWEST,
    Direction.WEST,
    Direction.NORTHWEST,
)