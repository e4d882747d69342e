"""Bitboards: sets of squares packed into a 64-bit integer.

Bit ``n`` of the integer stands for square ``n``, where A1 is 0, B1 is 1
and H8 is 63.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from functools import cache
from typing import ClassVar

from tomatochess.direction import Direction
from tomatochess.rays import chebyshev_distance

_MASK = (1 << 64) - 1

_MAIN_DIAG = 0x8040_2010_0804_0201
_ANTI_DIAG = 0x0102_0408_1020_4080
_COL_A = 0x0101_0101_0101_0101
_RANK_1 = 0x0000_0000_0000_00FF


def _check_square(square: int) -> int:
    if not 0 <= square < 64:
        raise ValueError(f"square index out of range: {square}")
    return square


def _shifted(mask: int, amount: int) -> int:
    """Shift right by a positive amount or left by a negative one, within 64 bits."""
    if amount > 0:
        return mask >> amount
    return (mask << -amount) & _MASK


@dataclass(frozen=True)
class Bitboard:
    """An immutable set of squares backed by a 64-bit integer."""

    value: int = 0

    EMPTY: ClassVar[Bitboard]
    ALL: ClassVar[Bitboard]

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _MASK:
            raise ValueError(f"bitboard value out of 64-bit range: {self.value}")

    @staticmethod
    def from_square(square: int) -> Bitboard:
        """Return the bitboard containing only ``square``."""
        return Bitboard(1 << _check_square(square))

    def contains(self, square: int) -> bool:
        """Return whether ``square`` is in this set."""
        return bool(self.value & (1 << _check_square(square)))

    def with_square(self, square: int) -> Bitboard:
        """Return a copy of this set with ``square`` added."""
        return Bitboard(self.value | (1 << _check_square(square)))

    def __len__(self) -> int:
        return bin(self.value).count("1")

    def __iter__(self) -> Iterator[int]:
        remaining = self.value
        while remaining:
            low = remaining & -remaining
            yield low.bit_length() - 1
            remaining ^= low

    def __contains__(self, square: object) -> bool:
        if not isinstance(square, int) or not 0 <= square < 64:
            return False
        return self.contains(square)

    def __bool__(self) -> bool:
        return self.value != 0

    def __int__(self) -> int:
        return self.value

    def __and__(self, other: object) -> Bitboard:
        if isinstance(other, Bitboard):
            return Bitboard(self.value & other.value)
        return NotImplemented

    def __or__(self, other: object) -> Bitboard:
        if isinstance(other, Bitboard):
            return Bitboard(self.value | other.value)
        return NotImplemented

    def __xor__(self, other: object) -> Bitboard:
        if isinstance(other, Bitboard):
            return Bitboard(self.value ^ other.value)
        return NotImplemented

    def __lshift__(self, amount: int) -> Bitboard:
        return Bitboard((self.value << amount) & _MASK)

    def __rshift__(self, amount: int) -> Bitboard:
        return Bitboard(self.value >> amount)

    def __invert__(self) -> Bitboard:
        return Bitboard(self.value ^ _MASK)

    def __str__(self) -> str:
        rows = []
        for rank in range(7, -1, -1):
            cells = (
                "1 " if self.value & (1 << (8 * rank + file)) else ". "
                for file in range(8)
            )
            rows.append("".join(cells) + "\n")
        return "".join(rows)

    def trailing_zeros(self) -> int:
        """Count empty squares from A1 up to the first occupied one (64 if empty)."""
        if not self.value:
            return 64
        return (self.value & -self.value).bit_length() - 1

    def leading_zeros(self) -> int:
        """Count empty squares from H8 down to the highest occupied one."""
        return 64 - self.value.bit_length()

    def is_empty(self) -> bool:
        """Return whether this set holds no squares."""
        return self.value == 0

    def has_single_bit(self) -> bool:
        """Return whether this set holds exactly one square."""
        return self.value != 0 and (self.value & (self.value - 1)) == 0

    def more_than_one(self) -> bool:
        """Return whether this set holds more than one square."""
        return (self.value & (self.value - 1)) != 0

    def wrapping_mul(self, other: Bitboard) -> Bitboard:
        """Multiply the two values, keeping only the low 64 bits."""
        return Bitboard((self.value * other.value) & _MASK)

    @staticmethod
    def between(sq1: int, sq2: int) -> Bitboard:
        """Return the squares strictly between two squares on a rook or bishop line."""
        return Bitboard(_between_table()[_check_square(sq1)][_check_square(sq2)])

    @staticmethod
    def line(sq1: int, sq2: int) -> Bitboard:
        """Return the full line through two aligned squares, or the empty set."""
        return Bitboard(_line_table()[_check_square(sq1)][_check_square(sq2)])

    @staticmethod
    def diagonal(square: int) -> Bitboard:
        """Return the diagonal through ``square`` parallel to A1-H8."""
        return Bitboard(_diagonal_table()[_check_square(square)])

    @staticmethod
    def anti_diagonal(square: int) -> Bitboard:
        """Return the diagonal through ``square`` parallel to A8-H1."""
        return Bitboard(_anti_diagonal_table()[_check_square(square)])

    @staticmethod
    def vertical(square: int) -> Bitboard:
        """Return every square in the file of ``square``."""
        return Bitboard(_COL_A << (_check_square(square) & 7))

    @staticmethod
    def horizontal(square: int) -> Bitboard:
        """Return every square in the rank of ``square``."""
        return Bitboard(_RANK_1 << ((_check_square(square) >> 3) << 3))

    @staticmethod
    def hv(square: int) -> Bitboard:
        """Return the rank and file of ``square``, without ``square`` itself."""
        return Bitboard.vertical(square) ^ Bitboard.horizontal(square)

    @staticmethod
    def diags(square: int) -> Bitboard:
        """Return both diagonals through ``square``, without ``square`` itself."""
        return Bitboard.diagonal(square) ^ Bitboard.anti_diagonal(square)


Bitboard.EMPTY = Bitboard(0)
Bitboard.ALL = Bitboard(_MASK)


@cache
def _diagonal_table() -> tuple[int, ...]:
    return tuple(
        _shifted(_MAIN_DIAG, 8 * (i & 7) - (i & 56)) for i in range(64)
    )


@cache
def _anti_diagonal_table() -> tuple[int, ...]:
    return tuple(
        _shifted(_ANTI_DIAG, 56 - 8 * (i & 7) - (i & 56)) for i in range(64)
    )


def _ray(square: int, direction: Direction) -> Iterator[int]:
    """Yield the squares reached by walking from ``square`` until the board edge."""
    current = square
    while True:
        nxt = direction.step_from(current)
        if not 0 <= nxt < 64 or chebyshev_distance(nxt, current) > 1:
            return
        yield nxt
        current = nxt


@cache
def _between_table() -> tuple[tuple[int, ...], ...]:
    table = [[0] * 64 for _ in range(64)]
    directions = Direction.ROOK_DIRECTIONS + Direction.BISHOP_DIRECTIONS
    for start in range(64):
        for direction in directions:
            passed = 0
            for target in _ray(start, direction):
                table[start][target] = passed
                passed |= 1 << target
    return tuple(tuple(row) for row in table)


@cache
def _line_table() -> tuple[tuple[int, ...], ...]:
    table = []
    for i in range(64):
        i_bit = 1 << i
        bishop_1 = Bitboard.diags(i).value
        rook_1 = Bitboard.hv(i).value
        row = []
        for j in range(64):
            j_bit = 1 << j
            entry = 0
            if bishop_1 & j_bit:
                entry |= i_bit | j_bit | (bishop_1 & Bitboard.diags(j).value)
            if rook_1 & j_bit:
                entry |= i_bit | j_bit | (rook_1 & Bitboard.hv(j).value)
            row.append(entry)
        table.append(tuple(row))
    return tuple(table)