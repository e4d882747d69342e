"""Slow ray-casting attack generation used to build lookup tables."""

from __future__ import annotations

from collections.abc import Iterable
from typing import SupportsInt

from tomatochess.direction import Direction


def chebyshev_distance(sq1: int, sq2: int) -> int:
    """Return the king-move distance between two square indices."""
    rank_diff = abs((sq1 >> 3) - (sq2 >> 3))
    file_diff = abs((sq1 & 7) - (sq2 & 7))
    return max(rank_diff, file_diff)


def directional_attacks(
    square: int, directions: Iterable[Direction], occupancy: SupportsInt
) -> int:
    """Return the mask of squares a slider on ``square`` attacks along ``directions``.

    Each ray stops at the board edge or at the first occupied square, which is
    itself included in the result.
    """
    occupied = int(occupancy)
    result = 0
    for direction in directions:
        current = square
        for _ in range(7):
            nxt = direction.step_from(current)
            if not 0 <= nxt < 64:
                break
            if chebyshev_distance(nxt, current) > 1:
                break
            bit = 1 << nxt
            result |= bit
            if occupied & bit:
                break
            current = nxt
    return result