"""Castling rights, stored as a four-bit mask."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from tomatochess.color import Color

_ALL_BITS = 15


@dataclass(frozen=True)
class CastleRights:
    """A set of castling rights.

    Bit 0 is White kingside, bit 1 White queenside, bit 2 Black kingside and
    bit 3 Black queenside.
    """

    value: int = 0

    ALL: ClassVar[CastleRights]
    NONE: ClassVar[CastleRights]
    WHITE: ClassVar[CastleRights]
    BLACK: ClassVar[CastleRights]
    WHITE_KINGSIDE: ClassVar[CastleRights]
    WHITE_QUEENSIDE: ClassVar[CastleRights]
    BLACK_KINGSIDE: ClassVar[CastleRights]
    BLACK_QUEENSIDE: ClassVar[CastleRights]

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _ALL_BITS:
            raise ValueError(f"castle rights value out of range: {self.value}")

    def kingside(self, color: Color) -> bool:
        """Return whether ``color`` may still castle kingside."""
        right = (
            CastleRights.WHITE_KINGSIDE
            if color is Color.WHITE
            else CastleRights.BLACK_KINGSIDE
        )
        return bool(self & right)

    def queenside(self, color: Color) -> bool:
        """Return whether ``color`` may still castle queenside."""
        right = (
            CastleRights.WHITE_QUEENSIDE
            if color is Color.WHITE
            else CastleRights.BLACK_QUEENSIDE
        )
        return bool(self & right)

    def __bool__(self) -> bool:
        return self.value != 0

    def __or__(self, other: object) -> CastleRights:
        if isinstance(other, CastleRights):
            return CastleRights(self.value | other.value)
        return NotImplemented

    def __and__(self, other: object) -> CastleRights:
        if isinstance(other, CastleRights):
            return CastleRights(self.value & other.value)
        return NotImplemented

    def __invert__(self) -> CastleRights:
        return CastleRights(self.value ^ _ALL_BITS)


CastleRights.ALL = CastleRights(15)
CastleRights.NONE = CastleRights(0)
CastleRights.WHITE = CastleRights(3)
CastleRights.BLACK = CastleRights(12)
CastleRights.WHITE_KINGSIDE = CastleRights(1 << 0)
CastleRights.WHITE_QUEENSIDE = CastleRights(1 << 1)
CastleRights.BLACK_KINGSIDE = CastleRights(1 << 2)
CastleRights.BLACK_QUEENSIDE = CastleRights(1 << 3)