"""Magic bitboards: fast lookup of rook and bishop attacks.

Each square carries a relevance mask, a magic multiplier and a shift. The
masked occupancy is multiplied by the magic and shifted down to give an index
into a table of precomputed attack sets.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from functools import cache
from typing import SupportsInt

from tomatochess.bitboard import Bitboard
from tomatochess.direction import Direction
from tomatochess.rays import directional_attacks

_MASK = (1 << 64) - 1

NUM_MAGIC_TRIES = 10_000_000
"""Default number of random candidates tried per square when generating magics."""

SAVED_ROOK_MAGICS: tuple[int, ...] = (
    0x4080_0020_4000_1480,  # a1
    0x0040_0010_0140_2000,  # b1
    0x0300_2000_1810_4100,  # c1
    0x2100_0409_0110_0120,  # d1
    0x8A00_0600_0408_2070,  # e1
    0x0080_0144_0002_0080,  # f1
    0x1100_2500_208A_0004,  # g1
    0x0900_0042_2201_8100,  # h1
    0x0208_8002_28C0_0081,  # a2
    0x2280_4010_0340_2000,  # b2
    0x0008_8010_0020_0184,  # c2
    0x0001_0020_1000_0900,  # d2
    0x0182_0006_0010_6008,  # e2
    0x2058_8004_0080_0200,  # f2
    0x0004_8002_0080_0900,  # g2
    0x052D_0012_0040_A100,  # h2
    0x0540_0880_0080_24C1,  # a3
    0x2000_8480_4002_2000,  # b3
    0x0400_4100_1100_6000,  # c3
    0x0040_A100_3001_0108,  # d3
    0x1204_8080_0800_0402,  # e3
    0x0802_8080_0400_2201,  # f3
    0x1002_8080_5200_0500,  # g3
    0x0004_0A00_2112_4184,  # h3
    0x0640_0128_8008_8040,  # a4
    0x8410_4000_8020_008A,  # b4
    0x0400_2008_8010_0080,  # c4
    0x2001_0121_0009_1004,  # d4
    0x1200_0D01_0008_0010,  # e4
    0x6004_0004_0120_1008,  # f4
    0x7500_AA04_0008_4110,  # g4
    0x0100_0052_0004_0981,  # h4
    0x0040_8040_0280_0020,  # a5
    0x0470_0020_0640_0240,  # b5
    0x0001_2000_8080_1000,  # c5
    0x0000_0812_0200_2040,  # d5
    0x00C0_8044_0080_0800,  # e5
    0x9000_800A_0080_0400,  # f5
    0x0001_0004_0100_0600,  # g5
    0x0042_1088_CA00_2401,  # h5
    0x0000_C000_228D_8000,  # a6
    0x6410_0420_1440_4001,  # b6
    0x1002_0040_8226_0014,  # c6
    0x206A_0088_11C2_0021,  # d6
    0x0002_0018_1022_0024,  # e6
    0x2001_0200_0400_8080,  # f6
    0x1000_0801_100C_001A,  # g6
    0x0048_0082_5402_0011,  # h6
    0x48FF_FE99_FECF_AA00,  # a7
    0x48FF_FE99_FECF_AA00,  # b7
    0x497F_FFAD_FF9C_2E00,  # c7
    0x613F_FFDD_FFCE_9200,  # d7
    0xFFFF_FFE9_FFE7_CE00,  # e7
    0xFFFF_FFF5_FFF3_E600,  # f7
    0x0003_FF95_E5E6_A4C0,  # g7
    0x510F_FFF5_F63C_96A0,  # h7
    0xEBFF_FFB9_FF9F_C526,  # a8
    0x61FF_FEDD_FEED_AEAE,  # b8
    0x53BF_FFED_FFDE_B1A2,  # c8
    0x127F_FFB9_FFDF_B5F6,  # d8
    0x411F_FFDD_FFDB_F4D6,  # e8
    0x0822_0024_0810_4502,  # f8
    0x0003_FFEF_27EE_BE74,  # g8
    0x7645_FFFE_CBFE_A79E,  # h8
)

SAVED_BISHOP_MAGICS: tuple[int, ...] = (
    0xFFED_F9FD_7CFC_FFFF,  # a1
    0xFC09_6285_4A77_F576,  # b1
    0x0012_2808_C102_A004,  # c1
    0x2851_2400_8240_0440,  # d1
    0x0011_1040_1100_0202,  # e1
    0x0008_2208_2000_0010,  # f1
    0xFC0A_66C6_4A7E_F576,  # g1
    0x7FFD_FDFC_BD79_FFFF,  # h1
    0xFC08_46A6_4A34_FFF6,  # a2
    0xFC08_7A87_4A3C_F7F6,  # b2
    0x0009_8802_0420_A000,  # c2
    0x8000_4404_0080_8200,  # d2
    0x208C_8450_C001_3407,  # e2
    0x1980_1105_2010_8030,  # f2
    0xFC08_64AE_59B4_FF76,  # g2
    0x3C08_60AF_4B35_FF76,  # h2
    0x73C0_1AF5_6CF4_CFFB,  # a3
    0x41A0_1CFA_D64A_AFFC,  # b3
    0x0604_0002_04A2_0202,  # c3
    0x0002_8208_0602_4000,  # d3
    0x008A_0024_2201_0201,  # e3
    0x2082_0040_8801_0802,  # f3
    0x7C0C_028F_5B34_FF76,  # g3
    0xFC0A_028E_5AB4_DF76,  # h3
    0x0810_0420_D104_1080,  # a4
    0x0904_5100_0210_0100,  # b4
    0x0202_2808_0406_4403,  # c4
    0x004C_0040_0C03_0082,  # d4
    0x0602_0010_0200_5011,  # e4
    0x7209_0200_C108_9000,  # f4
    0x4211_4104_2400_8805,  # g4
    0x0002_8484_2126_0804,  # h4
    0xC001_0412_1121_2004,  # a5
    0x0208_0188_0004_4800,  # b5
    0x0080_2064_1058_0800,  # c5
    0x0000_2011_0008_0084,  # d5
    0x0208_0034_0009_4100,  # e5
    0x2190_4102_0000_4058,  # f5
    0x0188_8214_0180_8080,  # g5
    0x2006_0A02_0000_C4C0,  # h5
    0xDCEF_D9B5_4BFC_C09F,  # a6
    0xF95F_FA76_5AFD_602B,  # b6
    0x200A_1041_1000_2040,  # c6
    0x0800_000C_0831_0C00,  # d6
    0x0218_0401_0A01_0400,  # e6
    0x1092_2004_0022_4100,  # f6
    0x43FF_9A5C_F4CA_0C01,  # g6
    0x4BFF_CD8E_7C58_7601,  # h6
    0xFC0F_F286_5334_F576,  # a7
    0xFC0B_F6CE_5924_F576,  # b7
    0x8052_2060_8C30_0001,  # c7
    0x2084_1050_4202_0400,  # d7
    0xE018_8010_2206_0220,  # e7
    0x0001_1220_4901_0200,  # f7
    0xC3FF_B7DC_36CA_8C89,  # g7
    0xC3FF_8A54_F4CA_2C89,  # h7
    0xFFFF_FCFC_FD79_EDFF,  # a8
    0xFC08_63FC_CB14_7576,  # b8
    0x40A0_0400_6213_3000,  # c8
    0x0142_0280_0084_0400,  # d8
    0x0009_0900_1006_1200,  # e8
    0x0800_8445_2810_0308,  # f8
    0xFC08_7E8E_4BB2_F736,  # g8
    0x43FF_9E4E_F4CA_2C89,  # h8
)

ROOK_BITS: tuple[int, ...] = (
    12, 11, 11, 11, 11, 11, 11, 12,
    11, 10, 10, 10, 10, 10, 10, 11,
    11, 10, 10, 10, 10, 10, 10, 11,
    11, 10, 10, 10, 10, 10, 10, 11,
    11, 10, 10, 10, 10, 10, 10, 11,
    11, 10, 10, 10, 10, 10, 10, 11,
    10, 9, 9, 9, 9, 9, 9, 10,
    11, 10, 10, 10, 10, 11, 10, 11,
)

BISHOP_BITS: tuple[int, ...] = (
    5, 4, 5, 5, 5, 5, 4, 5,
    4, 4, 5, 5, 5, 5, 4, 4,
    4, 4, 7, 7, 7, 7, 4, 4,
    5, 5, 7, 9, 9, 7, 5, 5,
    5, 5, 7, 9, 9, 7, 5, 5,
    4, 4, 7, 7, 7, 7, 4, 4,
    4, 4, 5, 5, 5, 5, 4, 4,
    5, 4, 5, 5, 5, 5, 4, 5,
)

_RING_MASK = 0xFF81_8181_8181_81FF


def _check_square(square: int) -> int:
    if not 0 <= square < 64:
        raise ValueError(f"square index out of range: {square}")
    return square


def _magic_key(occupancy: int, magic: int, shift: int) -> int:
    return ((occupancy * magic) & _MASK) >> shift


@dataclass
class _SquareAttacks:
    """Everything needed to look up slider attacks from one square."""

    mask: int
    magic: int
    shift: int
    attacks: list[int] = field(default_factory=list)

    def lookup(self, occupancy: int) -> int:
        return self.attacks[_magic_key(occupancy & self.mask, self.magic, self.shift)]


def get_rook_mask(square: int) -> Bitboard:
    """Return the squares whose occupancy matters for a rook on ``square``."""
    sq = _check_square(square)
    row_mask = 0x7E << (8 * (sq // 8))
    col_mask = 0x0001_0101_0101_0100 << (sq % 8)
    return Bitboard(((row_mask ^ col_mask) & _MASK) & ~(1 << sq) & _MASK)


def get_bishop_mask(square: int) -> Bitboard:
    """Return the squares whose occupancy matters for a bishop on ``square``."""
    diagonals = Bitboard.diagonal(square) ^ Bitboard.anti_diagonal(square)
    return diagonals & ~Bitboard(_RING_MASK)


def index_to_occupancy(index: int, mask: SupportsInt) -> Bitboard:
    """Spread the low bits of ``index`` over the set squares of ``mask``.

    Bit ``i`` of ``index`` decides whether the ``i``-th lowest square of the
    mask is occupied.
    """
    result = 0
    for i, square in enumerate(Bitboard(int(mask))):
        if index & (1 << i):
            result |= 1 << square
    return Bitboard(result)


def _relevant_occupancies(mask: Bitboard) -> list[int]:
    return [index_to_occupancy(j, mask).value for j in range(1 << len(mask))]


def _load_entries(is_rook: bool) -> list[_SquareAttacks]:
    directions = Direction.ROOK_DIRECTIONS if is_rook else Direction.BISHOP_DIRECTIONS
    magics = SAVED_ROOK_MAGICS if is_rook else SAVED_BISHOP_MAGICS
    bits = ROOK_BITS if is_rook else BISHOP_BITS
    entries = []
    for sq in range(64):
        mask = get_rook_mask(sq) if is_rook else get_bishop_mask(sq)
        entry = _SquareAttacks(mask=mask.value, magic=magics[sq], shift=64 - bits[sq])
        entry.attacks = [0] * (1 << bits[sq])
        for occupancy in _relevant_occupancies(mask):
            attack = directional_attacks(sq, directions, occupancy)
            key = _magic_key(occupancy, entry.magic, entry.shift)
            if entry.attacks[key] == 0:
                entry.attacks[key] = attack
            elif entry.attacks[key] != attack:
                piece = "rook" if is_rook else "bishop"
                raise RuntimeError(
                    f"hash collision while loading {piece} magics for square {sq}"
                )
        entries.append(entry)
    return entries


def _random_sparse() -> int:
    return random.getrandbits(64) & random.getrandbits(64) & random.getrandbits(64)


def _make_entries(is_rook: bool, tries: int) -> list[_SquareAttacks]:
    directions = Direction.ROOK_DIRECTIONS if is_rook else Direction.BISHOP_DIRECTIONS
    bits = ROOK_BITS if is_rook else BISHOP_BITS
    entries = []
    for sq in range(64):
        mask = get_rook_mask(sq) if is_rook else get_bishop_mask(sq)
        shift = 64 - bits[sq]
        occupancies = _relevant_occupancies(mask)
        attacks = [directional_attacks(sq, directions, occ) for occ in occupancies]
        found = None
        for _ in range(tries):
            magic = _random_sparse()
            used = [0] * (1 << bits[sq])
            for occupancy, attack in zip(occupancies, attacks):
                key = _magic_key(occupancy, magic, shift)
                if used[key] == 0:
                    used[key] = attack
                elif used[key] != attack:
                    break
            else:
                found = magic, used
                break
        if found is None:
            piece = "rook" if is_rook else "bishop"
            raise RuntimeError(f"failed to find {piece} magic for square {sq}")
        magic, table = found
        entries.append(_SquareAttacks(mask=mask.value, magic=magic, shift=shift, attacks=table))
    return entries


class AttacksTable:
    """Magic lookup tables for rook and bishop attacks on every square."""

    def __init__(
        self, rook_table: list[_SquareAttacks], bishop_table: list[_SquareAttacks]
    ) -> None:
        self._rook_table = rook_table
        self._bishop_table = bishop_table

    @classmethod
    def load(cls) -> AttacksTable:
        """Build the tables from the saved magic numbers."""
        return cls(_load_entries(True), _load_entries(False))

    @classmethod
    def make(cls, tries: int = NUM_MAGIC_TRIES) -> AttacksTable:
        """Build the tables by searching for new magic numbers.

        Raises ``RuntimeError`` if no magic is found for some square within
        ``tries`` random candidates.
        """
        return cls(_make_entries(True, tries), _make_entries(False, tries))

    def rook_attacks(self, occupancy: SupportsInt, square: int) -> Bitboard:
        """Return the squares a rook on ``square`` attacks given ``occupancy``."""
        entry = self._rook_table[_check_square(square)]
        return Bitboard(entry.lookup(int(occupancy)))

    def bishop_attacks(self, occupancy: SupportsInt, square: int) -> Bitboard:
        """Return the squares a bishop on ``square`` attacks given ``occupancy``."""
        entry = self._bishop_table[_check_square(square)]
        return Bitboard(entry.lookup(int(occupancy)))


@cache
def attacks_table() -> AttacksTable:
    """Return the shared table built from the saved magics, loading it on first use."""
    return AttacksTable.load()