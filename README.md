# tomatochess

Low-level building blocks for a chess engine, based on 64-bit bitboards.

Squares are plain integers from 0 (A1) to 63 (H8): square 1 is B1 and
square 8 is A2. Functions that take a square raise `ValueError` for an index
outside 0..63.

## Modules

- `tomatochess.bitboard.Bitboard`: an immutable set of squares held in a
  64-bit integer (`value`). It supports `&`, `|`, `^`, `~`, `<<` and `>>`,
  `len()`, `in`, truth testing, `int()` and iteration in ascending square
  order. Methods include `from_square`, `contains`, `with_square`,
  `trailing_zeros`, `leading_zeros`, `is_empty`, `has_single_bit`,
  `more_than_one` and `wrapping_mul`, plus the geometry helpers `between`,
  `line`, `diagonal`, `anti_diagonal`, `vertical`, `horizontal`, `hv` and
  `diags`. `Bitboard.EMPTY` and `Bitboard.ALL` are the empty and full sets.
  `str()` draws the board as eight rows of `1` and `.`, rank 8 first.
- `tomatochess.direction.Direction`: a signed square offset. Named steps
  (`NORTH`, `EAST`, `NORTHEAST`, knight steps such as `NNE`, ...) and the
  tuples `ROOK_DIRECTIONS`, `BISHOP_DIRECTIONS`, `KNIGHT_STEPS` and
  `KING_STEPS`. Directions add, subtract, negate and multiply by an integer;
  `step_from(square)` returns the square index reached, without edge checks.
- `tomatochess.rays`: `directional_attacks(square, directions, occupancy)`
  casts rays from a square, stopping at the board edge or at the first
  occupied square (which is included); `chebyshev_distance(sq1, sq2)` gives
  the king-move distance.
- `tomatochess.magic`: magic-bitboard attack tables. `AttacksTable.load()`
  builds the tables from saved magic numbers; `AttacksTable.make(tries)`
  searches for new ones and raises `RuntimeError` if a square finds none.
  `rook_attacks(occupancy, square)` and `bishop_attacks(occupancy, square)`
  return a `Bitboard`. `attacks_table()` returns a shared, pre-loaded table.
  `get_rook_mask`, `get_bishop_mask` and `index_to_occupancy` are the helpers
  the tables are built from.
- `tomatochess.color.Color`: `WHITE` and `BLACK`; `~color` gives the other
  side, with `pawn_direction()`, `pawn_promote_rank()` and
  `pawn_start_rank()`.
- `tomatochess.castling.CastleRights`: a four-bit set of castling rights
  (`ALL`, `NONE`, `WHITE`, `BLACK`, `WHITE_KINGSIDE`, ...), combined with `|`,
  `&` and `~`, queried with `kingside(color)` and `queenside(color)`.

## Example

```python
from tomatochess.bitboard import Bitboard
from tomatochess.magic import attacks_table

A1, A3, E4 = 0, 16, 28
table = attacks_table()

# On an empty board a rook on A1 sees the whole first rank and A-file.
assert table.rook_attacks(Bitboard.EMPTY, A1) == Bitboard.hv(A1)
assert table.bishop_attacks(Bitboard.EMPTY, E4) == Bitboard.diags(E4)

# Squares strictly between A1 and A3.
print(list(Bitboard.between(A1, A3)))  # [8]
print(Bitboard.diagonal(E4))
```

## What this package does not do

It provides square sets, directions and attack lookups only. There is no
board or position type, no FEN parsing, no legal move generation, no game
history or draw detection, no search or evaluation, and no command-line
program or engine protocol.

## Tests

The tests live in `tests/` and use pytest and hypothesis, available through
the `test` extra.