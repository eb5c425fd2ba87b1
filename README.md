# chateau

A small chess library built on 64-bit bitboards. Bitboards are plain Python
integers. Squares use little-endian rank-file mapping: a1 is 0, h1 is 7, a8 is
56 and h8 is 63.

## Modules

- `chateau.utils`: the `Square`, `Piece`, `Colour` and `CastlingRights`
  enumerations, and the bitboard helpers `mask`, `set_bit`, `get_bit`,
  `piece_to_char`, `char_to_piece`, `format_bitboard` and `print_bitboard`.
  `Piece` values double as indexes into a board's bitboards (twelve piece
  kinds, then `BLACK_PIECES`, `WHITE_PIECES` and `ALL_PIECES`).
- `chateau.board`: the `Board` class. `Board(fen)` loads a position from a FEN
  string; `Board()` gives an empty board; `Board.starting_position()` gives the
  initial position. `load_fen` raises `ValueError` on a malformed FEN.
  `render()` returns a text diagram with the state flags (side to move,
  castling rights, en passant square, clocks) and `print_board()` prints it.
- `chateau.attacks`: attack sets for every piece type. Sliding pieces use
  Kogge-Stone fills in eight directions (`north_attacks`, `south_attacks`,
  `east_attacks`, `west_attacks`, `no_east_attacks`, `no_west_attacks`,
  `so_east_attacks`, `so_west_attacks`), each taking the sliders and the empty
  squares. `knight_attacks`, `king_attacks`, `wpawn_attacks` and
  `bpawn_attacks` compute the others by shifting. Results are kept within
  64 bits.
- `chateau.movegen`: `MoveCode`, the 4-bit code of a 16-bit encoded move (6 bits
  from-square, 6 bits to-square), with `is_promotion` and `is_capture`;
  `analyse_checks(board)`, which returns a `CheckInfo` holding the opponent's
  attacks, the king's rays, the squares between checking sliders and the king,
  the checkers, and the mask of squares the side to move may move to
  (`target_mask`), with `in_check` and `double_check` properties; and
  `generate_moves(board)`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from chateau.board import Board
from chateau.utils import Square, mask, print_bitboard
from chateau.attacks import knight_attacks
from chateau.movegen import analyse_checks

board = Board.starting_position()
board.print_board()

# Squares a knight on g1 attacks
print_bitboard(knight_attacks(mask(Square.G1)))

# White to move and in check from the queen on h4
board = Board("rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3")
info = analyse_checks(board)
print(info.in_check, info.double_check)
print_bitboard(info.target_mask)
```

## What it does not do

`generate_moves` runs the check analysis but emits no moves yet: it always
returns an empty list. There is no making or unmaking of moves, no search or
evaluation, and no command-line program or engine protocol.