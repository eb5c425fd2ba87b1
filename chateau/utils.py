"""Square, piece and colour enumerations plus bitboard helpers."""

from enum import IntEnum, IntFlag

_FILES = "abcdefgh"
_PIECE_CHARS = "pnbrqkPNBRQK"

# Little-endian rank-file mapping: a1 = 0, h1 = 7, a8 = 56, h8 = 63.
Square = IntEnum(
    "Square",
    [
        (f"{file}{rank}".upper(), 8 * (rank - 1) + file_index)
        for rank in range(1, 9)
        for file_index, file in enumerate(_FILES)
    ]
    + [("NO_SQUARE", 64)],
    module=__name__,
)


class Piece(IntEnum):
    """Piece kinds, also used as indexes into a board's bitboards."""

    BLACK_PAWN = 0
    BLACK_KNIGHT = 1
    BLACK_BISHOP = 2
    BLACK_ROOK = 3
    BLACK_QUEEN = 4
    BLACK_KING = 5
    WHITE_PAWN = 6
    WHITE_KNIGHT = 7
    WHITE_BISHOP = 8
    WHITE_ROOK = 9
    WHITE_QUEEN = 10
    WHITE_KING = 11
    BLACK_PIECES = 12
    WHITE_PIECES = 13
    ALL_PIECES = 14
    NO_PIECE = 15


class Colour(IntEnum):
    """Side colours."""

    BLACK = 0
    WHITE = 1
    NO_COLOUR = 2


class CastlingRights(IntFlag):
    """Castling rights, combinable with ``|``."""

    WKING_SIDE = 1
    WQUEEN_SIDE = 2
    BKING_SIDE = 4
    BQUEEN_SIDE = 8


def mask(square):
    """Return a bitboard with only ``square`` set."""
    index = int(square)
    if not 0 <= index < 64:
        raise ValueError(f"square {index} is off the board")
    return 1 << index


def set_bit(bitboard, square):
    """Return ``bitboard`` with ``square`` set."""
    return bitboard | mask(square)


def get_bit(bitboard, square):
    """Return the bit of ``bitboard`` at ``square`` (zero if clear)."""
    return bitboard & mask(square)


def piece_to_char(piece):
    """Return the algebraic letter of ``piece``."""
    index = int(piece)
    if not 0 <= index < len(_PIECE_CHARS):
        raise ValueError(f"{piece!r} has no letter")
    return _PIECE_CHARS[index]


def char_to_piece(c):
    """Return the piece written as ``c``, or ``Piece.NO_PIECE``."""
    if len(c) != 1:
        return Piece.NO_PIECE
    index = _PIECE_CHARS.find(c)
    return Piece(index) if index >= 0 else Piece.NO_PIECE


def format_bitboard(bb):
    """Render a bitboard as a chess-board-like grid of ones and zeros."""
    lines = [f"\nBitboard val: {bb} "]
    for rank in range(7, -1, -1):
        cells = "".join(
            " 1 " if get_bit(bb, 8 * rank + file) else " 0 " for file in range(8)
        )
        lines.append(f" {rank + 1} |{cells}")
    lines.append("     a  b  c  d  e  f  g  h")
    return "\n".join(lines) + "\n"


def print_bitboard(bb):
    """Print a bitboard as a chess-board-like grid."""
    print(format_bitboard(bb), end="")