"""Board state and FEN loading."""

from functools import reduce
from operator import or_

from chateau.utils import (
    CastlingRights,
    Colour,
    Piece,
    Square,
    char_to_piece,
    mask,
    piece_to_char,
)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_LETTERS = {
    "K": CastlingRights.WKING_SIDE,
    "Q": CastlingRights.WQUEEN_SIDE,
    "k": CastlingRights.BKING_SIDE,
    "q": CastlingRights.BQUEEN_SIDE,
}

_RULE = "+---+---+---+---+---+---+---+---+"


class Board:
    """A chess position held as bitboards plus a square-to-piece list."""

    def __init__(self, fen=None):
        self.reset()
        if fen is not None:
            self.load_fen(fen)

    @classmethod
    def starting_position(cls):
        """Return a board set up for the start of a game."""
        return cls(STARTING_FEN)

    def reset(self):
        """Clear all pieces and restore the default state flags."""
        self.bitboards = [0] * 15
        self.piece_list = [Piece.NO_PIECE] * 64
        self.enpassant_square = Square.NO_SQUARE
        self.side_to_move = Colour.NO_COLOUR
        self.castling_rights = CastlingRights(0)
        self.halfmove_clock = 0
        self.fullmove_counter = 1

    def load_fen(self, fen):
        """Replace the position with the one described by ``fen``."""
        self.reset()
        fields = fen.split()
        if len(fields) < 4:
            raise ValueError(f"incomplete FEN: {fen!r}")
        placement, side, castling, enpassant, *counters = fields

        self._place_pieces(placement)
        self.side_to_move = Colour.WHITE if side.startswith("w") else Colour.BLACK

        for letter, right in _CASTLING_LETTERS.items():
            if letter in castling:
                self.castling_rights |= right

        if enpassant != "-":
            if len(enpassant) < 2:
                raise ValueError(f"bad en passant square: {enpassant!r}")
            file = ord(enpassant[0]) - ord("a")
            rank = ord(enpassant[1]) - ord("1")
            if not (0 <= file < 8 and 0 <= rank < 8):
                raise ValueError(f"bad en passant square: {enpassant!r}")
            self.enpassant_square = Square(file + 8 * rank)

        if counters:
            if len(counters) < 2:
                raise ValueError(f"missing fullmove counter in FEN: {fen!r}")
            self.halfmove_clock = int(counters[0])
            self.fullmove_counter = int(counters[1])

        black = reduce(or_, self.bitboards[Piece.BLACK_PAWN : Piece.BLACK_KING + 1])
        white = reduce(or_, self.bitboards[Piece.WHITE_PAWN : Piece.WHITE_KING + 1])
        self.bitboards[Piece.BLACK_PIECES] = black
        self.bitboards[Piece.WHITE_PIECES] = white
        self.bitboards[Piece.ALL_PIECES] = black | white

    def _place_pieces(self, placement):
        square = 0
        for char in placement:
            if square >= 64:
                break
            if char.isalpha():
                piece = char_to_piece(char)
                if piece is Piece.NO_PIECE:
                    raise ValueError(f"unknown piece letter {char!r}")
                target = Square(square ^ 56)
                self.piece_list[target] = piece
                self.bitboards[piece] |= mask(target)
                square += 1
            elif char == "/":
                square = 8 * (square // 8)
            elif char in "12345678":
                square += int(char)
        if square < 64:
            raise ValueError(f"piece placement covers only {square} squares")

    def render(self):
        """Return the board and its state flags as printable text."""
        lines = []
        for rank in range(7, -1, -1):
            lines.append(_RULE)
            cells = []
            for file in range(8):
                piece = self.piece_list[8 * rank + file]
                char = " " if piece is Piece.NO_PIECE else piece_to_char(piece)
                cells.append(f"| {char} ")
            lines.append("".join(cells) + f"| {rank + 1}")
        lines.append(_RULE)
        lines.append("  a   b   c   d   e   f   g   h")
        side = "White" if self.side_to_move == Colour.WHITE else "Black"
        lines.append(f"Side to move: {side}")
        lines.append(f"Castling rights: {int(self.castling_rights)}")
        enpassant = (
            "-"
            if self.enpassant_square == Square.NO_SQUARE
            else str(int(self.enpassant_square))
        )
        lines.append(f"Enpassant square: {enpassant}")
        lines.append(f"Halfmove clock: {self.halfmove_clock}")
        lines.append(f"Fullmove counter: {self.fullmove_counter}")
        return "\n".join(lines) + "\n"

    def print_board(self):
        """Print the board and its state flags."""
        print(self.render(), end="")