from functools import reduce
from operator import or_

import pytest

from chateau.board import STARTING_FEN, Board
from chateau.utils import CastlingRights, Colour, Piece, Square, mask


def _bits(*squares):
    return reduce(or_, (mask(sq) for sq in squares), 0)


def test_fresh_board_is_empty():
    board = Board()
    assert board.bitboards == [0] * 15
    assert all(piece is Piece.NO_PIECE for piece in board.piece_list)
    assert board.side_to_move is Colour.NO_COLOUR
    assert board.enpassant_square == Square.NO_SQUARE
    assert board.halfmove_clock == 0
    assert board.fullmove_counter == 1


def test_starting_position_pieces():
    board = Board.starting_position()
    assert board.bitboards[Piece.WHITE_PAWN] == _bits(*(Square(i) for i in range(8, 16)))
    assert board.bitboards[Piece.BLACK_PAWN] == _bits(*(Square(i) for i in range(48, 56)))
    assert board.piece_list[Square.E1] is Piece.WHITE_KING
    assert board.piece_list[Square.D8] is Piece.BLACK_QUEEN
    assert board.piece_list[Square.E4] is Piece.NO_PIECE
    assert bin(board.bitboards[Piece.ALL_PIECES]).count("1") == 32


def test_starting_position_flags():
    board = Board(STARTING_FEN)
    assert board.side_to_move is Colour.WHITE
    assert board.castling_rights == (
        CastlingRights.WKING_SIDE
        | CastlingRights.WQUEEN_SIDE
        | CastlingRights.BKING_SIDE
        | CastlingRights.BQUEEN_SIDE
    )
    assert board.enpassant_square == Square.NO_SQUARE


def test_aggregate_bitboards_are_consistent():
    board = Board.starting_position()
    black = reduce(or_, board.bitboards[0:6])
    white = reduce(or_, board.bitboards[6:12])
    assert board.bitboards[Piece.BLACK_PIECES] == black
    assert board.bitboards[Piece.WHITE_PIECES] == white
    assert board.bitboards[Piece.ALL_PIECES] == black | white
    assert black & white == 0


def test_piece_list_agrees_with_bitboards():
    board = Board("r3k2r/8/8/3Pp3/8/8/8/R3K2R w KQkq e6 0 2")
    for square in range(64):
        piece = board.piece_list[square]
        for index in range(12):
            assert bool(board.bitboards[index] & (1 << square)) == (piece == index)


def test_enpassant_and_counters():
    board = Board("rnbqkbnr/pppp1ppp/8/4p3/4P3/8/PPPP1PPP/RNBQKBNR w KQkq e6 0 2")
    assert board.enpassant_square == Square.E6
    assert board.halfmove_clock == 0
    assert board.fullmove_counter == 2


def test_black_to_move_and_partial_castling():
    board = Board("4k3/8/8/8/8/8/8/4K2R b K - 3 40")
    assert board.side_to_move is Colour.BLACK
    assert board.castling_rights == CastlingRights.WKING_SIDE
    assert board.halfmove_clock == 3
    assert board.fullmove_counter == 40


def test_missing_counters_keep_defaults():
    board = Board("8/8/8/8/8/8/8/4K3 b KQkq -")
    assert board.halfmove_clock == 0
    assert board.fullmove_counter == 1
    assert board.piece_list[Square.E1] is Piece.WHITE_KING


def test_load_fen_replaces_previous_position():
    board = Board.starting_position()
    board.load_fen("8/8/8/8/8/8/8/4K3 w - - 0 1")
    assert board.bitboards[Piece.ALL_PIECES] == mask(Square.E1)
    assert board.castling_rights == CastlingRights(0)


@pytest.mark.parametrize(
    "fen",
    [
        "8/8 w - - 0 1",
        "rnbqkbnr/pppppppp",
        "xnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
        "8/8/8/8/8/8/8/8 w - - 0",
        "8/8/8/8/8/8/8/8 w - - zero 1",
        "8/8/8/8/8/8/8/8 w - z9 0 1",
    ],
)
def test_bad_fen_raises(fen):
    with pytest.raises(ValueError):
        Board(fen)


def test_render_starting_position():
    lines = Board.starting_position().render().splitlines()
    assert lines[0] == "+---+---+---+---+---+---+---+---+"
    assert lines[1] == "| r | n | b | q | k | b | n | r | 8"
    assert lines[-6] == "  a   b   c   d   e   f   g   h"
    assert lines[-5] == "Side to move: White"
    assert lines[-4] == "Castling rights: 15"
    assert lines[-3] == "Enpassant square: -"
    assert lines[-2] == "Halfmove clock: 0"
    assert lines[-1] == "Fullmove counter: 1"


def test_render_enpassant_number():
    board = Board("rnbqkbnr/pppp1ppp/8/4p3/4P3/8/PPPP1PPP/RNBQKBNR w KQkq e6 0 2")
    assert f"Enpassant square: {int(Square.E6)}" in board.render().splitlines()


def test_print_board_matches_render(capsys):
    board = Board.starting_position()
    board.print_board()
    assert capsys.readouterr().out == board.render()