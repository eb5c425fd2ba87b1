import pytest

from chateau.utils import (
    Piece,
    Square,
    char_to_piece,
    format_bitboard,
    get_bit,
    mask,
    piece_to_char,
    print_bitboard,
    set_bit,
)


def test_square_layout_is_little_endian_rank_file():
    assert mask(Square.A1) == 1 << 0
    assert mask(Square.H1) == 1 << 7
    assert mask(Square.A8) == 1 << 56
    assert mask(Square.H8) == 1 << 63
    assert mask(Square.E4) == 1 << (4 + 8 * 3)


def test_mask_corners():
    assert mask(Square.A1) == 1
    assert mask(Square.H8) == 1 << 63


def test_mask_off_board_raises():
    with pytest.raises(ValueError):
        mask(Square.NO_SQUARE)


def test_set_and_get_bit():
    bb = set_bit(0, Square.E4)
    assert get_bit(bb, Square.E4) == mask(Square.E4)
    assert get_bit(bb, Square.E5) == 0
    assert set_bit(bb, Square.E4) == bb


@pytest.mark.parametrize("piece", [Piece(i) for i in range(12)])
def test_piece_char_round_trip(piece):
    assert char_to_piece(piece_to_char(piece)) is piece


def test_piece_letters():
    assert piece_to_char(Piece.WHITE_KING) == "K"
    assert piece_to_char(Piece.BLACK_PAWN) == "p"


@pytest.mark.parametrize("c", ["x", "1", "", "kk", " "])
def test_unknown_char_is_no_piece(c):
    assert char_to_piece(c) is Piece.NO_PIECE


def test_piece_to_char_rejects_aggregates():
    with pytest.raises(ValueError):
        piece_to_char(Piece.NO_PIECE)
    with pytest.raises(ValueError):
        piece_to_char(Piece.ALL_PIECES)


def test_format_bitboard_layout():
    text = format_bitboard(mask(Square.A1))
    lines = text.split("\n")
    assert lines[1] == f"Bitboard val: {mask(Square.A1)} "
    assert lines[2] == " 8 |" + " 0 " * 8
    assert lines[9] == " 1 |" + " 1 " + " 0 " * 7
    assert lines[10] == "     a  b  c  d  e  f  g  h"
    assert text.endswith("\n")


def test_print_bitboard_matches_format(capsys):
    bb = mask(Square.D5)
    print_bitboard(bb)
    assert capsys.readouterr().out == format_bitboard(bb)