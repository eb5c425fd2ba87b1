"""Move encoding and the check analysis that restricts move targets.

Moves are 16-bit integers: 6 bits for the from square, 6 bits for the to
square and a 4-bit code (see ``MoveCode``).
"""

from dataclasses import dataclass
from enum import IntEnum
from functools import reduce
from operator import or_

from chateau.attacks import (
    FULL,
    bpawn_attacks,
    east_attacks,
    king_attacks,
    knight_attacks,
    no_east_attacks,
    no_west_attacks,
    north_attacks,
    so_east_attacks,
    so_west_attacks,
    south_attacks,
    west_attacks,
    wpawn_attacks,
)
from chateau.utils import Colour, Piece


class MoveCode(IntEnum):
    """The 4-bit code of an encoded move."""

    QUIET = 0
    DOUBLE_PAWN_PUSH = 1
    KING_CASTLE = 2
    QUEEN_CASTLE = 3
    CAPTURE = 4
    EP_CAPTURE = 5
    KNIGHT_PROMOTION = 8
    BISHOP_PROMOTION = 9
    ROOK_PROMOTION = 10
    QUEEN_PROMOTION = 11
    KNIGHT_PROMOTION_CAPTURE = 12
    BISHOP_PROMOTION_CAPTURE = 13
    ROOK_PROMOTION_CAPTURE = 14
    QUEEN_PROMOTION_CAPTURE = 15

    @property
    def is_promotion(self):
        return bool(self & 8)

    @property
    def is_capture(self):
        return bool(self & 4)


# (opponent slider fill, fill from the king in the opposite direction)
_ORTHOGONAL_PAIRS = (
    (south_attacks, north_attacks),
    (north_attacks, south_attacks),
    (east_attacks, west_attacks),
    (west_attacks, east_attacks),
)
_DIAGONAL_PAIRS = (
    (so_east_attacks, no_west_attacks),
    (so_west_attacks, no_east_attacks),
    (no_west_attacks, so_east_attacks),
    (no_east_attacks, so_west_attacks),
)


@dataclass(frozen=True)
class CheckInfo:
    """Attack and check masks for the side to move."""

    king: int
    opponent_attacks: int
    king_orthogonal_rays: int
    king_diagonal_rays: int
    in_between: int
    blocks: int
    checkers: int
    check_to: int
    target_mask: int

    @property
    def in_check(self):
        return bool(self.opponent_attacks & self.king)

    @property
    def double_check(self):
        return bool(self.checkers & (self.checkers - 1))


def _ray_scan(pairs, sliders, king, empty):
    x_ray_empty = empty ^ king
    attacks = rays = in_between = 0
    for slider_fill, king_fill in pairs:
        slider_attacks = slider_fill(sliders, x_ray_empty)
        king_rays = king_fill(king, empty)
        attacks |= slider_attacks
        rays |= king_rays
        in_between |= slider_attacks & king_rays
    return attacks, rays, in_between


def analyse_checks(board):
    """Compute the opponent's attacks and the squares moves may target."""
    black_to_move = board.side_to_move == Colour.BLACK
    own_base = Piece.BLACK_PAWN if black_to_move else Piece.WHITE_PAWN
    opp_base = Piece.WHITE_PAWN if black_to_move else Piece.BLACK_PAWN

    own = board.bitboards[own_base : own_base + 6]
    (opp_pawns, opp_knights, opp_bishops,
     opp_rooks, opp_queens, opp_king) = board.bitboards[opp_base : opp_base + 6]
    king = own[5]
    friendly = reduce(or_, own)
    empty = ~board.bitboards[Piece.ALL_PIECES] & FULL

    orth_sliders = opp_rooks | opp_queens
    diag_sliders = opp_bishops | opp_queens

    orth_attacks, orth_rays, orth_between = _ray_scan(
        _ORTHOGONAL_PAIRS, orth_sliders, king, empty
    )
    diag_attacks, diag_rays, diag_between = _ray_scan(
        _DIAGONAL_PAIRS, diag_sliders, king, empty
    )

    pawn_fill = bpawn_attacks if board.side_to_move == Colour.WHITE else wpawn_attacks
    opponent_attacks = (
        orth_attacks
        | diag_attacks
        | knight_attacks(opp_knights)
        | pawn_fill(opp_pawns)
        | king_attacks(opp_king)
    )

    in_between = orth_between | diag_between
    blocks = in_between & empty
    checkers = (
        (orth_rays & orth_sliders)
        | (diag_rays & diag_sliders)
        | (knight_attacks(opp_knights) & opp_knights)
        | pawn_fill(opp_pawns)
    )

    unless_in_check = 0 if opponent_attacks & king else FULL
    unless_double_check = 0 if checkers & (checkers - 1) else FULL

    check_to = checkers | blocks | unless_in_check
    target_mask = ~friendly & check_to & unless_double_check & FULL

    return CheckInfo(
        king=king,
        opponent_attacks=opponent_attacks,
        king_orthogonal_rays=orth_rays,
        king_diagonal_rays=diag_rays,
        in_between=in_between,
        blocks=blocks,
        checkers=checkers,
        check_to=check_to,
        target_mask=target_mask,
    )


def generate_moves(board):
    """Return the encoded moves for the side to move.

    The position is analysed for checks and pins; no piece moves are emitted
    from that analysis, so the returned list is empty.
    """
    analyse_checks(board)
    moves = []
    return moves