"""Attack sets: Kogge-Stone fills for sliders and shifts for the rest."""

FULL = 0xFFFFFFFFFFFFFFFF
A_FILE = 0x0101010101010101
H_FILE = 0x8080808080808080
NOT_A_FILE = ~A_FILE & FULL
NOT_H_FILE = ~H_FILE & FULL


def _shl(bb, n):
    return (bb << n) & FULL


def south_attacks(rooks, empty):
    """Squares attacked southwards by ``rooks`` through ``empty``."""
    rooks &= FULL
    empty &= FULL
    rooks |= empty & (rooks >> 8)
    empty &= empty >> 8
    rooks |= empty & (rooks >> 16)
    empty &= empty >> 16
    rooks |= empty & (rooks >> 32)
    return rooks >> 8


def north_attacks(rooks, empty):
    """Squares attacked northwards by ``rooks`` through ``empty``."""
    rooks &= FULL
    empty &= FULL
    rooks |= empty & _shl(rooks, 8)
    empty &= _shl(empty, 8)
    rooks |= empty & _shl(rooks, 16)
    empty &= _shl(empty, 16)
    rooks |= empty & _shl(rooks, 32)
    return _shl(rooks, 8)


def east_attacks(rooks, empty):
    """Squares attacked eastwards by ``rooks`` through ``empty``."""
    rooks &= FULL
    empty &= NOT_A_FILE
    rooks |= empty & _shl(rooks, 1)
    empty &= _shl(empty, 1)
    rooks |= empty & _shl(rooks, 2)
    empty &= _shl(empty, 2)
    rooks |= empty & _shl(rooks, 4)
    return _shl(rooks, 1) & NOT_A_FILE


def west_attacks(rooks, empty):
    """Squares attacked westwards by ``rooks`` through ``empty``."""
    rooks &= FULL
    empty &= NOT_H_FILE
    rooks |= empty & (rooks >> 1)
    empty &= empty >> 1
    rooks |= empty & (rooks >> 2)
    empty &= empty >> 2
    rooks |= empty & (rooks >> 4)
    return (rooks >> 1) & NOT_H_FILE


def no_east_attacks(bishops, empty):
    """Squares attacked towards the north-east by ``bishops``."""
    bishops &= FULL
    empty &= NOT_A_FILE
    bishops |= empty & _shl(bishops, 9)
    empty &= _shl(empty, 9)
    bishops |= empty & _shl(bishops, 18)
    empty &= _shl(empty, 18)
    bishops |= empty & _shl(bishops, 36)
    return _shl(bishops, 9) & NOT_A_FILE


def no_west_attacks(bishops, empty):
    """Squares attacked towards the north-west by ``bishops``."""
    bishops &= FULL
    empty &= NOT_H_FILE
    bishops |= empty & _shl(bishops, 7)
    empty &= _shl(empty, 7)
    bishops |= empty & _shl(bishops, 14)
    empty &= _shl(empty, 14)
    bishops |= empty & _shl(bishops, 28)
    return _shl(bishops, 7) & NOT_H_FILE


def so_east_attacks(bishops, empty):
    """Squares attacked towards the south-east by ``bishops``."""
    bishops &= FULL
    empty &= NOT_A_FILE
    bishops |= empty & (bishops >> 7)
    empty &= empty >> 7
    bishops |= empty & (bishops >> 14)
    empty &= empty >> 14
    bishops |= empty & (bishops >> 28)
    return (bishops >> 7) & NOT_A_FILE


def so_west_attacks(bishops, empty):
    """Squares attacked towards the south-west by ``bishops``."""
    bishops &= FULL
    empty &= NOT_H_FILE
    bishops |= empty & (bishops >> 9)
    empty &= empty >> 9
    bishops |= empty & (bishops >> 18)
    empty &= empty >> 18
    bishops |= empty & (bishops >> 36)
    return (bishops >> 9) & NOT_H_FILE


def knight_attacks(knights):
    """Squares attacked by ``knights``."""
    knights &= FULL
    l1 = (knights >> 1) & 0x7F7F7F7F7F7F7F7F
    l2 = (knights >> 2) & 0x3F3F3F3F3F3F3F3F
    r1 = _shl(knights, 1) & 0xFEFEFEFEFEFEFEFE
    r2 = _shl(knights, 2) & 0xFCFCFCFCFCFCFCFC
    h1 = l1 | r1
    h2 = l2 | r2
    return _shl(h1, 16) | (h1 >> 16) | _shl(h2, 8) | (h2 >> 8)


def wpawn_attacks(pawns):
    """Squares attacked by white ``pawns``."""
    pawns &= FULL
    return (_shl(pawns, 9) & NOT_A_FILE) | (_shl(pawns, 7) & NOT_H_FILE)


def bpawn_attacks(pawns):
    """Squares attacked by black ``pawns``."""
    pawns &= FULL
    return ((pawns >> 9) & NOT_H_FILE) | ((pawns >> 7) & NOT_A_FILE)


def king_attacks(king):
    """Squares attacked by ``king``."""
    king &= FULL
    attacks = ((king >> 1) & NOT_H_FILE) | (_shl(king, 1) & NOT_A_FILE)
    king |= attacks
    attacks |= (king >> 8) | _shl(king, 8)
    return attacks