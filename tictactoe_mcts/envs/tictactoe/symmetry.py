"""
D4 symmetry group for square boards.

The D4 group consists of 8 elements: E (identity), R (90° CCW rotation),
R2 (180° rotation), R3 (270° CCW rotation), SV (vertical reflection),
SH (horizontal reflection), SD (main diagonal reflection),
SA (anti-diagonal reflection).

Two boards are equivalent when one is the image of the other under some
element. MCTS expansion uses this to drop children that repeat an earlier
sibling up to rotation or reflection.
"""

import numpy as np
from numba import njit

# D4 element codes (fixed enumeration)
E, R, R2, R3, SV, SH, SD, SA = 0, 1, 2, 3, 4, 5, 6, 7
D4_ELEMENTS = (E, R, R2, R3, SV, SH, SD, SA)


@njit(cache=True, nogil=True)
def _map_coord(i, j, elem, row_count, col_count):
    """
    Map coordinates (i, j) under a D4 element 'elem' on an (row_count x col_count) grid.
    For non-square grids, only {E, R2, SV, SH} are meaningful; we never call others there.
    """
    if elem == E:   # identity
        return i, j
    elif elem == R:  # rotate 90° CCW
        return j, col_count - 1 - i
    elif elem == R2:  # rotate 180°
        return row_count - 1 - i, col_count - 1 - j
    elif elem == R3:  # rotate 270° CCW (90° CW)
        return row_count - 1 - j, i
    elif elem == SV:  # left-right flip
        return i, col_count - 1 - j
    elif elem == SH:  # up-down flip
        return row_count - 1 - i, j
    elif elem == SD:  # main diagonal
        return j, i
    elif elem == SA:  # anti-diagonal
        return col_count - 1 - j, row_count - 1 - i
    else:
        return i, j


@njit(cache=True, nogil=True)
def _element_maps_board(elem, a, b):
    """True iff b[elem(i, j)] == a[i, j] for every cell."""
    m, n = a.shape
    for i in range(m):
        for j in range(n):
            ii, jj = _map_coord(i, j, elem, m, n)
            if a[i, j] != b[ii, jj]:
                return False
    return True


@njit(cache=True, nogil=True)
def boards_equivalent_nb(a, b):
    m, n = a.shape
    if b.shape[0] != m or b.shape[1] != n:
        return False
    square = (m == n)
    for elem in range(8):
        if not square and (elem == R or elem == R3 or elem == SD or elem == SA):
            continue
        if _element_maps_board(elem, a, b):
            return True
    return False


@njit(cache=True, nogil=True)
def transform_board_nb(board, elem):
    m, n = board.shape
    out = np.empty_like(board)
    for i in range(m):
        for j in range(n):
            ii, jj = _map_coord(i, j, elem, m, n)
            out[ii, jj] = board[i, j]
    return out


def apply_element_to_move(move, elem, n):
    """Image of a (row, col) move under a D4 element on an n x n board."""
    r, c = _map_coord(move[0], move[1], elem, n, n)
    return int(r), int(c)


def transform_board(board, elem):
    if elem not in D4_ELEMENTS:
        raise ValueError(f"Unknown D4 element: {elem}")
    return transform_board_nb(board, elem)


def boards_equivalent(a, b):
    """True if b equals a under one of the 8 rotations/reflections of the square."""
    return bool(boards_equivalent_nb(a, b))


def equivalence_class(board):
    """Distinct images of board under D4. Its size always divides 8."""
    images = []
    for elem in D4_ELEMENTS:
        image = transform_board_nb(board, elem)
        if not any(np.array_equal(image, seen) for seen in images):
            images.append(image)
    return images


def dedupe_equivalent(boards):
    """
    Indices of the boards to keep: a board survives only if it is not
    equivalent to a board kept before it, so each class keeps its first member.
    """
    kept = []
    for idx, board in enumerate(boards):
        if not any(boards_equivalent_nb(boards[k], board) for k in kept):
            kept.append(idx)
    return kept
