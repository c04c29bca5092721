"""
Board model and terminal detection for 3x3 tic-tac-toe.

Boards are int8 numpy arrays holding Cell values. Line scanning, legal move
generation and forced-move detection run as numba kernels; the functions
without the ``_nb`` suffix are thin Python wrappers that return Python types.
"""

from enum import IntEnum

import numpy as np
from numba import njit

from tictactoe_mcts.exceptions import InvalidCoordinateError

BOARD_SIZE = 3

# Cell codes (plain ints so the numba kernels can freeze them as constants)
EMPTY = 0
X = 1
O = -1

# Result codes; terminal codes double as the signed game value for X
O_WINS = -1
DRAW = 0
X_WINS = 1
IN_PROGRESS = 2


class Cell(IntEnum):
    EMPTY = 0
    X = 1
    O = -1


class GameResult(IntEnum):
    O_WINS = -1
    DRAW = 0
    X_WINS = 1
    IN_PROGRESS = 2


_CELL_CHARS = {EMPTY: ' ', X: 'X', O: 'O'}
_CHAR_CELLS = {' ': EMPTY, '.': EMPTY, '-': EMPTY, 'X': X, 'x': X, 'O': O, 'o': O}


def _build_lines(n):
    """Rows, then columns, then the two diagonals as (row, col) triples."""
    lines = [[(i, j) for j in range(n)] for i in range(n)]
    lines += [[(i, j) for i in range(n)] for j in range(n)]
    lines.append([(i, i) for i in range(n)])
    lines.append([(n - 1 - i, i) for i in range(n)])
    return np.array(lines, dtype=np.int64)


LINES = _build_lines(BOARD_SIZE)


@njit(cache=True, nogil=True)
def _line_owner_nb(board, k):
    """Return the mark filling line k, or EMPTY if the line is not complete."""
    first = board[LINES[k, 0, 0], LINES[k, 0, 1]]
    if first == EMPTY:
        return EMPTY
    for m in range(1, LINES.shape[1]):
        if board[LINES[k, m, 0], LINES[k, m, 1]] != first:
            return EMPTY
    return first


@njit(cache=True, nogil=True)
def game_result_nb(board, anti):
    """
    Scan every line and return a result code.

    The first complete line decides the game. In the anti variant the player
    who completed it loses, so the sign is flipped.
    """
    for k in range(LINES.shape[0]):
        owner = _line_owner_nb(board, k)
        if owner != EMPTY:
            if anti:
                return -owner
            return owner
    for i in range(board.shape[0]):
        for j in range(board.shape[1]):
            if board[i, j] == EMPTY:
                return IN_PROGRESS
    return DRAW


@njit(cache=True, nogil=True)
def legal_moves_nb(board):
    """Empty cells as an (n, 2) array in row-major order."""
    moves = np.empty((board.shape[0] * board.shape[1], 2), np.int64)
    n = 0
    for i in range(board.shape[0]):
        for j in range(board.shape[1]):
            if board[i, j] == EMPTY:
                moves[n, 0] = i
                moves[n, 1] = j
                n += 1
    return moves[:n]


@njit(cache=True, nogil=True)
def _completing_cell_nb(board, player):
    """First empty cell that would complete a line for player, else (-1, -1)."""
    size = LINES.shape[1]
    for k in range(LINES.shape[0]):
        owned = 0
        er = -1
        ec = -1
        for m in range(size):
            r = LINES[k, m, 0]
            c = LINES[k, m, 1]
            v = board[r, c]
            if v == player:
                owned += 1
            elif v == EMPTY:
                er = r
                ec = c
        if owned == size - 1 and er != -1:
            return er, ec
    return -1, -1


@njit(cache=True, nogil=True)
def winning_or_blocking_move_nb(board, x_turn):
    """Winning cell for the mover, else a cell blocking the opponent, else (-1, -1)."""
    player = X if x_turn else O
    r, c = _completing_cell_nb(board, player)
    if r != -1:
        return r, c
    return _completing_cell_nb(board, -player)


def new_board():
    return np.zeros((BOARD_SIZE, BOARD_SIZE), np.int8)


def copy_board(board):
    return np.array(board, dtype=np.int8, copy=True)


def board_from_rows(rows):
    """
    Build a board from strings such as ``["XO ", " X ", "  O"]``.
    Spaces, '.' and '-' are empty cells.
    """
    if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
        raise ValueError(f"Expected {BOARD_SIZE} rows of {BOARD_SIZE} cells, got {rows!r}")
    board = new_board()
    for i, row in enumerate(rows):
        for j, ch in enumerate(row):
            if ch not in _CHAR_CELLS:
                raise ValueError(f"Unknown cell character {ch!r} at ({i}, {j})")
            board[i, j] = _CHAR_CELLS[ch]
    return board


def board_to_string(board):
    """Plain-text rendering with '|' separators and '-' rules between rows."""
    n = board.shape[0]
    lines = []
    for i in range(n):
        lines.append("   " + "|".join(_CELL_CHARS[int(v)] for v in board[i]))
        if i < n - 1:
            lines.append("   " + "-" * (2 * n - 1))
    return "\n".join(lines)


def legal_moves(board):
    """Every empty cell as (row, col), row-major."""
    return [(int(r), int(c)) for r, c in legal_moves_nb(board)]


def result(board, anti=False):
    return GameResult(int(game_result_nb(board, anti)))


def is_terminal(board):
    # A finished game is finished in both variants; anti only changes who won.
    return game_result_nb(board, False) != IN_PROGRESS


def winning_or_blocking_move(board, x_turn):
    """
    Cell that completes three in a row for the player to move, or failing
    that, the cell that stops the opponent from doing so. None if neither
    exists. Ties resolve to the first line in scan order.
    """
    r, c = winning_or_blocking_move_nb(board, x_turn)
    if r == -1:
        return None
    return int(r), int(c)


def win_possible(board):
    """True if some line is complete or one move away from completion."""
    size = LINES.shape[1]
    for line in LINES:
        values = [int(board[r, c]) for r, c in line]
        empties = values.count(EMPTY)
        for player in (X, O):
            owned = values.count(player)
            if owned == size or (owned == size - 1 and empties == 1):
                return True
    return False


def turn_from_board(board):
    """X moves whenever both players have placed the same number of marks."""
    return int(np.sum(board == X)) == int(np.sum(board == O))


def validate_move(board, row, col):
    n_rows, n_cols = board.shape
    if not (0 <= row < n_rows and 0 <= col < n_cols):
        raise InvalidCoordinateError(row, col, "outside the grid")
    if board[row, col] != EMPTY:
        raise InvalidCoordinateError(row, col, "cell already occupied")


def place(board, row, col, x_turn):
    """Put the mover's mark on (row, col). Mutates and returns board."""
    validate_move(board, row, col)
    board[row, col] = X if x_turn else O
    return board
