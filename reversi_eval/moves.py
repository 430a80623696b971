"""Move evaluation: candidate cells, flip counting and the best-move search.

Nothing in this module mutates a board. A hypothetical placement is never
written to the grid; the directional scan starts one step away from the
origin and therefore treats the origin as already holding the mover's piece.
"""
from typing import NamedTuple

import numpy as np

from reversi_eval.board import EMPTY, opponent


DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1)
)


class Move(NamedTuple):
    """Result of the search: 0-based grid position and number of flips."""
    row: int
    column: int
    flips: int

    @property
    def found(self):
        """False for the NO_MOVE sentinel."""
        return self.flips > 0 and self.row >= 0 and self.column >= 0

    @property
    def label(self):
        """Move in "d3" notation (column letter, 1-based row)."""
        if not self.found:
            return None
        return f"{chr(ord('a') + self.column)}{self.row + 1}"


NO_MOVE = Move(-1, -1, 0)


def _check_coordinates(board, row, col):
    if not board.in_bounds(row, col):
        raise IndexError(
            f"Cell ({row}, {col}) is outside a {board.rows}x{board.columns} board")


def can_play_at(board, row, col):
    """Check if the mover could possibly play at (row, col).

    The cell must be empty and have at least one opponent piece among its
    neighbours. This does not guarantee that anything is flipped; use
    flip_count() for that.
    """
    if not board.is_valid():
        return False
    _check_coordinates(board, row, col)

    if board.board[row, col] != EMPTY:
        return False

    enemy = opponent(board.mover)
    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        if board.in_bounds(r, c) and board.board[r, c] == enemy:
            return True

    return False


def count_flips_in_direction(board, row, col, d_row, d_col):
    """Count opponent pieces flipped from (row, col) toward (d_row, d_col).

    Args:
        board: Board to scan
        row: Origin row, holding (or about to hold) the mover's piece
        col: Origin column
        d_row: Row step, -1 (up), 0 or 1 (down)
        d_col: Column step, -1 (left), 0 or 1 (right)

    Returns:
        Length of the run of opponent pieces closed by a mover piece, or 0
        if the run reaches an empty cell or the edge of the board first.
    """
    if (d_row, d_col) not in DIRECTIONS:
        raise ValueError(f"Invalid direction: ({d_row}, {d_col})")
    if not board.is_valid():
        return 0
    _check_coordinates(board, row, col)

    player = board.mover
    enemy = opponent(player)
    count = 0
    r, c = row + d_row, col + d_col

    while board.in_bounds(r, c):
        cell = board.board[r, c]
        if cell == player:
            return count
        if cell != enemy:
            break
        count += 1
        r += d_row
        c += d_col

    # Ran off the board or hit an empty cell
    return 0


def flip_count(board, row, col):
    """Total number of opponent pieces flipped by the mover playing at (row, col)."""
    if not board.is_valid():
        return 0
    _check_coordinates(board, row, col)

    if board.board[row, col] != EMPTY:
        return 0

    return sum(count_flips_in_direction(board, row, col, dr, dc)
               for dr, dc in DIRECTIONS)


def best_move(board):
    """Find the move flipping the most opponent pieces.

    Cells are scanned in row-major order and only a strictly greater count
    replaces the current best, so the first cell reaching the maximum wins.
    Returns NO_MOVE when the board is invalid or no move flips anything.
    """
    if not board.is_valid():
        return NO_MOVE

    best = NO_MOVE
    for row in range(board.rows):
        for col in range(board.columns):
            if not can_play_at(board, row, col):
                continue
            flips = flip_count(board, row, col)
            if flips > best.flips:
                best = Move(row, col, flips)

    return best


def legal_moves(board):
    """Return every move that flips at least one piece, in row-major order."""
    moves = []
    if not board.is_valid():
        return moves

    for row in range(board.rows):
        for col in range(board.columns):
            if can_play_at(board, row, col):
                flips = flip_count(board, row, col)
                if flips > 0:
                    moves.append(Move(row, col, flips))

    return moves


def flip_map(board):
    """Return an array with the flip count of every cell (0 where unplayable)."""
    if not board.is_valid():
        return np.zeros(board.board.shape, dtype=np.int32)

    counts = np.zeros((board.rows, board.columns), dtype=np.int32)
    for move in legal_moves(board):
        counts[move.row, move.column] = move.flips

    return counts
