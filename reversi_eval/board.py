import numpy as np

# Board representation:
# 0: Empty, 1: Black, -1: White
EMPTY = 0
BLACK = 1
WHITE = -1

# Columns are labelled with single lowercase letters in the text format,
# so both dimensions must stay strictly below this bound by default.
MAX_DIMENSION = 26


def opponent(player):
    """Return the other player."""
    return -player


def player_name(player):
    """Return the display name used in reports."""
    return "WHITE" if player == WHITE else "BLACK"


class ReversiBoard:
    """Reversi position to evaluate: grid, dimensions and player to move."""

    def __init__(self, columns, rows, mover=BLACK, cells=None, title="",
                 max_dimension=MAX_DIMENSION):
        """Initialize a board.

        Args:
            columns: Number of columns
            rows: Number of rows
            mover: Player to move (BLACK or WHITE)
            cells: Optional grid of cell values, shape (rows, columns)
            title: Display label, not used by any evaluation
            max_dimension: Exclusive upper bound for columns and rows
        """
        self.columns = columns
        self.rows = rows
        self.mover = mover
        self.title = title
        self.max_dimension = max_dimension

        if cells is None:
            shape = (max(rows, 0), max(columns, 0))
            self.board = np.zeros(shape, dtype=np.int8)
        else:
            self.board = np.array(cells, dtype=np.int8)

    @classmethod
    def standard(cls, size=8, mover=BLACK, title="Standard opening"):
        """Create a square board with the standard starting position."""
        board = cls(size, size, mover=mover, title=title)

        center = size // 2
        board.board[center-1, center-1] = WHITE
        board.board[center, center] = WHITE
        board.board[center-1, center] = BLACK
        board.board[center, center-1] = BLACK

        return board

    def is_valid(self):
        """Check the structural invariants of the board."""
        if not (0 < self.columns < self.max_dimension):
            return False
        if not (0 < self.rows < self.max_dimension):
            return False
        if self.mover not in (BLACK, WHITE):
            return False
        return self.board.shape == (self.rows, self.columns)

    def in_bounds(self, row, col):
        """Check if (row, col) lies on the board."""
        return 0 <= row < self.rows and 0 <= col < self.columns

    def get_state(self):
        """Return a copy of the grid."""
        return self.board.copy()

    def count_pieces(self):
        """Count pieces for both players."""
        black_count = int(np.sum(self.board == BLACK))
        white_count = int(np.sum(self.board == WHITE))
        return black_count, white_count

    def copy(self):
        """Return an independent copy of the board."""
        return ReversiBoard(self.columns, self.rows, mover=self.mover,
                            cells=self.board.copy(), title=self.title,
                            max_dimension=self.max_dimension)

    def __str__(self):
        """String representation of the board."""
        symbols = {EMPTY: '.', BLACK: 'B', WHITE: 'W'}
        result = []

        # Column labels
        result.append('  ' + ' '.join(chr(ord('a') + i) for i in range(self.board.shape[1])))

        for i in range(self.board.shape[0]):
            row = [str(i + 1)]  # Row label
            for j in range(self.board.shape[1]):
                row.append(symbols.get(int(self.board[i, j]), '?'))
            result.append(' '.join(row))

        return '\n'.join(result)


def is_valid(board):
    """Return True if the board satisfies its structural invariants."""
    return board.is_valid()
