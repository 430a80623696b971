"""Reading and printing boards in the saved-position text format.

A board is stored as a block of lines:

    Title of the position
    8 8 B
    <8 grid lines, 'B' black, 'W' white, anything else empty>
    <blank line>

The second line holds the number of columns, the number of rows and the
player to move ('W' for white, anything else for black).
"""
from reversi_eval.board import (
    BLACK, EMPTY, MAX_DIMENSION, WHITE, ReversiBoard, player_name
)


CELL_FROM_CHAR = {'B': BLACK, 'W': WHITE}
CHAR_FROM_CELL = {BLACK: 'B', WHITE: 'W', EMPTY: ' '}

SEPARATOR = "=" * 80


class BoardFormatError(ValueError):
    """Raised when a board block in the input cannot be parsed."""


def parse_header(line):
    """Parse the "<columns> <rows> <player>" line."""
    parts = line.split()
    if len(parts) < 2:
        raise BoardFormatError(f"Expected '<columns> <rows> <player>', got {line.strip()!r}")

    try:
        columns, rows = int(parts[0]), int(parts[1])
    except ValueError:
        raise BoardFormatError(f"Board dimensions must be integers, got {line.strip()!r}")

    mover = WHITE if len(parts) > 2 and parts[2][0] == 'W' else BLACK
    return columns, rows, mover


def parse_grid_row(line, columns):
    """Convert one grid line to a list of cell values, padding short lines with empty cells."""
    line = line.rstrip('\n')
    return [CELL_FROM_CHAR.get(line[col], EMPTY) if col < len(line) else EMPTY
            for col in range(columns)]


def read_board(stream, max_dimension=MAX_DIMENSION):
    """Read the next board from a text stream.

    Returns:
        The board, or None if the stream holds no further board
    """
    title = stream.readline()
    if not title:
        return None
    header = stream.readline()
    # Trailing blank lines after the last board end the input
    if not header.strip():
        return None

    columns, rows, mover = parse_header(header)
    if not (0 < columns < max_dimension and 0 < rows < max_dimension):
        raise BoardFormatError(
            f"Board size {columns}x{rows} must be between 1 and {max_dimension - 1}")

    cells = []
    for _ in range(rows):
        line = stream.readline()
        if not line:
            raise BoardFormatError(f"Expected {rows} rows, got {len(cells)}")
        cells.append(parse_grid_row(line, columns))

    # Discard the terminating blank line
    stream.readline()

    board = ReversiBoard(columns, rows, mover=mover, cells=cells,
                         title=title.rstrip('\n'), max_dimension=max_dimension)
    if not board.is_valid():
        raise BoardFormatError(f"Invalid board: {board.title!r}")
    return board


def read_boards(stream, max_dimension=MAX_DIMENSION):
    """Yield boards from the stream until it is exhausted."""
    while True:
        board = read_board(stream, max_dimension)
        if board is None:
            return
        yield board


def board_from_lines(lines, mover=BLACK, title="", max_dimension=MAX_DIMENSION):
    """Build a board from grid lines such as [" BW ", "WB  "]."""
    columns = max((len(line) for line in lines), default=0)
    cells = [parse_grid_row(line, columns) for line in lines]
    return ReversiBoard(columns, len(lines), mover=mover, cells=cells,
                        title=title, max_dimension=max_dimension)


def write_board(board):
    """Serialize a board back to the saved-position format."""
    lines = [board.title, f"{board.columns} {board.rows} {'W' if board.mover == WHITE else 'B'}"]
    for row in board.board:
        lines.append(''.join(CHAR_FROM_CELL.get(int(cell), ' ') for cell in row))
    return '\n'.join(lines) + '\n\n'


def _column_names(columns):
    return "   " + "".join(f"{chr(ord('a') + col)} " for col in range(columns)) + "  \n"


def _row_separator(columns):
    return "  +" + "-+" * columns + "\n"


def format_board(board):
    """Render the board with column letters and row numbers on every side."""
    if not board.is_valid():
        return ""

    parts = [f"{board.title}\n\n", _column_names(board.columns), _row_separator(board.columns)]
    for row in range(board.rows):
        cells = "".join(f"{CHAR_FROM_CELL.get(int(cell), ' ')}|" for cell in board.board[row])
        parts.append(f"{row + 1:2d}|{cells}{row + 1:<2d}\n")
        parts.append(_row_separator(board.columns))
    parts.append(_column_names(board.columns))

    return "".join(parts)


def format_report(board, move):
    """Describe the search result for the player to move."""
    name = player_name(board.mover)
    if not move.found:
        return f"There is no beneficial move for {name}"
    return (f"The best move for {name} is ({chr(ord('a') + move.column)}, {move.row + 1}), "
            f"which will reverse {move.flips} opponent piece(s)")
