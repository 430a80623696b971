import argparse
import io
import os
import sys

from tqdm import tqdm

from reversi_eval.board import MAX_DIMENSION, ReversiBoard
from reversi_eval.moves import best_move, legal_moves
from reversi_eval.plots import plot_flip_map
from reversi_eval.text_format import (
    SEPARATOR, BoardFormatError, format_board, format_report, read_boards, write_board
)


def evaluate_board(board, out=None, list_moves=False, plot_dir=None, index=0):
    """Print one board and the best move for the player to move."""
    if out is None:
        out = sys.stdout
    move = best_move(board)

    out.write(format_board(board))
    out.write("\n")
    out.write(format_report(board, move) + "\n")
    if list_moves:
        moves = legal_moves(board)
        labels = ", ".join(f"{m.label}:{m.flips}" for m in moves)
        out.write(f"Legal moves: {labels if moves else 'none'}\n")
    out.write("\n")

    if plot_dir is not None:
        path = plot_flip_map(board, os.path.join(plot_dir, f"board_{index:03d}.png"), move)
        out.write(f"Saved flip map to {path}\n")

    return move


def evaluate_stream(stream, out=None, max_dimension=MAX_DIMENSION,
                    progress=False, list_moves=False, plot_dir=None):
    """Evaluate every board in the stream until it is exhausted.

    Args:
        stream: Text stream holding boards in the saved-position format
        out: Stream the boards and reports are written to (default: stdout)
        max_dimension: Exclusive upper bound for board columns and rows
        progress: Show a tqdm progress bar on stderr
        list_moves: Also print every legal move with its flip count
        plot_dir: Directory to save a flip-count heat map per board

    Returns:
        List of (board, move) pairs in input order
    """
    if out is None:
        out = sys.stdout
    results = []
    boards = read_boards(stream, max_dimension)
    if progress:
        boards = tqdm(boards, desc="Boards", unit="board", file=sys.stderr)

    try:
        for index, board in enumerate(boards):
            move = evaluate_board(board, out, list_moves, plot_dir, index)
            results.append((board, move))
            out.write(SEPARATOR + "\n")
            out.write("\n")
    except BoardFormatError as e:
        out.write(f"Stopped reading input: {e}\n")

    out.write("\n*** END OF PROCESSING ***\n\n")
    return results


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Find the move that flips the most pieces for each Reversi board")
    parser.add_argument("--input", type=str, default=None,
                        help="File with boards to evaluate (default: standard input)")
    parser.add_argument("--max-size", type=int, default=MAX_DIMENSION,
                        help=f"Exclusive upper bound for board columns and rows (default: {MAX_DIMENSION})")
    parser.add_argument("--progress", action="store_true",
                        help="Show a progress bar while evaluating")
    parser.add_argument("--list-moves", action="store_true",
                        help="Print every legal move with its flip count")
    parser.add_argument("--plot-dir", type=str, default=None,
                        help="Save a flip-count heat map for each board in this directory")
    parser.add_argument("--demo", action="store_true",
                        help="Evaluate the standard 8x8 opening instead of reading input")
    args = parser.parse_args(argv)

    if args.max_size < 2:
        parser.error("--max-size must be at least 2")

    options = dict(max_dimension=args.max_size, progress=args.progress,
                   list_moves=args.list_moves, plot_dir=args.plot_dir)

    try:
        if args.demo:
            stream = io.StringIO(write_board(ReversiBoard.standard()))
            evaluate_stream(stream, **options)
        elif args.input:
            if not os.path.exists(args.input):
                print(f"Input file not found: {args.input}")
                return 1
            with open(args.input) as f:
                evaluate_stream(f, **options)
        else:
            evaluate_stream(sys.stdin, **options)
    except KeyboardInterrupt:
        print("\nInterrupted. Exiting.")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
