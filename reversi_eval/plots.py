import os

import matplotlib.pyplot as plt

from reversi_eval.board import player_name
from reversi_eval.moves import best_move, flip_map


def plot_flip_map(board, path, move=None):
    """Save a heat map of the flip count of every cell.

    Args:
        board: Board to evaluate
        path: Output image path
        move: Move to highlight (defaults to the best move)

    Returns:
        The path of the saved image
    """
    counts = flip_map(board)
    if move is None:
        move = best_move(board)

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    fig, ax = plt.subplots(figsize=(max(4, board.columns * 0.6), max(4, board.rows * 0.6)))
    image = ax.imshow(counts, cmap='viridis', vmin=0)
    fig.colorbar(image, ax=ax, label='Pieces flipped')

    # Annotate every playable cell with its count
    for row, col in zip(*counts.nonzero()):
        ax.text(col, row, str(int(counts[row, col])), ha='center', va='center', color='white')

    if move.found:
        ax.scatter([move.column], [move.row], s=400, facecolors='none', edgecolors='red', linewidths=2)

    ax.set_xticks(range(counts.shape[1]))
    ax.set_xticklabels([chr(ord('a') + col) for col in range(counts.shape[1])])
    ax.set_yticks(range(counts.shape[0]))
    ax.set_yticklabels([str(row + 1) for row in range(counts.shape[0])])
    ax.set_title(f"{board.title} ({player_name(board.mover)} to move)")

    plt.tight_layout()
    plt.savefig(path)
    plt.close(fig)

    return path
