import matplotlib
matplotlib.use("Agg")

from reversi_eval.board import ReversiBoard
from reversi_eval.moves import NO_MOVE
from reversi_eval.plots import plot_flip_map
from reversi_eval.text_format import board_from_lines


def test_plot_flip_map(tmp_path):
    board = ReversiBoard.standard(8)
    path = plot_flip_map(board, str(tmp_path / "maps" / "opening.png"))

    assert path.endswith("opening.png")
    assert (tmp_path / "maps" / "opening.png").stat().st_size > 0


def test_plot_board_without_moves(tmp_path):
    board = board_from_lines(["BBB", "B B", "BBB"], title="Blocked")
    path = plot_flip_map(board, str(tmp_path / "blocked.png"), NO_MOVE)

    assert (tmp_path / "blocked.png").exists()
    assert path == str(tmp_path / "blocked.png")
