from __future__ import annotations

import logging
import random

from colorgrid import ColorGrid, Tetromino, render_colors, render_text
from colorgrid.__main__ import main, play


def test_render_text_overlays_active_block_and_ghost() -> None:
    grid = ColorGrid(10, 20)
    grid.board.lock_cells([(0, 19)], (1, 1, 1))
    grid.mark_warning(9, 10)

    lines = render_text(grid).splitlines()

    assert len(lines) == 20
    assert all(len(line) == 10 for line in lines)
    assert lines[0] == ".....@@@.."
    assert lines[1] == "......@..."
    assert lines[10] == ".........!"
    assert lines[18] == ".....+++.."
    assert lines[19] == "#.....+..."


def test_render_without_ghost() -> None:
    grid = ColorGrid(10, 20)
    lines = render_text(grid, ghost=False).splitlines()
    assert lines[18] == ".........."


def test_render_colors_leaves_grid_untouched() -> None:
    grid = ColorGrid(10, 20)
    before = [grid[y] for y in range(grid.height)]

    frame = render_colors(grid)

    color = Tetromino.default().color
    assert frame[0][5] == color
    assert frame[1][6] == color
    assert frame[19][6] == grid.palette.warning
    assert frame[10][0] == grid.palette.checker(0, 10)
    assert [grid[y] for y in range(grid.height)] == before
    assert grid.board.occupied_count() == 0


def test_play_stops_on_game_over(caplog) -> None:
    grid = ColorGrid(4, 4)
    with caplog.at_level(logging.INFO, logger="colorgrid.__main__"):
        cleared = play(grid, 200, random.Random(3))
    assert cleared >= 0
    assert any("Game over" in message for message in caplog.messages)


def test_main_prints_final_frame(capsys, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="colorgrid.__main__"):
        main(["--width", "8", "--height", "12", "--pieces", "5", "--seed", "7"])
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 12
    assert all(len(line) == 8 for line in out)
    assert any("in total" in message for message in caplog.messages)
