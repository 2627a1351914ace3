from __future__ import annotations

import numpy as np

from colorgrid import CellKind, ColorGrid, Direction, PlacedBlock, Tetromino, TetrominoType


def test_hint_on_empty_grid_reaches_the_floor() -> None:
    grid = ColorGrid()
    assert grid.hint() == PlacedBlock(Tetromino.default(), 5, 18)


def test_hint_stops_on_the_stack() -> None:
    grid = ColorGrid()
    grid.board.lock_cells([(6, 10)], (1, 1, 1))
    assert grid.hint().position == (5, 8)


def test_hint_of_stuck_block_is_the_block_itself() -> None:
    grid = ColorGrid()
    grid.board.lock_cells([(5, 1)], (1, 1, 1))
    assert grid.hint() == grid.block


def test_hint_does_not_mutate_state() -> None:
    grid = ColorGrid()
    grid.board.lock_cells([(x, 19) for x in range(9)], (2, 2, 2))
    grid.mark_warning(9, 19)
    kinds = grid.board.kinds.copy()
    colors = grid.board.colors.copy()
    active = grid.block

    first = grid.hint()
    second = grid.hint()

    assert first == second
    assert grid.block is active
    assert np.array_equal(grid.board.kinds, kinds)
    assert list(grid.board.colors.ravel()) == list(colors.ravel())


def test_hint_matches_hard_drop() -> None:
    grid = ColorGrid()
    grid.insert(Tetromino(TetrominoType.L))
    grid.rotate()
    grid.handle_horizontal(Direction.RIGHT)
    ghost = grid.hint()
    grid.on_down(hard_drop=True)
    assert grid.block == ghost


def test_renew_resets_board_and_spawns_default_block() -> None:
    grid = ColorGrid()
    grid.insert(Tetromino(TetrominoType.I))
    grid.on_down(hard_drop=True)
    grid.mark_warning(0, 0)

    grid.renew()

    assert grid.board.occupied_count() == 0
    assert not np.any(grid.board.kinds != CellKind.BACKGROUND)
    assert grid.block == PlacedBlock(Tetromino.default(), 5, 0)


def test_renew_twice_gives_the_same_state() -> None:
    grid = ColorGrid()
    for _ in range(3):
        grid.on_down(hard_drop=True)
        grid.insert(Tetromino(TetrominoType.O))
    grid.renew()
    rows = [grid[y] for y in range(grid.height)]
    block = grid.block

    grid.renew()

    assert [grid[y] for y in range(grid.height)] == rows
    assert grid.block == block


def test_renew_uses_configured_default_block() -> None:
    grid = ColorGrid(default_block=Tetromino(TetrominoType.I))
    grid.on_down(hard_drop=True)
    grid.renew()
    assert grid.block.block == Tetromino(TetrominoType.I)
    assert grid.block.position == (5, 0)
