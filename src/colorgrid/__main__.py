"""Simple ASCII demo for the grid engine.

Run with: `python -m colorgrid`

Random tetrominoes are rotated, shifted and hard dropped until the grid fills
up or the requested number of pieces has been played.  The final frame is
printed together with the number of cleared rows.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence

from .block import Direction, Tetromino, TetrominoType
from .board import HEIGHT, WIDTH
from .grid import ColorGrid, SpawnError
from .utils import render_text


LOGGER = logging.getLogger(__name__)


def play(grid: ColorGrid, pieces: int, rng: random.Random) -> int:
    """Drop up to ``pieces`` random blocks into ``grid``.

    Returns the total number of cleared rows.
    """

    cleared = 0
    for index in range(pieces):
        for _ in range(rng.randrange(4)):
            grid.rotate()
        direction = rng.choice((Direction.LEFT, Direction.RIGHT))
        for _ in range(rng.randrange(grid.width // 2 + 1)):
            grid.handle_horizontal(direction)

        result = grid.on_down(hard_drop=True)
        if result.game_over:
            LOGGER.info("Game over after %d piece(s)", index)
            break
        cleared += result.cleared_rows
        if result.cleared_rows:
            LOGGER.info("Piece %d cleared %d row(s)", index + 1, result.cleared_rows)

        try:
            grid.insert(Tetromino(rng.choice(list(TetrominoType))))
        except SpawnError:
            LOGGER.info("Game over: no room for piece %d", index + 2)
            break
    return cleared


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--width", type=int, default=WIDTH, help="Grid width in cells.")
    parser.add_argument("--height", type=int, default=HEIGHT, help="Grid height in cells.")
    parser.add_argument("--pieces", type=int, default=100, help="Maximum number of pieces to drop.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random piece feed.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    grid = ColorGrid(args.width, args.height)
    cleared = play(grid, args.pieces, random.Random(args.seed))
    LOGGER.info("Cleared %d row(s) in total", cleared)
    print(render_text(grid))


if __name__ == "__main__":
    main()
