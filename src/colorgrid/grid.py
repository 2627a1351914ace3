"""Falling-block engine: spawning, movement, landing and line clears."""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional, Tuple

from .block import Block, Direction, PlacedBlock, Tetromino, bounding_box
from .board import Board, HEIGHT, WIDTH
from .cell import Cell, Color, DEFAULT_PALETTE, Palette


LOGGER = logging.getLogger(__name__)

# Minimum number of nudges the fit search tries before giving up.
FIT_ATTEMPTS = 6


class SpawnError(RuntimeError):
    """Raised when a block cannot be placed anywhere inside the grid."""


class DropResult(NamedTuple):
    """Outcome of :meth:`ColorGrid.on_down`."""

    game_over: bool
    landed: bool
    cleared_rows: int


def fit_attempts(block: Block) -> int:
    """Return how many placements :meth:`ColorGrid.fit` tries for ``block``.

    Larger blocks may need more corrective nudges to be pulled back inside the
    grid, so the bound grows with the block's bounding box but never drops
    below :data:`FIT_ATTEMPTS`.
    """

    span_x, span_y = bounding_box(block.cells())
    return max(FIT_ATTEMPTS, 2 * (span_x + span_y) - 2)


class ColorGrid:
    """The playfield together with the block currently falling through it.

    Parameters
    ----------
    width, height:
        Fixed dimensions of the grid.
    palette:
        Checkerboard and warning colours.  Alternatively ``background`` and
        ``warning`` may be passed directly.
    default_block:
        Block spawned on construction and by :meth:`renew`.  Defaults to
        :meth:`Tetromino.default`.

    Raises:
        SpawnError: If the default block does not fit the grid.
    """

    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        *,
        palette: Optional[Palette] = None,
        background: Optional[Tuple[Color, Color]] = None,
        warning: Optional[Color] = None,
        default_block: Optional[Block] = None,
    ) -> None:
        if palette is None:
            palette = Palette(
                background=background if background is not None else DEFAULT_PALETTE.background,
                warning=warning if warning is not None else DEFAULT_PALETTE.warning,
            )
        self.board = Board(width, height, palette)
        self.default_block: Block = default_block if default_block is not None else Tetromino.default()
        self.block: PlacedBlock = self._spawn(self.default_block)

    # Read access ------------------------------------------------------
    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def palette(self) -> Palette:
        return self.board.palette

    def __getitem__(self, y: int) -> Tuple[Color, ...]:
        return self.board.row(y)

    def __len__(self) -> int:
        return self.height

    def cell(self, x: int, y: int) -> Cell:
        return self.board.cell(x, y)

    def is_occupied(self, x: int, y: int) -> bool:
        return self.board.is_occupied(x, y)

    # Spawning ---------------------------------------------------------
    def fit(self, block: Block, x: int, y: int) -> Optional[PlacedBlock]:
        """Place ``block`` as close to ``(x, y)`` as the grid bounds allow.

        Each attempt checks the block's cells in order.  The first cell found
        outside the grid nudges the anchor one step back inside along that
        axis and the check starts over.  Returns ``None`` when no attempt
        produced an in-bounds placement.

        Only the bounds are checked; overlap with locked cells is caught by
        the next move.
        """

        attempts = fit_attempts(block)
        width, height = self.width, self.height
        for _ in range(attempts):
            possible = True
            for dx, dy in block.cells():
                cx, cy = x + dx, y + dy
                if cx < 0:
                    x += 1
                elif cx >= width:
                    x -= 1
                elif cy < 0:
                    y += 1
                elif cy >= height:
                    y -= 1
                else:
                    continue
                possible = False
                break
            if possible:
                return PlacedBlock(block, x, y)
        LOGGER.debug("No fit for %r after %d attempts", block, attempts)
        return None

    def _spawn(self, block: Block) -> PlacedBlock:
        placed = self.fit(block, self.width // 2, 0)
        if placed is None:
            LOGGER.warning("No room to spawn %r on a %dx%d grid", block, self.width, self.height)
            raise SpawnError(f"Cannot place {block!r} on a {self.width}x{self.height} grid")
        LOGGER.debug("Spawned %r at %s", block, placed.position)
        return placed

    def insert(self, block: Block) -> PlacedBlock:
        """Replace the active block with ``block`` fitted at the top centre.

        Raises:
            SpawnError: If the block does not fit inside the grid.
        """

        self.block = self._spawn(block)
        return self.block

    def renew(self) -> None:
        """Start over with an empty grid and the default block."""

        self.board.reset()
        self.insert(self.default_block)

    # Movement ---------------------------------------------------------
    def can_move(self, placed: PlacedBlock, direction: Direction) -> Tuple[bool, bool]:
        """Return ``(can_move, touches_stack)`` for moving ``placed``.

        A move is rejected as a whole if any cell would leave the grid or
        enter a locked cell.  ``touches_stack`` reports whether the block
        would rest on the floor or on locked cells after the move.
        """

        dx, dy = direction.delta
        board = self.board
        touches_stack = False
        for x, y in placed.cells():
            nx, ny = x + dx, y + dy
            if not board.in_bounds(nx, ny) or board.is_occupied(nx, ny):
                return False, False
            if ny + 1 == board.height or board.is_occupied(nx, ny + 1):
                touches_stack = True
        return True, touches_stack

    def move_in_direction(
        self, placed: PlacedBlock, direction: Direction
    ) -> Tuple[Optional[PlacedBlock], bool]:
        """Return ``placed`` moved one step in ``direction``.

        The first item is ``None`` when the move is not possible.
        """

        allowed, touches_stack = self.can_move(placed, direction)
        if not allowed:
            return None, False
        return placed.shifted(direction), touches_stack

    def handle_horizontal(self, direction: Direction) -> bool:
        """Move the active block one column left or right if possible."""

        if not direction.horizontal():
            raise ValueError(f"Expected LEFT or RIGHT, got {direction}")
        moved, _ = self.move_in_direction(self.block, direction)
        if moved is None:
            return False
        self.block = moved
        return True

    def on_down(self, hard_drop: bool = False) -> DropResult:
        """Advance the active block by one row, or all the way for a hard drop.

        A block that cannot move down at all means the grid is full and the
        game is over.  When the block comes to rest it is merged and the
        number of cleared rows is reported.
        """

        touches_stack = False
        while True:
            moved, touches_stack = self.move_in_direction(self.block, Direction.DOWN)
            if moved is None:
                LOGGER.warning("Block %r stuck at %s, game over", self.block.block, self.block.position)
                return DropResult(game_over=True, landed=True, cleared_rows=0)
            self.block = moved
            if touches_stack or not hard_drop:
                break
        cleared = self.merge() if touches_stack else 0
        return DropResult(game_over=False, landed=touches_stack, cleared_rows=cleared)

    def rotate(self) -> bool:
        """Rotate the active block in place if it still fits the grid."""

        rotated = self.fit(self.block.block.rotate(), self.block.x, self.block.y)
        if rotated is None:
            return False
        self.block = rotated
        return True

    def hint(self) -> PlacedBlock:
        """Return where the active block would come to rest."""

        ghost = self.block
        while True:
            moved, touches_stack = self.move_in_direction(ghost, Direction.DOWN)
            if moved is None:
                return ghost
            ghost = moved
            if touches_stack:
                return ghost

    # Landing ----------------------------------------------------------
    def merge(self) -> int:
        """Lock the active block into the grid and clear full rows.

        Returns the number of rows removed.
        """

        self.board.lock_cells(self.block.cells(), self.block.color)
        cleared = self.board.clear_full_rows()
        LOGGER.debug("Merged %r at %s, cleared %d row(s)", self.block.block, self.block.position, cleared)
        return cleared

    # Warning markers --------------------------------------------------
    def mark_warning(self, x: int, y: int) -> None:
        self.board.set_warning(x, y)

    def clear_warning(self, x: int, y: int) -> None:
        self.board.clear_warning(x, y)


__all__ = ["ColorGrid", "DropResult", "FIT_ATTEMPTS", "SpawnError", "fit_attempts"]
