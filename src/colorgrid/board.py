"""Board storage for the playfield."""

from __future__ import annotations

from typing import Iterable, List, Tuple

import numpy as np
from numpy.typing import NDArray

from .cell import Cell, CellKind, Color, DEFAULT_PALETTE, Palette


# Dimensions of the standard board.
WIDTH = 10
HEIGHT = 20

Kinds = NDArray[np.uint8]


class Board:
    """Fixed-size grid of tagged cells.

    Two arrays of shape ``(height, width)`` back the board: ``kinds`` holds the
    :class:`CellKind` of every cell and ``colors`` the colour of locked cells.
    Background and warning colours are derived from the palette on read, so
    rows can be moved around without recomputing the checkerboard.
    """

    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        palette: Palette = DEFAULT_PALETTE,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self.palette = palette
        self.kinds: Kinds = np.zeros((height, width), dtype=np.uint8)
        self.colors = np.empty((height, width), dtype=object)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) out of bounds")

    def _check_row(self, y: int) -> None:
        if not 0 <= y < self._height:
            raise IndexError(f"Row {y} out of bounds")

    def kind(self, x: int, y: int) -> CellKind:
        """Return the role of the cell at ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """

        self._check(x, y)
        return CellKind(int(self.kinds[y, x]))

    def color(self, x: int, y: int) -> Color:
        """Return the display colour of the cell at ``(x, y)``."""

        kind = self.kind(x, y)
        if kind == CellKind.LOCKED:
            return self.colors[y, x]
        if kind == CellKind.WARNING:
            return self.palette.warning
        return self.palette.checker(x, y)

    def cell(self, x: int, y: int) -> Cell:
        return Cell(self.kind(x, y), self.color(x, y))

    def is_occupied(self, x: int, y: int) -> bool:
        """Return ``True`` if ``(x, y)`` holds a locked block.

        Raises:
            IndexError: If the coordinates are outside the board.
        """

        self._check(x, y)
        return bool(self.kinds[y, x] == CellKind.LOCKED)

    def row(self, y: int) -> Tuple[Color, ...]:
        """Return the display colours of row ``y`` from left to right."""

        self._check_row(y)
        return tuple(self.color(x, y) for x in range(self._width))

    def row_cells(self, y: int) -> List[Cell]:
        self._check_row(y)
        return [self.cell(x, y) for x in range(self._width)]

    def lock_cells(self, cells: Iterable[Tuple[int, int]], color: Color) -> None:
        """Write ``color`` as a locked block into every ``(x, y)`` in ``cells``.

        Raises:
            IndexError: If any cell is outside the board.  Nothing is written
                in that case.
        """

        cells = list(cells)
        for x, y in cells:
            self._check(x, y)
        for x, y in cells:
            self.kinds[y, x] = CellKind.LOCKED
            self.colors[y, x] = color

    def set_warning(self, x: int, y: int) -> None:
        """Flag the free cell at ``(x, y)`` with the warning colour.

        Raises:
            ValueError: If the cell holds a locked block.
        """

        if self.is_occupied(x, y):
            raise ValueError(f"Cell ({x}, {y}) is locked")
        self.kinds[y, x] = CellKind.WARNING

    def clear_warning(self, x: int, y: int) -> None:
        """Return a warning cell at ``(x, y)`` to the checkerboard."""

        if self.kind(x, y) == CellKind.WARNING:
            self.kinds[y, x] = CellKind.BACKGROUND

    def reset(self) -> None:
        """Reset every cell to the checkerboard background."""

        self.kinds.fill(CellKind.BACKGROUND)
        self.colors.fill(None)

    def full_rows(self) -> List[int]:
        """Return the indices of fully locked rows, bottom row first."""

        full = np.all(self.kinds == CellKind.LOCKED, axis=1)
        return [int(y) for y in np.flatnonzero(full)[::-1]]

    def _copy_row(self, src: int, dst: int) -> None:
        # Only locked cells travel; free cells become background at ``dst``.
        locked = self.kinds[src] == CellKind.LOCKED
        self.kinds[dst] = np.where(locked, CellKind.LOCKED, CellKind.BACKGROUND)
        self.colors[dst] = np.where(locked, self.colors[src], None)

    def _reset_row(self, y: int) -> None:
        self.kinds[y] = CellKind.BACKGROUND
        self.colors[y] = None

    def remove_rows(self, rows: List[int]) -> None:
        """Remove ``rows`` and let the rows above them fall into place.

        ``rows`` must be ordered from the bottom of the board upwards, as
        returned by :meth:`full_rows`.  Two cursors walk up from the last row:
        ``check`` visits source rows and ``fill`` the destination.  Rows above
        the last surviving one are reset to the checkerboard.
        """

        if not rows:
            return
        fill = check = self._height - 1
        for row in rows:
            while check > row:
                if fill != check:
                    self._copy_row(check, fill)
                fill -= 1
                check -= 1
            check = row - 1
        while check >= 0:
            self._copy_row(check, fill)
            fill -= 1
            check -= 1
        while fill >= 0:
            self._reset_row(fill)
            fill -= 1

    def clear_full_rows(self) -> int:
        """Clear completed rows and return how many were removed."""

        rows = self.full_rows()
        self.remove_rows(rows)
        return len(rows)

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.kinds == CellKind.LOCKED))


__all__ = ["Board", "HEIGHT", "WIDTH"]
