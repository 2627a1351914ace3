"""Read-only projections of a :class:`~colorgrid.grid.ColorGrid` for renderers."""

from __future__ import annotations

from typing import List

from .cell import CellKind, Color
from .grid import ColorGrid


def render_colors(grid: ColorGrid, ghost: bool = True) -> List[List[Color]]:
    """Return the grid colours with the active block overlaid.

    The board itself is not touched, so the active block is never locked by
    rendering.  With ``ghost`` enabled the hint position is drawn first in the
    palette's warning colour, then the active block on top of it.
    """

    frame = [list(grid[y]) for y in range(grid.height)]
    if ghost:
        for x, y in grid.hint().cells():
            frame[y][x] = grid.palette.warning
    for x, y in grid.block.cells():
        frame[y][x] = grid.block.color
    return frame


_GLYPHS = {
    CellKind.BACKGROUND: ".",
    CellKind.WARNING: "!",
    CellKind.LOCKED: "#",
}


def render_text(grid: ColorGrid, ghost: bool = True) -> str:
    """Return an ASCII frame of ``grid``.

    ``#`` marks locked cells, ``@`` the active block, ``+`` its ghost, ``!``
    warning markers and ``.`` empty background.
    """

    rows = [
        [_GLYPHS[grid.cell(x, y).kind] for x in range(grid.width)]
        for y in range(grid.height)
    ]
    if ghost:
        for x, y in grid.hint().cells():
            rows[y][x] = "+"
    for x, y in grid.block.cells():
        rows[y][x] = "@"
    return "\n".join("".join(row) for row in rows)


__all__ = ["render_colors", "render_text"]
