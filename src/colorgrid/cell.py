"""Cell roles and the reserved colours of the playfield.

Every board cell is tagged with a :class:`CellKind`.  The tag alone decides
whether a cell is occupied; colours are only used for display.  This keeps a
block whose colour happens to match one of the reserved colours from being
mistaken for empty space.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Hashable, Tuple

Color = Hashable


class CellKind(IntEnum):
    """Role of a single board cell.

    The integer values are what the board stores in its ``kinds`` array.
    ``BACKGROUND`` must stay ``0`` so a zeroed array is an empty board.
    """

    BACKGROUND = 0
    WARNING = 1
    LOCKED = 2


@dataclass(frozen=True)
class Palette:
    """Reserved colours: the checkerboard pair and the warning marker."""

    background: Tuple[Color, Color]
    warning: Color

    def checker(self, x: int, y: int) -> Color:
        """Return the checkerboard colour for ``(x, y)``."""

        return self.background[(x + y) % 2]


DEFAULT_PALETTE = Palette(
    background=((20, 20, 20), (32, 32, 32)),
    warning=(90, 90, 90),
)


@dataclass(frozen=True)
class Cell:
    """Read-only view of a board cell."""

    kind: CellKind
    color: Color

    @property
    def occupied(self) -> bool:
        return self.kind == CellKind.LOCKED


def checker_color(palette: Palette, x: int, y: int) -> Color:
    """Return the background colour ``palette`` uses at ``(x, y)``."""

    return palette.checker(x, y)


__all__ = ["Cell", "CellKind", "Color", "DEFAULT_PALETTE", "Palette", "checker_color"]
