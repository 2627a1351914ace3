"""Falling blocks and their positions on the grid.

The engine only relies on the small :class:`Block` protocol: a set of relative
``(x, y)`` offsets, a colour and a way to obtain the rotated block.  The seven
standard tetrominoes are provided by :class:`Tetromino` so that the engine has
a default piece to spawn.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Iterable, List, Protocol, Sequence, Tuple

from .cell import Color

Offset = Tuple[int, int]  # (x, y)
RotationState = List[Offset]


class Block(Protocol):
    """Shape capability consumed by :class:`colorgrid.grid.ColorGrid`."""

    @property
    def color(self) -> Color: ...

    def cells(self) -> Sequence[Offset]: ...

    def rotate(self) -> "Block": ...


class Direction(Enum):
    """Directions a block can be moved in."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    DOWN = (0, 1)

    @property
    def delta(self) -> Offset:
        return self.value

    def horizontal(self) -> bool:
        return self is not Direction.DOWN


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


def _rotate(state: RotationState) -> RotationState:
    """Return ``state`` rotated 90 degrees clockwise.

    Offsets are normalised so that the minimum ``x`` and ``y`` are zero,
    which keeps the rotated block hanging off the same anchor.
    """

    rotated = [(-y, x) for x, y in state]
    min_x = min(x for x, _ in rotated)
    min_y = min(y for _, y in rotated)
    return [(x - min_x, y - min_y) for x, y in rotated]


def _generate_rotations(state: RotationState) -> List[RotationState]:
    rotations = [state]
    for _ in range(3):
        state = _rotate(state)
        rotations.append(state)
    return rotations


# Spawn orientation of each shape as (x, y) offsets.
_BASE_SHAPES: Dict[TetrominoType, RotationState] = {
    TetrominoType.I: [(0, 0), (1, 0), (2, 0), (3, 0)],
    TetrominoType.O: [(0, 0), (1, 0), (0, 1), (1, 1)],
    TetrominoType.T: [(0, 0), (1, 0), (2, 0), (1, 1)],
    TetrominoType.S: [(1, 0), (2, 0), (0, 1), (1, 1)],
    TetrominoType.Z: [(0, 0), (1, 0), (1, 1), (2, 1)],
    TetrominoType.J: [(0, 0), (0, 1), (1, 1), (2, 1)],
    TetrominoType.L: [(2, 0), (0, 1), (1, 1), (2, 1)],
}


TETROMINO_SHAPES: Dict[TetrominoType, List[RotationState]] = {
    t_type: _generate_rotations(shape) for t_type, shape in _BASE_SHAPES.items()
}

SHAPE_COLORS: Dict[TetrominoType, Color] = {
    TetrominoType.I: (0, 255, 255),
    TetrominoType.O: (255, 255, 0),
    TetrominoType.T: (128, 0, 128),
    TetrominoType.S: (0, 255, 0),
    TetrominoType.Z: (255, 0, 0),
    TetrominoType.J: (0, 0, 255),
    TetrominoType.L: (255, 165, 0),
}


def shape_cells(shape: TetrominoType, rotation: int) -> RotationState:
    """Return the offsets for ``shape`` at ``rotation``.

    Rotation indices wrap, so any integer is accepted.
    """

    states = TETROMINO_SHAPES[shape]
    return states[rotation % len(states)]


@dataclass(frozen=True)
class Tetromino:
    """One of the standard four-cell blocks."""

    shape: TetrominoType
    rotation: int = 0

    @classmethod
    def default(cls) -> "Tetromino":
        return cls(TetrominoType.T)

    @property
    def color(self) -> Color:
        return SHAPE_COLORS[self.shape]

    def cells(self) -> RotationState:
        return shape_cells(self.shape, self.rotation)

    def rotate(self) -> "Tetromino":
        states = TETROMINO_SHAPES[self.shape]
        return replace(self, rotation=(self.rotation + 1) % len(states))


def bounding_box(offsets: Iterable[Offset]) -> Tuple[int, int]:
    """Return the ``(width, height)`` spanned by ``offsets``.

    Raises:
        ValueError: If ``offsets`` is empty.
    """

    offsets = list(offsets)
    if not offsets:
        raise ValueError("Block has no cells")
    xs = [x for x, _ in offsets]
    ys = [y for _, y in offsets]
    return max(xs) - min(xs) + 1, max(ys) - min(ys) + 1


@dataclass(frozen=True)
class PlacedBlock:
    """A block anchored at ``(x, y)`` on the grid.

    Instances are never changed in place; moving or rotating produces a new
    value.
    """

    block: Block
    x: int
    y: int

    @property
    def color(self) -> Color:
        return self.block.color

    @property
    def position(self) -> Offset:
        return self.x, self.y

    def cells(self) -> List[Offset]:
        """Return the absolute ``(x, y)`` coordinates covered by the block."""

        return [(self.x + dx, self.y + dy) for dx, dy in self.block.cells()]

    def shifted(self, direction: Direction) -> "PlacedBlock":
        dx, dy = direction.delta
        return replace(self, x=self.x + dx, y=self.y + dy)


__all__ = [
    "Block",
    "Direction",
    "Offset",
    "PlacedBlock",
    "SHAPE_COLORS",
    "TETROMINO_SHAPES",
    "Tetromino",
    "TetrominoType",
    "bounding_box",
    "shape_cells",
]
