"""Falling-block grid engine for block-stacking puzzle games."""

from .cell import Cell, CellKind, DEFAULT_PALETTE, Palette, checker_color
from .block import Block, Direction, PlacedBlock, Tetromino, TetrominoType
from .board import Board
from .grid import ColorGrid, DropResult, SpawnError, fit_attempts
from .utils import render_colors, render_text

__all__ = [
    "Block",
    "Board",
    "Cell",
    "CellKind",
    "ColorGrid",
    "DEFAULT_PALETTE",
    "Direction",
    "DropResult",
    "Palette",
    "PlacedBlock",
    "SpawnError",
    "Tetromino",
    "TetrominoType",
    "checker_color",
    "fit_attempts",
    "render_colors",
    "render_text",
]
