"""Helpers for the fixed 9x9 grid the genetic algorithm works on."""

from __future__ import annotations

import random

from sudokuga.sudoku import format_board

SIZE = 9
BOX = 3

Grid = list[list[int]]
Mask = list[list[bool]]


def _box_cells(block_row: int, block_col: int):
    for i in range(BOX):
        for j in range(BOX):
            yield block_row * BOX + i, block_col * BOX + j


def fixed_value_in_box(
    grid: Grid, fixed: Mask, block_row: int, block_col: int, value: int
) -> bool:
    """True if a fixed cell of the given box already holds ``value``."""
    return any(
        fixed[r][c] and grid[r][c] == value for r, c in _box_cells(block_row, block_col)
    )


def fill_grid(grid: Grid, fixed: Mask, rng=None) -> None:
    """Fill the free cells of each box with digits not used by its fixed cells."""
    rng = rng if rng is not None else random
    for block_row in range(BOX):
        for block_col in range(BOX):
            digits = list(range(1, SIZE + 1))
            rng.shuffle(digits)
            available = [
                d
                for d in digits
                if not fixed_value_in_box(grid, fixed, block_row, block_col, d)
            ]
            free = [(r, c) for r, c in _box_cells(block_row, block_col) if not fixed[r][c]]
            for (r, c), digit in zip(free, available):
                grid[r][c] = digit


def init_fixed(grid: Grid) -> Mask:
    """Mark every non-zero cell as fixed."""
    return [[value != 0 for value in row] for row in grid]


def format_grid(grid: Grid) -> str:
    """Render a grid as text, showing empty cells as zeros."""
    text = format_board(grid, BOX)
    return text.replace(" . ", " 0 ")