"""Sudoku board generation: fill a complete grid, then blank out cells."""

from __future__ import annotations

import random
from enum import IntEnum

Board = list[list[int]]

SEPARATOR = "--------------------------------"


class Difficulty(IntEnum):
    """How many cells of a generated board are blanked out."""

    EASY = 1
    MODERATE = 2
    HARD = 3

    @property
    def removal_percent(self) -> int:
        """Percentage of all cells that are removed."""
        return {Difficulty.EASY: 20, Difficulty.MODERATE: 35, Difficulty.HARD: 60}[self]


def _rng(rng):
    return rng if rng is not None else random


def new_board(size: int) -> Board:
    """Return a square board of the given size filled with zeros."""
    if size <= 0:
        raise ValueError(f"board size must be positive, got {size}")
    return [[0] * size for _ in range(size)]


def _cell_text(value: int, empty: str) -> str:
    if value == 0:
        return f" {empty} "
    if value <= 9:
        return f"{value:2d} "
    # values 10..16 are shown as letters A..G
    return f" {chr(ord('A') + value - 10)} "


def _format(board: Board, box_size: int, empty: str) -> str:
    lines = []
    for i, row in enumerate(board):
        if i % box_size == 0:
            lines.append(SEPARATOR)
        parts = []
        for j, value in enumerate(row):
            if j % box_size == 0:
                parts.append("| ")
            parts.append(_cell_text(value, empty))
        lines.append("".join(parts))
    return "".join(line + "\n" for line in lines)


def format_board(board: Board, box_size: int = 3) -> str:
    """Render a board as text, showing empty cells as dots."""
    return _format(board, box_size, ".")


def unused_in_box(grid: Board, row: int, col: int, number: int, box_size: int = 3) -> bool:
    """True if ``number`` is absent from the box whose top-left cell is (row, col)."""
    return all(
        grid[row + i][col + j] != number
        for i in range(box_size)
        for j in range(box_size)
    )


def unused_in_row(grid: Board, row: int, number: int) -> bool:
    """True if ``number`` does not appear in the given row."""
    return number not in grid[row]


def unused_in_col(grid: Board, col: int, number: int) -> bool:
    """True if ``number`` does not appear in the given column."""
    return all(line[col] != number for line in grid)


def is_safe(grid: Board, row: int, col: int, number: int, box_size: int = 3) -> bool:
    """True if ``number`` may be placed at (row, col) without a conflict."""
    return (
        unused_in_row(grid, row, number)
        and unused_in_col(grid, col, number)
        and unused_in_box(grid, row - row % box_size, col - col % box_size, number, box_size)
    )


def fill_box(grid: Board, row: int, col: int, box_size: int = 3, rng=None) -> None:
    """Fill the box at (row, col) with distinct random numbers."""
    rng = _rng(rng)
    size = len(grid)
    for i in range(box_size):
        for j in range(box_size):
            while True:
                number = rng.randrange(size) + 1
                if unused_in_box(grid, row, col, number, box_size):
                    break
            grid[row + i][col + j] = number


def fill_diagonal(grid: Board, box_size: int = 3, rng=None) -> None:
    """Fill the independent boxes along the main diagonal."""
    for start in range(0, len(grid), box_size):
        fill_box(grid, start, start, box_size, rng)


def fill_remaining(grid: Board, box_size: int = 3) -> bool:
    """Fill every empty cell by backtracking; return False if impossible."""
    size = len(grid)
    empty = [(r, c) for r in range(size) for c in range(size) if grid[r][c] == 0]

    def solve(k: int) -> bool:
        if k == len(empty):
            return True
        r, c = empty[k]
        for number in range(1, size + 1):
            if is_safe(grid, r, c, number, box_size):
                grid[r][c] = number
                if solve(k + 1):
                    return True
                grid[r][c] = 0
        return False

    return solve(0)


def remove_cells(grid: Board, difficulty=Difficulty.MODERATE, rng=None) -> None:
    """Blank out random filled cells according to the difficulty."""
    level = Difficulty(difficulty)
    rng = _rng(rng)
    size = len(grid)
    total = size * size
    to_remove = total * level.removal_percent // 100
    filled = total - count_empty_cells(grid)
    if to_remove > filled:
        raise ValueError(
            f"cannot remove {to_remove} cells from a board with {filled} filled cells"
        )
    while to_remove > 0:
        cell = rng.randrange(total)
        i, j = divmod(cell, size)
        if grid[i][j] != 0:
            grid[i][j] = 0
            to_remove -= 1


def generate_sudoku(
    size: int = 9, box_size: int = 3, difficulty=Difficulty.MODERATE, rng=None
) -> Board:
    """Generate a puzzle: a full valid board with cells removed."""
    if box_size * box_size != size:
        raise ValueError(f"box size {box_size} does not fit a board of size {size}")
    grid = new_board(size)
    fill_diagonal(grid, box_size, rng)
    fill_remaining(grid, box_size)
    remove_cells(grid, difficulty, rng)
    return grid


def count_empty_cells(grid: Board) -> int:
    """Number of cells holding zero."""
    return sum(row.count(0) for row in grid)