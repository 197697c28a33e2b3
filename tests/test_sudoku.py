import random

import pytest

from sudokuga.sudoku import (
    SEPARATOR,
    Difficulty,
    count_empty_cells,
    fill_box,
    fill_diagonal,
    fill_remaining,
    format_board,
    generate_sudoku,
    is_safe,
    new_board,
    remove_cells,
    unused_in_box,
    unused_in_col,
    unused_in_row,
)


def _no_conflicts(grid, box):
    size = len(grid)
    groups = [list(row) for row in grid]
    groups += [[grid[r][c] for r in range(size)] for c in range(size)]
    for br in range(0, size, box):
        for bc in range(0, size, box):
            groups.append([grid[br + i][bc + j] for i in range(box) for j in range(box)])
    for group in groups:
        values = [v for v in group if v != 0]
        if len(values) != len(set(values)):
            return False
    return True


def _complete_board(seed, size=9, box=3):
    grid = new_board(size)
    rng = random.Random(seed)
    fill_diagonal(grid, box, rng)
    assert fill_remaining(grid, box)
    return grid


def test_new_board_is_zeroed():
    board = new_board(9)
    assert len(board) == 9
    assert all(row == [0] * 9 for row in board)
    board[0][0] = 5
    assert board[1][0] == 0


def test_new_board_rejects_non_positive():
    with pytest.raises(ValueError):
        new_board(0)


def test_row_col_box_checks():
    grid = new_board(9)
    grid[0][4] = 7
    assert not unused_in_row(grid, 0, 7)
    assert unused_in_row(grid, 1, 7)
    assert not unused_in_col(grid, 4, 7)
    assert unused_in_col(grid, 3, 7)
    assert not unused_in_box(grid, 0, 3, 7)
    assert unused_in_box(grid, 3, 3, 7)
    assert not is_safe(grid, 2, 5, 7)
    assert is_safe(grid, 5, 5, 7)


def test_fill_box_is_permutation():
    grid = new_board(9)
    fill_box(grid, 3, 6, 3, random.Random(1))
    values = sorted(grid[3 + i][6 + j] for i in range(3) for j in range(3))
    assert values == list(range(1, 10))
    assert count_empty_cells(grid) == 81 - 9


@pytest.mark.parametrize("seed", [0, 1, 2, 42])
def test_fill_produces_complete_valid_board(seed):
    grid = _complete_board(seed)
    assert count_empty_cells(grid) == 0
    assert _no_conflicts(grid, 3)
    assert all(sorted(row) == list(range(1, 10)) for row in grid)


def test_fill_remaining_detects_impossible_board():
    grid = new_board(9)
    grid[0][:8] = list(range(1, 9))
    grid[1][8] = 9
    assert fill_remaining(grid, 3) is False
    assert grid[0][8] == 0


def test_fill_four_by_four():
    grid = _complete_board(3, size=4, box=2)
    assert count_empty_cells(grid) == 0
    assert _no_conflicts(grid, 2)


@pytest.mark.parametrize(
    "difficulty, empty",
    [(Difficulty.EASY, 16), (Difficulty.MODERATE, 28), (Difficulty.HARD, 48)],
)
def test_generate_sudoku_removes_by_difficulty(difficulty, empty):
    puzzle = generate_sudoku(9, 3, difficulty, random.Random(7))
    assert count_empty_cells(puzzle) == empty
    assert _no_conflicts(puzzle, 3)


def test_generated_puzzle_is_solvable():
    puzzle = generate_sudoku(9, 3, Difficulty.HARD, random.Random(11))
    assert fill_remaining(puzzle, 3)
    assert count_empty_cells(puzzle) == 0
    assert _no_conflicts(puzzle, 3)


def test_generate_rejects_mismatched_box():
    with pytest.raises(ValueError):
        generate_sudoku(9, 2, Difficulty.EASY, random.Random(0))


def test_remove_cells_rejects_unknown_difficulty():
    grid = _complete_board(5)
    with pytest.raises(ValueError):
        remove_cells(grid, 4, random.Random(0))


def test_remove_cells_rejects_too_sparse_board():
    grid = new_board(9)
    grid[0][0] = 1
    with pytest.raises(ValueError):
        remove_cells(grid, Difficulty.HARD, random.Random(0))


def test_remove_cells_accepts_plain_int():
    grid = _complete_board(6)
    remove_cells(grid, 1, random.Random(0))
    assert count_empty_cells(grid) == 81 * Difficulty.EASY.removal_percent // 100


def test_format_board_layout():
    grid = _complete_board(8)
    grid[0][0] = 0
    text = format_board(grid, 3)
    lines = text.splitlines()
    assert text.endswith("\n")
    assert len(lines) == 9 + 3
    assert lines[0] == SEPARATOR
    assert lines[4] == SEPARATOR
    assert lines[1].startswith("|  .  ")
    assert lines[1].count("|") == 3
    assert f"{grid[0][1]:2d}" in lines[1]


def test_format_board_letters_for_large_values():
    grid = new_board(16)
    grid[0][0] = 10
    grid[0][1] = 15
    line = format_board(grid, 4).splitlines()[1]
    assert line.startswith("|  A  F ")