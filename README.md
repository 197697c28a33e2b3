# sudokuga

Generate a 9x9 Sudoku puzzle and try to solve it with a genetic algorithm.

The generator fills the boxes on the main diagonal at random. It completes the
rest of the grid by backtracking. It then blanks a share of the cells that
depends on the difficulty: 20% for easy, 35% for moderate and 60% for hard.

The solver keeps every given cell fixed. Within each 3x3 box it fills the free
cells with the digits that the box's fixed cells do not already use. It then
evolves a population of 100 candidate grids by tournament selection over three
individuals, row crossover and swap mutation.

A grid's fitness is the number of distinct digits 1-9 across all rows, columns
and boxes. The maximum is 243, which means the grid is solved.

## Installation

```
pip install .
```

## Command line

```
sudokuga [--difficulty {1,2,3}] [--generations N] [--seed S]
```

- `--difficulty`: 1 (easy), 2 (moderate, the default) or 3 (hard).
- `--generations`: the most generations to run, 200 by default. It must be at
  least 1.
- `--seed`: a seed for the random number generator, so that a run can be
  repeated.

The command generates a puzzle and prints it with its free cells already filled
at random. It then runs the genetic algorithm. It reports each generation that
brings a new best fitness, and stops early if it finds a perfect solution. At
the end it prints the best grid it found and that grid's fitness.

## Library use

```python
import random

from sudokuga.sudoku import Difficulty, generate_sudoku, format_board
from sudokuga.grid import init_fixed, fill_grid, format_grid
from sudokuga.ga import compute_fitness
from sudokuga.cli import evolve

rng = random.Random(1)
puzzle = generate_sudoku(9, 3, Difficulty.MODERATE, rng)
print(format_board(puzzle, 3))

fixed = init_fixed(puzzle)
fill_grid(puzzle, fixed, rng)
result = evolve(puzzle, fixed, 200, rng, print)
print(format_grid(result.best.grid))
print(compute_fitness(result.best.grid), result.solved, result.generation)
```

The modules:

- `sudokuga.sudoku`: board generation (`generate_sudoku`, `fill_diagonal`,
  `fill_remaining`, `remove_cells`), the placement checks (`is_safe`,
  `unused_in_row`, `unused_in_col`, `unused_in_box`), `count_empty_cells`,
  `format_board` and the `Difficulty` enum.
- `sudokuga.grid`: the 9x9 helpers the solver uses: `init_fixed`, `fill_grid`,
  `fixed_value_in_box` and `format_grid`.
- `sudokuga.ga`: `Individual`, `compute_fitness`, `initialize_population`,
  `evaluate_population`, `select_parent`, `crossover` and `mutate`.
- `sudokuga.cli`: `evolve`, which returns an `EvolutionResult`, and the command
  itself, `main`.

The `sudokuga.operators` module has other operators that you can use in your
own loop:

- `roulette_selection` picks an individual with probability proportional to its
  fitness.
- `multi_point_crossover`, at the crossover rate of 0.8, swaps the free cells of
  an inclusive range of rows between two random points.
- `uniform_crossover` takes each free cell from one parent or the other with
  equal chance. It takes fixed cells from the first parent.
- `simple_mutate` picks boxes at the mutation rate of 0.05. In each box it
  picks, it swaps two of the free cells.

Every function that uses randomness takes an optional `rng`. This can be any
object with the methods of `random.Random`. Without one, the `random` module is
used.

## What it does not do

The package does not let you play the puzzle: there is no interactive board or
move checking. It does not read puzzles from files. The command always works on
a puzzle it generates itself. The solver works only on 9x9 grids. The
generator also accepts other sizes whose box size squared equals the board
size.

## Tests

```
pip install .[test]
pytest
```