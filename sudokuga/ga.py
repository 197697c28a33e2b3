"""Genetic algorithm core: candidate grids, fitness and the default operators."""

from __future__ import annotations

import random
from dataclasses import dataclass

from sudokuga.grid import BOX, SIZE, Grid, Mask, fill_grid

POPULATION_SIZE = 100
NUM_GENERATIONS = 200
MUTATION_RATE = 0.05
CROSSOVER_RATE = 0.8
TOURNAMENT_SIZE = 3
MAX_FITNESS = 3 * SIZE * SIZE


def _rng(rng):
    return rng if rng is not None else random


def _units():
    for i in range(SIZE):
        yield [(i, j) for j in range(SIZE)]
    for j in range(SIZE):
        yield [(i, j) for i in range(SIZE)]
    for box_row in range(BOX):
        for box_col in range(BOX):
            yield [
                (box_row * BOX + i, box_col * BOX + j)
                for i in range(BOX)
                for j in range(BOX)
            ]


_UNITS = tuple(_units())


def compute_fitness(grid: Grid) -> int:
    """Count distinct digits 1..9 over all rows, columns and boxes (max 243)."""
    return sum(
        len({grid[r][c] for r, c in unit if 1 <= grid[r][c] <= SIZE})
        for unit in _UNITS
    )


@dataclass
class Individual:
    """A candidate solution: a filled grid and its last computed fitness."""

    grid: Grid
    fitness: int = 0

    def evaluate(self) -> int:
        """Recompute, store and return the fitness of this grid."""
        self.fitness = compute_fitness(self.grid)
        return self.fitness

    def copy(self) -> "Individual":
        """Return an independent copy."""
        return Individual([row[:] for row in self.grid], self.fitness)


def evaluate_population(population: list[Individual]) -> None:
    """Recompute the fitness of every individual."""
    for individual in population:
        individual.evaluate()


def initialize_population(
    base_grid: Grid, fixed: Mask, rng=None, size: int = POPULATION_SIZE
) -> list[Individual]:
    """Create ``size`` individuals from the base grid with free cells filled randomly."""
    population = []
    for _ in range(size):
        grid = [row[:] for row in base_grid]
        fill_grid(grid, fixed, rng)
        individual = Individual(grid)
        individual.evaluate()
        population.append(individual)
    return population


def select_parent(population: list[Individual], rng=None) -> Individual:
    """Tournament selection among three random individuals."""
    if not population:
        raise ValueError("cannot select from an empty population")
    rng = _rng(rng)
    best = population[rng.randrange(len(population))]
    for _ in range(1, TOURNAMENT_SIZE):
        current = population[rng.randrange(len(population))]
        if current.fitness >= best.fitness:
            best = current
    return best


def _swap_rows(child1: Grid, child2: Grid, rows, fixed: Mask) -> None:
    for i in rows:
        for j in range(SIZE):
            if not fixed[i][j]:
                child1[i][j], child2[i][j] = child2[i][j], child1[i][j]


def crossover(
    parent1: Individual, parent2: Individual, fixed: Mask, rng=None
) -> tuple[Individual, Individual]:
    """Single-point row crossover; free cells of rows from the point onward are swapped."""
    rng = _rng(rng)
    child1 = Individual([row[:] for row in parent1.grid])
    child2 = Individual([row[:] for row in parent2.grid])
    if rng.random() < CROSSOVER_RATE:
        start = rng.randrange(SIZE)
        _swap_rows(child1.grid, child2.grid, range(start, SIZE), fixed)
    return child1, child2


def _swap_two(grid: Grid, cells, rng) -> None:
    if len(cells) >= 2:
        (r1, c1), (r2, c2) = rng.sample(cells, 2)
        grid[r1][c1], grid[r2][c2] = grid[r2][c2], grid[r1][c1]


def mutate_boxes(individual: Individual, fixed: Mask, rng=None) -> None:
    """With the mutation rate per box, swap two free cells inside that box."""
    rng = _rng(rng)
    for box_row in range(BOX):
        for box_col in range(BOX):
            if rng.random() < MUTATION_RATE:
                cells = [
                    (box_row * BOX + i, box_col * BOX + j)
                    for i in range(BOX)
                    for j in range(BOX)
                    if not fixed[box_row * BOX + i][box_col * BOX + j]
                ]
                _swap_two(individual.grid, cells, rng)


def mutate(individual: Individual, fixed: Mask, rng=None) -> None:
    """Swap free cells within boxes, then possibly within one random row."""
    rng = _rng(rng)
    mutate_boxes(individual, fixed, rng)
    if rng.random() < MUTATION_RATE:
        row = rng.randrange(SIZE)
        cells = [(row, col) for col in range(SIZE) if not fixed[row][col]]
        _swap_two(individual.grid, cells, rng)