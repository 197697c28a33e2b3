"""Alternative selection, crossover and mutation operators."""

from __future__ import annotations

import random

from sudokuga.ga import CROSSOVER_RATE, Individual, _swap_rows, mutate_boxes
from sudokuga.grid import SIZE, Mask


def _rng(rng):
    return rng if rng is not None else random


def roulette_selection(population: list[Individual], rng=None) -> Individual:
    """Pick an individual with probability proportional to its fitness."""
    if not population:
        raise ValueError("cannot select from an empty population")
    rng = _rng(rng)
    total = sum(ind.fitness for ind in population)
    threshold = rng.random() * total
    cumulative = 0
    for individual in population:
        cumulative += individual.fitness
        if threshold < cumulative:
            return individual
    return population[-1]


def multi_point_crossover(
    parent1: Individual, parent2: Individual, fixed: Mask, rng=None
) -> tuple[Individual, Individual]:
    """Swap the free cells of a random inclusive range of rows between the children."""
    rng = _rng(rng)
    child1 = Individual([row[:] for row in parent1.grid])
    child2 = Individual([row[:] for row in parent2.grid])
    if rng.random() < CROSSOVER_RATE:
        point1 = rng.randrange(SIZE)
        point2 = rng.randrange(SIZE)
        low, high = min(point1, point2), max(point1, point2)
        _swap_rows(child1.grid, child2.grid, range(low, high + 1), fixed)
    return child1, child2


def uniform_crossover(
    parent1: Individual, parent2: Individual, fixed: Mask, rng=None
) -> Individual:
    """Take each free cell from either parent with equal chance; fixed cells from the first."""
    rng = _rng(rng)
    grid = [
        [
            a if fixed[i][j] or rng.random() < 0.5 else b
            for j, (a, b) in enumerate(zip(row1, row2))
        ]
        for i, (row1, row2) in enumerate(zip(parent1.grid, parent2.grid))
    ]
    return Individual(grid)


def simple_mutate(individual: Individual, fixed: Mask, rng=None) -> None:
    """Swap two free cells inside boxes chosen at the mutation rate."""
    mutate_boxes(individual, fixed, rng)