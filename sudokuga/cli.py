"""Command line entry: generate a puzzle and evolve a solution for it."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable
from dataclasses import dataclass

from sudokuga.ga import (
    MAX_FITNESS,
    NUM_GENERATIONS,
    POPULATION_SIZE,
    Individual,
    crossover,
    evaluate_population,
    initialize_population,
    mutate,
    select_parent,
)
from sudokuga.grid import Grid, Mask, fill_grid, format_grid, init_fixed
from sudokuga.sudoku import Difficulty, generate_sudoku


@dataclass
class EvolutionResult:
    """Outcome of a run: the best individual seen and the last generation run."""

    best: Individual
    generation: int

    @property
    def solved(self) -> bool:
        return self.best.fitness == MAX_FITNESS


def evolve(
    grid: Grid,
    fixed: Mask,
    generations: int = NUM_GENERATIONS,
    rng=None,
    report: Callable[[str], None] | None = None,
) -> EvolutionResult:
    """Run the genetic algorithm until a perfect grid or the generation limit."""
    if generations < 1:
        raise ValueError(f"generations must be at least 1, got {generations}")
    rng = rng if rng is not None else random
    say = report if report is not None else (lambda message: None)

    population = initialize_population(grid, fixed, rng, POPULATION_SIZE)
    best_ever: Individual | None = None
    generation = 0

    for generation in range(generations):
        evaluate_population(population)
        current = max(population, key=lambda ind: ind.fitness)

        if best_ever is None or current.fitness > best_ever.fitness:
            best_ever = current.copy()
            say(
                f"Generation {generation}: New better solution - "
                f"fitness = {best_ever.fitness}"
            )
        elif generation % 1000 == 0:
            say(
                f"Generation {generation}: Current best fitness = {current.fitness}, "
                f"Best ever fitness = {best_ever.fitness}"
            )

        if best_ever.fitness == MAX_FITNESS:
            say(
                f"Perfect solution found in generation {generation}: "
                f"fitness = {best_ever.fitness}"
            )
            break

        next_population: list[Individual] = []
        while len(next_population) < POPULATION_SIZE:
            parent1 = select_parent(population, rng)
            parent2 = select_parent(population, rng)
            child1, child2 = crossover(parent1, parent2, fixed, rng)
            mutate(child1, fixed, rng)
            mutate(child2, fixed, rng)
            next_population.extend((child1, child2))
        population = next_population[:POPULATION_SIZE]

    return EvolutionResult(best_ever, generation)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="sudokuga", description="Solve a generated sudoku with a genetic algorithm."
    )
    parser.add_argument(
        "--difficulty", type=int, choices=[d.value for d in Difficulty], default=2
    )
    parser.add_argument("--generations", type=int, default=NUM_GENERATIONS)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    if args.generations < 1:
        parser.error("--generations must be at least 1")

    rng = random.Random(args.seed)
    grid = generate_sudoku(9, 3, Difficulty(args.difficulty), rng)
    fixed = init_fixed(grid)
    fill_grid(grid, fixed, rng)

    print("initial filled grid:")
    print(format_grid(grid), end="")

    result = evolve(grid, fixed, args.generations, rng, print)

    print("\n--- THE END ---")
    print(f"Best solution (fitness = {result.best.fitness}):")
    print(format_grid(result.best.grid), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())