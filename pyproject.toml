[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sudokuga"
version = "0.1.0"
description = "Generate Sudoku puzzles and solve them with a genetic algorithm"
requires-python = ">=3.10"
dependencies = []
keywords = ["sudoku", "genetic-algorithm", "puzzle", "evolutionary"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sudokuga = "sudokuga.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sudokuga"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
