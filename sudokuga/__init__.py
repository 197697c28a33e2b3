"""Sudoku puzzle generation and a genetic-algorithm solver."""

__version__ = "0.1.0"