"""Example clients of the search engine."""

from .checks import sanity_check_space
from .eight_tiles import EightTiles, EightTilesAction, EightTilesSpace, eight_tiles_space
from .sudoku import SOLVED, SudokuAction, SudokuBoard, SudokuSpace, sudoku_space

PROBLEMS = {
    "eight_tiles": eight_tiles_space,
    "sudoku": sudoku_space,
}

__all__ = [
    "PROBLEMS",
    "sanity_check_space",
    "EightTiles", "EightTilesAction", "EightTilesSpace", "eight_tiles_space",
    "SOLVED", "SudokuAction", "SudokuBoard", "SudokuSpace", "sudoku_space",
]
