# statespace/problems/sudoku.py
from __future__ import annotations
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

from ..core.problem import ContractViolation

N = 9
BOX = 3
EMPTY = 0


class SudokuAction(NamedTuple):
    """Write `value` into column x, row y."""
    x: int
    y: int
    value: int


class SudokuBoard:
    """
    9x9 Sudoku grid stored row-major as a tuple of 81 ints (0 = empty).

    - available_actions(s): every (empty cell, value) whose assignment keeps the board valid;
      an already invalid board offers nothing
    - apply(s, a): a new board with the cell filled
    """
    __slots__ = ("cells",)

    def __init__(self, cells: Optional[Iterable[int]] = None):
        cells = tuple(cells) if cells is not None else (EMPTY,) * (N * N)
        if len(cells) != N * N:
            raise ContractViolation(f"board needs {N * N} cells, got {len(cells)}")
        if any(not (0 <= v <= N) for v in cells):
            raise ContractViolation(f"cell values must be in 0..{N}")
        self.cells: Tuple[int, ...] = cells

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "SudokuBoard":
        return cls(v for row in rows for v in row)

    @classmethod
    def parse(cls, text: str) -> "SudokuBoard":
        """81 digits, '.' or '0' for an empty cell; whitespace ignored."""
        chars = [c for c in text if not c.isspace()]
        try:
            return cls(EMPTY if c == "." else int(c) for c in chars)
        except ValueError as e:
            raise ContractViolation(f"cannot parse sudoku board: {e}") from None

    def get(self, x: int, y: int) -> int:
        return self.cells[y * N + x]

    def set(self, x: int, y: int, value: int) -> "SudokuBoard":
        """Copy of the board with (x, y) = value. Boards are never modified in place."""
        cells = list(self.cells)
        cells[y * N + x] = value
        return SudokuBoard(cells)

    def row(self, y: int) -> List[int]:
        return [self.get(x, y) for x in range(N)]

    def column(self, x: int) -> List[int]:
        return [self.get(x, y) for y in range(N)]

    def box(self, x: int, y: int) -> List[int]:
        bx, by = (x // BOX) * BOX, (y // BOX) * BOX
        return [self.get(bx + i, by + j) for j in range(BOX) for i in range(BOX)]

    def is_full(self) -> bool:
        return EMPTY not in self.cells

    def is_valid(self) -> bool:
        """No digit repeated in any row, column or 3x3 box (empty cells ignored)."""
        groups = [self.row(i) for i in range(N)]
        groups += [self.column(i) for i in range(N)]
        groups += [self.box(bx, by) for by in range(0, N, BOX) for bx in range(0, N, BOX)]
        for g in groups:
            filled = [v for v in g if v != EMPTY]
            if len(filled) != len(set(filled)):
                return False
        return True

    def candidates(self, x: int, y: int) -> List[int]:
        if self.get(x, y) != EMPTY:
            return []
        used = set(self.row(y)) | set(self.column(x)) | set(self.box(x, y))
        return [v for v in range(1, N + 1) if v not in used]

    def available_actions(self) -> List[SudokuAction]:
        if not self.is_valid():
            return []
        return [
            SudokuAction(x, y, v)
            for y in range(N)
            for x in range(N)
            for v in self.candidates(x, y)
        ]

    def apply(self, action: SudokuAction) -> "SudokuBoard":
        x, y, value = action
        if not (0 <= x < N and 0 <= y < N and 1 <= value <= N):
            raise ContractViolation(f"{action!r} is outside the board")
        if self.get(x, y) != EMPTY:
            raise ContractViolation(f"{action!r} targets a filled cell ({self.get(x, y)})")
        if value not in self.candidates(x, y):
            raise ContractViolation(f"{action!r} repeats a digit in its row, column or box")
        return self.set(x, y, value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SudokuBoard) and self.cells == other.cells

    def __hash__(self) -> int:
        return hash(self.cells)

    def __repr__(self) -> str:
        return "SudokuBoard.parse(%r)" % "".join(str(v) if v else "." for v in self.cells)

    def __str__(self) -> str:
        return "\n".join(
            "".join(str(v) if v else "." for v in self.row(y)) for y in range(N)
        )


class SudokuSpace:
    """Goal: every cell filled and the board valid."""

    def __init__(self, board: SudokuBoard):
        self.board = board

    def initial_state(self) -> SudokuBoard:
        return self.board

    def is_goal(self, state: SudokuBoard) -> bool:
        return state.is_full() and state.is_valid()


# A finished grid; benchmark and test boards are carved out of it.
SOLVED = SudokuBoard.parse(
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


def sudoku_space(blanks: Sequence[Tuple[int, int]] = ((0, 0), (4, 1), (8, 2), (1, 3), (5, 4), (6, 8))) -> SudokuSpace:
    """Factory: the SOLVED grid with the given (x, y) cells cleared."""
    board = SOLVED
    for x, y in blanks:
        board = board.set(x, y, EMPTY)
    return SudokuSpace(board)
