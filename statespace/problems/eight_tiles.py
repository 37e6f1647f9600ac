# statespace/problems/eight_tiles.py
from __future__ import annotations
from enum import Enum
from typing import List, Sequence, Tuple

from ..core.problem import ContractViolation

Board = Tuple[Tuple[int, ...], ...]
Coord = Tuple[int, int]

EMPTY = 0
SIZE = 3


class EightTilesAction(Enum):
    """Direction the empty cell moves in."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def __repr__(self) -> str:
        return self.name


class EightTiles:
    """
    3x3 sliding-tile board. 0 marks the empty cell.

    - State: immutable tuple-of-tuples, hashable by value
    - available_actions(s): moves of the empty cell that stay on the board
    - apply(s, a): swap the empty cell with its neighbour in direction a
    """
    __slots__ = ("tiles",)

    def __init__(self, tiles: Sequence[Sequence[int]]):
        self.tiles: Board = tuple(tuple(int(v) for v in row) for row in tiles)
        self.check_validity()

    @classmethod
    def _unchecked(cls, board: Board) -> "EightTiles":
        # successors of a valid board are valid; skip the check on the hot path
        obj = cls.__new__(cls)
        obj.tiles = board
        return obj

    @classmethod
    def solved(cls) -> "EightTiles":
        return cls([[1, 2, 3], [4, 5, 6], [7, 8, 0]])

    def check_validity(self) -> None:
        if len(self.tiles) != SIZE or any(len(row) != SIZE for row in self.tiles):
            raise ContractViolation(f"board must be {SIZE}x{SIZE}, got {self.tiles!r}")
        values = sorted(v for row in self.tiles for v in row)
        if values.count(EMPTY) != 1:
            raise ContractViolation(f"board needs exactly one empty cell, got {values.count(EMPTY)}")
        if values != list(range(SIZE * SIZE)):
            raise ContractViolation(f"tiles must be 1..8 each exactly once, got {self.tiles!r}")

    def find_empty(self) -> Coord:
        for y, row in enumerate(self.tiles):
            for x, v in enumerate(row):
                if v == EMPTY:
                    return x, y
        raise ContractViolation("no empty tile found")

    def available_actions(self) -> List[EightTilesAction]:
        x, y = self.find_empty()
        actions = []
        if x > 0:
            actions.append(EightTilesAction.LEFT)
        if x < SIZE - 1:
            actions.append(EightTilesAction.RIGHT)
        if y > 0:
            actions.append(EightTilesAction.UP)
        if y < SIZE - 1:
            actions.append(EightTilesAction.DOWN)
        return actions

    def apply(self, action: EightTilesAction) -> "EightTiles":
        x, y = self.find_empty()
        dx, dy = action.value
        nx, ny = x + dx, y + dy
        if not (0 <= nx < SIZE and 0 <= ny < SIZE):
            raise ContractViolation(f"{action!r} moves the empty cell off the board from {(x, y)}")
        grid = [list(row) for row in self.tiles]
        grid[y][x], grid[ny][nx] = grid[ny][nx], EMPTY
        return EightTiles._unchecked(tuple(tuple(row) for row in grid))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, EightTiles) and self.tiles == other.tiles

    def __hash__(self) -> int:
        return hash(self.tiles)

    def __repr__(self) -> str:
        return f"EightTiles({[list(r) for r in self.tiles]!r})"

    def __str__(self) -> str:
        return "\n".join(
            "".join("  " if v == EMPTY else f"{v:2d}" for v in row) for row in self.tiles
        )


class EightTilesSpace:
    """Goal: 1 2 3 / 4 5 6 / 7 8 _."""

    def __init__(self, initial: EightTiles):
        self._initial = initial
        self._goal = EightTiles.solved()

    def initial_state(self) -> EightTiles:
        return self._initial

    def is_goal(self, state: EightTiles) -> bool:
        return state == self._goal


def eight_tiles_space(tiles: Sequence[Sequence[int]] = ((1, 2, 3), (4, 5, 6), (7, 0, 8))) -> EightTilesSpace:
    """
    Factory for a ready-to-use EightTilesSpace. The default board is one move
    (empty cell right) from solved.
    """
    return EightTilesSpace(EightTiles(tiles))
