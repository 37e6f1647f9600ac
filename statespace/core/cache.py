# statespace/core/cache.py
# Duplicate-state protection: the set of states that have already been expanded.
from __future__ import annotations
from typing import Set

from .problem import State


class StateCache:
    """
    Records expanded states (popped and had their successors generated),
    not states that are merely sitting in the frontier. Grows monotonically
    for the lifetime of one search call.
    """

    def __init__(self):
        self.seen: Set[State] = set()

    def contains(self, state: State) -> bool:
        return state in self.seen

    def insert(self, state: State) -> None:
        if state in self.seen:
            raise ValueError(f"state {state!r} was already marked expanded")
        self.seen.add(state)

    def __contains__(self, state: State) -> bool:
        return self.contains(state)

    def __len__(self) -> int:
        return len(self.seen)
