# statespace/core/utils.py
# Helpers for checking a reported solution against its space.
from __future__ import annotations
from typing import Iterable

from .node import Node
from .problem import Action, CostAction, Space, State


def replay_path(space: Space, actions: Iterable[Action]) -> State:
    """Apply `actions` one by one from the space's initial state and return where they lead."""
    s = space.initial_state()
    for a in actions:
        s = s.apply(a)
    return s


def path_cost(node: Node) -> float:
    """Sum of step costs along node.path; actions without a cost() count 1."""
    total = 0.0
    for a in node.path:
        total += float(a.cost()) if isinstance(a, CostAction) else 1.0
    return total
