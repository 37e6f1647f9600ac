from __future__ import annotations
import threading
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List

import pytest

from statespace import ContractViolation


@dataclass(frozen=True)
class GraphState:
    """A vertex of a small explicit graph; the action is the name of the next vertex."""
    name: str
    graph: Dict[str, List[str]] = field(compare=False, repr=False)
    calls: Counter = field(compare=False, repr=False)
    threads: set = field(compare=False, repr=False)

    def available_actions(self) -> List[str]:
        self.calls[self.name] += 1
        return list(self.graph.get(self.name, []))

    def apply(self, action: str) -> "GraphState":
        if action not in self.graph.get(self.name, []):
            raise ContractViolation(f"{self.name} -> {action} is not an edge")
        self.threads.add(threading.current_thread().name)
        return GraphState(action, self.graph, self.calls, self.threads)


class GraphSpace:
    def __init__(self, graph: Dict[str, List[str]], start: str, goal: str):
        self.graph = graph
        self.start = start
        self.goal = goal
        self.calls: Counter = Counter()
        self.threads: set = set()

    def initial_state(self) -> GraphState:
        return GraphState(self.start, self.graph, self.calls, self.threads)

    def is_goal(self, state: GraphState) -> bool:
        return state.name == self.goal


@pytest.fixture
def make_space():
    return GraphSpace


@pytest.fixture
def tree_space():
    # acyclic, finite, solvable
    return GraphSpace({"A": ["B", "C"], "B": ["D", "E"], "C": ["F"], "E": ["G"]}, "A", "G")


@pytest.fixture
def detour_space():
    # stack order reaches G through the long branch first
    return GraphSpace({"A": ["B", "C"], "B": ["G"], "C": ["D"], "D": ["G"]}, "A", "G")


@pytest.fixture
def cyclic_space():
    # A <-> B inverse moves, goal unreachable
    return GraphSpace({"A": ["B"], "B": ["A", "C"], "C": ["B"]}, "A", "Z")

