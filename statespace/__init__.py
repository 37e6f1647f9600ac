"""
statespace: depth-first and breadth-first search over user-defined state spaces.

A client supplies a State (available_actions, apply; hashable and immutable)
and a Space (initial_state, is_goal). The engine returns a SearchResult or
None when no goal is reachable.
"""

from .core import (
    FRONTIERS,
    Action,
    ContractViolation,
    CostAction,
    FIFOQueue,
    Frontier,
    LIFOStack,
    MeasuredRun,
    Node,
    PriorityQueue,
    SearchResult,
    Space,
    State,
    StateCache,
    path_cost,
    replay_path,
)
from .algorithms import (
    ALGORITHMS,
    breadth_first_search,
    depth_first_search,
    graph_search,
    parallel_depth_first_search,
    search,
)

__version__ = "0.1.0"

__all__ = [
    "FRONTIERS", "Action", "ContractViolation", "CostAction", "FIFOQueue", "Frontier",
    "LIFOStack", "MeasuredRun", "Node", "PriorityQueue", "SearchResult", "Space", "State",
    "StateCache", "path_cost", "replay_path",
    "ALGORITHMS", "breadth_first_search", "depth_first_search", "graph_search",
    "parallel_depth_first_search", "search",
]
