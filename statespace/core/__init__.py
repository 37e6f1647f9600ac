"""Building blocks shared by every search algorithm."""

from .problem import Action, ContractViolation, CostAction, Space, State
from .node import Node
from .frontiers import FRONTIERS, FIFOQueue, Frontier, LIFOStack, PriorityQueue
from .cache import StateCache
from .metrics import MeasuredRun, SearchResult
from .utils import path_cost, replay_path

__all__ = [
    "Action", "ContractViolation", "CostAction", "Space", "State",
    "Node",
    "FRONTIERS", "FIFOQueue", "Frontier", "LIFOStack", "PriorityQueue",
    "StateCache",
    "MeasuredRun", "SearchResult",
    "path_cost", "replay_path",
]
