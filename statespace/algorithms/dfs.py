# statespace/algorithms/dfs.py
# Depth-First Search: the generic graph search over a LIFO stack.
from __future__ import annotations
from typing import Optional

from ..core.frontiers import LIFOStack
from ..core.metrics import SearchResult
from ..core.problem import Space
from .graph_search import graph_search


def depth_first_search(space: Space, trace_memory: Optional[bool] = None) -> Optional[SearchResult]:
    """No shortest-path guarantee; the first goal reached in stack order wins."""
    return graph_search(space, LIFOStack, "DFS", trace_memory=trace_memory)
