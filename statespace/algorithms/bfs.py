from __future__ import annotations
from typing import Optional

from ..core.frontiers import FIFOQueue
from ..core.metrics import SearchResult
from ..core.problem import Space
from .graph_search import graph_search


def breadth_first_search(space: Space, trace_memory: Optional[bool] = None) -> Optional[SearchResult]:
    return graph_search(space, FIFOQueue, "BFS", trace_memory=trace_memory)
