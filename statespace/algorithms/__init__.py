"""Search entry points."""
from __future__ import annotations
import inspect
from typing import Callable, Dict, Optional

from ..core.metrics import SearchResult
from ..core.problem import Space
from .bfs import breadth_first_search
from .dfs import depth_first_search
from .graph_search import graph_search
from .parallel_dfs import parallel_depth_first_search

ALGORITHMS: Dict[str, Callable[..., Optional[SearchResult]]] = {
    "dfs": depth_first_search,
    "bfs": breadth_first_search,
    "parallel_dfs": parallel_depth_first_search,
}


def search(space: Space, strategy: str = "dfs", **kwargs) -> Optional[SearchResult]:
    """
    Run the algorithm registered under `strategy` ("dfs", "bfs" or "parallel_dfs").

    Keyword arguments go to that algorithm: every strategy takes trace_memory,
    only parallel_dfs takes workers. Anything else raises ValueError.
    """
    try:
        fn = ALGORITHMS[strategy]
    except KeyError:
        raise ValueError(f"unknown strategy {strategy!r}; choose from {sorted(ALGORITHMS)}") from None
    accepted = inspect.signature(fn).parameters
    unexpected = sorted(k for k in kwargs if k not in accepted)
    if unexpected:
        raise ValueError(f"strategy {strategy!r} does not accept {unexpected}")
    return fn(space, **kwargs)


__all__ = [
    "ALGORITHMS",
    "breadth_first_search",
    "depth_first_search",
    "graph_search",
    "parallel_depth_first_search",
    "search",
]
