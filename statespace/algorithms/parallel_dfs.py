# statespace/algorithms/parallel_dfs.py
# DFS whose per-node expansion fans out over a fixed thread pool.
from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

from ..core import config
from ..core.cache import StateCache
from ..core.frontiers import LIFOStack
from ..core.metrics import SearchResult
from ..core.node import Node
from ..core.problem import Space
from .graph_search import graph_search

logger = logging.getLogger(__name__)


def parallel_depth_first_search(
    space: Space,
    workers: Optional[int] = None,
    trace_memory: Optional[bool] = None,
) -> Optional[SearchResult]:
    """
    Same goal-test/expansion order as depth_first_search, but the children of
    each popped node are built concurrently.

    Only child production runs on the pool; the frontier and the duplicate
    cache are touched by the calling thread alone. Children are filtered
    against the cache before the batch is appended, so two siblings that lead
    to the same not-yet-expanded state are both pushed. The second one is
    discarded when it is popped.
    """
    if workers is None:
        workers = config.WORKERS
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    logger.debug("parallel DFS with %d workers", workers)

    with ThreadPoolExecutor(max_workers=workers) as pool:

        def expand(node: Node, cache: StateCache) -> Tuple[List[Node], int]:
            actions = list(node.state.available_actions())
            children = list(pool.map(node.apply, actions))
            fresh = [c for c in children if c.state not in cache]
            return fresh, len(children)

        return graph_search(space, LIFOStack, f"ParallelDFS(w={workers})", expand=expand,
                            trace_memory=trace_memory)
