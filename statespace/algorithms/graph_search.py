# statespace/algorithms/graph_search.py
# The one search loop. DFS, BFS and parallel DFS differ only in the frontier
# they inject and in how a popped node's children are produced.
from __future__ import annotations
import logging
from typing import Callable, List, Optional, Tuple, Type

from ..core import config
from ..core.cache import StateCache
from ..core.frontiers import Frontier
from ..core.metrics import MeasuredRun, SearchResult
from ..core.node import Node
from ..core.problem import Space, require_hashable

logger = logging.getLogger(__name__)

# (node, cache) -> (children to push, number of children generated)
Expander = Callable[[Node, StateCache], Tuple[List[Node], int]]


def expand_sequential(node: Node, cache: StateCache) -> Tuple[List[Node], int]:
    children = list(node.expand())
    return children, len(children)


def graph_search(
    space: Space,
    frontier_cls: Type[Frontier],
    name: str,
    expand: Expander = expand_sequential,
    trace_memory: Optional[bool] = None,
) -> Optional[SearchResult]:
    """
    Generic graph search.

    trace_memory=None falls back to the STATESPACE_TRACE_MEMORY tunable.

    The goal test runs when a node is popped and before the duplicate check,
    so the first goal node in pop order wins even if its state was already
    expanded. Returns None when the frontier runs dry.
    """
    initial = space.initial_state()
    require_hashable(initial)

    frontier = frontier_cls.seeded(initial)
    cache = StateCache()
    generated = 0

    if trace_memory is None:
        trace_memory = config.TRACE_MEMORY

    with MeasuredRun(trace_memory=trace_memory) as meter:
        while True:
            node = frontier.pop()
            if node is None:
                logger.debug("%s: frontier exhausted after %d generated / %d expanded",
                             name, generated, len(cache))
                return None

            if space.is_goal(node.state):
                logger.debug("%s: goal at depth %d (generated=%d, expanded=%d)",
                             name, node.depth, generated, len(cache))
                return SearchResult.from_node(
                    node, generated, len(cache),
                    algo=name, time_s=meter.elapsed, peak_kb=meter.peak_kb,
                )

            if node.state in cache:
                continue

            cache.insert(node.state)
            children, produced = expand(node, cache)
            frontier.extend(children)
            generated += produced
