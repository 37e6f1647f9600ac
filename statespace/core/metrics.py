# statespace/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import time, tracemalloc

from .node import Node
from .problem import Action, State


@dataclass
class SearchResult:
    """
    Outcome of a successful search.

    generated: successor states produced, duplicates included
    expanded:  distinct states processed (duplicate-cache size when the goal was popped)
    """
    end_state: State
    path: List[Action]
    generated: int
    expanded: int
    algo: str = ""
    time_s: float = 0.0
    peak_kb: int = 0

    @classmethod
    def from_node(cls, node: Node, generated: int, expanded: int, **kwargs) -> "SearchResult":
        return cls(node.state, list(node.path), generated, expanded, **kwargs)

    @property
    def depth(self) -> int:
        return len(self.path)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly summary (states and actions go through repr)."""
        return {
            "algo": self.algo,
            "success": True,
            "path": [repr(a) for a in self.path],
            "depth": self.depth,
            "generated": self.generated,
            "expanded": self.expanded,
            "time_s": self.time_s,
            "peak_kb": self.peak_kb,
        }


class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    Leaves tracemalloc alone if someone else already started it.
    With trace_memory=False only the clock runs and peak_kb stays 0.
    """
    def __init__(self, trace_memory: bool = True) -> None:
        self.trace_memory = trace_memory
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False
        self._owns_trace: bool = False

    def __enter__(self) -> "MeasuredRun":
        self._owns_trace = self.trace_memory and not tracemalloc.is_tracing()
        if self._owns_trace:
            tracemalloc.start()
        self._tracing = self.trace_memory
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            self._peak_kb = max(self._peak_kb, peak // 1024)
        if self._owns_trace:
            tracemalloc.stop()
        self._tracing = False
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        """Approx peak KB. Works before and after __exit__."""
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
