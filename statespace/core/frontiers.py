# statespace/core/frontiers.py
from __future__ import annotations
import heapq
from collections import deque
from typing import Callable, Dict, Iterable, Optional, Type

from .node import Node
from .problem import State


class Frontier:
    """
    Nodes waiting to be expanded. Subclasses only decide the pop order;
    the search loop is written once against this interface.
    """

    @classmethod
    def seeded(cls, initial_state: State, **kwargs) -> "Frontier":
        f = cls(**kwargs)
        f.push(Node(initial_state))
        return f

    def push(self, node: Node) -> None:
        raise NotImplementedError

    def pop(self) -> Optional[Node]:
        """Next node to process, or None when the frontier is empty."""
        raise NotImplementedError

    def peek(self) -> Optional[Node]:
        raise NotImplementedError

    def extend(self, nodes: Iterable[Node]) -> None:
        for n in nodes:
            self.push(n)

    def __len__(self) -> int:
        raise NotImplementedError

    def __bool__(self) -> bool:
        return len(self) > 0


class FIFOQueue(Frontier):
    """Breadth-first order: every node at depth d leaves before any at depth d+1."""
    def __init__(self):
        self.q = deque()
    def push(self, node): self.q.append(node)
    def extend(self, nodes): self.q.extend(nodes)
    def pop(self): return self.q.popleft() if self.q else None
    def peek(self): return self.q[0] if self.q else None
    def __len__(self): return len(self.q)


class LIFOStack(Frontier):
    """Depth-first order: most recently pushed node comes out first."""
    def __init__(self):
        self.q = []
    def push(self, node): self.q.append(node)
    def extend(self, nodes): self.q.extend(nodes)
    def pop(self): return self.q.pop() if self.q else None
    def peek(self): return self.q[-1] if self.q else None
    def __len__(self): return len(self.q)


class PriorityQueue(Frontier):
    """Min-heap by key(node). Reserved for cost-aware search; no algorithm uses it yet."""
    def __init__(self, key: Callable[[Node], float]):
        self.key = key
        self.h = []
        self.counter = 0  # tie-breaker for stability

    def push(self, node):
        self.counter += 1
        heapq.heappush(self.h, (self.key(node), self.counter, node))

    def pop(self):
        if not self.h:
            return None
        return heapq.heappop(self.h)[2]

    def peek(self):
        return self.h[0][2] if self.h else None

    def __len__(self): return len(self.h)


FRONTIERS: Dict[str, Type[Frontier]] = {
    "stack": LIFOStack,
    "queue": FIFOQueue,
}
