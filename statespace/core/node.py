# statespace/core/node.py
# A search node: a state plus the actions taken from the initial state to reach it.
# The path is shared with the parent through a back-link, so extending a node is O(1)
# even on very deep DFS branches; `path` rebuilds the action sequence on demand.
from __future__ import annotations
from typing import Iterator, Optional, Tuple
from .problem import Action, ContractViolation, State


class Node:
    __slots__ = ("state", "parent", "action", "depth")

    def __init__(self, state: State, parent: Optional["Node"] = None, action: Optional[Action] = None):
        self.state = state
        self.parent = parent
        self.action = action
        self.depth = 0 if parent is None else parent.depth + 1

    @property
    def path(self) -> Tuple[Action, ...]:
        """Actions from the root to this node, oldest first. Empty for the root."""
        actions = []
        cur = self
        while cur.parent is not None:
            actions.append(cur.action)
            cur = cur.parent
        actions.reverse()
        return tuple(actions)

    def apply(self, action: Action) -> "Node":
        """Child node reached by `action`. The parent is left untouched."""
        s2 = self.state.apply(action)
        if s2 is None:
            raise ContractViolation(
                f"apply returned None for (s={self.state!r}, a={action!r}). "
                "apply must build and return the successor state."
            )
        return Node(s2, parent=self, action=action)

    def expand(self) -> Iterator["Node"]:
        """Generate one child per available action, in the state's action order."""
        for a in self.state.available_actions():
            yield self.apply(a)

    def __repr__(self) -> str:
        return f"Node(state={self.state!r}, depth={self.depth})"
