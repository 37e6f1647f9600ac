# statespace/core/problem.py
# Defines the interface a client problem must satisfy (states, actions, space).
from __future__ import annotations
from collections.abc import Hashable
from typing import Protocol, Sequence, runtime_checkable

Action = Hashable


class ContractViolation(ValueError):
    """A client State/Space described itself inconsistently (illegal action,
    missing structural marker, unhashable state). Never retried."""


@runtime_checkable
class CostAction(Protocol):
    """Action that carries a step cost. Not used by DFS/BFS."""
    def cost(self) -> float: ...


class State(Protocol):
    """
    Immutable search state.

    - must be hashable and compare by value (it is used as a set key)
    - available_actions(): the legal actions from this state
    - apply(a): the successor state; never mutates self
    """
    def __hash__(self) -> int: ...
    def __eq__(self, other: object) -> bool: ...
    def available_actions(self) -> Sequence[Action]: ...
    def apply(self, action: Action) -> "State": ...


class Space(Protocol):
    """Binds one initial state to a goal predicate."""
    def initial_state(self) -> State: ...
    def is_goal(self, state: State) -> bool: ...


def require_hashable(state) -> None:
    if not isinstance(state, Hashable):
        raise ContractViolation(
            f"state {state!r} is not hashable; states must define __hash__ and __eq__ "
            "to be used in the duplicate-state cache."
        )
