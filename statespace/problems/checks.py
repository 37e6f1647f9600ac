from __future__ import annotations
from collections import deque
from collections.abc import Hashable

from ..core.problem import ContractViolation, Space


def sanity_check_space(space: Space, max_states: int = 10_000) -> str:
    """
    Walks states breadth-first and checks the contract the search engine relies on:
    every state hashable, apply() deterministic, and apply() never mutating its input.
    """
    seen = set()
    q = deque([space.initial_state()])
    while q and len(seen) < max_states:
        s = q.popleft()
        if not isinstance(s, Hashable):
            raise ContractViolation(f"unhashable state {s!r}")
        if s in seen:
            continue
        seen.add(s)
        before = hash(s)
        for a in s.available_actions():
            s2 = s.apply(a)
            if s2 != s.apply(a):
                raise ContractViolation(f"apply is not deterministic for (s={s!r}, a={a!r})")
            q.append(s2)
        if hash(s) != before:
            raise ContractViolation(f"apply mutated its input state {s!r}")
    return f"OK: visited {len(seen)} states; contract holds."
