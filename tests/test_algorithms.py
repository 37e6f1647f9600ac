from __future__ import annotations
from dataclasses import dataclass

import pytest

from statespace import (
    ALGORITHMS,
    ContractViolation,
    FIFOQueue,
    breadth_first_search,
    depth_first_search,
    graph_search,
    parallel_depth_first_search,
    replay_path,
    search,
)
from statespace.core import config

ALL = [depth_first_search, breadth_first_search, parallel_depth_first_search]


@pytest.mark.parametrize("algo", ALL)
def test_acyclic_solvable_space_is_solved(algo, tree_space):
    r = algo(tree_space)
    assert r is not None
    assert tree_space.is_goal(r.end_state)
    assert replay_path(tree_space, r.path) == r.end_state
    assert r.path == ["B", "E", "G"]
    assert r.generated >= r.expanded


def test_bfs_counts_on_tree(tree_space):
    r = breadth_first_search(tree_space)
    # pops A, B, C, D, E, F then G
    assert r.expanded == 6
    assert r.generated == 6
    assert r.algo == "BFS"


def test_dfs_can_return_a_longer_path_than_bfs(detour_space):
    dfs = depth_first_search(detour_space)
    bfs = breadth_first_search(detour_space)
    assert dfs.path == ["C", "D", "G"]
    assert bfs.path == ["B", "G"]
    assert len(dfs.path) > len(bfs.path)
    assert (dfs.generated, dfs.expanded) == (4, 3)


def test_bfs_path_is_shortest(make_space):
    graph = {
        "S": ["A", "B"],
        "A": ["C"],
        "C": ["D"],
        "D": ["G"],
        "B": ["E"],
        "E": ["G"],
    }
    r = breadth_first_search(make_space(graph, "S", "G"))
    assert r.path == ["B", "E", "G"]


@pytest.mark.parametrize("algo", ALL)
def test_inverse_actions_do_not_reexpand_states(algo, cyclic_space):
    assert algo(cyclic_space) is None
    # every state's actions were enumerated exactly once
    assert dict(cyclic_space.calls) == {"A": 1, "B": 1, "C": 1}


@pytest.mark.parametrize("algo", ALL)
def test_exhaustion_is_reported_as_no_solution(algo, make_space):
    assert algo(make_space({"A": ["B"], "B": []}, "A", "Z")) is None


@pytest.mark.parametrize("algo", ALL)
def test_root_goal_has_empty_path(algo, make_space):
    r = algo(make_space({"A": ["B"]}, "A", "A"))
    assert r.path == []
    assert r.generated == 0
    assert r.expanded == 0


def test_first_goal_in_pop_order_wins(make_space):
    # G is generated twice; the goal check on pop wins on the first copy
    r = breadth_first_search(make_space({"A": ["B", "C"], "B": ["G"], "C": ["G"]}, "A", "G"))
    assert r.path == ["B", "G"]
    assert r.expanded == 3


def test_contract_violations_abort_the_search(make_space):
    class Lying:
        def __init__(self, n):
            self.n = n

        def __eq__(self, other):
            return isinstance(other, Lying) and other.n == self.n

        def __hash__(self):
            return hash(self.n)

        def available_actions(self):
            return ["jump"]

        def apply(self, a):
            raise ContractViolation(f"{a} is not legal")

    class LyingSpace:
        def initial_state(self):
            return Lying(0)

        def is_goal(self, s):
            return False

    for algo in ALL:
        with pytest.raises(ContractViolation):
            algo(LyingSpace())


def test_unhashable_states_are_rejected():
    @dataclass
    class Mutable:
        n: int

        def available_actions(self):
            return []

        def apply(self, a):
            return self

    class S:
        def initial_state(self):
            return Mutable(0)

        def is_goal(self, s):
            return False

    with pytest.raises(ContractViolation):
        depth_first_search(S())


def test_graph_search_accepts_any_frontier(tree_space):
    r = graph_search(tree_space, FIFOQueue, "custom")
    assert r.algo == "custom"
    assert r.path == breadth_first_search(tree_space).path


def test_search_dispatches_by_name(tree_space):
    assert set(ALGORITHMS) == {"dfs", "bfs", "parallel_dfs"}
    assert search(tree_space, "bfs").algo == "BFS"
    assert search(tree_space).algo == "DFS"
    assert search(tree_space, "parallel_dfs", workers=2).algo == "ParallelDFS(w=2)"
    with pytest.raises(ValueError):
        search(tree_space, "astar")


@pytest.mark.parametrize("strategy", ["dfs", "bfs"])
def test_search_rejects_options_the_strategy_does_not_take(tree_space, strategy):
    with pytest.raises(ValueError, match=strategy):
        search(tree_space, strategy, workers=2)
    with pytest.raises(ValueError, match="depth_limit"):
        search(tree_space, "parallel_dfs", depth_limit=3)


def test_trace_memory_argument_overrides_the_tunable(tree_space, monkeypatch):
    monkeypatch.setattr(config, "TRACE_MEMORY", True)
    for strategy in ALGORITHMS:
        assert search(tree_space, strategy, trace_memory=False).peak_kb == 0
