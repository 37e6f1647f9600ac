from __future__ import annotations

import pytest

from statespace import depth_first_search, parallel_depth_first_search, replay_path
from statespace.core import config
from statespace.problems import sudoku_space


def _lattice(n):
    # n x n grid, moves right/down/left/up, many paths to every cell
    graph = {}
    for r in range(n):
        for c in range(n):
            nbrs = []
            for dr, dc in ((0, 1), (1, 0), (0, -1), (-1, 0)):
                rr, cc = r + dr, c + dc
                if 0 <= rr < n and 0 <= cc < n:
                    nbrs.append(f"{rr},{cc}")
            graph[f"{r},{c}"] = nbrs
    return graph


@pytest.mark.parametrize("workers", [1, 2, 4])
def test_matches_sequential_dfs(workers, make_space):
    graph = _lattice(5)
    seq = depth_first_search(make_space(graph, "0,0", "4,4"))
    par = parallel_depth_first_search(make_space(graph, "0,0", "4,4"), workers=workers)
    assert par.path == seq.path
    assert par.end_state == seq.end_state
    assert (par.generated, par.expanded) == (seq.generated, seq.expanded)


def test_matches_sequential_dfs_on_sudoku():
    seq = depth_first_search(sudoku_space())
    par = parallel_depth_first_search(sudoku_space(), workers=3)
    assert par.path == seq.path
    assert (par.generated, par.expanded) == (seq.generated, seq.expanded)
    assert replay_path(sudoku_space(), par.path) == par.end_state


def test_children_are_built_on_the_pool(tree_space):
    r = parallel_depth_first_search(tree_space, workers=2)
    assert r is not None
    assert tree_space.threads
    assert all(name.startswith("ThreadPoolExecutor") for name in tree_space.threads)


def test_sequential_dfs_stays_on_the_calling_thread(tree_space):
    import threading
    depth_first_search(tree_space)
    assert tree_space.threads == {threading.current_thread().name}


def test_sibling_duplicates_are_still_deduplicated_on_pop(make_space):
    # both children of A lead to B before B is expanded
    space = make_space({"A": ["B", "B"], "B": ["C"], "C": []}, "A", "Z")
    assert parallel_depth_first_search(space, workers=2) is None
    assert dict(space.calls) == {"A": 1, "B": 1, "C": 1}


def test_worker_count_defaults_to_config(monkeypatch, tree_space):
    monkeypatch.setattr(config, "WORKERS", 3)
    assert parallel_depth_first_search(tree_space).algo == "ParallelDFS(w=3)"


def test_rejects_empty_pool(tree_space):
    with pytest.raises(ValueError):
        parallel_depth_first_search(tree_space, workers=0)
