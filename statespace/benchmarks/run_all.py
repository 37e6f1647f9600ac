# statespace/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from ..algorithms import ALGORITHMS
from ..core import config
from ..core.problem import ContractViolation
from ..problems import PROBLEMS, sanity_check_space
from ..problems.eight_tiles import eight_tiles_space

logger = logging.getLogger(__name__)


# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"


def _load_problem(name: str, tiles: Optional[str] = None):
    if tiles:
        if name != "eight_tiles":
            raise SystemExit(f"--tiles only applies to --problem eight_tiles, not {name!r}")
        digits = [int(c) for c in tiles if c.isdigit()]
        if len(digits) != 9:
            raise SystemExit(f"--tiles needs 9 digits, got {len(digits)} in {tiles!r}")
        try:
            return eight_tiles_space([digits[0:3], digits[3:6], digits[6:9]])
        except ContractViolation as e:
            raise SystemExit(f"Bad --tiles board {tiles!r}: {e}") from None
    try:
        return PROBLEMS[name]()
    except KeyError:
        raise SystemExit(f"Unknown problem {name!r}; choose from {sorted(PROBLEMS)}") from None


def _load_algos(
    names: Sequence[str],
    workers: Optional[int],
    trace_memory: bool = False,
) -> List[Tuple[str, Callable[[Any], Any]]]:
    algos: List[Tuple[str, Callable[[Any], Any]]] = []
    for name in names:
        fn = ALGORITHMS.get(name)
        if fn is None:
            raise SystemExit(f"Unknown algorithm {name!r}; choose from {sorted(ALGORITHMS)}")
        if name == "parallel_dfs":
            algos.append((name, lambda p, fn=fn: fn(p, workers=workers, trace_memory=trace_memory)))
        else:
            algos.append((name, lambda p, fn=fn: fn(p, trace_memory=trace_memory)))
    return algos


def run(problem, algos: List[Tuple[str, Callable[[Any], Any]]]) -> List[Dict[str, Any]]:
    rows = []
    for name, fn in algos:
        print(f"→ Running {name} ...")
        try:
            r = fn(problem)
        except Exception as e:
            # one broken algorithm must not hide the others' numbers
            logger.exception("%s raised", name)
            print(f"  {name}: ERROR {e!r}")
            rows.append({"algo": name, "success": False, "error": repr(e)})
            continue

        if r is None:
            print(f"  {name}: no solution")
            rows.append({"algo": name, "success": False, "error": None})
            continue

        print(
            f"  {name}: OK "
            f"depth={r.depth} "
            f"generated={r.generated} "
            f"expanded={r.expanded}, "
            f"time={_fmt_time(r.time_s)}s"
        )
        # "algo" is the registry name on every row; "label" is the result's own name
        row = r.to_dict()
        row["label"] = row["algo"]
        row["algo"] = name
        rows.append(row)
    return rows


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Run the search algorithms on a bundled problem and report statistics.")
    ap.add_argument("--problem", choices=sorted(PROBLEMS), default="eight_tiles")
    ap.add_argument("--tiles", default="", help="eight-tile start board as 9 digits, 0 = empty (e.g. 123456708)")
    ap.add_argument("--algos", nargs="+", choices=sorted(ALGORITHMS), default=["bfs", "dfs", "parallel_dfs"])
    ap.add_argument("--workers", type=int, default=config.WORKERS, help="thread pool size for parallel_dfs")
    ap.add_argument("--trace-memory", action="store_true", help="record tracemalloc peak (slows the search)")
    ap.add_argument("--check", action="store_true", help="sanity-check the problem contract before searching")
    ap.add_argument("--out", default="results.json", help="where to write the JSON report ('' to skip)")
    ap.add_argument("--log-level", default=config.LOG_LEVEL)
    return ap


def main(argv: Optional[Sequence[str]] = None) -> Dict[str, Any]:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    problem = _load_problem(args.problem, args.tiles)
    if args.check:
        print(sanity_check_space(problem))

    rows = run(problem, _load_algos(args.algos, args.workers, args.trace_memory or config.TRACE_MEMORY))
    out = {"problem": args.problem, "results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))

    if args.out:
        out_path = Path(args.out)
        out_path.write_text(json.dumps(out, indent=2))
        print(f"Wrote {out_path}")
    return out


if __name__ == "__main__":
    main()
