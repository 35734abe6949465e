# river_search/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import logging
import os
import time
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from ..algorithms.bfs import breadth_first_search
from ..problems.graph import romania_problem
from ..problems.grid import make_grid_problem
from ..problems.river_crossing import river_crossing_problem

# ---- Tunables (overridable via environment variables) -----------------------
MAX_EXPANSIONS = int(os.getenv("RIVER_SEARCH_MAX_EXPANSIONS", "100000"))
REPEATS = int(os.getenv("RIVER_SEARCH_REPEATS", "1"))

logger = logging.getLogger(__name__)

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    return "n/a" if x is None else f"{float(x):.4f}"

def _load_problems() -> List[Tuple[str, Callable]]:
    return [
        ("River crossing", river_crossing_problem),
        ("Romania Arad->Bucharest", romania_problem),
        ("Grid 5x7", make_grid_problem),
    ]

def run(max_expansions: Optional[int] = MAX_EXPANSIONS, repeats: int = REPEATS) -> List[dict]:
    """Run BFS on every sample problem; keep the fastest of `repeats` runs."""
    rows = []
    for name, factory in _load_problems():
        print(f"→ Running BFS on {name} ...")
        best = None
        for _ in range(max(1, repeats)):
            r = breadth_first_search(factory(), max_expansions=max_expansions)
            if best is None or r.time_s < best.time_s:
                best = r
        print(
            f"  {name}: "
            f"{'OK' if best.success else 'FAIL'} "
            f"cost={best.cost} "
            f"expanded={best.nodes_expanded}, generated={best.nodes_generated}, "
            f"time={_fmt_time(best.time_s)}s"
        )
        row = best.as_row()
        row["problem"] = name
        rows.append(row)
    return rows

def main(argv=None):
    ap = argparse.ArgumentParser(description="Benchmark breadth-first search on the sample problems.")
    ap.add_argument("--max-expansions", type=int, default=MAX_EXPANSIONS)
    ap.add_argument("--repeats", type=int, default=REPEATS)
    ap.add_argument("--out", type=Path, default=Path(__file__).with_name("results.json"),
                    help="where to write the JSON report")
    ap.add_argument("--no-save", action="store_true", help="print the report only")
    ap.add_argument("--plot", type=Path, default=None, help="also save a bar chart to this PNG")
    args = ap.parse_args(argv)

    rows = run(args.max_expansions, args.repeats)
    out = {"results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))

    if not args.no_save:
        args.out.write_text(json.dumps(out, indent=2))
        logger.info("Wrote %s", args.out)

    if args.plot is not None:
        from ..plots.plotting import bar_compare
        fig = bar_compare(rows, title="BFS on sample problems")
        fig.savefig(args.plot)
        print(f"Wrote {args.plot}")
    return rows

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    main()
