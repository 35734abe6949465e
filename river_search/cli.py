# river_search/cli.py
# Solve the river crossing and print the plan, one crossing per line.
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional, Tuple

from .algorithms.bfs import breadth_first_search
from .core.utils import trajectory
from .problems.river_crossing import (
    PCGWR, RPCGW, describe_action, describe_state, river_crossing_problem,
)

# ---- Tunables (overridable via environment variables) -----------------------
MAX_EXPANSIONS_ENV = "RIVER_SEARCH_MAX_EXPANSIONS"
LOG_LEVEL_ENV = "RIVER_SEARCH_LOG_LEVEL"

EXIT_OK = 0
EXIT_NOT_FOUND = 1

logger = logging.getLogger(__name__)


def state_mask(text: str) -> int:
    """Parse a state given as decimal or 0x-prefixed hex, e.g. 15 or 0x0F."""
    try:
        value = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a state mask: {text!r}") from None
    if not 0 <= value <= 0xFF:
        raise argparse.ArgumentTypeError(f"state mask out of range 0..0xFF: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="river-search",
        description="Solve the peasant / wolf / goat / cabbage river crossing with breadth-first search.",
    )
    ap.add_argument("--initial", type=state_mask, default=RPCGW, help="start state mask (default 0x0F: all on the right)")
    ap.add_argument("--goal", type=state_mask, default=PCGWR, help="goal state mask (default 0xF0: all on the left)")
    ap.add_argument("--max-expansions", type=int, default=None,
                    help=f"give up after expanding this many nodes (default: ${MAX_EXPANSIONS_ENV} or no limit)")
    ap.add_argument("--show-states", action="store_true", help="print the bank layout after each crossing")
    ap.add_argument("--stats", action="store_true", help="print search statistics after the plan")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def env_settings(ap: argparse.ArgumentParser, args: argparse.Namespace) -> Tuple[Optional[int], int]:
    """Resolve the expansion limit and log level, falling back to the environment."""
    max_expansions = args.max_expansions
    raw = os.getenv(MAX_EXPANSIONS_ENV, "")
    if max_expansions is None and raw:
        try:
            max_expansions = int(raw)
        except ValueError:
            ap.error(f"{MAX_EXPANSIONS_ENV} must be an integer, got {raw!r}")

    name = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        ap.error(f"{LOG_LEVEL_ENV} is not a logging level: {name!r}")
    return max_expansions, logging.DEBUG if args.verbose else level


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    max_expansions, level = env_settings(ap, args)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    problem = river_crossing_problem(initial=args.initial, goal=args.goal)
    logger.info("Searching from %s to %s", describe_state(args.initial), describe_state(args.goal))
    result = breadth_first_search(problem, max_expansions=max_expansions)

    if not result.success:
        print(f"No solution found ({result.error}).", file=sys.stderr)
        return EXIT_NOT_FOUND

    states = trajectory(problem, result.actions)
    for action, state in zip(result.actions, states[1:]):
        line = describe_action(action)
        if args.show_states:
            line = f"{line:<36} {describe_state(state)}"
        print(line)

    if args.stats:
        print(
            f"{len(result.actions)} crossings, "
            f"expanded={result.nodes_expanded}, generated={result.nodes_generated}, "
            f"time={result.time_s:.4f}s, peak={result.peak_kb}KB"
        )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
