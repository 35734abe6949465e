# river_search/algorithms/bfs.py
# Breadth-first graph search over a lazily generated search tree (AIMA Fig. 3.11).
from __future__ import annotations
import logging
from typing import Optional
from ..core.frontiers import FIFOQueue
from ..core.node import SearchTree
from ..core.metrics import EXHAUSTED, EXPANSION_LIMIT, SearchResult, MeasuredRun
from ..core.problem import Problem

logger = logging.getLogger(__name__)


def breadth_first_search(problem: Problem, max_expansions: Optional[int] = None) -> SearchResult:
    """
    Return the shortest (fewest actions) plan to a goal as a SearchResult.

    The goal test runs when a child is generated, not when it is dequeued.
    A child is queued only if its state is neither explored nor already on
    the frontier, so ACTIONS is called at most once per state.

    Failure is a value: success=False with error "exhausted" (the reachable
    space holds no goal) or "expansion limit" (max_expansions was hit).
    """
    name = "BFS"
    expanded = 0

    with MeasuredRun() as meter, SearchTree() as tree:
        def done(success, node=None, error=None) -> SearchResult:
            actions = node.solution() if node is not None else []
            cost = float(len(actions)) if success else float("inf")
            logger.debug("%s %s: expanded=%d generated=%d depth=%s",
                         name, "solved" if success else error, expanded, len(tree),
                         len(actions) if success else "-")
            return SearchResult(name, success, actions, cost, expanded, len(tree),
                                meter.elapsed, meter.peak_kb, error)

        root = tree.root(problem.initial_state())
        if problem.goal_test(root.state):
            return done(True, root)

        frontier = FIFOQueue()
        frontier.push(root)
        explored = set()

        while frontier:
            if max_expansions is not None and expanded >= max_expansions:
                return done(False, error=EXPANSION_LIMIT)

            node = frontier.pop()
            explored.add(node.state)
            expanded += 1
            for child in tree.expand(problem, node):
                if problem.goal_test(child.state):
                    return done(True, child)
                if child.state not in explored and not frontier.has_state(child.state):
                    frontier.push(child)

        return done(False, error=EXHAUSTED)
