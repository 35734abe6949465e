"""Breadth-first search over abstract problems, with the river-crossing puzzle as the worked example."""
from .algorithms.bfs import breadth_first_search
from .core.metrics import SearchResult
from .core.node import SearchNode, SearchTree
from .core.problem import PreconditionError, Problem, SearchProblem
from .problems.river_crossing import RiverCrossingProblem, river_crossing_problem

__version__ = "0.1.0"

__all__ = [
    "breadth_first_search",
    "SearchResult",
    "SearchNode", "SearchTree",
    "PreconditionError", "Problem", "SearchProblem",
    "RiverCrossingProblem", "river_crossing_problem",
]
