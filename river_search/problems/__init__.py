from .graph import GraphProblem, romania_problem
from .grid import GridProblem, make_grid_problem
from .river_crossing import RiverCrossingProblem, river_crossing_problem

__all__ = [
    "GraphProblem", "romania_problem",
    "GridProblem", "make_grid_problem",
    "RiverCrossingProblem", "river_crossing_problem",
]
