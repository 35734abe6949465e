# river_search/problems/grid.py
from __future__ import annotations
from typing import Hashable, Tuple, Set, List

from ..core.problem import PreconditionError, SearchProblem

Coord = Tuple[int, int]

_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}

class GridProblem(SearchProblem):
    """
    4-neighbor grid pathfinding.

    - State: (row, col) tuple
    - ACTIONS(s): subset of {'Up','Down','Left','Right'} that keep you in-bounds and off walls
    - RESULT(s,a): next (row, col)
    - GOAL-TEST(s): s == goal
    """
    def __init__(self, rows: int, cols: int, start: Coord, goal: Coord, walls: Set[Coord] | None = None):
        super().__init__(start, goal)
        self.rows = rows
        self.cols = cols
        self.walls = walls or set()

    def _open(self, cell: Coord) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols and cell not in self.walls

    def _step(self, state: Coord, action: str) -> Coord:
        r, c = state
        dr, dc = _MOVES[action]
        return (r + dr, c + dc)

    def actions(self, state: Hashable) -> List[str]:
        return [name for name in _MOVES if self._open(self._step(state, name))]

    def result(self, state: Hashable, action: Hashable) -> Hashable:
        if action not in _MOVES or not self._open(self._step(state, action)):
            raise PreconditionError(state, action)
        return self._step(state, action)

def make_grid_problem() -> GridProblem:
    # Example: 5x7 grid, a few walls
    walls = {(1,3), (2,3), (3,3), (3,4)}
    return GridProblem(rows=5, cols=7, start=(0,0), goal=(4,6), walls=walls)
