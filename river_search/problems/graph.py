# river_search/problems/graph.py
# Explicit-graph search problem: states are vertices, actions are "move to neighbour".
# Ships with the AIMA Romania road map as a larger sample space.
from __future__ import annotations
from typing import Callable, Hashable, Iterable, Mapping, Optional, Tuple

from ..core.problem import SearchProblem


# Road connections (bidirectional) from AIMA Fig. 3.1; distances are ignored by BFS.
ROMANIA_ROADS: Mapping[str, Tuple[str, ...]] = {
    "Arad": ("Zerind", "Sibiu", "Timisoara"),
    "Zerind": ("Arad", "Oradea"),
    "Oradea": ("Zerind", "Sibiu"),
    "Sibiu": ("Arad", "Oradea", "Fagaras", "Rimnicu Vilcea"),
    "Timisoara": ("Arad", "Lugoj"),
    "Lugoj": ("Timisoara", "Mehadia"),
    "Mehadia": ("Lugoj", "Drobeta"),
    "Drobeta": ("Mehadia", "Craiova"),
    "Craiova": ("Drobeta", "Rimnicu Vilcea", "Pitesti"),
    "Rimnicu Vilcea": ("Sibiu", "Craiova", "Pitesti"),
    "Fagaras": ("Sibiu", "Bucharest"),
    "Pitesti": ("Rimnicu Vilcea", "Craiova", "Bucharest"),
    "Bucharest": ("Fagaras", "Pitesti", "Giurgiu", "Urziceni"),
    "Giurgiu": ("Bucharest",),
    "Urziceni": ("Bucharest", "Vaslui", "Hirsova"),
    "Hirsova": ("Urziceni", "Eforie"),
    "Eforie": ("Hirsova",),
    "Vaslui": ("Urziceni", "Iasi"),
    "Iasi": ("Vaslui", "Neamt"),
    "Neamt": ("Iasi",),
}


class GraphProblem(SearchProblem):
    """
    Directed graph given as {vertex: neighbours}.
    ACTIONS(s) are the neighbours of s in listed order; RESULT(s,a) = a.
    Vertices missing from the mapping are dead ends.
    """
    def __init__(self, graph: Mapping[Hashable, Iterable[Hashable]], start: Hashable,
                 goal: Optional[Hashable] = None,
                 goal_test: Optional[Callable[[Hashable], bool]] = None):
        super().__init__(start, goal, goal_test)
        self.graph = {v: tuple(ns) for v, ns in graph.items()}

    def actions(self, state) -> Tuple[Hashable, ...]:
        return self.graph.get(state, ())

    def result(self, state, action):
        self.check_action(state, action, self.graph.get(state, ()))
        return action  # action is the next vertex


def romania_problem(start: str = "Arad", goal: str = "Bucharest") -> GraphProblem:
    """
    Factory for a ready-to-use Romania route-finding problem.
    """
    return GraphProblem(ROMANIA_ROADS, start=start, goal=goal)
