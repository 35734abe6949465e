import pytest

from river_search.core.problem import SearchProblem
from river_search.problems.graph import GraphProblem


def counting(problem_cls):
    """Subclass of `problem_cls` that records how often ACTIONS is asked about each state."""
    class Counting(problem_cls):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self.calls = {}

        def actions(self, s):
            self.calls[s] = self.calls.get(s, 0) + 1
            return super().actions(s)

    Counting.__name__ = f"Counting{problem_cls.__name__}"
    return Counting


class Counter(SearchProblem):
    """Unbounded chain 0 -> 1 -> 2 -> ... with no goal."""
    def actions(self, s):
        return ("inc",)

    def result(self, s, a):
        self.check_action(s, a, ("inc",))
        return s + 1


@pytest.fixture
def counting_problem():
    """Factory: counting_problem(ProblemClass, *args) builds an instance that counts ACTIONS calls."""
    def make(problem_cls, *args, **kwargs):
        return counting(problem_cls)(*args, **kwargs)
    return make


@pytest.fixture
def endless():
    return Counter(0)


@pytest.fixture
def diamond():
    """Two routes of different length from A to E, plus a cycle back to A."""
    graph = {
        "A": ["B", "C"],
        "B": ["D"],
        "C": ["E", "A"],
        "D": ["E"],
        "E": [],
    }
    return GraphProblem(graph, start="A", goal="E")


@pytest.fixture
def island():
    """Goal F is not reachable from A."""
    graph = {
        "A": ["B"],
        "B": ["C", "A"],
        "C": ["A"],
        "F": ["A"],
    }
    return GraphProblem(graph, start="A", goal="F")
