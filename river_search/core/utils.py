# river_search/core/utils.py
# Helpers for replaying a solution against its problem.
from __future__ import annotations
from typing import Iterable, List

from .problem import Action, Problem, State


def apply_actions(problem: Problem, actions: Iterable[Action], start: State = None) -> State:
    """Fold RESULT over `actions` from `start` (the initial state by default)."""
    s = problem.initial_state() if start is None else start
    for a in actions:
        s = problem.result(s, a)
    return s


def trajectory(problem: Problem, actions: Iterable[Action]) -> List[State]:
    """States visited by a plan, initial state included."""
    states = [problem.initial_state()]
    for a in actions:
        states.append(problem.result(states[-1], a))
    return states


def is_valid_solution(problem: Problem, actions: Iterable[Action]) -> bool:
    s = problem.initial_state()
    for a in actions:
        if a not in problem.actions(s):
            return False
        s = problem.result(s, a)
    return problem.goal_test(s)
