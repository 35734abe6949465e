# Defines the standard interface for any search problem (initial state, goal test, actions, result).
# river_search/core/problem.py
from __future__ import annotations
from typing import Callable, Container, Hashable, Optional, Protocol, Sequence

Action = Hashable
State = Hashable


class PreconditionError(ValueError):
    """RESULT(s, a) was asked for an action that ACTIONS(s) does not offer."""

    def __init__(self, state: State, action: Action):
        super().__init__(f"action {action!r} is not applicable in state {state!r}")
        self.state = state
        self.action = action


class Problem(Protocol):
    """Canonical AI search problem interface (atomic state-space view)."""
    def initial_state(self) -> State: ...
    def goal_test(self, s: State) -> bool: ...
    def actions(self, s: State) -> Sequence[Action]: ...
    def result(self, s: State, a: Action) -> State: ...


class SearchProblem:
    """
    Base class for concrete problems.

    - initial: the start state, fixed at construction
    - goal: a single goal state, or
    - goal_test: a predicate for problems with several goal states (wins over `goal`)

    Subclasses supply ACTIONS and RESULT. RESULT should call check_action with
    the legal moves taken from its own data (not by calling ACTIONS again) so an
    illegal action fails instead of producing an undefined state.
    """
    def __init__(self, initial: State, goal: Optional[State] = None,
                 goal_test: Optional[Callable[[State], bool]] = None):
        self._initial = initial
        self._goal = goal
        self._predicate = goal_test

    @property
    def initial(self) -> State:
        return self._initial

    @property
    def goal(self) -> Optional[State]:
        return self._goal

    def initial_state(self) -> State:
        return self._initial

    def goal_test(self, s: State) -> bool:
        if self._predicate is not None:
            return bool(self._predicate(s))
        return s == self._goal

    def actions(self, s: State) -> Sequence[Action]:
        raise NotImplementedError

    def result(self, s: State, a: Action) -> State:
        raise NotImplementedError

    def check_action(self, s: State, a: Action, legal: Container[Action]) -> None:
        if a not in legal:
            raise PreconditionError(s, a)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(initial={self._initial!r}, goal={self._goal!r})"
