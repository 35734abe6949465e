from __future__ import annotations
from collections import deque

from ..core.problem import PreconditionError


def sanity_check_problem(problem, max_states: int = 10_000, probe_actions=()):
    """
    Walks states breadth-first and checks that RESULT is deterministic for every
    legal action. Each action in `probe_actions` that is *not* legal in a state
    must make RESULT raise PreconditionError.
    """
    seen = set()
    q = deque([problem.initial_state()])
    while q and len(seen) < max_states:
        s = q.popleft()
        if s in seen:
            continue
        seen.add(s)
        legal = tuple(problem.actions(s))
        for a in legal:
            s2 = problem.result(s, a)
            if problem.result(s, a) != s2:
                raise AssertionError(f"result is not deterministic for (s={s!r}, a={a!r})")
            q.append(s2)
        for a in probe_actions:
            if a in legal:
                continue
            try:
                problem.result(s, a)
            except PreconditionError:
                continue
            raise AssertionError(f"result accepted illegal action (s={s!r}, a={a!r})")
    return f"OK: visited {len(seen)} states; result is deterministic."
