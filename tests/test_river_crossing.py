"""
Tests for the bit-encoded river crossing and its solution by BFS.
"""
import pytest

from river_search.algorithms.bfs import breadth_first_search
from river_search.core.problem import PreconditionError
from river_search.core.utils import apply_actions, trajectory
from river_search.problems.checks import sanity_check_problem
from river_search.problems.river_crossing import (
    ACTION_NAMES, CWRPG, GRPCW, LC, LG, LP, LW, PCGWR, PGRCW, RC, RG, RP, RPCGW, RW,
    TRANSITIONS, RiverCrossingProblem, cross, describe_action, describe_state,
    is_safe, mirror, river_crossing_problem,
)


@pytest.fixture
def puzzle():
    return river_crossing_problem()


def test_cross_moves_passengers_between_banks():
    # PC | GW with PC crossing right -> | PCGW
    assert cross(LP | LC | RG | RW, RP | RC) == RPCGW
    assert cross(RPCGW, LP | LG) == PGRCW
    assert cross(PGRCW, RP) == GRPCW


def test_mirror():
    assert mirror(LP | LG) == RP | RG
    assert mirror(RW) == LW
    assert mirror(RPCGW) == PCGWR


def test_actions_follow_table_order(puzzle):
    assert puzzle.actions(RPCGW) == (LP | LG,)
    assert puzzle.actions(GRPCW) == (LP, LP | LC, LP | LW)


def test_goal_state_is_dead_end(puzzle):
    assert puzzle.actions(PCGWR) == ()
    assert puzzle.goal_test(PCGWR)
    assert not puzzle.goal_test(RPCGW)


def test_result_rejects_illegal_action(puzzle):
    with pytest.raises(PreconditionError) as exc:
        puzzle.result(RPCGW, LP | LW)
    assert exc.value.state == RPCGW
    assert exc.value.action == LP | LW
    with pytest.raises(ValueError):
        puzzle.result(PCGWR, RP)


def test_table_only_holds_safe_states():
    for state, actions in TRANSITIONS.items():
        assert is_safe(state), describe_state(state)
        for a in actions:
            assert is_safe(cross(state, a)), (describe_state(state), describe_action(a))


def test_is_safe():
    assert not is_safe(LP | LC | RG | RW)   # goat and wolf alone on the right
    assert not is_safe(LG | LC | RP | RW)   # goat and cabbage alone on the left
    assert is_safe(CWRPG)


def test_sanity_check(puzzle):
    msg = sanity_check_problem(puzzle, probe_actions=tuple(ACTION_NAMES))
    assert msg.startswith("OK: visited 10 states")


def test_solution_has_seven_crossings(puzzle):
    r = breadth_first_search(puzzle)
    assert r.success
    assert r.actions == [LP | LG, RP, LP | LC, RP | RG, LP | LW, RP, LP | LG]
    assert apply_actions(puzzle, r.actions) == PCGWR


def test_solution_never_leaves_unsafe_bank(puzzle):
    r = breadth_first_search(puzzle)
    assert all(is_safe(s) for s in trajectory(puzzle, r.actions))


def test_solution_text(puzzle):
    r = breadth_first_search(puzzle)
    assert [describe_action(a) for a in r.actions] == [
        "Peasant and goat crosses left.",
        "Peasant crosses right.",
        "Peasant and cabbage crosses left.",
        "Peasant and goat crosses right.",
        "Peasant and wolf crosses left.",
        "Peasant crosses right.",
        "Peasant and goat crosses left.",
    ]


def test_already_solved_puzzle():
    r = breadth_first_search(river_crossing_problem(initial=PCGWR))
    assert r.success
    assert r.actions == []


def test_unknown_start_is_dead_end():
    # all on the left except the peasant: not in the table
    r = breadth_first_search(river_crossing_problem(initial=LC | LG | LW | RP))
    assert r.exhausted


def test_custom_transition_table():
    table = {RPCGW: (LP | LG,), PGRCW: (RP | RG,)}
    r = breadth_first_search(RiverCrossingProblem(transitions=table))
    assert r.exhausted
    assert r.nodes_expanded == 2


def test_describe():
    assert describe_state(PGRCW) == "PG | CW"
    assert describe_state(PCGWR) == "PCGW |"
    assert describe_action(RP | RW) == "Peasant and wolf crosses right."
    with pytest.raises(ValueError):
        describe_action(RG)
