# river_search/problems/river_crossing.py
# The peasant / wolf / goat / cabbage river crossing, encoded at the bit level.
from __future__ import annotations
from typing import Dict, Tuple

from ..core.problem import SearchProblem

# One bit per (passenger, bank).  Low nibble = right bank, high nibble = left bank.
#   PCGW PCGW
#   1100 0011 = 0xC3 = PC | GW
RW = 0x01  # wolf on right
RG = 0x02  # goat on right
RC = 0x04  # cabbage on right
RP = 0x08  # peasant on right
LW = 0x10  # wolf on left
LG = 0x20  # goat on left
LC = 0x40  # cabbage on left
LP = 0x80  # peasant on left

RIGHT_BANK = 0x0F
LEFT_BANK = 0xF0

# Named states: who is on the left | who is on the right.
RPCGW = 0x0F  # | PCGW
PCGWR = 0xF0  # PCGW |
PGRCW = 0xA5  # PG | CW
CWRPG = 0x5A  # CW | PG
PCGRW = 0xE1  # PCG | W
WRPCG = 0x1E  # W | PCG
CRPGW = 0x4B  # C | PGW
PGWRC = 0xB4  # PGW | C
GRPCW = 0x2D  # G | PCW
PCWRG = 0xD2  # PCW | G

# An action is the set of bits the boat lands on: PC crossing left = LP|LC.
ACTION_NAMES: Dict[int, str] = {
    RP: "Peasant crosses right.",
    RP | RC: "Peasant and cabbage crosses right.",
    RP | RG: "Peasant and goat crosses right.",
    RP | RW: "Peasant and wolf crosses right.",
    LP: "Peasant crosses left.",
    LP | LC: "Peasant and cabbage crosses left.",
    LP | LG: "Peasant and goat crosses left.",
    LP | LW: "Peasant and wolf crosses left.",
}

# Legal crossings per state.  Order is part of the contract: BFS returns the
# first shortest plan it meets, so it follows this ordering.
TRANSITIONS: Dict[int, Tuple[int, ...]] = {
    RPCGW: (LP | LG,),
    PGRCW: (RP, RP | RG),
    PCGRW: (RP | RC, RP | RG),
    CRPGW: (LP | LG, LP | LW),
    PCWRG: (RP | RC, RP | RW, RP),
    WRPCG: (LP | LC, LP | LG),
    CWRPG: (LP, LP | LG),
    GRPCW: (LP, LP | LC, LP | LW),
    PGWRC: (RP | RG, RP | RW),
}

_LETTERS = ((0x8, "P"), (0x4, "C"), (0x2, "G"), (0x1, "W"))


def mirror(bits: int) -> int:
    """Same passengers, other bank."""
    return ((bits & RIGHT_BANK) << 4) | ((bits & LEFT_BANK) >> 4)


def cross(state: int, action: int) -> int:
    """Land the action's passengers on their bank and take them off the other one."""
    return (state & ~mirror(action)) | action


def is_safe(state: int) -> bool:
    """False if the goat is left with the wolf or the cabbage while the peasant is away."""
    for bank in (state & RIGHT_BANK, (state & LEFT_BANK) >> 4):
        if bank & RP or not bank & RG:
            continue
        if bank & (RW | RC):
            return False
    return True


def describe_action(action: int) -> str:
    try:
        return ACTION_NAMES[action]
    except KeyError:
        raise ValueError(f"unknown crossing 0x{action:02X}") from None


def describe_state(state: int) -> str:
    """'PG | CW' style layout: left bank, then right bank."""
    left = "".join(ch for bit, ch in _LETTERS if state & (bit << 4))
    right = "".join(ch for bit, ch in _LETTERS if state & bit)
    return f"{left} | {right}".strip()


class RiverCrossingProblem(SearchProblem):
    """
    Everyone starts on the right bank and must reach the left bank.
    The boat holds the peasant plus at most one passenger; the goat may not be
    left alone with the wolf or with the cabbage.

    - State: 8-bit mask (see the bit table above)
    - ACTIONS(s): TRANSITIONS[s], or () for states outside the table
    - RESULT(s,a): cross(s, a), after checking a is in ACTIONS(s)
    """
    def __init__(self, initial: int = RPCGW, goal: int = PCGWR, transitions=None):
        super().__init__(initial, goal)
        self.transitions = TRANSITIONS if transitions is None else transitions

    def actions(self, state: int) -> Tuple[int, ...]:
        return self.transitions.get(state, ())

    def result(self, state: int, action: int) -> int:
        self.check_action(state, action, self.transitions.get(state, ()))
        return cross(state, action)


def river_crossing_problem(initial: int = RPCGW, goal: int = PCGWR) -> RiverCrossingProblem:
    """
    Factory for the puzzle as posed: everyone from the right bank to the left.
    """
    return RiverCrossingProblem(initial=initial, goal=goal)
