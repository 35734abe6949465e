# river_search/core/frontiers.py
from __future__ import annotations
from collections import deque


class FIFOQueue:
    """FIFO of search nodes that also knows which states are currently queued."""
    def __init__(self):
        self.q = deque()
        self.states = set()
    def push(self, node):
        self.q.append(node)
        self.states.add(node.state)
    def pop(self):
        node = self.q.popleft()
        self.states.discard(node.state)
        return node
    def __len__(self): return len(self.q)
    def peek(self): return self.q[0]
    def has_state(self, state) -> bool:
        return state in self.states
