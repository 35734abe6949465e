# river_search/core/node.py
# Search-tree nodes and the per-search arena that owns them.
# Nodes point at their parent by integer handle into the arena, never by reference.
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .problem import Action, Problem, State


@dataclass(frozen=True)
class SearchNode:
    state: State
    action: Optional[Action] = None   # None for the root
    parent: Optional[int] = None      # handle of the parent node in its SearchTree
    handle: int = 0
    depth: int = 0
    path_actions: Tuple[Action, ...] = ()

    def solution(self) -> List[Action]:
        """Actions from the root to this node; cached at construction, so O(1) to look up."""
        return list(self.path_actions)

    @property
    def is_root(self) -> bool:
        return self.parent is None


class SearchTree:
    """
    Arena for one search run.

    Every node generated during a search lives in `self.nodes`, indexed by its
    handle. Dropping the arena (release() or leaving the with-block) frees the
    whole tree at once, not only the solution branch.
    """
    def __init__(self):
        self.nodes: List[SearchNode] = []

    def __enter__(self) -> "SearchTree":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.release()
        return False

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, handle: int) -> SearchNode:
        return self.nodes[handle]

    def _add(self, state, action, parent: Optional[SearchNode]) -> SearchNode:
        if parent is None:
            node = SearchNode(state=state, handle=len(self.nodes))
        else:
            node = SearchNode(
                state=state,
                action=action,
                parent=parent.handle,
                handle=len(self.nodes),
                depth=parent.depth + 1,
                path_actions=parent.path_actions + (action,),
            )
        self.nodes.append(node)
        return node

    def root(self, state: State) -> SearchNode:
        return self._add(state, None, None)

    def child_node(self, problem: Problem, parent: SearchNode, action: Action) -> SearchNode:
        return self._add(problem.result(parent.state, action), action, parent)

    def expand(self, problem: Problem, node: SearchNode) -> Iterator[SearchNode]:
        """Generate child nodes lazily, one per ACTIONS(s), in the order the problem lists them."""
        for a in problem.actions(node.state):
            yield self.child_node(problem, node, a)

    def path(self, node: SearchNode) -> List[SearchNode]:
        """Nodes from the root down to `node`."""
        out = [node]
        while out[-1].parent is not None:
            out.append(self.nodes[out[-1].parent])
        out.reverse()
        return out

    def release(self) -> None:
        self.nodes = []
