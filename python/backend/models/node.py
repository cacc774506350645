"""Search tree node."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import BoardState, find_blank


@dataclass(frozen=True, eq=False)
class SearchNode:
    """One board configuration reached by the search.

    ``predecessor`` points at the node whose single slide produced this
    state; the root has none.
    """

    state: BoardState
    blank_index: int
    predecessor: SearchNode | None = None
    depth: int = 0

    @classmethod
    def root(cls, state: BoardState) -> SearchNode:
        return cls(state=state, blank_index=find_blank(state))

    def child(self, state: BoardState, blank_index: int) -> SearchNode:
        return SearchNode(
            state=state,
            blank_index=blank_index,
            predecessor=self,
            depth=self.depth + 1,
        )

    def lineage(self) -> list[SearchNode]:
        """Nodes from the root down to this one."""
        nodes: list[SearchNode] = []
        node: SearchNode | None = self
        while node is not None:
            nodes.append(node)
            node = node.predecessor
        nodes.reverse()
        return nodes
