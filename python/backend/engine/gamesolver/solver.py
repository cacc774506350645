"""Breadth-first sliding puzzle solver."""

from __future__ import annotations

import logging
import time
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass

from backend.models.board import (
    BoardState,
    Direction,
    board_size,
    is_solved,
    legal_directions,
    slide,
    validate_state,
)
from backend.models.node import SearchNode

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counters for a single ``PuzzleSolver.solve()`` run."""

    expanded: int = 0
    generated: int = 0
    duplicates: int = 0
    max_frontier: int = 0
    elapsed: float = 0.0


class PuzzleSolver:
    """Finds a shortest slide sequence to the sorted board by BFS.

    Example::

        solver = PuzzleSolver([3, 2, 1, 0])
        node = solver.solve()
        if node is not None:
            steps = PuzzleSolver.reconstruct_path(node)
    """

    def __init__(self, initial_state: Sequence[int]) -> None:
        state = validate_state(initial_state)
        self.root = SearchNode.root(state)
        self.visited: set[BoardState] = set()
        self.stats = SearchStats()

    # -- search ---------------------------------------------------------------

    def solve(self) -> SearchNode | None:
        """Return the terminal node of a shortest solution, or ``None``.

        ``None`` means the board is not square or the goal is unreachable
        from the start (the whole reachable component was explored).
        """
        self.visited = set()
        self.stats = SearchStats()

        size = board_size(self.root.state)
        if size is None:
            logger.info(
                "Rejecting board of length %d: not a perfect square",
                len(self.root.state),
            )
            return None

        logger.debug("Starting BFS on %dx%d board %s", size, size, self.root.state)
        started = time.perf_counter()
        result = self._search(size)
        self.stats.elapsed = time.perf_counter() - started

        if result is None:
            logger.info(
                "No solution: explored %d states in %.3fs",
                self.stats.expanded,
                self.stats.elapsed,
            )
        else:
            logger.info(
                "Solved in %d moves: expanded %d, generated %d, %.3fs",
                result.depth,
                self.stats.expanded,
                self.stats.generated,
                self.stats.elapsed,
            )
        return result

    def _search(self, size: int) -> SearchNode | None:
        visited = self.visited
        stats = self.stats
        frontier: deque[SearchNode] = deque([self.root])
        stats.max_frontier = 1

        while frontier:
            node = frontier.popleft()
            # Children are checked against visited only, so a state can be
            # queued twice; the earlier copy has already been expanded.
            if node.state in visited:
                stats.duplicates += 1
                continue
            visited.add(node.state)
            stats.expanded += 1

            if is_solved(node.state):
                return node

            blank = node.blank_index
            for direction in legal_directions(blank, size):
                offset = direction.offset(size)
                child_state = slide(node.state, blank, offset)
                if child_state in visited:
                    stats.duplicates += 1
                    continue
                frontier.append(node.child(child_state, blank + offset))
                stats.generated += 1

            if len(frontier) > stats.max_frontier:
                stats.max_frontier = len(frontier)

        return None

    # -- path helpers ---------------------------------------------------------

    @staticmethod
    def reconstruct_path(node: SearchNode) -> list[BoardState]:
        """Return the board states from the start to *node*, inclusive."""
        return [step.state for step in node.lineage()]

    @staticmethod
    def moves(node: SearchNode) -> list[Direction]:
        """Return the blank directions that lead from the start to *node*."""
        lineage = node.lineage()
        size = board_size(node.state)
        if size is None:
            return []
        directions: list[Direction] = []
        for prev, step in zip(lineage, lineage[1:]):
            delta = step.blank_index - prev.blank_index
            for direction in Direction:
                if direction.offset(size) == delta:
                    directions.append(direction)
                    break
        return directions
