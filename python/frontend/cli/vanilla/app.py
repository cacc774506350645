"""Vanilla terminal frontend: no third-party dependencies.

Prints each board of a solution as a tab-separated grid, one row per
line, followed by an empty line.
"""

from __future__ import annotations

from collections.abc import Sequence

from backend.engine.gamesolver import PuzzleSolver
from backend.models.board import BoardState, board_size
from backend.models.node import SearchNode

_C = "\033[36;1m"    # bold cyan
_R = "\033[0m"       # reset


# -- board rendering ----------------------------------------------------------


def format_state(state: Sequence[int]) -> str:
    """Return *state* as an n×n grid of tab-separated values."""
    n = board_size(state) or len(state)
    lines: list[str] = []
    for r in range(0, len(state), n):
        lines.append("".join(f"{v}\t" for v in state[r : r + n]))
    return "\n".join(lines) + "\n"


def print_solution(path: Sequence[BoardState]) -> None:
    for state in path:
        print(format_state(state))


# -- entry point --------------------------------------------------------------


def run(
    puzzles: Sequence[Sequence[int]], start: int = 1, color: bool = True
) -> list[SearchNode | None]:
    """Solve and print every puzzle in turn.  Unsolved puzzles print nothing."""
    results: list[SearchNode | None] = []
    for i, puzzle in enumerate(puzzles, start):
        header = f"Solution for Puzzle {i}:"
        print(f"{_C}{header}{_R}" if color else header)
        solver = PuzzleSolver(puzzle)
        node = solver.solve()
        if node is not None:
            print_solution(PuzzleSolver.reconstruct_path(node))
        results.append(node)
    return results
