"""Rich terminal frontend: tables, colours, and panels.

Uses the ``rich`` library to draw every step of a solution as a boxed
grid, with tiles already in their goal position highlighted.
"""

from __future__ import annotations

from collections.abc import Sequence

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import PuzzleSolver, SearchStats
from backend.models.board import BoardState, Direction, board_size, is_tile_correct
from backend.models.node import SearchNode

console = Console()


# -- board rendering ----------------------------------------------------------


def render_state(state: Sequence[int]) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    size = board_size(state) or len(state)
    width = len(str(len(state) - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(size):
        table.add_column(width=width + 1, justify="center")

    for r in range(0, len(state), size):
        cells: list[str] = []
        for i in range(r, min(r + size, len(state))):
            val = state[i]
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif is_tile_correct(state, i):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _summary(moves: Sequence[Direction], stats: SearchStats | None) -> Text:
    text = Text()
    text.append(f"  Solved in {len(moves)} moves", style="bold green")
    if stats is not None:
        text.append(
            f"  ({stats.expanded} states expanded, {stats.elapsed:.3f}s)",
            style="dim",
        )
    return text


# -- solution output ----------------------------------------------------------


def print_solution(
    path: Sequence[BoardState],
    moves: Sequence[Direction],
    stats: SearchStats | None = None,
    title: str = "Solution",
) -> None:
    """Print one panel per board in *path*, then a summary line."""
    for i, state in enumerate(path):
        if i == 0:
            caption = "start"
        else:
            caption = f"move {i}/{len(moves)} ({moves[i - 1].value})"
        size = board_size(state) or len(state)
        panel = Panel(
            Align.center(render_state(state)),
            title=f"[bold cyan]{title}  {size}×{size}[/bold cyan]",
            subtitle=f"[dim]{caption}[/dim]",
            border_style="cyan",
            padding=(0, 2),
        )
        console.print(panel)
    console.print(_summary(moves, stats))


def print_unsolved(state: Sequence[int], title: str = "Solution") -> None:
    console.print(f"[bold]{title}[/bold]  {list(state)}")
    console.print("[red]  No solution: board is not square or unsolvable.[/red]")


# -- entry point --------------------------------------------------------------


def run(puzzles: Sequence[Sequence[int]], start: int = 1) -> list[SearchNode | None]:
    """Solve and print every puzzle in turn."""
    results: list[SearchNode | None] = []
    for i, puzzle in enumerate(puzzles, start):
        title = f"Puzzle {i}"
        solver = PuzzleSolver(puzzle)
        node = solver.solve()
        if node is None:
            print_unsolved(puzzle, title=title)
        else:
            print_solution(
                PuzzleSolver.reconstruct_path(node),
                PuzzleSolver.moves(node),
                stats=solver.stats,
                title=title,
            )
        results.append(node)
    return results
