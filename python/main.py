#!/usr/bin/env python3
"""N×N sliding puzzle solver (breadth-first search).

Usage::

    python main.py solve 3 2 1 0          # solve a 2×2 board
    python main.py solve -f vanilla 1 2 3 0 4 5 6 7 8
    python main.py demo                   # run the example puzzles
    python main.py demo -p 6              # run a single example
    python main.py random -s 3 -m 12      # scramble and solve
    python main.py -v solve 3 2 1 0       # with debug logging
"""

import importlib
import logging
import random as _random
import sys
from enum import StrEnum
from pathlib import Path
from typing import List, Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.models.board import InvalidBoardError  # noqa: E402

logger = logging.getLogger(__name__)

# Example boards, flattened row-major with 0 as the blank.
DEMO_PUZZLES: list[list[int]] = [
    [1, 2, 3, 0, 4, 5, 6, 7, 8],
    [2, 4, 3, 0, 1, 5, 6, 7, 8],
    [5, 1, 2, 3, 0, 4, 6, 7, 8],
    [5, 1, 2, 3, 7, 4, 6, 0, 8],
    [2, 1, 4, 0, 3, 5, 6, 7, 8],
    [3, 2, 1, 0],
]

DEFAULT_SCRAMBLE_SIZE = 3
DEFAULT_SCRAMBLE_MOVES = 20


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


def _run(frontend: Frontend, puzzles: list[list[int]], start: int = 1) -> list:
    mod = importlib.import_module(_RUNNERS[frontend])
    return mod.run(puzzles, start=start)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress and statistics.",
    ),
) -> None:
    """N×N sliding puzzle solver."""
    _configure_logging(verbose)


@app.command()
def solve(
    tiles: List[int] = typer.Argument(
        ...,
        help="Board tiles in row-major order, 0 for the blank.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="How to print the solution.",
    ),
) -> None:
    """Solve a single board and print every step."""
    try:
        (node,) = _run(frontend, [list(tiles)])
    except InvalidBoardError as exc:
        typer.echo(f"Invalid board: {exc}", err=True)
        raise typer.Exit(code=2)
    if node is None:
        raise typer.Exit(code=1)


@app.command()
def demo(
    puzzle: Optional[int] = typer.Option(
        None, "-p", "--puzzle",
        min=1, max=len(DEMO_PUZZLES),
        help="Run only this example (1-based). Omit to run them all.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="How to print the solutions.",
    ),
) -> None:
    """Solve the built-in example puzzles one after another."""
    if puzzle is None:
        _run(frontend, DEMO_PUZZLES)
    else:
        _run(frontend, [DEMO_PUZZLES[puzzle - 1]], start=puzzle)


@app.command("random")
def random_board(
    size: int = typer.Option(
        DEFAULT_SCRAMBLE_SIZE, "-s", "--size",
        min=2, max=6,
        help="Grid size.",
    ),
    moves: int = typer.Option(
        DEFAULT_SCRAMBLE_MOVES, "-m", "--moves",
        min=0,
        help="Number of random slides away from the solved board.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible scramble.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="How to print the solution.",
    ),
) -> None:
    """Scramble a solved board and solve it again."""
    state = GameGenerator.scramble(size, moves, _random.Random(seed))
    logger.debug("Scrambled board: %s", list(state))
    (node,) = _run(frontend, [list(state)])
    if node is None:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
