"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from backend.models.board import (
    BoardState,
    Direction,
    goal_state,
    legal_directions,
    slide,
)

logger = logging.getLogger(__name__)

_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class GameGenerator:
    """Creates solvable puzzles by sliding tiles away from the solved state."""

    @staticmethod
    def solved(size: int) -> BoardState:
        """Return the goal state (blank top-left, tiles ascending)."""
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}.")
        return goal_state(size)

    @staticmethod
    def scramble(
        size: int, moves: int, rng: random.Random | None = None
    ) -> BoardState:
        """Return a board *moves* random slides away from the goal.

        A slide never undoes the one before it, so the optimal solution
        is at most *moves* long.
        """
        rng = rng or random.Random()
        state = GameGenerator.solved(size)
        blank = 0
        prev: Direction | None = None

        for _ in range(moves):
            options = list(legal_directions(blank, size))
            if not options:
                break
            if prev is not None and len(options) > 1:
                options.remove(_OPPOSITE[prev])
            direction = rng.choice(options)
            offset = direction.offset(size)
            state = slide(state, blank, offset)
            blank += offset
            prev = direction

        logger.debug("Scrambled %dx%d board with %d slides: %s", size, size, moves, state)
        return state
