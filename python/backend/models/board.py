"""Board model for the N×N sliding puzzle.

A board is a flat, row-major tuple of ints.  ``0`` is the blank and the
solved board is ``(0, 1, 2, ..., n*n - 1)``.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from enum import StrEnum

BoardState = tuple[int, ...]

BLANK = 0


class InvalidBoardError(ValueError):
    """Raised when a tile sequence is not a permutation of ``0..L-1``."""


class Direction(StrEnum):
    """Direction the *blank* travels during a slide."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def offset(self, size: int) -> int:
        """Index delta of the tile swapped with the blank on a *size*-wide board."""
        return {
            Direction.UP: -size,
            Direction.DOWN: size,
            Direction.LEFT: -1,
            Direction.RIGHT: 1,
        }[self]


# Expansion order; it decides which of several shortest paths is found first.
DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


# -- queries ------------------------------------------------------------------


def board_size(state: Sequence[int]) -> int | None:
    """Return the side length *n* of *state*, or ``None`` if it is not square."""
    length = len(state)
    if length == 0:
        return None
    n = math.isqrt(length)
    return n if n * n == length else None


def goal_state(size: int) -> BoardState:
    return tuple(range(size * size))


def is_solved(state: Sequence[int]) -> bool:
    """True if the tiles are non-decreasing in row-major order."""
    return all(state[i] <= state[i + 1] for i in range(len(state) - 1))


def find_blank(state: Sequence[int]) -> int:
    """Index of the blank, or ``-1`` if there is none."""
    for i, v in enumerate(state):
        if v == BLANK:
            return i
    return -1


def validate_state(state: Sequence[int]) -> BoardState:
    """Return *state* as a tuple, checking it is a permutation of ``0..L-1``.

    Raises:
        InvalidBoardError: on a missing blank, a repeated tile, or a value
            outside ``0..L-1``.
    """
    tiles = tuple(state)
    length = len(tiles)
    if any(not isinstance(v, int) or isinstance(v, bool) for v in tiles):
        raise InvalidBoardError(f"Tiles must be integers, got {list(tiles)}.")
    if BLANK not in tiles:
        raise InvalidBoardError(
            f"Board {list(tiles)} has no blank (expected exactly one 0)."
        )
    if sorted(tiles) != list(range(length)):
        raise InvalidBoardError(
            f"Board {list(tiles)} is not a permutation of 0..{length - 1}."
        )
    return tiles


# -- moves --------------------------------------------------------------------


def legal_directions(blank: int, size: int) -> Iterator[Direction]:
    """Yield the legal blank directions from index *blank*, in expansion order."""
    length = size * size
    for direction in DIRECTIONS:
        if direction is Direction.UP and blank - size >= 0:
            yield direction
        elif direction is Direction.DOWN and blank + size < length:
            yield direction
        elif direction is Direction.LEFT and blank % size != 0:
            yield direction
        elif direction is Direction.RIGHT and (blank + 1) % size != 0:
            yield direction


def slide(state: BoardState, blank: int, offset: int) -> BoardState:
    """Return a new state with the blank swapped with the tile at ``blank + offset``."""
    tiles = list(state)
    target = blank + offset
    tiles[blank], tiles[target] = tiles[target], tiles[blank]
    return tuple(tiles)


def is_tile_correct(state: Sequence[int], index: int) -> bool:
    """Check if the tile at *index* sits in its goal position."""
    return state[index] == index
