"""Board model, search node and scrambler tests."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.models.board import (
    Direction,
    InvalidBoardError,
    board_size,
    find_blank,
    goal_state,
    is_solved,
    legal_directions,
    slide,
    validate_state,
)
from backend.models.node import SearchNode


# -- board helpers ------------------------------------------------------------


@pytest.mark.parametrize(
    "length, expected",
    [(0, None), (1, 1), (2, None), (4, 2), (8, None), (9, 3), (16, 4), (36, 6)],
)
def test_board_size(length: int, expected: int | None) -> None:
    assert board_size(list(range(length))) == expected


def test_is_solved() -> None:
    assert is_solved(goal_state(3))
    assert is_solved([0, 1, 2, 3])
    assert not is_solved([1, 0, 2, 3])
    assert not is_solved([0, 1, 3, 2])


def test_find_blank() -> None:
    assert find_blank([3, 2, 1, 0]) == 3
    assert find_blank([1, 2, 3, 4]) == -1


def test_validate_state_returns_tuple() -> None:
    assert validate_state([3, 2, 1, 0]) == (3, 2, 1, 0)
    with pytest.raises(InvalidBoardError, match="no blank"):
        validate_state([1, 2, 3, 4])
    with pytest.raises(InvalidBoardError, match="integers"):
        validate_state([0, 1.0, 2, 3])


@pytest.mark.parametrize(
    "blank, expected",
    [
        (0, [Direction.DOWN, Direction.RIGHT]),
        (1, [Direction.DOWN, Direction.LEFT, Direction.RIGHT]),
        (2, [Direction.DOWN, Direction.LEFT]),
        (3, [Direction.UP, Direction.DOWN, Direction.RIGHT]),
        (4, [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]),
        (5, [Direction.UP, Direction.DOWN, Direction.LEFT]),
        (6, [Direction.UP, Direction.RIGHT]),
        (8, [Direction.UP, Direction.LEFT]),
    ],
)
def test_legal_directions_in_expansion_order(
    blank: int, expected: list[Direction]
) -> None:
    assert list(legal_directions(blank, 3)) == expected


def test_direction_offsets() -> None:
    assert [d.offset(4) for d in Direction] == [-4, 4, -1, 1]


def test_slide_copies_state() -> None:
    state = (1, 2, 3, 0, 4, 5, 6, 7, 8)
    moved = slide(state, 3, Direction.UP.offset(3))

    assert moved == (0, 2, 3, 1, 4, 5, 6, 7, 8)
    assert state == (1, 2, 3, 0, 4, 5, 6, 7, 8)


# -- search node --------------------------------------------------------------


def test_search_node_lineage() -> None:
    root = SearchNode.root((3, 2, 1, 0))
    child = root.child((3, 0, 1, 2), 1)
    grandchild = child.child((0, 3, 1, 2), 0)

    assert root.blank_index == 3
    assert root.predecessor is None
    assert grandchild.depth == 2
    assert grandchild.lineage() == [root, child, grandchild]


# -- scrambler ----------------------------------------------------------------


def test_solved_board() -> None:
    assert GameGenerator.solved(3) == (0, 1, 2, 3, 4, 5, 6, 7, 8)
    with pytest.raises(ValueError):
        GameGenerator.solved(0)


def test_scramble_is_reproducible() -> None:
    a = GameGenerator.scramble(4, 30, random.Random(42))
    b = GameGenerator.scramble(4, 30, random.Random(42))

    assert a == b
    assert sorted(a) == list(range(16))


def test_scramble_zero_moves_is_goal() -> None:
    assert GameGenerator.scramble(3, 0) == goal_state(3)


def test_scramble_single_cell_board() -> None:
    assert GameGenerator.scramble(1, 5) == (0,)
