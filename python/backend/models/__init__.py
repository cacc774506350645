from backend.models.board import BoardState, Direction, InvalidBoardError
from backend.models.node import SearchNode

__all__ = ["BoardState", "Direction", "InvalidBoardError", "SearchNode"]
