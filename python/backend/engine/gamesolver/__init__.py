from backend.engine.gamesolver.solver import PuzzleSolver, SearchStats

__all__ = ["PuzzleSolver", "SearchStats"]
