from backend.engine.gamesolver.solver import Solver, SolverStateError

__all__ = ["Solver", "SolverStateError"]
