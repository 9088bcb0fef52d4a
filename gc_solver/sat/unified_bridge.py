"""Unified registry bridge: exposes the SAT solvers under their registry names."""
from ..registry import registry

from .tree_solver import TreeSolver as _TreeSolver
from .z3_solver import Z3ReferenceSolver as _Z3ReferenceSolver


@registry.register("tree")
class TreeSolver(_TreeSolver):
    """Registry wrapper for the backtracking tree search."""
    pass


@registry.register("z3")
class Z3Solver(_Z3ReferenceSolver):
    """Registry wrapper for the Z3 reference solver."""
    pass
