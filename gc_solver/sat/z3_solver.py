"""
Reference solver backed by Z3.

Used to cross-check the backtracking engine. The Z3 model is written into
a fresh AssignmentHistory as a single chain (variables in increasing order)
so callers read both solvers' results the same way.
"""

import logging
from typing import Dict

from z3 import Bool, BoolVal, Not, Or, Solver, is_true, sat, unsat

from ..base_solver import BaseSolver, SolverMetadata
from ..exceptions import SearchResourceError
from .formula import Formula
from .history import AssignmentHistory, Value
from .search import SearchResult

logger = logging.getLogger(__name__)


def build_z3_solver(formula: Formula):
    """Translate the formula into a Z3 Solver; returns (solver, variables)."""
    s = Solver()
    s.set("random_seed", 42)

    variables: Dict[int, object] = {v: Bool(f"x_{v}") for v in range(1, formula.num_vars + 1)}
    for clause in formula.clauses:
        lits = [variables[lit] if lit > 0 else Not(variables[-lit]) for lit in clause]
        if not lits:
            s.add(BoolVal(False))
        elif len(lits) == 1:
            s.add(lits[0])
        else:
            s.add(Or(*lits))
    return s, variables


class Z3ReferenceSolver(BaseSolver):
    """Decides the formula with Z3 and records the full model as a history path."""

    def _search(self) -> SearchResult:
        solver, variables = build_z3_solver(self.formula)
        history = AssignmentHistory()

        outcome = solver.check()
        if outcome == unsat:
            logger.info("Z3 reports UNSAT")
            return SearchResult(history=history, node=None)
        if outcome != sat:
            reason = solver.reason_unknown()
            logger.error("Z3 could not decide the formula: %s", reason)
            raise SearchResourceError(f"Z3 could not decide the formula: {reason}")

        model = solver.model()
        node = history.root
        for v in range(1, self.formula.num_vars + 1):
            value = Value.TRUE if is_true(model.evaluate(variables[v], model_completion=True)) else Value.FALSE
            node = history.branch(node, v, value)

        logger.info("Z3 reports SAT")
        return SearchResult(history=history, node=node, nodes_explored=len(history) - 1)

    @classmethod
    def get_metadata(cls) -> SolverMetadata:
        return SolverMetadata(
            name="z3",
            version="1.0",
            description="Z3 reference solver for cross-checking results.",
        )
