"""
Backtracking search over an assignment history.

The engine checks every clause against the current node, gives up on the
node as soon as one clause is falsified, and otherwise branches on the
lowest unassigned variable, TRUE first. There is no propagation, learning
or variable ordering heuristic: the worst case is the full binary tree of
depth num_vars.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Optional
import logging
import sys
import time

from ..exceptions import SearchResourceError
from .evaluator import clause_falsified, clause_satisfied
from .formula import Formula
from .history import AssignmentHistory, Value

logger = logging.getLogger(__name__)

# frames for evaluator calls below the deepest search level
_STACK_MARGIN = 100


@dataclass
class SearchResult:
    """
    Outcome of one search session.

    `node` refers into `history`; keeping the result alive keeps the whole
    tree alive, so the satisfying path can be read back at any time.
    """
    history: AssignmentHistory
    node: Optional[int]
    nodes_explored: int = 0
    elapsed: float = 0.0

    @property
    def satisfiable(self) -> bool:
        return self.node is not None

    def assignment(self) -> Dict[int, bool]:
        if self.node is None:
            return {}
        return {var: value == Value.TRUE for var, value in self.history.bindings(self.node).items()}


def next_unassigned(formula: Formula, history: AssignmentHistory, node: int) -> Optional[int]:
    """Lowest variable in 1..num_vars with no binding on the path to node."""
    bound = {history.variable(n) for n in history.ancestors(node)}
    for variable in range(1, formula.num_vars + 1):
        if variable not in bound:
            return variable
    return None


def search(formula: Formula, history: AssignmentHistory, node: int) -> Optional[int]:
    """Return the handle of the first satisfying node below `node`, or None."""
    all_satisfied = True
    for clause in formula.clauses:
        if clause_falsified(history, node, clause):
            return None
        if all_satisfied and not clause_satisfied(history, node, clause):
            all_satisfied = False

    if all_satisfied:
        return node

    variable = next_unassigned(formula, history, node)
    if variable is None:
        # unreachable once every variable is bound; treated as a dead end
        return None

    found = search(formula, history, history.branch(node, variable, Value.TRUE))
    if found is not None:
        return found
    return search(formula, history, history.branch(node, variable, Value.FALSE))


@contextmanager
def recursion_headroom(depth: int):
    """Temporarily raise the interpreter recursion limit to fit `depth` nested calls."""
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(previous + depth + _STACK_MARGIN)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class BacktrackingSearch:
    """One search session: owns the history tree and the formula it explores."""

    def __init__(self, formula: Formula, history: Optional[AssignmentHistory] = None):
        self.formula = formula
        self.history = history if history is not None else AssignmentHistory()

    def run(self) -> SearchResult:
        start = time.time()
        initial_nodes = len(self.history)
        logger.debug(
            "Starting search: %d variables, %d clauses",
            self.formula.num_vars, self.formula.num_clauses,
        )

        try:
            with recursion_headroom(self.formula.num_vars):
                node = search(self.formula, self.history, self.history.root)
        except RecursionError as e:
            raise SearchResourceError(
                f"Search recursion exhausted the stack at {self.formula.num_vars} variables"
            ) from e
        except MemoryError as e:
            raise SearchResourceError(
                f"Out of memory after creating {len(self.history)} history nodes"
            ) from e

        result = SearchResult(
            history=self.history,
            node=node,
            nodes_explored=len(self.history) - initial_nodes,
            elapsed=time.time() - start,
        )
        logger.info(
            "Search finished: %s after %d nodes in %.3fs",
            "SAT" if result.satisfiable else "UNSAT", result.nodes_explored, result.elapsed,
        )
        return result
