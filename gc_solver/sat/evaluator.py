"""Truth of literals and clauses under the partial assignment of a history node."""

from .formula import Clause
from .history import AssignmentHistory, Value


def assignment_of(history: AssignmentHistory, node: int, variable: int) -> Value:
    return history.assignment_of(node, variable)


def literal_value(history: AssignmentHistory, node: int, literal: int) -> bool:
    """True iff the literal's variable is assigned with the literal's polarity."""
    value = history.assignment_of(node, abs(literal))
    if value == Value.UNASSIGNED:
        return False
    return (literal > 0 and value == Value.TRUE) or (literal < 0 and value == Value.FALSE)


def clause_satisfied(history: AssignmentHistory, node: int, clause: Clause) -> bool:
    return any(literal_value(history, node, lit) for lit in clause)


def clause_falsified(history: AssignmentHistory, node: int, clause: Clause) -> bool:
    """
    True iff every variable of the clause is assigned and no literal is true.

    A clause with an unassigned variable is never falsified, whatever the
    other literals evaluate to.
    """
    for lit in clause:
        if history.assignment_of(node, abs(lit)) == Value.UNASSIGNED:
            return False
    return not clause_satisfied(history, node, clause)
