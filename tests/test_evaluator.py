import itertools

import pytest

from gc_solver.sat.evaluator import assignment_of, clause_falsified, clause_satisfied, literal_value
from gc_solver.sat.formula import Clause
from gc_solver.sat.history import AssignmentHistory, Value


def build_path(decisions):
    history = AssignmentHistory()
    node = history.root
    for variable, value in decisions:
        node = history.branch(node, variable, value)
    return history, node


def test_literal_values():
    history, node = build_path([(1, Value.TRUE), (2, Value.FALSE)])
    assert literal_value(history, node, 1)
    assert not literal_value(history, node, -1)
    assert literal_value(history, node, -2)
    assert not literal_value(history, node, 2)
    # unassigned literals are never true, in either polarity
    assert not literal_value(history, node, 3)
    assert not literal_value(history, node, -3)
    assert assignment_of(history, node, 3) == Value.UNASSIGNED


def test_clause_with_unassigned_variable_is_never_falsified():
    history, node = build_path([(1, Value.FALSE), (2, Value.TRUE)])
    clause = Clause((1, -2, 3))
    assert not clause_satisfied(history, node, clause)
    assert not clause_falsified(history, node, clause)


def test_fully_assigned_clause_is_falsified_when_no_literal_holds():
    history, node = build_path([(1, Value.FALSE), (2, Value.TRUE)])
    assert clause_falsified(history, node, Clause((1, -2)))
    assert not clause_falsified(history, node, Clause((1, 2)))


def test_empty_clause_is_falsified_at_the_root():
    history = AssignmentHistory()
    assert clause_falsified(history, history.root, Clause(()))
    assert not clause_satisfied(history, history.root, Clause(()))


@pytest.mark.parametrize("values", list(itertools.product((Value.TRUE, Value.FALSE, None), repeat=3)))
def test_satisfied_and_falsified_agree_with_their_definitions(values):
    decisions = [(v, value) for v, value in enumerate(values, start=1) if value is not None]
    history, node = build_path(decisions)
    bound = dict(decisions)
    for clause_lits in [(1,), (-1, 2), (1, -2, 3), (-1, -2, -3)]:
        clause = Clause(clause_lits)
        matches = [abs(l) in bound and (bound[abs(l)] == Value.TRUE) == (l > 0) for l in clause_lits]
        all_bound = all(abs(l) in bound for l in clause_lits)
        assert clause_satisfied(history, node, clause) == any(matches)
        assert clause_falsified(history, node, clause) == (all_bound and not any(matches))
