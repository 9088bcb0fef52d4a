"""
Solution checks for CNF assignments and graph colorings.

Both checkers return a (is_valid, message) tuple instead of raising, so
callers can report every failure they find.
"""

from typing import Dict, Mapping, Optional, Tuple

from ..coloring.graph import Graph
from ..sat.formula import Formula


def check_assignment(formula: Formula, assignment: Mapping[int, bool]) -> Tuple[bool, str]:
    """
    Check that every clause has a true literal under `assignment`.

    The assignment may be partial: an unbound variable makes none of its
    literals true.
    """
    for index, clause in enumerate(formula.clauses):
        satisfied = any(
            abs(lit) in assignment and assignment[abs(lit)] == (lit > 0)
            for lit in clause
        )
        if not satisfied:
            return False, f"Clause {index} {list(clause.literals)} is not satisfied"
    return True, "Valid assignment"


def check_coloring(graph: Graph, colors: int, coloring: Dict[int, Optional[int]]) -> Tuple[bool, str]:
    """Check that every vertex has a color in 1..colors and no edge joins equal colors."""
    errors = []
    for v in range(1, graph.num_vertices + 1):
        color = coloring.get(v)
        if color is None:
            errors.append(f"Vertex {v} has no color")
        elif not 1 <= color <= colors:
            errors.append(f"Vertex {v} has color {color}, expected 1..{colors}")

    for u, v in graph.edges:
        cu, cv = coloring.get(u), coloring.get(v)
        if cu is not None and cu == cv:
            errors.append(f"Edge ({u}, {v}) joins two vertices of color {cu}")

    if errors:
        return False, "; ".join(errors)
    return True, "Valid coloring"
