"""
CNF encoding of graph coloring.

Variable (v, c) is true when vertex v gets color c. Three clause families:
every vertex has at least one color, at most one color, and the endpoints
of every edge never share a color.
"""

import logging
from itertools import combinations
from typing import List, Optional

from ..config import Config, get_config
from ..exceptions import CapacityExceededError, InvalidInstanceError
from ..sat.formula import Clause, Formula
from .graph import Graph

logger = logging.getLogger(__name__)


def var_index(vertex: int, color: int, colors: int) -> int:
    """Variable number for (vertex, color), both 1-based."""
    return (vertex - 1) * colors + color


def clause_count(graph: Graph, colors: int) -> int:
    n = graph.num_vertices
    return n + n * colors * (colors - 1) // 2 + graph.num_edges * colors


def check_capacity(graph: Graph, colors: int, config: Config) -> None:
    """Reject instances larger than the configured maximums before building anything."""
    checks = [
        ("vertices", graph.num_vertices, config.max_vertices),
        ("edges", graph.num_edges, config.max_edges),
        ("colors", colors, config.max_colors),
        ("variables", graph.num_vertices * colors, config.max_variables),
        ("clauses", clause_count(graph, colors), config.max_clauses),
    ]
    for what, actual, limit in checks:
        if actual > limit:
            raise CapacityExceededError(f"Instance needs {actual} {what}, maximum is {limit}")


def at_least_one_color(vertex: int, colors: int) -> Clause:
    return Clause(tuple(var_index(vertex, c, colors) for c in range(1, colors + 1)))


def at_most_one_color(vertex: int, colors: int) -> List[Clause]:
    return [
        Clause((-var_index(vertex, c1, colors), -var_index(vertex, c2, colors)))
        for c1, c2 in combinations(range(1, colors + 1), 2)
    ]


def endpoints_differ(u: int, v: int, colors: int) -> List[Clause]:
    return [
        Clause((-var_index(u, c, colors), -var_index(v, c, colors)))
        for c in range(1, colors + 1)
    ]


def encode_coloring(graph: Graph, colors: int, config: Optional[Config] = None) -> Formula:
    """Build the CNF formula that is satisfiable iff `graph` is `colors`-colorable."""
    if colors < 1:
        raise InvalidInstanceError(f"Number of colors must be at least 1, got {colors}")
    check_capacity(graph, colors, config if config is not None else get_config())

    vertices = range(1, graph.num_vertices + 1)
    clauses: List[Clause] = [at_least_one_color(v, colors) for v in vertices]
    for v in vertices:
        clauses.extend(at_most_one_color(v, colors))
    for u, v in graph.edges:
        clauses.extend(endpoints_differ(u, v, colors))

    formula = Formula(tuple(clauses), graph.num_vertices * colors)
    logger.debug(
        "Encoded %d vertices, %d edges, %d colors into %d variables and %d clauses",
        graph.num_vertices, graph.num_edges, colors, formula.num_vars, formula.num_clauses,
    )
    return formula


def to_dimacs(formula: Formula) -> str:
    """Render a formula in DIMACS CNF format."""
    lines = [f"p cnf {formula.num_vars} {formula.num_clauses}"]
    for clause in formula.clauses:
        lines.append(" ".join(str(lit) for lit in clause.literals + (0,)))
    return "\n".join(lines) + "\n"
