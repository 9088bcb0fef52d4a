"""Turn a satisfying history node back into a vertex coloring."""

from typing import Dict, List, Optional

from ..sat.history import AssignmentHistory, Value
from .encoder import var_index

Coloring = Dict[int, Optional[int]]


def decode_coloring(history: AssignmentHistory, node: int, vertices: int, colors: int) -> Coloring:
    """
    Map every vertex to the color whose variable is bound TRUE on the path
    from `node` to the root.

    A vertex with no TRUE color variable maps to None. That only happens
    when the formula did not require a color per vertex.
    """
    true_vars = {
        history.variable(n) for n in history.ancestors(node)
        if history.value(n) == Value.TRUE
    }
    coloring: Coloring = {}
    for v in range(1, vertices + 1):
        coloring[v] = next(
            (c for c in range(1, colors + 1) if var_index(v, c, colors) in true_vars),
            None,
        )
    return coloring


def format_coloring(coloring: Coloring) -> List[str]:
    lines = []
    for vertex in sorted(coloring):
        color = coloring[vertex]
        lines.append(f"Vertex {vertex}: Color {color}" if color is not None else f"Vertex {vertex}: unassigned")
    return lines


def format_outcome(coloring: Optional[Coloring]) -> List[str]:
    """Lines printed for a solved instance: SAT! and the coloring, or UNSAT!."""
    if coloring is None:
        return ["UNSAT!"]
    return ["SAT!"] + format_coloring(coloring)
