"""Graph coloring front end: graph files, CNF encoding and coloring reports."""

from .graph import Graph, parse_graph, read_graph
from .encoder import encode_coloring, var_index
from .report import decode_coloring, format_coloring, format_outcome

__all__ = [
    "Graph",
    "parse_graph",
    "read_graph",
    "encode_coloring",
    "var_index",
    "decode_coloring",
    "format_coloring",
    "format_outcome",
]
