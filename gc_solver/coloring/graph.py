"""
Graph description files.

The format is a stream of whitespace-separated integers: the vertex count V,
the edge count E, then E pairs of 1-based vertex indices.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

from ..exceptions import InvalidInstanceError


@dataclass(frozen=True)
class Graph:
    num_vertices: int
    edges: Tuple[Tuple[int, int], ...]

    def __post_init__(self) -> None:
        if self.num_vertices < 0:
            raise InvalidInstanceError(f"Vertex count must be non-negative, got {self.num_vertices}")
        for u, v in self.edges:
            for vertex in (u, v):
                if not 1 <= vertex <= self.num_vertices:
                    raise InvalidInstanceError(
                        f"Edge ({u}, {v}) uses vertex {vertex}, expected 1..{self.num_vertices}"
                    )

    @property
    def num_edges(self) -> int:
        return len(self.edges)


def parse_graph(text: str) -> Graph:
    """Parse the contents of a graph description file."""
    tokens = text.split()
    try:
        numbers = [int(tok) for tok in tokens]
    except ValueError as e:
        raise InvalidInstanceError(f"Graph description must contain only integers: {e}") from e

    if len(numbers) < 2:
        raise InvalidInstanceError("Graph description must start with the vertex and edge counts")

    num_vertices, num_edges = numbers[0], numbers[1]
    if num_vertices < 0 or num_edges < 0:
        raise InvalidInstanceError(f"Counts must be non-negative, got V={num_vertices} E={num_edges}")

    endpoints = numbers[2:]
    if len(endpoints) != 2 * num_edges:
        raise InvalidInstanceError(
            f"Expected {num_edges} edges ({2 * num_edges} endpoints), found {len(endpoints)} endpoints"
        )

    edges = tuple((endpoints[i], endpoints[i + 1]) for i in range(0, len(endpoints), 2))
    return Graph(num_vertices, edges)


def read_graph(path: Union[str, Path]) -> Graph:
    """Read and parse a graph description file."""
    try:
        with open(path, "r") as f:
            text = f.read()
    except OSError as e:
        raise InvalidInstanceError(f"Cannot open graph file {path}: {e.strerror or e}") from e
    return parse_graph(text)
