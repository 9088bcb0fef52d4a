"""Encode command: print the CNF formula of a coloring instance"""

import click

from ...config import get_config
from ...coloring.graph import read_graph
from ...coloring.encoder import encode_coloring, to_dimacs
from ...utils.error_handling import handle_solver_errors


@click.command()
@click.argument("graph_file", type=click.Path(dir_okay=False))
@click.option("--colors", "-k", type=click.IntRange(min=1), required=True, help="Number of colors")
def encode(graph_file: str, colors: int):
    """Print the DIMACS CNF encoding of coloring GRAPH_FILE with K colors."""
    with handle_solver_errors():
        formula = encode_coloring(read_graph(graph_file), colors, get_config())
    click.echo(to_dimacs(formula), nl=False)
