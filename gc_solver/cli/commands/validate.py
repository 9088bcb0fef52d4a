"""Validate command (modular CLI)"""

from pathlib import Path

import click

from ...coloring.graph import read_graph
from ...utils.checker import check_coloring
from ...utils.error_handling import handle_solver_errors
from ...utils.solution_format import load_results


@click.command()
@click.argument("graph_file", type=click.Path(dir_okay=False))
@click.argument("results_file", type=click.Path(dir_okay=False))
def validate(graph_file: str, results_file: str):
    """Check the colorings saved in RESULTS_FILE against GRAPH_FILE."""
    with handle_solver_errors():
        graph = read_graph(graph_file)
        results = load_results(Path(results_file))

    failures = 0
    for solver_name, solution in sorted(results.items()):
        if not solution.satisfiable:
            click.echo(f"{solver_name}: UNSAT (nothing to check)")
            continue
        is_valid, message = check_coloring(graph, solution.colors, solution.coloring)
        if is_valid:
            click.echo(f"{solver_name}: {message}")
        else:
            failures += 1
            click.echo(f"{solver_name}: {message}", err=True)

    if failures:
        raise SystemExit(1)
