"""Solve command implemented against the solver registry"""

from pathlib import Path
from typing import Optional

import click

from ...registry import registry
from ...config import get_config
from ...coloring.graph import read_graph
from ...coloring.encoder import encode_coloring
from ...coloring.report import decode_coloring, format_outcome
from ...exceptions import InvalidSolutionError
from ...utils.checker import check_assignment, check_coloring
from ...utils.error_handling import handle_solver_errors
from ...utils.solution_format import ColoringSolution, save_results
from ..utils import ensure_solvers_registered


@click.command()
@click.argument("graph_file", type=click.Path(dir_okay=False))
@click.option("--colors", "-k", type=click.IntRange(min=1), default=None, help="Number of colors (prompted if omitted)")
@click.option("--solver", "-s", help="Registered solver name (defaults from config)")
@click.option("--output", "-o", type=click.Path(file_okay=False), help="Directory for the JSON result (implies --save)")
@click.option("--save", is_flag=True, help="Save a JSON result to the configured results directory")
@click.option("--check/--no-check", default=None, help="Verify the result against the formula and graph (defaults from config)")
def solve(
    graph_file: str,
    colors: Optional[int],
    solver: Optional[str],
    output: Optional[str],
    save: bool,
    check: Optional[bool],
):
    """Decide whether GRAPH_FILE can be colored and print the coloring."""
    ensure_solvers_registered()
    cfg = get_config()

    with handle_solver_errors():
        graph = read_graph(graph_file)
        if colors is None:
            colors = click.prompt("Number of colors", type=click.IntRange(min=1))

        formula = encode_coloring(graph, colors, cfg)
        solver_name = solver or cfg.default_solver
        solver_cls = registry.get_solver(solver_name)
        result = solver_cls(formula, cfg).solve()

        coloring = None
        if result.satisfiable:
            coloring = decode_coloring(result.history, result.node, graph.num_vertices, colors)

        for line in format_outcome(coloring):
            click.echo(line)

        if coloring is not None and (check if check is not None else cfg.validate_solutions):
            for is_valid, message in (
                check_assignment(formula, result.assignment()),
                check_coloring(graph, colors, coloring),
            ):
                if not is_valid:
                    raise InvalidSolutionError(message)

        if output or save:
            output_dir = Path(output) if output else cfg.results_dir
            solution = ColoringSolution(
                time=result.elapsed,
                satisfiable=result.satisfiable,
                colors=colors,
                coloring=coloring,
                nodes_explored=result.nodes_explored,
            )
            saved = save_results(Path(graph_file).stem, {solver_name: solution}, output_dir)
            click.echo(f"Results saved to {saved}", err=True)
