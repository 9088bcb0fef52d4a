"""Main CLI entry point (modular)"""

import sys
from typing import List, Optional

import click

from ..config import configure_logging, get_config
from ..utils.error_handling import handle_solver_errors

# Commands will be imported and registered below
from .commands import solve as solve_cmd
from .commands import encode as encode_cmd
from .commands import list_solvers as list_solvers_cmd
from .commands import validate as validate_cmd


@click.group()
@click.version_option(version="0.1.0")
def cli():
    """Graph Coloring SAT Solver"""
    with handle_solver_errors():
        configure_logging(get_config())


# Register modular commands
cli.add_command(solve_cmd.solve)
cli.add_command(encode_cmd.encode)
cli.add_command(list_solvers_cmd.list_solvers)
cli.add_command(validate_cmd.validate)


def main(argv: Optional[List[str]] = None) -> None:
    """Console entry point: usage errors exit with status 1 instead of click's 2."""
    try:
        rv = cli.main(args=argv, prog_name="gc-solver", standalone_mode=False)
    except click.UsageError as e:
        e.show()
        sys.exit(1)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)
    sys.exit(rv if isinstance(rv, int) else 0)


if __name__ == "__main__":
    main()
