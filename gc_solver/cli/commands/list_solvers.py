"""List solvers command (modular CLI)"""

import click

from ...registry import registry
from ..utils import ensure_solvers_registered


@click.command(name="list-solvers")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed solver information")
def list_solvers(verbose: bool):
    """List the registered solvers."""
    ensure_solvers_registered()

    click.echo("=== Solvers ===")
    for name, md in registry.get_all_metadata().items():
        if verbose:
            click.echo(f"  - {name}")
            click.echo(f"      Description: {md.description or 'N/A'}")
            click.echo(f"      Version: {md.version}")
            click.echo(f"      Complete: {'Yes' if md.complete else 'No'}")
        else:
            desc = f" - {md.description}" if md.description else ""
            click.echo(f"  - {name}{desc}")
