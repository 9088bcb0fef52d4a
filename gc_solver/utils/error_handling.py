"""Error handling utilities for solvers and CLI"""

from contextlib import contextmanager
import logging

import click

from gc_solver.exceptions import GCException, SearchResourceError

logger = logging.getLogger(__name__)


@contextmanager
def handle_solver_errors():
    """
    Context manager to normalize solver exceptions for the CLI.

    Known errors are reported as one line on stderr and end the command
    with exit status 1. Nothing is retried: every step is deterministic.

    Usage:
        with handle_solver_errors():
            ... solver code ...
    """
    try:
        yield
    except SearchResourceError as e:
        logger.error("Search aborted: %s", e)
        click.echo(f"Fatal: {e}", err=True)
        raise SystemExit(1)
    except GCException as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
