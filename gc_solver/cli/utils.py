"""CLI utilities shared by the commands"""

from typing import List

from ..registry import registry


def ensure_solvers_registered() -> List[str]:
    """
    Import the registry bridge so every solver is registered, and return
    the registered names.
    """
    import gc_solver.sat.unified_bridge  # noqa: F401

    return registry.list_solvers()
