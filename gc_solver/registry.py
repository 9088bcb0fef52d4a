"""
Solver registry: maps solver names to BaseSolver subclasses.
"""

from typing import Dict, Type, List, Optional
from .base_solver import BaseSolver, SolverMetadata
from .exceptions import SolverNotFoundError


class SolverRegistry:
    def __init__(self):
        self._solvers: Dict[str, Type[BaseSolver]] = {}

    def register(self, name: str):
        def decorator(cls: Type[BaseSolver]):
            self._solvers[name] = cls
            return cls
        return decorator

    def get_solver(self, name: str) -> Type[BaseSolver]:
        cls = self._solvers.get(name)
        if cls is None:
            available = ", ".join(sorted(self._solvers)) or "none"
            raise SolverNotFoundError(f"Solver '{name}' not found (available: {available})")
        return cls

    def list_solvers(self) -> List[str]:
        return sorted(self._solvers)

    def get_metadata(self, name: str) -> Optional[SolverMetadata]:
        cls = self._solvers.get(name)
        return cls.get_metadata() if cls else None

    def get_all_metadata(self) -> Dict[str, SolverMetadata]:
        return {name: cls.get_metadata() for name, cls in sorted(self._solvers.items())}


# Global registry instance
registry = SolverRegistry()
