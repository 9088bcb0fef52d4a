"""Base solver interface for all CNF solver implementations"""

from abc import ABC, abstractmethod
from typing import Optional
from dataclasses import dataclass
import time

from .config import Config, get_config
from .exceptions import CapacityExceededError
from .sat.formula import Formula
from .sat.search import SearchResult


@dataclass
class SolverMetadata:
    """Metadata about a solver implementation"""
    name: str
    version: str
    complete: bool = True
    description: str = ""


class BaseSolver(ABC):
    """
    Abstract base class for all solvers.
    Provides capacity validation, basic timing, and a consistent API.
    """

    def __init__(self, formula: Formula, config: Optional[Config] = None):
        self.formula = formula
        self.config = config if config is not None else get_config()
        self.start_time: Optional[float] = None
        self._validate_instance()

    def _validate_instance(self) -> None:
        if self.formula.num_vars > self.config.max_variables:
            raise CapacityExceededError(
                f"Formula has {self.formula.num_vars} variables, maximum is {self.config.max_variables}"
            )
        if self.formula.num_clauses > self.config.max_clauses:
            raise CapacityExceededError(
                f"Formula has {self.formula.num_clauses} clauses, maximum is {self.config.max_clauses}"
            )

    @abstractmethod
    def _search(self) -> SearchResult:
        """Run the solver-specific search."""
        pass

    def solve(self) -> SearchResult:
        """Main solving method with timing. Errors propagate to the caller."""
        self.start_time = time.time()
        result = self._search()
        result.elapsed = self.elapsed_time
        return result

    @property
    def elapsed_time(self) -> float:
        if self.start_time is None:
            return 0.0
        return time.time() - self.start_time

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> SolverMetadata:
        """Return metadata about this solver."""
        pass
