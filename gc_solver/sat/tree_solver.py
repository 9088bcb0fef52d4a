"""Solver wrapper around the backtracking search engine."""

from ..base_solver import BaseSolver, SolverMetadata
from .search import BacktrackingSearch, SearchResult


class TreeSolver(BaseSolver):
    """Exhaustive search: lowest unassigned variable first, TRUE before FALSE."""

    def _search(self) -> SearchResult:
        return BacktrackingSearch(self.formula).run()

    @classmethod
    def get_metadata(cls) -> SolverMetadata:
        return SolverMetadata(
            name="tree",
            version="1.0",
            description="Backtracking search over a parent-linked assignment tree.",
        )
