"""CNF model, assignment history and the backtracking search engine."""

from .formula import Clause, Formula
from .history import AssignmentHistory, Value
from .search import BacktrackingSearch, SearchResult

__all__ = [
    "Clause",
    "Formula",
    "AssignmentHistory",
    "Value",
    "BacktrackingSearch",
    "SearchResult",
]
