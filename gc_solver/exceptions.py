"""Custom exceptions for the graph coloring solver"""


class GCException(Exception):
    """Base exception for the graph coloring solver"""
    pass


class InvalidInstanceError(GCException):
    """Raised when the graph, formula or color count is malformed"""
    pass


class CapacityExceededError(InvalidInstanceError):
    """Raised when an instance is larger than the configured maximums"""
    pass


class SolverNotFoundError(GCException):
    """Raised when requested solver is not available"""
    pass


class InvalidSolutionError(GCException):
    """Raised when solution validation fails"""
    pass


class ConfigurationError(GCException):
    """Raised when configuration is invalid"""
    pass


class ConflictingAssignmentError(GCException):
    """Raised when a variable would be bound twice on one assignment path"""
    pass


class SearchResourceError(GCException):
    """Raised when the search runs out of stack or memory"""
    pass
