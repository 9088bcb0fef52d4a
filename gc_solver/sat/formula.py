"""Immutable CNF model: literals are signed ints, clauses are tuples of them."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from ..exceptions import InvalidInstanceError


@dataclass(frozen=True)
class Clause:
    """A disjunction of literals. Order only matters for short-circuiting."""
    literals: Tuple[int, ...]

    def __iter__(self) -> Iterator[int]:
        return iter(self.literals)

    def __len__(self) -> int:
        return len(self.literals)


@dataclass(frozen=True)
class Formula:
    """
    A CNF formula over variables 1..num_vars.

    Built once by the encoder and only read during search. An empty clause
    is allowed and makes the formula unsatisfiable.
    """
    clauses: Tuple[Clause, ...]
    num_vars: int

    def __post_init__(self) -> None:
        if self.num_vars < 0:
            raise InvalidInstanceError(f"Variable count must be non-negative, got {self.num_vars}")
        for index, clause in enumerate(self.clauses):
            for lit in clause:
                if not isinstance(lit, int) or isinstance(lit, bool):
                    raise InvalidInstanceError(f"Clause {index} contains a non-integer literal {lit!r}")
                if lit == 0:
                    raise InvalidInstanceError(f"Clause {index} contains the literal 0")
                if abs(lit) > self.num_vars:
                    raise InvalidInstanceError(
                        f"Clause {index} mentions variable {abs(lit)} but the formula has {self.num_vars}"
                    )

    @classmethod
    def from_lists(cls, clauses: Iterable[Sequence[int]], num_vars: Optional[int] = None) -> "Formula":
        """Build a formula from plain literal lists; num_vars defaults to the largest variable."""
        built = tuple(Clause(tuple(clause)) for clause in clauses)
        if num_vars is None:
            num_vars = max((abs(lit) for clause in built for lit in clause if isinstance(lit, int)), default=0)
        return cls(built, num_vars)

    @property
    def num_clauses(self) -> int:
        return len(self.clauses)

    def __iter__(self) -> Iterator[Clause]:
        return iter(self.clauses)
