"""
Solution format utilities for graph coloring results

Provides a standardized solution representation and JSON serialization.
Result files map solver names to solutions, one file per instance.
"""

from typing import Dict, Any, Optional
import json
from pathlib import Path

from ..exceptions import InvalidSolutionError


class ColoringSolution:
    """Represents the outcome of one solver run on one instance"""

    def __init__(
        self,
        time: float,
        satisfiable: bool,
        colors: int,
        coloring: Optional[Dict[int, Optional[int]]] = None,
        nodes_explored: int = 0,
    ):
        self.time = time
        self.satisfiable = satisfiable
        self.colors = colors
        self.coloring = coloring or {}
        self.nodes_explored = nodes_explored

    def to_dict(self) -> Dict[str, Any]:
        """Convert solution to dictionary format (JSON keys must be strings)"""
        return {
            "time": round(self.time, 6),
            "satisfiable": self.satisfiable,
            "colors": self.colors,
            "coloring": {str(v): c for v, c in sorted(self.coloring.items())},
            "nodes_explored": self.nodes_explored,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ColoringSolution":
        if not isinstance(data, dict):
            raise InvalidSolutionError(f"Solution entry must be an object, got {type(data).__name__}")
        for field in ("time", "satisfiable", "colors", "coloring"):
            if field not in data:
                raise InvalidSolutionError(f"Missing field '{field}'")
        try:
            coloring = {int(v): (int(c) if c is not None else None) for v, c in data["coloring"].items()}
        except (AttributeError, TypeError, ValueError) as e:
            raise InvalidSolutionError(f"Malformed coloring: {e}") from e
        return cls(
            time=data["time"],
            satisfiable=bool(data["satisfiable"]),
            colors=int(data["colors"]),
            coloring=coloring,
            nodes_explored=int(data.get("nodes_explored", 0)),
        )


def save_results(
    instance_name: str,
    results: Dict[str, ColoringSolution],
    output_dir: Path
) -> Path:
    """
    Save results in JSON format, merging with earlier runs of other solvers

    Args:
        instance_name: Name of the instance (usually the graph file stem)
        results: Dictionary mapping solver names to solutions
        output_dir: Output directory path

    Returns:
        Path of the written file
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / f"{instance_name}.json"

    # Load existing data if file exists
    existing_data = {}
    if output_file.exists():
        try:
            with open(output_file, 'r') as f:
                existing_data = json.load(f)
        except (json.JSONDecodeError, IOError):
            existing_data = {}
        if not isinstance(existing_data, dict):
            existing_data = {}

    # Merge new results with existing data
    for solver_name, solution in results.items():
        existing_data[solver_name] = solution.to_dict()

    with open(output_file, 'w') as f:
        json.dump(existing_data, f, indent=2)
    return output_file


def load_results(path: Path) -> Dict[str, ColoringSolution]:
    """Load a results file written by save_results"""
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidSolutionError(f"Invalid JSON format in {path}: {e}") from e
    except OSError as e:
        raise InvalidSolutionError(f"Cannot read {path}: {e}") from e
    if not isinstance(data, dict):
        raise InvalidSolutionError(f"{path} must contain a JSON object")
    return {name: ColoringSolution.from_dict(entry) for name, entry in data.items()}
