"""Configuration management for the graph coloring solver"""

from dataclasses import dataclass, fields
from typing import Optional
from pathlib import Path
import json
import logging
import os

from .exceptions import ConfigurationError


_CAPACITY_FIELDS = ("max_vertices", "max_edges", "max_colors", "max_variables", "max_clauses")


@dataclass
class Config:
    """
    Global configuration for the graph coloring solver.

    Can be loaded from file or environment variables.
    """

    # Directories
    results_dir: Path = Path("res")

    # Default settings
    default_solver: str = "tree"

    # Capacity limits, checked before any search starts
    max_vertices: int = 100
    max_edges: int = 1000
    max_colors: int = 10
    max_variables: int = 1000
    max_clauses: int = 10000

    # Validation settings
    validate_solutions: bool = True

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    def validate(self) -> "Config":
        """Reject non-positive capacity limits and unknown log levels"""
        for name in _CAPACITY_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise ConfigurationError(f"Unknown log level: {self.log_level}")
        return self

    @classmethod
    def from_file(cls, path: Path) -> "Config":
        """Load configuration from JSON file"""
        try:
            with open(path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration {path} must be a JSON object")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

        # parse nested path strings
        if "results_dir" in data:
            data["results_dir"] = Path(data["results_dir"])
        if data.get("log_file"):
            data["log_file"] = Path(data["log_file"])
        return cls(**data).validate()

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables"""
        config = cls()

        for name in _CAPACITY_FIELDS:
            raw = os.getenv(f"GC_{name.upper()}")
            if raw is None:
                continue
            try:
                setattr(config, name, int(raw))
            except ValueError as e:
                raise ConfigurationError(f"GC_{name.upper()} must be an integer, got {raw!r}") from e

        if default_solver := os.getenv("GC_DEFAULT_SOLVER"):
            config.default_solver = default_solver

        if results_dir := os.getenv("GC_RESULTS_DIR"):
            config.results_dir = Path(results_dir)

        if log_level := os.getenv("GC_LOG_LEVEL"):
            config.log_level = log_level

        return config.validate()

    def save(self, path: Path) -> None:
        """Save configuration to file"""
        data = {
            "results_dir": str(self.results_dir),
            "default_solver": self.default_solver,
            "max_vertices": self.max_vertices,
            "max_edges": self.max_edges,
            "max_colors": self.max_colors,
            "max_variables": self.max_variables,
            "max_clauses": self.max_clauses,
            "validate_solutions": self.validate_solutions,
            "log_level": self.log_level,
            "log_file": str(self.log_file) if self.log_file else None,
        }
        with open(path, "w") as f:
            json.dump(data, f, indent=2)


_config: Optional[Config] = None


def get_config() -> Config:
    """Get global configuration instance"""
    global _config
    if _config is None:
        # Try to load from default locations
        config_paths = [
            Path("gc_config.json"),
            Path.home() / ".gc_config.json",
        ]

        for path in config_paths:
            if path.exists():
                _config = Config.from_file(path)
                break
        else:
            # Load from environment or use defaults
            _config = Config.from_env()

    return _config


def set_config(config: Optional[Config]) -> None:
    """Set global configuration instance (None forces a reload)"""
    global _config
    _config = config


def configure_logging(config: Config) -> None:
    """Apply the configured log level and optional log file, once per process"""
    if logging.getLogger().handlers:
        return
    handlers = [logging.FileHandler(config.log_file)] if config.log_file else None
    logging.basicConfig(
        level=str(config.log_level).upper(),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        handlers=handlers,
    )
