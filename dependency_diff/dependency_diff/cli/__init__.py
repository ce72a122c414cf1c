"""Command line interface for dependency_diff."""

from .run_diff import main, run

__all__ = ["main", "run"]
