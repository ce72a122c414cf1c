"""File I/O related utilities.

This package groups small modules that primarily deal with reading snapshot files and
rendering text from bundled templates.
"""

from .snapshot_loader import load_snapshot, load_snapshot_data, snapshot_from_data
from .template_renderer import TemplateRenderer

__all__ = [
    "TemplateRenderer",
    "load_snapshot",
    "load_snapshot_data",
    "snapshot_from_data",
]
