"""Data models shared by the comparison and rendering layers."""

from .modes import DiffMode, Environment
from .package import Package
from .snapshot import Snapshot

__all__ = [
    "DiffMode",
    "Environment",
    "Package",
    "Snapshot",
]
