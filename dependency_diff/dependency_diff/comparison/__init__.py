"""Comparison engine: version classification, compare links and change sets."""

from .change_set import build_change_set, build_full_change_log
from .compare_url import build_compare_url
from .package_diff import DiffRecord, PackageDiff, Pairing
from .version_classifier import HASH_LENGTH, classify, compare_versions, is_hash_version

__all__ = [
    "HASH_LENGTH",
    "DiffRecord",
    "PackageDiff",
    "Pairing",
    "build_change_set",
    "build_compare_url",
    "build_full_change_log",
    "classify",
    "compare_versions",
    "is_hash_version",
]
