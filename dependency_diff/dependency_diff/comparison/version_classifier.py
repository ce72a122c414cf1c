# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Version classification for dependency changelogs.

A dependency version is either a semantic version (``1.2.3``, ``v2.0.0-rc.1``)
or a pin to a VCS commit (``a1b2c3d``). Commit pins cannot be ordered, so any
pair involving one is only ever reported as *changed*.

Classification order:
  * identical strings → Same
  * either side a hash version → Changed
  * source newer than target → Downgraded
  * source older than target → Upgraded
  * anything else (``1.0`` vs ``1.0.0``, ``1.0.0`` vs ``1.0.0+build.1``,
    unparsable versions) → Changed
"""

from __future__ import annotations

import logging
from typing import Optional

from semver import Version

from ..models.modes import DiffMode

logger = logging.getLogger(__name__)


# Length of a short commit hash as printed by ``git log --oneline``.
HASH_LENGTH = 7


def is_hash_version(version: str) -> bool:
    """Return True if *version* looks like a short commit hash rather than a release."""
    return len(version) == HASH_LENGTH and "." not in version


def parse_version(raw: str) -> Optional[Version]:
    """Parse a version string (with or without 'v' prefix).

    Returns:
        A :class:`semver.Version`, or None when the string is not a semantic version.
        Missing minor or patch parts default to zero, so ``1.0`` parses as ``1.0.0``.
    """
    text = raw.strip()
    if text[:1] in ("v", "V"):
        text = text[1:]

    try:
        return Version.parse(text, optional_minor_and_patch=True)
    except ValueError:
        return None


def compare_versions(source: str, target: str) -> Optional[int]:
    """Compare two version strings.

    Returns:
        -1, 0 or 1 like a classic ``cmp``; None if either side cannot be parsed.
    """
    source_ver = parse_version(source)
    target_ver = parse_version(target)
    if source_ver is None or target_ver is None:
        return None

    # semver precedence: prereleases sort before the release, build metadata is ignored
    return source_ver.compare(target_ver)


def classify(source_version: Optional[str], target_version: Optional[str]) -> DiffMode:
    """Pick the changelog mode for a version transition.

    A missing source means the package is new, a missing target means it was removed.
    """
    if source_version is None:
        return DiffMode.NEW
    if target_version is None:
        return DiffMode.REMOVED

    if source_version == target_version:
        return DiffMode.SAME

    if is_hash_version(source_version) or is_hash_version(target_version):
        return DiffMode.CHANGED

    order = compare_versions(source_version, target_version)
    if order is None:
        logger.debug(
            "Cannot order versions '%s' and '%s', reporting as changed",
            source_version,
            target_version,
        )
        return DiffMode.CHANGED

    if order > 0:
        return DiffMode.DOWNGRADED

    if order < 0:
        return DiffMode.UPGRADED

    return DiffMode.CHANGED
