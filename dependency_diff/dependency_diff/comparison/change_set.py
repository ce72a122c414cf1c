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

"""Pair the packages of two snapshots into changelog entries."""

from __future__ import annotations

import logging
from typing import List

from ..models.modes import DiffMode, Environment
from ..models.snapshot import Snapshot
from .package_diff import PackageDiff

logger = logging.getLogger(__name__)


def build_change_set(source: Snapshot, target: Snapshot, environment: Environment) -> List[PackageDiff]:
    """Return one :class:`PackageDiff` per package name of *environment*, sorted by name."""
    source_packages = source.packages(environment)
    target_packages = target.packages(environment)

    change_set: List[PackageDiff] = []
    for name in sorted(set(source_packages) | set(target_packages)):
        source_package = source_packages.get(name)
        target_package = target_packages.get(name)

        if target_package is None:
            change_set.append(PackageDiff.removed(source_package, environment))
            continue

        diff = PackageDiff(source_package, environment)
        diff.compare_with_package(target_package)
        change_set.append(diff)

    return change_set


def build_full_change_log(
    source: Snapshot,
    target: Snapshot,
    environment: Environment = Environment.BOTH,
    include_same: bool = True,
) -> List[PackageDiff]:
    """Build change sets for every environment selected by *environment*.

    Production entries come first, then development entries.
    """
    environment = Environment.parse(environment)

    change_log: List[PackageDiff] = []
    for env in Environment.concrete():
        if not environment.includes(env):
            continue
        change_set = build_change_set(source, target, env)
        if not include_same:
            change_set = [d for d in change_set if d.mode is not DiffMode.SAME]
        logger.info("%s: %d package(s) in change set", env, len(change_set))
        change_log.extend(change_set)

    return change_log
