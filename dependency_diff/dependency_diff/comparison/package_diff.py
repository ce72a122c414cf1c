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

"""Changelog entry for a single dependency."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, TypedDict

from ..exceptions import InvalidStateError, NameMismatchError
from ..models.modes import DiffMode, Environment
from ..models.package import Package
from .compare_url import build_compare_url
from .version_classifier import classify

logger = logging.getLogger(__name__)


class DiffRecord(TypedDict):
    name: str
    url: Optional[str]
    version_from: Optional[str]
    version_to: Optional[str]
    mode: str
    compare: str


class Pairing(Enum):
    SOURCE_ONLY = "source_only"
    TARGET_ONLY = "target_only"
    BOTH = "both"


class PackageDiff:
    """Pairs a dependency's "before" and "after" package and classifies the change.

    A diff is created with the source package (or None for a new package) and is
    completed once with :meth:`compare_with_package`. Removed packages never get a
    target; build them with :meth:`removed`.
    """

    def __init__(
        self,
        source: Optional[Package] = None,
        environment: Environment = Environment.PRODUCTION,
    ):
        self.source = source
        self.target: Optional[Package] = None
        self.environment = environment
        self.mode = DiffMode.SAME
        self.comparing_url = ""
        self._compared = False

    @classmethod
    def removed(cls, source: Package, environment: Environment = Environment.PRODUCTION) -> "PackageDiff":
        diff = cls(source, environment)
        diff.mode = DiffMode.REMOVED
        return diff

    @property
    def name(self) -> str:
        package = self.source or self.target
        if package is None:
            raise InvalidStateError("Source and target packages are not defined")
        return package.name

    @property
    def pairing(self) -> Pairing:
        if self.source is not None and self.target is not None:
            return Pairing.BOTH
        if self.source is not None:
            return Pairing.SOURCE_ONLY
        if self.target is not None:
            return Pairing.TARGET_ONLY
        raise InvalidStateError("Source and target packages are not defined")

    def compare_with_package(self, target: Package) -> "PackageDiff":
        """Record the target package and classify the transition from the source."""
        if self._compared:
            raise InvalidStateError(f"Package '{target.name}' has already been compared")
        if self.mode is DiffMode.REMOVED:
            raise InvalidStateError(f"Package '{target.name}' is marked as removed")

        if self.source is not None and self.source.name != target.name:
            raise NameMismatchError(
                "Can't compare versions of different packages. "
                f"Source: {self.source.name}; Target: {target.name}"
            )

        self.target = target
        self._compared = True

        if self.source is None:
            self.mode = DiffMode.NEW
            return self

        source_version = self.source.version
        target_version = target.version
        self.comparing_url = build_compare_url(
            self.source.source_url or target.source_url,
            source_version,
            target_version,
        )
        self.mode = classify(source_version, target_version)

        logger.debug(
            "%s (%s): %s -> %s = %s",
            target.name,
            self.environment,
            source_version,
            target_version,
            self.mode,
        )
        return self

    def to_dict(self) -> DiffRecord:
        """Flatten the diff into a JSON-ready record."""
        pairing = self.pairing
        identity = self.source if pairing is not Pairing.TARGET_ONLY else self.target

        return {
            "name": identity.name,
            "url": identity.package_url,
            "version_from": self.source.version if self.source is not None else None,
            "version_to": self.target.version if self.target is not None else None,
            "mode": self.mode.value,
            "compare": self.comparing_url,
        }

    def __repr__(self) -> str:
        source = self.source.version if self.source else None
        target = self.target.version if self.target else None
        return f"PackageDiff({self.environment}, {self.mode}, {source!r} -> {target!r})"
