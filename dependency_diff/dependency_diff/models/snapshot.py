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

"""One side ("before" or "after") of a dependency comparison."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from ..exceptions import DuplicatePackageError, UnsupportedEnvironmentError
from .modes import Environment
from .package import Package


class Snapshot:
    """Installed packages of one manifest, partitioned by requirement environment."""

    def __init__(self, label: str = ""):
        self.label = label
        self._packages: Dict[Environment, Dict[str, Package]] = {
            env: {} for env in Environment.concrete()
        }

    @classmethod
    def from_packages(
        cls,
        production: Iterable[Package] = (),
        development: Iterable[Package] = (),
        label: str = "",
    ) -> "Snapshot":
        snapshot = cls(label)
        for package in production:
            snapshot.add(package, Environment.PRODUCTION)
        for package in development:
            snapshot.add(package, Environment.DEVELOPMENT)
        return snapshot

    def add(self, package: Package, environment: Environment) -> None:
        packages = self.packages(environment)
        if package.name in packages:
            raise DuplicatePackageError(
                f"Package '{package.name}' is listed twice in {environment}"
                + (f" of {self.label}" if self.label else "")
            )
        packages[package.name] = package

    def packages(self, environment: Environment) -> Dict[str, Package]:
        if environment not in self._packages:
            raise UnsupportedEnvironmentError(
                f"Snapshot packages are kept per concrete environment, got '{environment}'"
            )
        return self._packages[environment]

    def get(self, name: str, environment: Environment) -> Optional[Package]:
        return self.packages(environment).get(name)

    def __len__(self) -> int:
        return sum(len(p) for p in self._packages.values())
