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

"""Requirement environments and diff modes."""

from __future__ import annotations

from enum import Enum

from ..exceptions import UnsupportedEnvironmentError


class Environment(str, Enum):
    """Whether a dependency is needed to run the software or only to build/test it."""

    PRODUCTION = "production"
    DEVELOPMENT = "development"
    BOTH = "both"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "str | Environment") -> "Environment":
        """Parse an environment name, accepting common manifest aliases."""
        if isinstance(value, Environment):
            return value

        key = str(value).strip().lower()
        env = _ALIASES.get(key)
        if env is None:
            raise UnsupportedEnvironmentError(
                f"Unknown environment '{value}'. "
                f"Expected one of: {', '.join(e.value for e in cls)}"
            )
        return env

    @classmethod
    def concrete(cls) -> tuple:
        """Environments that packages actually belong to, in render order."""
        return (cls.PRODUCTION, cls.DEVELOPMENT)

    def includes(self, env: "Environment") -> bool:
        """Return True when this filter selects the concrete environment *env*."""
        return self is Environment.BOTH or self is env

    @property
    def heading(self) -> str:
        if self is Environment.PRODUCTION:
            return "Required by Production"
        if self is Environment.DEVELOPMENT:
            return "Required by Development"
        return "Required by Production and Development"


_ALIASES = {
    "production": Environment.PRODUCTION,
    "prod": Environment.PRODUCTION,
    "require": Environment.PRODUCTION,
    "development": Environment.DEVELOPMENT,
    "dev": Environment.DEVELOPMENT,
    "require-dev": Environment.DEVELOPMENT,
    "both": Environment.BOTH,
}


class DiffMode(Enum):
    """Classification of one dependency between two snapshots."""

    NEW = "New"
    REMOVED = "Removed"
    CHANGED = "Changed"
    UPGRADED = "Upgraded"
    DOWNGRADED = "Downgraded"
    SAME = "Same"

    def __str__(self) -> str:
        return self.value
