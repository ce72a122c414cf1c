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

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..utils.repo_url import normalize_repo_url


@dataclass(frozen=True)
class Package:
    """One installed dependency as listed in a snapshot."""

    name: str
    version: str
    source_url: Optional[str] = None
    homepage: Optional[str] = field(default=None, compare=False)

    @property
    def package_url(self) -> Optional[str]:
        """Human-facing page for the package, derived from its repository when not given."""
        if self.homepage:
            return self.homepage
        return normalize_repo_url(self.source_url)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Package":
        return cls(
            name=str(data["name"]),
            version=str(data["version"]),
            source_url=data.get("source_url") or None,
            homepage=data.get("package_url") or None,
        )
