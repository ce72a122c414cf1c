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

"""Build "compare these two revisions" links for known source-control hosts."""

from __future__ import annotations

from typing import Callable, Dict, Optional
from urllib.parse import quote

from ..models.modes import DiffMode
from ..utils.repo_url import get_host, normalize_repo_url

# Labels used in place of a version when the package is missing on one side.
MISSING_VERSION_LABELS = (DiffMode.NEW.value, DiffMode.REMOVED.value)


def _quote(version: str) -> str:
    return quote(version, safe="@+-.")


def _github(repo: str, from_version: str, to_version: str) -> str:
    return f"{repo}/compare/{_quote(from_version)}...{_quote(to_version)}"


def _gitlab(repo: str, from_version: str, to_version: str) -> str:
    return f"{repo}/-/compare/{_quote(from_version)}...{_quote(to_version)}"


def _bitbucket(repo: str, from_version: str, to_version: str) -> str:
    return f"{repo}/branches/compare/{_quote(to_version)}%0D{_quote(from_version)}"


# host substring -> URL builder; checked in insertion order
COMPARE_URL_BUILDERS: Dict[str, Callable[[str, str, str], str]] = {
    "github.com": _github,
    "gitlab": _gitlab,
    "bitbucket.org": _bitbucket,
}


def build_compare_url(
    repo_url: Optional[str],
    from_version: Optional[str],
    to_version: Optional[str],
) -> str:
    """Return a link to the provider's compare view, or ``""`` when none applies."""
    if not from_version or not to_version:
        return ""
    if from_version in MISSING_VERSION_LABELS or to_version in MISSING_VERSION_LABELS:
        return ""

    repo = normalize_repo_url(repo_url)
    if not repo:
        return ""

    host = get_host(repo)
    for pattern, builder in COMPARE_URL_BUILDERS.items():
        if pattern in host:
            return builder(repo, from_version, to_version)

    return ""
