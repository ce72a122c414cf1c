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

"""Repository URL utility functions."""

import re
from typing import Optional
from urllib.parse import urlparse

# git@github.com:owner/repo.git
_SCP_LIKE_RE = re.compile(r"^(?:[\w.-]+@)?(?P<host>[\w.-]+):(?P<path>(?!//)[^\s]+)$")


def normalize_repo_url(url: Optional[str]) -> Optional[str]:
    """Convert a VCS remote URL into a browsable ``https://host/owner/repo`` URL.

    Returns None when the URL is empty or does not look like a remote.
    """
    if not url:
        return None

    url = url.strip()
    if url.startswith("git+"):
        url = url[len("git+"):]

    match = _SCP_LIKE_RE.match(url)
    if match and "://" not in url:
        host = match.group("host")
        path = match.group("path")
    else:
        parsed = urlparse(url)
        if not parsed.netloc:
            return None
        host = parsed.hostname or ""
        if parsed.port and parsed.scheme in ("http", "https"):
            host = f"{host}:{parsed.port}"
        path = parsed.path

    path = path.strip("/")
    if path.endswith(".git"):
        path = path[: -len(".git")]
    if not host or not path:
        return None

    return f"https://{host}/{path}"


def get_host(url: Optional[str]) -> str:
    """Return the lowercase hostname of a normalized repository URL."""
    if not url:
        return ""
    return (urlparse(url).hostname or "").lower()
