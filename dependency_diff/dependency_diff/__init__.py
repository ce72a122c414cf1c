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

"""Changelogs between two dependency snapshots.

Pairs the packages of a "before" and "after" snapshot, classifies each one as new,
removed, upgraded, downgraded, changed or unchanged, and renders the result as
console, Markdown or JSON text.
"""

__version__ = "1.0.0"

from .comparison import PackageDiff, build_change_set, build_full_change_log, classify, is_hash_version
from .exceptions import DependencyDiffError
from .models import DiffMode, Environment, Package, Snapshot
from .render import RenderResult, create_renderer

__all__ = [
    "DependencyDiffError",
    "DiffMode",
    "Environment",
    "Package",
    "PackageDiff",
    "RenderResult",
    "Snapshot",
    "build_change_set",
    "build_full_change_log",
    "classify",
    "create_renderer",
    "is_hash_version",
]
