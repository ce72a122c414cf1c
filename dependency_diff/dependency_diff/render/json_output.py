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

"""Machine-readable changelog for scripts and CI jobs."""

from __future__ import annotations

import json
from typing import Dict, Sequence

from ..comparison.package_diff import DiffRecord, PackageDiff
from ..models.modes import Environment
from .base import ChangelogRenderer


class JsonRenderer(ChangelogRenderer):
    """Emit ``{environment: {package name: record}}`` as one JSON document.

    Unlike the table formats an empty changelog still produces valid JSON, with
    an empty object per selected environment.
    """

    def render_one_environment(self, change_log: Sequence[PackageDiff], environment: Environment) -> Dict[str, DiffRecord]:
        return {diff.name: diff.to_dict() for diff in change_log}

    def join_sections(self, sections: Dict[Environment, Dict[str, DiffRecord]]) -> str:
        document = {env.value: records for env, records in sections.items()}
        return json.dumps(document, indent=4) + "\n"

    def render_empty(self, environment: Environment) -> str:
        return self.join_sections({env: {} for env in self.selected_environments(environment)})
