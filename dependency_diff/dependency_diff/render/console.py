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

"""Boxed plain-text changelog for terminals."""

from __future__ import annotations

from typing import Sequence

from ..comparison.package_diff import PackageDiff
from ..models.modes import Environment
from .base import TableRenderer


class ConsoleRenderer(TableRenderer):
    section_template = "console_section.txt.jinja2"

    CELL_MIN_LENGTH = 1

    def render_one_environment(self, change_log: Sequence[PackageDiff], environment: Environment) -> str:
        rows = self.build_rows(change_log)
        widths = self.calculate_widths(rows)
        border = self.render_border(widths)

        lines = [border, self.render_row(self.HEADERS, widths), border]
        lines.extend(self.render_row(row, widths) for row in rows)
        lines.append(border)

        return self.render_section(environment, "\n".join(lines))

    @staticmethod
    def render_border(widths: Sequence[int]) -> str:
        return "+" + "+".join("-" * (width + 2) for width in widths) + "+"

    def render_row(self, row: Sequence[str], widths: Sequence[int]) -> str:
        return "| " + " | ".join(self.render_cells(row, widths)) + " |"
