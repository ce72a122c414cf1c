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

"""Markdown changelog, meant to be pasted into release notes and pull requests."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..comparison.package_diff import DiffRecord, PackageDiff
from ..models.modes import Environment
from .base import Alignment, TableRenderer


def get_link(title: str, url: Optional[str]) -> str:
    return f"[{title}]({url})" if url else ""


class MarkdownRenderer(TableRenderer):
    """Render GitHub-flavoured Markdown tables.

    Every column is at least three characters wide so that the ``---`` alignment
    row stays valid Markdown.
    """

    section_template = "markdown_section.md.jinja2"

    def build_row(self, record: DiffRecord) -> List[str]:
        row = super().build_row(record)
        row[0] = get_link(record["name"], record["url"]) or record["name"]
        row[4] = get_link("Details", record["compare"])
        return row

    def render_one_environment(self, change_log: Sequence[PackageDiff], environment: Environment) -> str:
        rows = self.build_rows(change_log)
        widths = self.calculate_widths(rows)

        lines = [
            self.render_row(self.HEADERS, widths),
            self.render_alignments(widths),
        ]
        lines.extend(self.render_row(row, widths) for row in rows)

        return self.render_section(environment, "\n".join(lines))

    def render_row(self, row: Sequence[str], widths: Sequence[int]) -> str:
        return ("| " + " | ".join(self.render_cells(row, widths)) + " |").rstrip(" ")

    def render_alignments(self, widths: Sequence[int]) -> str:
        cells = []
        for col_index, width in enumerate(widths):
            cell = "-" * (width + 2)
            align = self.get_column_align(col_index)

            if align is Alignment.CENTER:
                cell = ":" + cell[2:] + ":"
            elif align is Alignment.RIGHT:
                cell = cell[1:] + ":"

            cells.append(cell)

        return "|" + "|".join(cells) + "|"
