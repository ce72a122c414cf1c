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

"""Shared table machinery for changelog renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional, Sequence, TextIO

from ..comparison.package_diff import DiffRecord, PackageDiff
from ..exceptions import InvalidAlignmentError
from ..file_io.template_renderer import TemplateRenderer
from ..models.modes import Environment


class Alignment(Enum):
    LEFT = "Left"
    CENTER = "Center"
    RIGHT = "Right"


class RenderResult(NamedTuple):
    text: str
    has_changes: bool


def no_difference_notice(environment: Environment) -> str:
    return f"There is no difference ({environment})"


class ChangelogRenderer(ABC):
    """Render a changelog section by section, one per selected requirement environment.

    Subclasses render a single concrete environment and decide how the sections
    are joined; the environment split and the empty-changelog case live here.
    """

    def render(
        self,
        change_log: Sequence[PackageDiff],
        environment: Environment = Environment.BOTH,
        output: Optional[TextIO] = None,
    ) -> RenderResult:
        """Render *change_log* for the environments selected by *environment*.

        Returns the rendered text and whether there was anything to report. The
        text is also written to *output* when one is given.
        """
        environment = Environment.parse(environment)

        if not change_log:
            result = RenderResult(self.render_empty(environment), False)
        else:
            sections = {
                env: self.render_one_environment([d for d in change_log if d.environment is env], env)
                for env in self.selected_environments(environment)
            }
            result = RenderResult(self.join_sections(sections), True)

        if output is not None:
            output.write(result.text)
        return result

    @staticmethod
    def selected_environments(environment: Environment) -> List[Environment]:
        return [env for env in Environment.concrete() if environment.includes(env)]

    @abstractmethod
    def render_one_environment(self, change_log: Sequence[PackageDiff], environment: Environment) -> Any:
        """Render the section of a single concrete environment."""

    @abstractmethod
    def join_sections(self, sections: Dict[Environment, Any]) -> str:
        """Assemble rendered sections, in render order, into the final text."""

    def render_empty(self, environment: Environment) -> str:
        return no_difference_notice(environment) + "\n"


class TableRenderer(ChangelogRenderer):
    """Render a changelog as one fixed-width table per requirement environment.

    Subclasses only decide how cells, separators and section titles look; column
    widths and alignment lookup live here.
    """

    HEADERS: Sequence[str] = ("Package", "Action", "Old Version", "New Version", "Details")
    ALIGNMENTS: Sequence[Alignment] = (
        Alignment.LEFT,
        Alignment.LEFT,
        Alignment.RIGHT,
        Alignment.RIGHT,
        Alignment.LEFT,
    )

    CELL_MIN_LENGTH = 3
    EMPTY_VERSION = "-"

    section_template = ""

    def __init__(self, templates: Optional[TemplateRenderer] = None):
        self.templates = templates or TemplateRenderer()

    @abstractmethod
    def render_one_environment(self, change_log: Sequence[PackageDiff], environment: Environment) -> str:
        """Render the table section of a single concrete environment."""

    def join_sections(self, sections: Dict[Environment, str]) -> str:
        return "".join(sections.values())

    def render_section(self, environment: Environment, body: str) -> str:
        return self.templates.render_template(
            self.section_template,
            title=environment.heading,
            environment=environment.value,
            body=body,
        )

    def build_row(self, record: DiffRecord) -> List[str]:
        return [
            record["name"],
            record["mode"],
            record["version_from"] or self.EMPTY_VERSION,
            record["version_to"] or self.EMPTY_VERSION,
            record["compare"],
        ]

    def build_rows(self, change_log: Sequence[PackageDiff]) -> List[List[str]]:
        return [self.build_row(diff.to_dict()) for diff in change_log]

    def calculate_widths(self, rows: Sequence[Sequence[str]]) -> List[int]:
        """Widest cell per column across the header and *rows*, floored at ``CELL_MIN_LENGTH``."""
        widths = [len(header) for header in self.HEADERS]

        for row in rows:
            if len(row) != len(widths):
                raise ValueError(f"Row has {len(row)} cells, expected {len(widths)}: {row!r}")
            for col_index, cell in enumerate(row):
                widths[col_index] = max(widths[col_index], len(cell))

        return [max(width, self.CELL_MIN_LENGTH) for width in widths]

    def get_column_align(self, col_index: int) -> Alignment:
        try:
            result = self.ALIGNMENTS[col_index]
        except IndexError:
            result = None

        if not isinstance(result, Alignment):
            raise InvalidAlignmentError(f"Invalid alignment for column index {col_index}: {result}")
        return result

    @staticmethod
    def pad_cell(contents: str, alignment: Alignment, width: int) -> str:
        padding = max(width - len(contents), 0)
        if alignment is Alignment.LEFT:
            return contents + " " * padding
        if alignment is Alignment.RIGHT:
            return " " * padding + contents
        if alignment is Alignment.CENTER:
            left = padding // 2
            return " " * left + contents + " " * (padding - left)
        raise InvalidAlignmentError(f"Invalid alignment: {alignment}")

    def render_cells(self, row: Sequence[str], widths: Sequence[int]) -> List[str]:
        return [
            self.pad_cell(cell, self.get_column_align(col_index), widths[col_index])
            for col_index, cell in enumerate(row)
        ]
