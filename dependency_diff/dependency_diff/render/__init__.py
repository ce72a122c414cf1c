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

"""Changelog renderers, selectable by format name."""

from typing import Callable, Dict, List

from ..exceptions import UnsupportedFormatError
from .base import Alignment, ChangelogRenderer, RenderResult, TableRenderer
from .console import ConsoleRenderer
from .json_output import JsonRenderer
from .markdown import MarkdownRenderer

CONSOLE = "console"
MARKDOWN = "markdown"
JSON = "json"

RENDERERS: Dict[str, Callable[[], ChangelogRenderer]] = {
    CONSOLE: ConsoleRenderer,
    MARKDOWN: MarkdownRenderer,
    JSON: JsonRenderer,
}

__all__ = [
    "Alignment",
    "ChangelogRenderer",
    "ConsoleRenderer",
    "JsonRenderer",
    "MarkdownRenderer",
    "RENDERERS",
    "RenderResult",
    "TableRenderer",
    "available_formats",
    "create_renderer",
]


def available_formats() -> List[str]:
    return list(RENDERERS)


def create_renderer(output_format: str) -> ChangelogRenderer:
    """Instantiate the renderer registered for *output_format*."""
    key = output_format.strip().lower()
    factory = RENDERERS.get(key)
    if factory is None:
        raise UnsupportedFormatError(
            f'Output format "{key}" not found. Available: {", ".join(available_formats())}'
        )
    return factory()
