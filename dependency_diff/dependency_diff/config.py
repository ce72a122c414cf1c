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

"""Configuration management for the dependency diff tool."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import configure_split_stream_logging


@dataclass
class DiffConfig:
    """Configuration class for a dependency diff run."""
    log_level: str = "WARNING"

    # defaults for the command line
    output_format: str = "console"
    environment: str = "both"

    @classmethod
    def from_env(cls) -> 'DiffConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('DEPENDENCY_DIFF_LOG_LEVEL', 'WARNING'),
            output_format=os.getenv('DEPENDENCY_DIFF_OUTPUT', 'console'),
            environment=os.getenv('DEPENDENCY_DIFF_ENV', 'both'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration.

        Log records always go to stderr; stdout carries the rendered changelog.
        """
        level = getattr(logging, self.log_level.upper(), logging.WARNING)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        configure_split_stream_logging(
            level=level,
            formatter=formatter,
            stdout_enabled=False,
        )

        return logging.getLogger('dependency_diff')
