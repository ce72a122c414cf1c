#!/usr/bin/env python3
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

"""CLI entry point for printing the changelog between two dependency snapshots."""

import argparse
import logging
import sys
from typing import List

from ..comparison.change_set import build_full_change_log
from ..config import DiffConfig
from ..exceptions import DependencyDiffError
from ..file_io.snapshot_loader import load_snapshot
from ..models.modes import Environment
from ..render import available_formats, create_renderer

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CHANGES = 1
EXIT_ERROR = 2


def build_parser(config: DiffConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='dependency-diff',
        description='Show what changed between two dependency snapshots',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '--source',
        required=True,
        help='Snapshot file with the packages before the change (JSON or YAML)',
    )
    parser.add_argument(
        '--target',
        required=True,
        help='Snapshot file with the packages after the change (JSON or YAML)',
    )
    parser.add_argument(
        '--env',
        default=config.environment,
        help=f'Environment to show: both, production or development (default: {config.environment})',
    )
    parser.add_argument(
        '--output',
        default=config.output_format,
        help=f'Output format: {", ".join(available_formats())} (default: {config.output_format})',
    )
    parser.add_argument(
        '--with-same',
        action='store_true',
        help='Also list packages whose version did not change',
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        help=f'Exit with code {EXIT_CHANGES} when there are any changes (useful for CI)',
    )
    return parser


def run(argv: List[str] | None = None, config: DiffConfig | None = None) -> int:
    """Run the diff and return the process exit code."""
    config = config or DiffConfig.from_env()
    args = build_parser(config).parse_args(argv)
    config.set_logging()

    try:
        environment = Environment.parse(args.env)
        renderer = create_renderer(args.output)

        source = load_snapshot(args.source)
        target = load_snapshot(args.target)

        change_log = build_full_change_log(
            source,
            target,
            environment,
            include_same=args.with_same,
        )
        result = renderer.render(change_log, environment, output=sys.stdout)
    except DependencyDiffError as e:
        logger.debug("Diff failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.strict and result.has_changes:
        return EXIT_CHANGES
    return EXIT_OK


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the dependency-diff CLI."""
    sys.exit(run(argv))


if __name__ == '__main__':
    main()
