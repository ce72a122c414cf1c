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

"""Load already-parsed dependency snapshots from JSON or YAML files.

A snapshot file lists installed packages per requirement environment::

    production:
      - name: acme/foo
        version: "1.2.0"
        source_url: https://github.com/acme/foo.git
    development:
      - name: acme/test-kit
        version: "0.4.1"

JSON is a subset of YAML, so both are read with ``yaml.safe_load``. Versions must
be strings; quote them in YAML so that ``1.10`` is not read as the float ``1.1``.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..exceptions import SnapshotError
from ..models.modes import Environment
from ..models.package import Package
from ..models.snapshot import Snapshot
from ..schema import SNAPSHOT_SCHEMA_PATH

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _load_schema() -> Dict[str, Any]:
    with open(SNAPSHOT_SCHEMA_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


def validate_snapshot_data(data: Any, label: str = "") -> None:
    """Validate raw snapshot data, raising SnapshotError on the first schema violation."""
    if data is None:
        data = {}
    try:
        jsonschema.validate(instance=data, schema=_load_schema())
    except ValidationError as e:
        path = "/" + "/".join(str(p) for p in e.absolute_path) if e.absolute_path else "/"
        raise SnapshotError(f"Invalid snapshot {label}: {e.message} (at {path})") from e


def snapshot_from_data(data: Any, label: str = "") -> Snapshot:
    """Build a Snapshot from already-parsed data."""
    validate_snapshot_data(data, label)

    snapshot = Snapshot(label)
    for env in Environment.concrete():
        for entry in (data or {}).get(env.value, []):
            snapshot.add(Package.from_dict(entry), env)
    return snapshot


def load_snapshot_data(path: Union[str, Path]) -> Any:
    """Read the raw content of a snapshot file."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load snapshot: {path}: {e}")
        raise SnapshotError(f"Failed to load snapshot {path}: {e}") from e


def load_snapshot(path: Union[str, Path]) -> Snapshot:
    """Load and validate a snapshot file."""
    data = load_snapshot_data(path)
    snapshot = snapshot_from_data(data, str(path))
    logger.info(f"Loaded snapshot {path}: {len(snapshot)} package(s)")
    return snapshot
