"""JSON Schema files bundled with dependency_diff."""

from pathlib import Path

SCHEMA_DIR = Path(__file__).parent
SNAPSHOT_SCHEMA_PATH = SCHEMA_DIR / "snapshot.json"
