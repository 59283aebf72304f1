"""
Historian: persist and retrieve calculation snapshots for history/export.
"""

from __future__ import annotations

import json
import logging
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional

_LOG = logging.getLogger(__name__)

# Default columns for historian table/export (ordered)
HISTORIAN_DEFAULT_FIELDS = [
    "timestamp",
    "calculator",
    "summary",
]


def _snapshots_path(data_dir: Path) -> Path:
    return data_dir / "historian_snapshots.json"


def load_snapshots(data_dir: Path) -> List[Dict[str, Any]]:
    """Load all stored historian snapshots from JSON."""
    path = _snapshots_path(data_dir)
    if not path.exists():
        return []
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError):
        _LOG.warning("Historian: unreadable snapshot file %s", path, exc_info=True)
        return []
    return data.get("snapshots", []) if isinstance(data, dict) else (data if isinstance(data, list) else [])


def save_snapshot(data_dir: Path, snapshot_dict: Dict[str, Any]) -> str:
    """Append one snapshot (from CalculationSnapshot.to_dict()) and save. Returns id."""
    path = _snapshots_path(data_dir)
    snapshots = load_snapshots(data_dir)
    sid = str(uuid.uuid4())[:8]
    record = {"id": sid, **snapshot_dict}
    snapshots.append(record)
    data_dir.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump({"snapshots": snapshots}, f, indent=2)
    return sid


def snapshot_to_flat_row(snap: Dict[str, Any], columns: Optional[List[str]] = None) -> Dict[str, Any]:
    """Convert a stored snapshot dict to a flat row for table/CSV using given columns."""
    if columns is None:
        columns = HISTORIAN_DEFAULT_FIELDS
    row = {}
    for col in columns:
        if col in ("timestamp", "calculator", "summary"):
            row[col] = snap.get(col, "")
        elif col == "inputs":
            row[col] = snap.get("inputs") or {}
        else:
            out = snap.get("outputs") or {}
            row[col] = out.get(col, "")
    return row
