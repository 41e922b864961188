"""
CCTV snapshot service — merges the optional ``metadata.json`` sidecar with
the ``*.jpg`` files currently present in the snapshot directory.

The sidecar is written by the external collector and has the shape::

    {"lastUpdated": 1718000000000,
     "devices": {"<deviceId>": {"timestamp": 1718000000000, "success": true}}}

Both sources are optional. A file on disk always marks its device as
successful; the sidecar only contributes timestamps and devices whose
image is currently missing.
"""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from dashboard_api.services.json_files import JSON_READ_ERRORS, read_json_file

log = logging.getLogger(__name__)

METADATA_FILENAME = "metadata.json"
SNAPSHOT_EXTENSION = ".jpg"


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid timestamp
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class DeviceSnapshot:
    device_id: str
    timestamp: int | float
    success: bool
    image_url: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "deviceId": self.device_id,
            "timestamp": self.timestamp,
            "success": self.success,
            "imageUrl": self.image_url,
        }


@dataclass
class SnapshotMetadata:
    last_updated: int | float
    devices: List[DeviceSnapshot] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lastUpdated": self.last_updated,
            "devices": [d.to_dict() for d in self.devices],
        }


@dataclass
class _DeviceState:
    timestamp: int | float
    success: bool
    # Real name on disk; None when only the sidecar knows the device.
    filename: Optional[str] = None


def read_sidecar(snapshot_dir: str | Path) -> Dict[str, Any]:
    """
    Load ``metadata.json`` from *snapshot_dir*.

    Returns an empty dict when the file is missing, unreadable, not valid
    JSON (``NaN``/``Infinity`` included), too deeply nested, or not a JSON
    object.
    """
    path = Path(snapshot_dir) / METADATA_FILENAME
    try:
        meta = read_json_file(path)
    except JSON_READ_ERRORS as exc:
        log.debug("No usable snapshot sidecar at %s (%s); using directory listing only.", path, exc)
        return {}
    if not isinstance(meta, dict):
        log.debug("Ignoring snapshot sidecar at %s: top-level value is %s.", path, type(meta).__name__)
        return {}
    return meta


def list_snapshot_files(snapshot_dir: str | Path) -> List[Tuple[str, str]]:
    """
    ``(device_id, filename)`` for every regular ``.jpg`` file
    (case-insensitive) in *snapshot_dir*, sorted by filename.

    Raises ``OSError`` when the directory cannot be listed.
    """
    names: List[str] = []
    with os.scandir(snapshot_dir) as entries:
        for entry in entries:
            if not entry.is_file(follow_symlinks=False):
                continue
            if not entry.name.lower().endswith(SNAPSHOT_EXTENSION):
                continue
            names.append(entry.name)
    return [(name[: -len(SNAPSHOT_EXTENSION)], name) for name in sorted(names)]


def build_snapshot_metadata(
    snapshot_dir: str | Path,
    url_prefix: str = "/cctv-snapshots",
    *,
    request_time: int | None = None,
) -> SnapshotMetadata:
    """Build the per-device snapshot report for the current filesystem state."""
    now = now_ms() if request_time is None else request_time
    devices: Dict[str, _DeviceState] = {}
    last_updated: int | float = 0

    meta = read_sidecar(snapshot_dir)
    if _is_number(meta.get("lastUpdated")):
        last_updated = meta["lastUpdated"]

    meta_devices = meta.get("devices")
    if isinstance(meta_devices, dict):
        for device_id, entry in meta_devices.items():
            if not isinstance(entry, dict):
                entry = {}
            timestamp = entry.get("timestamp")
            devices[str(device_id)] = _DeviceState(
                timestamp=timestamp if _is_number(timestamp) else now,
                success=entry.get("success") is True,
            )

    try:
        files = list_snapshot_files(snapshot_dir)
    except OSError as exc:
        log.warning("Failed to read cctv-snapshots dir %s: %s", snapshot_dir, exc)
        files = []

    for device_id, filename in files:
        existing = devices.get(device_id)
        if existing is None:
            devices[device_id] = _DeviceState(timestamp=now, success=True, filename=filename)
        else:
            existing.success = True
            existing.filename = filename

    prefix = url_prefix.rstrip("/")
    result = SnapshotMetadata(
        last_updated=last_updated or now,
        devices=[
            DeviceSnapshot(
                device_id=device_id,
                timestamp=state.timestamp,
                success=state.success,
                image_url=f"{prefix}/{state.filename or device_id + SNAPSHOT_EXTENSION}",
            )
            for device_id, state in devices.items()
        ],
    )
    log.debug(
        "Snapshot metadata built: %d devices (%d files on disk).",
        len(result.devices),
        len(files),
    )
    return result
