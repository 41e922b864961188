"""
Datasets shipped inside the package.

These are loaded once at import so they can be served on hosts where the
``db-data`` directory is not deployed alongside the code.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from dashboard_api.services.json_files import read_json_file

BUNDLED_DATA_DIR = Path(__file__).resolve().parents[1] / "data"

BUNDLED_LAYER_NAMES = ("ekompaun_mpsp_summary", "maklumat_akaun_analytics")


def _load(name: str) -> Any:
    return read_json_file(BUNDLED_DATA_DIR / f"{name}.json")


BUNDLED_LAYERS: Mapping[str, Any] = MappingProxyType(
    {name: _load(name) for name in BUNDLED_LAYER_NAMES}
)


def get_bundled_layer(name: str) -> Any | None:
    """Return the bundled dataset for *name*, or ``None`` if it is file-backed."""
    return BUNDLED_LAYERS.get(name)
