"""
Layer service — allow-listed GIS/administrative datasets for the dashboard.

A layer resolves either to a bundled in-memory dataset or to
``<DB_DATA_DIR>/<layer>.json``. File payloads that are JSON arrays are
wrapped as ``{layer: [...]}`` so every response is keyed the same way.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from dashboard_api.services.bundled import get_bundled_layer
from dashboard_api.services.json_files import JSON_READ_ERRORS, read_json_file

log = logging.getLogger(__name__)

ALLOWED_LAYERS: frozenset[str] = frozenset(
    {
        "blok_perancangan",
        "bridge",
        "cctv",
        "charting_km",
        "constructed_slope",
        "drainage",
        "earth_work",
        "feeder_pillar",
        "flexible_post",
        "gtmix",
        "gtnh_semasa",
        "jalan",
        "jalan_kejuruteraan",
        "komited_km",
        "location_map_aset",
        "location_map_aset_item",
        "lokasi_banjir",
        "ndcdb20",
        "ndcdb23",
        "pasar_awam",
        "pasar_malam",
        "pasar_sari",
        "pasar_tani",
        "road_hump",
        "road_marking_linear",
        "road_marking_point",
        "road_median",
        "road_shoulder",
        "sampah_haram",
        "sempadan_daerah",
        "sempadan_taman",
        "signboard",
        "sport_facility",
        "street_lighting",
        "taman_perumahan",
        "traffic_light",
        "warta_kawasan_lapang",
        "zon_ahli_majlis",
        # Tax and compound widgets (bundled)
        "ekompaun_mpsp_summary",
        "maklumat_akaun_analytics",
    }
)


class LayerLoadError(Exception):
    """A file-backed layer could not be read or parsed."""

    def __init__(self, layer: str, detail: str):
        super().__init__(detail)
        self.layer = layer
        self.detail = detail


def is_known_layer(name: str | None) -> bool:
    return bool(name) and name in ALLOWED_LAYERS


def wrap_layer_payload(layer: str, data: Any) -> Any:
    """Key array payloads by the layer name; pass everything else through."""
    if isinstance(data, list):
        return {layer: data}
    return data


def read_layer_file(layer: str, data_dir: str | Path) -> Any:
    """Parse ``<data_dir>/<layer>.json``, raising ``LayerLoadError`` on failure."""
    path = Path(data_dir) / f"{layer}.json"
    try:
        data = read_json_file(path)
    except JSON_READ_ERRORS as exc:
        log.warning("Failed to load layer %s from %s: %s", layer, path, exc)
        raise LayerLoadError(layer, str(exc) or "Unknown error") from exc
    return wrap_layer_payload(layer, data)


def load_layer(layer: str, data_dir: str | Path) -> Any:
    """
    Return the dataset for an allow-listed *layer*.

    Callers are expected to check ``is_known_layer`` first.
    """
    bundled = get_bundled_layer(layer)
    if bundled is not None:
        return bundled
    return read_layer_file(layer, data_dir)
