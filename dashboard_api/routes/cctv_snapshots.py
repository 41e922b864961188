import logging
from pathlib import Path

from flask import Blueprint, abort, current_app, jsonify, send_from_directory

from dashboard_api.services.snapshots import SNAPSHOT_EXTENSION, build_snapshot_metadata

bp = Blueprint("cctv_snapshots", __name__)
log = logging.getLogger(__name__)


@bp.get("/api/cctv-snapshots/metadata")
def snapshot_metadata():
    """Per-device snapshot status from the snapshot folder and its metadata.json."""
    try:
        metadata = build_snapshot_metadata(
            current_app.config["CCTV_SNAPSHOT_DIR"],
            current_app.config["CCTV_SNAPSHOT_URL_PREFIX"],
        )
        return jsonify(metadata.to_dict())
    except Exception:
        log.exception("CCTV snapshot metadata error")
        return jsonify({"error": "Failed to read snapshot metadata"}), 500


@bp.get("/cctv-snapshots/<filename>")
def snapshot_image(filename: str):
    """Serve one snapshot image referenced by ``imageUrl``."""
    snapshot_dir = Path(current_app.config["CCTV_SNAPSHOT_DIR"])
    if not filename.lower().endswith(SNAPSHOT_EXTENSION) or not (snapshot_dir / filename).is_file():
        abort(404)
    return send_from_directory(snapshot_dir, filename, mimetype="image/jpeg", max_age=60)
