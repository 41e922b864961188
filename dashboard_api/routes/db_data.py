import logging

from flask import Blueprint, current_app, jsonify

from dashboard_api.services.layers import LayerLoadError, is_known_layer, load_layer

bp = Blueprint("db_data", __name__, url_prefix="/api/db-data")
log = logging.getLogger(__name__)


@bp.get("/", defaults={"layer": ""}, strict_slashes=False)
@bp.get("/<layer>")
def layer_data(layer: str):
    """Return one allow-listed data layer as JSON."""
    if not is_known_layer(layer):
        return jsonify({"error": "Invalid or unknown layer"}), 400

    try:
        data = load_layer(layer, current_app.config["DB_DATA_DIR"])
    except LayerLoadError as exc:
        return jsonify({"error": "Failed to load layer data", "detail": exc.detail}), 500
    except Exception as exc:
        log.exception("Unexpected error loading layer %s", layer)
        return jsonify({"error": "Failed to load layer data", "detail": str(exc) or "Unknown error"}), 500
    return jsonify(data)
