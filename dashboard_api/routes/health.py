import logging
from flask import Blueprint, jsonify

bp = Blueprint("health", __name__)
log = logging.getLogger(__name__)

@bp.get("/health")
def health():
    """Liveness check."""
    log.debug("health check")
    return jsonify(status="ok")
