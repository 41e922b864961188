"""Routes package - Blueprint imports and exports"""
from dashboard_api.routes.cctv_snapshots import bp as cctv_snapshots_bp
from dashboard_api.routes.db_data import bp as db_data_bp
from dashboard_api.routes.health import bp as health_bp

__all__ = ['cctv_snapshots_bp', 'db_data_bp', 'health_bp']
