from flask import Flask
from dashboard_api.config import Config
from dashboard_api.logging_config import configure_app_logging


def create_app(config_class=Config):
    """Application factory function"""
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_app_logging(app)

    # Register blueprints
    from dashboard_api.routes import cctv_snapshots_bp, db_data_bp, health_bp
    app.register_blueprint(health_bp)
    app.register_blueprint(cctv_snapshots_bp)
    app.register_blueprint(db_data_bp)

    app.logger.info(
        "Dashboard API ready (snapshots=%s, db-data=%s)",
        app.config["CCTV_SNAPSHOT_DIR"],
        app.config["DB_DATA_DIR"],
    )
    return app
