import os
from pathlib import Path
from dotenv import load_dotenv

DEVELOPMENT_ENV = ".env"
PRODUCTION_ENV = ".env.production"


def _env_path(name: str, default: Path) -> Path:
    """Get an environment variable as a Path. If the variable is not set or empty, return the default."""
    raw = (os.getenv(name) or "").strip()
    return Path(raw) if raw else default


def _env_bool(name: str, default: bool) -> bool:
    """Get an environment variable as a boolean. Recognizes '1', 'true', 'yes', 'on' as True and '0', 'false', 'no', 'off' as False. Anything else returns the default."""
    raw = (os.getenv(name) or "").strip().lower()
    if raw in {"1", "true", "yes", "on"}:
        return True
    if raw in {"0", "false", "no", "off"}:
        return False
    return default


def _env_int(name: str, default: int) -> int:
    """Get an environment variable as an integer. If the variable is not set or cannot be converted, return the default."""
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


class Config:
    BASE_DIR = Path(__file__).resolve().parents[1]  # project root

    load_dotenv(Path(BASE_DIR) / DEVELOPMENT_ENV)

    # ================ Application Settings ================
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")
    PORT = _env_int("PORT", 5000)
    DEBUG = _env_bool("FLASK_DEBUG", False)
    TESTING = False

    # ================ Logging Settings ================
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()
    LOG_DIR = _env_path("LOG_DIR", BASE_DIR / "logs")
    LOG_FILE = os.getenv("LOG_FILE", "app.log")
    LOG_TO_FILE = _env_bool("LOG_TO_FILE", True)
    LOG_MAX_BYTES = _env_int("LOG_MAX_BYTES", 10 * 1024 * 1024)  # 10 MB
    LOG_BACKUP_COUNT = _env_int("LOG_BACKUP_COUNT", 5)
    WERKZEUG_LOG_LEVEL = "INFO"

    # ================ Data Locations ================
    # Written by the external snapshot collector; we only read it.
    CCTV_SNAPSHOT_DIR = _env_path("CCTV_SNAPSHOT_DIR", BASE_DIR / "public" / "cctv-snapshots")
    CCTV_SNAPSHOT_URL_PREFIX = os.getenv("CCTV_SNAPSHOT_URL_PREFIX", "/cctv-snapshots").rstrip("/")
    DB_DATA_DIR = _env_path("DB_DATA_DIR", BASE_DIR / "db-data")


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = "DEBUG"


class TestingConfig(Config):
    DEBUG = True
    TESTING = True
    LOG_LEVEL = "DEBUG"
    LOG_TO_FILE = False


class ProductionConfig(Config):
    DEBUG = False
    LOG_LEVEL = "INFO"

    WERKZEUG_LOG_LEVEL = "WARNING"  # Reduce noisy request logs
