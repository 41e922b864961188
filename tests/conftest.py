import pytest

from dashboard_api import create_app
from dashboard_api.config import TestingConfig


@pytest.fixture
def snapshot_dir(tmp_path):
    path = tmp_path / "cctv-snapshots"
    path.mkdir()
    return path


@pytest.fixture
def data_dir(tmp_path):
    path = tmp_path / "db-data"
    path.mkdir()
    return path


@pytest.fixture
def app(snapshot_dir, data_dir):
    app = create_app(TestingConfig)
    app.config.update(
        CCTV_SNAPSHOT_DIR=snapshot_dir,
        CCTV_SNAPSHOT_URL_PREFIX="/cctv-snapshots",
        DB_DATA_DIR=data_dir,
    )
    return app


@pytest.fixture
def client(app):
    return app.test_client()
