import pytest
from fastapi.testclient import TestClient

from text_analyzer.config import Settings
from text_analyzer.main import create_app


@pytest.fixture
def make_client(tmp_path):
    def _make(**overrides):
        settings = Settings(log_dir=str(tmp_path / "logs"), **overrides)
        return TestClient(create_app(settings))
    return _make


@pytest.fixture
def client(make_client):
    return make_client()
