import pytest
from fastapi.testclient import TestClient

from appassets.clock import FixedClock
from appassets.main import app
from appassets.routers.assets import get_app_data, get_clock
from appassets.storage import MemoryAppData

NOW = 1337


@pytest.fixture
def app_data():
    return MemoryAppData()


@pytest.fixture
def client(app_data):
    app.dependency_overrides[get_app_data] = lambda: app_data
    app.dependency_overrides[get_clock] = lambda: FixedClock(NOW)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
