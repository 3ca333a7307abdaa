import pytest
from fastapi.testclient import TestClient

from codechat.config import get_settings
from codechat.main import app
from codechat.services.messenger import Messenger


@pytest.fixture
def messenger():
    return Messenger()


@pytest.fixture
def client():
    # Entering the context runs the lifespan, so every test gets empty stores
    with TestClient(app) as c:
        yield c


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()
