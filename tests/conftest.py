import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.generator_service import get_email_generator
from tests.helpers import RecordingHandler, make_generator


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def generator(handler):
    service = make_generator(handler)
    yield service
    service.close()


@pytest.fixture
def client(generator):
    app.dependency_overrides[get_email_generator] = lambda: generator
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
