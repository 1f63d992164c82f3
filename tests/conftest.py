import pytest
from fastapi.testclient import TestClient

from idn_validators.main import app


@pytest.fixture
def client():
    return TestClient(app)
