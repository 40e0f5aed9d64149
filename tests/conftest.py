import pytest
from fastapi.testclient import TestClient

from colorconvert import Converter


@pytest.fixture
def converter():
    return Converter()


@pytest.fixture
def client():
    from main import app

    return TestClient(app)
