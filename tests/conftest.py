"""Root conftest: run the app against the in-memory store."""

import os

os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client():
    from clinic_api.main import app

    # Each context runs the lifespan, which opens a fresh store
    with TestClient(app) as c:
        yield c
