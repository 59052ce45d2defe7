import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.services.video_store import VideoStore


@pytest.fixture
def store():
    return VideoStore()


@pytest.fixture
def client():
    """Fresh app (and so a fresh store) per test."""
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
def sample_video():
    return {
        "title": "Intro to FastAPI",
        "description": "First lesson",
        "date": "2023-01-01",
        "availableResolutions": ["P720", "P1080"],
    }
