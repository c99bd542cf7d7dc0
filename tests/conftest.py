import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.core.database import ensure_indexes, get_database
from app.main import create_app
from app.repositories.cards import CardRepository
from app.repositories.learnings import LearningRepository
from app.repositories.sets import SetRepository
from app.repositories.user_sets import UserSetRepository

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDRfake-image-bytes"


@pytest.fixture
def mock_db():
    """A fresh in-memory MongoDB database for each test."""
    return AsyncMongoMockClient()["flashcards_test"]


@pytest_asyncio.fixture
async def db(mock_db):
    await ensure_indexes(mock_db)
    return mock_db


@pytest.fixture
def repositories(db):
    return {
        "sets": SetRepository(db),
        "cards": CardRepository(db),
        "user_sets": UserSetRepository(db),
        "learnings": LearningRepository(db),
    }


@pytest.fixture
def client(mock_db):
    app = create_app(enable_seed_route=True)
    app.dependency_overrides[get_database] = lambda: mock_db

    # Entering the client runs startup, which creates the indexes on mock_db
    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def make_set(client):
    def _make_set(**overrides):
        payload = {
            "title": "Capitals",
            "description": "Capitals of the world",
            "private": False,
            "creator": "alice",
        }
        payload.update(overrides)
        response = client.post("/sets", json=payload)
        assert response.status_code == 200, response.text
        return response.json()

    return _make_set


@pytest.fixture
def make_card(client):
    def _make_card(set_id, question="What is the capital of France?", answer="Paris", **extra):
        response = client.post("/cards", json={"set": set_id, "question": question, "answer": answer, **extra})
        assert response.status_code == 200, response.text
        return response.json()

    return _make_card
