import asyncio
import warnings

from bson import ObjectId
from fastapi.testclient import TestClient

from app.core.database import get_database, remove_duplicate_favorites
from app.main import create_app


def _start(mock_db):
    app = create_app()
    app.dependency_overrides[get_database] = lambda: mock_db
    return TestClient(app)


def test_startup_collapses_duplicate_favorites(mock_db):
    set_id = ObjectId()
    other_set_id = ObjectId()
    asyncio.run(mock_db["usersets"].insert_many([
        {"user": "alice", "set": set_id},
        {"user": "alice", "set": set_id},
        {"user": "alice", "set": set_id},
        {"user": "alice", "set": other_set_id},
        {"user": "bob", "set": set_id},
    ]))
    first_id = asyncio.run(mock_db["usersets"].find_one({"user": "alice", "set": set_id}))["_id"]

    with _start(mock_db) as client:
        assert client.get("/").status_code == 200

    remaining = asyncio.run(mock_db["usersets"].find({"user": "alice", "set": set_id}).to_list(length=None))
    assert [doc["_id"] for doc in remaining] == [first_id]
    assert asyncio.run(mock_db["usersets"].count_documents({})) == 3


def test_unique_favorite_index_is_active_after_cleanup(mock_db):
    set_doc = {"title": "Capitals", "description": "d", "private": False, "cards": 0}
    set_id = asyncio.run(mock_db["sets"].insert_one(set_doc)).inserted_id
    asyncio.run(mock_db["usersets"].insert_many([
        {"user": "alice", "set": set_id},
        {"user": "alice", "set": set_id},
    ]))

    with _start(mock_db) as client:
        response = client.post("/usersets", json={"user": "alice", "set": str(set_id)})

    assert response.status_code == 400
    assert response.json() == {"error": "Set already in user favorites"}
    assert asyncio.run(mock_db["usersets"].count_documents({"user": "alice"})) == 1


def test_remove_duplicate_favorites_without_duplicates(mock_db):
    asyncio.run(mock_db["usersets"].insert_many([
        {"user": "alice", "set": ObjectId()},
        {"user": "alice", "set": ObjectId()},
    ]))

    assert asyncio.run(remove_duplicate_favorites(mock_db)) == 0
    assert asyncio.run(mock_db["usersets"].count_documents({})) == 2


def test_create_app_has_no_deprecated_startup_hooks():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        create_app()

    assert not [w for w in caught if "on_event" in str(w.message)]
