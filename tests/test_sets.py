import asyncio

from bson import ObjectId

from conftest import PNG_BYTES
from app.utils.media import encode_image


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["success"] is True


def test_create_set_from_json(client):
    response = client.post("/sets", json={"title": "Capitals", "description": "Capitals of the world"})
    assert response.status_code == 200
    data = response.json()
    assert data["id"]
    assert data["title"] == "Capitals"
    assert data["private"] is True
    assert data["creator"] == "anonymous"
    assert data["cards"] == 0
    assert data["image"] is None
    assert "createdAt" in data and "updatedAt" in data


def test_create_set_multipart_with_image(client):
    response = client.post(
        "/sets",
        data={"title": "Flags", "description": "Flags of Europe", "private": "false", "creator": "bob"},
        files={"image": ("flags.png", PNG_BYTES, "image/png")},
    )
    assert response.status_code == 200, response.text
    data = response.json()
    assert data["private"] is False
    assert data["creator"] == "bob"
    assert data["image"]["contentType"] == "image/png"
    assert data["image"]["filename"] == "flags.png"
    assert data["image"]["url"] == encode_image(PNG_BYTES, "image/png")


def test_create_set_requires_title(client):
    response = client.post("/sets", json={"description": "No title"})
    assert response.status_code == 400
    assert "title" in response.json()["error"]


def test_create_set_rejects_blank_description(client):
    response = client.post("/sets", json={"title": "Capitals", "description": "   "})
    assert response.status_code == 400
    assert response.json() == {"error": "description is required"}


def test_list_sets_returns_only_public_sets(client, make_set):
    make_set(title="Public one", private=False)
    make_set(title="Secret", private=True)
    client.post("/sets", json={"title": "Default", "description": "private by default"})

    response = client.get("/sets")
    assert response.status_code == 200
    titles = [s["title"] for s in response.json()]
    assert titles == ["Public one"]


def test_list_sets_projects_fields_and_renders_image(client):
    client.post(
        "/sets",
        data={"title": "Flags", "description": "Flags of Europe", "private": "false"},
        files={"image": ("flags.png", PNG_BYTES, "image/png")},
    )
    sets = client.get("/sets").json()
    assert len(sets) == 1
    assert set(sets[0]) == {"id", "title", "description", "image", "cards"}
    assert sets[0]["image"]["url"].startswith("data:image/png;base64,")


def test_get_set(client, make_set):
    created = make_set()
    response = client.get(f"/sets/{created['id']}")
    assert response.status_code == 200
    assert response.json()["title"] == "Capitals"


def test_get_missing_set_is_404(client):
    response = client.get("/sets/5f1d7f3b2c1e4a0012345678")
    assert response.status_code == 404
    assert response.json() == {"error": "Set not found"}


def test_get_set_with_malformed_id_is_400(client):
    response = client.get("/sets/not-an-id")
    assert response.status_code == 400
    assert "error" in response.json()


def test_delete_set_cascades(client, make_set, make_card):
    created = make_set()
    other = make_set(title="Other")
    make_card(created["id"])
    make_card(created["id"], question="Capital of Spain?", answer="Madrid")
    make_card(other["id"])
    client.post("/usersets", json={"user": "alice", "set": created["id"]})
    client.post("/learnings", json={"user": "alice", "set": created["id"], "cardsTotal": 2, "correct": 1, "wrong": 1})

    response = client.delete(f"/sets/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {"success": True}

    assert client.get(f"/sets/{created['id']}").status_code == 404
    assert client.get("/cards", params={"setid": created["id"]}).json() == []
    assert client.get("/usersets", params={"user": "alice"}).json() == []
    assert client.get("/learnings", params={"user": "alice"}).json() == []
    # other sets are untouched
    assert len(client.get("/cards", params={"setid": other["id"]}).json()) == 1


def test_delete_missing_set_is_404(client):
    response = client.delete("/sets/5f1d7f3b2c1e4a0012345678")
    assert response.status_code == 404


def test_recount_repairs_card_count(client, make_set, make_card, mock_db):
    created = make_set()
    make_card(created["id"])
    make_card(created["id"], question="Q2", answer="A2")

    # Simulate drift
    asyncio.run(mock_db["sets"].update_one({"_id": ObjectId(created["id"])}, {"$set": {"cards": 7}}))
    assert client.get(f"/sets/{created['id']}").json()["cards"] == 7

    response = client.post(f"/sets/{created['id']}/recount")
    assert response.status_code == 200
    assert response.json() == {"success": True, "cards": 2}
    assert client.get(f"/sets/{created['id']}").json()["cards"] == 2
