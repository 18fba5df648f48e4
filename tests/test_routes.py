from types import SimpleNamespace

import pytest
from bson import ObjectId

from messager.room_handler import RoomHandler
from messager.room_repo import RoomRepository
from messager.room_service import RoomService
from messager.routes import create_app


class FakeCollection:
    def __init__(self):
        self.docs = {}

    def insert_one(self, document):
        oid = document.get("_id") or ObjectId()
        self.docs[oid] = {**document, "_id": oid}
        return SimpleNamespace(inserted_id=oid)

    def find_one(self, query):
        found = self.docs.get(query["_id"])
        return dict(found) if found is not None else None

    def find_one_and_update(self, query, update, return_document=None):
        found = self.docs.get(query["_id"])
        if found is None:
            return None
        found.update(update["$set"])
        return dict(found)


@pytest.fixture
def web_client():
    handler = RoomHandler(RoomService(RoomRepository(FakeCollection())))
    return create_app(handler).test_client()


def _send_patch(web_client, path, payload):
    return web_client.open(path, method="PATCH", json=payload)


def test_post_creates_room(web_client):
    reply = web_client.post("/api/room/", json={"name": "lobby"})
    body = reply.get_json()
    assert reply.status_code == 201
    assert body["status"] == 201
    assert body["message"] == "Room Created"
    assert body["data"]["name"] == "lobby"
    assert ObjectId.is_valid(body["data"]["id"])
    assert body["error"] is None


def test_post_with_bad_body_is_bad_request(web_client):
    reply = web_client.post("/api/room/", data="{", content_type="application/json")
    assert reply.status_code == 400
    assert reply.get_json()["message"] == "Invalid Request Body"


def test_get_returns_created_room(web_client):
    created = web_client.post("/api/room/", json={"name": "lobby"}).get_json()["data"]
    reply = web_client.get(f"/api/room/{created['id']}")
    assert reply.status_code == 200
    assert reply.get_json()["data"] == created


def test_get_unknown_room_is_not_found(web_client):
    reply = web_client.get(f"/api/room/{ObjectId()}")
    assert reply.status_code == 404
    assert reply.get_json()["error"] == "room not found"


def test_patch_renames_room(web_client):
    created = web_client.post("/api/room/", json={"name": "lobby"}).get_json()["data"]
    reply = _send_patch(web_client, f"/api/room/{created['id']}", {"name": "hall"})
    assert reply.status_code == 200
    assert reply.get_json()["data"] == {"id": created["id"], "name": "hall"}
    again = web_client.get(f"/api/room/{created['id']}").get_json()
    assert again["data"]["name"] == "hall"


def test_patch_invalid_id_is_server_error(web_client):
    reply = _send_patch(web_client, "/api/room/xyz", {"name": "hall"})
    assert reply.status_code == 500
    assert reply.get_json()["message"] == "Failed To Write Updated Room"