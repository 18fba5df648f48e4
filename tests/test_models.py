import pytest
from bson import ObjectId

from messager.models import (
    APIResponse,
    CreateRoomRequest,
    InvalidIdError,
    MongoWriteFailedError,
    NoDocumentsError,
    Room,
    RoomNotFoundError,
    UpdateRoomRequest,
    parse_create_room_request,
    parse_update_room_request,
    room_from_document,
)


def test_room_document_omits_unset_id():
    assert Room(name="lobby").to_document() == {"name": "lobby"}


def test_room_document_includes_id():
    oid = ObjectId()
    assert Room(name="lobby", id=oid).to_document() == {"_id": oid, "name": "lobby"}


def test_room_json_with_id():
    oid = ObjectId()
    assert Room(name="lobby", id=oid).to_json() == {"id": str(oid), "name": "lobby"}


def test_room_json_without_id_uses_zero_id():
    assert Room(name="lobby").to_json()["id"] == "000000000000000000000000"


def test_room_document_round_trip():
    room = Room(name="kitchen", id=ObjectId())
    assert room_from_document(room.to_document()) == room


def test_room_from_document_missing_fields():
    assert room_from_document({}) == Room(name="", id=None)


def test_api_response_json_nests_room():
    oid = ObjectId()
    resp = APIResponse(status=201, message="Room Created", data=Room(name="a", id=oid))
    assert resp.to_json() == {
        "data": {"id": str(oid), "name": "a"},
        "error": None,
        "status": 201,
        "message": "Room Created",
    }


def test_api_response_json_with_error():
    resp = APIResponse(status=400, message="Invalid Request Body", error="bad")
    out = resp.to_json()
    assert out["error"] == "bad"
    assert out["data"] is None
    assert list(out) == ["data", "error", "status", "message"]


@pytest.mark.parametrize(
    "body",
    ['{"name": "lobby"}', b'{"name": "lobby"}', {"name": "lobby"}, '{"Name": "lobby"}'],
)
def test_parse_create_with_name(body):
    assert parse_create_room_request(body) == CreateRoomRequest(name="lobby")


@pytest.mark.parametrize("body", ["{}", "null", {"name": None}, None])
def test_parse_create_without_name(body):
    assert parse_create_room_request(body).name is None


@pytest.mark.parametrize("body", ["", "{not json", "[1, 2]", '{"name": 5}', b"\xff"])
def test_parse_create_rejects_bad_bodies(body):
    with pytest.raises(ValueError):
        parse_create_room_request(body)


def test_parse_update_with_name():
    assert parse_update_room_request('{"name": "new"}') == UpdateRoomRequest(name="new")


def test_parse_update_rejects_non_string_name():
    with pytest.raises(ValueError):
        parse_update_room_request({"name": ["x"]})


def test_error_messages():
    assert str(InvalidIdError()) == "invalid ID format"
    assert str(RoomNotFoundError()) == "room not found"
    assert str(MongoWriteFailedError()) == "mongo write failed"
    assert isinstance(NoDocumentsError(), LookupError)