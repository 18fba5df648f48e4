"""Persistence of rooms in a MongoDB collection."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

import pymongo
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument

from messager.models import InvalidIdError, NoDocumentsError, Room, room_from_document

_OPERATION_TIMEOUT_S = 5


def _parse_object_id(room_id: str) -> ObjectId:
    if not isinstance(room_id, str):
        raise InvalidIdError()
    try:
        return ObjectId(room_id)
    except (InvalidId, TypeError) as exc:
        raise InvalidIdError() from exc


class RoomRepository:
    """Creates, reads and renames rooms stored in one collection."""

    def __init__(self, collection: Any) -> None:
        self.collection = collection

    def create_room(self, room: Room) -> Room:
        """Insert the room and return it with its new identifier."""
        with pymongo.timeout(_OPERATION_TIMEOUT_S):
            result = self.collection.insert_one(room.to_document())
        if isinstance(result.inserted_id, ObjectId):
            return dataclasses.replace(room, id=result.inserted_id)
        return room

    def get_room_by_id(self, room_id: str) -> Room:
        """Return the room with this hex identifier or raise NoDocumentsError."""
        oid = _parse_object_id(room_id)
        with pymongo.timeout(_OPERATION_TIMEOUT_S):
            document = self.collection.find_one({"_id": oid})
        if document is None:
            raise NoDocumentsError()
        return room_from_document(document)

    def update_room_name(self, room_id: str, name: str) -> Room:
        """Rename the room and return it as stored after the update."""
        oid = _parse_object_id(room_id)
        with pymongo.timeout(_OPERATION_TIMEOUT_S):
            document = self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": {"name": name}},
                return_document=ReturnDocument.AFTER,
            )
        if document is None:
            raise NoDocumentsError()
        return room_from_document(document)


def new_room_repository(client: Any) -> RoomRepository:
    """Return a repository over the rooms collection of MONGO_DB_NAME."""
    return RoomRepository(client[os.environ.get("MONGO_DB_NAME", "")]["rooms"])