"""Room documents, request bodies, API envelopes and the errors they raise."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from bson import ObjectId

_NIL_OBJECT_ID = ObjectId(b"\x00" * 12)


class InvalidIdError(ValueError):
    """The given room identifier is not a valid ObjectId hex string."""

    def __init__(self, message: str = "invalid ID format") -> None:
        super().__init__(message)


class NoDocumentsError(LookupError):
    """A query matched no document."""

    def __init__(self, message: str = "mongo: no documents in result") -> None:
        super().__init__(message)


class RoomNotFoundError(LookupError):
    """The requested room does not exist."""

    def __init__(self, message: str = "room not found") -> None:
        super().__init__(message)


class MongoWriteFailedError(RuntimeError):
    """Writing a room to the database failed."""

    def __init__(self, message: str = "mongo write failed") -> None:
        super().__init__(message)


@dataclass
class Room:
    """A chat room with its database identifier and display name."""

    name: str = ""
    id: Optional[ObjectId] = None

    def to_document(self) -> dict[str, Any]:
        """Return the database form; the identifier is left out when unset."""
        document: dict[str, Any] = {}
        if self.id is not None:
            document["_id"] = self.id
        document["name"] = self.name
        return document

    def to_json(self) -> dict[str, Any]:
        """Return the form sent to API clients."""
        room_id = self.id if self.id is not None else _NIL_OBJECT_ID
        return {"id": str(room_id), "name": self.name}


@dataclass(frozen=True)
class CreateRoomRequest:
    """Body of a room creation request; the name is optional."""

    name: Optional[str] = None


@dataclass(frozen=True)
class UpdateRoomRequest:
    """Body of a room rename request."""

    name: Optional[str] = None


@dataclass
class APIResponse:
    """Standard envelope for every API reply."""

    status: int
    message: str = ""
    data: Any = None
    error: Any = None

    def to_json(self) -> dict[str, Any]:
        """Return the envelope as a JSON-ready dictionary."""
        data = self.data.to_json() if hasattr(self.data, "to_json") else self.data
        return {
            "data": data,
            "error": self.error,
            "status": self.status,
            "message": self.message,
        }


def _decode_body(body: Any) -> Mapping[str, Any]:
    if isinstance(body, (bytes, bytearray)):
        body = bytes(body).decode("utf-8")
    if isinstance(body, str):
        body = json.loads(body)
    if body is None:
        return {}
    if not isinstance(body, Mapping):
        raise ValueError(f"cannot decode {type(body).__name__} into a request object")
    return body


def _extract_name(fields: Mapping[str, Any]) -> Optional[str]:
    if "name" in fields:
        value = fields["name"]
    else:
        value = next(
            (v for k, v in fields.items() if isinstance(k, str) and k.lower() == "name"),
            None,
        )
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field 'name' must be a string, not {type(value).__name__}")
    return value


def parse_create_room_request(body: Any) -> CreateRoomRequest:
    """Build a creation request from JSON text, bytes or a mapping."""
    return CreateRoomRequest(name=_extract_name(_decode_body(body)))


def parse_update_room_request(body: Any) -> UpdateRoomRequest:
    """Build a rename request from JSON text, bytes or a mapping."""
    return UpdateRoomRequest(name=_extract_name(_decode_body(body)))


def room_from_document(document: Mapping[str, Any]) -> Room:
    """Build a room from a stored database document."""
    return Room(name=document.get("name", ""), id=document.get("_id"))