"""Turns room requests into API responses."""

from __future__ import annotations

import logging
from typing import Any

from messager.models import (
    APIResponse,
    MongoWriteFailedError,
    RoomNotFoundError,
    parse_create_room_request,
    parse_update_room_request,
)
from messager.room_repo import new_room_repository
from messager.room_service import RoomService

logger = logging.getLogger(__name__)

_BAD_REQUEST = 400
_NOT_FOUND = 404
_OK = 200
_CREATED = 201
_INTERNAL_ERROR = 500


class RoomHandler:
    """Handles the room endpoints and wraps every outcome in an APIResponse."""

    def __init__(self, service: RoomService) -> None:
        self.service = service

    def create_room(self, body: Any) -> APIResponse:
        """Create a room from a request body."""
        try:
            request = parse_create_room_request(body)
        except ValueError as exc:
            return APIResponse(
                status=_BAD_REQUEST, message="Invalid Request Body", error=str(exc)
            )

        logger.info("Create Room Request Received.")

        try:
            room = self.service.create_room(request)
        except Exception as exc:
            return APIResponse(
                status=_INTERNAL_ERROR, message="Failed To Create Room", error=str(exc)
            )
        return APIResponse(status=_CREATED, message="Room Created", data=room)

    def get_room(self, room_id: str) -> APIResponse:
        """Look up a room by the identifier taken from the path."""
        if not room_id or not room_id.strip():
            return APIResponse(
                status=_BAD_REQUEST,
                message="id Path Variable is required to be not empty.",
                error="Missing room ID in path",
            )

        logger.info("Get Room with id: %s Request Received.", room_id)

        try:
            room = self.service.get_room(room_id)
        except RoomNotFoundError as exc:
            return APIResponse(
                status=_NOT_FOUND, message="No Room Found with given id.", error=str(exc)
            )
        except Exception as exc:
            return APIResponse(
                status=_INTERNAL_ERROR, message="Failed To Get Room", error=str(exc)
            )
        return APIResponse(status=_OK, message="Room Found", data=room)

    def update_room_name(self, room_id: str, body: Any) -> APIResponse:
        """Rename the room named in the path with the name from the body."""
        try:
            request = parse_update_room_request(body)
            if request.name is None:
                raise ValueError("missing field 'name'")
        except ValueError as exc:
            return APIResponse(
                status=_BAD_REQUEST, message="Invalid Request Body", error=str(exc)
            )

        logger.info("Update Room with id %s Request Received.", room_id)

        try:
            room = self.service.update_room_name(room_id, request.name)
        except RoomNotFoundError as exc:
            return APIResponse(
                status=_NOT_FOUND, message="No Room Found with given id.", error=str(exc)
            )
        except MongoWriteFailedError as exc:
            return APIResponse(
                status=_INTERNAL_ERROR,
                message="Failed To Write Updated Room",
                error=str(exc),
            )
        except Exception as exc:
            return APIResponse(
                status=_INTERNAL_ERROR, message="Failed To Update Room", error=str(exc)
            )
        return APIResponse(status=_OK, message="Room Updated", data=room)


def init_room_handler(client: Any) -> RoomHandler:
    """Build a handler backed by the rooms collection of the given client."""
    return RoomHandler(RoomService(new_room_repository(client)))