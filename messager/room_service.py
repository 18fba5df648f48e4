"""Business rules for creating, reading and renaming rooms."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from messager.models import (
    CreateRoomRequest,
    MongoWriteFailedError,
    NoDocumentsError,
    Room,
    RoomNotFoundError,
)
from messager.names import generate_room_name


class RoomService:
    """Applies room rules on top of a room repository."""

    def __init__(
        self,
        repository: Any,
        name_generator: Callable[[], str] = generate_room_name,
    ) -> None:
        self.repository = repository
        self.name_generator = name_generator

    def create_room(self, request: CreateRoomRequest) -> Room:
        """Create a room, generating a name when none or a blank one is given."""
        name = request.name
        if name is None or not name.strip():
            name = self.name_generator()
        return self.repository.create_room(Room(name=name))

    def get_room(self, room_id: str) -> Room:
        """Return the room with this identifier or raise RoomNotFoundError."""
        try:
            return self.repository.get_room_by_id(room_id)
        except NoDocumentsError:
            raise RoomNotFoundError() from None

    def update_room_name(self, room_id: str, name: str) -> Room:
        """Rename a room; a missing room and any other failure get their own errors."""
        try:
            return self.repository.update_room_name(room_id, name)
        except NoDocumentsError:
            raise RoomNotFoundError() from None
        except Exception as exc:
            raise MongoWriteFailedError() from exc