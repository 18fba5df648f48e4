"""HTTP routes of the room API."""

from __future__ import annotations

from flask import Flask, jsonify, request

from messager.models import APIResponse
from messager.room_handler import RoomHandler


def _reply(response: APIResponse):
    return jsonify(response.to_json()), response.status


def setup_routes(app: Flask, handler: RoomHandler) -> None:
    """Register the room endpoints under /api/room."""

    def create_room():
        return _reply(handler.create_room(request.get_data()))

    def get_room(room_id: str):
        return _reply(handler.get_room(room_id))

    def update_room_name(room_id: str):
        return _reply(handler.update_room_name(room_id, request.get_data()))

    app.add_url_rule(
        "/api/room/",
        endpoint="create_room",
        view_func=create_room,
        methods=["POST"],
        strict_slashes=False,
    )
    app.add_url_rule(
        "/api/room/<room_id>",
        endpoint="get_room",
        view_func=get_room,
        methods=["GET"],
    )
    app.add_url_rule(
        "/api/room/<room_id>",
        endpoint="update_room_name",
        view_func=update_room_name,
        methods=["PATCH"],
    )


def create_app(handler: RoomHandler) -> Flask:
    """Return a Flask application serving the room API."""
    app = Flask(__name__)
    setup_routes(app, handler)
    return app