# messager

A small HTTP service for chat rooms. You can create a room, fetch it by id
and rename it. Rooms are stored in a MongoDB collection named `rooms`.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Configuration

Settings are read from an env file, which must exist (by default `.env` in
the working directory), and then from the environment:

```
MONGO_URL=mongodb://localhost:27017
MONGO_DB_NAME=messages
```

On start the service connects to `MONGO_URL` and pings the server. If the env
file is missing, `MONGO_URL` is unset, or the server does not answer, the
command logs the error and exits with status 1.

## Running

```
messager
messager --host 127.0.0.1 --port 8080 --env-file settings.env
```

Options:

- `--host`: address to listen on (default `0.0.0.0`).
- `--port`: port to listen on (default `3000`).
- `--env-file`: file holding `MONGO_URL` and `MONGO_DB_NAME` (default `.env`).

The server stops on an interrupt or SIGTERM, closes the database client and
exits with status 0.

## API

Every response has the same JSON envelope:

```json
{"data": ..., "error": ..., "status": 200, "message": "..."}
```

A room is returned as `{"id": "<24-hex ObjectId>", "name": "..."}`.

| Method | Path             | Body              | Success                        |
|--------|------------------|-------------------|--------------------------------|
| POST   | `/api/room/`     | `{"name": "..."}` | `201`, message "Room Created"  |
| GET    | `/api/room/<id>` | none              | `200`, message "Room Found"    |
| PATCH  | `/api/room/<id>` | `{"name": "..."}` | `200`, message "Room Updated"  |

Request bodies must be a JSON object (or `null`). The `name` field must be a
string; if no field is named exactly `name`, a key matching it without regard
to case is used.

If the name is missing or blank when a room is created, the service makes one
up, shaped like `brave_amber_otter-482`: an adjective, a colour and an animal
joined by underscores, then a dash and a three-digit number.

Errors:

- `400`: the request body is not valid JSON or not an object, `name` is not a
  string, `name` is missing on PATCH, or the id in the path is blank.
- `404`: no room has that id.
- `500`: the database failed. This includes an id that is not a valid
  ObjectId: GET answers "Failed To Get Room" with error `invalid ID format`,
  PATCH answers "Failed To Write Updated Room" with error `mongo write failed`.

## Using it as a library

```python
from messager.database import connect_db
from messager.room_handler import init_room_handler
from messager.routes import create_app

client = connect_db(".env")
app = create_app(init_room_handler(client))
```

`create_app` returns a Flask application; `setup_routes(app, handler)` adds the
same routes to an existing one. The layers can also be used on their own:

- `messager.room_repo.RoomRepository` wraps a collection
  (`create_room`, `get_room_by_id`, `update_room_name`).
- `messager.room_service.RoomService` applies the naming rule and turns
  missing documents into `RoomNotFoundError`.
- `messager.room_handler.RoomHandler` returns an `APIResponse` for every
  outcome instead of raising.
- `messager.names.generate_room_name(rng)` accepts a `random.Random` for
  repeatable names.

## Limitations

- Only rooms are handled: there are no endpoints to list or delete rooms, and
  none for messages.
- `messager` serves with Flask's built-in development server. For production,
  serve the application from `create_app` with a WSGI server of your choice.