"""Command that connects to the database and serves the room API."""

from __future__ import annotations

import argparse
import logging
import signal
from typing import Optional, Sequence

from messager.database import connect_db
from messager.room_handler import init_room_handler
from messager.routes import create_app

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(prog="messager", description="Serve the room API.")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=3000, help="port to listen on")
    parser.add_argument(
        "--env-file", default=".env", help="file holding MONGO_URL and MONGO_DB_NAME"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server until interrupted; return the exit status."""
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    try:
        client = connect_db(args.env_file)
    except RuntimeError as exc:
        logger.error("%s", exc)
        return 1

    app = create_app(init_room_handler(client))

    received: list[str] = []

    def _on_signal(signum: int, _frame: object) -> None:
        received.append(signal.Signals(signum).name)
        raise KeyboardInterrupt

    previous = signal.signal(signal.SIGTERM, _on_signal)
    try:
        app.run(host=args.host, port=args.port)
    except KeyboardInterrupt:
        pass
    except OSError as exc:
        logger.error("Server failed: %s", exc)
        return 1
    finally:
        signal.signal(signal.SIGTERM, previous)

    reason = received[0] if received else "interrupt"
    logger.info("Shutting down server due to %s", reason)
    client.close()
    logger.info("Server gracefully stopped")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())