"""MongoDB connection shared by the whole application."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

_CONNECT_TIMEOUT_MS = 10_000

_client: Optional[MongoClient] = None


def connect_db(env_file: Union[str, os.PathLike, None] = None) -> MongoClient:
    """Load settings from the env file and return a connected, pinged client.

    The client is created once and reused by later calls.
    """
    global _client
    if _client is not None:
        return _client

    path = Path(env_file) if env_file is not None else Path(".env")
    if not path.is_file():
        raise RuntimeError("Error loading .env file")
    load_dotenv(path)

    url = os.environ.get("MONGO_URL", "")
    if not url:
        raise RuntimeError("MongoDB connection failed: MONGO_URL is not set")
    try:
        client = MongoClient(url, serverSelectionTimeoutMS=_CONNECT_TIMEOUT_MS)
    except PyMongoError as exc:
        raise RuntimeError(f"MongoDB connection failed: {exc}") from exc

    try:
        client.admin.command("ping")
    except PyMongoError as exc:
        client.close()
        raise RuntimeError(f"MongoDB not responding: {exc}") from exc

    logger.info("Connected to MongoDB")
    _client = client
    return client


def get_collection(collection_name: str, client: Optional[MongoClient] = None) -> Collection:
    """Return a collection from the database named by MONGO_DB_NAME."""
    active = client if client is not None else _client
    if active is None:
        raise RuntimeError("MongoDB client is not connected")
    return active[os.environ.get("MONGO_DB_NAME", "")][collection_name]