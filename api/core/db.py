"""
Async MongoDB access helpers using pymongo's async client.

This module owns the client. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`).
"""

from __future__ import annotations

from typing import Any

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.server_api import ServerApi

_client: AsyncMongoClient | None = None


async def init_client(uri: str) -> AsyncMongoClient:
    global _client
    if _client is not None:
        return _client
    _client = AsyncMongoClient(uri, server_api=ServerApi("1"))
    return _client


async def close_client() -> None:
    global _client
    if _client is None:
        return None
    await _client.close()
    _client = None


def client() -> AsyncMongoClient:
    if _client is None:
        raise RuntimeError("Mongo client is not initialized. Call init_client() on startup.")
    return _client


async def ping() -> dict[str, Any]:
    """
    Liveness check against the primary. Raises on failure.
    """
    # The admin command goes to the primary by default.
    return await client().admin.command("ping")


def collection(database: str, name: str) -> AsyncCollection:
    return client()[database][name]
