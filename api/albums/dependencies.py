"""
Dependencies that hand the shared store and mirror to album routes.
"""

from __future__ import annotations

from fastapi import Request

from .cache import AlbumCache
from .repository import AlbumStore


def get_store(request: Request) -> AlbumStore:
    store = getattr(request.app.state, "album_store", None)
    if store is None:
        raise RuntimeError("Album store is not initialized. Check application startup.")
    return store


def get_cache(request: Request) -> AlbumCache:
    cache = getattr(request.app.state, "album_cache", None)
    if cache is None:
        raise RuntimeError("Album cache is not initialized. Check application startup.")
    return cache
