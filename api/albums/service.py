"""
Album business logic.

Every write goes to MongoDB first; the in-memory mirror is only touched once
the store reports success.
"""

from __future__ import annotations

import logging

from fastapi import status
from pymongo.errors import PyMongoError

from .cache import AlbumCache
from .repository import AlbumStore
from .schemas import Album

NOT_FOUND_MESSAGE = "album not found"
INSERT_FAILED_MESSAGE = "could not insert album"
DELETE_FAILED_MESSAGE = "could not delete album"
DELETED_MESSAGE = "album deleted"
INVALID_PAYLOAD_MESSAGE = "invalid album payload"

logger = logging.getLogger(__name__)


# Rendered as {"message": ...} by the handler registered in main.py.
class AlbumError(Exception):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


async def load_albums(store: AlbumStore, cache: AlbumCache) -> list[Album]:
    """
    Seed the mirror from a full scan of the collection.
    """
    albums = await store.list_all()
    cache.seed(albums)
    for album in albums:
        logger.info("album title=%s artist=%s price=%.2f", album.title, album.artist, album.price)
    logger.info("albums_loaded count=%s", len(albums))
    return albums


def list_albums(cache: AlbumCache) -> list[Album]:
    return cache.all()


def get_album(cache: AlbumCache, album_id: str) -> Album:
    album = cache.find(album_id)
    if album is None:
        raise AlbumError(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
    return album


async def create_album(store: AlbumStore, cache: AlbumCache, album: Album) -> Album:
    async with cache.lock:
        try:
            await store.insert(album)
        except PyMongoError as exc:
            logger.exception("album_insert_failed id=%s", album.id)
            raise AlbumError(status.HTTP_500_INTERNAL_SERVER_ERROR, INSERT_FAILED_MESSAGE) from exc
        cache.append(album)
    return album


async def delete_album(store: AlbumStore, cache: AlbumCache, album_id: str) -> None:
    async with cache.lock:
        try:
            deleted = await store.delete_by_id(album_id)
        except PyMongoError as exc:
            logger.exception("album_delete_failed id=%s", album_id)
            raise AlbumError(status.HTTP_500_INTERNAL_SERVER_ERROR, DELETE_FAILED_MESSAGE) from exc

        if deleted == 0:
            raise AlbumError(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)

        if not cache.remove(album_id):
            # Deleted from the store but never mirrored (out-of-band insert).
            logger.warning("album_not_mirrored id=%s", album_id)
