"""
Album API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from . import schemas, service
from .cache import AlbumCache
from .dependencies import get_cache, get_store
from .repository import AlbumStore

router = APIRouter()


@router.get("/albums")
async def get_albums(cache: AlbumCache = Depends(get_cache)) -> list[schemas.Album]:
    return service.list_albums(cache)


@router.get("/albums/{album_id}")
async def get_album_by_id(
    album_id: str,
    cache: AlbumCache = Depends(get_cache),
) -> schemas.Album:
    return service.get_album(cache, album_id)


@router.post("/albums", status_code=status.HTTP_201_CREATED)
async def post_album(
    album: schemas.Album,
    store: AlbumStore = Depends(get_store),
    cache: AlbumCache = Depends(get_cache),
) -> schemas.Album:
    return await service.create_album(store, cache, album)


@router.delete("/albums/{album_id}")
async def delete_album_by_id(
    album_id: str,
    store: AlbumStore = Depends(get_store),
    cache: AlbumCache = Depends(get_cache),
) -> schemas.MessageResponse:
    await service.delete_album(store, cache, album_id)
    return schemas.MessageResponse(message=service.DELETED_MESSAGE)
