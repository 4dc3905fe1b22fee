"""
Album persistence (MongoDB).

One store instance is bound to a single collection and shared by every
request. Driver errors (`pymongo.errors.PyMongoError`) propagate to the caller.
"""

from __future__ import annotations

from pymongo.asynchronous.collection import AsyncCollection

from .schemas import Album

# Documents carry the driver's ObjectId; it is never part of an Album.
_PROJECTION = {"_id": 0}


class AlbumStore:
    def __init__(self, collection: AsyncCollection) -> None:
        self._collection = collection

    async def list_all(self) -> list[Album]:
        """
        Full unfiltered scan of the collection.
        """
        cursor = self._collection.find({}, _PROJECTION)
        return [Album.model_validate(doc) async for doc in cursor]

    async def insert(self, album: Album) -> None:
        # insert_one adds `_id` to the dict it is given, so hand it a fresh one.
        await self._collection.insert_one(album.model_dump())

    async def delete_by_id(self, album_id: str) -> int:
        result = await self._collection.delete_one({"id": album_id})
        return int(result.deleted_count)
