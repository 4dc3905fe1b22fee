"""
In-memory mirror of the album collection.

Seeded once at startup, then kept in step with writes made through this
process only. The collection stays authoritative.
"""

from __future__ import annotations

import asyncio

from .schemas import Album


class AlbumCache:
    def __init__(self, albums: list[Album] | None = None) -> None:
        self._albums: list[Album] = list(albums or [])
        # Held across "store write, then mirror update" by the service layer.
        self.lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._albums)

    def seed(self, albums: list[Album]) -> None:
        self._albums = list(albums)

    def all(self) -> list[Album]:
        return list(self._albums)

    def find(self, album_id: str) -> Album | None:
        for album in self._albums:
            if album.id == album_id:
                return album
        return None

    def append(self, album: Album) -> None:
        self._albums.append(album)

    def remove(self, album_id: str) -> bool:
        """
        Drop the first album with `album_id`, keeping the order of the rest.
        """
        for index, album in enumerate(self._albums):
            if album.id == album_id:
                del self._albums[index]
                return True
        return False
