import sys
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError

# Ensure the api root is on sys.path for direct pytest runs
API_ROOT = Path(__file__).resolve().parents[1]
if str(API_ROOT) not in sys.path:
    sys.path.insert(0, str(API_ROOT))

from core.config import AppConfig  # noqa: E402


class DeleteResult:
    def __init__(self, deleted_count: int):
        self.deleted_count = deleted_count


class FakeCollection:
    """Just enough of an async pymongo collection for the album store."""

    def __init__(self, docs=None):
        self.docs = [dict(d) for d in (docs or [])]
        self.fail_writes = False
        self._next_oid = 0

    async def _iter(self, projection):
        for doc in list(self.docs):
            if projection and projection.get("_id") == 0:
                doc = {k: v for k, v in doc.items() if k != "_id"}
            yield dict(doc)

    def find(self, filter=None, projection=None):
        return self._iter(projection)

    async def insert_one(self, doc):
        if self.fail_writes:
            raise PyMongoError("insert failed")
        self._next_oid += 1
        doc["_id"] = self._next_oid
        self.docs.append(dict(doc))

    async def delete_one(self, filter):
        if self.fail_writes:
            raise PyMongoError("delete failed")
        for i, doc in enumerate(self.docs):
            if all(doc.get(k) == v for k, v in filter.items()):
                del self.docs[i]
                return DeleteResult(1)
        return DeleteResult(0)


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def patched_db(collection):
    import main

    with patch.object(main.config, "load_config", return_value=AppConfig(uri="mongodb://test")), \
            patch.object(main.db, "init_client", new=AsyncMock()) as init_client, \
            patch.object(main.db, "ping", new=AsyncMock(return_value={"ok": 1})) as ping, \
            patch.object(main.db, "close_client", new=AsyncMock()) as close_client, \
            patch.object(main.db, "collection", return_value=collection):
        yield {"init_client": init_client, "ping": ping, "close_client": close_client}


@pytest.fixture
def client(patched_db):
    import main

    with TestClient(main.app) as test_client:
        yield test_client
