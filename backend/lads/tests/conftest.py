import os
import tempfile
from typing import Optional

# Keep the app's import-time setup away from real infrastructure
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="lads-logs-")
os.environ.pop("MONGODB_URI", None)

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

from lads.core.exceptions import Conflict
from lads.core.models.waitlist import WaitlistEntry
from lads.core.services.waitlist_service import get_waitlist_store


class FakeWaitlistStore:
    """In-memory stand-in for WaitlistStore."""

    def __init__(self, unique: bool = False):
        self.documents = []
        self.unique = unique

    async def find_by_email(self, email: str) -> Optional[dict]:
        for doc in self.documents:
            if doc["email"] == email:
                return doc
        return None

    async def insert(self, entry: WaitlistEntry) -> str:
        doc = entry.to_document()
        if self.unique and any(d["email"] == doc["email"] for d in self.documents):
            raise Conflict()
        doc["_id"] = ObjectId()
        self.documents.append(doc)
        return str(doc["_id"])

    async def count(self) -> int:
        return len(self.documents)


class BrokenWaitlistStore:
    """Store whose every operation fails like a dropped connection."""

    def __init__(self, message: str = "connection refused"):
        self.message = message

    async def find_by_email(self, email: str):
        raise ConnectionError(self.message)

    async def insert(self, entry: WaitlistEntry):
        raise ConnectionError(self.message)

    async def count(self):
        raise ConnectionError(self.message)


@pytest.fixture(scope="session")
def test_app():
    from lads.api.main import app

    return app


@pytest.fixture
def store():
    return FakeWaitlistStore()


@pytest_asyncio.fixture
async def client(test_app, store):
    test_app.dependency_overrides[get_waitlist_store] = lambda: store
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac
    test_app.dependency_overrides.pop(get_waitlist_store, None)


@pytest_asyncio.fixture
async def broken_client(test_app):
    broken = BrokenWaitlistStore()
    test_app.dependency_overrides[get_waitlist_store] = lambda: broken
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac
    test_app.dependency_overrides.pop(get_waitlist_store, None)
