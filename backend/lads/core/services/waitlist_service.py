import logging
import os
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from lads.core.database.database import get_waitlist_collection
from lads.core.exceptions import Conflict
from lads.core.models.waitlist import WaitlistEntry

logger = logging.getLogger("lads.waitlist")


class WaitlistStore:
    """Thin wrapper over the waitlist collection.

    The route only talks to this interface (find_by_email, insert, count),
    so tests can hand it an in-memory fake instead of a live collection.
    """

    def __init__(self, collection: Optional[AsyncIOMotorCollection] = None):
        self._collection = collection

    @property
    def collection(self) -> AsyncIOMotorCollection:
        # Resolved on first use so connection errors surface inside the request
        if self._collection is None:
            self._collection = get_waitlist_collection()
        return self._collection

    async def find_by_email(self, email: str) -> Optional[dict]:
        return await self.collection.find_one({"email": email})

    async def insert(self, entry: WaitlistEntry) -> str:
        try:
            result = await self.collection.insert_one(entry.to_document())
        except DuplicateKeyError:
            # Lost a concurrent signup race against the unique index
            logger.warning(f"Duplicate key on insert for {entry.email}")
            raise Conflict()
        return str(result.inserted_id)

    async def count(self) -> int:
        return await self.collection.count_documents({})

    async def ensure_indexes(self) -> None:
        await self.collection.create_index([("email", ASCENDING)], unique=True, name="email_unique")
        logger.info("Ensured unique index on waitlist email")


def unique_index_enabled() -> bool:
    return os.getenv("WAITLIST_UNIQUE_INDEX", "true").strip().lower() not in ("0", "false", "no", "off")


def get_waitlist_store() -> WaitlistStore:
    """FastAPI dependency providing the store over the shared collection."""
    return WaitlistStore()
