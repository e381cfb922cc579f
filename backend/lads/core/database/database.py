import logging
import os
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from lads.config.constants import DEFAULT_DB_NAME, DEFAULT_WAITLIST_COLLECTION
from lads.core.exceptions import StorageFailure

logger = logging.getLogger("lads.database")

# Shared client, created on first use and kept for the process lifetime
_client: Optional[AsyncIOMotorClient] = None


def get_client() -> AsyncIOMotorClient:
    global _client
    if _client is None:
        uri = os.getenv("MONGODB_URI")
        if not uri:
            raise StorageFailure(details="MONGODB_URI is not set")
        logger.info("Creating MongoDB client")
        _client = AsyncIOMotorClient(uri)
    return _client


def get_database() -> AsyncIOMotorDatabase:
    return get_client()[os.getenv("MONGODB_DB_NAME", DEFAULT_DB_NAME)]


def get_waitlist_collection() -> AsyncIOMotorCollection:
    return get_database()[os.getenv("WAITLIST_COLLECTION", DEFAULT_WAITLIST_COLLECTION)]


async def ping() -> None:
    await get_client().admin.command("ping")


def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("MongoDB client closed")
