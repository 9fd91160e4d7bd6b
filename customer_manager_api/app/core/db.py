"""
MongoDB integration.

This module owns the lifecycle of the ``AsyncIOMotorClient``: the
application creates one client at startup (``connect``), hands out
collections from it (``get_collection``) and closes it on shutdown
(``close``).  ``ensure_indexes`` runs once at startup.  Connection
pooling is handled by motor itself.
"""

import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from .config import Settings

logger = logging.getLogger(__name__)


def connect(settings: Settings) -> AsyncIOMotorClient:
    """Create a motor client for ``settings.mongo_uri``.

    The client connects lazily, so this does not block or fail when the
    server is unreachable; the first query does.
    """
    logger.info("Connecting to MongoDB database %s", settings.mongo_db_name)
    return AsyncIOMotorClient(settings.mongo_uri)


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    return client[settings.mongo_db_name]


def get_collection(client: AsyncIOMotorClient, settings: Settings, name: str) -> AsyncIOMotorCollection:
    """Return collection ``name`` from the configured database."""
    return get_database(client, settings)[name]


def close(client: AsyncIOMotorClient) -> None:
    # Motor's close() is synchronous.
    client.close()
    logger.info("MongoDB client closed")


async def ensure_indexes(client: AsyncIOMotorClient, settings: Settings) -> None:
    """Create the indexes the application relies on.

    Logins look users up by ``username`` alone, so it must be unique; a
    duplicate registration then fails with ``DuplicateKeyError``.
    """
    users = get_collection(client, settings, settings.users_collection)
    await users.create_index("username", unique=True)
