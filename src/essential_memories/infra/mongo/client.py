"""MongoDB client for essential_memories.

This module provides an async MongoDB client wrapper using Motor.
"""

from importlib import import_module
from typing import TYPE_CHECKING, Any

from essential_memories.config import MongoSettings
from essential_memories.logging import get_logger

if TYPE_CHECKING:
    from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

__all__ = [
    "MongoClient",
]

logger = get_logger(__name__)


def _motor_client_class() -> Any:
    # Imported on first connect so the package loads without motor
    return import_module("motor.motor_asyncio").AsyncIOMotorClient


class MongoClient:
    """Async MongoDB client wrapper.

    Provides a connection manager and collection accessors
    for the essential_memories MongoDB database.

    Example:
        client = MongoClient(settings)
        await client.connect()

        await client.memories.insert_one(memory_doc)

        await client.disconnect()
    """

    def __init__(self, settings: MongoSettings) -> None:
        """Initialize client with settings.

        Args:
            settings: MongoDB connection settings
        """
        self._settings = settings
        self._client = None
        self._db = None

    async def connect(self) -> None:
        """Initialize connection to MongoDB."""
        if self._client is not None:
            return
        AsyncIOMotorClient = _motor_client_class()  # noqa: N806

        uri = self._settings.uri.get_secret_value()
        # tz_aware so stored datetimes come back with their UTC offset
        self._client = AsyncIOMotorClient(uri, tz_aware=True)
        self._db = self._client[self._settings.database]

        await self._client.admin.command("ping")
        logger.info(
            "connected_to_mongodb",
            database=self._settings.database,
        )

    async def disconnect(self) -> None:
        """Close connection to MongoDB."""
        if self._client:
            self._client.close()
            self._client = None
            self._db = None
            logger.info("disconnected_from_mongodb")

    @property
    def db(self) -> "AsyncIOMotorDatabase[dict[str, Any]]":
        """Get database instance.

        Raises:
            RuntimeError: If not connected
        """
        if self._db is None:
            raise RuntimeError("MongoClient not connected. Call connect() first.")
        return self._db

    def _collection(self, name: str) -> "AsyncIOMotorCollection[dict[str, Any]]":
        """Get collection with optional prefix."""
        full_name = f"{self._settings.collection_prefix}{name}"
        return self.db[full_name]

    @property
    def memories(self) -> "AsyncIOMotorCollection[dict[str, Any]]":
        """Get memories collection."""
        return self._collection("memories")

    @property
    def practice_records(self) -> "AsyncIOMotorCollection[dict[str, Any]]":
        """Get practice_records collection."""
        return self._collection("practice_records")

    @property
    def streak_states(self) -> "AsyncIOMotorCollection[dict[str, Any]]":
        """Get streak_states collection."""
        return self._collection("streak_states")

    async def create_indexes(self) -> None:
        """Create indexes for all collections."""
        await self.memories.create_index("id", unique=True)
        await self.memories.create_index([("owner_id", 1), ("created_at", 1)])

        await self.practice_records.create_index("id", unique=True)
        await self.practice_records.create_index("memory_id")
        await self.practice_records.create_index(
            [("owner_id", 1), ("occurred_on", 1), ("session_type", 1)]
        )

        await self.streak_states.create_index("owner_id", unique=True)

        logger.info("created_mongodb_indexes")

    async def __aenter__(self) -> "MongoClient":
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.disconnect()
