"""MongoDB repositories for essential_memories.

This module provides the repository implementation for MongoDB storage.
"""

from datetime import date
from typing import Any, Self

from essential_memories.config import MongoSettings
from essential_memories.infra.mongo.client import MongoClient
from essential_memories.interfaces.storage import StorageInterface
from essential_memories.logging import get_logger
from essential_memories.models.memory import MemoryCategory, MemoryDTO
from essential_memories.models.practice import PracticeRecordDTO, SessionType
from essential_memories.models.streak import StreakStateDTO

__all__ = [
    "MongoStorageRepository",
]

logger = get_logger(__name__)


class MongoStorageRepository(StorageInterface):
    """MongoDB implementation of StorageInterface.

    Provides owner-scoped CRUD for memories, append-only practice
    records, and per-user streak states. Deleting a memory also
    deletes its practice records.
    """

    config_class = MongoSettings

    def __init__(self, client: MongoClient) -> None:
        """Initialize repository with MongoDB client.

        Args:
            client: Connected MongoClient instance
        """
        self._client = client
        self._owns_client = False

    @classmethod
    async def from_config(cls, config: MongoSettings) -> Self:
        """Factory method for EssentialMemories instantiation.

        Creates a MongoClient, connects, creates indexes, and returns repository.

        Args:
            config: MongoDB settings

        Returns:
            Connected MongoStorageRepository instance
        """
        client = MongoClient(config)
        await client.connect()
        await client.create_indexes()

        instance = cls(client)
        instance._owns_client = True
        return instance

    @classmethod
    async def from_dict(cls, config: dict[str, Any]) -> Self:
        """Factory method for custom config dict.

        Args:
            config: Dictionary with MongoDB settings

        Returns:
            Connected MongoStorageRepository instance
        """
        settings = MongoSettings(**config)
        return await cls.from_config(settings)

    async def close(self) -> None:
        """Close owned resources."""
        if self._owns_client and self._client:
            await self._client.disconnect()

    # Memory operations
    async def list_memories(self, owner_id: str) -> list[MemoryDTO]:
        """List a user's memories in creation order."""
        cursor = self._client.memories.find({"owner_id": owner_id}).sort("created_at", 1)
        return [self._doc_to_memory(doc) async for doc in cursor]

    async def count_memories(self, owner_id: str) -> int:
        """Count a user's memories."""
        return await self._client.memories.count_documents({"owner_id": owner_id})

    async def get_memory(self, owner_id: str, memory_id: str) -> MemoryDTO | None:
        """Get a memory by ID, scoped to its owner."""
        doc = await self._client.memories.find_one({"id": memory_id, "owner_id": owner_id})
        return self._doc_to_memory(doc) if doc else None

    async def save_memory(self, memory: MemoryDTO) -> str:
        """Insert a memory."""
        await self._client.memories.insert_one(self._memory_to_doc(memory))
        return memory.id

    async def delete_memory(self, owner_id: str, memory_id: str) -> bool:
        """Delete a memory and its practice records."""
        result = await self._client.memories.delete_one({"id": memory_id, "owner_id": owner_id})
        if result.deleted_count == 0:
            return False

        cascade = await self._client.practice_records.delete_many(
            {"memory_id": memory_id, "owner_id": owner_id}
        )
        logger.debug(
            "memory_delete_cascaded",
            memory_id=memory_id,
            practice_records_deleted=cascade.deleted_count,
        )
        return True

    # Practice record operations
    async def append_practice_record(self, record: PracticeRecordDTO) -> str:
        """Append practice record (never update)."""
        await self._client.practice_records.insert_one(self._record_to_doc(record))
        return record.id

    async def get_practice_records(
        self,
        owner_id: str,
        on_date: date,
        session_type: SessionType | None = None,
    ) -> list[PracticeRecordDTO]:
        """Get a user's practice records for one day."""
        query: dict[str, Any] = {"owner_id": owner_id, "occurred_on": on_date.isoformat()}
        if session_type is not None:
            query["session_type"] = session_type.value
        cursor = self._client.practice_records.find(query).sort("occurred_at", 1)
        return [self._doc_to_record(doc) async for doc in cursor]

    # Streak operations
    async def get_streak_state(self, owner_id: str) -> StreakStateDTO | None:
        """Get streak state for a user."""
        doc = await self._client.streak_states.find_one({"owner_id": owner_id})
        return self._doc_to_streak(doc) if doc else None

    async def save_streak_state(self, state: StreakStateDTO) -> None:
        """Save or update streak state."""
        await self._client.streak_states.replace_one(
            {"owner_id": state.owner_id},
            self._streak_to_doc(state),
            upsert=True,
        )

    # Document conversion helpers
    @staticmethod
    def _memory_to_doc(memory: MemoryDTO) -> dict[str, Any]:
        return {
            "id": memory.id,
            "owner_id": memory.owner_id,
            "display_name": memory.display_name,
            "category": memory.category.value,
            "month": memory.month,
            "day": memory.day,
            "created_at": memory.created_at,
            "schema_version": memory.schema_version,
        }

    @staticmethod
    def _doc_to_memory(doc: dict[str, Any]) -> MemoryDTO:
        return MemoryDTO(
            id=doc["id"],
            owner_id=doc["owner_id"],
            display_name=doc["display_name"],
            category=MemoryCategory.parse(doc.get("category")),
            month=doc["month"],
            day=doc["day"],
            created_at=doc["created_at"],
            schema_version=doc.get("schema_version", 1),
        )

    @staticmethod
    def _record_to_doc(record: PracticeRecordDTO) -> dict[str, Any]:
        return {
            "id": record.id,
            "owner_id": record.owner_id,
            "memory_id": record.memory_id,
            "outcome": record.outcome,
            "session_type": record.session_type.value,
            "occurred_at": record.occurred_at,
            # Local calendar day, kept separately since BSON drops the offset
            "occurred_on": record.occurred_on.isoformat(),
            "schema_version": record.schema_version,
        }

    @staticmethod
    def _doc_to_record(doc: dict[str, Any]) -> PracticeRecordDTO:
        return PracticeRecordDTO(
            id=doc["id"],
            owner_id=doc["owner_id"],
            memory_id=doc["memory_id"],
            outcome=doc["outcome"],
            session_type=SessionType(doc["session_type"]),
            occurred_at=doc["occurred_at"],
            schema_version=doc.get("schema_version", 1),
        )

    @staticmethod
    def _streak_to_doc(state: StreakStateDTO) -> dict[str, Any]:
        last = state.last_challenge_date
        return {
            "owner_id": state.owner_id,
            "current_streak": state.current_streak,
            "all_time_high": state.all_time_high,
            "last_challenge_date": last.isoformat() if last else None,
            "schema_version": state.schema_version,
        }

    @staticmethod
    def _doc_to_streak(doc: dict[str, Any]) -> StreakStateDTO:
        last = doc.get("last_challenge_date")
        return StreakStateDTO(
            owner_id=doc["owner_id"],
            current_streak=doc.get("current_streak", 0),
            all_time_high=doc.get("all_time_high", 0),
            last_challenge_date=date.fromisoformat(last) if last else None,
            schema_version=doc.get("schema_version", 1),
        )
