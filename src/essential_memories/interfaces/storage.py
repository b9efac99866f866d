"""Storage interface for essential_memories.

This module defines the Protocol for persistent storage operations.
"""

from datetime import date
from typing import ClassVar, Protocol, runtime_checkable

from essential_memories.models.memory import MemoryDTO
from essential_memories.models.practice import PracticeRecordDTO, SessionType
from essential_memories.models.streak import StreakStateDTO

__all__ = [
    "StorageInterface",
]


@runtime_checkable
class StorageInterface(Protocol):
    """Contract for persistent storage operations.

    Implementations should provide owner-scoped CRUD operations for
    memories, append-only practice records, and per-user streak state.
    Deleting a memory must also delete its practice records.
    """

    config_class: ClassVar[type | None] = None

    # Memory operations
    async def list_memories(self, owner_id: str) -> list[MemoryDTO]:
        """List all memories of a user.

        Args:
            owner_id: Owning user ID

        Returns:
            Memories in creation order
        """
        ...

    async def count_memories(self, owner_id: str) -> int:
        """Count the memories of a user.

        Args:
            owner_id: Owning user ID

        Returns:
            Number of memories
        """
        ...

    async def get_memory(self, owner_id: str, memory_id: str) -> MemoryDTO | None:
        """Get a memory by ID.

        Args:
            owner_id: Owning user ID
            memory_id: Memory ID to retrieve

        Returns:
            MemoryDTO if found and owned by the user, None otherwise
        """
        ...

    async def save_memory(self, memory: MemoryDTO) -> str:
        """Insert a memory.

        Args:
            memory: Memory to save

        Returns:
            Memory ID
        """
        ...

    async def delete_memory(self, owner_id: str, memory_id: str) -> bool:
        """Delete a memory and cascade to its practice records.

        Args:
            owner_id: Owning user ID
            memory_id: Memory ID to delete

        Returns:
            True if a memory was deleted, False if nothing matched
        """
        ...

    # Practice record operations
    async def append_practice_record(self, record: PracticeRecordDTO) -> str:
        """Append a practice record (never update).

        Args:
            record: Record to append

        Returns:
            Record ID
        """
        ...

    async def get_practice_records(
        self,
        owner_id: str,
        on_date: date,
        session_type: SessionType | None = None,
    ) -> list[PracticeRecordDTO]:
        """Get the practice records a user produced on one day.

        Args:
            owner_id: Answering user ID
            on_date: Calendar day to query
            session_type: Restrict to one session type, or None for all

        Returns:
            Records ordered by occurrence time
        """
        ...

    # Streak operations
    async def get_streak_state(self, owner_id: str) -> StreakStateDTO | None:
        """Get the streak state of a user.

        Args:
            owner_id: User ID

        Returns:
            StreakStateDTO if the user has taken a challenge, None otherwise
        """
        ...

    async def save_streak_state(self, state: StreakStateDTO) -> None:
        """Insert or replace the streak state of a user.

        Args:
            state: Streak state to save
        """
        ...
