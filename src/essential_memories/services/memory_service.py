"""Memory management service for essential_memories.

This module handles creating, listing and deleting memories, including
the free tier cap for users without a subscription.
"""

from essential_memories.exceptions import (
    FreeTierLimitError,
    MemoryNotFoundError,
    MemoryValidationError,
)
from essential_memories.interfaces.clock import ClockInterface
from essential_memories.interfaces.storage import StorageInterface
from essential_memories.logging import get_logger
from essential_memories.models.memory import MemoryCategory, MemoryDTO
from essential_memories.models.user import QuotaDTO, UserContext
from essential_memories.services.scheduler import MemoryScheduler
from essential_memories.utils.hashing import generate_memory_id

__all__ = [
    "DEFAULT_FREE_MEMORY_LIMIT",
    "MemoryService",
]

logger = get_logger(__name__)

DEFAULT_FREE_MEMORY_LIMIT = 3


class MemoryService:
    """Owner-scoped memory CRUD with free tier enforcement.

    Example:
        service = MemoryService(storage, clock)
        memory = await service.create_memory(user, "Mom's Birthday", "birthday", 5, 14)
    """

    def __init__(
        self,
        storage: StorageInterface,
        clock: ClockInterface,
        free_memory_limit: int = DEFAULT_FREE_MEMORY_LIMIT,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            storage: Storage interface for memories
            clock: Clock used for creation timestamps
            free_memory_limit: Memories allowed without a subscription
        """
        self._storage = storage
        self._clock = clock
        self._free_memory_limit = free_memory_limit

    async def create_memory(
        self,
        user: UserContext,
        display_name: str,
        category: MemoryCategory | str | None,
        month: int,
        day: int,
    ) -> MemoryDTO:
        """Create and persist a new memory.

        Args:
            user: Owner of the memory
            display_name: Label for the memory
            category: Category label or slug
            month: Month of the memory (1-12)
            day: Day of the month

        Returns:
            The stored MemoryDTO

        Raises:
            MemoryValidationError: If the name or the category is missing
            pydantic.ValidationError: If month/day is not a valid date
            FreeTierLimitError: If a non-premium user is at the cap
        """
        if not display_name or not display_name.strip():
            raise MemoryValidationError("Please enter a memory name")
        if not category:
            raise MemoryValidationError("Please select a memory type")

        created_at = self._clock.now()
        name = display_name.strip()
        memory = MemoryDTO(
            id=generate_memory_id(user.owner_id, name, month, day, created_at),
            owner_id=user.owner_id,
            display_name=name,
            category=MemoryCategory.parse(category),
            month=month,
            day=day,
            created_at=created_at,
        )

        if not user.is_premium:
            count = await self._storage.count_memories(user.owner_id)
            if count >= self._free_memory_limit:
                logger.info(
                    "free_tier_limit_reached",
                    owner_id=user.owner_id,
                    memory_count=count,
                    limit=self._free_memory_limit,
                )
                raise FreeTierLimitError(self._free_memory_limit)

        await self._storage.save_memory(memory)
        logger.info(
            "memory_created",
            owner_id=user.owner_id,
            memory_id=memory.id,
            category=memory.category.value,
        )
        return memory

    async def delete_memory(self, user: UserContext, memory_id: str) -> None:
        """Delete a memory and its practice history.

        Raises:
            MemoryNotFoundError: If the user owns no memory with this ID
        """
        deleted = await self._storage.delete_memory(user.owner_id, memory_id)
        if not deleted:
            raise MemoryNotFoundError(memory_id)
        logger.info("memory_deleted", owner_id=user.owner_id, memory_id=memory_id)

    async def list_memories(self, user: UserContext) -> list[MemoryDTO]:
        """List the user's memories in calendar order."""
        memories = await self._storage.list_memories(user.owner_id)
        return MemoryScheduler.sort_by_calendar(memories)

    async def get_quota(self, user: UserContext) -> QuotaDTO:
        """Report how many more memories the user may add."""
        count = await self._storage.count_memories(user.owner_id)
        if user.is_premium:
            return QuotaDTO(is_premium=True, memory_count=count)
        return QuotaDTO(
            is_premium=False,
            memory_count=count,
            limit=self._free_memory_limit,
            remaining=max(0, self._free_memory_limit - count),
        )
