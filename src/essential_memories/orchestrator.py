"""EssentialMemories orchestrator for high-level application operations.

This module provides the main entry point for the essential_memories
package, wiring storage, clock and randomness into the services.
"""

import random
from datetime import date
from typing import Any

from essential_memories.config import EssentialMemoriesConfig
from essential_memories.infra.clock import SystemClock
from essential_memories.interfaces.clock import ClockInterface
from essential_memories.interfaces.storage import StorageInterface
from essential_memories.logging import get_logger
from essential_memories.models.memory import MemoryCategory, MemoryDTO
from essential_memories.models.practice import PracticeRecordDTO
from essential_memories.models.schedule import (
    ChallengeResultDTO,
    DailyChallengeDTO,
    UpcomingMemoryDTO,
)
from essential_memories.models.streak import StreakStateDTO
from essential_memories.models.user import QuotaDTO, UserContext
from essential_memories.services.memory_service import MemoryService
from essential_memories.services.occurrence import OccurrenceCalculator
from essential_memories.services.pool_selector import PoolSelector
from essential_memories.services.scheduler import MemoryScheduler
from essential_memories.services.session_service import SessionService

__all__ = ["EssentialMemories"]

logger = get_logger(__name__)


class EssentialMemories:
    """Main orchestrator for the Essential Memories application core.

    Accepts a storage implementation class. Config is loaded from .env
    automatically. For custom storage, set config_class = None and pass
    storage_custom_config.

    Example:
        async with EssentialMemories(storage_class=MongoStorageRepository) as em:
            user = UserContext(owner_id="user-1")
            await em.add_memory(user, "Mom's Birthday", "birthday", 5, 14)
            upcoming = await em.get_upcoming(user)
    """

    def __init__(
        self,
        storage_class: type[StorageInterface],
        *,
        storage_custom_config: dict[str, Any] | None = None,
        clock: ClockInterface | None = None,
        rng: random.Random | None = None,
        config: EssentialMemoriesConfig | None = None,
    ) -> None:
        """Initialize EssentialMemories with an implementation class.

        Args:
            storage_class: Storage implementation class
            storage_custom_config: Custom config dict if storage_class.config_class is None
            clock: Clock deciding "today" (default: SystemClock in config.timezone)
            rng: Random source for question and deck selection
            config: Settings (default: loaded from environment / .env)
        """
        self._config = config or EssentialMemoriesConfig()

        self._storage_class = storage_class
        self._storage_custom_config = storage_custom_config

        self._clock = clock or SystemClock(self._config.timezone)
        self._scheduler = MemoryScheduler(
            calculator=OccurrenceCalculator(self._config.leap_day_policy),
            selector=PoolSelector(rng),
            practice_deck_size=self._config.practice_deck_size,
        )

        # Created on connect
        self._storage: StorageInterface | None = None
        self._memory_service: MemoryService | None = None
        self._session_service: SessionService | None = None

        self._connected = False

    async def _instantiate_class(
        self,
        cls: type,
        custom_config: dict[str, Any] | None,
    ) -> Any:
        """Instantiate an implementation class.

        If cls.config_class is set, instantiate config (loads from .env).
        If cls.config_class is None, use custom_config dict.
        """
        config_class = getattr(cls, "config_class", None)

        if config_class is None:
            if custom_config is None:
                raise ValueError(
                    f"{cls.__name__} has config_class=None but no custom_config provided"
                )
            return await cls.from_dict(custom_config)

        config = config_class()
        return await cls.from_config(config)

    async def _connect(self) -> None:
        """Initialize storage and wire services."""
        if self._connected:
            return

        self._storage = await self._instantiate_class(
            self._storage_class, self._storage_custom_config
        )
        self._memory_service = MemoryService(
            self._storage,
            self._clock,
            free_memory_limit=self._config.free_memory_limit,
        )
        self._session_service = SessionService(self._storage, self._scheduler, self._clock)

        self._connected = True
        logger.info("essential_memories_connected")

    async def _disconnect(self) -> None:
        """Close storage."""
        if self._storage and hasattr(self._storage, "close"):
            await self._storage.close()

        self._connected = False
        logger.info("essential_memories_disconnected")

    async def __aenter__(self) -> "EssentialMemories":
        """Async context manager entry - connects automatically."""
        await self._connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Async context manager exit - disconnects automatically."""
        await self._disconnect()

    def _ensure_connected(self) -> None:
        if not self._connected:
            raise RuntimeError(
                "EssentialMemories not connected. Use 'async with EssentialMemories(...) as em:'"
            )

    # === MEMORIES ===

    async def add_memory(
        self,
        user: UserContext,
        display_name: str,
        category: MemoryCategory | str | None,
        month: int,
        day: int,
    ) -> MemoryDTO:
        """Create a memory, enforcing the free tier cap."""
        self._ensure_connected()
        assert self._memory_service is not None
        return await self._memory_service.create_memory(user, display_name, category, month, day)

    async def delete_memory(self, user: UserContext, memory_id: str) -> None:
        """Delete a memory together with its practice history."""
        self._ensure_connected()
        assert self._memory_service is not None
        await self._memory_service.delete_memory(user, memory_id)

    async def list_memories(self, user: UserContext) -> list[MemoryDTO]:
        """All memories of the user in calendar order."""
        self._ensure_connected()
        assert self._memory_service is not None
        return await self._memory_service.list_memories(user)

    async def memories_for_month(self, user: UserContext, month: int) -> list[MemoryDTO]:
        """Memories in one month, for the calendar view."""
        self._ensure_connected()
        assert self._storage is not None
        memories = await self._storage.list_memories(user.owner_id)
        return self._scheduler.memories_for_month(memories, month)

    async def get_quota(self, user: UserContext) -> QuotaDTO:
        """Remaining free tier allowance."""
        self._ensure_connected()
        assert self._memory_service is not None
        return await self._memory_service.get_quota(user)

    # === SCHEDULING ===

    async def get_upcoming(
        self,
        user: UserContext,
        limit: int | None = None,
        reference_date: date | None = None,
    ) -> list[UpcomingMemoryDTO]:
        """Memories coming up next, soonest first.

        Args:
            user: Owner of the memories
            limit: Maximum entries (default: config.upcoming_limit)
            reference_date: Day to count from (default: today)
        """
        self._ensure_connected()
        assert self._storage is not None
        memories = await self._storage.list_memories(user.owner_id)
        return self._scheduler.get_upcoming(
            memories,
            reference_date or self._clock.today(),
            self._config.upcoming_limit if limit is None else limit,
        )

    # === SESSIONS ===

    async def get_streak(self, user: UserContext) -> StreakStateDTO:
        self._ensure_connected()
        assert self._session_service is not None
        return await self._session_service.get_streak(user)

    async def start_daily_challenge(self, user: UserContext) -> DailyChallengeDTO:
        self._ensure_connected()
        assert self._session_service is not None
        return await self._session_service.start_daily_challenge(user)

    async def submit_daily_challenge(
        self,
        user: UserContext,
        memory_id: str,
        answer: str,
    ) -> ChallengeResultDTO:
        self._ensure_connected()
        assert self._session_service is not None
        return await self._session_service.submit_daily_challenge(user, memory_id, answer)

    async def start_practice_session(self, user: UserContext) -> list[MemoryDTO]:
        self._ensure_connected()
        assert self._session_service is not None
        return await self._session_service.start_practice_session(user)

    async def record_flashcard_answer(
        self,
        user: UserContext,
        memory_id: str,
        correct: bool,
    ) -> PracticeRecordDTO:
        self._ensure_connected()
        assert self._session_service is not None
        return await self._session_service.record_flashcard_answer(user, memory_id, correct)
