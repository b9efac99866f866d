"""essential_memories - Scheduling core for recurring personal dates.

This package provides tools for:
- Recording birthdays, anniversaries and other yearly dates
- Computing how many days remain until each one comes around
- Picking daily streak challenge questions and flashcard decks
- Tracking a daily challenge streak and its all-time high

Example usage:
    from essential_memories import (
        EssentialMemories,
        MongoStorageRepository,
        UserContext,
    )

    # Simple usage - config loaded from .env automatically
    async with EssentialMemories(storage_class=MongoStorageRepository) as em:
        user = UserContext(owner_id="user-1")
        await em.add_memory(user, "Mom's Birthday", "birthday", 5, 14)
        challenge = await em.start_daily_challenge(user)
"""

__version__ = "0.1.0"

from essential_memories.config import EssentialMemoriesConfig, LeapDayPolicy
from essential_memories.exceptions import (
    AlreadyAnsweredError,
    EssentialMemoriesError,
    FreeTierLimitError,
    InvalidAnswerError,
    MemoryNotFoundError,
    MemoryValidationError,
)
from essential_memories.infra.clock import FixedClock, SystemClock
from essential_memories.infra.mongo.repositories import MongoStorageRepository
from essential_memories.interfaces.clock import ClockInterface
from essential_memories.interfaces.storage import StorageInterface
from essential_memories.models import (
    ChallengeStatus,
    MemoryCategory,
    MemoryDTO,
    PracticeRecordDTO,
    SessionType,
    StreakStateDTO,
    UpcomingMemoryDTO,
    UserContext,
)
from essential_memories.orchestrator import EssentialMemories
from essential_memories.services import (
    MemoryScheduler,
    OccurrenceCalculator,
    PoolSelector,
    StreakTracker,
)

__all__ = [  # noqa: RUF022
    # Orchestrator
    "EssentialMemories",
    "EssentialMemoriesConfig",
    "LeapDayPolicy",
    # Scheduling core
    "MemoryScheduler",
    "OccurrenceCalculator",
    "PoolSelector",
    "StreakTracker",
    # Models
    "ChallengeStatus",
    "MemoryCategory",
    "MemoryDTO",
    "PracticeRecordDTO",
    "SessionType",
    "StreakStateDTO",
    "UpcomingMemoryDTO",
    "UserContext",
    # Implementations
    "MongoStorageRepository",
    "FixedClock",
    "SystemClock",
    # Interfaces
    "ClockInterface",
    "StorageInterface",
    # Errors
    "AlreadyAnsweredError",
    "EssentialMemoriesError",
    "FreeTierLimitError",
    "InvalidAnswerError",
    "MemoryNotFoundError",
    "MemoryValidationError",
]
