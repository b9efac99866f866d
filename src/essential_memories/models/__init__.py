"""Public DTO models for essential_memories.

This module exports all public data transfer objects.
"""

from essential_memories.models.memory import MemoryCategory, MemoryDTO
from essential_memories.models.practice import (
    PracticeRecordDTO,
    PracticeSummaryDTO,
    SessionType,
)
from essential_memories.models.schedule import (
    ChallengeResultDTO,
    ChallengeStatus,
    DailyChallengeDTO,
    UpcomingMemoryDTO,
)
from essential_memories.models.streak import StreakStateDTO
from essential_memories.models.user import QuotaDTO, UserContext

__all__ = [
    "ChallengeResultDTO",
    "ChallengeStatus",
    "DailyChallengeDTO",
    "MemoryCategory",
    "MemoryDTO",
    "PracticeRecordDTO",
    "PracticeSummaryDTO",
    "QuotaDTO",
    "SessionType",
    "StreakStateDTO",
    "UpcomingMemoryDTO",
    "UserContext",
]
