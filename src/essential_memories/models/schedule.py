"""Scheduling result models for essential_memories.

These models are produced by the scheduler and session services and
describe what the user should see or be asked next.
"""

from datetime import date
from enum import StrEnum

from pydantic import BaseModel, Field

from essential_memories.models.memory import MemoryDTO
from essential_memories.models.practice import PracticeRecordDTO
from essential_memories.models.streak import StreakStateDTO

__all__ = [
    "ChallengeResultDTO",
    "ChallengeStatus",
    "DailyChallengeDTO",
    "UpcomingMemoryDTO",
]


class UpcomingMemoryDTO(BaseModel, frozen=True):
    """Memory paired with its next occurrence.

    Attributes:
        memory: The recurring memory
        days_until: Calendar days until the next occurrence (0 = today)
        next_date: Date of the next occurrence
    """

    memory: MemoryDTO
    days_until: int = Field(ge=0, le=366)
    next_date: date


class ChallengeStatus(StrEnum):
    """Outcome of asking for today's daily challenge."""

    READY = "ready"
    NO_MEMORIES = "no_memories"
    ALL_PRACTICED = "all_practiced"


class DailyChallengeDTO(BaseModel, frozen=True):
    """Selected daily challenge question.

    Attributes:
        status: Whether a question is available and, if not, why
        memory: Memory to ask about when status is READY
        total_memories: Number of memories the user owns
        remaining_today: Memories not yet answered today, including this one
    """

    status: ChallengeStatus
    memory: MemoryDTO | None = None
    total_memories: int = Field(default=0, ge=0)
    remaining_today: int = Field(default=0, ge=0)


class ChallengeResultDTO(BaseModel, frozen=True):
    """Graded daily challenge answer and the resulting streak."""

    memory: MemoryDTO
    answer: str = Field(description="Normalised MM/DD answer")
    correct_answer: str = Field(description="Expected MM/DD answer")
    is_correct: bool
    record: PracticeRecordDTO
    streak: StreakStateDTO
