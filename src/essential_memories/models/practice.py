"""Practice models for essential_memories.

These models represent evaluated answers from daily challenges and
flashcard practice sessions.
"""

from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel, Field

__all__ = [
    "PracticeRecordDTO",
    "PracticeSummaryDTO",
    "SessionType",
]


class SessionType(StrEnum):
    """Kind of session a practice record was produced by."""

    DAILY_CHALLENGE = "Streak Challenge"
    FLASHCARD_PRACTICE = "Flashcard Practice"


class PracticeRecordDTO(BaseModel, frozen=True):
    """Append-only record of one answered memory.

    Records are never modified. They are removed only when the
    memory they reference is deleted.

    Attributes:
        id: Deterministic record ID
        owner_id: Answering user ID
        memory_id: Answered memory ID
        outcome: True if the answer was correct
        session_type: Session the answer was given in
        occurred_at: Time the answer was recorded
        schema_version: Schema version for forward compatibility
    """

    id: str = Field(min_length=1)
    owner_id: str = Field(min_length=1)
    memory_id: str = Field(min_length=1)
    outcome: bool
    session_type: SessionType
    occurred_at: datetime
    schema_version: int = Field(default=1)

    @property
    def occurred_on(self) -> date:
        """Calendar day the answer was recorded on."""
        return self.occurred_at.date()


class PracticeSummaryDTO(BaseModel, frozen=True):
    """Score for a finished flashcard session."""

    correct: int = Field(ge=0)
    total: int = Field(ge=0)
    percentage: int = Field(ge=0, le=100)
