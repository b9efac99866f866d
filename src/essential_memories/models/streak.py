"""Streak models for essential_memories."""

from datetime import date
from typing import Self

from pydantic import BaseModel, Field, model_validator

__all__ = [
    "StreakStateDTO",
]


class StreakStateDTO(BaseModel, frozen=True):
    """Daily challenge streak for one user.

    Created lazily on the first challenge attempt. The streak only breaks
    on a wrong answer; skipping days has no effect.

    Attributes:
        owner_id: User the streak belongs to
        current_streak: Consecutive correct challenge answers
        all_time_high: Best streak ever reached
        last_challenge_date: Day of the most recent challenge answer
        schema_version: Schema version for forward compatibility
    """

    owner_id: str = Field(min_length=1)
    current_streak: int = Field(default=0, ge=0)
    all_time_high: int = Field(default=0, ge=0)
    last_challenge_date: date | None = None
    schema_version: int = Field(default=1)

    @model_validator(mode="after")
    def _check_high_covers_current(self) -> Self:
        if self.all_time_high < self.current_streak:
            raise ValueError("all_time_high must be >= current_streak")
        return self

    @classmethod
    def initial(cls, owner_id: str) -> "StreakStateDTO":
        """Zero state for a user that has never taken a challenge."""
        return cls(owner_id=owner_id)
