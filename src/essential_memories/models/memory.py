"""Memory models for essential_memories.

A memory is a recurring date of personal significance, such as a
birthday or an anniversary, stored as a month and a day without a year.
"""

from datetime import datetime
from enum import StrEnum
from typing import Self

from pydantic import BaseModel, Field, field_validator, model_validator

from essential_memories.utils.dates import format_month_day, is_valid_month_day

__all__ = [
    "MemoryCategory",
    "MemoryDTO",
]


class MemoryCategory(StrEnum):
    """Kinds of memory a user can record.

    Values are the human readable labels shown to users.
    """

    BIRTHDAY = "Birthday"
    ANNIVERSARY = "Anniversary"
    SPECIAL_DATE = "Special Date"
    HOLIDAY = "Holiday"

    @classmethod
    def parse(cls, value: "str | MemoryCategory | None") -> "MemoryCategory":
        """Resolve a label or slug into a category.

        Accepts labels ("Special Date") and slugs ("special-date") in any
        case. Unknown or empty values fall back to SPECIAL_DATE.

        Args:
            value: Label, slug, or existing category

        Returns:
            Matching MemoryCategory
        """
        if isinstance(value, MemoryCategory):
            return value
        if not value:
            return cls.SPECIAL_DATE

        key = value.strip().lower().replace("-", " ").replace("_", " ")
        for category in cls:
            if category.value.lower() == key:
                return category
        return cls.SPECIAL_DATE


class MemoryDTO(BaseModel, frozen=True):
    """Recurring date owned by a single user.

    Attributes:
        id: Opaque memory ID assigned at creation
        owner_id: ID of the owning user
        display_name: Label shown to the user (e.g. "Mom's Birthday")
        category: Memory category
        month: Month of the year (1-12)
        day: Day of the month, valid for the month in a leap year
        created_at: Creation time, used for stable ordering
        schema_version: Schema version for forward compatibility
    """

    id: str = Field(min_length=1, description="Opaque memory ID")
    owner_id: str = Field(min_length=1, description="Owning user ID")
    display_name: str = Field(description="Non-empty display label")
    category: MemoryCategory = Field(default=MemoryCategory.SPECIAL_DATE)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    created_at: datetime
    schema_version: int = Field(default=1)

    @field_validator("display_name")
    @classmethod
    def _strip_display_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("display_name must not be empty")
        return value

    @field_validator("category", mode="before")
    @classmethod
    def _parse_category(cls, value: object) -> MemoryCategory:
        return MemoryCategory.parse(value)  # type: ignore[arg-type]

    @model_validator(mode="after")
    def _check_day_fits_month(self) -> Self:
        if not is_valid_month_day(self.month, self.day):
            raise ValueError(f"day {self.day} is not valid for month {self.month}")
        return self

    @property
    def month_day(self) -> str:
        """Month and day formatted as ``MM/DD``."""
        return format_month_day(self.month, self.day)
