"""Shared test fixtures for essential_memories.

This module provides pytest fixtures used across all tests.
"""

import random
from collections.abc import Callable
from datetime import UTC, date, datetime
from unittest.mock import AsyncMock

import pytest

from essential_memories.infra.clock import FixedClock
from essential_memories.models.memory import MemoryCategory, MemoryDTO
from essential_memories.models.practice import PracticeRecordDTO, SessionType
from essential_memories.models.streak import StreakStateDTO
from essential_memories.models.user import UserContext

OWNER_ID = "user-1"
CREATED_AT = datetime(2024, 1, 1, 9, 0, tzinfo=UTC)


def make_memory(
    memory_id: str,
    month: int,
    day: int,
    name: str | None = None,
    category: MemoryCategory = MemoryCategory.BIRTHDAY,
    owner_id: str = OWNER_ID,
) -> MemoryDTO:
    """Build a MemoryDTO with sensible defaults."""
    return MemoryDTO(
        id=memory_id,
        owner_id=owner_id,
        display_name=name or f"Memory {memory_id}",
        category=category,
        month=month,
        day=day,
        created_at=CREATED_AT,
    )


def make_record(
    memory_id: str,
    outcome: bool = True,
    session_type: SessionType = SessionType.DAILY_CHALLENGE,
    occurred_at: datetime | None = None,
    owner_id: str = OWNER_ID,
) -> PracticeRecordDTO:
    """Build a PracticeRecordDTO with sensible defaults."""
    occurred_at = occurred_at or datetime(2024, 6, 15, 12, 0, tzinfo=UTC)
    return PracticeRecordDTO(
        id=f"rec-{memory_id}-{session_type.name}-{occurred_at.isoformat()}",
        owner_id=owner_id,
        memory_id=memory_id,
        outcome=outcome,
        session_type=session_type,
        occurred_at=occurred_at,
    )


# Factory fixtures
@pytest.fixture
def memory_factory() -> Callable[..., MemoryDTO]:
    return make_memory


@pytest.fixture
def record_factory() -> Callable[..., PracticeRecordDTO]:
    return make_record


# Mock fixtures
@pytest.fixture
def mock_storage() -> AsyncMock:
    """Create mock storage interface."""
    storage = AsyncMock()
    storage.list_memories.return_value = []
    storage.count_memories.return_value = 0
    storage.get_memory.return_value = None
    storage.save_memory.side_effect = lambda memory: memory.id
    storage.delete_memory.return_value = True
    storage.append_practice_record.side_effect = lambda record: record.id
    storage.get_practice_records.return_value = []
    storage.get_streak_state.return_value = None
    return storage


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock frozen at noon UTC on 2024-06-15."""
    return FixedClock(datetime(2024, 6, 15, 12, 0, tzinfo=UTC))


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


# Sample data fixtures
@pytest.fixture
def user() -> UserContext:
    return UserContext(owner_id=OWNER_ID)


@pytest.fixture
def premium_user() -> UserContext:
    return UserContext(owner_id=OWNER_ID, is_premium=True)


@pytest.fixture
def sample_memory() -> MemoryDTO:
    """Create sample MemoryDTO."""
    return make_memory("mem-mom", 5, 14, name="Mom's Birthday")


@pytest.fixture
def sample_memories() -> list[MemoryDTO]:
    """Create a small set of memories spread over the year."""
    return [
        make_memory("mem-1", 1, 1, name="New Year", category=MemoryCategory.HOLIDAY),
        make_memory("mem-2", 5, 14, name="Mom's Birthday"),
        make_memory("mem-3", 6, 20, name="Wedding", category=MemoryCategory.ANNIVERSARY),
        make_memory("mem-4", 6, 15, name="Dad's Birthday"),
        make_memory("mem-5", 12, 31, name="New Year's Eve", category=MemoryCategory.HOLIDAY),
    ]


@pytest.fixture
def sample_streak() -> StreakStateDTO:
    """Create sample StreakStateDTO."""
    return StreakStateDTO(
        owner_id=OWNER_ID,
        current_streak=4,
        all_time_high=5,
        last_challenge_date=date(2024, 6, 14),
    )
