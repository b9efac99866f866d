"""Unit tests for the scheduling core: occurrence math, selection, streaks."""

import random
from collections import Counter
from datetime import UTC, date, datetime, timedelta

import pytest

from essential_memories.config import LeapDayPolicy
from essential_memories.models.memory import MemoryDTO
from essential_memories.models.practice import SessionType
from essential_memories.models.streak import StreakStateDTO
from essential_memories.services.occurrence import OccurrenceCalculator, resolve_month_day
from essential_memories.services.pool_selector import PoolSelector
from essential_memories.services.scheduler import MemoryScheduler
from essential_memories.services.streak_tracker import StreakTracker
from essential_memories.utils.dates import days_in_month
from tests.conftest import make_memory, make_record


def _all_month_days() -> list[tuple[int, int]]:
    return [(m, d) for m in range(1, 13) for d in range(1, days_in_month(m) + 1)]


def _numbered_memories(count: int) -> list[MemoryDTO]:
    return [make_memory(f"mem-{i}", (i % 12) + 1, (i % 28) + 1) for i in range(count)]


class TestResolveMonthDay:
    """Tests for placing yearless dates in a concrete year."""

    def test_regular_date(self) -> None:
        assert resolve_month_day(2023, 7, 4) == date(2023, 7, 4)

    def test_leap_day_in_leap_year(self) -> None:
        assert resolve_month_day(2024, 2, 29) == date(2024, 2, 29)

    def test_leap_day_march_policy(self) -> None:
        assert resolve_month_day(2025, 2, 29, LeapDayPolicy.MARCH_1) == date(2025, 3, 1)

    def test_leap_day_february_policy(self) -> None:
        assert resolve_month_day(2025, 2, 29, LeapDayPolicy.FEBRUARY_28) == date(2025, 2, 28)


class TestOccurrenceCalculator:
    """Tests for OccurrenceCalculator."""

    def test_day_before_year_end(self) -> None:
        calculator = OccurrenceCalculator()
        memory = make_memory("m", 12, 31)
        assert calculator.days_until_next(memory, date(2024, 12, 30)) == 1

    def test_wraps_into_next_year(self) -> None:
        calculator = OccurrenceCalculator()
        memory = make_memory("m", 1, 1)
        assert calculator.days_until_next(memory, date(2024, 12, 31)) == 1
        assert calculator.next_occurrence(memory, date(2024, 12, 31)) == date(2025, 1, 1)

    def test_passed_date_moves_to_next_year(self) -> None:
        calculator = OccurrenceCalculator()
        memory = make_memory("m", 5, 14)
        assert calculator.next_occurrence(memory, date(2024, 5, 15)) == date(2025, 5, 14)
        assert calculator.days_until_next(memory, date(2024, 5, 15)) == 364

    def test_time_of_day_is_ignored(self) -> None:
        calculator = OccurrenceCalculator()
        memory = make_memory("m", 5, 14)
        late = datetime(2024, 5, 14, 23, 59, tzinfo=UTC)
        assert calculator.days_until_next(memory, late) == 0

    def test_same_day_is_zero_for_every_day_of_a_leap_year(self) -> None:
        calculator = OccurrenceCalculator()
        day = date(2024, 1, 1)
        while day.year == 2024:
            memory = make_memory("m", day.month, day.day)
            assert calculator.days_until_next(memory, day) == 0
            day += timedelta(days=1)

    def test_result_always_within_bounds(self) -> None:
        calculator = OccurrenceCalculator()
        memories = [make_memory(f"m-{m}-{d}", m, d) for m, d in _all_month_days()]
        reference = date(2023, 1, 1)
        while reference < date(2025, 1, 1):
            for memory in memories:
                days = calculator.days_until_next(memory, reference)
                assert 0 <= days <= 366
            reference += timedelta(days=5)

    def test_leap_day_memory_march_policy(self) -> None:
        calculator = OccurrenceCalculator(LeapDayPolicy.MARCH_1)
        memory = make_memory("m", 2, 29)

        assert calculator.next_occurrence(memory, date(2025, 2, 28)) == date(2025, 3, 1)
        assert calculator.days_until_next(memory, date(2025, 2, 28)) == 1
        assert calculator.days_until_next(memory, date(2025, 3, 1)) == 0
        assert calculator.days_until_next(memory, date(2024, 2, 28)) == 1
        assert calculator.next_occurrence(memory, date(2024, 3, 1)) == date(2025, 3, 1)
        assert calculator.days_until_next(memory, date(2024, 3, 1)) == 365

    def test_leap_day_memory_february_policy(self) -> None:
        calculator = OccurrenceCalculator(LeapDayPolicy.FEBRUARY_28)
        memory = make_memory("m", 2, 29)

        assert calculator.days_until_next(memory, date(2025, 2, 28)) == 0
        assert calculator.next_occurrence(memory, date(2025, 3, 1)) == date(2026, 2, 28)
        assert calculator.next_occurrence(memory, date(2027, 3, 1)) == date(2028, 2, 29)


class TestPoolSelector:
    """Tests for PoolSelector."""

    def test_pick_skips_consumed(self) -> None:
        memories = _numbered_memories(6)
        consumed = {"mem-0", "mem-2", "mem-4"}
        selector = PoolSelector(random.Random(3))

        for _ in range(200):
            picked = selector.pick_daily_challenge(memories, consumed)
            assert picked is not None
            assert picked.id not in consumed

    def test_pick_returns_none_when_all_consumed(self) -> None:
        memories = _numbered_memories(4)
        selector = PoolSelector(random.Random(3))
        assert selector.pick_daily_challenge(memories, {m.id for m in memories}) is None

    def test_pick_returns_none_for_empty_input(self) -> None:
        assert PoolSelector().pick_daily_challenge([], set()) is None

    def test_pick_is_approximately_uniform(self) -> None:
        memories = _numbered_memories(4)
        selector = PoolSelector(random.Random(42))
        trials = 8000

        counts = Counter(
            selector.pick_daily_challenge(memories, set()).id  # type: ignore[union-attr]
            for _ in range(trials)
        )

        assert set(counts) == {m.id for m in memories}
        expected = trials / len(memories)
        for count in counts.values():
            assert abs(count - expected) < expected * 0.1

    def test_pick_is_reproducible_with_seed(self) -> None:
        memories = _numbered_memories(8)
        first = PoolSelector(random.Random(7))
        second = PoolSelector(random.Random(7))
        picks_a = [first.pick_daily_challenge(memories, set()) for _ in range(20)]
        picks_b = [second.pick_daily_challenge(memories, set()) for _ in range(20)]
        assert picks_a == picks_b

    def test_small_collection_deck_is_full_permutation(self) -> None:
        memories = _numbered_memories(7)
        deck = PoolSelector(random.Random(1)).build_practice_deck(memories, 10)

        assert len(deck) == 7
        assert sorted(m.id for m in deck) == sorted(m.id for m in memories)

    def test_large_collection_deck_is_capped(self) -> None:
        memories = _numbered_memories(15)
        deck = PoolSelector(random.Random(1)).build_practice_deck(memories, 10)

        ids = [m.id for m in deck]
        assert len(ids) == 10
        assert len(set(ids)) == 10
        assert set(ids) <= {m.id for m in memories}

    def test_deck_order_varies(self) -> None:
        memories = _numbered_memories(10)
        selector = PoolSelector(random.Random(5))
        orders = {tuple(m.id for m in selector.build_practice_deck(memories)) for _ in range(20)}
        assert len(orders) > 1

    def test_empty_deck(self) -> None:
        assert PoolSelector().build_practice_deck([]) == []

    def test_invalid_deck_size(self) -> None:
        with pytest.raises(ValueError):
            PoolSelector().build_practice_deck(_numbered_memories(3), 0)


class TestStreakTracker:
    """Tests for StreakTracker."""

    def test_incorrect_resets_streak(self) -> None:
        today = date(2024, 6, 15)
        state = StreakStateDTO(owner_id="u1", current_streak=4, all_time_high=5)

        new_state = StreakTracker.record_outcome(state, False, today)

        assert new_state.current_streak == 0
        assert new_state.all_time_high == 5
        assert new_state.last_challenge_date == today

    def test_correct_raises_high(self) -> None:
        today = date(2024, 6, 15)
        state = StreakStateDTO(owner_id="u1", current_streak=5, all_time_high=5)

        new_state = StreakTracker.record_outcome(state, True, today)

        assert new_state.current_streak == 6
        assert new_state.all_time_high == 6
        assert new_state.last_challenge_date == today

    def test_correct_below_high_keeps_high(self) -> None:
        state = StreakStateDTO(owner_id="u1", current_streak=1, all_time_high=9)
        new_state = StreakTracker.record_outcome(state, True, date(2024, 6, 15))
        assert (new_state.current_streak, new_state.all_time_high) == (2, 9)

    def test_input_state_untouched(self) -> None:
        state = StreakStateDTO(owner_id="u1", current_streak=2, all_time_high=2)
        StreakTracker.record_outcome(state, True, date(2024, 6, 15))
        assert state.current_streak == 2
        assert state.last_challenge_date is None

    def test_no_decay_across_skipped_days(self) -> None:
        state = StreakStateDTO(
            owner_id="u1",
            current_streak=3,
            all_time_high=3,
            last_challenge_date=date(2024, 1, 1),
        )
        new_state = StreakTracker.record_outcome(state, True, date(2024, 6, 15))
        assert new_state.current_streak == 4

    def test_high_tracks_running_maximum(self) -> None:
        rng = random.Random(99)
        state = StreakStateDTO.initial("u1")
        observed_max = 0
        day = date(2024, 1, 1)

        for _ in range(300):
            state = StreakTracker.record_outcome(state, rng.random() < 0.7, day)
            observed_max = max(observed_max, state.current_streak)
            assert state.all_time_high == observed_max
            day += timedelta(days=1)


class TestMemoryScheduler:
    """Tests for the MemoryScheduler facade."""

    def test_upcoming_sorted_by_days(self, sample_memories: list[MemoryDTO]) -> None:
        scheduler = MemoryScheduler()
        upcoming = scheduler.get_upcoming(sample_memories, date(2024, 6, 15))

        assert [u.memory.id for u in upcoming] == ["mem-4", "mem-3", "mem-5", "mem-1", "mem-2"]
        assert [u.days_until for u in upcoming] == [0, 5, 199, 200, 333]
        assert upcoming[3].next_date == date(2025, 1, 1)

    def test_upcoming_limit(self, sample_memories: list[MemoryDTO]) -> None:
        scheduler = MemoryScheduler()
        assert len(scheduler.get_upcoming(sample_memories, date(2024, 6, 15), limit=2)) == 2
        assert scheduler.get_upcoming(sample_memories, date(2024, 6, 15), limit=0) == []

    def test_upcoming_default_limit_is_five(self) -> None:
        memories = _numbered_memories(12)
        assert len(MemoryScheduler().get_upcoming(memories, date(2024, 6, 15))) == 5

    def test_upcoming_ties_keep_input_order(self) -> None:
        memories = [
            make_memory("b", 7, 4),
            make_memory("a", 7, 4),
            make_memory("c", 7, 1),
        ]
        upcoming = MemoryScheduler().get_upcoming(memories, date(2024, 6, 15))
        assert [u.memory.id for u in upcoming] == ["c", "b", "a"]

    def test_daily_challenge_ignores_flashcard_records(
        self,
        sample_memories: list[MemoryDTO],
    ) -> None:
        scheduler = MemoryScheduler(selector=PoolSelector(random.Random(0)))
        records = [make_record(m.id, session_type=SessionType.FLASHCARD_PRACTICE)
                   for m in sample_memories]

        assert scheduler.get_daily_challenge(sample_memories, records) is not None

    def test_daily_challenge_excludes_answered(self, sample_memories: list[MemoryDTO]) -> None:
        scheduler = MemoryScheduler(selector=PoolSelector(random.Random(0)))
        records = [make_record(m.id) for m in sample_memories[:-1]]

        for _ in range(20):
            picked = scheduler.get_daily_challenge(sample_memories, records)
            assert picked == sample_memories[-1]

        all_records = records + [make_record(sample_memories[-1].id, outcome=False)]
        assert scheduler.get_daily_challenge(sample_memories, all_records) is None

    def test_practice_deck_size(self) -> None:
        scheduler = MemoryScheduler(selector=PoolSelector(random.Random(0)))
        assert len(scheduler.get_practice_deck(_numbered_memories(25))) == 10

        small = MemoryScheduler(practice_deck_size=3)
        assert len(small.get_practice_deck(_numbered_memories(25))) == 3

    def test_calendar_helpers(self, sample_memories: list[MemoryDTO]) -> None:
        june = MemoryScheduler.memories_for_month(sample_memories, 6)
        assert [m.id for m in june] == ["mem-4", "mem-3"]

        assert [m.id for m in MemoryScheduler.memories_on(sample_memories, 12, 31)] == ["mem-5"]
        assert MemoryScheduler.memories_on(sample_memories, 2, 2) == []

        ordered = MemoryScheduler.sort_by_calendar(sample_memories)
        assert [m.id for m in ordered] == ["mem-1", "mem-2", "mem-4", "mem-3", "mem-5"]
