"""Memory scheduler facade.

This module composes the occurrence calculator and the pool selector to
answer what the user should be asked now and what is coming up. It works
only on collections the caller has already fetched and never does I/O.
"""

from collections.abc import Iterable, Sequence
from datetime import date, datetime

from essential_memories.models.memory import MemoryDTO
from essential_memories.models.practice import PracticeRecordDTO, SessionType
from essential_memories.models.schedule import UpcomingMemoryDTO
from essential_memories.services.occurrence import OccurrenceCalculator
from essential_memories.services.pool_selector import DEFAULT_DECK_SIZE, PoolSelector

__all__ = [
    "DEFAULT_UPCOMING_LIMIT",
    "MemoryScheduler",
]

DEFAULT_UPCOMING_LIMIT = 5


class MemoryScheduler:
    """Facade over occurrence math and random selection.

    Example:
        scheduler = MemoryScheduler()

        upcoming = scheduler.get_upcoming(memories, clock.today())
        question = scheduler.get_daily_challenge(memories, todays_records)
        deck = scheduler.get_practice_deck(memories)
    """

    def __init__(
        self,
        calculator: OccurrenceCalculator | None = None,
        selector: PoolSelector | None = None,
        practice_deck_size: int = DEFAULT_DECK_SIZE,
    ) -> None:
        """Initialize scheduler with its components.

        Args:
            calculator: Occurrence calculator (default: March 1 leap policy)
            selector: Pool selector (default: OS random source)
            practice_deck_size: Cards per practice deck
        """
        self._calculator = calculator or OccurrenceCalculator()
        self._selector = selector or PoolSelector()
        self._practice_deck_size = practice_deck_size

    def get_upcoming(
        self,
        memories: Iterable[MemoryDTO],
        reference_date: date | datetime,
        limit: int = DEFAULT_UPCOMING_LIMIT,
    ) -> list[UpcomingMemoryDTO]:
        """List the memories coming up soonest.

        Ties keep the input order, so results are deterministic for a
        given input sequence.

        Args:
            memories: Memories to rank
            reference_date: Day to count from
            limit: Maximum number of entries

        Returns:
            UpcomingMemoryDTO list sorted by days_until ascending
        """
        if limit <= 0:
            return []

        upcoming = []
        for memory in memories:
            next_date = self._calculator.next_occurrence(memory, reference_date)
            days_until = self._calculator.days_until_next(memory, reference_date)
            upcoming.append(
                UpcomingMemoryDTO(memory=memory, days_until=days_until, next_date=next_date)
            )

        # list.sort is stable
        upcoming.sort(key=lambda item: item.days_until)
        return upcoming[:limit]

    def get_daily_challenge(
        self,
        memories: Sequence[MemoryDTO],
        todays_records: Iterable[PracticeRecordDTO],
    ) -> MemoryDTO | None:
        """Pick today's next challenge question.

        Only daily challenge records count as consumed; flashcard
        practice does not use up challenge questions.

        Args:
            memories: All memories of the user
            todays_records: Practice records from today

        Returns:
            Memory to ask about, or None if all were answered today
        """
        consumed = {
            record.memory_id
            for record in todays_records
            if record.session_type is SessionType.DAILY_CHALLENGE
        }
        return self._selector.pick_daily_challenge(memories, consumed)

    def get_practice_deck(self, memories: Sequence[MemoryDTO]) -> list[MemoryDTO]:
        """Build a flashcard deck of up to practice_deck_size cards."""
        return self._selector.build_practice_deck(memories, self._practice_deck_size)

    @staticmethod
    def sort_by_calendar(memories: Iterable[MemoryDTO]) -> list[MemoryDTO]:
        """Order memories by month, then day."""
        return sorted(memories, key=lambda m: (m.month, m.day))

    @staticmethod
    def memories_for_month(memories: Iterable[MemoryDTO], month: int) -> list[MemoryDTO]:
        """Memories falling in a month, ordered by day."""
        return sorted((m for m in memories if m.month == month), key=lambda m: m.day)

    @staticmethod
    def memories_on(memories: Iterable[MemoryDTO], month: int, day: int) -> list[MemoryDTO]:
        """Memories falling on one calendar day."""
        return [m for m in memories if m.month == month and m.day == day]
