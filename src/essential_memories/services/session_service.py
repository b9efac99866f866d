"""Practice session service for essential_memories.

This module runs the daily streak challenge and flashcard practice:
it fetches what the scheduler needs, grades answers, and persists
practice records and streak state.
"""

from collections.abc import Iterable
from datetime import datetime

from essential_memories.exceptions import (
    AlreadyAnsweredError,
    InvalidAnswerError,
    MemoryNotFoundError,
)
from essential_memories.interfaces.clock import ClockInterface
from essential_memories.interfaces.storage import StorageInterface
from essential_memories.logging import get_logger
from essential_memories.models.memory import MemoryDTO
from essential_memories.models.practice import (
    PracticeRecordDTO,
    PracticeSummaryDTO,
    SessionType,
)
from essential_memories.models.schedule import (
    ChallengeResultDTO,
    ChallengeStatus,
    DailyChallengeDTO,
)
from essential_memories.models.streak import StreakStateDTO
from essential_memories.models.user import UserContext
from essential_memories.services.scheduler import MemoryScheduler
from essential_memories.services.streak_tracker import StreakTracker
from essential_memories.utils.dates import format_month_day, parse_month_day
from essential_memories.utils.hashing import generate_practice_record_id

__all__ = [
    "SessionService",
]

logger = get_logger(__name__)


class SessionService:
    """Daily challenge and flashcard practice workflows.

    Each memory can be asked at most once per day in the daily
    challenge. Flashcard practice is not limited.

    Example:
        service = SessionService(storage, scheduler, clock)

        challenge = await service.start_daily_challenge(user)
        if challenge.status is ChallengeStatus.READY:
            result = await service.submit_daily_challenge(
                user, challenge.memory.id, "05/14"
            )
    """

    def __init__(
        self,
        storage: StorageInterface,
        scheduler: MemoryScheduler,
        clock: ClockInterface,
        tracker: StreakTracker | None = None,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            storage: Storage interface for memories, records and streaks
            scheduler: Scheduler used to pick questions and decks
            clock: Clock deciding what "today" is
            tracker: Streak state machine
        """
        self._storage = storage
        self._scheduler = scheduler
        self._clock = clock
        self._tracker = tracker or StreakTracker()

    # === DAILY CHALLENGE ===

    async def start_daily_challenge(self, user: UserContext) -> DailyChallengeDTO:
        """Pick the next daily challenge question for the user.

        Returns:
            DailyChallengeDTO with status READY and a memory, or
            NO_MEMORIES / ALL_PRACTICED and no memory
        """
        memories = await self._storage.list_memories(user.owner_id)
        if not memories:
            logger.info("daily_challenge_no_memories", owner_id=user.owner_id)
            return DailyChallengeDTO(status=ChallengeStatus.NO_MEMORIES)

        today = self._clock.today()
        records = await self._storage.get_practice_records(
            user.owner_id, today, SessionType.DAILY_CHALLENGE
        )
        answered = {r.memory_id for r in records}
        remaining = sum(1 for m in memories if m.id not in answered)

        memory = self._scheduler.get_daily_challenge(memories, records)
        if memory is None:
            logger.info("daily_challenge_all_practiced", owner_id=user.owner_id)
            return DailyChallengeDTO(
                status=ChallengeStatus.ALL_PRACTICED,
                total_memories=len(memories),
            )

        logger.info(
            "daily_challenge_selected",
            owner_id=user.owner_id,
            memory_id=memory.id,
            remaining_today=remaining,
        )
        return DailyChallengeDTO(
            status=ChallengeStatus.READY,
            memory=memory,
            total_memories=len(memories),
            remaining_today=remaining,
        )

    async def submit_daily_challenge(
        self,
        user: UserContext,
        memory_id: str,
        answer: str,
    ) -> ChallengeResultDTO:
        """Grade a daily challenge answer and update the streak.

        The practice record is written before the streak, so a failure
        in between loses at most the streak update.

        Args:
            user: Answering user
            memory_id: Memory that was asked about
            answer: Answer in MM/DD form

        Returns:
            ChallengeResultDTO with the stored record and new streak

        Raises:
            InvalidAnswerError: If the answer is not a valid MM/DD date
            MemoryNotFoundError: If the user owns no such memory
            AlreadyAnsweredError: If the memory was answered today
        """
        parsed = parse_month_day(answer)
        if parsed is None:
            raise InvalidAnswerError("Please enter a valid date in MM/DD format")

        memory = await self._require_memory(user, memory_id)

        now = self._clock.now()
        today = now.date()
        records = await self._storage.get_practice_records(
            user.owner_id, today, SessionType.DAILY_CHALLENGE
        )
        if any(r.memory_id == memory_id for r in records):
            raise AlreadyAnsweredError(memory_id)

        is_correct = parsed == (memory.month, memory.day)
        record = self._new_record(user, memory_id, is_correct, SessionType.DAILY_CHALLENGE, now)
        await self._storage.append_practice_record(record)

        state = await self.get_streak(user)
        new_state = self._tracker.record_outcome(state, is_correct, today)
        await self._storage.save_streak_state(new_state)

        logger.info(
            "streak_updated",
            owner_id=user.owner_id,
            memory_id=memory_id,
            correct=is_correct,
            current_streak=new_state.current_streak,
            all_time_high=new_state.all_time_high,
        )
        return ChallengeResultDTO(
            memory=memory,
            answer=format_month_day(*parsed),
            correct_answer=memory.month_day,
            is_correct=is_correct,
            record=record,
            streak=new_state,
        )

    async def get_streak(self, user: UserContext) -> StreakStateDTO:
        """Get the user's streak, or the zero state if none is stored."""
        state = await self._storage.get_streak_state(user.owner_id)
        return state or StreakStateDTO.initial(user.owner_id)

    # === FLASHCARD PRACTICE ===

    async def start_practice_session(self, user: UserContext) -> list[MemoryDTO]:
        """Deal a shuffled flashcard deck; empty if the user has no memories."""
        memories = await self._storage.list_memories(user.owner_id)
        deck = self._scheduler.get_practice_deck(memories)
        logger.info("practice_session_started", owner_id=user.owner_id, cards=len(deck))
        return deck

    async def record_flashcard_answer(
        self,
        user: UserContext,
        memory_id: str,
        correct: bool,
    ) -> PracticeRecordDTO:
        """Store a self-graded flashcard answer.

        Raises:
            MemoryNotFoundError: If the user owns no such memory
        """
        await self._require_memory(user, memory_id)
        record = self._new_record(
            user, memory_id, correct, SessionType.FLASHCARD_PRACTICE, self._clock.now()
        )
        await self._storage.append_practice_record(record)
        logger.debug("flashcard_answer_recorded", memory_id=memory_id, correct=correct)
        return record

    @staticmethod
    def summarize(results: Iterable[bool]) -> PracticeSummaryDTO:
        """Score a finished deck; the percentage rounds halves up."""
        outcomes = list(results)
        total = len(outcomes)
        correct = sum(1 for outcome in outcomes if outcome)
        percentage = (correct * 200 + total) // (2 * total) if total else 0
        return PracticeSummaryDTO(correct=correct, total=total, percentage=percentage)

    # === HELPERS ===

    async def _require_memory(self, user: UserContext, memory_id: str) -> MemoryDTO:
        memory = await self._storage.get_memory(user.owner_id, memory_id)
        if memory is None:
            raise MemoryNotFoundError(memory_id)
        return memory

    @staticmethod
    def _new_record(
        user: UserContext,
        memory_id: str,
        outcome: bool,
        session_type: SessionType,
        occurred_at: datetime,
    ) -> PracticeRecordDTO:
        return PracticeRecordDTO(
            id=generate_practice_record_id(
                user.owner_id, memory_id, session_type.value, occurred_at
            ),
            owner_id=user.owner_id,
            memory_id=memory_id,
            outcome=outcome,
            session_type=session_type,
            occurred_at=occurred_at,
        )
