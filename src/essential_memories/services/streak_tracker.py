"""Daily challenge streak bookkeeping."""

from datetime import date

from essential_memories.models.streak import StreakStateDTO

__all__ = [
    "StreakTracker",
]


class StreakTracker:
    """Pure state machine over a user's challenge streak.

    A correct answer extends the streak by one and may raise the
    all-time high. A wrong answer resets the streak to zero. There is
    no decay for days without any answer.
    """

    @staticmethod
    def record_outcome(
        state: StreakStateDTO,
        outcome: bool,
        today: date,
    ) -> StreakStateDTO:
        """Apply one challenge outcome.

        Args:
            state: Streak before the answer
            outcome: True if the answer was correct
            today: Day the answer was given

        Returns:
            New StreakStateDTO; the input state is left untouched
        """
        if outcome:
            current = state.current_streak + 1
            high = max(state.all_time_high, current)
        else:
            current = 0
            high = state.all_time_high

        return state.model_copy(
            update={
                "current_streak": current,
                "all_time_high": high,
                "last_challenge_date": today,
            }
        )
