"""Next-occurrence date math for recurring memories.

A memory recurs every year on its month/day. The next occurrence is the
first such date on or after the reference day, so a memory falling on
the reference day is 0 days away.
"""

import calendar
from datetime import date, datetime, timedelta

from essential_memories.config import LeapDayPolicy
from essential_memories.models.memory import MemoryDTO

__all__ = [
    "OccurrenceCalculator",
    "resolve_month_day",
]


def resolve_month_day(
    year: int,
    month: int,
    day: int,
    policy: LeapDayPolicy = LeapDayPolicy.MARCH_1,
) -> date:
    """Place a yearless month/day in a concrete year.

    Feb 29 in a year without one becomes Mar 1 or Feb 28 depending
    on the policy. Every other valid month/day maps to itself.

    Args:
        year: Target year
        month: Month (1-12)
        day: Day valid for the month in a leap year
        policy: Leap day handling for non-leap years

    Returns:
        Concrete date in the target year
    """
    if month == 2 and day == 29 and not calendar.isleap(year):
        if policy is LeapDayPolicy.FEBRUARY_28:
            return date(year, 2, 28)
        return date(year, 3, 1)
    return date(year, month, day)


def _as_date(value: date | datetime) -> date:
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return value.date()
    return value


class OccurrenceCalculator:
    """Computes when a recurring memory next comes around.

    Example:
        calculator = OccurrenceCalculator()
        days = calculator.days_until_next(memory, date(2024, 12, 30))
    """

    def __init__(self, leap_day_policy: LeapDayPolicy = LeapDayPolicy.MARCH_1) -> None:
        """Initialize calculator.

        Args:
            leap_day_policy: Where Feb 29 memories land in non-leap years
        """
        self._policy = leap_day_policy

    @property
    def leap_day_policy(self) -> LeapDayPolicy:
        return self._policy

    def next_occurrence(self, memory: MemoryDTO, reference_date: date | datetime) -> date:
        """Get the next date the memory falls on.

        Args:
            memory: Memory with a valid month/day
            reference_date: Day to count from; time of day is ignored

        Returns:
            The occurrence in the reference year, or in the following
            year if this year's has already passed
        """
        reference = _as_date(reference_date)
        occurrence = resolve_month_day(reference.year, memory.month, memory.day, self._policy)
        if occurrence < reference:
            occurrence = resolve_month_day(
                reference.year + 1, memory.month, memory.day, self._policy
            )
        return occurrence

    def days_until_next(self, memory: MemoryDTO, reference_date: date | datetime) -> int:
        """Count calendar days until the memory's next occurrence.

        Args:
            memory: Memory with a valid month/day
            reference_date: Day to count from; time of day is ignored

        Returns:
            Days in [0, 366]; 0 when the memory falls on the reference day
        """
        reference = _as_date(reference_date)
        delta: timedelta = self.next_occurrence(memory, reference) - reference
        return delta.days
