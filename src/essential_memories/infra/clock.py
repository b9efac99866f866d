"""Clock implementations for essential_memories."""

from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from essential_memories.interfaces.clock import ClockInterface

__all__ = [
    "FixedClock",
    "SystemClock",
]


class SystemClock(ClockInterface):
    """Wall clock in a fixed IANA timezone.

    "Today" is the calendar day in that zone, so a user's daily
    challenge rolls over at their local midnight.
    """

    def __init__(self, timezone: str = "UTC") -> None:
        """Initialize clock.

        Args:
            timezone: IANA zone name (e.g. "Europe/Berlin")

        Raises:
            zoneinfo.ZoneInfoNotFoundError: If the zone is unknown
        """
        self._tz = ZoneInfo(timezone)

    def now(self) -> datetime:
        return datetime.now(self._tz)

    def today(self) -> date:
        return self.now().date()


class FixedClock(ClockInterface):
    """Clock frozen at a given moment, advanced only by hand."""

    def __init__(self, moment: datetime | date) -> None:
        if not isinstance(moment, datetime):
            moment = datetime.combine(moment, time(12, 0), tzinfo=ZoneInfo("UTC"))
        self._moment = moment

    def now(self) -> datetime:
        return self._moment

    def today(self) -> date:
        return self._moment.date()

    def advance(self, days: int = 0, seconds: float = 0) -> None:
        """Move the clock forward."""
        self._moment += timedelta(days=days, seconds=seconds)
