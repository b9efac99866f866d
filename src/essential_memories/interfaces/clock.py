"""Clock interface for essential_memories.

Services never read the system time directly; they ask an injected clock.
"""

from datetime import date, datetime
from typing import Protocol, runtime_checkable

__all__ = [
    "ClockInterface",
]


@runtime_checkable
class ClockInterface(Protocol):
    """Contract for a source of the current date and time."""

    def today(self) -> date:
        """Return the current calendar day."""
        ...

    def now(self) -> datetime:
        """Return the current timezone-aware time."""
        ...
