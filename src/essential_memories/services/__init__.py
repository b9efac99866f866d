"""Service layer for essential_memories.

This module exports the scheduling core and the application services.
"""

from essential_memories.services.memory_service import MemoryService
from essential_memories.services.occurrence import OccurrenceCalculator, resolve_month_day
from essential_memories.services.pool_selector import PoolSelector
from essential_memories.services.scheduler import MemoryScheduler
from essential_memories.services.session_service import SessionService
from essential_memories.services.streak_tracker import StreakTracker

__all__ = [
    "MemoryScheduler",
    "MemoryService",
    "OccurrenceCalculator",
    "PoolSelector",
    "SessionService",
    "StreakTracker",
    "resolve_month_day",
]
