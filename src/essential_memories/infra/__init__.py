"""Infrastructure implementations for essential_memories."""

from essential_memories.infra.clock import FixedClock, SystemClock

__all__ = ["FixedClock", "SystemClock"]
