"""Interface contracts for essential_memories.

This module exports all Protocol-based interfaces for dependency injection.
"""

from essential_memories.interfaces.clock import ClockInterface
from essential_memories.interfaces.storage import StorageInterface

__all__ = [
    "ClockInterface",
    "StorageInterface",
]
