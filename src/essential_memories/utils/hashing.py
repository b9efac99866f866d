"""Hashing utilities for essential_memories.

This module provides deterministic hash functions for generating
stable identifiers for memories and practice records.
"""

import hashlib
from datetime import datetime
from typing import Any

__all__ = [
    "generate_memory_id",
    "generate_practice_record_id",
    "hash_text",
    "stable_hash",
]


def hash_text(text: str) -> str:
    """Generate SHA256 hash of text.

    Args:
        text: Input text to hash

    Returns:
        Hexadecimal SHA256 hash string
    """
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def stable_hash(*args: Any) -> str:
    """Generate a stable hash from multiple arguments.

    Converts all arguments to strings and joins them with pipe separator.

    Args:
        *args: Values to include in the hash

    Returns:
        Hexadecimal SHA256 hash string
    """
    return hash_text("|".join(str(arg) for arg in args))


def generate_memory_id(
    owner_id: str,
    display_name: str,
    month: int,
    day: int,
    created_at: datetime,
) -> str:
    """Generate deterministic memory ID.

    Two memories with the same name and date are still distinct when
    they were created at different times.

    Args:
        owner_id: Owning user ID
        display_name: Memory label
        month: Month of the memory
        day: Day of the memory
        created_at: Creation time

    Returns:
        Hexadecimal SHA256 hash string
    """
    return stable_hash("memory", owner_id, display_name, month, day, created_at.isoformat())


def generate_practice_record_id(
    owner_id: str,
    memory_id: str,
    session_type: str,
    occurred_at: datetime,
) -> str:
    """Generate deterministic practice record ID.

    Args:
        owner_id: Answering user ID
        memory_id: Answered memory ID
        session_type: Session label
        occurred_at: Time the answer was recorded

    Returns:
        Hexadecimal SHA256 hash string
    """
    return stable_hash("practice", owner_id, memory_id, session_type, occurred_at.isoformat())
