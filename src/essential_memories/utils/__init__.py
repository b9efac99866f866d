"""Utility functions for essential_memories.

This module contains internal utility functions.
"""

from essential_memories.utils.dates import (
    days_in_month,
    format_month_day,
    is_valid_month_day,
    parse_month_day,
)
from essential_memories.utils.hashing import (
    generate_memory_id,
    generate_practice_record_id,
    hash_text,
    stable_hash,
)

__all__ = [
    "days_in_month",
    "format_month_day",
    "is_valid_month_day",
    "parse_month_day",
    "generate_memory_id",
    "generate_practice_record_id",
    "hash_text",
    "stable_hash",
]
