"""Exceptions raised by essential_memories services.

Empty selections (no challenge left today, empty practice deck) are not
errors and are reported through return values instead.
"""

__all__ = [
    "AlreadyAnsweredError",
    "EssentialMemoriesError",
    "FreeTierLimitError",
    "InvalidAnswerError",
    "MemoryNotFoundError",
    "MemoryValidationError",
]


class EssentialMemoriesError(Exception):
    """Base class for all essential_memories errors."""


class MemoryValidationError(EssentialMemoriesError, ValueError):
    """A memory was submitted without a name or a type."""


class InvalidAnswerError(EssentialMemoriesError, ValueError):
    """A challenge answer is not a valid MM/DD date."""


class FreeTierLimitError(EssentialMemoriesError):
    """A non-premium user already owns the maximum number of memories.

    Attributes:
        limit: The free tier cap that was hit
    """

    def __init__(self, limit: int) -> None:
        super().__init__(f"Free trial limit of {limit} memories reached")
        self.limit = limit


class MemoryNotFoundError(EssentialMemoriesError):
    """No memory with the given id exists for the owner."""

    def __init__(self, memory_id: str) -> None:
        super().__init__(f"Memory {memory_id!r} not found")
        self.memory_id = memory_id


class AlreadyAnsweredError(EssentialMemoriesError):
    """The memory was already answered in today's daily challenge."""

    def __init__(self, memory_id: str) -> None:
        super().__init__(f"Memory {memory_id!r} was already answered today")
        self.memory_id = memory_id
