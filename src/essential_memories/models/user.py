"""User context models for essential_memories.

The identity provider is external; callers pass a UserContext with
every request instead.
"""

from pydantic import BaseModel, Field

__all__ = [
    "QuotaDTO",
    "UserContext",
]


class UserContext(BaseModel, frozen=True):
    """Authenticated caller.

    Attributes:
        owner_id: Stable opaque user ID
        is_premium: True for paying subscribers
    """

    owner_id: str = Field(min_length=1)
    is_premium: bool = False


class QuotaDTO(BaseModel, frozen=True):
    """Memory allowance for a user.

    limit and remaining are None for premium users, who have no cap.
    """

    is_premium: bool
    memory_count: int = Field(ge=0)
    limit: int | None = None
    remaining: int | None = None

    @property
    def can_add(self) -> bool:
        """Whether another memory may be created."""
        return self.remaining is None or self.remaining > 0
