"""Random selection of challenge questions and practice decks."""

import random
from collections.abc import Collection, Sequence

from essential_memories.logging import get_logger
from essential_memories.models.memory import MemoryDTO

__all__ = [
    "DEFAULT_DECK_SIZE",
    "PoolSelector",
]

logger = get_logger(__name__)

DEFAULT_DECK_SIZE = 10


class PoolSelector:
    """Unbiased random picks over a user's memories.

    The random source is injected so callers can make selection
    reproducible. Without one, the OS entropy source is used.

    Example:
        selector = PoolSelector(random.Random(42))
        memory = selector.pick_daily_challenge(memories, answered_ids)
        deck = selector.build_practice_deck(memories)
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        """Initialize selector.

        Args:
            rng: Random source; defaults to random.SystemRandom()
        """
        self._rng = rng if rng is not None else random.SystemRandom()

    def pick_daily_challenge(
        self,
        memories: Sequence[MemoryDTO],
        consumed_ids: Collection[str],
    ) -> MemoryDTO | None:
        """Pick one memory that has not been answered today.

        Args:
            memories: All memories of the user
            consumed_ids: IDs already answered in today's challenge

        Returns:
            A uniformly random unconsumed memory, or None when every
            memory has been consumed (or there are none)
        """
        consumed = set(consumed_ids)
        candidates = [m for m in memories if m.id not in consumed]
        if not candidates:
            return None

        picked = self._rng.choice(candidates)
        logger.debug(
            "daily_challenge_picked",
            memory_id=picked.id,
            candidates=len(candidates),
        )
        return picked

    def build_practice_deck(
        self,
        memories: Sequence[MemoryDTO],
        max_size: int = DEFAULT_DECK_SIZE,
    ) -> list[MemoryDTO]:
        """Draw a shuffled flashcard deck without replacement.

        When the user has max_size memories or fewer, the deck is a
        permutation of all of them.

        Args:
            memories: All memories of the user
            max_size: Maximum number of cards

        Returns:
            Up to max_size distinct memories in random order

        Raises:
            ValueError: If max_size is less than 1
        """
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        if not memories:
            return []

        size = min(max_size, len(memories))
        return self._rng.sample(list(memories), size)
