"""
Seeded Random Source.

Every random decision the trade engine makes goes through a SeededRNG
instance handed in by the caller. Nothing here touches the module-level
``random`` generator, so replaying the same seed (or restoring a saved
state) reproduces the same sequence of draws.
"""

import random
from typing import Any, Sequence, TypeVar

T = TypeVar("T")


class SeededRNG:
    """Deterministic random source wrapping a private ``random.Random``."""

    def __init__(self, seed: int):
        self.seed = seed
        self._random = random.Random(seed)

    def next(self) -> float:
        """Float in [0, 1)."""
        return self._random.random()

    def next_float(self, low: float, high: float) -> float:
        """Float in [low, high). A zero-width range returns ``low``."""
        if high < low:
            raise ValueError(f"Invalid range: {low} > {high}")
        return low + self._random.random() * (high - low)

    def next_int(self, low: int, high: int) -> int:
        """Integer in [low, high], both ends inclusive."""
        if high < low:
            raise ValueError(f"Invalid range: {low} > {high}")
        return self._random.randint(low, high)

    def chance(self, probability: float) -> bool:
        """True with the given probability (0-1)."""
        return self._random.random() < probability

    def pick(self, items: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence."""
        if not items:
            raise ValueError("Cannot pick from an empty sequence")
        return items[self._random.randrange(len(items))]

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Return a shuffled copy, leaving the input alone."""
        result = list(items)
        self._random.shuffle(result)
        return result

    def get_state(self) -> Any:
        """Snapshot of the generator state (for save games / replays)."""
        return self._random.getstate()

    def set_state(self, state: Any) -> None:
        self._random.setstate(state)

    def fork(self) -> "SeededRNG":
        """Independent copy positioned at the same point in the sequence."""
        clone = SeededRNG(self.seed)
        clone.set_state(self.get_state())
        return clone
