"""Random source abstraction used by the carver.

The carver only ever asks for "a uniform integer below n"; anything that
answers that question can drive generation, which is how tests pin exact
results with a scripted source.
"""
from __future__ import annotations

import random
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    def next_int(self, bound: int) -> int:
        """Return an integer uniformly drawn from ``[0, bound)``."""
        ...


class SeededRandomSource:
    """``RandomSource`` backed by a private ``random.Random`` instance.

    Using a local RNG means other users of the ``random`` module cannot
    perturb a seeded generation run.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_int(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return self._rng.randrange(bound)

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self.seed!r})"


def draw_seed() -> int:
    return random.randint(0, 2**31 - 1)


__all__ = ["RandomSource", "SeededRandomSource", "draw_seed"]
