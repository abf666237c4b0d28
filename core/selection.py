"""
Uniform random selection with an injectable random source.
"""

import random
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")

# Seeded from OS entropy at import, independent for every process run
_DEFAULT_RNG = random.Random()


class RandomSource(Protocol):
    """Protocol for a source of uniform random choices (e.g. random.Random)."""

    def choice(self, seq: Sequence[T]) -> T:
        """Return one element of a non-empty sequence, uniformly at random."""


def choose_uniform(items: Sequence[T], rng: RandomSource | None = None) -> T | None:
    """
    Pick one item uniformly at random.

    Args:
        items: The candidates.
        rng: Optional random source. If None, uses a module-level random.Random.
            Pass a seeded random.Random for deterministic tests.

    Returns:
        One of the items, each with probability 1/len(items), or None when
        there is nothing to choose from. A single item is returned as is.
    """
    if not items:
        return None
    if len(items) == 1:
        return items[0]

    source = rng if rng is not None else _DEFAULT_RNG
    return source.choice(items)
