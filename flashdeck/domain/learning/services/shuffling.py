"""
Uniform shuffling shared by every session type.

This is a pure domain service with no infrastructure dependencies.
"""

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_default_rng = random.Random()


def shuffled(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """
    Return a uniformly random permutation of ``items`` as a new list.

    ``random.Random.shuffle`` is a Fisher-Yates shuffle, so every
    permutation is equally likely. The input is left untouched.

    Args:
        items: Items to permute
        rng: Random source; pass a seeded instance for reproducible order

    Returns:
        New list containing the same items in random order
    """
    result = list(items)
    (rng or _default_rng).shuffle(result)
    return result
