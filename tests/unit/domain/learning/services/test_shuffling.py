"""Tests for the uniform shuffle shared by session builders."""

import itertools
import random
from collections import Counter

from flashdeck.domain.learning.services.shuffling import shuffled

# Chi-square critical values at p = 0.001
CHI_SQUARE_CRITICAL_4_DOF = 18.47
CHI_SQUARE_CRITICAL_23_DOF = 49.73


def _chi_square(observed: Counter[object], categories: list[object], trials: int) -> float:
    expected = trials / len(categories)
    return sum((observed[category] - expected) ** 2 / expected for category in categories)


class TestShuffled:
    def test_returns_permutation_of_input(self) -> None:
        items = list(range(20))
        result = shuffled(items, random.Random(7))
        assert sorted(result) == items

    def test_does_not_mutate_input(self) -> None:
        items = ["a", "b", "c", "d"]
        shuffled(items, random.Random(1))
        assert items == ["a", "b", "c", "d"]

    def test_returns_new_list(self) -> None:
        items = [1, 2, 3]
        assert shuffled(items) is not items

    def test_empty_sequence(self) -> None:
        assert shuffled([]) == []

    def test_seeded_rng_is_reproducible(self) -> None:
        items = list(range(10))
        assert shuffled(items, random.Random(42)) == shuffled(items, random.Random(42))

    def test_every_permutation_equally_likely(self) -> None:
        items = ("a", "b", "c", "d")
        permutations: list[object] = list(itertools.permutations(items))
        rng = random.Random(20240611)
        trials = 24_000

        counts: Counter[object] = Counter(tuple(shuffled(items, rng)) for _ in range(trials))

        assert set(counts) == set(permutations)
        assert _chi_square(counts, permutations, trials) < CHI_SQUARE_CRITICAL_23_DOF

    def test_each_item_equally_likely_in_every_position(self) -> None:
        items = ["a", "b", "c", "d", "e"]
        rng = random.Random(99)
        trials = 10_000
        by_position: list[Counter[object]] = [Counter() for _ in items]

        for _ in range(trials):
            for position, item in enumerate(shuffled(items, rng)):
                by_position[position][item] += 1

        for counts in by_position:
            assert _chi_square(counts, list(items), trials) < CHI_SQUARE_CRITICAL_4_DOF
