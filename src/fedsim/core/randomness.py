from __future__ import annotations

import hashlib
import random
from typing import Any, Callable, Sequence, TypeVar

from fedsim.contracts import RandomSource, WeightedOptions

T = TypeVar("T")


class PythonRandomSource(RandomSource):
    """Injected randomness source for booking, match results and test determinism."""

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def rand(self) -> float:
        return self._rng.random()

    def spawn(self, substream_id: str) -> RandomSource:
        if self._seed is None:
            return PythonRandomSource(seed=None)
        digest = hashlib.sha256(f"{self._seed}:{substream_id}".encode("ascii", "ignore")).hexdigest()
        return PythonRandomSource(seed=int(digest[:16], 16))


def gameplay_random() -> PythonRandomSource:
    return PythonRandomSource(seed=None)


def seeded_random(seed: int) -> PythonRandomSource:
    return PythonRandomSource(seed=seed)


def uniform_choice(items: Sequence[T], random_source: RandomSource) -> T:
    """Pick one item uniformly using a single ``rand()`` draw."""
    if not items:
        raise ValueError("choice items must not be empty")
    index = int(random_source.rand() * len(items))
    return items[min(index, len(items) - 1)]


def weighted_choice(
    items: Sequence[T],
    weight: Callable[[T], float],
    random_source: RandomSource,
) -> T:
    """Cumulative-weight roulette selection.

    Draws a threshold in ``[0, total)`` and walks the items subtracting each
    weight until the threshold is no longer positive. Floating point leftover
    that walks off the end falls back to the first item.
    """
    if not items:
        raise ValueError("choice items must not be empty")
    weights = [weight(item) for item in items]
    threshold = random_source.rand() * sum(weights)
    for item, item_weight in zip(items, weights):
        threshold -= item_weight
        if threshold <= 0:
            return item
    return items[0]


def pick_option(table: WeightedOptions, random_source: RandomSource) -> Any:
    if len(table.weights) != len(table.options):
        return uniform_choice(table.options, random_source)
    indexed = list(range(len(table.options)))
    return table.options[weighted_choice(indexed, lambda i: table.weights[i], random_source)]
