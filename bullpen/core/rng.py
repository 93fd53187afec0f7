"""
Injectable randomness.

Every engine function takes a RandomSource so callers can pin outcomes.
A source exposes a single ``next()`` returning a float in [0, 1); the
helpers below build every other draw the engine needs on top of it.
"""

import random
import uuid
from typing import Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    """Uniform random source."""

    def next(self) -> float:
        """Return a float in [0, 1)."""
        ...


class SystemRandomSource:
    """Non-deterministic source backed by the module-level generator."""

    def next(self) -> float:
        return random.random()


class SeededRandomSource:
    """Deterministic source; two sources with the same seed agree forever."""

    def __init__(self, seed: int):
        self.seed = seed
        self._rng = random.Random(seed)

    def next(self) -> float:
        return self._rng.random()


class SequenceRandomSource:
    """
    Replays a fixed list of values, cycling when exhausted.

    Intended for tests that need to force particular branches.
    """

    def __init__(self, values: Sequence[float]):
        if not values:
            raise ValueError("SequenceRandomSource needs at least one value")
        for value in values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Value {value} outside [0, 1)")
        self._values = list(values)
        self._index = 0

    def next(self) -> float:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value

    @property
    def draws(self) -> int:
        """Number of values consumed so far."""
        return self._index


def default_source(source: "RandomSource | None") -> RandomSource:
    """Return the given source, or a fresh system source."""
    return source if source is not None else SystemRandomSource()


def uniform(source: RandomSource, low: float, high: float) -> float:
    """Uniform float in [low, high)."""
    return low + (high - low) * source.next()


def randint(source: RandomSource, low: int, high: int) -> int:
    """Uniform integer in [low, high], both inclusive."""
    return low + int(source.next() * (high - low + 1))


def chance(source: RandomSource, probability: float) -> bool:
    """True with the given probability."""
    return source.next() < probability


def choice(source: RandomSource, items: Sequence[T]) -> T:
    """Uniform pick from a non-empty sequence."""
    return items[int(source.next() * len(items))]


def weighted_choice(source: RandomSource, weights: dict[T, float]) -> T:
    """
    Categorical draw over a mapping of outcome -> weight.

    Weights need not sum to 1. Iteration order of the mapping decides
    which outcome owns each slice of the unit interval.
    """
    total = sum(weights.values())
    roll = source.next() * total
    last = None
    for outcome, weight in weights.items():
        last = outcome
        if roll < weight:
            return outcome
        roll -= weight
    # Float residue on the final bucket
    return last


def random_id(source: RandomSource) -> str:
    """UUID4-formatted id built from four 32-bit draws, so seeded runs repeat ids."""
    value = 0
    for _ in range(4):
        value = (value << 32) | int(source.next() * 2**32)
    return str(uuid.UUID(int=value, version=4))


def shuffle(source: RandomSource, items: list) -> list:
    """Fisher-Yates shuffle returning a new list."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = int(source.next() * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result


__all__ = [
    "RandomSource",
    "SystemRandomSource",
    "SeededRandomSource",
    "SequenceRandomSource",
    "default_source",
    "uniform",
    "randint",
    "chance",
    "choice",
    "weighted_choice",
    "shuffle",
    "random_id",
]
