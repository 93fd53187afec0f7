"""
Bounded-normal rating sampling.

All ratings live on the 20-80 scouting scale. Every generation and update
site clamps through clamp_rating so nothing leaves that range.
"""

import math
from typing import Optional

from bullpen.core.rng import RandomSource, default_source

RATING_MIN = 20
RATING_MAX = 80


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp value to range."""
    return max(min_val, min(max_val, value))


def clamp_rating(value: float) -> int:
    """Round and clamp a value onto the 20-80 scale."""
    return int(clamp(round(value), RATING_MIN, RATING_MAX))


class RatingSampler:
    """
    Box-Muller sampler over an injectable uniform source.

    Deterministic only when the source is seeded.
    """

    def __init__(self, source: Optional[RandomSource] = None):
        self.source = default_source(source)

    def standard_normal(self) -> float:
        """One standard-normal draw; consumes two uniforms (more if u1 is 0)."""
        u1 = self.source.next()
        while u1 == 0.0:
            u1 = self.source.next()
        u2 = self.source.next()
        return math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)

    def normal(self, mean: float, std_dev: float) -> float:
        """Unclamped normal draw."""
        return mean + self.standard_normal() * std_dev

    def sample(self, mean: float, std_dev: float) -> int:
        """Normal draw rounded and clamped to [20, 80]."""
        return clamp_rating(self.normal(mean, std_dev))


__all__ = [
    "RATING_MIN",
    "RATING_MAX",
    "clamp",
    "clamp_rating",
    "RatingSampler",
]
