from __future__ import annotations

import random

"""Biased random sample generator for synthesized rows.

80% of samples fall in [-1.0, 1.0); the remaining 20% take a magnitude in
[1.0, 2.0) with a random sign. Every sample is rounded to one decimal.
"""

__all__ = [
    "generate_value",
    "CORE_PROBABILITY",
]

CORE_PROBABILITY = 0.8


def generate_value(rng: random.Random | None = None) -> float:
    """Return one sample in [-2.0, 2.0] with one decimal place.

    Args:
        rng: optional random source (tests pass a seeded ``random.Random``)
    """
    r = rng if rng is not None else random
    if r.random() < CORE_PROBABILITY:
        value = r.random() * 2 - 1
    else:
        value = r.random() + 1
        if r.random() < 0.5:
            value = -value
    return round(value, 1)
