from __future__ import annotations

import random

import numpy as np

from char_data import CharDistribution

# Returned when rounding leaves the last cp just below the draw.
FALLBACK_CHAR = " "


def sample_char(distribution: CharDistribution, r: float) -> str:
    """Pick the first character (in stored order) whose cp reaches `r`.

    `distribution` must be finalized and `r` drawn uniformly from [0, 1).
    Falls back to FALLBACK_CHAR when no cp is >= r.
    """
    for record in distribution:
        if record.cp >= r:
            return record.char
    return FALLBACK_CHAR


def sample_counts(distribution: CharDistribution, rng: random.Random, trials: int) -> np.ndarray:
    """Draw `trials` characters and return their empirical frequencies.

    The result is aligned with the distribution's record order. Draws that hit
    the fallback character are dropped unless it is itself a record.
    """
    if trials <= 0:
        raise ValueError("trials must be positive")
    counts = np.zeros(distribution.size, dtype=np.int64)
    for _ in range(trials):
        index = distribution.index_of(sample_char(distribution, rng.random()))
        if index != -1:
            counts[index] += 1
    return counts / trials
