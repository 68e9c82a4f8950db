# Injectable random source for the question generators.
#
# Anything exposing random() -> float in [0, 1) works: the random module,
# a random.Random(seed) instance, or a stub replaying a fixed sequence.

from __future__ import annotations

import math
import random as _rnd
from typing import List, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def random(self) -> float: ...


def _source(rng: Optional[RandomSource]) -> RandomSource:
    return _rnd if rng is None else rng


def rand_int(lo: int, hi: int, rng: Optional[RandomSource] = None) -> int:
    """Uniform integer over the closed interval [lo, hi]."""
    if lo > hi:
        raise ValueError(f"empty range [{lo}, {hi}]")
    return math.floor(_source(rng).random() * (hi - lo + 1)) + lo


def choice(seq: Sequence[T], rng: Optional[RandomSource] = None) -> T:
    if not seq:
        raise ValueError("cannot choose from an empty sequence")
    return seq[rand_int(0, len(seq) - 1, rng)]


def shuffle(seq: Sequence[T], rng: Optional[RandomSource] = None) -> List[T]:
    """Fisher-Yates shuffle into a new list; the input is left untouched."""
    out = list(seq)
    for i in range(len(out) - 1, 0, -1):
        j = rand_int(0, i, rng)
        out[i], out[j] = out[j], out[i]
    return out
