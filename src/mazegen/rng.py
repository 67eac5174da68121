# src/mazegen/rng.py
"""
Park-Miller minimal standard generator. Every generation step takes a random
source as a parameter; anything with a ``bounded(n)`` method returning 1..n
will do.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")

A = 16807
M = 0x7FFFFFFF  # 2^31-1


class RandomSource(Protocol):
    def bounded(self, n: int) -> int: ...


def pm_next(state: int) -> int:
    return (state * A) % M


def normalize_seed(seed: int) -> int:
    # Valid states are 1..M-1; zero would stick at zero forever.
    s = seed % M
    return s if s else 1


@dataclass
class PMRandom:
    state: int

    @classmethod
    def from_seed(cls, seed: Optional[int] = None) -> "PMRandom":
        if seed is None:
            seed = time.time_ns()
        return cls(normalize_seed(seed))

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def bounded(self, n: int) -> int:
        """Return an integer in 1..n inclusive."""
        if n <= 0:
            raise ValueError(f"bounded() needs a positive range, got {n}")
        return (self.next32() % n) + 1

    def randint(self, lo: int, hi: int) -> int:
        return randint(self, lo, hi)

    def choice(self, seq: Sequence[T]) -> T:
        return choice(self, seq)


def randint(rng: RandomSource, lo: int, hi: int) -> int:
    """Inclusive range draw on top of any source's ``bounded``."""
    if hi < lo:
        raise ValueError(f"empty range {lo}..{hi}")
    return lo + rng.bounded(hi - lo + 1) - 1


def choice(rng: RandomSource, seq: Sequence[T]) -> T:
    if not seq:
        raise IndexError("cannot choose from an empty sequence")
    return seq[rng.bounded(len(seq)) - 1]
