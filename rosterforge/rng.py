"""
Seeded randomness.

Every shuffle, weighted pick and opponent choice in the progression layer
draws from a RandomSource built from a caller-supplied integer seed.

INVARIANT: Same seed + same call sequence ⇒ identical outputs,
across processes and runs.

The default SeededRandom adapts the stdlib Mersenne Twister, whose output
for an integer seed is stable across CPython versions and platforms.
Callers may supply any object satisfying RandomSource instead.
"""

import random
import secrets
import time
from collections.abc import Callable, Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"
ID_SUFFIX_LENGTH = 6


class RandomSource(Protocol):
    """Reproducible pseudo-random source."""

    def next(self) -> float:
        """Return a value in [0, 1)."""
        ...

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Return a permutation of items (input untouched)."""
        ...


class SeededRandom:
    """Default RandomSource backed by random.Random."""

    def __init__(self, seed: int):
        self.seed = seed
        self._rng = random.Random(seed)

    def next(self) -> float:
        return self._rng.random()

    def next_int(self, upper: int) -> int:
        """Return an integer in [0, upper)."""
        return int(self.next() * upper)

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """
        Fisher–Yates shuffle driven by next().

        Returns a new list; the input sequence is not modified.
        """
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = int(self.next() * (i + 1))
            result[i], result[j] = result[j], result[i]
        return result


RandomFactory = Callable[[int], RandomSource]


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def resolve_seed(seed: int | None) -> int:
    """Use the given seed, or fall back to the current time in milliseconds."""
    return now_ms() if seed is None else seed


def to_base36(value: int) -> str:
    """Lowercase base-36 rendering of a non-negative integer."""
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


def generate_id(prefix: str, timestamp_ms: int | None = None) -> str:
    """
    Unique identifier: <prefix>_<base36 timestamp>_<6 random chars>.

    The suffix comes from secrets, not the seeded source, so ids never
    collide between replays of the same seed.
    """
    timestamp = now_ms() if timestamp_ms is None else timestamp_ms
    suffix = "".join(secrets.choice(_BASE36) for _ in range(ID_SUFFIX_LENGTH))
    return f"{prefix}_{to_base36(timestamp)}_{suffix}"
