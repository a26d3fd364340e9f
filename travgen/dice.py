"""Dice rolling primitives.

Every roll goes through a random source exposing ``randint(a, b)``
(inclusive on both ends). ``random.Random`` is the default; tests swap in a
``ScriptedSource`` to replay an exact draw sequence.
"""

import random
from typing import Iterable, Optional, Protocol


class RandomSourceError(RuntimeError):
    """The random source could not produce a draw.

    Fatal for the whole generation: no partial world is meaningful.
    """


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def floor_add(total: int, modifier: int) -> int:
    """Apply a dice modifier, flooring the result at zero."""
    return max(total + modifier, 0)


class ScriptedSource:
    """Replays a fixed sequence of draws.

    Each ``randint`` call consumes the next value. Running out of values, or
    a value outside the requested range, raises ``RandomSourceError``.
    """

    def __init__(self, values: Iterable[int]):
        self._values = list(values)
        self._position = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._position

    def randint(self, a: int, b: int) -> int:
        if self._position >= len(self._values):
            raise RandomSourceError(
                f"Scripted source exhausted after {len(self._values)} draws"
            )
        value = self._values[self._position]
        if not a <= value <= b:
            raise RandomSourceError(
                f"Scripted draw {self._position} is {value}, expected {a}..{b}"
            )
        self._position += 1
        return value


class Dice:
    """d3/d6 rolls against a single random source."""

    def __init__(self, seed: Optional[int] = None, source: Optional[RandomSource] = None):
        self.source = source if source is not None else random.Random(seed)

    def d3(self) -> int:
        return self.source.randint(1, 3)

    def d6(self) -> int:
        return self.source.randint(1, 6)

    def nd6(self, n: int) -> int:
        """Roll ``n`` six-sided dice and sum them."""
        if n < 0:
            raise ValueError(f"Cannot roll a negative number of dice: {n}")
        return sum(self.d6() for _ in range(n))

    def roll_2d6(self) -> int:
        return self.nd6(2)

    def d3dm(self, dm: int) -> int:
        return floor_add(self.d3(), dm)

    def d6dm(self, dm: int) -> int:
        return floor_add(self.d6(), dm)

    def nd6dm(self, n: int, dm: int) -> int:
        return floor_add(self.nd6(n), dm)
