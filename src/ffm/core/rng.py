"""Dice RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random


class RNG:
    """Wrapper around random.Random that provides dice helpers."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def roll_die(self, sides: int = 6) -> int:
        """Return a uniform roll of a single die in [1, sides]."""
        if sides < 1:
            raise ValueError("A die needs at least one side.")
        return self.randint(1, sides)

    def roll_2d6(self) -> int:
        """Return the sum of two independent six-sided dice."""
        return self.roll_die(6) + self.roll_die(6)
