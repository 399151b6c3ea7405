"""Bounded stat model shared by the player and monsters."""
from __future__ import annotations

from dataclasses import dataclass


def clamp(value: int, minimum: int, maximum: int) -> int:
    """Return value limited to the inclusive range [minimum, maximum]."""
    return max(minimum, min(maximum, value))


@dataclass(slots=True)
class Stat:
    """An initial/current pair; both stay None until the stat is rolled."""

    initial: int | None = None
    current: int | None = None

    @property
    def is_rolled(self) -> bool:
        return self.initial is not None and self.current is not None

    def set_rolled(self, value: int) -> None:
        """Store a freshly rolled value as both initial and current."""
        self.initial = value
        self.current = value

    def adjust(self, delta: int) -> int:
        """Shift current by delta within [0, initial]; return the applied change."""
        if not self.is_rolled:
            return 0
        before = self.current
        self.current = clamp(self.current + delta, 0, self.initial)
        return self.current - before

    def restore(self) -> None:
        if self.initial is not None:
            self.current = self.initial

    def enforce_cap(self) -> None:
        if self.is_rolled:
            self.current = clamp(self.current, 0, self.initial)
