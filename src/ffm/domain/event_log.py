"""Human-readable audit trail of luck tests, combat rounds and dice rolls."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from ffm.core.types import LogChannel

LOG_CAP = 200
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def now_stamp(moment: datetime | None = None) -> str:
    return (moment or datetime.now()).strftime(TIMESTAMP_FORMAT)


@dataclass(slots=True)
class EventLog:
    """Three newest-first channels, each capped at LOG_CAP entries."""

    luck: List[str] = field(default_factory=list)
    combat: List[str] = field(default_factory=list)
    dice: List[str] = field(default_factory=list)

    def channel(self, name: LogChannel) -> List[str]:
        if name == "luck":
            return self.luck
        if name == "combat":
            return self.combat
        if name == "dice":
            return self.dice
        raise KeyError(name)

    def append(self, name: LogChannel, message: str, *, moment: datetime | None = None) -> str:
        """Prepend a timestamped entry to the channel and return it."""
        entry = f"[{now_stamp(moment)}] {message}"
        entries = self.channel(name)
        entries.insert(0, entry)
        del entries[LOG_CAP:]
        return entry

    def recent(self, name: LogChannel, limit: int) -> List[str]:
        return list(self.channel(name)[:limit])

    def clear(self, name: LogChannel) -> None:
        self.channel(name).clear()
