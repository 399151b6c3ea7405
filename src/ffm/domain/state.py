"""Domain-level state tracking."""
from __future__ import annotations

from dataclasses import dataclass, field

from ffm.domain.encounters import EncounterRegistry
from ffm.domain.entities import CharacterSheet
from ffm.domain.event_log import EventLog


@dataclass
class GameState:
    """Everything a running adventure owns: sheet, encounters and log."""

    sheet: CharacterSheet = field(default_factory=CharacterSheet)
    encounters: EncounterRegistry = field(default_factory=EncounterRegistry)
    log: EventLog = field(default_factory=EventLog)
