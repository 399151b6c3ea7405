"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import List, Sequence

from ffm.core.types import LogChannel
from ffm.domain.encounters import Encounter
from ffm.domain.entities import CharacterSheet, Stat
from ffm.domain.event_log import EventLog
from ffm.domain.state import GameState

LUCK_LOG_WINDOW = 12
COMBAT_LOG_WINDOW = 14
DICE_LOG_WINDOW = 10
_UNROLLED = "-"


def format_stat(label: str, stat: Stat) -> str:
    initial = _UNROLLED if stat.initial is None else str(stat.initial)
    current = _UNROLLED if stat.current is None else str(stat.current)
    return f"{label:<8} {current:>3} / {initial:<3}"


def format_potion(sheet: CharacterSheet) -> str:
    choice = sheet.potion.choice.value.title()
    status = "used (one per adventure)" if sheet.potion.used else "not used"
    return f"Potion: {choice} - {status}"


def format_sheet(sheet: CharacterSheet) -> List[str]:
    lines = [
        f"Adventurer: {sheet.name or 'Unnamed'}",
        format_stat("SKILL", sheet.skill),
        format_stat("STAMINA", sheet.stamina),
        format_stat("LUCK", sheet.luck),
        f"Provisions: {sheet.provisions}   Gold: {sheet.gold}",
        format_potion(sheet),
    ]
    lines.extend(format_item_list("Equipment", sheet.equipment))
    lines.extend(format_item_list("Treasure", sheet.treasure))
    return lines


def format_item_list(title: str, items: Sequence[str]) -> List[str]:
    if not items:
        return [f"{title}: (none)"]
    return [f"{title}:"] + [f"  {idx}. {item}" for idx, item in enumerate(items, start=1)]


def format_encounter(encounter: Encounter, *, is_selected: bool = False) -> str:
    marker = "*" if is_selected else " "
    return (
        f"{marker} {encounter.name} | SKILL {encounter.skill} | "
        f"STAMINA {encounter.stamina.current}/{encounter.stamina.initial} | {encounter.status.value}"
    )


def format_active_encounter(state: GameState) -> str:
    active = state.encounters.active()
    if active is None:
        return "No active monster. Add one and select it."
    return (
        f"Active: {active.name} | SKILL {active.skill} | "
        f"STAMINA {active.stamina.current}/{active.stamina.initial} | Status: {active.status.value}"
    )


def format_log_window(title: str, log: EventLog, channel: LogChannel, limit: int) -> List[str]:
    shown = log.recent(channel, limit)
    if not shown:
        return [f"{title}: (empty)"]
    return [f"{title}:"] + [f"  {entry}" for entry in shown]
