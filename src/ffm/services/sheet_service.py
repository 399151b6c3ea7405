"""Manual edits to the character sheet: name, steppers, inventory and potion choice."""
from __future__ import annotations

from ffm.core.types import LIST_KINDS, STAT_KEYS, ListKind, PotionChoice, StatKey
from ffm.domain.entities import clamp
from ffm.domain.entities.sheet import MAX_GOLD, MAX_PROVISIONS
from ffm.domain.state import GameState
from ffm.services.errors import InvalidInputError
from ffm.services.events import (
    ActionFailedEvent,
    FailureReason,
    PotionChosenEvent,
    SheetUpdatedEvent,
    StatAdjustedEvent,
)


def parse_potion_choice(value: object) -> PotionChoice:
    """Turn a raw value into a PotionChoice, rejecting anything unknown."""
    if isinstance(value, PotionChoice):
        return value
    if isinstance(value, str):
        try:
            return PotionChoice(value.strip().lower())
        except ValueError:
            pass
    raise InvalidInputError(f"Unknown potion choice: {value!r}")


class SheetService:
    """Applies player-driven edits that sit outside the dice rules."""

    def set_name(self, state: GameState, name: str) -> SheetUpdatedEvent:
        state.sheet.name = (name or "").strip()
        return SheetUpdatedEvent(field="name")

    def adjust_stat(self, state: GameState, key: StatKey, delta: int) -> StatAdjustedEvent | ActionFailedEvent:
        if key not in STAT_KEYS:
            return ActionFailedEvent(FailureReason.INVALID_INPUT, f"Unknown stat '{key}'.")
        if not state.sheet.has_stats_rolled:
            return ActionFailedEvent(FailureReason.STATS_NOT_ROLLED, "Roll stats first.")
        stat = state.sheet.stat(key)
        stat.adjust(delta)
        return StatAdjustedEvent(key=key, value=stat.current)

    def adjust_provisions(self, state: GameState, delta: int) -> StatAdjustedEvent:
        sheet = state.sheet
        sheet.provisions = clamp(sheet.provisions + delta, 0, MAX_PROVISIONS)
        return StatAdjustedEvent(key="provisions", value=sheet.provisions)

    def adjust_gold(self, state: GameState, delta: int) -> StatAdjustedEvent:
        sheet = state.sheet
        sheet.gold = clamp(sheet.gold + delta, 0, MAX_GOLD)
        return StatAdjustedEvent(key="gold", value=sheet.gold)

    def add_item(self, state: GameState, kind: ListKind, text: str) -> SheetUpdatedEvent | ActionFailedEvent:
        if kind not in LIST_KINDS:
            return ActionFailedEvent(FailureReason.INVALID_INPUT, f"Unknown list '{kind}'.")
        clean = (text or "").strip()
        if not clean:
            return ActionFailedEvent(FailureReason.INVALID_INPUT, "Nothing to add.")
        state.sheet.items(kind).append(clean)
        return SheetUpdatedEvent(field=kind)

    def remove_item(self, state: GameState, kind: ListKind, index: int) -> SheetUpdatedEvent | ActionFailedEvent:
        if kind not in LIST_KINDS:
            return ActionFailedEvent(FailureReason.INVALID_INPUT, f"Unknown list '{kind}'.")
        items = state.sheet.items(kind)
        if not 0 <= index < len(items):
            return ActionFailedEvent(FailureReason.INVALID_INPUT, f"No {kind} entry at position {index + 1}.")
        del items[index]
        return SheetUpdatedEvent(field=kind)

    def choose_potion(self, state: GameState, choice: PotionChoice) -> PotionChosenEvent:
        state.sheet.potion.choice = parse_potion_choice(choice)
        return PotionChosenEvent(choice=state.sheet.potion.choice)
