"""Session object owning the running GameState and its autosave."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, TypeVar

from ffm.core.rng import RNG
from ffm.core.types import ListKind, PotionChoice, StatKey
from ffm.data.save_store import SaveStore
from ffm.domain.state import GameState
from ffm.services.dice_service import DiceService
from ffm.services.encounter_service import EncounterService
from ffm.services.errors import PersistenceError
from ffm.services.events import (
    ActionFailedEvent,
    ActiveEncounterSetEvent,
    CombatRoundEvent,
    DiceRolledEvent,
    EncounterAddedEvent,
    EncounterChangedEvent,
    EncounterRemovedEvent,
    GameEvent,
    LogClearedEvent,
    LuckTestedEvent,
    PotionChosenEvent,
    PotionUsedEvent,
    ProvisionEatenEvent,
    SheetUpdatedEvent,
    StatAdjustedEvent,
    StatRolledEvent,
    StatsRolledEvent,
    is_failure,
)
from ffm.services.rules_service import RulesService
from ffm.services.save_service import SaveService
from ffm.services.sheet_service import SheetService

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=GameEvent)


class GameSession:
    """Routes UI actions to the services and snapshots the state after each one.

    A failed snapshot write raises PersistenceError, but the in-memory
    change made by the action is kept.
    """

    def __init__(
        self,
        store: SaveStore,
        *,
        rng: RNG | None = None,
        save_service: SaveService | None = None,
    ) -> None:
        self._store = store
        self._rng = rng or RNG()
        self._save_service = save_service or SaveService()
        self.rules = RulesService(self._rng)
        self.sheet = SheetService()
        self.encounters = EncounterService(self._rng)
        self.dice = DiceService(self._rng)
        self.state = GameState()

    # -----------------------
    # Persistence
    # -----------------------
    def has_save(self) -> bool:
        return self._store.exists()

    def load(self) -> GameState:
        """Replace the state with the stored snapshot, or a fresh one if unreadable."""
        try:
            payload = self._store.read()
        except PersistenceError as exc:
            logger.warning("Ignoring unreadable save: %s", exc)
            payload = None
        self.state = self._save_service.deserialize(payload) if payload is not None else GameState()
        return self.state

    def save(self) -> None:
        try:
            self._store.write(self._save_service.serialize(self.state))
        except PersistenceError:
            logger.error("Autosave failed; keeping in-memory state.", exc_info=True)
            raise

    def snapshot(self) -> dict:
        return self._save_service.serialize(self.state)

    def export(self, directory: Path | str) -> Path:
        path = self._store.export(self.snapshot(), directory)
        logger.info("Exported save to %s", path)
        return path

    def new_adventure(self, name: str = "") -> GameState:
        """Discard the current adventure and start a fresh sheet."""
        self.state = GameState()
        self.sheet.set_name(self.state, name)
        self.save()
        return self.state

    # -----------------------
    # Rules
    # -----------------------
    def roll_initial_stats(self) -> StatsRolledEvent:
        return self._run(self.rules.roll_initial_stats)

    def roll_stat(self, key: StatKey) -> StatRolledEvent | ActionFailedEvent:
        return self._run(lambda state: self.rules.roll_stat(state, key))

    def eat_provision(self) -> ProvisionEatenEvent | ActionFailedEvent:
        return self._run(self.rules.eat_provision)

    def test_luck(self) -> LuckTestedEvent | ActionFailedEvent:
        return self._run(self.rules.test_luck)

    def use_potion(self) -> PotionUsedEvent | ActionFailedEvent:
        return self._run(self.rules.use_potion)

    def combat_round(self, use_luck_bonus: bool = False) -> CombatRoundEvent | ActionFailedEvent:
        return self._run(lambda state: self.rules.combat_round(state, use_luck_bonus))

    # -----------------------
    # Sheet
    # -----------------------
    def set_name(self, name: str) -> SheetUpdatedEvent:
        return self._run(lambda state: self.sheet.set_name(state, name))

    def adjust_stat(self, key: StatKey, delta: int) -> StatAdjustedEvent | ActionFailedEvent:
        return self._run(lambda state: self.sheet.adjust_stat(state, key, delta))

    def adjust_provisions(self, delta: int) -> StatAdjustedEvent:
        return self._run(lambda state: self.sheet.adjust_provisions(state, delta))

    def adjust_gold(self, delta: int) -> StatAdjustedEvent:
        return self._run(lambda state: self.sheet.adjust_gold(state, delta))

    def add_item(self, kind: ListKind, text: str) -> SheetUpdatedEvent | ActionFailedEvent:
        return self._run(lambda state: self.sheet.add_item(state, kind, text))

    def remove_item(self, kind: ListKind, index: int) -> SheetUpdatedEvent | ActionFailedEvent:
        return self._run(lambda state: self.sheet.remove_item(state, kind, index))

    def choose_potion(self, choice: PotionChoice) -> PotionChosenEvent:
        return self._run(lambda state: self.sheet.choose_potion(state, choice))

    # -----------------------
    # Encounters
    # -----------------------
    def add_encounter(self, name: str, skill: object, stamina: object) -> EncounterAddedEvent | ActionFailedEvent:
        return self._run(lambda state: self.encounters.add_encounter(state, name, skill, stamina))

    def set_active_encounter(self, encounter_id: str | None) -> ActiveEncounterSetEvent:
        return self._run(lambda state: self.encounters.set_active_encounter(state, encounter_id))

    def damage_encounter(self, encounter_id: str, amount: int) -> EncounterChangedEvent | ActionFailedEvent:
        return self._run(lambda state: self.encounters.damage_encounter(state, encounter_id, amount))

    def toggle_encounter_escaped(self, encounter_id: str) -> EncounterChangedEvent | ActionFailedEvent:
        return self._run(lambda state: self.encounters.toggle_encounter_escaped(state, encounter_id))

    def remove_encounter(self, encounter_id: str) -> EncounterRemovedEvent | ActionFailedEvent:
        return self._run(lambda state: self.encounters.remove_encounter(state, encounter_id))

    # -----------------------
    # Dice
    # -----------------------
    def roll_dice(self, count: int, sides: int) -> DiceRolledEvent | ActionFailedEvent:
        return self._run(lambda state: self.dice.roll(state, count, sides))

    def clear_dice_log(self) -> LogClearedEvent:
        return self._run(self.dice.clear_log)

    def _run(self, action: Callable[[GameState], E]) -> E:
        event = action(self.state)
        if is_failure(event):
            logger.info("Action refused: %s", event.message)
        self.save()
        return event
