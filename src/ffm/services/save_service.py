"""Serialization helpers for the durable snapshot of a GameState."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

from ffm.core.coerce import finite_int
from ffm.core.types import EncounterStatus, PotionChoice
from ffm.domain.caps import enforce_caps
from ffm.domain.encounters import Encounter, EncounterRegistry, MAX_MONSTER_STAMINA
from ffm.domain.entities import CharacterSheet, Potion, Stat, clamp
from ffm.domain.event_log import EventLog
from ffm.domain.state import GameState

logger = logging.getLogger(__name__)

SavePayload = Dict[str, Any]


class SaveService:
    """Converts runtime state to/from a versioned payload, repairing bad input on load."""

    SAVE_VERSION = 1

    def serialize(self, state: GameState) -> SavePayload:
        """Return a JSON-ready snapshot of the state."""
        return {
            "version": self.SAVE_VERSION,
            "player": self._serialize_sheet(state.sheet),
            "encounters": [self._serialize_encounter(encounter) for encounter in state.encounters.encounters],
            "activeEncounterId": state.encounters.active_id,
            "logs": {
                "luck": list(state.log.luck),
                "combat": list(state.log.combat),
                "dice": list(state.log.dice),
            },
        }

    def deserialize(self, payload: Any) -> GameState:
        """Rebuild a GameState from arbitrary input without raising.

        Missing or malformed fields fall back to the defaults of a fresh
        state, and every stat bound is re-applied before returning.
        """
        if not isinstance(payload, Mapping):
            logger.warning("Save data is not an object; starting fresh.")
            return GameState()
        version = payload.get("version")
        if isinstance(version, int) and version > self.SAVE_VERSION:
            logger.warning("Save version %s is newer than %s; loading what is understood.", version, self.SAVE_VERSION)

        state = GameState(
            sheet=self._coerce_sheet(payload.get("player")),
            encounters=EncounterRegistry(
                encounters=self._coerce_encounters(payload.get("encounters")),
                active_id=self._coerce_optional_str(payload.get("activeEncounterId"), "activeEncounterId"),
            ),
            log=self._coerce_logs(payload.get("logs")),
        )
        enforce_caps(state)
        return state

    @staticmethod
    def _serialize_stat(stat: Stat) -> Dict[str, int | None]:
        return {"initial": stat.initial, "current": stat.current}

    def _serialize_sheet(self, sheet: CharacterSheet) -> Dict[str, Any]:
        return {
            "name": sheet.name,
            "skill": self._serialize_stat(sheet.skill),
            "stamina": self._serialize_stat(sheet.stamina),
            "luck": self._serialize_stat(sheet.luck),
            "provisions": sheet.provisions,
            "gold": sheet.gold,
            "equipment": list(sheet.equipment),
            "treasure": list(sheet.treasure),
            "potion": {"choice": sheet.potion.choice.value, "used": sheet.potion.used},
        }

    def _serialize_encounter(self, encounter: Encounter) -> Dict[str, Any]:
        return {
            "id": encounter.id,
            "name": encounter.name,
            "skill": encounter.skill,
            "stamina": self._serialize_stat(encounter.stamina),
            "status": encounter.status.value,
        }

    def _coerce_sheet(self, value: Any) -> CharacterSheet:
        defaults = CharacterSheet()
        mapping = self._require_dict(value, "player")
        name = mapping.get("name", defaults.name)
        if not isinstance(name, str):
            self._repaired("player.name")
            name = defaults.name
        return CharacterSheet(
            name=name,
            skill=self._coerce_stat(mapping.get("skill"), "player.skill"),
            stamina=self._coerce_stat(mapping.get("stamina"), "player.stamina"),
            luck=self._coerce_stat(mapping.get("luck"), "player.luck"),
            provisions=self._coerce_int(mapping.get("provisions"), "player.provisions", default=defaults.provisions),
            gold=self._coerce_int(mapping.get("gold"), "player.gold", default=defaults.gold),
            equipment=self._coerce_str_list(mapping.get("equipment"), "player.equipment"),
            treasure=self._coerce_str_list(mapping.get("treasure"), "player.treasure"),
            potion=self._coerce_potion(mapping.get("potion")),
        )

    def _coerce_stat(self, value: Any, context: str) -> Stat:
        mapping = self._require_dict(value, context)
        initial = self._coerce_optional_int(mapping.get("initial"), f"{context}.initial")
        current = self._coerce_optional_int(mapping.get("current"), f"{context}.current")
        if initial is None:
            return Stat()
        initial = max(0, initial)
        if current is None:
            current = initial
        return Stat(initial=initial, current=current)

    def _coerce_potion(self, value: Any) -> Potion:
        mapping = self._require_dict(value, "player.potion")
        raw_choice = mapping.get("choice", PotionChoice.NONE.value)
        try:
            choice = PotionChoice(raw_choice)
        except ValueError:
            self._repaired("player.potion.choice")
            choice = PotionChoice.NONE
        return Potion(choice=choice, used=bool(mapping.get("used", False)))

    def _coerce_encounters(self, value: Any) -> List[Encounter]:
        entries = self._coerce_list(value, "encounters")
        encounters: List[Encounter] = []
        seen: set[str] = set()
        for index, entry in enumerate(entries):
            context = f"encounters[{index}]"
            if not isinstance(entry, Mapping):
                self._repaired(context, "dropped")
                continue
            encounter_id = entry.get("id")
            if not isinstance(encounter_id, str) or encounter_id in seen:
                self._repaired(f"{context}.id", "dropped")
                continue
            seen.add(encounter_id)
            encounters.append(self._coerce_encounter(encounter_id, entry, context))
        return encounters

    def _coerce_encounter(self, encounter_id: str, mapping: Mapping[str, Any], context: str) -> Encounter:
        name = mapping.get("name")
        if not isinstance(name, str):
            self._repaired(f"{context}.name")
            name = ""
        skill = self._coerce_int(mapping.get("skill"), f"{context}.skill", default=1)
        stamina_map = self._require_dict(mapping.get("stamina"), f"{context}.stamina")
        initial = self._coerce_int(stamina_map.get("initial"), f"{context}.stamina.initial", default=1)
        initial = clamp(initial, 1, MAX_MONSTER_STAMINA)
        current = self._coerce_int(stamina_map.get("current"), f"{context}.stamina.current", default=initial)
        try:
            status = EncounterStatus(mapping.get("status"))
        except ValueError:
            self._repaired(f"{context}.status")
            status = EncounterStatus.ACTIVE
        return Encounter(
            id=encounter_id,
            name=name,
            skill=skill,
            stamina=Stat(initial=initial, current=current),
            status=status,
        )

    def _coerce_logs(self, value: Any) -> EventLog:
        mapping = self._require_dict(value, "logs")
        return EventLog(
            luck=self._coerce_str_list(mapping.get("luck"), "logs.luck"),
            combat=self._coerce_str_list(mapping.get("combat"), "logs.combat"),
            dice=self._coerce_str_list(mapping.get("dice"), "logs.dice"),
        )

    def _coerce_int(self, value: Any, context: str, *, default: int) -> int:
        number = finite_int(value)
        if number is None:
            if value is not None:
                self._repaired(context)
            return default
        return number

    def _coerce_optional_int(self, value: Any, context: str) -> int | None:
        if value is None:
            return None
        number = finite_int(value)
        if number is None:
            self._repaired(context)
        return number

    def _coerce_optional_str(self, value: Any, context: str) -> str | None:
        if value is None:
            return None
        if not isinstance(value, str):
            self._repaired(context)
            return None
        return value

    def _coerce_list(self, value: Any, context: str) -> List[Any]:
        if value is None:
            return []
        if not isinstance(value, list):
            self._repaired(context)
            return []
        return value

    def _coerce_str_list(self, value: Any, context: str) -> List[str]:
        entries = self._coerce_list(value, context)
        result = [entry for entry in entries if isinstance(entry, str)]
        if len(result) != len(entries):
            self._repaired(f"{context}[]", "dropped non-string entries")
        return result

    def _require_dict(self, value: Any, context: str) -> Dict[str, Any]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            self._repaired(context)
            return {}
        return dict(value)

    @staticmethod
    def _repaired(context: str, action: str = "reset to default") -> None:
        logger.warning("Save field %s was malformed; %s.", context, action)
