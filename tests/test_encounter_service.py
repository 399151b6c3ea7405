from __future__ import annotations

import pytest

from ffm.core.rng import RNG
from ffm.core.types import EncounterStatus
from ffm.domain.state import GameState
from ffm.services.encounter_service import EncounterService
from ffm.services.events import (
    ActionFailedEvent,
    EncounterAddedEvent,
    EncounterChangedEvent,
    EncounterRemovedEvent,
    FailureReason,
)
from ffm.services.factories import make_instance_id


def _service() -> EncounterService:
    return EncounterService(RNG(7))


def test_make_instance_id_skips_taken_ids() -> None:
    first = make_instance_id("enc", RNG(3))
    again = make_instance_id("enc", RNG(3), taken={first})

    assert first.startswith("enc_")
    assert len(first) == len("enc_") + 6
    assert again != first


def test_add_encounter_prepends_and_selects() -> None:
    state = GameState()
    service = _service()

    orc = service.add_encounter(state, "Orc", 7, 6)
    troll = service.add_encounter(state, "  Troll  ", 9, 12)

    assert isinstance(orc, EncounterAddedEvent)
    assert isinstance(troll, EncounterAddedEvent)
    assert troll.name == "Troll"
    assert [enc.id for enc in state.encounters.encounters] == [troll.encounter_id, orc.encounter_id]
    assert state.encounters.active_id == troll.encounter_id
    assert orc.encounter_id != troll.encounter_id


def test_add_encounter_accepts_numeric_strings_and_clamps() -> None:
    state = GameState()

    event = _service().add_encounter(state, "Dragon", "120", "1500.7")

    dragon = state.encounters.get(event.encounter_id)
    assert dragon is not None
    assert dragon.skill == 99
    assert dragon.stamina.initial == 999
    assert dragon.stamina.current == 999
    assert dragon.status is EncounterStatus.ACTIVE


@pytest.mark.parametrize(
    "name, skill, stamina",
    [
        ("", 7, 6),
        ("   ", 7, 6),
        ("Orc", "seven", 6),
        ("Orc", 7, None),
        ("Orc", True, 6),
        ("Orc", float("nan"), 6),
    ],
)
def test_add_encounter_rejects_bad_input(name: str, skill: object, stamina: object) -> None:
    state = GameState()

    event = _service().add_encounter(state, name, skill, stamina)

    assert isinstance(event, ActionFailedEvent)
    assert event.reason is FailureReason.INVALID_INPUT
    assert state.encounters.encounters == []
    assert state.encounters.active_id is None


def test_damage_to_zero_defeats_monster() -> None:
    state = GameState()
    service = _service()
    added = service.add_encounter(state, "Orc", 7, 8)

    event = service.damage_encounter(state, added.encounter_id, 10)

    assert isinstance(event, EncounterChangedEvent)
    assert event.stamina == 0
    assert event.status is EncounterStatus.DEFEATED


def test_healing_a_monster_is_capped_at_initial() -> None:
    state = GameState()
    service = _service()
    added = service.add_encounter(state, "Orc", 7, 8)
    service.damage_encounter(state, added.encounter_id, 2)

    event = service.damage_encounter(state, added.encounter_id, -5)

    assert event.stamina == 8


def test_toggle_escape_on_defeated_monster_marks_escaped() -> None:
    state = GameState()
    service = _service()
    added = service.add_encounter(state, "Orc", 7, 2)
    service.damage_encounter(state, added.encounter_id, 2)

    first = service.toggle_encounter_escaped(state, added.encounter_id)
    second = service.toggle_encounter_escaped(state, added.encounter_id)

    assert first.status is EncounterStatus.ESCAPED
    assert second.status is EncounterStatus.ACTIVE


def test_remove_active_encounter_clears_selection() -> None:
    state = GameState()
    service = _service()
    orc = service.add_encounter(state, "Orc", 7, 6)
    troll = service.add_encounter(state, "Troll", 9, 12)

    event = service.remove_encounter(state, troll.encounter_id)

    assert isinstance(event, EncounterRemovedEvent)
    assert state.encounters.active_id is None
    assert [enc.id for enc in state.encounters.encounters] == [orc.encounter_id]


def test_set_active_encounter_selects_existing_monster() -> None:
    state = GameState()
    service = _service()
    orc = service.add_encounter(state, "Orc", 7, 6)
    service.add_encounter(state, "Troll", 9, 12)

    service.set_active_encounter(state, orc.encounter_id)

    assert state.encounters.active() is state.encounters.get(orc.encounter_id)


@pytest.mark.parametrize("operation", ["damage", "toggle", "remove"])
def test_unknown_encounter_ids_fail(operation: str) -> None:
    state = GameState()
    service = _service()

    if operation == "damage":
        event = service.damage_encounter(state, "enc_000000", 2)
    elif operation == "toggle":
        event = service.toggle_encounter_escaped(state, "enc_000000")
    else:
        event = service.remove_encounter(state, "enc_000000")

    assert isinstance(event, ActionFailedEvent)
    assert event.reason is FailureReason.INVALID_INPUT
