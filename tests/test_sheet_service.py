from __future__ import annotations

import pytest

from ffm.core.types import PotionChoice
from ffm.domain.state import GameState
from ffm.services.errors import InvalidInputError
from ffm.services.events import ActionFailedEvent, FailureReason, StatAdjustedEvent
from ffm.services.sheet_service import SheetService, parse_potion_choice
from tests.helpers.scripted_rng import rolled_state


def test_set_name_strips_whitespace() -> None:
    state = GameState()

    SheetService().set_name(state, "  Zagor's Bane ")

    assert state.sheet.name == "Zagor's Bane"


def test_adjust_stat_stays_within_initial() -> None:
    state = rolled_state(skill=10, stamina=20, luck=9)
    service = SheetService()

    service.adjust_stat(state, "stamina", -25)
    assert state.sheet.stamina.current == 0

    event = service.adjust_stat(state, "stamina", 50)
    assert isinstance(event, StatAdjustedEvent)
    assert event.value == 20


def test_adjust_stat_requires_rolled_stats() -> None:
    state = GameState()

    event = SheetService().adjust_stat(state, "skill", 1)

    assert isinstance(event, ActionFailedEvent)
    assert event.reason is FailureReason.STATS_NOT_ROLLED
    assert state.sheet.skill.current is None
    assert state.log.luck == []


def test_adjust_stat_rejects_unknown_key() -> None:
    event = SheetService().adjust_stat(rolled_state(), "charisma", 1)

    assert isinstance(event, ActionFailedEvent)
    assert event.reason is FailureReason.INVALID_INPUT


def test_provisions_and_gold_are_clamped() -> None:
    state = GameState()
    service = SheetService()

    service.adjust_provisions(state, -50)
    service.adjust_gold(state, 2_000_000)

    assert state.sheet.provisions == 0
    assert state.sheet.gold == 999_999

    service.adjust_provisions(state, 5000)
    service.adjust_gold(state, -3_000_000)

    assert state.sheet.provisions == 999
    assert state.sheet.gold == 0


def test_add_and_remove_items() -> None:
    state = GameState()
    service = SheetService()

    service.add_item(state, "equipment", " Sword ")
    service.add_item(state, "equipment", "Lantern")
    service.add_item(state, "treasure", "Gem")
    service.remove_item(state, "equipment", 0)

    assert state.sheet.equipment == ["Lantern"]
    assert state.sheet.treasure == ["Gem"]


def test_add_item_rejects_blank_text() -> None:
    state = GameState()

    event = SheetService().add_item(state, "treasure", "   ")

    assert isinstance(event, ActionFailedEvent)
    assert event.reason is FailureReason.INVALID_INPUT
    assert state.sheet.treasure == []


def test_remove_item_out_of_range_fails() -> None:
    state = GameState()
    state.sheet.equipment.append("Rope")

    event = SheetService().remove_item(state, "equipment", 3)

    assert isinstance(event, ActionFailedEvent)
    assert state.sheet.equipment == ["Rope"]


def test_choose_potion_records_choice() -> None:
    state = GameState()

    event = SheetService().choose_potion(state, PotionChoice.FORTUNE)

    assert event.choice is PotionChoice.FORTUNE
    assert state.sheet.potion.choice is PotionChoice.FORTUNE
    assert state.sheet.potion.used is False


@pytest.mark.parametrize("raw, expected", [("skill", PotionChoice.SKILL), (" Strength ", PotionChoice.STRENGTH)])
def test_parse_potion_choice_accepts_known_names(raw: str, expected: PotionChoice) -> None:
    assert parse_potion_choice(raw) is expected


@pytest.mark.parametrize("raw", ["dexterity", "", 3, None])
def test_parse_potion_choice_rejects_unknown_values(raw: object) -> None:
    with pytest.raises(InvalidInputError):
        parse_potion_choice(raw)
