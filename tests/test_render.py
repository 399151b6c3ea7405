from __future__ import annotations

from ffm.domain.entities import CharacterSheet, Stat
from ffm.domain.event_log import EventLog
from ffm.domain.state import GameState
from ffm.presentation.cli import render
from tests.helpers.scripted_rng import add_monster, rolled_state


def test_format_stat_shows_dashes_before_rolling() -> None:
    line = render.format_stat("SKILL", Stat())

    assert line.startswith("SKILL")
    assert line.count("-") == 2


def test_format_sheet_lists_stats_and_items() -> None:
    state = rolled_state(skill=11, stamina=18, luck=9)
    state.sheet.name = "Anvar"
    state.sheet.equipment.append("Sword")

    lines = render.format_sheet(state.sheet)

    assert lines[0] == "Adventurer: Anvar"
    assert "18 / 18" in lines[2]
    assert "Equipment:" in lines
    assert "  1. Sword" in lines
    assert "Treasure: (none)" in lines
    assert lines[5] == "Potion: None - not used"


def test_unnamed_sheet_has_placeholder() -> None:
    assert render.format_sheet(CharacterSheet())[0] == "Adventurer: Unnamed"


def test_active_encounter_banner() -> None:
    state = GameState()
    assert render.format_active_encounter(state) == "No active monster. Add one and select it."

    add_monster(state, name="Ogre", skill=8, stamina=10)
    banner = render.format_active_encounter(state)

    assert banner.startswith("Active: Ogre")
    assert "STAMINA 10/10" in banner
    assert banner.endswith("Status: active")


def test_format_encounter_marks_selection() -> None:
    state = GameState()
    ogre = add_monster(state, name="Ogre")

    assert render.format_encounter(ogre, is_selected=True).startswith("* Ogre")
    assert render.format_encounter(ogre).startswith("  Ogre")


def test_log_window_shows_newest_entries_first() -> None:
    log = EventLog()
    for idx in range(30):
        log.append("dice", f"entry {idx}")

    lines = render.format_log_window("Dice", log, "dice", render.DICE_LOG_WINDOW)

    assert lines[0] == "Dice:"
    assert len(lines) == render.DICE_LOG_WINDOW + 1
    assert lines[1].endswith("entry 29")
    assert render.format_log_window("Luck", log, "luck", 5) == ["Luck: (empty)"]
