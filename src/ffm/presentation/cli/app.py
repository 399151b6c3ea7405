"""Console-driven UI loops for the adventure manager."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, List, Literal, Tuple

from ffm.core.types import LIST_KINDS, STAT_KEYS, PotionChoice
from ffm.data.save_store import SaveStore
from ffm.domain.encounters import Encounter
from ffm.presentation.cli import config, render
from ffm.services import GameSession, InvalidInputError, PersistenceError, parse_potion_choice
from ffm.services.events import (
    ActionFailedEvent,
    CombatRoundEvent,
    DiceRolledEvent,
    EncounterAddedEvent,
    EncounterChangedEvent,
    GameEvent,
    LuckTestedEvent,
    PotionUsedEvent,
    ProvisionEatenEvent,
    StatRolledEvent,
    StatsRolledEvent,
)

MenuAction = Literal["new_game", "load_game", "quit"]
MenuHandler = Callable[[GameSession], bool]


def main(store: SaveStore | None = None) -> None:
    """Start the interactive CLI session."""
    session = GameSession(store or SaveStore())
    print("=== Fighting Fantasy Adventure Sheet ===")
    running = True
    while running:
        action = _landing_menu_loop(session.has_save())
        if action == "quit":
            running = False
            continue
        if action == "load_game":
            session.load()
        else:
            _new_game_wizard(session)
        _run_adventure_loop(session)
    print("Farewell, adventurer!")


# -----------------------
# Landing / New Game
# -----------------------
def _landing_options(has_save: bool) -> List[Tuple[str, MenuAction]]:
    options: List[Tuple[str, MenuAction]] = [("New Game", "new_game")]
    if has_save:
        options.append(("Load Game", "load_game"))
    options.append(("Quit", "quit"))
    return options


def _landing_menu_loop(has_save: bool) -> MenuAction:
    options = _landing_options(has_save)
    print()
    print("Save found. You can load it or start a new game." if has_save else "No save found yet.")
    for idx, (label, _) in enumerate(options, start=1):
        print(f"{idx}. {label}")
    return options[_prompt_choice(len(options))][1]


def _new_game_wizard(session: GameSession) -> None:
    if session.has_save() and not _confirm("Start a NEW adventure? This overwrites the current save."):
        session.load()
        return
    _start_adventure(session)


def _start_adventure(session: GameSession) -> None:
    name = input("Adventurer name: ").strip()
    _guard_save(lambda: session.new_adventure(name))
    for key in STAT_KEYS:
        input(f"Press Enter to roll {key.upper()}...")
        _report(_guard_save(lambda: session.roll_stat(key)))


# -----------------------
# Adventure Menu
# -----------------------
def _adventure_menu_entries() -> List[Tuple[str, MenuHandler]]:
    entries: List[Tuple[str, MenuHandler]] = [
        ("View Sheet", _show_sheet),
        ("Eat Provision", lambda s: _act(s.eat_provision)),
        ("Test Your Luck", lambda s: _act(s.test_luck)),
        ("Choose Potion", _choose_potion),
        ("Drink Potion", lambda s: _act(s.use_potion)),
        ("Adjust Stats", _adjust_stats),
        ("Inventory", _edit_inventory),
        ("Encounters", _manage_encounters),
        ("Combat Round", lambda s: _act(lambda: s.combat_round(False))),
        ("Combat Round (use Luck)", lambda s: _act(lambda: s.combat_round(True))),
        ("Roll Dice", _roll_dice),
        ("View Logs", _show_logs),
        ("Export Save", _export_save),
        ("New Adventure", _restart_adventure),
    ]
    if config.debug_enabled():
        entries.append(("Dump State (DEBUG)", _dump_state))
    entries.append(("Back to Title", lambda s: False))
    return entries


def _run_adventure_loop(session: GameSession) -> None:
    while True:
        entries = _adventure_menu_entries()
        print()
        print(render.format_active_encounter(session.state))
        for idx, (label, _) in enumerate(entries, start=1):
            print(f"{idx}. {label}")
        _, handler = entries[_prompt_choice(len(entries))]
        if not handler(session):
            return


def _act(action: Callable[[], GameEvent]) -> bool:
    _report(_guard_save(action))
    return True


def _show_sheet(session: GameSession) -> bool:
    print()
    for line in render.format_sheet(session.state.sheet):
        print(line)
    return True


def _choose_potion(session: GameSession) -> bool:
    names = ", ".join(choice.value for choice in PotionChoice)
    raw = input(f"Potion ({names}): ")
    try:
        choice = parse_potion_choice(raw)
    except InvalidInputError as exc:
        print(exc)
        return True
    _act(lambda: session.choose_potion(choice))
    return True


def _adjust_stats(session: GameSession) -> bool:
    fields = list(STAT_KEYS) + ["provisions", "gold"]
    key = input(f"Which ({', '.join(fields)}): ").strip().lower()
    if key not in fields:
        print("Unknown field.")
        return True
    delta = _prompt_int("Change by (e.g. -2 or 3): ")
    if key == "provisions":
        _act(lambda: session.adjust_provisions(delta))
    elif key == "gold":
        _act(lambda: session.adjust_gold(delta))
    else:
        _act(lambda: session.adjust_stat(key, delta))
    return True


def _edit_inventory(session: GameSession) -> bool:
    kind = input(f"List ({', '.join(LIST_KINDS)}): ").strip().lower()
    if kind not in LIST_KINDS:
        print("Unknown list.")
        return True
    for line in render.format_item_list(kind.title(), session.state.sheet.items(kind)):
        print(line)
    raw = input("Type an item to add, or '-N' to remove entry N: ").strip()
    if raw.startswith("-") and raw[1:].isdigit():
        _act(lambda: session.remove_item(kind, int(raw[1:]) - 1))
    elif raw:
        _act(lambda: session.add_item(kind, raw))
    return True


def _manage_encounters(session: GameSession) -> bool:
    registry = session.state.encounters
    print()
    if not registry.encounters:
        print("No encounters yet.")
    for idx, encounter in enumerate(registry.encounters, start=1):
        print(f"{idx}. {render.format_encounter(encounter, is_selected=encounter.id == registry.active_id)}")
    command = input("[a]dd, [s]elect N, [d]amage N X, [e]scape N, [r]emove N, Enter to go back: ").split()
    if not command:
        return True
    verb, args = command[0].lower(), command[1:]
    if verb == "a":
        name = input("Monster name? ")
        skill = input("Monster SKILL? ")
        stamina = input("Monster STAMINA? ")
        _act(lambda: session.add_encounter(name, skill, stamina))
        return True
    encounter = _pick_encounter(session, args)
    if encounter is None:
        print("Pick an encounter by its number.")
        return True
    if verb == "s":
        _act(lambda: session.set_active_encounter(encounter.id))
    elif verb == "d" and len(args) > 1 and args[1].isdigit():
        _act(lambda: session.damage_encounter(encounter.id, int(args[1])))
    elif verb == "e":
        _act(lambda: session.toggle_encounter_escaped(encounter.id))
    elif verb == "r":
        _act(lambda: session.remove_encounter(encounter.id))
    else:
        print("Unknown command.")
    return True


def _pick_encounter(session: GameSession, args: List[str]) -> Encounter | None:
    if not args or not args[0].isdigit():
        return None
    index = int(args[0]) - 1
    encounters = session.state.encounters.encounters
    return encounters[index] if 0 <= index < len(encounters) else None


def _roll_dice(session: GameSession) -> bool:
    settings = config.load_config()
    raw = input(f"Dice as COUNT SIDES (blank for {settings['dice_count']} {settings['dice_sides']}, 'clear' to wipe log): ")
    parts = raw.split()
    if parts == ["clear"]:
        return _act(session.clear_dice_log)
    remember = len(parts) == 2 and all(part.isdigit() for part in parts)
    if remember:
        settings = {"dice_count": int(parts[0]), "dice_sides": int(parts[1])}
    event = _guard_save(lambda: session.roll_dice(settings["dice_count"], settings["dice_sides"]))
    _report(event)
    if remember and isinstance(event, DiceRolledEvent):
        try:
            config.save_config(settings)
        except OSError as exc:
            print(f"Warning: dice preference not saved ({exc}).")
    for line in render.format_log_window("Recent rolls", session.state.log, "dice", render.DICE_LOG_WINDOW):
        print(line)
    return True


def _show_logs(session: GameSession) -> bool:
    log = session.state.log
    print()
    for line in render.format_log_window("Luck", log, "luck", render.LUCK_LOG_WINDOW):
        print(line)
    for line in render.format_log_window("Combat", log, "combat", render.COMBAT_LOG_WINDOW):
        print(line)
    for line in render.format_log_window("Dice", log, "dice", render.DICE_LOG_WINDOW):
        print(line)
    return True


def _export_save(session: GameSession) -> bool:
    raw = input("Export directory (blank for current directory): ").strip()
    try:
        path = session.export(Path(raw or "."))
    except PersistenceError as exc:
        print(f"Export failed: {exc}")
        return True
    print(f"Exported to {path}")
    return True


def _restart_adventure(session: GameSession) -> bool:
    if not _confirm("Start a NEW adventure? This overwrites the current save."):
        return True
    _start_adventure(session)
    return True


def _dump_state(session: GameSession) -> bool:
    print(json.dumps(session.snapshot(), indent=2))
    return True


# -----------------------
# Helpers
# -----------------------
def _guard_save(action: Callable[[], object]):
    try:
        return action()
    except PersistenceError as exc:
        print(f"Warning: progress could not be saved ({exc}).")
        return None


def _describe_event(event: object) -> str | None:
    if event is None:
        return None
    if isinstance(event, ActionFailedEvent):
        return event.message
    if isinstance(event, StatRolledEvent):
        return f"{event.key.upper()} {event.value}."
    if isinstance(event, StatsRolledEvent):
        return f"SKILL {event.skill}, STAMINA {event.stamina}, LUCK {event.luck}."
    if isinstance(event, ProvisionEatenEvent):
        return f"Restored {event.restored} STAMINA ({event.stamina}). Provisions left: {event.provisions_left}."
    if isinstance(event, LuckTestedEvent):
        verdict = "You are LUCKY!" if event.lucky else "You are UNLUCKY."
        return f"Rolled {event.roll} vs {event.threshold}. {verdict} LUCK now {event.luck_after}."
    if isinstance(event, PotionUsedEvent):
        return f"Drank the Potion of {event.choice.value.title()}."
    if isinstance(event, CombatRoundEvent):
        if event.outcome == "tie":
            return f"Attack strengths tied at {event.player_attack_strength}. No damage."
        winner = "You wound the monster" if event.outcome == "player" else "The monster wounds you"
        return (
            f"{winner} for {event.damage} "
            f"(AS {event.player_attack_strength} vs {event.monster_attack_strength})."
        )
    if isinstance(event, EncounterAddedEvent):
        return f"{event.name} added and selected."
    if isinstance(event, EncounterChangedEvent):
        return f"Monster is {event.status.value} with {event.stamina} STAMINA."
    if isinstance(event, DiceRolledEvent):
        return f"Rolled {len(event.rolls)}d{event.sides}: {' + '.join(map(str, event.rolls))} = {event.total}"
    return "Done."


def _report(event: object) -> None:
    message = _describe_event(event)
    if message:
        print(f"- {message}")


def _confirm(question: str) -> bool:
    return input(f"{question} [y/N]: ").strip().lower() in ("y", "yes")


def _prompt_int(prompt: str) -> int:
    while True:
        raw = input(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            print("Please enter a whole number.")


def _prompt_choice(choice_count: int) -> int:
    while True:
        raw = input("Select an option: ").strip()
        try:
            index = int(raw) - 1
        except ValueError:
            print("Please enter a number.")
            continue
        if 0 <= index < choice_count:
            return index
        print(f"Please enter a value between 1 and {choice_count}.")
