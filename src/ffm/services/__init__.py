"""Service layer exports."""

from .dice_service import DiceService
from .encounter_service import EncounterService
from .errors import InvalidInputError, PersistenceError
from .rules_service import RulesService
from .save_service import SaveService
from .session import GameSession
from .sheet_service import SheetService, parse_potion_choice

__all__ = [
    "DiceService",
    "EncounterService",
    "GameSession",
    "InvalidInputError",
    "PersistenceError",
    "RulesService",
    "SaveService",
    "SheetService",
    "parse_potion_choice",
]
