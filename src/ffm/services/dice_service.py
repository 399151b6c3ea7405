"""Freeform dice roller that only writes to the dice log."""
from __future__ import annotations

from ffm.core.rng import RNG
from ffm.domain.state import GameState
from ffm.services.events import ActionFailedEvent, DiceRolledEvent, FailureReason, LogClearedEvent

ALLOWED_DICE_COUNTS = (1, 2)
MIN_SIDES = 2
MAX_SIDES = 100


class DiceService:
    """Rolls one or two dice of any size for table lookups outside the rules."""

    def __init__(self, rng: RNG) -> None:
        self._rng = rng

    def roll(self, state: GameState, count: int = 2, sides: int = 6) -> DiceRolledEvent | ActionFailedEvent:
        if count not in ALLOWED_DICE_COUNTS:
            return ActionFailedEvent(FailureReason.INVALID_INPUT, "Roll one or two dice.")
        if isinstance(sides, bool) or not isinstance(sides, int) or not MIN_SIDES <= sides <= MAX_SIDES:
            return ActionFailedEvent(
                FailureReason.INVALID_INPUT, f"Dice need between {MIN_SIDES} and {MAX_SIDES} sides."
            )
        rolls = [self._rng.roll_die(sides) for _ in range(count)]
        if count == 2:
            label = f"Rolled 2d{sides}: {rolls[0]} + {rolls[1]} = {sum(rolls)}"
        else:
            label = f"Rolled 1d{sides}: {rolls[0]}"
        state.log.append("dice", label)
        return DiceRolledEvent(sides=sides, rolls=rolls)

    def clear_log(self, state: GameState) -> LogClearedEvent:
        state.log.clear("dice")
        return LogClearedEvent(channel="dice")
