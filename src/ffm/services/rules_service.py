"""Rules engine: stat rolls, provisions, luck tests, potions and combat rounds."""
from __future__ import annotations

import logging

from ffm.core.rng import RNG
from ffm.core.types import STAT_KEYS, CombatOutcome, LogChannel, PotionChoice, StatKey
from ffm.domain.caps import enforce_caps
from ffm.domain.entities import clamp
from ffm.domain.state import GameState
from ffm.services.events import (
    ActionFailedEvent,
    CombatRoundEvent,
    FailureReason,
    LuckTestedEvent,
    PotionUsedEvent,
    ProvisionEatenEvent,
    StatRolledEvent,
    StatsRolledEvent,
)

logger = logging.getLogger(__name__)

PROVISION_STAMINA = 4
BASE_DAMAGE = 2
# (lucky, unlucky) damage when the player wins / loses a round and tests luck.
LUCKY_HIT_DAMAGE = (4, 1)
LUCKY_WOUND_DAMAGE = (1, 3)

_MSG_ROLL_FIRST = "Roll stats first."


class RulesService:
    """Applies the gamebook rules to a GameState."""

    def __init__(self, rng: RNG) -> None:
        self._rng = rng

    # -----------------------
    # Character Creation
    # -----------------------
    def roll_initial_stats(self, state: GameState) -> StatsRolledEvent:
        """Roll SKILL (1d6+6), STAMINA (2d6+12) and LUCK (1d6+6)."""
        sheet = state.sheet
        for key in STAT_KEYS:
            sheet.stat(key).set_rolled(self._roll_stat_value(key))
        state.log.append(
            "luck",
            f"Rolled initial stats: SKILL {sheet.skill.initial}, "
            f"STAMINA {sheet.stamina.initial}, LUCK {sheet.luck.initial}.",
        )
        logger.debug("Rolled stats %s/%s/%s", sheet.skill.initial, sheet.stamina.initial, sheet.luck.initial)
        return StatsRolledEvent(
            skill=sheet.skill.initial,
            stamina=sheet.stamina.initial,
            luck=sheet.luck.initial,
        )

    def roll_stat(self, state: GameState, key: StatKey) -> StatRolledEvent | ActionFailedEvent:
        """Roll a single stat, as the new-adventure wizard does one at a time."""
        if key not in STAT_KEYS:
            return ActionFailedEvent(FailureReason.INVALID_INPUT, f"Unknown stat '{key}'.")
        stat = state.sheet.stat(key)
        stat.set_rolled(self._roll_stat_value(key))
        state.log.append("luck", f"Rolled {key.upper()}: {stat.initial}.")
        return StatRolledEvent(key=key, value=stat.initial)

    # -----------------------
    # Adventure Actions
    # -----------------------
    def eat_provision(self, state: GameState) -> ProvisionEatenEvent | ActionFailedEvent:
        sheet = state.sheet
        if not sheet.has_stats_rolled:
            return self._fail(state, "luck", FailureReason.STATS_NOT_ROLLED, _MSG_ROLL_FIRST)
        if sheet.provisions <= 0:
            return self._fail(state, "luck", FailureReason.NO_PROVISIONS, "No provisions left.")

        sheet.provisions -= 1
        restored = sheet.stamina.adjust(PROVISION_STAMINA)
        state.log.append(
            "luck",
            f"Ate a provision: STAMINA +{restored} (now {sheet.stamina.current}). "
            f"{sheet.provisions} provisions left.",
        )
        return ProvisionEatenEvent(
            provisions_left=sheet.provisions,
            stamina=sheet.stamina.current,
            restored=restored,
        )

    def test_luck(self, state: GameState) -> LuckTestedEvent | ActionFailedEvent:
        """Test Your Luck. Costs one LUCK point whatever the result."""
        if not state.sheet.has_stats_rolled:
            return self._fail(state, "luck", FailureReason.STATS_NOT_ROLLED, _MSG_ROLL_FIRST)
        result = self._roll_luck(state)
        state.log.append(
            "luck",
            f"Test Your Luck: rolled {result.roll} vs LUCK {result.threshold} -> "
            f"{'LUCKY' if result.lucky else 'UNLUCKY'}. LUCK now {result.luck_after}.",
        )
        return result

    def use_potion(self, state: GameState) -> PotionUsedEvent | ActionFailedEvent:
        sheet = state.sheet
        potion = sheet.potion
        if not sheet.has_stats_rolled:
            return self._fail(state, "luck", FailureReason.STATS_NOT_ROLLED, _MSG_ROLL_FIRST)
        if potion.used:
            return self._fail(
                state, "luck", FailureReason.ALREADY_USED, "Potion already used this adventure."
            )
        if potion.choice is PotionChoice.NONE:
            return self._fail(state, "luck", FailureReason.NO_POTION_CHOSEN, "Choose a potion first.")

        if potion.choice is PotionChoice.SKILL:
            sheet.skill.restore()
            message = "Used Potion of Skill: SKILL restored to Initial."
        elif potion.choice is PotionChoice.STRENGTH:
            sheet.stamina.restore()
            message = "Used Potion of Strength: STAMINA restored to Initial."
        else:
            sheet.luck.initial += 1
            sheet.luck.restore()
            message = "Used Potion of Fortune: Initial LUCK +1, LUCK restored."

        potion.used = True
        enforce_caps(state)
        state.log.append("luck", message)
        return PotionUsedEvent(choice=potion.choice)

    # -----------------------
    # Combat
    # -----------------------
    def combat_round(self, state: GameState, use_luck_bonus: bool = False) -> CombatRoundEvent | ActionFailedEvent:
        """Resolve one round of combat against the active encounter."""
        sheet = state.sheet
        encounter = state.encounters.active()
        if not sheet.has_stats_rolled:
            return self._fail(state, "combat", FailureReason.STATS_NOT_ROLLED, _MSG_ROLL_FIRST)
        if encounter is None:
            return self._fail(
                state, "combat", FailureReason.NO_ACTIVE_ENCOUNTER, "No active monster selected."
            )
        if not encounter.is_active:
            return self._fail(
                state,
                "combat",
                FailureReason.ENCOUNTER_NOT_ACTIVE,
                f"Active monster is not in 'active' status ({encounter.status.value}).",
            )

        player_roll = self._rng.roll_2d6()
        monster_roll = self._rng.roll_2d6()
        player_skill = sheet.skill.current
        player_as = player_roll + player_skill
        monster_as = monster_roll + encounter.skill
        outcome = _compare_attack_strengths(player_as, monster_as)

        damage = BASE_DAMAGE if outcome != "tie" else 0
        luck_test: LuckTestedEvent | None = None
        if use_luck_bonus and outcome != "tie":
            luck_test = self._roll_luck(state)
            lucky_damage, unlucky_damage = LUCKY_HIT_DAMAGE if outcome == "player" else LUCKY_WOUND_DAMAGE
            damage = lucky_damage if luck_test.lucky else unlucky_damage
            state.log.append(
                "combat",
                f"Luck used: rolled {luck_test.roll} vs LUCK {luck_test.threshold} -> "
                f"{'LUCKY' if luck_test.lucky else 'UNLUCKY'}. LUCK now {luck_test.luck_after}.",
            )

        player_side = f"Player AS {player_as} (2d6={player_roll}+SKILL={player_skill})"
        monster_side = f"Monster AS {monster_as} (2d6={monster_roll}+SKILL={encounter.skill})"
        if outcome == "player":
            encounter.take_damage(damage)
            message = f"Player wins: {player_side} vs {monster_side}. Damage to {encounter.name}: {damage}."
        elif outcome == "monster":
            sheet.stamina.adjust(-damage)
            message = f"{encounter.name} wins: {monster_side} vs {player_side}. Damage to player: {damage}."
        else:
            message = f"Tie: Player AS {player_as} vs Monster AS {monster_as}. No damage."

        enforce_caps(state)
        state.log.append("combat", message)
        logger.debug("Combat round vs %s: %s for %s", encounter.id, outcome, damage)
        return CombatRoundEvent(
            encounter_id=encounter.id,
            player_roll=player_roll,
            monster_roll=monster_roll,
            player_attack_strength=player_as,
            monster_attack_strength=monster_as,
            outcome=outcome,
            damage=damage,
            luck_test=luck_test,
        )

    # -----------------------
    # Helpers
    # -----------------------
    def _roll_stat_value(self, key: StatKey) -> int:
        if key == "stamina":
            return self._rng.roll_2d6() + 12
        return self._rng.roll_die() + 6

    def _roll_luck(self, state: GameState) -> LuckTestedEvent:
        luck = state.sheet.luck
        roll = self._rng.roll_2d6()
        threshold = luck.current
        lucky = roll <= threshold
        luck.current = clamp(luck.current - 1, 0, luck.initial)
        return LuckTestedEvent(roll=roll, threshold=threshold, lucky=lucky, luck_after=luck.current)

    @staticmethod
    def _fail(state: GameState, channel: LogChannel, reason: FailureReason, message: str) -> ActionFailedEvent:
        state.log.append(channel, message)
        logger.debug("Rule refused (%s): %s", reason.value, message)
        return ActionFailedEvent(reason=reason, message=message)


def _compare_attack_strengths(player_as: int, monster_as: int) -> CombatOutcome:
    if player_as > monster_as:
        return "player"
    if monster_as > player_as:
        return "monster"
    return "tie"
