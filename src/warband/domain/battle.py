"""Battle resolution between two armies."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from warband.domain.army import Army
from warband.domain.enums import UnitKind
from warband.domain.rules_config import DEFAULT_RULES, RulesConfig

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BattleReport:
    """Summary of a resolved battle."""

    result: str
    winner: Army | None
    strength_a: float
    strength_b: float
    losses_a: list[UnitKind] = field(default_factory=list)
    losses_b: list[UnitKind] = field(default_factory=list)

    @property
    def is_draw(self) -> bool:
        return self.winner is None


def fight(army_a: Army, army_b: Army, *, rules: RulesConfig = DEFAULT_RULES) -> BattleReport:
    """Resolve a battle and return the full report.

    The stronger army collects the victory reward and the weaker one loses a
    unit from each of its strongest groups. On equal strength both sides lose
    a unit from their single strongest group.
    """

    strength_a = army_a.total_strength()
    strength_b = army_b.total_strength()
    losses_a: list[UnitKind] = []
    losses_b: list[UnitKind] = []

    if strength_a > strength_b:
        winner: Army | None = army_a
        army_a.add_gold(rules.battle.victory_reward)
        losses_b = army_b.lose_strongest_units(rules.battle.defeat_losses)
        result = f"{army_a.name} wins"
    elif strength_b > strength_a:
        winner = army_b
        army_b.add_gold(rules.battle.victory_reward)
        losses_a = army_a.lose_strongest_units(rules.battle.defeat_losses)
        result = f"{army_b.name} wins"
    else:
        winner = None
        losses_a = army_a.lose_strongest_units(rules.battle.draw_losses)
        losses_b = army_b.lose_strongest_units(rules.battle.draw_losses)
        result = rules.battle.draw_result

    army_a.log_battle(army_b.name, army_b.civilization, result)
    army_b.log_battle(army_a.name, army_a.civilization, result)

    logger.info(
        "battle %r (%s) vs %r (%s): %s", army_a.name, strength_a, army_b.name, strength_b, result
    )
    return BattleReport(
        result=result,
        winner=winner,
        strength_a=strength_a,
        strength_b=strength_b,
        losses_a=losses_a,
        losses_b=losses_b,
    )


def battle(army_a: Army, army_b: Army, *, rules: RulesConfig = DEFAULT_RULES) -> str:
    """Resolve a battle and return the result text logged by both armies."""

    return fight(army_a, army_b, rules=rules).result
