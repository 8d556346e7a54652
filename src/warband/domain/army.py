"""Army aggregate: roster, gold, training and transformation rules.

An :class:`Army` is created from a civilization preset and afterwards only
changes through its own operations. The roster is sparse: a kind is present
in :attr:`Army.units` only while the army holds at least one unit of it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from types import MappingProxyType

from warband.domain.enums import UnitKind
from warband.domain.models import BattleRecord, UnitGroup
from warband.domain.rules_config import DEFAULT_RULES, RulesConfig

logger = logging.getLogger(__name__)


class ArmyError(RuntimeError):
    """Base class for army rule violations."""


class UnknownCivilizationError(ArmyError):
    """Raised when an army is created for a civilization with no preset."""

    def __init__(self, civilization: str) -> None:
        super().__init__(f"unknown civilization: {civilization!r}")
        self.civilization = civilization


class NoUnitsOfKindError(ArmyError):
    """Raised when an operation targets a kind the army does not hold."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"no units of kind {kind!r}")
        self.kind = kind


class NotTransformableError(ArmyError):
    """Raised when a kind has no transformation target."""

    def __init__(self, kind: UnitKind) -> None:
        super().__init__(f"units of kind {kind.value!r} cannot be transformed")
        self.kind = kind


class InsufficientGoldError(ArmyError):
    """Raised when the army cannot pay for an action."""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(f"not enough gold: {required} required, {available} available")
        self.required = required
        self.available = available


class Army:
    """A named army belonging to a civilization."""

    def __init__(
        self,
        civilization: str,
        name: str | None = None,
        *,
        rules: RulesConfig = DEFAULT_RULES,
    ) -> None:
        preset = rules.preset_for(civilization)
        if preset is None:
            raise UnknownCivilizationError(civilization)

        self.rules = rules
        self.name = name or rules.army.default_name
        self.civilization = civilization
        self.civilization_key = civilization.strip().lower()
        self.gold = rules.army.initial_gold
        self.battle_history: list[BattleRecord] = []
        self._units: dict[UnitKind, UnitGroup] = {}

        for kind in UnitKind:
            starting = preset.get(kind, 0)
            if starting > 0:
                self._adjust_count(kind, starting)

        logger.debug(
            "raised army %r (%s) with strength %s",
            self.name,
            self.civilization,
            self.total_strength(),
        )

    def __repr__(self) -> str:
        return f"Army(name={self.name!r}, civilization={self.civilization!r}, gold={self.gold})"

    @property
    def units(self) -> Mapping[UnitKind, UnitGroup]:
        """Read-only view of the roster."""
        return MappingProxyType(self._units)

    def total_strength(self) -> float:
        return sum(group.total_strength for group in self._units.values())

    def train_unit_type(self, kind: UnitKind | str) -> UnitGroup:
        """Train every unit of ``kind``, raising their per-unit strength.

        Raises:
            NoUnitsOfKindError: If the army holds no units of ``kind``
            InsufficientGoldError: If the army cannot pay the training cost
        """
        unit_kind = self._held_kind(kind)
        stats = self.rules.stats_for(unit_kind)
        self._require_gold(stats.train_cost)

        current = self._units[unit_kind]
        group = replace(
            current, strength_per_unit=current.strength_per_unit + stats.train_strength_gain
        )
        self._units[unit_kind] = group
        self.gold -= stats.train_cost
        logger.debug(
            "%s trained %s to strength %s (gold left %s)",
            self.name,
            unit_kind.value,
            group.strength_per_unit,
            self.gold,
        )
        return group

    def transform_unit_type(self, kind: UnitKind | str) -> UnitKind:
        """Upgrade one unit of ``kind`` into the next kind of its chain.

        The upgraded unit joins the target group at that group's current
        strength, or at the target's base strength when the group is new.
        Training on the source kind is not carried over.

        Returns:
            The kind the unit was transformed into

        Raises:
            NoUnitsOfKindError: If the army holds no units of ``kind``
            NotTransformableError: If ``kind`` has no transformation target
            InsufficientGoldError: If the army cannot pay the transformation cost
        """
        unit_kind = self._held_kind(kind)
        stats = self.rules.stats_for(unit_kind)
        if stats.transform_to is None or stats.transform_cost is None:
            raise NotTransformableError(unit_kind)
        self._require_gold(stats.transform_cost)

        self._adjust_count(unit_kind, -1)
        self._adjust_count(stats.transform_to, 1)
        self.gold -= stats.transform_cost
        logger.debug(
            "%s transformed one %s into %s (gold left %s)",
            self.name,
            unit_kind.value,
            stats.transform_to.value,
            self.gold,
        )
        return stats.transform_to

    def lose_strongest_units(self, count: int = 2) -> list[UnitKind]:
        """Remove one unit from each of the ``count`` strongest groups.

        Groups are ranked by total strength, highest first; ties go to the
        kind declared first in :class:`UnitKind`.

        Returns:
            The kinds that lost a unit, in ranking order
        """
        ranked = sorted(
            self._units.items(),
            key=lambda item: (-item[1].total_strength, item[0].order),
        )
        losses = [kind for kind, _ in ranked[: max(0, count)]]
        for kind in losses:
            self._adjust_count(kind, -1)
        if losses:
            logger.debug("%s lost units: %s", self.name, ", ".join(k.value for k in losses))
        return losses

    def add_gold(self, amount: int) -> None:
        self.gold += amount

    def log_battle(
        self, opponent_name: str, opponent_civilization: str, result: str
    ) -> BattleRecord:
        record = BattleRecord(
            opponent_name=opponent_name,
            opponent_civilization=opponent_civilization,
            result=result,
        )
        self.battle_history.append(record)
        return record

    def _held_kind(self, kind: UnitKind | str) -> UnitKind:
        try:
            unit_kind = UnitKind(kind.lower() if isinstance(kind, str) else kind)
        except ValueError:
            raise NoUnitsOfKindError(str(kind)) from None
        group = self._units.get(unit_kind)
        if group is None or group.count <= 0:
            raise NoUnitsOfKindError(unit_kind.value)
        return unit_kind

    def _require_gold(self, cost: int) -> None:
        if self.gold < cost:
            raise InsufficientGoldError(cost, self.gold)

    def _adjust_count(self, kind: UnitKind, delta: int) -> None:
        # Only kinds with a positive count stay in the roster.
        group = self._units.get(kind)
        if group is None:
            group = UnitGroup(count=0, strength_per_unit=self.rules.stats_for(kind).base_strength)
        group = replace(group, count=group.count + delta)
        if group.count > 0:
            self._units[kind] = group
        else:
            self._units.pop(kind, None)
