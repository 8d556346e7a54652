"""Dataclasses describing the state an army carries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UnitGroup:
    """All units of one kind held by an army.

    Groups are immutable; the owning army replaces a group when its count or
    strength changes.
    """

    count: int
    strength_per_unit: float

    @property
    def total_strength(self) -> float:
        return self.count * self.strength_per_unit


@dataclass(frozen=True, slots=True)
class BattleRecord:
    """Entry in an army's battle history."""

    opponent_name: str
    opponent_civilization: str
    result: str
