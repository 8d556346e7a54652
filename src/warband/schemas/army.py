from __future__ import annotations

from pydantic import BaseModel, Field

from warband.domain.army import Army
from warband.domain.enums import UnitKind
from warband.domain.models import BattleRecord, UnitGroup


class UnitGroupRead(BaseModel):
    count: int = Field(..., gt=0, description="Units of this kind held by the army")
    strength_per_unit: float = Field(..., ge=0.0, description="Current strength of each unit")
    total_strength: float = Field(..., ge=0.0, description="count * strength_per_unit")

    @classmethod
    def from_group(cls, group: UnitGroup) -> UnitGroupRead:
        return cls(
            count=group.count,
            strength_per_unit=group.strength_per_unit,
            total_strength=group.total_strength,
        )


class BattleRecordRead(BaseModel):
    opponent_name: str = Field(..., description="Name of the opposing army")
    opponent_civilization: str = Field(..., description="Civilization of the opposing army")
    result: str = Field(..., description="Outcome text shared by both participants")

    @classmethod
    def from_record(cls, record: BattleRecord) -> BattleRecordRead:
        return cls(
            opponent_name=record.opponent_name,
            opponent_civilization=record.opponent_civilization,
            result=record.result,
        )


class ArmyRead(BaseModel):
    name: str = Field(..., description="Display name of the army")
    civilization: str = Field(..., description="Civilization preset the army was raised from")
    gold: int = Field(..., description="Gold available for training and transformation")
    total_strength: float = Field(..., ge=0.0, description="Sum of all unit group strengths")
    units: dict[UnitKind, UnitGroupRead] = Field(
        default_factory=dict, description="Roster keyed by unit kind"
    )
    battle_history: list[BattleRecordRead] = Field(
        default_factory=list, description="Battles fought, oldest first"
    )

    @classmethod
    def from_army(cls, army: Army) -> ArmyRead:
        """Snapshot an army, listing unit kinds in declaration order."""

        units = {
            kind: UnitGroupRead.from_group(army.units[kind])
            for kind in UnitKind
            if kind in army.units
        }
        return cls(
            name=army.name,
            civilization=army.civilization,
            gold=army.gold,
            total_strength=army.total_strength(),
            units=units,
            battle_history=[BattleRecordRead.from_record(r) for r in army.battle_history],
        )
