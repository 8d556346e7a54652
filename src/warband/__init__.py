"""Turn-based army management: train, transform and fight armies."""

from warband.domain.army import (
    Army,
    ArmyError,
    InsufficientGoldError,
    NoUnitsOfKindError,
    NotTransformableError,
    UnknownCivilizationError,
)
from warband.domain.battle import BattleReport, battle, fight
from warband.domain.enums import UnitKind
from warband.domain.rules_config import DEFAULT_RULES, RulesConfig

__all__ = [
    "DEFAULT_RULES",
    "Army",
    "ArmyError",
    "BattleReport",
    "InsufficientGoldError",
    "NoUnitsOfKindError",
    "NotTransformableError",
    "RulesConfig",
    "UnitKind",
    "UnknownCivilizationError",
    "battle",
    "fight",
]
