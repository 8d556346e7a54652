"""Declarative rule configuration for armies and battles."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from warband.domain.enums import UnitKind


@dataclass(frozen=True, slots=True)
class UnitStats:
    """Static per-kind statistics."""

    base_strength: int
    train_strength_gain: int
    train_cost: int
    transform_to: UnitKind | None = None
    transform_cost: int | None = None

    def __post_init__(self) -> None:
        if self.transform_to is not None and self.transform_cost is None:
            raise ValueError("transform_cost is required when transform_to is set")


@dataclass(frozen=True, slots=True)
class ArmyRules:
    """Army creation constants."""

    initial_gold: int = 1000
    default_name: str = "no name army"


@dataclass(frozen=True, slots=True)
class BattleRules:
    """Battle reward and attrition constants."""

    victory_reward: int = 100
    defeat_losses: int = 2
    draw_losses: int = 1
    draw_result: str = "Draw"


def _default_unit_stats() -> Mapping[UnitKind, UnitStats]:
    return MappingProxyType(
        {
            UnitKind.PIKEMEN: UnitStats(
                base_strength=5,
                train_strength_gain=3,
                train_cost=10,
                transform_to=UnitKind.ARCHERS,
                transform_cost=30,
            ),
            UnitKind.ARCHERS: UnitStats(
                base_strength=10,
                train_strength_gain=7,
                train_cost=20,
                transform_to=UnitKind.KNIGHTS,
                transform_cost=40,
            ),
            UnitKind.KNIGHTS: UnitStats(
                base_strength=20,
                train_strength_gain=10,
                train_cost=30,
            ),
        }
    )


def _default_civilizations() -> Mapping[str, Mapping[UnitKind, int]]:
    presets = {
        "chinese": {UnitKind.PIKEMEN: 2, UnitKind.ARCHERS: 25, UnitKind.KNIGHTS: 2},
        "english": {UnitKind.PIKEMEN: 10, UnitKind.ARCHERS: 10, UnitKind.KNIGHTS: 10},
        "byzantine": {UnitKind.PIKEMEN: 5, UnitKind.ARCHERS: 8, UnitKind.KNIGHTS: 15},
    }
    return MappingProxyType({name: MappingProxyType(units) for name, units in presets.items()})


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for the simulation."""

    unit_stats: Mapping[UnitKind, UnitStats] = field(default_factory=_default_unit_stats)
    civilizations: Mapping[str, Mapping[UnitKind, int]] = field(
        default_factory=_default_civilizations
    )
    army: ArmyRules = ArmyRules()
    battle: BattleRules = BattleRules()

    def __post_init__(self) -> None:
        # Civilization keys are matched case-insensitively, so store them normalised.
        civilizations: dict[str, Mapping[UnitKind, int]] = {}
        for name, units in self.civilizations.items():
            key = name.strip().lower()
            if key in civilizations:
                raise ValueError(f"duplicate civilization preset: {name!r}")
            civilizations[key] = MappingProxyType(dict(units))
        object.__setattr__(self, "civilizations", MappingProxyType(civilizations))
        object.__setattr__(self, "unit_stats", MappingProxyType(dict(self.unit_stats)))

    def stats_for(self, kind: UnitKind) -> UnitStats:
        return self.unit_stats[kind]

    def preset_for(self, civilization: str) -> Mapping[UnitKind, int] | None:
        """Return the starting roster for ``civilization`` (case-insensitive)."""
        return self.civilizations.get(civilization.strip().lower())


DEFAULT_RULES = RulesConfig()
