from .army import ArmyRead, BattleRecordRead, UnitGroupRead

__all__ = [
    "ArmyRead",
    "BattleRecordRead",
    "UnitGroupRead",
]
