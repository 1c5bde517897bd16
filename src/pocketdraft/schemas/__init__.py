from .army import ArmyRead, UnitRead
from .troop import FactionRead, TroopRead, TroopRecord

__all__ = [
    "ArmyRead",
    "FactionRead",
    "TroopRead",
    "TroopRecord",
    "UnitRead",
]
