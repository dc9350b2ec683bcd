"""Combat oracle and monster scaling boundaries."""

from loadout_compare.calc.oracle import (
    CalcOpts,
    HitDistribution,
    BasePlayerVsNPCCalc,
    BaseNPCVsPlayerCalc,
    CombatOracle,
)
from loadout_compare.calc.scaling import MonsterScaler, NullMonsterScaler
from loadout_compare.calc.mock_oracle import (
    MockCombatOracle,
    MockMonsterScaler,
    MockPlayerVsNPCCalc,
    MockNPCVsPlayerCalc,
)

__all__ = [
    "CalcOpts",
    "HitDistribution",
    "BasePlayerVsNPCCalc",
    "BaseNPCVsPlayerCalc",
    "CombatOracle",
    "MonsterScaler",
    "NullMonsterScaler",
    "MockCombatOracle",
    "MockMonsterScaler",
    "MockPlayerVsNPCCalc",
    "MockNPCVsPlayerCalc",
]
