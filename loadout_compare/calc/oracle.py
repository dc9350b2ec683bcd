"""
Combat oracle boundary.

The comparison engine never computes combat formulas itself. It asks a
CombatOracle for calculator instances, one per (loadout, monster) pair, and
reads metrics off them. Constructing a calculator performs the calculation.

Implementations:
- MockCombatOracle (loadout_compare.calc.mock_oracle) for testing
- Any real calculator wrapped in the two base classes below
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Optional, Protocol, runtime_checkable

from loadout_compare.data_models import Loadout, Monster


@dataclass(frozen=True)
class CalcOpts:
    """Options passed to every calculator construction."""

    loadout_name: str = ""
    disable_monster_scaling: bool = False
    using_special_attack: bool = False

    def with_special_attack(self) -> "CalcOpts":
        """Copy of these options with special-attack mode forced on."""
        return replace(self, using_special_attack=True)


@runtime_checkable
class HitDistribution(Protocol):
    """Hit distribution returned by a player calculator."""

    def expected_damage(self) -> float:
        """Mean damage of a single attack."""
        ...


class BasePlayerVsNPCCalc(ABC):
    """Abstract calculator for a loadout attacking a monster."""

    def __init__(self, player: Loadout, monster: Monster, opts: CalcOpts):
        self.player = player
        self.monster = monster
        self.opts = opts

    @abstractmethod
    def dps(self) -> float:
        """Damage per second dealt to the monster."""
        pass

    @abstractmethod
    def distribution(self) -> HitDistribution:
        """Distribution of damage per attack."""
        pass

    @abstractmethod
    def ttk(self) -> Optional[float]:
        """Expected seconds to kill, or None if the monster cannot die."""
        pass

    @abstractmethod
    def max_hit(self) -> int:
        """Largest possible single hit."""
        pass

    @abstractmethod
    def expected_def_reduction(self) -> float:
        """Expected monster defence levels removed by one special attack."""
        pass


class BaseNPCVsPlayerCalc(ABC):
    """Abstract calculator for a monster attacking a loadout."""

    def __init__(self, player: Loadout, monster: Monster, opts: CalcOpts):
        self.player = player
        self.monster = monster
        self.opts = opts

    @abstractmethod
    def dps(self) -> float:
        """Damage per second taken by the player."""
        pass

    @abstractmethod
    def average_damage_taken(self) -> Optional[float]:
        """Expected damage taken per kill, or None if the kill never happens."""
        pass


class CombatOracle(ABC):
    """Factory for calculator instances."""

    @abstractmethod
    def player_vs_npc(
        self, player: Loadout, monster: Monster, opts: CalcOpts
    ) -> BasePlayerVsNPCCalc:
        pass

    @abstractmethod
    def npc_vs_player(
        self, player: Loadout, monster: Monster, opts: CalcOpts
    ) -> BaseNPCVsPlayerCalc:
        pass
