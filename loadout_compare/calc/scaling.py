"""
Monster scaling boundary.

Some monsters scale their stats with the encounter (party size, party
levels, current HP). The comparison engine only calls the two entry points
below and treats both as pure functions.
"""

from abc import ABC, abstractmethod

from loadout_compare.data_models import Monster


class MonsterScaler(ABC):
    """Scales a configured monster to the current encounter."""

    @abstractmethod
    def scale_full(self, monster: Monster) -> Monster:
        """Apply every encounter-dependent scaling rule."""
        pass

    @abstractmethod
    def scale_hp_only(self, monster: Monster) -> Monster:
        """Rescale only HP-derived values, keeping already-chosen stats."""
        pass


class NullMonsterScaler(MonsterScaler):
    """
    No-op scaler for monsters that do not scale.

    Returns the monster unchanged from both entry points.
    """

    def scale_full(self, monster: Monster) -> Monster:
        return monster

    def scale_hp_only(self, monster: Monster) -> Monster:
        return monster
