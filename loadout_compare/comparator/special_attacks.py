"""
Weapons whose special attack lowers the target's defence.

The defence-reduction metric only applies to loadouts wielding one of these,
matched by exact weapon name.
"""

from loadout_compare.data_models import Loadout


DEFENCE_REDUCTION_WEAPONS: frozenset[str] = frozenset({
    "Dragon warhammer",
    "Bandos godsword",
    "Tonalztics of ralos",
    "Elder maul",
})


def has_defence_reduction_special(loadout: Loadout) -> bool:
    """True when the loadout's weapon has a defence-reducing special attack."""
    return loadout.equipment.weapon_name in DEFENCE_REDUCTION_WEAPONS
