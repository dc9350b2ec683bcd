"""
Sweep Enumerator for the loadout comparison engine.

Produces one InputSet per point on the chosen X axis. Each axis has its own
range rule:

| Axis                     | Range                         | Direction  |
|--------------------------|-------------------------------|------------|
| Monster defence          | scaled baseline defence -> 0  | descending |
| Monster magic            | scaled baseline magic -> 0    | descending |
| Monster HP               | scaled baseline HP -> 0       | descending |
| Player combat levels     | 0 -> 125                      | ascending  |
| Stat decay (minutes)     | 0 -> largest boost magnitude  | ascending  |

Every point patches a copy of the original, unscaled entities. Full scaling is
left to the OutputReducer; only the HP axis scales inline, because HP-only
scaling has to see the overridden current HP.
"""

from typing import Iterator, Optional, Sequence
import logging

from loadout_compare.calc.scaling import MonsterScaler
from loadout_compare.config import ComparatorConfig
from loadout_compare.data_models import (
    CompareXAxis,
    InputSet,
    Loadout,
    Monster,
    MonsterSkill,
    Skill,
    coerce_axis,
)


logger = logging.getLogger(__name__)


class UnsupportedAxisError(ValueError):
    """Raised when an axis selector has no range rule."""

    pass


# Player level axes and the skill each one sweeps
PLAYER_LEVEL_AXES: dict[CompareXAxis, Skill] = {
    CompareXAxis.PLAYER_ATTACK_LEVEL: Skill.ATTACK,
    CompareXAxis.PLAYER_STRENGTH_LEVEL: Skill.STRENGTH,
    CompareXAxis.PLAYER_DEFENCE_LEVEL: Skill.DEFENCE,
    CompareXAxis.PLAYER_RANGED_LEVEL: Skill.RANGED,
    CompareXAxis.PLAYER_MAGIC_LEVEL: Skill.MAGIC,
}

# Monster stat axes and the skill each one sweeps downward
MONSTER_STAT_AXES: dict[CompareXAxis, MonsterSkill] = {
    CompareXAxis.MONSTER_DEF: MonsterSkill.DEFENCE,
    CompareXAxis.MONSTER_DEF_INITIAL: MonsterSkill.DEFENCE,
    CompareXAxis.MONSTER_MAGIC: MonsterSkill.MAGIC,
}


def decay_boosts(loadout: Loadout, restore: int) -> Loadout:
    """
    Shrink every active boost toward zero by `restore`, keeping its sign.

    A loadout without active boosts is returned as-is.
    """
    active = loadout.active_boosts()
    if not active:
        return loadout
    decayed = {}
    for skill, boost in active.items():
        distance = abs(boost)
        if restore >= distance:
            decayed[skill] = 0
        else:
            decayed[skill] = (1 if boost > 0 else -1) * (distance - restore)
    return loadout.with_overrides(boosts=decayed)


def largest_boost(loadouts: Sequence[Loadout]) -> int:
    """Largest absolute boost across every loadout, 0 when none are boosted."""
    return max(
        (abs(value) for loadout in loadouts for value in loadout.active_boosts().values()),
        default=0,
    )


class SweepEnumerator:
    """
    Lazy, single-pass sequence of InputSets along one X axis.

    Iterating a second time yields nothing; build a new enumerator instead.
    An axis without a range rule raises UnsupportedAxisError on the first pull.
    """

    def __init__(
        self,
        x_axis: CompareXAxis,
        loadouts: Sequence[Loadout],
        original_monster: Monster,
        scaled_monster: Monster,
        scaler: MonsterScaler,
        config: Optional[ComparatorConfig] = None,
    ):
        self.x_axis = coerce_axis(CompareXAxis, x_axis)
        self.loadouts = tuple(loadouts)
        self.original_monster = original_monster
        self.scaled_monster = scaled_monster
        self.scaler = scaler
        self.config = config or ComparatorConfig()
        self._points = self._generate()

    def __iter__(self) -> Iterator[InputSet]:
        return self

    def __next__(self) -> InputSet:
        return next(self._points)

    def _monster_input(self, x: int, skill: MonsterSkill) -> InputSet:
        return InputSet(
            x_value=x,
            loadouts=self.loadouts,
            monster=self.original_monster.with_overrides(skills={skill: x}),
        )

    def _skill_input(self, x: int, skill: Skill) -> InputSet:
        return InputSet(
            x_value=x,
            loadouts=tuple(
                loadout.with_overrides(skills={skill: x}, boosts={skill: 0})
                for loadout in self.loadouts
            ),
            monster=self.original_monster,
        )

    def _hp_input(self, x: int) -> InputSet:
        monster = self.original_monster.with_overrides(monster_current_hp=x)
        return InputSet(
            x_value=x,
            loadouts=self.loadouts,
            monster=self.scaler.scale_hp_only(monster),
        )

    def _generate(self) -> Iterator[InputSet]:
        axis = self.x_axis

        if axis in MONSTER_STAT_AXES:
            skill = MONSTER_STAT_AXES[axis]
            start = self.scaled_monster.skills.get(skill)
            logger.debug(f"Sweeping monster {skill.value} from {start} down to 0")
            for x in range(start, -1, -1):
                yield self._monster_input(x, skill)
            return

        if axis == CompareXAxis.MONSTER_HP:
            start = self.scaled_monster.skills.hitpoints
            logger.debug(f"Sweeping monster HP from {start} down to 0")
            for x in range(start, -1, -1):
                yield self._hp_input(x)
            return

        if axis in PLAYER_LEVEL_AXES:
            skill = PLAYER_LEVEL_AXES[axis]
            low, high = self.config.player_level_min, self.config.player_level_max
            logger.debug(f"Sweeping player {skill.value} from {low} to {high}")
            for x in range(low, high + 1):
                yield self._skill_input(x, skill)
            return

        if axis == CompareXAxis.STAT_DECAY_RESTORE:
            limit = largest_boost(self.loadouts)
            logger.debug(f"Sweeping stat decay from 0 to {limit} minutes")
            for restore in range(0, limit + 1):
                yield InputSet(
                    x_value=restore,
                    loadouts=tuple(decay_boosts(l, restore) for l in self.loadouts),
                    monster=self.original_monster,
                )
            return

        raise UnsupportedAxisError(f"Unimplemented X axis: {axis!r}")
