"""
Axis choices and chart scaling helpers for presentation layers.

Nothing here renders; it describes which axes can be offered, how they are
labelled, and how many Y ticks fit a comparison's domain.
"""

from dataclasses import dataclass
from typing import Optional, Union
import math

from loadout_compare.data_models import NO_DATA, CompareXAxis, CompareYAxis


NO_DATA_DISPLAY = "---"


@dataclass(frozen=True)
class AxisOption:
    """A selectable axis with its menu label and chart axis label."""
    label: str
    axis_label: str
    value: Union[CompareXAxis, CompareYAxis]


X_AXIS_OPTIONS: list[AxisOption] = [
    AxisOption("Monster defence level", "Level", CompareXAxis.MONSTER_DEF_INITIAL),
    AxisOption("Monster magic level", "Level", CompareXAxis.MONSTER_MAGIC),
    AxisOption("Monster HP", "Hitpoints", CompareXAxis.MONSTER_HP),
    AxisOption("Player attack level", "Level", CompareXAxis.PLAYER_ATTACK_LEVEL),
    AxisOption("Player strength level", "Level", CompareXAxis.PLAYER_STRENGTH_LEVEL),
    AxisOption("Player defence level", "Level", CompareXAxis.PLAYER_DEFENCE_LEVEL),
    AxisOption("Player ranged level", "Level", CompareXAxis.PLAYER_RANGED_LEVEL),
    AxisOption("Player magic level", "Level", CompareXAxis.PLAYER_MAGIC_LEVEL),
    AxisOption("Player stat decay", "Minutes after boost", CompareXAxis.STAT_DECAY_RESTORE),
]

PLAYER_Y_AXIS_OPTIONS: list[AxisOption] = [
    AxisOption("Player damage-per-second", "DPS", CompareYAxis.PLAYER_DPS),
    AxisOption("Player expected hit", "Hit", CompareYAxis.PLAYER_EXPECTED_HIT),
    AxisOption("Time-to-kill", "Seconds", CompareYAxis.PLAYER_TTK),
    AxisOption("Player max hit", "Max hit", CompareYAxis.PLAYER_MAX_HIT),
    AxisOption("Expected Defence Reduction", "Def Reduction", CompareYAxis.MONSTER_EXPECTED_DEF_AFTER_SPEC),
]

# Need a regular monster attack model, so hidden for non-standard monsters
MONSTER_Y_AXIS_OPTIONS: list[AxisOption] = [
    AxisOption("Player damage taken per sec", "DPS", CompareYAxis.MONSTER_DPS),
    AxisOption("Player damage taken per kill", "Damage", CompareYAxis.DAMAGE_TAKEN),
]

# Only the defence level offered in the X axis menu is drawn high-to-low
DESCENDING_X_AXES = frozenset({
    CompareXAxis.MONSTER_DEF_INITIAL,
})


def y_axis_options(is_non_standard_monster: bool = False) -> list[AxisOption]:
    """Y axes that make sense for the selected monster."""
    if is_non_standard_monster:
        return list(PLAYER_Y_AXIS_OPTIONS)
    return PLAYER_Y_AXIS_OPTIONS + MONSTER_Y_AXIS_OPTIONS


def find_option(options: list[AxisOption], value: Union[CompareXAxis, CompareYAxis]) -> Optional[AxisOption]:
    return next((opt for opt in options if opt.value == value), None)


def is_x_axis_reversed(x_axis: CompareXAxis) -> bool:
    """Whether the chart should draw this X axis high-to-low."""
    return x_axis in DESCENDING_X_AXES


def compute_ticks(domain_max: Optional[float], y_axis: CompareYAxis) -> tuple[int, float]:
    """
    Tick count and top of the Y axis for a comparison's domain.

    Defence reduction gets 5 to 10 whole-number ticks. Other metrics round
    the top up to a step one order of magnitude below the domain.
    """
    if not domain_max:
        return 1, 1
    highest = math.ceil(domain_max)
    if highest <= 0:
        return 1, 1
    if y_axis == CompareYAxis.MONSTER_EXPECTED_DEF_AFTER_SPEC:
        return min(10, max(5, highest + 1)), highest
    step = 10 ** (math.floor(math.log10(highest)) - 1)
    steps = math.ceil((1 / step) * highest)
    return 1 + steps, steps * step - 1e-9


def display_value(value: Optional[str]) -> str:
    """Tooltip text for a chart value; missing and NaN values show as '---'."""
    if value is None or value == NO_DATA:
        return NO_DATA_DISPLAY
    return value
