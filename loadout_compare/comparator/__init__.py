"""Loadout comparison: sweep enumeration, reduction and orchestration."""

from loadout_compare.comparator.comparator import Comparator, run_comparison
from loadout_compare.comparator.sweep import (
    SweepEnumerator,
    UnsupportedAxisError,
    decay_boosts,
    largest_boost,
)
from loadout_compare.comparator.reducer import (
    METRICS,
    MetricSpec,
    OracleKind,
    OutputReducer,
    format_value,
    parse_value,
)
from loadout_compare.comparator.annotations import (
    defence_reduction_annotations,
    annotations_for_x_axis,
    annotations_for_y_axis,
)
from loadout_compare.comparator.special_attacks import (
    DEFENCE_REDUCTION_WEAPONS,
    has_defence_reduction_special,
)
from loadout_compare.comparator.axis_options import (
    AxisOption,
    X_AXIS_OPTIONS,
    y_axis_options,
    find_option,
    is_x_axis_reversed,
    compute_ticks,
    display_value,
)

__all__ = [
    "Comparator",
    "run_comparison",
    "SweepEnumerator",
    "UnsupportedAxisError",
    "decay_boosts",
    "largest_boost",
    "METRICS",
    "MetricSpec",
    "OracleKind",
    "OutputReducer",
    "format_value",
    "parse_value",
    "defence_reduction_annotations",
    "annotations_for_x_axis",
    "annotations_for_y_axis",
    "DEFENCE_REDUCTION_WEAPONS",
    "has_defence_reduction_special",
    "AxisOption",
    "X_AXIS_OPTIONS",
    "y_axis_options",
    "find_option",
    "is_x_axis_reversed",
    "compute_ticks",
    "display_value",
]
