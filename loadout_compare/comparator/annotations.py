"""Reference lines drawn over a comparison chart."""

from typing import Optional

from loadout_compare.config import ComparatorConfig
from loadout_compare.data_models import ChartAnnotation, CompareXAxis, CompareYAxis


def defence_reduction_annotations(
    base_defence: int, config: Optional[ComparatorConfig] = None
) -> list[ChartAnnotation]:
    """
    Defence levels after successive defence-reducing special attacks.

    Starts at the base defence, then each hit removes 30% of the current
    value (truncated) until the cap is reached or a hit would remove nothing.
    """
    config = config or ComparatorConfig()
    current = base_defence
    annotations = [ChartAnnotation(label=f"Base Def ({current})", value=current)]
    for hits in range(1, config.max_def_reduction_annotations + 1):
        reduction = current * config.def_reduction_numerator // config.def_reduction_denominator
        if reduction == 0:
            break
        current -= reduction
        annotations.append(ChartAnnotation(label=f"DWH x{hits}", value=current))
    return annotations


def annotations_for_x_axis(
    x_axis: CompareXAxis, base_defence: int, config: Optional[ComparatorConfig] = None
) -> list[ChartAnnotation]:
    if x_axis == CompareXAxis.MONSTER_DEF:
        return defence_reduction_annotations(base_defence, config)
    return []


def annotations_for_y_axis(y_axis: CompareYAxis) -> list[ChartAnnotation]:
    # No Y axis has reference lines yet
    return []
