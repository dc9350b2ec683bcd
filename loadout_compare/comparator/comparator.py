"""
Comparator: sweeps one parameter and collects one series per loadout.

The comparison run per selection:
1. Scale the configured monster once to read the sweep's starting values
2. Enumerate one InputSet per X axis point (SweepEnumerator)
3. Reduce each point to per-loadout metric values (OutputReducer)
4. Track the largest numeric value for the chart's Y domain
5. Attach fixed reference annotations for the chosen axes

A Comparator captures its configuration at construction and never mutates
it. Build a new one whenever the loadouts, monster or axes change.
"""

from typing import Optional, Sequence
import logging
import math

from loadout_compare.calc.oracle import CalcOpts, CombatOracle
from loadout_compare.calc.scaling import MonsterScaler
from loadout_compare.comparator.annotations import (
    annotations_for_x_axis,
    annotations_for_y_axis,
)
from loadout_compare.comparator.reducer import OutputReducer, parse_value
from loadout_compare.comparator.sweep import SweepEnumerator
from loadout_compare.config import ComparatorConfig
from loadout_compare.data_models import (
    ChartAnnotation,
    ChartEntry,
    CompareResult,
    CompareXAxis,
    CompareYAxis,
    Loadout,
    Monster,
    coerce_axis,
)


logger = logging.getLogger(__name__)


class Comparator:
    """
    Orchestrates a single loadout comparison.

    Attributes:
        base_loadouts: Loadouts being compared, in series order
        original_monster: The monster as configured by the user
        scaled_base_monster: original_monster after full scaling, used only
            for the starting values of descending sweeps and annotations
        x_axis: Swept parameter
        y_axis: Plotted metric
        common_opts: Calculation options shared by every oracle call
    """

    def __init__(
        self,
        players: Sequence[Loadout],
        monster: Monster,
        x_axis: CompareXAxis,
        y_axis: CompareYAxis,
        oracle: CombatOracle,
        scaler: MonsterScaler,
        config: Optional[ComparatorConfig] = None,
    ):
        self.config = config or ComparatorConfig()
        self.base_loadouts = tuple(players)
        self.original_monster = monster
        self.scaled_base_monster = scaler.scale_full(monster)
        self.x_axis = coerce_axis(CompareXAxis, x_axis)
        self.y_axis = coerce_axis(CompareYAxis, y_axis)
        self.oracle = oracle
        self.scaler = scaler
        self.common_opts = CalcOpts(
            loadout_name=self.config.loadout_name,
            disable_monster_scaling=True,
        )

    def inputs(self) -> SweepEnumerator:
        """A fresh, single-pass enumeration of this comparison's sweep points."""
        return SweepEnumerator(
            self.x_axis,
            self.base_loadouts,
            self.original_monster,
            self.scaled_base_monster,
            self.scaler,
            self.config,
        )

    def reducer(self) -> OutputReducer:
        return OutputReducer(
            self.x_axis,
            self.y_axis,
            self.oracle,
            self.scaler,
            self.common_opts,
            self.config,
        )

    def get_entries(self) -> tuple[list[ChartEntry], int]:
        """
        Run the full sweep.

        Returns:
            (entries, domain_max): one chart row per sweep point in
            enumeration order, and the padded upper bound of the Y axis

        Raises:
            UnsupportedAxisError: If the X axis has no sweep range
        """
        reducer = self.reducer()
        peak = 0.0
        entries: list[ChartEntry] = []
        for input_set in self.inputs():
            outputs = reducer.reduce(input_set)
            for value in outputs.values():
                number = parse_value(value)
                if number is not None and number > peak:
                    peak = number
            entries.append({**outputs, "name": input_set.x_value})

        domain_max = max(self.config.min_domain, math.ceil(peak * self.config.domain_padding))
        logger.debug(
            f"Comparison {self.x_axis!r} x {self.y_axis!r}: "
            f"{len(entries)} entries, domain max {domain_max}"
        )
        return entries, domain_max

    def get_annotations_x(self) -> list[ChartAnnotation]:
        return annotations_for_x_axis(
            self.x_axis, self.scaled_base_monster.skills.defence, self.config
        )

    def get_annotations_y(self) -> list[ChartAnnotation]:
        return annotations_for_y_axis(self.y_axis)

    def get_result(self) -> CompareResult:
        """Entries, domain and annotations bundled as one CompareResult."""
        entries, domain_max = self.get_entries()
        return CompareResult(
            entries=entries,
            annotations_x=self.get_annotations_x(),
            annotations_y=self.get_annotations_y(),
            domain_max=domain_max,
        )


def run_comparison(
    loadouts: Sequence[Loadout],
    monster: Monster,
    x_axis: CompareXAxis,
    y_axis: CompareYAxis,
    oracle: CombatOracle,
    scaler: MonsterScaler,
    config: Optional[ComparatorConfig] = None,
) -> CompareResult:
    """Build a Comparator for one selection and run it to completion."""
    comparator = Comparator(loadouts, monster, x_axis, y_axis, oracle, scaler, config)
    return comparator.get_result()
