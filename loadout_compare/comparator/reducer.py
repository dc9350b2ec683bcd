"""
Output Reducer for the loadout comparison engine.

Turns one InputSet into {loadout key: formatted metric value} by running the
combat oracle once per loadout. Which calculator is built, and which accessor
is read from it, comes from METRICS, keyed by Y axis.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional
import logging
import math

from loadout_compare.calc.oracle import CalcOpts, CombatOracle
from loadout_compare.calc.scaling import MonsterScaler
from loadout_compare.comparator.special_attacks import has_defence_reduction_special
from loadout_compare.config import ComparatorConfig
from loadout_compare.data_models import (
    NO_DATA,
    CompareXAxis,
    CompareYAxis,
    InputSet,
    Monster,
    coerce_axis,
)


logger = logging.getLogger(__name__)


class OracleKind(str, Enum):
    """Which side of the fight a metric is measured from."""
    PLAYER_VS_NPC = "player_vs_npc"
    NPC_VS_PLAYER = "npc_vs_player"


@dataclass(frozen=True)
class MetricSpec:
    """How to compute one Y axis metric from a calculator."""
    kind: OracleKind
    accessor: Callable[..., Optional[float]]


METRICS: dict[CompareYAxis, MetricSpec] = {
    CompareYAxis.PLAYER_DPS: MetricSpec(OracleKind.PLAYER_VS_NPC, lambda calc: calc.dps()),
    CompareYAxis.PLAYER_EXPECTED_HIT: MetricSpec(
        OracleKind.PLAYER_VS_NPC, lambda calc: calc.distribution().expected_damage()
    ),
    CompareYAxis.PLAYER_TTK: MetricSpec(OracleKind.PLAYER_VS_NPC, lambda calc: calc.ttk()),
    CompareYAxis.PLAYER_MAX_HIT: MetricSpec(OracleKind.PLAYER_VS_NPC, lambda calc: calc.max_hit()),
    CompareYAxis.MONSTER_DPS: MetricSpec(OracleKind.NPC_VS_PLAYER, lambda calc: calc.dps()),
    CompareYAxis.DAMAGE_TAKEN: MetricSpec(
        OracleKind.NPC_VS_PLAYER, lambda calc: calc.average_damage_taken()
    ),
}


def format_value(value: Optional[float], precision: int) -> Optional[str]:
    """
    Render a metric as a fixed-point decimal string.

    None stays None (no value at this point). NaN becomes the literal
    no-data marker and infinities render as "Infinity"/"-Infinity".
    """
    if value is None:
        return None
    value = float(value)
    if math.isnan(value):
        return NO_DATA
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return f"{value:.{precision}f}"


def parse_value(value: Optional[str]) -> Optional[float]:
    """Numeric value of a formatted metric, or None when it is not a finite number."""
    if not value:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


class OutputReducer:
    """Computes the per-loadout metric values for one sweep point."""

    def __init__(
        self,
        x_axis: CompareXAxis,
        y_axis: CompareYAxis,
        oracle: CombatOracle,
        scaler: MonsterScaler,
        opts: CalcOpts,
        config: Optional[ComparatorConfig] = None,
    ):
        self.x_axis = coerce_axis(CompareXAxis, x_axis)
        self.y_axis = coerce_axis(CompareYAxis, y_axis)
        self.oracle = oracle
        self.scaler = scaler
        self.opts = opts
        self.config = config or ComparatorConfig()

    def monster_for_calcs(self, input_set: InputSet) -> Monster:
        """
        Pick the monster state handed to the oracle.

        The defence-reduction metric and the HP axis use the sweep's monster
        as-is; everything else is fully scaled first.
        """
        if self.y_axis == CompareYAxis.MONSTER_EXPECTED_DEF_AFTER_SPEC:
            return input_set.monster
        if self.x_axis == CompareXAxis.MONSTER_HP:
            return input_set.monster
        return self.scaler.scale_full(input_set.monster)

    def reduce(self, input_set: InputSet) -> dict[str, Optional[str]]:
        if self.y_axis == CompareYAxis.MONSTER_EXPECTED_DEF_AFTER_SPEC:
            return self._defence_reduction(input_set)

        metric = METRICS.get(self.y_axis) if isinstance(self.y_axis, CompareYAxis) else None
        if metric is None:
            logger.error(f"Unhandled Y axis {self.y_axis!r} at x={input_set.x_value}")
            return {}

        monster = self.monster_for_calcs(input_set)
        build = (
            self.oracle.player_vs_npc
            if metric.kind == OracleKind.PLAYER_VS_NPC
            else self.oracle.npc_vs_player
        )
        results: dict[str, Optional[str]] = {}
        for i, loadout in enumerate(input_set.loadouts):
            calc = build(loadout, monster, self.opts)
            results[loadout.display_key(i)] = format_value(
                metric.accessor(calc), self.config.dps_precision
            )
        return results

    def _defence_reduction(self, input_set: InputSet) -> dict[str, Optional[str]]:
        # Loadouts without a qualifying weapon are left out of the series entirely
        monster = self.monster_for_calcs(input_set)
        opts = self.opts.with_special_attack()
        results: dict[str, Optional[str]] = {}
        for i, loadout in enumerate(input_set.loadouts):
            if not has_defence_reduction_special(loadout):
                continue
            calc = self.oracle.player_vs_npc(loadout, monster, opts)
            results[loadout.display_key(i)] = format_value(
                calc.expected_def_reduction(), self.config.def_reduction_precision
            )
        return results
