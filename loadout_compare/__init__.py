"""
Loadout comparison engine.

Sweeps one parameter (monster defence, player levels, stat decay, ...) and
produces chart-ready series of a combat metric for each loadout.
"""

from loadout_compare.data_models import (
    CompareXAxis,
    CompareYAxis,
    CompareResult,
    ChartAnnotation,
    Loadout,
    Monster,
)
from loadout_compare.comparator import Comparator, run_comparison, UnsupportedAxisError
from loadout_compare.config import ComparatorConfig, setup_logging

__version__ = "0.1.0"

__all__ = [
    "CompareXAxis",
    "CompareYAxis",
    "CompareResult",
    "ChartAnnotation",
    "Loadout",
    "Monster",
    "Comparator",
    "run_comparison",
    "UnsupportedAxisError",
    "ComparatorConfig",
    "setup_logging",
]
