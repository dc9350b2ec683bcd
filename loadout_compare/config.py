"""
Configuration and logging setup for the loadout comparison engine.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional
import logging

from loadout_compare.data_models import DEF_REDUCTION_PRECISION, DPS_PRECISION


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@dataclass(frozen=True)
class ComparatorConfig:
    """Tunable constants for sweeps, formatting and chart domains."""

    # Formatting
    dps_precision: int = DPS_PRECISION
    def_reduction_precision: int = DEF_REDUCTION_PRECISION

    # Player level axes sweep this inclusive range
    player_level_min: int = 0
    player_level_max: int = 125

    # Chart domain: max(min_domain, ceil(peak * domain_padding))
    domain_padding: float = 1.05
    min_domain: int = 1

    # Defence-reducing special attack annotations (30% per hit, up to 5 hits)
    def_reduction_numerator: int = 3
    def_reduction_denominator: int = 10
    max_def_reduction_annotations: int = 5

    # Diagnostic run name handed to the combat oracle
    loadout_name: str = "comparator"

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ComparatorConfig":
        """Create from a plain mapping, ignoring unknown keys."""
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown comparator config keys: {unknown}")
        return cls(**{k: v for k, v in data.items() if k in known})
