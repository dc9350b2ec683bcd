"""
Unit tests for chart annotations.

Tests the defence-reduction reference lines from
loadout_compare/comparator/annotations.py.
"""

import pytest

from loadout_compare.comparator.annotations import (
    annotations_for_x_axis,
    annotations_for_y_axis,
    defence_reduction_annotations,
)
from loadout_compare.config import ComparatorConfig
from loadout_compare.data_models import CompareXAxis, CompareYAxis


class TestDefenceReductionAnnotations:
    """Tests for the successive special-attack defence markers."""

    def test_full_sequence_from_100(self):
        annotations = defence_reduction_annotations(100)
        assert [a.value for a in annotations] == [100, 70, 49, 35, 25, 18]
        assert [a.label for a in annotations] == [
            "Base Def (100)",
            "DWH x1",
            "DWH x2",
            "DWH x3",
            "DWH x4",
            "DWH x5",
        ]

    @pytest.mark.parametrize("base", [0, 1, 3, 10, 57, 100, 250, 1000, 3 * 10**16 + 3])
    def test_each_step_removes_thirty_percent(self, base):
        """Test that each marker is the previous value minus floor(30%)."""
        values = [a.value for a in defence_reduction_annotations(base)]
        assert values[0] == base
        assert len(values) <= 6
        for previous, current in zip(values, values[1:]):
            assert current == previous - (previous * 3 // 10)
            assert current < previous

    def test_large_defence_uses_exact_integer_steps(self):
        """Test that very large values are reduced without float rounding."""
        base = 3 * 10**16 + 3
        values = [a.value for a in defence_reduction_annotations(base)]
        assert values[1] == base - (base * 3 // 10)
        assert all(isinstance(v, int) for v in values)

    def test_stops_when_reduction_is_zero(self):
        """Test that small defence values stop before the cap."""
        assert [a.value for a in defence_reduction_annotations(10)] == [10, 7, 5, 4, 3]
        assert [a.value for a in defence_reduction_annotations(3)] == [3]
        assert [a.value for a in defence_reduction_annotations(0)] == [0]

    def test_cap_is_configurable(self):
        config = ComparatorConfig(max_def_reduction_annotations=2)
        assert [a.value for a in defence_reduction_annotations(100, config)] == [100, 70, 49]


class TestAxisAnnotations:
    """Tests for per-axis annotation selection."""

    def test_monster_def_axis_has_markers(self):
        assert len(annotations_for_x_axis(CompareXAxis.MONSTER_DEF, 100)) == 6

    @pytest.mark.parametrize("axis", [a for a in CompareXAxis if a != CompareXAxis.MONSTER_DEF])
    def test_other_x_axes_have_none(self, axis):
        assert annotations_for_x_axis(axis, 100) == []

    @pytest.mark.parametrize("axis", list(CompareYAxis))
    def test_y_axes_have_none(self, axis):
        assert annotations_for_y_axis(axis) == []
