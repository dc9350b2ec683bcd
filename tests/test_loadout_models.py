"""
Unit tests for loadout and monster data models.

Tests the clone+patch helpers, payload parsing and result serialization
from loadout_compare/data_models.py.
"""

from dataclasses import FrozenInstanceError

import pytest

from loadout_compare.data_models import (
    ChartAnnotation,
    CompareResult,
    CompareXAxis,
    CompareYAxis,
    Equipment,
    Loadout,
    Monster,
    MonsterSkill,
    Skill,
    SkillLevels,
    coerce_axis,
)


class TestSkillLevels:
    """Tests for SkillLevels patching and parsing."""

    def test_patched_returns_copy(self):
        """Test that patching leaves the original untouched."""
        levels = SkillLevels(attack=99, strength=99)
        patched = levels.patched({Skill.ATTACK: 1})
        assert patched.attack == 1
        assert patched.strength == 99
        assert levels.attack == 99

    def test_patched_without_patch_returns_same_object(self):
        """Test that an empty patch does not allocate a copy."""
        levels = SkillLevels(attack=99)
        assert levels.patched(None) is levels
        assert levels.patched({}) is levels

    def test_patched_accepts_short_keys(self):
        """Test that exported short keys map to skill fields."""
        levels = SkillLevels().patched({"atk": 70, "str": 80, "def": 90})
        assert (levels.attack, levels.strength, levels.defence) == (70, 80, 90)

    def test_from_dict_with_short_keys(self):
        """Test parsing a skills payload that uses short keys."""
        levels = SkillLevels.from_dict({"atk": 99, "hp": 85, "ranged": 92})
        assert levels.attack == 99
        assert levels.hitpoints == 85
        assert levels.ranged == 92

    def test_unknown_skill_rejected(self):
        """Test that an unknown skill name is rejected."""
        with pytest.raises(ValueError):
            SkillLevels.from_dict({"fishing": 99})

    def test_is_frozen(self):
        """Test that skill levels cannot be written through."""
        levels = SkillLevels()
        with pytest.raises(FrozenInstanceError):
            levels.attack = 5


class TestLoadout:
    """Tests for Loadout helpers."""

    def test_display_key_uses_name(self, dwh_loadout):
        """Test that a named loadout is keyed by its name."""
        assert dwh_loadout.display_key(0) == "A"

    def test_display_key_for_unnamed(self, unnamed_loadout):
        """Test that an unnamed loadout is keyed by its position."""
        assert unnamed_loadout.display_key(2) == "Set 3"

    def test_active_boosts(self, whip_loadout):
        """Test that only non-zero boosts are reported."""
        assert whip_loadout.active_boosts() == {
            Skill.ATTACK: 19,
            Skill.STRENGTH: 21,
            Skill.DEFENCE: -10,
        }

    def test_with_overrides_does_not_mutate(self, whip_loadout):
        """Test that overriding skills and boosts yields a new loadout."""
        derived = whip_loadout.with_overrides(
            skills={Skill.ATTACK: 50},
            boosts={Skill.ATTACK: 0},
        )
        assert derived is not whip_loadout
        assert derived.skills.attack == 50
        assert derived.boosts.attack == 0
        assert derived.boosts.strength == 21
        assert whip_loadout.skills.attack == 99
        assert whip_loadout.boosts.attack == 19
        assert derived.equipment is whip_loadout.equipment

    def test_from_dict(self):
        """Test parsing a loadout payload."""
        loadout = Loadout.from_dict({
            "name": "Melee",
            "skills": {"atk": 99, "str": 99},
            "boosts": {"str": 21},
            "equipment": {"weapon": {"name": "Elder maul", "id": 21003, "speed": 6}, "shield": None},
        })
        assert loadout.name == "Melee"
        assert loadout.skills.strength == 99
        assert loadout.boosts.strength == 21
        assert loadout.equipment.weapon_name == "Elder maul"
        assert loadout.equipment.weapon.speed == 6
        assert loadout.equipment.shield is None

    def test_weapon_name_without_weapon(self):
        """Test that no weapon gives no weapon name."""
        assert Equipment().weapon_name is None


class TestMonster:
    """Tests for Monster helpers."""

    def test_with_overrides_skills(self, sample_monster):
        """Test overriding monster skills."""
        derived = sample_monster.with_overrides(skills={MonsterSkill.DEFENCE: 42})
        assert derived.skills.defence == 42
        assert derived.skills.magic == 50
        assert sample_monster.skills.defence == 100

    def test_with_overrides_current_hp(self, sample_monster):
        """Test overriding the current HP encounter input."""
        derived = sample_monster.with_overrides(monster_current_hp=12)
        assert derived.inputs.monster_current_hp == 12
        assert sample_monster.inputs.monster_current_hp is None

    def test_from_dict(self):
        """Test parsing a monster payload."""
        monster = Monster.from_dict({
            "name": "Vorkath",
            "id": 8061,
            "skills": {"def": 214, "hp": 750, "magic": 150},
            "inputs": {"monsterCurrentHp": 300, "partySize": 1},
            "attributes": ["draconic", "undead"],
        })
        assert monster.monster_id == 8061
        assert monster.skills.defence == 214
        assert monster.skills.hitpoints == 750
        assert monster.inputs.monster_current_hp == 300
        assert monster.attributes == ("draconic", "undead")

    def test_from_dict_requires_name(self):
        """Test that a monster payload without a name is rejected."""
        with pytest.raises(ValueError):
            Monster.from_dict({"skills": {"def": 1}})


class TestCompareResult:
    """Tests for result serialization."""

    def test_to_dict_shape(self):
        """Test the JSON-ready shape of a comparison result."""
        result = CompareResult(
            entries=[{"name": 0, "A": "1.00"}],
            annotations_x=[ChartAnnotation(label="Base Def (100)", value=100)],
            domain_max=2,
        )
        assert result.to_dict() == {
            "entries": [{"name": 0, "A": "1.00"}],
            "annotations": {"x": [{"label": "Base Def (100)", "value": 100}], "y": []},
            "domainMax": 2,
        }


class TestCoerceAxis:
    """Tests for axis selector coercion."""

    def test_known_value_becomes_member(self):
        """Test that a raw value is converted to its enum member."""
        assert coerce_axis(CompareXAxis, "monster_hp") is CompareXAxis.MONSTER_HP
        assert coerce_axis(CompareYAxis, CompareYAxis.PLAYER_DPS) is CompareYAxis.PLAYER_DPS

    def test_unknown_value_passes_through(self):
        """Test that an unknown selector is left for the caller to report."""
        assert coerce_axis(CompareXAxis, "prayer_level") == "prayer_level"
