"""
Pytest fixtures for the loadout comparison test suite.

Provides sample loadouts, a sample monster, and the deterministic mock
oracle and scaler.
"""

import pytest

from loadout_compare.calc import MockCombatOracle, MockMonsterScaler
from loadout_compare.data_models import (
    Equipment,
    EquipmentPiece,
    Loadout,
    Monster,
    MonsterInputs,
    MonsterSkills,
    SkillLevels,
)


MAXED_SKILLS = SkillLevels(
    attack=99,
    strength=99,
    defence=99,
    ranged=99,
    magic=99,
    hitpoints=99,
    prayer=99,
)


# =============================================================================
# ORACLE FIXTURES
# =============================================================================


@pytest.fixture
def oracle():
    """Deterministic combat oracle that records every calculator it builds."""
    return MockCombatOracle()


@pytest.fixture
def scaler():
    """Deterministic monster scaler that records every call."""
    return MockMonsterScaler()


# =============================================================================
# LOADOUT FIXTURES
# =============================================================================


@pytest.fixture
def dwh_loadout():
    """A maxed loadout wielding a Dragon warhammer."""
    return Loadout(
        name="A",
        skills=MAXED_SKILLS,
        equipment=Equipment(weapon=EquipmentPiece(name="Dragon warhammer", item_id=13576, speed=6)),
    )


@pytest.fixture
def whip_loadout():
    """A boosted loadout wielding a weapon without a defence-reducing special."""
    return Loadout(
        name="B",
        skills=MAXED_SKILLS,
        boosts=SkillLevels(attack=19, strength=21, defence=-10),
        equipment=Equipment(weapon=EquipmentPiece(name="Abyssal whip", item_id=4151, speed=4)),
    )


@pytest.fixture
def unnamed_loadout():
    """An unnamed, unboosted loadout with no weapon."""
    return Loadout(skills=MAXED_SKILLS)


@pytest.fixture
def helpless_loadout():
    """A loadout that can never hit: every offensive level is zero."""
    return Loadout(name="Helpless")


@pytest.fixture
def loadouts(dwh_loadout, whip_loadout, unnamed_loadout):
    return [dwh_loadout, whip_loadout, unnamed_loadout]


# =============================================================================
# MONSTER FIXTURES
# =============================================================================


@pytest.fixture
def sample_monster():
    """A solo monster with defence 100, magic 50 and 50 hitpoints."""
    return Monster(
        name="Tekton",
        monster_id=7540,
        skills=MonsterSkills(
            attack=100,
            strength=100,
            defence=100,
            ranged=1,
            magic=50,
            hitpoints=50,
        ),
    )


@pytest.fixture
def party_monster(sample_monster):
    """The sample monster fought by a party of two (scales up when scaled)."""
    return Monster(
        name=sample_monster.name,
        monster_id=sample_monster.monster_id,
        skills=sample_monster.skills,
        inputs=MonsterInputs(party_size=2),
    )
