"""
Deterministic stand-ins for the combat oracle and monster scaler.

These are test doubles, not combat formulas: every metric is a simple,
monotonic function of the levels involved so that sweeps produce
predictable series.
"""

from dataclasses import replace
from math import floor
from typing import Optional

from loadout_compare.calc.oracle import (
    BaseNPCVsPlayerCalc,
    BasePlayerVsNPCCalc,
    CalcOpts,
    CombatOracle,
)
from loadout_compare.calc.scaling import MonsterScaler
from loadout_compare.data_models import Loadout, Monster, Skill


TICK_SECONDS = 0.6
UNARMED_SPEED = 4
MOCK_SPEC_DEF_REDUCTION = 0.3


def _boosted(player: Loadout, skill: Skill) -> int:
    return max(0, player.skills.get(skill) + player.boosts.get(skill))


def _current_hp(monster: Monster) -> int:
    if monster.inputs.monster_current_hp is not None:
        return monster.inputs.monster_current_hp
    return monster.skills.hitpoints


class MockHitDistribution:
    """Uniform 0..max hit distribution weighted by accuracy."""

    def __init__(self, accuracy: float, max_hit: int):
        self.accuracy = accuracy
        self.max_hit = max_hit

    def expected_damage(self) -> float:
        return self.accuracy * self.max_hit / 2


class MockPlayerVsNPCCalc(BasePlayerVsNPCCalc):
    """Player-attacking calculator driven by the best offensive skill."""

    def __init__(self, player: Loadout, monster: Monster, opts: CalcOpts):
        super().__init__(player, monster, opts)
        attack = max(_boosted(player, s) for s in (Skill.ATTACK, Skill.RANGED, Skill.MAGIC))
        strength = max(_boosted(player, s) for s in (Skill.STRENGTH, Skill.RANGED, Skill.MAGIC))
        defence = max(0, monster.skills.defence)
        self._accuracy = attack / (attack + defence + 1)
        self._max_hit = 1 + strength // 2
        weapon = player.equipment.weapon
        self._interval = (weapon.speed if weapon else UNARMED_SPEED) * TICK_SECONDS

    def dps(self) -> float:
        return self.distribution().expected_damage() / self._interval

    def distribution(self) -> MockHitDistribution:
        return MockHitDistribution(self._accuracy, self._max_hit)

    def ttk(self) -> Optional[float]:
        dps = self.dps()
        if dps <= 0:
            return None
        return max(0, _current_hp(self.monster)) / dps

    def max_hit(self) -> int:
        return self._max_hit

    def expected_def_reduction(self) -> float:
        if not self.opts.using_special_attack:
            return 0.0
        return self._accuracy * floor(max(0, self.monster.skills.defence) * MOCK_SPEC_DEF_REDUCTION)


class MockNPCVsPlayerCalc(BaseNPCVsPlayerCalc):
    """Monster-attacking calculator driven by monster attack and strength."""

    def __init__(self, player: Loadout, monster: Monster, opts: CalcOpts):
        super().__init__(player, monster, opts)
        attack = max(0, monster.skills.attack)
        defence = _boosted(player, Skill.DEFENCE)
        self._accuracy = attack / (attack + defence + 1)
        self._max_hit = 1 + max(0, monster.skills.strength) // 2

    def dps(self) -> float:
        return self._accuracy * self._max_hit / 2 / (UNARMED_SPEED * TICK_SECONDS)

    def average_damage_taken(self) -> Optional[float]:
        ttk = MockPlayerVsNPCCalc(self.player, self.monster, self.opts).ttk()
        if ttk is None:
            return None
        return self.dps() * ttk


class MockCombatOracle(CombatOracle):
    """
    Oracle returning the mock calculators.

    Records every construction so tests can assert which monster state and
    options each calculator saw.
    """

    def __init__(self):
        self.calls: list[tuple[str, Loadout, Monster, CalcOpts]] = []

    def player_vs_npc(self, player: Loadout, monster: Monster, opts: CalcOpts) -> MockPlayerVsNPCCalc:
        self.calls.append(("player_vs_npc", player, monster, opts))
        return MockPlayerVsNPCCalc(player, monster, opts)

    def npc_vs_player(self, player: Loadout, monster: Monster, opts: CalcOpts) -> MockNPCVsPlayerCalc:
        self.calls.append(("npc_vs_player", player, monster, opts))
        return MockNPCVsPlayerCalc(player, monster, opts)


class MockMonsterScaler(MonsterScaler):
    """
    Scaler that multiplies hitpoints by party size.

    scale_full also adds 5 defence per extra party member; scale_hp_only
    leaves defence alone and clamps current HP to the scaled maximum.
    """

    def __init__(self):
        self.calls: list[tuple[str, Monster]] = []

    def scale_full(self, monster: Monster) -> Monster:
        self.calls.append(("full", monster))
        party = max(1, monster.inputs.party_size)
        skills = replace(
            monster.skills,
            hitpoints=monster.skills.hitpoints * party,
            defence=monster.skills.defence + 5 * (party - 1),
        )
        return replace(monster, skills=skills)

    def scale_hp_only(self, monster: Monster) -> Monster:
        self.calls.append(("hp_only", monster))
        party = max(1, monster.inputs.party_size)
        hitpoints = monster.skills.hitpoints * party
        inputs = monster.inputs
        if inputs.monster_current_hp is not None:
            inputs = replace(inputs, monster_current_hp=min(inputs.monster_current_hp, hitpoints))
        return replace(monster, skills=replace(monster.skills, hitpoints=hitpoints), inputs=inputs)
