"""
Shared data structures for the loadout comparison engine.

Loadouts and monsters are frozen dataclasses. Every alteration made during a
sweep goes through the explicit clone+patch helpers below, so a derived copy
never shares mutable state with the entity it came from.
"""

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Mapping, Optional, Union


# =============================================================================
# ENUMS
# =============================================================================


class Skill(str, Enum):
    """Player skills tracked by a loadout (field names of SkillLevels)."""
    ATTACK = "attack"
    STRENGTH = "strength"
    DEFENCE = "defence"
    RANGED = "ranged"
    MAGIC = "magic"
    HITPOINTS = "hitpoints"
    PRAYER = "prayer"
    MINING = "mining"
    HERBLORE = "herblore"


class MonsterSkill(str, Enum):
    """Monster combat skills (field names of MonsterSkills)."""
    ATTACK = "attack"
    STRENGTH = "strength"
    DEFENCE = "defence"
    RANGED = "ranged"
    MAGIC = "magic"
    HITPOINTS = "hitpoints"


class CompareXAxis(str, Enum):
    """Independent variables a comparison can sweep."""
    MONSTER_DEF = "monster_def"
    MONSTER_DEF_INITIAL = "monster_def_initial"
    MONSTER_MAGIC = "monster_magic"
    MONSTER_HP = "monster_hp"
    PLAYER_ATTACK_LEVEL = "player_attack_level"
    PLAYER_STRENGTH_LEVEL = "player_strength_level"
    PLAYER_DEFENCE_LEVEL = "player_defence_level"
    PLAYER_RANGED_LEVEL = "player_ranged_level"
    PLAYER_MAGIC_LEVEL = "player_magic_level"
    STAT_DECAY_RESTORE = "stat_decay_restore"


class CompareYAxis(str, Enum):
    """Dependent metrics a comparison can plot."""
    PLAYER_DPS = "player_dps"
    PLAYER_EXPECTED_HIT = "player_expected_hit"
    PLAYER_TTK = "player_ttk"
    PLAYER_MAX_HIT = "player_max_hit"
    MONSTER_DPS = "monster_dps"
    DAMAGE_TAKEN = "damage_taken"
    MONSTER_EXPECTED_DEF_AFTER_SPEC = "monster_expected_def_after_spec"


class EquipmentSlot(str, Enum):
    """Worn equipment slots."""
    HEAD = "head"
    CAPE = "cape"
    NECK = "neck"
    AMMO = "ammo"
    WEAPON = "weapon"
    BODY = "body"
    SHIELD = "shield"
    LEGS = "legs"
    HANDS = "hands"
    FEET = "feet"
    RING = "ring"


# =============================================================================
# CONSTANTS
# =============================================================================


DPS_PRECISION = 2               # Decimal places for every plotted metric
DEF_REDUCTION_PRECISION = 3     # Decimal places for the defence-reduction metric
NO_DATA = "NaN"                 # Literal marker for a value that is not a number


# =============================================================================
# PLAYER ENTITIES
# =============================================================================


SkillPatch = Mapping[Union[Skill, str], int]

# Short keys used by exported loadout/monster payloads
SKILL_KEY_ALIASES = {
    "atk": "attack",
    "str": "strength",
    "def": "defence",
    "hp": "hitpoints",
}


def _skill_name(key: Union[str, Enum]) -> str:
    if isinstance(key, Enum):
        return key.value
    return SKILL_KEY_ALIASES.get(key, key)


@dataclass(frozen=True)
class SkillLevels:
    """Per-skill values, used both for base levels and for temporary boosts."""
    attack: int = 0
    strength: int = 0
    defence: int = 0
    ranged: int = 0
    magic: int = 0
    hitpoints: int = 0
    prayer: int = 0
    mining: int = 0
    herblore: int = 0

    def get(self, skill: Union[Skill, str]) -> int:
        return getattr(self, Skill(skill).value)

    def items(self) -> list[tuple[Skill, int]]:
        """(skill, value) pairs in declaration order."""
        return [(Skill(f.name), getattr(self, f.name)) for f in fields(self)]

    def patched(self, patch: Optional[SkillPatch]) -> "SkillLevels":
        """Return a copy with the given skills overridden."""
        if not patch:
            return self
        return replace(self, **{Skill(_skill_name(k)).value: int(v) for k, v in patch.items()})

    def to_dict(self) -> dict[str, int]:
        return {skill.value: value for skill, value in self.items()}

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "SkillLevels":
        if not data:
            return cls()
        return cls(**{Skill(_skill_name(k)).value: int(v) for k, v in data.items()})


@dataclass(frozen=True)
class EquipmentPiece:
    """A single equipped item. Only the name matters to this engine."""
    name: str
    item_id: int = 0
    version: str = ""
    category: str = ""
    speed: int = 4
    is_two_handed: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EquipmentPiece":
        if "name" not in data:
            raise ValueError("Missing required field: name")
        return cls(
            name=data["name"],
            item_id=int(data.get("id", data.get("item_id", 0))),
            version=data.get("version", ""),
            category=data.get("category", ""),
            speed=int(data.get("speed", 4)),
            is_two_handed=bool(data.get("isTwoHanded", data.get("is_two_handed", False))),
        )


@dataclass(frozen=True)
class Equipment:
    """Everything worn by a loadout, one optional piece per slot."""
    head: Optional[EquipmentPiece] = None
    cape: Optional[EquipmentPiece] = None
    neck: Optional[EquipmentPiece] = None
    ammo: Optional[EquipmentPiece] = None
    weapon: Optional[EquipmentPiece] = None
    body: Optional[EquipmentPiece] = None
    shield: Optional[EquipmentPiece] = None
    legs: Optional[EquipmentPiece] = None
    hands: Optional[EquipmentPiece] = None
    feet: Optional[EquipmentPiece] = None
    ring: Optional[EquipmentPiece] = None

    @property
    def weapon_name(self) -> Optional[str]:
        return self.weapon.name if self.weapon else None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Equipment":
        if not data:
            return cls()
        pieces = {}
        for slot, piece in data.items():
            slot_name = EquipmentSlot(slot).value
            pieces[slot_name] = EquipmentPiece.from_dict(piece) if piece else None
        return cls(**pieces)


@dataclass(frozen=True)
class Loadout:
    """
    A named player configuration: skill levels, temporary boosts and gear.

    Immutable; use with_overrides() to derive an altered copy.
    """
    name: str = ""
    skills: SkillLevels = field(default_factory=SkillLevels)
    boosts: SkillLevels = field(default_factory=SkillLevels)
    equipment: Equipment = field(default_factory=Equipment)

    def display_key(self, index: int) -> str:
        """Series key for this loadout: its name, or 'Set N' when unnamed."""
        return self.name or f"Set {index + 1}"

    def active_boosts(self) -> dict[Skill, int]:
        """Boosted skills whose boost is currently non-zero."""
        return {skill: value for skill, value in self.boosts.items() if value != 0}

    def with_overrides(
        self,
        skills: Optional[SkillPatch] = None,
        boosts: Optional[SkillPatch] = None,
    ) -> "Loadout":
        """Clone this loadout with skill and/or boost fields patched."""
        return replace(
            self,
            skills=self.skills.patched(skills),
            boosts=self.boosts.patched(boosts),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Loadout":
        return cls(
            name=data.get("name", ""),
            skills=SkillLevels.from_dict(data.get("skills")),
            boosts=SkillLevels.from_dict(data.get("boosts")),
            equipment=Equipment.from_dict(data.get("equipment")),
        )


# =============================================================================
# MONSTER ENTITIES
# =============================================================================


MonsterSkillPatch = Mapping[Union[MonsterSkill, str], int]


@dataclass(frozen=True)
class MonsterSkills:
    """Base combat levels of a monster."""
    attack: int = 1
    strength: int = 1
    defence: int = 1
    ranged: int = 1
    magic: int = 1
    hitpoints: int = 1

    def get(self, skill: Union[MonsterSkill, str]) -> int:
        return getattr(self, MonsterSkill(skill).value)

    def patched(self, patch: Optional[MonsterSkillPatch]) -> "MonsterSkills":
        if not patch:
            return self
        return replace(self, **{MonsterSkill(_skill_name(k)).value: int(v) for k, v in patch.items()})

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "MonsterSkills":
        if not data:
            return cls()
        return cls(**{MonsterSkill(_skill_name(k)).value: int(v) for k, v in data.items()})


@dataclass(frozen=True)
class MonsterInputs:
    """Encounter parameters supplied alongside a monster definition."""
    monster_current_hp: Optional[int] = None
    party_size: int = 1
    party_max_combat_level: int = 126
    party_max_hp_level: int = 99
    party_average_mining_level: int = 99

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "MonsterInputs":
        if not data:
            return cls()
        current_hp = data.get("monster_current_hp", data.get("monsterCurrentHp"))
        return cls(
            monster_current_hp=int(current_hp) if current_hp is not None else None,
            party_size=int(data.get("party_size", data.get("partySize", 1))),
            party_max_combat_level=int(
                data.get("party_max_combat_level", data.get("partyMaxCombatLevel", 126))
            ),
            party_max_hp_level=int(data.get("party_max_hp_level", data.get("partyMaxHpLevel", 99))),
            party_average_mining_level=int(
                data.get("party_average_mining_level", data.get("partyAvgMiningLevel", 99))
            ),
        )


@dataclass(frozen=True)
class Monster:
    """
    A monster as configured for an encounter.

    Holds base combat levels plus encounter inputs such as current HP.
    Immutable; use with_overrides() to derive an altered copy.
    """
    name: str
    monster_id: int = 0
    version: str = ""
    size: int = 1
    skills: MonsterSkills = field(default_factory=MonsterSkills)
    inputs: MonsterInputs = field(default_factory=MonsterInputs)
    attributes: tuple[str, ...] = ()

    def with_overrides(
        self,
        skills: Optional[MonsterSkillPatch] = None,
        monster_current_hp: Optional[int] = None,
    ) -> "Monster":
        """Clone this monster with skills and/or current HP patched."""
        inputs = self.inputs
        if monster_current_hp is not None:
            inputs = replace(inputs, monster_current_hp=int(monster_current_hp))
        return replace(self, skills=self.skills.patched(skills), inputs=inputs)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Monster":
        if "name" not in data:
            raise ValueError("Missing required field: name")
        return cls(
            name=data["name"],
            monster_id=int(data.get("id", data.get("monster_id", 0))),
            version=data.get("version", ""),
            size=int(data.get("size", 1)),
            skills=MonsterSkills.from_dict(data.get("skills")),
            inputs=MonsterInputs.from_dict(data.get("inputs")),
            attributes=tuple(data.get("attributes", ())),
        )


# =============================================================================
# SWEEP AND RESULT RECORDS
# =============================================================================


# One row per X value: {"name": x, "<loadout key>": "<formatted value>" | None, ...}
ChartEntry = dict[str, Any]


@dataclass(frozen=True)
class InputSet:
    """Self-contained snapshot for one point on the X axis."""
    x_value: int
    loadouts: tuple[Loadout, ...]
    monster: Monster


@dataclass(frozen=True)
class ChartAnnotation:
    """A fixed reference marker on one chart axis."""
    label: str
    value: float

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "value": self.value}


@dataclass
class CompareResult:
    """Complete output of one comparison run."""
    entries: list[ChartEntry] = field(default_factory=list)
    annotations_x: list[ChartAnnotation] = field(default_factory=list)
    annotations_y: list[ChartAnnotation] = field(default_factory=list)
    domain_max: int = 1

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON-ready shape consumed by a chart renderer."""
        return {
            "entries": [dict(entry) for entry in self.entries],
            "annotations": {
                "x": [a.to_dict() for a in self.annotations_x],
                "y": [a.to_dict() for a in self.annotations_y],
            },
            "domainMax": self.domain_max,
        }


def coerce_axis(axis_type: type[Enum], value: Any) -> Any:
    """Convert a raw axis selector to its enum member, leaving unknown values as-is."""
    try:
        return axis_type(value)
    except ValueError:
        return value
