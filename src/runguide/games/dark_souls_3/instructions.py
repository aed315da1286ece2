"""Dark Souls III instruction kinds.

Each kind is an InstructionBase subclass tagged by a ``type`` literal;
DarkSouls3Instruction is the discriminated union of all of them.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import Field, StrictInt

from runguide.core.instructions import InstructionBase, Item


Name = Annotated[str, Field(min_length=1)]


class Estus(str, Enum):
    """Estus flask flavours."""

    ASHEN = "ashen"
    NORMAL = "normal"


class BurialGift(str, Enum):
    """Starting burial gifts."""

    BLACK_FIREBOMB = "Black Firebomb"
    CRACKED_RED_EYE_ORB = "Cracked Red Eye Orb"
    DIVINE_BLESSING = "Divine Blessing"
    FIRE_GEM = "Fire Gem"
    GOLD_COIN = "Gold Coin"
    HIDDEN_BLESSING = "Hidden Blessing"
    LIFE_RING = "Life Ring"
    SOVEREIGNLESS_SOUL = "Sovereignless Soul"
    YOUNG_WHITE_BRANCH = "Young White Branch"


class CharacterClass(str, Enum):
    """Starting classes."""

    ASSASSIN = "Assassin"
    CLERIC = "Cleric"
    DEPRIVED = "Deprived"
    HERALD = "Herald"
    KNIGHT = "Knight"
    MERCENARY = "Mercenary"
    PYROMANCER = "Pyromancer"
    SORCERER = "Sorcerer"
    THIEF = "Thief"
    WARRIOR = "Warrior"


# ============================================================================
# Resources (estus, bone shards)
# ============================================================================


class AllotEstus(InstructionBase):
    """Move flasks between Estus and Ashen Estus."""

    type: Literal["allot-estus"] = "allot-estus"
    from_: Estus = Field(alias="from")
    to: Estus
    quantity: Union[Literal["all"], Annotated[StrictInt, Field(ge=1)]] = "all"


class BurnUndeadBoneShards(InstructionBase):
    """Burn bone shards at a bonfire; amount None means all of them."""

    type: Literal["burn-undead-bone-shards"] = "burn-undead-bone-shards"
    amount: Optional[StrictInt] = None


class ReinforceEstus(InstructionBase):
    """Reinforce flasks with Andre; amount None means all of them."""

    type: Literal["reinforce-estus"] = "reinforce-estus"
    amount: Optional[StrictInt] = None


# ============================================================================
# Spells and equipment
# ============================================================================


class AttuneSpells(InstructionBase):
    type: Literal["attune-spells"] = "attune-spells"
    spells: list[Name] = Field(min_length=1)


class CastSpells(InstructionBase):
    type: Literal["cast-spells"] = "cast-spells"
    spells: list[Name] = Field(min_length=1)


class ChangeEquipment(InstructionBase):
    type: Literal["change-equipment"] = "change-equipment"
    equip: list[Name] = Field(default_factory=list)
    unequip: list[Name] = Field(default_factory=list)


class TwoHand(InstructionBase):
    type: Literal["two-hand"] = "two-hand"
    weapon: Name


class UpgradeWeapon(InstructionBase):
    """Upgrade and/or infuse a weapon."""

    type: Literal["upgrade-weapon"] = "upgrade-weapon"
    weapon: Name
    level: Optional[Annotated[StrictInt, Field(gt=0)]] = None
    infusion: Optional[Name] = None


# ============================================================================
# Items
# ============================================================================


class BuyItems(InstructionBase):
    type: Literal["buy-items"] = "buy-items"
    items: list[Item]
    vendor: Name


class GrabItems(InstructionBase):
    type: Literal["grab-items"] = "grab-items"
    items: list[Item] = Field(min_length=1)
    where: Name


class UseItems(InstructionBase):
    type: Literal["use-items"] = "use-items"
    items: list[Item] = Field(min_length=1)


class Trade(InstructionBase):
    """Trade an item through the crow nest."""

    type: Literal["trade"] = "trade"
    item: Name
    reward: Name


# ============================================================================
# Progression
# ============================================================================


class Comment(InstructionBase):
    type: Literal["comment"] = "comment"
    text: Name


class CreateCharacter(InstructionBase):
    type: Literal["create-character"] = "create-character"
    character_class: CharacterClass = Field(alias="class")
    burial_gift: BurialGift


class FightBoss(InstructionBase):
    """Fight a boss, optionally casting spells and using items."""

    type: Literal["fight-boss"] = "fight-boss"
    boss: Name
    items: list[Item] = Field(default_factory=list)
    spells: list[Name] = Field(default_factory=list)


class KillLizards(InstructionBase):
    type: Literal["kill-lizards"] = "kill-lizards"
    amount: StrictInt = Field(default=1, ge=1)
    rewards: list[Item] = Field(min_length=1)
    where: str


class LightBonfire(InstructionBase):
    type: Literal["light-bonfire"] = "light-bonfire"
    bonfire: Name


class UnlockShortcut(InstructionBase):
    type: Literal["unlock-shortcut"] = "unlock-shortcut"
    where: Name


class Warp(InstructionBase):
    """Warp to a bonfire; no bonfire means the last one rested at."""

    type: Literal["warp"] = "warp"
    bonfire: Optional[str] = None
    using: Optional[Name] = None


DarkSouls3Instruction = Annotated[
    Union[
        AllotEstus,
        AttuneSpells,
        BurnUndeadBoneShards,
        BuyItems,
        CastSpells,
        ChangeEquipment,
        Comment,
        CreateCharacter,
        FightBoss,
        GrabItems,
        KillLizards,
        LightBonfire,
        ReinforceEstus,
        Trade,
        TwoHand,
        UnlockShortcut,
        UpgradeWeapon,
        UseItems,
        Warp,
    ],
    Field(discriminator="type"),
]


__all__ = [
    "Estus",
    "BurialGift",
    "CharacterClass",
    "AllotEstus",
    "AttuneSpells",
    "BurnUndeadBoneShards",
    "BuyItems",
    "CastSpells",
    "ChangeEquipment",
    "Comment",
    "CreateCharacter",
    "FightBoss",
    "GrabItems",
    "KillLizards",
    "LightBonfire",
    "ReinforceEstus",
    "Trade",
    "TwoHand",
    "UnlockShortcut",
    "UpgradeWeapon",
    "UseItems",
    "Warp",
    "DarkSouls3Instruction",
]
