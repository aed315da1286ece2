"""Dark Souls III game module."""

from runguide.games.dark_souls_3.formatter import DarkSouls3Formatter
from runguide.games.dark_souls_3.guide import DarkSouls3Guide
from runguide.games.dark_souls_3.instructions import (
    # Enums
    Estus,
    BurialGift,
    CharacterClass,
    # Instruction kinds
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
    # Union
    DarkSouls3Instruction,
)

__all__ = [
    "DarkSouls3Formatter",
    "DarkSouls3Guide",
    # Enums
    "Estus",
    "BurialGift",
    "CharacterClass",
    # Instruction kinds
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
    # Union
    "DarkSouls3Instruction",
]
