"""Instruction formatter for Dark Souls III guides.

Produces lines like:
- "Light ***Firelink Shrine*** bonfire"
- "Allot all ***Normal Estus Flasks*** to ***Ashen Estus Flasks***"
"""

from runguide.core.formatter import (
    InstructionFormatter,
    capitalize,
    format_items,
    format_names,
    pluralize,
)
from runguide.core.instructions import InstructionBase
from runguide.core.markdown import bold_italic, italic

from .instructions import (
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
)


BLACKSMITH = "Andre"
TRADER = "Pickle Pee"


class DarkSouls3Formatter(InstructionFormatter):
    """Format Dark Souls III instructions."""

    def _dispatch(self, instruction: InstructionBase) -> str:
        """Route instruction to appropriate formatter method."""
        if isinstance(instruction, AllotEstus):
            return self._format_allot_estus(instruction)
        elif isinstance(instruction, AttuneSpells):
            return f"Attune {format_names(instruction.spells)}"
        elif isinstance(instruction, BurnUndeadBoneShards):
            return self._format_burn_bone_shards(instruction)
        elif isinstance(instruction, BuyItems):
            return f"Buy {format_items(instruction.items)} from {instruction.vendor}"
        elif isinstance(instruction, CastSpells):
            return f"Cast {format_names(instruction.spells)}"
        elif isinstance(instruction, ChangeEquipment):
            return self._format_change_equipment(instruction)
        elif isinstance(instruction, Comment):
            return instruction.text
        elif isinstance(instruction, CreateCharacter):
            return self._format_create_character(instruction)
        elif isinstance(instruction, FightBoss):
            return self._format_fight_boss(instruction)
        elif isinstance(instruction, GrabItems):
            return self._format_grab_items(instruction)
        elif isinstance(instruction, KillLizards):
            return self._format_kill_lizards(instruction)
        elif isinstance(instruction, LightBonfire):
            return f"Light {bold_italic(instruction.bonfire)} bonfire"
        elif isinstance(instruction, ReinforceEstus):
            return self._format_reinforce_estus(instruction)
        elif isinstance(instruction, Trade):
            return self._format_trade(instruction)
        elif isinstance(instruction, TwoHand):
            return f"Two-hand {bold_italic(instruction.weapon)}"
        elif isinstance(instruction, UnlockShortcut):
            return f"Unlock shortcut {instruction.where}"
        elif isinstance(instruction, UpgradeWeapon):
            return self._format_upgrade_weapon(instruction)
        elif isinstance(instruction, UseItems):
            return self._format_use_items(instruction)
        elif isinstance(instruction, Warp):
            return self._format_warp(instruction)
        return super()._dispatch(instruction)

    def _format_allot_estus(self, instruction: AllotEstus) -> str:
        estus = pluralize(instruction.quantity, "Estus Flask", "Estus Flasks")
        source = bold_italic(f"{capitalize(instruction.from_.value)} {estus}")
        target = bold_italic(f"{capitalize(instruction.to.value)} {estus}")
        return f"Allot {instruction.quantity} {source} to {target}"

    def _format_burn_bone_shards(self, instruction: BurnUndeadBoneShards) -> str:
        amount = "all" if instruction.amount is None else instruction.amount
        shard = pluralize(amount, "Undead Bone Shard", "Undead Bone Shards")
        return f"Burn {amount} {bold_italic(shard)} at the bonfire"

    def _format_reinforce_estus(self, instruction: ReinforceEstus) -> str:
        amount = "all" if instruction.amount is None else instruction.amount
        estus = pluralize(amount, "Estus Flask", "Estus Flasks")
        return f"Reinforce {amount} {bold_italic(estus)} by {italic(BLACKSMITH)}"

    def _format_change_equipment(self, instruction: ChangeEquipment) -> str:
        changes = []
        if instruction.equip:
            changes.append(f"equip {format_names(instruction.equip)}")
        if instruction.unequip:
            changes.append(f"unequip {format_names(instruction.unequip)}")
        return capitalize(" and ".join(changes))

    def _format_create_character(self, instruction: CreateCharacter) -> str:
        character_class = bold_italic(instruction.character_class.value)
        burial_gift = bold_italic(instruction.burial_gift.value)
        return f"Choose {character_class} class and {burial_gift} burial gift"

    def _format_fight_boss(self, instruction: FightBoss) -> str:
        """Boss line, then one sub-line each for spells and items used."""
        fight = f"Fight {bold_italic(instruction.boss)}"
        if instruction.spells:
            spells = ", ".join(italic(spell) for spell in instruction.spells)
            fight += f"<br>- Cast {spells}"
        if instruction.items:
            items = ", ".join(f"{italic(item.name)} ({item.quantity})" for item in instruction.items)
            fight += f"<br>- Use {items}"
        return fight

    def _format_grab_items(self, instruction: GrabItems) -> str:
        items = format_items(instruction.items)
        if instruction.where:
            return f"Grab {items} {instruction.where}"
        return f"Grab {items}"

    def _format_kill_lizards(self, instruction: KillLizards) -> str:
        lizards = "lizard" if instruction.amount == 1 else f"{instruction.amount} lizards"
        return f"Kill {lizards} {instruction.where} for {format_items(instruction.rewards)}"

    def _format_trade(self, instruction: Trade) -> str:
        item = bold_italic(instruction.item)
        reward = bold_italic(instruction.reward)
        return f"Trade a {item} for a {reward} with {italic(TRADER)}"

    def _format_upgrade_weapon(self, instruction: UpgradeWeapon) -> str:
        weapon = bold_italic(instruction.weapon)
        infusion = italic(instruction.infusion) if instruction.infusion else ""
        level = f"+{instruction.level}" if instruction.level else ""

        if infusion and level:
            return f"Infuse {weapon} with {infusion} and upgrade to {level}"
        if infusion:
            return f"Infuse {weapon} with {infusion}"
        if level:
            return f"Upgrade {weapon} to {level}"
        return f"Upgrade {weapon}"

    def _format_use_items(self, instruction: UseItems) -> str:
        items = ", ".join(f"{bold_italic(item.name)} ({item.quantity})" for item in instruction.items)
        return f"Use {items}"

    def _format_warp(self, instruction: Warp) -> str:
        using = f" using {bold_italic(instruction.using)}" if instruction.using else ""
        if instruction.bonfire:
            return f"Warp to {bold_italic(instruction.bonfire)}{using}"
        return f"Warp to last bonfire rested at{using}"


__all__ = ["DarkSouls3Formatter"]
