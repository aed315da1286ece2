"""Instruction envelope and format options shared by every game module."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel


# Guide documents are hand-authored JSON with camelCase keys.
GUIDE_MODEL_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class Item(BaseModel):
    """An item with a quantity, embedded in instructions."""

    model_config = GUIDE_MODEL_CONFIG

    name: str = Field(min_length=1)
    quantity: StrictInt = Field(default=1, ge=1)


class InstructionBase(BaseModel):
    """Envelope fields common to every instruction kind.

    Game modules subclass this once per kind and add a ``type`` literal
    used as the discriminator.
    """

    model_config = GUIDE_MODEL_CONFIG

    area: str
    comments: list[str] = Field(default_factory=list)
    optional: bool = False
    safety: bool = False  # skippable step kept for safety margin
    hide_on_ignored_rules: list[StrictInt] = Field(default_factory=list)
    show_on_ignored_rules: list[StrictInt] = Field(default_factory=list)


class FormatOptions(BaseModel):
    """Per-render formatting options.

    Attributes:
        collapse_instruction_groups: Merge adjacent rows sharing an area
        hide_comments: Drop comment sub-lines
        hide_instruction_id: Drop the Id column
        hide_optional: Drop optional instructions
        hide_safety: Drop safety instructions
        ignored_rules: Rule ids treated as not in force for this render
    """

    model_config = ConfigDict(**GUIDE_MODEL_CONFIG, extra="forbid")

    collapse_instruction_groups: bool = False
    hide_comments: bool = False
    hide_instruction_id: bool = False
    hide_optional: bool = False
    hide_safety: bool = False
    ignored_rules: frozenset[int] = frozenset()


__all__ = ["GUIDE_MODEL_CONFIG", "Item", "InstructionBase", "FormatOptions"]
