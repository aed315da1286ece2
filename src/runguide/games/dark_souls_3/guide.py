"""Dark Souls III guide module."""

from typing import ClassVar

from runguide.core.formatter import InstructionFormatter
from runguide.core.guide import Guide

from .formatter import DarkSouls3Formatter
from .instructions import DarkSouls3Instruction


class DarkSouls3Guide(Guide):
    """Guide whose instructions are Dark Souls III instruction kinds."""

    name: ClassVar[str] = "Dark Souls III"
    schema_id: ClassVar[str] = "dark-souls-3"
    formatter: ClassVar[InstructionFormatter] = DarkSouls3Formatter()

    instructions: list[DarkSouls3Instruction]


__all__ = ["DarkSouls3Guide"]
