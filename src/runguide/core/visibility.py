"""Instruction visibility filtering and row collapsing.

Visibility rules, checked in order (an instruction is hidden by the first
rule that fails):

1. hide_optional drops optional instructions
2. hide_safety drops safety instructions
3. a non-empty show_on_ignored_rules requires every listed rule to be ignored
4. otherwise a non-empty hide_on_ignored_rules hides the instruction when
   any listed rule is ignored

Collapsing fuses adjacent table rows sharing an area. It never reorders.
"""

from typing import Iterable, TypeVar

from pydantic import BaseModel

from runguide.core.instructions import FormatOptions, InstructionBase


InstructionT = TypeVar("InstructionT", bound=InstructionBase)

ROW_SEPARATOR = "<br><br>"


class InstructionRow(BaseModel):
    """One rendered table row.

    Attributes:
        id: Position in the visible, pre-collapse ordering
        area: Area label
        action: Formatted instruction text
    """

    id: int
    area: str
    action: str


def is_visible(instruction: InstructionBase, options: FormatOptions) -> bool:
    """Check whether an instruction is shown under the given options."""
    if options.hide_optional and instruction.optional:
        return False

    if options.hide_safety and instruction.safety:
        return False

    if instruction.show_on_ignored_rules:
        return all(rule in options.ignored_rules for rule in instruction.show_on_ignored_rules)

    if instruction.hide_on_ignored_rules:
        return not any(rule in options.ignored_rules for rule in instruction.hide_on_ignored_rules)

    return True


def filter_instructions(
    instructions: Iterable[InstructionT],
    options: FormatOptions,
) -> list[InstructionT]:
    """Keep visible instructions, preserving order."""
    return [instruction for instruction in instructions if is_visible(instruction, options)]


def collapse_rows(rows: Iterable[InstructionRow]) -> list[InstructionRow]:
    """Merge consecutive rows with the same area into the first of the run.

    Args:
        rows: Rows in display order

    Returns:
        New list of rows; merged rows keep the first member's id and area
    """
    collapsed: list[InstructionRow] = []
    for row in rows:
        if collapsed and collapsed[-1].area == row.area:
            previous = collapsed[-1]
            collapsed[-1] = previous.model_copy(
                update={"action": previous.action + ROW_SEPARATOR + row.action}
            )
        else:
            collapsed.append(row)
    return collapsed


__all__ = [
    "InstructionRow",
    "is_visible",
    "filter_instructions",
    "collapse_rows",
]
