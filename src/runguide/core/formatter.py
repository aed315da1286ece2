"""Base instruction formatter.

Game modules subclass InstructionFormatter and route each instruction kind
to a ``_format_*`` method from ``_dispatch``.
"""

from runguide.core.instructions import InstructionBase, Item
from runguide.core.markdown import bold_italic, italic
from runguide.exceptions import UnknownInstructionError


def capitalize(word: str) -> str:
    """Uppercase the first character only."""
    return word[:1].upper() + word[1:]


def pluralize(count: int | str, singular: str, plural: str) -> str:
    """Pick the noun form; only a count of exactly 1 is singular."""
    return singular if count == 1 else plural


def format_names(names: list[str]) -> str:
    return ", ".join(bold_italic(name) for name in names)


def format_items(items: list[Item]) -> str:
    """Join item names, adding the quantity when more than one."""
    return ", ".join(
        f"{bold_italic(item.name)} ({item.quantity})" if item.quantity > 1 else bold_italic(item.name)
        for item in items
    )


class InstructionFormatter:
    """Format one instruction into one line of Markdown prose.

    Safety is checked before optional, so an instruction carrying both
    flags only shows the safety marker.
    """

    optional_marker = "[optional]"
    safety_marker = "[peachy]"

    def format(self, instruction: InstructionBase) -> str:
        """Format an instruction with its optional/safety marker.

        Args:
            instruction: A validated instruction of this formatter's game

        Returns:
            Markdown text for the Action cell (without comments)

        Raises:
            UnknownInstructionError: If no branch handles the instruction
        """
        text = self._dispatch(instruction)

        if instruction.safety:
            return f"{italic(self.safety_marker)} {text}"
        if instruction.optional:
            return f"{italic(self.optional_marker)} {text}"
        return text

    def _dispatch(self, instruction: InstructionBase) -> str:
        raise UnknownInstructionError(instruction)


__all__ = [
    "InstructionFormatter",
    "capitalize",
    "pluralize",
    "format_names",
    "format_items",
]
