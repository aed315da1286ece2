"""Game-independent guide core: text builder, visibility, formatting, assembly."""

from runguide.core.formatter import InstructionFormatter
from runguide.core.guide import Guide, resolve_options
from runguide.core.instructions import FormatOptions, InstructionBase, Item
from runguide.core.markdown import (
    Alignment,
    MarkdownDocument,
    TableColumn,
    bold,
    bold_italic,
    italic,
    strikethrough,
)
from runguide.core.visibility import (
    InstructionRow,
    collapse_rows,
    filter_instructions,
    is_visible,
)

__all__ = [
    "InstructionFormatter",
    "Guide",
    "resolve_options",
    "FormatOptions",
    "InstructionBase",
    "Item",
    "Alignment",
    "MarkdownDocument",
    "TableColumn",
    "bold",
    "bold_italic",
    "italic",
    "strikethrough",
    "InstructionRow",
    "collapse_rows",
    "filter_instructions",
    "is_visible",
]
