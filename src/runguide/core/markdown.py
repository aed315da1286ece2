"""Markdown text builder for guide documents.

Accumulates blocks (paragraphs, headings, lists, tables) and joins them
with a blank line between each block.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Alignment(str, Enum):
    """Table column alignment."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class TableColumn(BaseModel):
    """A table column header with its alignment."""

    model_config = ConfigDict(frozen=True)

    title: str
    alignment: Alignment = Alignment.LEFT


# ============================================================================
# Inline emphasis
# ============================================================================


def bold(text: str) -> str:
    return f"**{text}**" if text else ""


def italic(text: str) -> str:
    return f"_{text}_" if text else ""


def bold_italic(text: str) -> str:
    return f"***{text}***" if text else ""


def strikethrough(text: str) -> str:
    return f"~~{text}~~" if text else ""


# ============================================================================
# Padding
# ============================================================================


def _pad(text: str, width: int, alignment: Alignment) -> str:
    """Pad text to width according to alignment."""
    missing = max(0, width - len(text))
    if alignment == Alignment.RIGHT:
        return " " * missing + text
    if alignment == Alignment.LEFT:
        return text + " " * missing
    left = " " * ((missing + 1) // 2)
    right = " " * (missing // 2)
    return f"{left}{text}{right}"


def _marker(alignment: Alignment, width: int) -> str:
    """Alignment marker cell for the table separator row."""
    start = ":" if alignment == Alignment.CENTER else "-"
    end = "-" if alignment == Alignment.LEFT else ":"
    return start + "-" * (width - 2) + end


# ============================================================================
# Document builder
# ============================================================================


class MarkdownDocument:
    """Chainable accumulator of Markdown blocks.

    Example:
        MarkdownDocument.start().title("Guide").paragraph("Intro").end()
        -> "# Guide\\n\\nIntro"
    """

    def __init__(self, text: str = ""):
        self._blocks: list[str] = [text] if text else []

    @classmethod
    def start(cls, text: str = "") -> "MarkdownDocument":
        return cls(text)

    def end(self) -> str:
        return "\n\n".join(self._blocks)

    def __str__(self) -> str:
        return self.end()

    def paragraph(self, text: str) -> "MarkdownDocument":
        self._blocks.append(text)
        return self

    def paragraphs(self, texts: list[str]) -> "MarkdownDocument":
        self._blocks.extend(texts)
        return self

    def title(self, text: str) -> "MarkdownDocument":
        self._blocks.append(f"# {text}")
        return self

    def section(self, text: str) -> "MarkdownDocument":
        self._blocks.append(f"## {text}")
        return self

    def subsection(self, text: str) -> "MarkdownDocument":
        self._blocks.append(f"### {text}")
        return self

    def ordered(self, texts: list[str]) -> "MarkdownDocument":
        self._blocks.append("\n".join(f"{i}. {text}" for i, text in enumerate(texts, 1)))
        return self

    def unordered(self, texts: list[str]) -> "MarkdownDocument":
        self._blocks.append("\n".join(f"- {text}" for text in texts))
        return self

    def table(self, columns: list[TableColumn], rows: list[list[str]]) -> "MarkdownDocument":
        """Append a pipe table.

        Short rows are filled with empty cells and extra cells get an
        untitled left-aligned column. Every column is at least 3 wide so
        the separator markers stay valid.
        """
        if not columns:
            return self

        column_count = max([len(columns)] + [len(row) for row in rows])
        columns = list(columns) + [
            TableColumn(title="") for _ in range(column_count - len(columns))
        ]
        rows = [list(row) + [""] * (column_count - len(row)) for row in rows]

        widths = [
            max([3, len(column.title)] + [len(row[i]) for row in rows])
            for i, column in enumerate(columns)
        ]

        lines = [
            _table_line(_pad(column.title, widths[i], Alignment.LEFT) for i, column in enumerate(columns)),
            _table_line(_marker(column.alignment, widths[i]) for i, column in enumerate(columns)),
        ]
        for row in rows:
            lines.append(
                _table_line(_pad(cell, widths[i], columns[i].alignment) for i, cell in enumerate(row))
            )

        self._blocks.append("\n".join(lines))
        return self


def _table_line(cells) -> str:
    return f"| {' | '.join(cells)} |"


__all__ = [
    "Alignment",
    "TableColumn",
    "MarkdownDocument",
    "bold",
    "italic",
    "bold_italic",
    "strikethrough",
]
