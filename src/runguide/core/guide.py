"""Guide aggregate and document assembly.

A Guide is validated once from hand-authored data and is frozen afterwards.
Formatting never mutates it, so one guide can be rendered with many
different FormatOptions.

Document layout:
- Header: title (with categories) and description paragraphs
- Resources: unordered list (omitted when empty)
- Rules: ordered list, ignored rules struck through (omitted when empty)
- Instructions: Id/Area/Action table, or a placeholder line
"""

import re
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from runguide.core.formatter import InstructionFormatter
from runguide.core.instructions import GUIDE_MODEL_CONFIG, FormatOptions, InstructionBase
from runguide.core.markdown import (
    Alignment,
    MarkdownDocument,
    TableColumn,
    italic,
    strikethrough,
)
from runguide.core.visibility import InstructionRow, collapse_rows, filter_instructions
from runguide.exceptions import GuideValidationError


_RULE_ID = re.compile(r"[0-9]+")

NO_INSTRUCTIONS = "There are no instructions"

ID_COLUMN = TableColumn(title="Id", alignment=Alignment.RIGHT)
AREA_COLUMN = TableColumn(title="Area", alignment=Alignment.LEFT)
ACTION_COLUMN = TableColumn(title="Action", alignment=Alignment.LEFT)


def resolve_options(options: Optional[FormatOptions] = None, **overrides: Any) -> FormatOptions:
    """Merge keyword overrides on top of options (or the defaults)."""
    base = options if options is not None else FormatOptions()
    if not overrides:
        return base
    return FormatOptions.model_validate({**base.model_dump(), **overrides})


class Guide(BaseModel):
    """Root document describing one game-run walkthrough.

    Game modules subclass this, narrow ``instructions`` to their own
    instruction union and provide ``name``, ``schema_id`` and ``formatter``.
    """

    model_config = GUIDE_MODEL_CONFIG

    name: ClassVar[str] = "Generic"
    schema_id: ClassVar[str] = ""
    formatter: ClassVar[InstructionFormatter] = InstructionFormatter()

    game_title: str
    categories: list[str]
    description: list[str] = Field(min_length=1)
    resources: list[str] = Field(default_factory=list)
    rules: dict[int, str]
    instructions: list[InstructionBase]

    @field_validator("rules", mode="before")
    @classmethod
    def check_rule_ids(cls, value: Any) -> Any:
        if isinstance(value, dict):
            seen: set[int] = set()
            for key in value:
                if isinstance(key, bool) or not _RULE_ID.fullmatch(str(key)):
                    raise ValueError(f"rule id must be a non-negative integer, got {key!r}")
                rule_id = int(key)
                if rule_id in seen:
                    raise ValueError(f"duplicate rule id {rule_id} (from key {key!r})")
                seen.add(rule_id)
        return value

    @classmethod
    def parse(cls, data: Any) -> "Guide":
        """Validate raw data into a guide.

        Raises:
            GuideValidationError: If the data does not match the guide shape
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise GuideValidationError.from_pydantic(e) from e

    def __str__(self) -> str:
        return self.format()

    # =========================================================================
    # Rules
    # =========================================================================

    def referenced_rule_ids(self) -> set[int]:
        """Rule ids referenced by any instruction's hide/show lists."""
        referenced: set[int] = set()
        for instruction in self.instructions:
            referenced.update(instruction.hide_on_ignored_rules)
            referenced.update(instruction.show_on_ignored_rules)
        return referenced

    def undeclared_rule_ids(self) -> set[int]:
        """Referenced rule ids with no entry in the rules table."""
        return self.referenced_rule_ids() - set(self.rules)

    def get_rules(self, impactful_only: bool = False) -> dict[int, str]:
        """Get the rules table.

        Args:
            impactful_only: Keep only rules that change instruction visibility

        Returns:
            Dict of rule id to description
        """
        if not impactful_only:
            return dict(self.rules)
        referenced = self.referenced_rule_ids()
        return {rule_id: text for rule_id, text in self.rules.items() if rule_id in referenced}

    # =========================================================================
    # Formatting
    # =========================================================================

    def format(self, options: Optional[FormatOptions] = None, **overrides: Any) -> str:
        """Render the whole guide as Markdown.

        Args:
            options: Format options (defaults when None)
            **overrides: Individual FormatOptions fields to override

        Returns:
            The rendered document
        """
        options = resolve_options(options, **overrides)
        sections = [
            self.format_header(),
            self.format_resources(),
            self.format_rules(options),
            self.format_instructions(options),
        ]
        return "\n\n".join(section for section in sections if section)

    def format_header(self) -> str:
        title = self.game_title
        if self.categories:
            title = f"{self.game_title} - {', '.join(self.categories)}"
        return MarkdownDocument.start().title(title).paragraphs(self.description).end()

    def format_resources(self) -> str:
        if not self.resources:
            return ""
        return (
            MarkdownDocument.start()
            .section("Resources")
            .paragraph("Other useful resources:")
            .unordered(self.resources)
            .end()
        )

    def format_rules(self, options: Optional[FormatOptions] = None, **overrides: Any) -> str:
        options = resolve_options(options, **overrides)
        if not self.rules:
            return ""
        rules = [
            strikethrough(text) if rule_id in options.ignored_rules else text
            for rule_id, text in sorted(self.rules.items())
        ]
        return (
            MarkdownDocument.start()
            .section("Rules")
            .paragraph("The run includes the following restrictions:")
            .ordered(rules)
            .end()
        )

    def format_comments(self, instruction: InstructionBase, options: FormatOptions) -> str:
        if options.hide_comments:
            return ""
        return "".join(f"<br>- {comment}" for comment in instruction.comments)

    def format_instruction(self, instruction: InstructionBase, options: FormatOptions) -> str:
        """Format one instruction's Action cell, comments included."""
        return self.formatter.format(instruction) + self.format_comments(instruction, options)

    def format_instructions(self, options: Optional[FormatOptions] = None, **overrides: Any) -> str:
        options = resolve_options(options, **overrides)
        document = MarkdownDocument.start().section("Instructions")

        instructions = filter_instructions(self.instructions, options)
        if not instructions:
            return document.paragraph(italic(NO_INSTRUCTIONS)).end()

        rows = [
            InstructionRow(
                id=i,
                area=instruction.area,
                action=self.format_instruction(instruction, options),
            )
            for i, instruction in enumerate(instructions)
        ]
        if options.collapse_instruction_groups:
            rows = collapse_rows(rows)

        if options.hide_instruction_id:
            columns = [AREA_COLUMN, ACTION_COLUMN]
            cells = [[row.area, row.action] for row in rows]
        else:
            columns = [ID_COLUMN, AREA_COLUMN, ACTION_COLUMN]
            cells = [[str(row.id), row.area, row.action] for row in rows]

        return document.table(columns, cells).end()


__all__ = ["Guide", "resolve_options", "NO_INSTRUCTIONS"]
