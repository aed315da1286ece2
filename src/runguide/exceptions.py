"""Exception hierarchy for runguide."""

import json
from typing import Any, Optional

from pydantic import BaseModel, ValidationError


class Violation(BaseModel):
    """A single structural problem found while validating a guide."""

    location: str  # e.g. "instructions.3.items.0.name"
    message: str  # default validator message
    input: Optional[Any] = None  # offending data fragment

    def describe(self) -> str:
        """Format as "location: message: fragment"."""
        text = f"{self.location}: {self.message}" if self.location else self.message
        if self.input is None:
            return text
        try:
            fragment = json.dumps(self.input, default=str)
        except (TypeError, ValueError):
            # non-string dict keys (YAML dates) or circular data
            fragment = repr(self.input)
        return f"{text}: {fragment}"


class RunGuideError(Exception):
    """Base exception for all runguide errors."""


class GuideParseError(RunGuideError):
    """Guide text could not be decoded as JSON or YAML."""


class GuideValidationError(RunGuideError):
    """Raised when a guide does not match the expected document shape."""

    def __init__(self, violations: list[Violation]):
        self.violations = violations
        super().__init__(f"Guide validation failed with {len(violations)} violation(s)")

    @classmethod
    def from_pydantic(cls, error: ValidationError) -> "GuideValidationError":
        """Build from a pydantic ValidationError, keeping each offending input."""
        return cls([
            Violation(
                location=".".join(str(part) for part in detail["loc"]),
                message=detail["msg"],
                input=detail.get("input"),
            )
            for detail in error.errors()
        ])

    def __str__(self) -> str:
        if not self.violations:
            return "GuideValidationError(no violations)"
        lines = [f"GuideValidationError({len(self.violations)} violations):"]
        for violation in self.violations:
            lines.append(f"  {violation.describe()}")
        return "\n".join(lines)


class UnknownInstructionError(RunGuideError, TypeError):
    """Raised when no formatting branch matches an instruction.

    Validated guides only contain known kinds, so this signals a formatter
    that is missing a branch rather than bad input.
    """

    def __init__(self, instruction: Any):
        self.instruction = instruction
        super().__init__(f"No formatter for instruction {type(instruction).__name__}")


__all__ = [
    "Violation",
    "RunGuideError",
    "GuideParseError",
    "GuideValidationError",
    "UnknownInstructionError",
]
