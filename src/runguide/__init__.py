"""runguide: render game-run guide documents into Markdown walkthroughs."""

from runguide.core import FormatOptions, Guide, MarkdownDocument
from runguide.exceptions import (
    GuideParseError,
    GuideValidationError,
    RunGuideError,
    UnknownInstructionError,
    Violation,
)
from runguide.games import GUIDE_MODULES, DarkSouls3Guide
from runguide.parsing import load_guide, parse_guide

__version__ = "0.1.0"

__all__ = [
    "FormatOptions",
    "Guide",
    "MarkdownDocument",
    "GuideParseError",
    "GuideValidationError",
    "RunGuideError",
    "UnknownInstructionError",
    "Violation",
    "GUIDE_MODULES",
    "DarkSouls3Guide",
    "load_guide",
    "parse_guide",
    "__version__",
]
