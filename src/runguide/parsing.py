"""Guide loading: decode text, pick the game module, validate.

A guide document names its game module with a top-level ``_schema`` key:

    {"_schema": "dark-souls-3", "gameTitle": "...", ...}
"""

import json
import logging
from pathlib import Path
from typing import Any, Literal

import yaml

from runguide.core.guide import Guide
from runguide.exceptions import GuideParseError, GuideValidationError, Violation
from runguide.games import GUIDE_MODULES

logger = logging.getLogger(__name__)

SCHEMA_KEY = "_schema"

_FORMAT_BY_SUFFIX = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def decode(content: str, fmt: Literal["json", "yaml"] = "json") -> Any:
    """Decode JSON or YAML text.

    Raises:
        GuideParseError: If the text is not valid for the format
    """
    try:
        if fmt == "yaml":
            return yaml.safe_load(content)
        return json.loads(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise GuideParseError(f"Invalid {fmt.upper()} guide: {e}") from e


def guide_module_for(data: Any) -> type[Guide]:
    """Look up the game module named by the document's ``_schema``.

    Raises:
        GuideParseError: If the document is not an object
        GuideValidationError: If ``_schema`` is missing or unknown
    """
    if not isinstance(data, dict):
        raise GuideParseError(f"Guide must be an object, got {type(data).__name__}")

    schema_id = data.get(SCHEMA_KEY)
    if schema_id is None:
        raise GuideValidationError([Violation(location=SCHEMA_KEY, message="Field required")])

    module = GUIDE_MODULES.get(schema_id) if isinstance(schema_id, str) else None
    if module is None:
        expected = " | ".join(repr(key) for key in GUIDE_MODULES)
        raise GuideValidationError([
            Violation(
                location=SCHEMA_KEY,
                message=f"Invalid schema. Expected {expected}",
                input=schema_id,
            )
        ])
    return module


def build_guide(data: Any) -> Guide:
    """Validate decoded data with the game module it names."""
    module = guide_module_for(data)
    logger.debug("Parsing guide with %s module", module.name)

    guide = module.parse(data)

    undeclared = guide.undeclared_rule_ids()
    if undeclared:
        logger.warning(
            "Instructions reference undeclared rules %s; they are ignored",
            sorted(undeclared),
        )
    return guide


def parse_guide(content: str, fmt: Literal["json", "yaml"] = "json") -> Guide:
    """Parse guide text into a validated guide.

    Args:
        content: Guide document text
        fmt: "json" or "yaml"

    Returns:
        A guide instance of the module named by ``_schema``

    Raises:
        GuideParseError: If the text cannot be decoded
        GuideValidationError: If the document shape is invalid
    """
    return build_guide(decode(content, fmt))


def load_guide(path: str | Path) -> Guide:
    """Load a guide file, choosing JSON or YAML by suffix."""
    path = Path(path)
    fmt = _FORMAT_BY_SUFFIX.get(path.suffix.lower(), "json")
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise GuideParseError(f"Guide is not valid UTF-8: {e}") from e
    logger.debug("Loaded %s (%d bytes) as %s", path, len(content), fmt)
    return parse_guide(content, fmt)


__all__ = [
    "SCHEMA_KEY",
    "decode",
    "guide_module_for",
    "build_guide",
    "parse_guide",
    "load_guide",
]
