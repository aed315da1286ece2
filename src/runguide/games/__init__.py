"""Game modules, keyed by the ``_schema`` value of a guide document."""

from runguide.core.guide import Guide
from runguide.games.dark_souls_3 import DarkSouls3Guide

GUIDE_MODULES: dict[str, type[Guide]] = {
    DarkSouls3Guide.schema_id: DarkSouls3Guide,
}

__all__ = ["GUIDE_MODULES", "DarkSouls3Guide"]
