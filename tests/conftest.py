"""Shared fixtures for runguide tests."""

import copy

import pytest


SAMPLE_GUIDE = {
    "_schema": "dark-souls-3",
    "gameTitle": "Dark Souls III",
    "categories": ["Any%", "Glitchless"],
    "description": [
        "A beginner friendly route.",
        "Times are from the current world record.",
    ],
    "resources": ["[Speedrun.com](https://www.speedrun.com/ds3)"],
    "rules": {
        "1": "No upgrades",
        "2": "No Ashen Estus",
    },
    "instructions": [
        {
            "type": "create-character",
            "area": "Character Creation",
            "class": "Pyromancer",
            "burialGift": "Fire Gem",
        },
        {
            "type": "allot-estus",
            "area": "Cemetery of Ash",
            "from": "normal",
            "to": "ashen",
            "hideOnIgnoredRules": [2],
        },
        {
            "type": "fight-boss",
            "area": "Cemetery of Ash",
            "boss": "Iudex Gundyr",
            "comments": ["Stay behind him"],
        },
        {
            "type": "light-bonfire",
            "area": "Firelink Shrine",
            "bonfire": "Firelink Shrine",
        },
        {
            "type": "upgrade-weapon",
            "area": "Firelink Shrine",
            "weapon": "Longsword",
            "level": 3,
            "hideOnIgnoredRules": [1],
        },
        {
            "type": "grab-items",
            "area": "High Wall of Lothric",
            "items": [{"name": "Estus Shard"}],
            "where": "behind the dragon",
            "optional": True,
        },
    ],
}


@pytest.fixture
def guide_data() -> dict:
    """A fresh copy of a small Dark Souls III guide document."""
    return copy.deepcopy(SAMPLE_GUIDE)
