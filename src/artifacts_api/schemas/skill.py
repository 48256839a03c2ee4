"""Skill enumerations used both as response fields and as query filters."""

from enum import Enum


class SkillSchema(str, Enum):
    """Gathering skills."""

    MINING = "mining"
    WOODCUTTING = "woodcutting"
    FISHING = "fishing"


class CraftSkillSchema(str, Enum):
    WEAPONCRAFTING = "weaponcrafting"
    GEARCRAFTING = "gearcrafting"
    JEWELRYCRAFTING = "jewelrycrafting"
    COOKING = "cooking"
    WOODCUTTING = "woodcutting"
    MINING = "mining"
