"""
Gacha Kit - Shared Constants
============================
Enums, defaults, and display data used across modules.
"""

from enum import Enum
from typing import Dict


# =============================================================================
# ENUMS
# =============================================================================

class Rarity(Enum):
    """Card rarity tiers, lowest to highest."""
    COMMON = "common"
    RARE = "rare"
    SUPER_RARE = "super_rare"
    ULTRA_RARE = "ultra_rare"


# =============================================================================
# DEFAULTS
# =============================================================================

# Draws without the guaranteed rarity before the next draw is forced
DEFAULT_GUARANTEE_LIMIT = 100
DEFAULT_GUARANTEED_RARITY = Rarity.ULTRA_RARE.value

# Standard "10-pull"
DEFAULT_DRAW_COUNT = 10

# probabilities() reports percentages with this many decimals
PROBABILITY_DECIMALS = 2


# =============================================================================
# DISPLAY
# =============================================================================

RARITY_COLORS: Dict[Rarity, str] = {
    Rarity.COMMON: "#888888",
    Rarity.RARE: "#5599ff",
    Rarity.SUPER_RARE: "#cc77ff",
    Rarity.ULTRA_RARE: "#ffcc00",
}

RARITY_ABBREVIATIONS: Dict[Rarity, str] = {
    Rarity.COMMON: "C",
    Rarity.RARE: "R",
    Rarity.SUPER_RARE: "SR",
    Rarity.ULTRA_RARE: "UR",
}


def get_rarity_color(rarity: Rarity) -> str:
    """Get hex color for a rarity tier."""
    return RARITY_COLORS.get(rarity, "#ffffff")


def get_rarity_abbreviation(rarity: Rarity) -> str:
    """Get the short label for a rarity tier."""
    return RARITY_ABBREVIATIONS.get(rarity, "?")


def rarity_from_string(s: str) -> Rarity:
    """Parse rarity from string (case-insensitive). Unknown tags fall back to COMMON."""
    try:
        return Rarity(s.strip().lower())
    except ValueError:
        return Rarity.COMMON
