"""
Gacha Kit - Weighted Draws with Pity
====================================
Weighted random card draws over a fixed catalog, with an optional pity
guarantee that forces a rarity after a run of unlucky draws.

The host application owns the catalog and the per-user pity counters;
everything here is stateless apart from random-number consumption.
"""

from .constants import (
    # Enums
    Rarity,
    # Defaults
    DEFAULT_GUARANTEE_LIMIT,
    DEFAULT_GUARANTEED_RARITY,
    DEFAULT_DRAW_COUNT,
    PROBABILITY_DECIMALS,
    # Display
    RARITY_COLORS,
    get_rarity_color,
    get_rarity_abbreviation,
    rarity_from_string,
)

from .errors import (
    GachaError,
    InvalidConfiguration,
    InvalidArgument,
)

from .items import (
    GachaItem,
    WeightedItem,
    normalize_rarity,
)

from .rng import (
    RandomSource,
    NumpyRandomSource,
    make_random_source,
)

from .engine import DrawEngine
from .pity import PityGuarantee, GuaranteeInfo, expected_draws_with_pity
from .multiple_draw import MultipleDraw
from .result import DrawResult

__all__ = [
    # Constants
    'Rarity',
    'DEFAULT_GUARANTEE_LIMIT',
    'DEFAULT_GUARANTEED_RARITY',
    'DEFAULT_DRAW_COUNT',
    'PROBABILITY_DECIMALS',
    'RARITY_COLORS',
    'get_rarity_color',
    'get_rarity_abbreviation',
    'rarity_from_string',
    # Errors
    'GachaError',
    'InvalidConfiguration',
    'InvalidArgument',
    # Items
    'GachaItem',
    'WeightedItem',
    'normalize_rarity',
    # Randomness
    'RandomSource',
    'NumpyRandomSource',
    'make_random_source',
    # Drawing
    'DrawEngine',
    'PityGuarantee',
    'GuaranteeInfo',
    'expected_draws_with_pity',
    'MultipleDraw',
    'DrawResult',
]
