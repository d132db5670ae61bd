"""
Gacha Kit - Weighted Draw Engine
================================
Weighted random selection over a fixed catalog snapshot.

Each item is drawn with probability ``weight / total_weight``. The engine
copies the catalog at construction, so later changes to the caller's
collection never affect an engine that already exists.

Usage:
    engine = DrawEngine(catalog)
    card = engine.draw()
    ten_pull = engine.draw_multiple(10)
"""

import logging
from decimal import Decimal
from enum import Enum
from numbers import Integral
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from .constants import PROBABILITY_DECIMALS
from .errors import InvalidArgument, InvalidConfiguration
from .items import has_usable_weight, item_rarity, normalize_rarity
from .rng import RandomSource, make_random_source

logger = logging.getLogger(__name__)


def validate_draw_count(count: Any) -> None:
    """Raise InvalidArgument unless ``count`` is a positive integer."""
    if isinstance(count, bool) or not isinstance(count, Integral):
        raise InvalidArgument("Draw count must be an integer")
    if count <= 0:
        raise InvalidArgument("Draw count must be positive")


class DrawEngine:
    """Draws items from an immutable weighted catalog."""

    def __init__(self, items: Iterable[Any], rng: Optional[RandomSource] = None):
        self._items: Tuple[Any, ...] = tuple(items)
        self._total_weight = 0
        self._validate_items()

        total = 0
        try:
            for item in self._items:
                total += item.weight
        except TypeError:
            # e.g. Decimal mixed with float
            raise InvalidConfiguration("All weights must share one numeric type") from None
        self._total_weight = total
        self._rng = rng if rng is not None else make_random_source()

        logger.debug(
            "DrawEngine built: %d items, total weight %s", len(self._items), self._total_weight
        )

    def _validate_items(self) -> None:
        if not self._items:
            raise InvalidConfiguration("Cards cannot be empty")
        if not all(has_usable_weight(item) for item in self._items):
            raise InvalidConfiguration("All cards must respond to :weight")
        if not all(item.weight > 0 for item in self._items):
            raise InvalidConfiguration("All weights must be positive")

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def items(self) -> Tuple[Any, ...]:
        """The catalog snapshot, in insertion order."""
        return self._items

    @property
    def total_weight(self):
        return self._total_weight

    @property
    def rng(self) -> RandomSource:
        return self._rng

    def __len__(self) -> int:
        return len(self._items)

    def items_with_rarity(self, rarity: Union[str, Enum]) -> List[Any]:
        """All items whose rarity matches ``rarity`` (case-insensitive)."""
        tag = normalize_rarity(rarity)
        return [item for item in self._items if item_rarity(item) == tag]

    # =========================================================================
    # Drawing
    # =========================================================================

    def draw(self) -> Optional[Any]:
        """
        Draw one item with probability proportional to its weight.

        Rolls ``r`` uniformly in [0, total_weight) and walks the snapshot
        accumulating weights, returning the first item whose running sum
        exceeds ``r``. If float accumulation leaves the walk short of ``r``,
        the last item is returned.
        """
        if not self._items:
            return None

        if isinstance(self._total_weight, Decimal):
            roll = Decimal(str(self._rng.random())) * self._total_weight
        else:
            roll = self._rng.random() * self._total_weight
        cumulative = 0

        for item in self._items:
            cumulative += item.weight
            if roll < cumulative:
                return item

        # Fallback to last item
        logger.warning(
            "Weighted walk exhausted (roll=%r, total=%r); returning last item", roll, cumulative
        )
        return self._items[-1]

    def draw_multiple(self, count: int) -> List[Any]:
        """
        Draw ``count`` independent items (e.g. a 10-pull).

        Args:
            count: Number of items to draw, must be positive

        Returns:
            List of drawn items, in draw order

        Raises:
            InvalidArgument: If count is not a positive integer
        """
        validate_draw_count(count)
        return [self.draw() for _ in range(count)]

    # =========================================================================
    # Probabilities
    # =========================================================================

    def probabilities(self) -> Dict[Any, float]:
        """Draw probability per item id, as a percentage rounded to 2 decimals."""
        return {
            item.id: round(float(item.weight / self._total_weight * 100), PROBABILITY_DECIMALS)
            for item in self._items
        }

    def rarity_probabilities(self) -> Dict[Optional[str], float]:
        """Draw probability per normalized rarity, as a percentage rounded to 2 decimals."""
        weights: Dict[Optional[str], Any] = {}
        for item in self._items:
            rarity = item_rarity(item)
            weights[rarity] = weights.get(rarity, 0) + item.weight
        return {
            rarity: round(float(weight / self._total_weight * 100), PROBABILITY_DECIMALS)
            for rarity, weight in weights.items()
        }

    def __repr__(self) -> str:
        return f"DrawEngine(items={len(self._items)}, total_weight={self._total_weight!r})"
