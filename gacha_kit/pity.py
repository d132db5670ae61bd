"""
Gacha Kit - Pity Guarantee
==========================
Forces the guaranteed rarity once a caller-held counter reaches the limit.

Rules:
1. The counter is "draws since the last guaranteed-rarity card";
2. Below the limit, draws go to the engine unchanged (the guaranteed rarity
   can still be won naturally);
3. At or above the limit, the draw is picked uniformly among the
   guaranteed-rarity cards only;
4. Any guaranteed-rarity card, forced or natural, resets the counter to 0;
   anything else adds 1.

PityGuarantee holds no counter. The caller passes the current value on every
call and persists the new one (see ``advance_pity_count``) between sessions.

Usage:
    engine = DrawEngine(catalog)
    pity = PityGuarantee(engine, guarantee_limit=100, guaranteed_rarity="ultra_rare")

    card = pity.draw(current_pity_count=user_pity)
    user_pity = pity.advance_pity_count(user_pity, card)
"""

import logging
from dataclasses import dataclass, asdict
from enum import Enum
from numbers import Integral
from typing import Any, Dict, List, Optional, Union

from .constants import DEFAULT_GUARANTEE_LIMIT, DEFAULT_GUARANTEED_RARITY
from .engine import DrawEngine, validate_draw_count
from .errors import InvalidArgument, InvalidConfiguration
from .items import item_rarity, normalize_rarity
from .rng import RandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuaranteeInfo:
    """Where a counter stands relative to the next guarantee."""
    current_pity_count: int
    remaining: int
    guaranteed_at: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


def validate_pity_count(current_pity_count: Any) -> None:
    """Raise InvalidArgument unless the counter is a non-negative integer."""
    if isinstance(current_pity_count, bool) or not isinstance(current_pity_count, Integral):
        raise InvalidArgument("Pity count must be an integer")
    if current_pity_count < 0:
        raise InvalidArgument("Pity count must be non-negative")


def expected_draws_with_pity(p: float, limit: int) -> float:
    """
    Expected draws until the first guaranteed-rarity card, starting from 0.

    Draws at counter 0..limit-1 are natural rolls with success chance ``p``;
    the draw at counter == limit is forced. So this is E[min(G, limit + 1)]
    for a geometric G:

        E = sum_{k=0}^{limit} q^k = (1 - q^(limit + 1)) / p,   q = 1 - p
    """
    if p <= 0:
        return float(limit + 1)
    if p >= 1:
        return 1.0

    q = 1 - p
    return (1 - q ** (limit + 1)) / p


class PityGuarantee:
    """Stateless pity layer wrapped around a DrawEngine."""

    def __init__(
        self,
        engine: DrawEngine,
        guarantee_limit: int = DEFAULT_GUARANTEE_LIMIT,
        guaranteed_rarity: Union[str, Enum] = DEFAULT_GUARANTEED_RARITY,
        rng: Optional[RandomSource] = None,
    ):
        if not isinstance(engine, DrawEngine):
            raise InvalidArgument("Engine must be a DrawEngine instance")
        if (
            isinstance(guarantee_limit, bool)
            or not isinstance(guarantee_limit, Integral)
            or guarantee_limit <= 0
        ):
            raise InvalidArgument("Guarantee limit must be positive")

        self.engine = engine
        self.guarantee_limit = guarantee_limit
        self.guaranteed_rarity = normalize_rarity(guaranteed_rarity)
        self._rng = rng if rng is not None else engine.rng

    # =========================================================================
    # Counter transitions
    # =========================================================================

    def is_guaranteed(self, item: Any) -> bool:
        """True when ``item`` carries the guaranteed rarity."""
        return item_rarity(item) == self.guaranteed_rarity

    def advance_pity_count(self, current_pity_count: int, item: Any) -> int:
        """Counter value after drawing ``item`` at ``current_pity_count``."""
        if self.is_guaranteed(item):
            return 0
        return current_pity_count + 1

    # =========================================================================
    # Drawing
    # =========================================================================

    def draw(self, current_pity_count: int = 0) -> Any:
        """
        Draw one card, forcing the guaranteed rarity at or above the limit.

        Args:
            current_pity_count: Draws since the last guaranteed-rarity card

        Returns:
            The drawn catalog item

        Raises:
            InvalidArgument: If current_pity_count is negative
            InvalidConfiguration: If a guaranteed draw is due but the catalog
                has no card of the guaranteed rarity
        """
        validate_pity_count(current_pity_count)

        if current_pity_count >= self.guarantee_limit:
            return self._draw_guaranteed()

        return self.engine.draw()

    def draw_multiple(self, count: int, current_pity_count: int = 0) -> List[Any]:
        """
        Draw ``count`` cards, carrying the counter from one draw to the next.

        The counter starts at ``current_pity_count`` and is updated after every
        draw, so a guarantee can trigger (more than once) inside one batch.
        """
        validate_draw_count(count)
        validate_pity_count(current_pity_count)

        results = []
        running_count = current_pity_count

        for _ in range(count):
            card = self.draw(running_count)
            results.append(card)
            running_count = self.advance_pity_count(running_count, card)

        return results

    def _draw_guaranteed(self) -> Any:
        candidates = self.engine.items_with_rarity(self.guaranteed_rarity)
        if not candidates:
            raise InvalidConfiguration(f"No cards with rarity {self.guaranteed_rarity} found")

        logger.debug(
            "Pity limit %d reached; forcing %s draw from %d cards",
            self.guarantee_limit, self.guaranteed_rarity, len(candidates),
        )
        return candidates[self._rng.randrange(len(candidates))]

    # =========================================================================
    # Reporting
    # =========================================================================

    def next_guarantee_info(self, current_pity_count: int = 0) -> GuaranteeInfo:
        """
        Remaining draws until the next guarantee.

        Example:
            pity.next_guarantee_info(75)
            # => GuaranteeInfo(current_pity_count=75, remaining=25, guaranteed_at=100)
        """
        validate_pity_count(current_pity_count)

        return GuaranteeInfo(
            current_pity_count=current_pity_count,
            remaining=max(self.guarantee_limit - current_pity_count, 0),
            guaranteed_at=self.guarantee_limit,
        )

    def natural_rate(self) -> float:
        """Chance (0-1) that a normal draw lands on the guaranteed rarity."""
        weight = sum(item.weight for item in self.engine.items_with_rarity(self.guaranteed_rarity))
        return weight / self.engine.total_weight

    def expected_draws_to_guarantee(self) -> float:
        """Expected draws from a fresh counter until the guaranteed rarity appears."""
        return expected_draws_with_pity(self.natural_rate(), self.guarantee_limit)

    def __repr__(self) -> str:
        return (
            f"PityGuarantee(limit={self.guarantee_limit}, "
            f"guaranteed_rarity={self.guaranteed_rarity!r})"
        )
