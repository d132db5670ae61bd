"""
Gacha Kit - Catalog Items
=========================
The item shape the engine draws from, and the helpers that validate it.

The host application owns its catalog records. Any object exposing ``id``,
``weight`` and ``rarity`` attributes works; ``GachaItem`` is a ready-made
record for callers (and tests) that do not have their own.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import Any, Dict, Hashable, Optional, Protocol, Union


class WeightedItem(Protocol):
    """Structural type of a drawable catalog record."""
    id: Hashable
    weight: Union[Real, Decimal]
    rarity: Union[str, Enum]


@dataclass(frozen=True)
class GachaItem:
    """A single drawable card."""
    id: Hashable
    name: str
    rarity: Union[str, Enum]
    weight: Union[Real, Decimal]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GachaItem":
        """Build from a plain mapping (e.g. a row of the host's catalog table)."""
        return cls(
            id=data["id"],
            name=data.get("name", str(data["id"])),
            rarity=data["rarity"],
            weight=data["weight"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'rarity': normalize_rarity(self.rarity),
            'weight': self.weight,
        }


def normalize_rarity(rarity: Union[str, Enum, None]) -> Optional[str]:
    """
    Canonical comparable form of a rarity tag.

    Enum members collapse to their value; everything is stripped and
    lower-cased so ``Rarity.ULTRA_RARE``, ``"ultra_rare"`` and ``"ULTRA_RARE"``
    all compare equal. ``None`` stays ``None``.
    """
    if rarity is None:
        return None
    if isinstance(rarity, Enum):
        rarity = rarity.value
    return str(rarity).strip().lower()


def has_usable_weight(item: Any) -> bool:
    """True when ``item.weight`` exists and is a finite real number (Decimal included)."""
    weight = getattr(item, 'weight', None)
    if isinstance(weight, Decimal):
        return weight.is_finite()
    if isinstance(weight, bool) or not isinstance(weight, Real):
        return False
    return math.isfinite(weight)


def item_rarity(item: Any) -> Optional[str]:
    """Normalized rarity of an item, or None when it has no rarity."""
    return normalize_rarity(getattr(item, 'rarity', None))
