"""
Gacha Kit - Draw Results
========================
Transport projection of a drawn card.
"""

from typing import Any, Dict, Iterable, List

from .items import normalize_rarity


class DrawResult:
    """Wraps a drawn card for serialization (API responses, logs, tables)."""

    def __init__(self, card: Any):
        self.card = card

    @classmethod
    def from_items(cls, cards: Iterable[Any]) -> List["DrawResult"]:
        return [cls(card) for card in cards]

    @property
    def name(self) -> str:
        return self.card.name

    @property
    def rarity(self):
        return self.card.rarity

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict with card_id, name and rarity (rarity normalized to a string)."""
        return {
            'card_id': self.card.id,
            'name': self.card.name,
            'rarity': normalize_rarity(self.card.rarity),
        }

    def __repr__(self) -> str:
        return f"DrawResult({self.card!r})"
