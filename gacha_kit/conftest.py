"""
Shared pytest fixtures.

Standard catalog (weights sum to 100):
- Common 70, Rare 25, SR 4, UR 1
"""
from typing import Any, List, NamedTuple

import pytest

from gacha_kit.items import GachaItem


class FixedRandom:
    """Random source that always rolls the same value and picks index 0."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value

    def randrange(self, n: int) -> int:
        return 0


class Cards(NamedTuple):
    common: Any
    rare: Any
    sr: Any
    ur: Any

    @property
    def all(self) -> List[Any]:
        return [self.common, self.rare, self.sr, self.ur]


@pytest.fixture
def cards() -> Cards:
    return Cards(
        common=GachaItem(id=1, name="Common", rarity="common", weight=70),
        rare=GachaItem(id=2, name="Rare", rarity="rare", weight=25),
        sr=GachaItem(id=3, name="SR", rarity="super_rare", weight=4),
        ur=GachaItem(id=4, name="UR", rarity="ultra_rare", weight=1),
    )


@pytest.fixture
def all_cards(cards) -> List[Any]:
    return cards.all


@pytest.fixture
def fixed_random():
    """Factory: fixed_random(0.0) always rolls 0.0 (the first catalog card)."""
    return FixedRandom
