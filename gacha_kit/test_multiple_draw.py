"""
Unit tests for multiple_draw.py - fixed-size batch draws.
"""
import pytest

from gacha_kit.engine import DrawEngine
from gacha_kit.errors import InvalidArgument
from gacha_kit.multiple_draw import MultipleDraw
from gacha_kit.rng import make_random_source


@pytest.fixture
def engine(all_cards) -> DrawEngine:
    return DrawEngine(all_cards, rng=make_random_source(11))


class TestInitialization:
    """Tests for MultipleDraw construction."""

    def test_default_draw_count(self, engine):
        """Default is the standard 10-pull."""
        drawer = MultipleDraw(engine)
        assert drawer.draw_count == 10
        assert drawer.draw_count == MultipleDraw.DEFAULT_DRAW_COUNT

    def test_custom_draw_count(self, engine):
        """Custom counts are kept."""
        assert MultipleDraw(engine, draw_count=15).draw_count == 15

    def test_keeps_engine(self, engine):
        """The engine is stored as given."""
        assert MultipleDraw(engine).engine is engine

    def test_rejects_non_engine(self):
        """Anything but a DrawEngine raises InvalidArgument."""
        with pytest.raises(InvalidArgument, match="Engine must be a DrawEngine instance"):
            MultipleDraw("invalid_engine")

    def test_rejects_zero_count(self, engine):
        """Zero count raises InvalidArgument."""
        with pytest.raises(InvalidArgument, match="Draw count must be positive"):
            MultipleDraw(engine, draw_count=0)

    def test_rejects_negative_count(self, engine):
        """Negative count raises InvalidArgument."""
        with pytest.raises(InvalidArgument, match="Draw count must be positive"):
            MultipleDraw(engine, draw_count=-5)


class TestExecute:
    """Tests for execute() and its draw() alias."""

    def test_returns_draw_count_cards(self, engine, all_cards):
        """execute returns draw_count catalog cards."""
        for n in (1, 5, 10, 100):
            results = MultipleDraw(engine, draw_count=n).execute()
            assert len(results) == n
            assert all(card in all_cards for card in results)

    def test_draw_alias(self, engine):
        """draw() behaves like execute()."""
        drawer = MultipleDraw(engine)
        assert len(drawer.draw()) == len(drawer.execute()) == 10

    def test_single_card_type(self, cards):
        """A UR-only engine only returns UR."""
        drawer = MultipleDraw(DrawEngine([cards.ur]), draw_count=5)
        assert all(card.rarity == "ultra_rare" for card in drawer.execute())

    def test_weight_distribution(self, engine):
        """Weight 70 lands in [600, 800] over a 1000-draw batch."""
        results = MultipleDraw(engine, draw_count=1000).execute()
        common_count = sum(1 for card in results if card.rarity == "common")
        assert 600 <= common_count <= 800


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
