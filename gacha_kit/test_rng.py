"""
Unit tests for rng.py - numpy-backed random source.
"""
import pytest

from gacha_kit.rng import NumpyRandomSource, make_random_source


class TestNumpyRandomSource:
    """Tests for NumpyRandomSource."""

    def test_random_range(self):
        """random() stays in [0, 1)."""
        source = make_random_source(5)
        values = [source.random() for _ in range(1000)]
        assert all(0.0 <= v < 1.0 for v in values)
        assert all(isinstance(v, float) for v in values)

    def test_randrange_range(self):
        """randrange(n) stays in [0, n) and covers it."""
        source = make_random_source(5)
        values = {source.randrange(4) for _ in range(500)}
        assert values == {0, 1, 2, 3}

    def test_randrange_rejects_empty_range(self):
        """randrange(0) raises ValueError."""
        with pytest.raises(ValueError):
            make_random_source(5).randrange(0)

    def test_seeded_sequences_match(self):
        """Same seed, same sequence."""
        a = NumpyRandomSource(seed=99)
        b = NumpyRandomSource(seed=99)
        assert [a.random() for _ in range(10)] == [b.random() for _ in range(10)]

    def test_repr_shows_seed(self):
        """repr includes the seed."""
        assert repr(make_random_source(3)) == "NumpyRandomSource(seed=3)"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
