"""
Unit tests for streamlit_app/utils/distribution_chart.py - draw summaries and charts.
"""
import plotly.graph_objects as go
import pytest

from gacha_kit.engine import DrawEngine
from gacha_kit.items import GachaItem
from gacha_kit.streamlit_app.utils.distribution_chart import (
    SUMMARY_COLUMNS,
    create_draw_distribution_chart,
    create_pity_history_chart,
    summarize_draws,
)


COMMON = GachaItem(id=1, name="Common", rarity="common", weight=75)
UR = GachaItem(id=2, name="UR", rarity="ultra_rare", weight=25)
CATALOG = [COMMON, UR]


class TestSummarizeDraws:
    """Tests for summarize_draws."""

    def test_counts_and_percentages(self):
        """Counts per card with observed and expected percentages."""
        engine = DrawEngine(CATALOG)
        summary = summarize_draws(engine.items, [COMMON, COMMON, COMMON, UR], engine.probabilities())

        assert list(summary.columns) == SUMMARY_COLUMNS
        assert list(summary['count']) == [3, 1]
        assert list(summary['observed_pct']) == [75.0, 25.0]
        assert list(summary['expected_pct']) == [75.0, 25.0]
        assert summary['count'].sum() == 4

    def test_no_draws(self):
        """Empty draw list gives zero counts, not a division error."""
        engine = DrawEngine(CATALOG)
        summary = summarize_draws(engine.items, [], engine.probabilities())
        assert list(summary['count']) == [0, 0]
        assert list(summary['observed_pct']) == [0.0, 0.0]


class TestCharts:
    """Tests for chart builders."""

    def test_distribution_chart_has_two_traces(self):
        """Expected and observed bars are grouped."""
        engine = DrawEngine(CATALOG)
        summary = summarize_draws(engine.items, [COMMON, UR], engine.probabilities())
        fig = create_draw_distribution_chart(summary)

        assert isinstance(fig, go.Figure)
        assert [trace.name for trace in fig.data] == ['Expected', 'Observed']
        assert "2 draws" in fig.layout.title.text

    def test_pity_history_chart(self):
        """The counter path is plotted against draw number."""
        fig = create_pity_history_chart([0, 1, 2, 0], guarantee_limit=5)
        assert list(fig.data[0].y) == [0, 1, 2, 0]
        assert list(fig.data[0].x) == [1, 2, 3, 4]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
