"""
Draw Distribution Chart Component

Builds the tables and Plotly charts the simulator page shows: observed draw
frequency per card against the catalog's expected probability, and the pity
counter's path across the session.
"""

from collections import Counter
from typing import Any, Dict, Iterable, List

import pandas as pd
import plotly.graph_objects as go

from gacha_kit.constants import get_rarity_color, rarity_from_string
from gacha_kit.items import item_rarity

SUMMARY_COLUMNS = ['card_id', 'name', 'rarity', 'count', 'observed_pct', 'expected_pct']


def summarize_draws(
    catalog: Iterable[Any],
    drawn: Iterable[Any],
    probabilities: Dict[Any, float],
) -> pd.DataFrame:
    """
    Tabulate how often each catalog card was drawn.

    Args:
        catalog: The engine's item snapshot (one row per item, in order)
        drawn: Items returned by the draws so far
        probabilities: DrawEngine.probabilities() output (percent per id)

    Returns:
        DataFrame with SUMMARY_COLUMNS; observed_pct is 0 when nothing was drawn
    """
    counts = Counter(item.id for item in drawn)
    total = sum(counts.values())

    rows = []
    for item in catalog:
        count = counts.get(item.id, 0)
        rows.append({
            'card_id': item.id,
            'name': getattr(item, 'name', str(item.id)),
            'rarity': item_rarity(item),
            'count': count,
            'observed_pct': round(count / total * 100, 2) if total else 0.0,
            'expected_pct': probabilities.get(item.id, 0.0),
        })

    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def create_draw_distribution_chart(summary: pd.DataFrame, height: int = 320) -> go.Figure:
    """
    Grouped bars of expected vs observed draw rate per card.

    Expected bars are muted; observed bars use the card's rarity color.

    Returns:
        Plotly Figure object ready for display with st.plotly_chart()
    """
    labels = [str(name) for name in summary['name']]
    bar_colors = [
        get_rarity_color(rarity_from_string(str(rarity))) for rarity in summary['rarity']
    ]
    total_draws = int(summary['count'].sum()) if len(summary) else 0

    fig = go.Figure()

    fig.add_trace(go.Bar(
        x=labels,
        y=list(summary['expected_pct']),
        name='Expected',
        marker=dict(color='rgba(128, 128, 128, 0.35)'),
        hovertemplate='%{x}<br>Expected: %{y:.2f}%<extra></extra>',
    ))

    fig.add_trace(go.Bar(
        x=labels,
        y=list(summary['observed_pct']),
        name='Observed',
        marker=dict(color=bar_colors),
        customdata=list(summary['count']),
        hovertemplate='%{x}<br>Observed: %{y:.2f}% (%{customdata} draws)<extra></extra>',
    ))

    fig.update_layout(
        title=dict(
            text=f"Observed vs Expected | {total_draws} draws",
            font=dict(size=14),
        ),
        barmode='group',
        xaxis=dict(title="Card", gridcolor='rgba(128, 128, 128, 0.2)'),
        yaxis=dict(title="Draw Rate %", gridcolor='rgba(128, 128, 128, 0.2)'),
        height=height,
        margin=dict(l=50, r=30, t=40, b=40),
        plot_bgcolor='rgba(0,0,0,0)',
        paper_bgcolor='rgba(0,0,0,0)',
        legend=dict(orientation='h', y=1.1),
    )

    return fig


def create_pity_history_chart(
    pity_history: List[int],
    guarantee_limit: int,
    height: int = 260,
) -> go.Figure:
    """Line chart of the pity counter before each draw, with the limit marked."""
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=list(range(1, len(pity_history) + 1)),
        y=pity_history,
        mode='lines',
        line=dict(color='rgba(85, 153, 255, 0.9)', width=2),
        hovertemplate='Draw %{x}<br>Pity: %{y}<extra></extra>',
        name='Pity',
        showlegend=False,
    ))

    fig.add_hline(
        y=guarantee_limit,
        line_dash="dash",
        line_color="#ffcc00",
        line_width=2,
        annotation_text=f"Guarantee at {guarantee_limit}",
        annotation_position="top left",
        annotation_font_color="#ffcc00",
        annotation_font_size=11,
    )

    fig.update_layout(
        xaxis=dict(title="Draw #", gridcolor='rgba(128, 128, 128, 0.2)'),
        yaxis=dict(
            title="Pity Count",
            range=[0, guarantee_limit * 1.1],
            gridcolor='rgba(128, 128, 128, 0.2)',
        ),
        height=height,
        margin=dict(l=50, r=30, t=20, b=40),
        plot_bgcolor='rgba(0,0,0,0)',
        paper_bgcolor='rgba(0,0,0,0)',
    )

    return fig
