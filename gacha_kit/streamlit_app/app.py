"""
Gacha Simulator - Streamlit Web App
Edit a catalog, check its probabilities, and pull with the pity system.

The page plays the host application: it owns the pity counter (kept in
session state) and hands it to PityGuarantee on every pull.

Run with:
    streamlit run gacha_kit/streamlit_app/app.py
"""
import os

import pandas as pd
import streamlit as st

from gacha_kit import (
    DEFAULT_GUARANTEE_LIMIT,
    DrawEngine,
    DrawResult,
    GachaError,
    GachaItem,
    PityGuarantee,
    Rarity,
    make_random_source,
)
from gacha_kit.streamlit_app.utils.distribution_chart import (
    create_draw_distribution_chart,
    create_pity_history_chart,
    summarize_draws,
)

# =============================================================================
# CONFIG
# =============================================================================
# Set GACHA_SEED to replay the same pull sequence across sessions.
_seed_env = os.environ.get("GACHA_SEED", "").strip()
SEED = int(_seed_env) if _seed_env else None

DEFAULT_CATALOG = pd.DataFrame([
    {"id": 1, "name": "Common", "rarity": Rarity.COMMON.value, "weight": 70},
    {"id": 2, "name": "Rare", "rarity": Rarity.RARE.value, "weight": 25},
    {"id": 3, "name": "SR", "rarity": Rarity.SUPER_RARE.value, "weight": 4},
    {"id": 4, "name": "UR", "rarity": Rarity.ULTRA_RARE.value, "weight": 1},
])

st.set_page_config(page_title="Gacha Simulator", page_icon="🎲", layout="wide")


# Initialize session state for simulator
if 'rng' not in st.session_state:
    st.session_state.rng = make_random_source(SEED)
if 'pity_count' not in st.session_state:
    st.session_state.pity_count = 0
if 'drawn' not in st.session_state:
    st.session_state.drawn = []
if 'pity_history' not in st.session_state:
    st.session_state.pity_history = []


def reset_session():
    st.session_state.rng = make_random_source(SEED)
    st.session_state.pity_count = 0
    st.session_state.drawn = []
    st.session_state.pity_history = []


def pull(pity: PityGuarantee, count: int):
    """Pull ``count`` cards and carry the counter forward, one card at a time."""
    for _ in range(count):
        before = st.session_state.pity_count
        card = pity.draw(current_pity_count=before)
        st.session_state.drawn.append(card)
        st.session_state.pity_history.append(before)
        st.session_state.pity_count = pity.advance_pity_count(before, card)


st.title("🎲 Gacha Simulator")

# =============================================================================
# SIDEBAR - PITY SETTINGS
# =============================================================================
with st.sidebar:
    st.header("Pity Settings")
    guarantee_limit = st.number_input(
        "Guarantee limit", min_value=1, value=DEFAULT_GUARANTEE_LIMIT, step=1,
    )
    guaranteed_rarity = st.selectbox(
        "Guaranteed rarity",
        [r.value for r in Rarity],
        index=[r.value for r in Rarity].index(Rarity.ULTRA_RARE.value),
    )
    st.caption(f"Seed: {SEED if SEED is not None else 'random'}")
    if st.button("Reset session"):
        reset_session()

# =============================================================================
# CATALOG
# =============================================================================
st.subheader("Catalog")
edited = st.data_editor(DEFAULT_CATALOG, num_rows="dynamic", use_container_width=True, hide_index=True)
edited = edited.dropna(subset=["id", "weight"])

try:
    catalog = [GachaItem.from_dict(row) for row in edited.to_dict("records")]
    engine = DrawEngine(catalog, rng=st.session_state.rng)
    pity = PityGuarantee(
        engine,
        guarantee_limit=int(guarantee_limit),
        guaranteed_rarity=guaranteed_rarity,
    )
except GachaError as e:
    st.error(f"Invalid catalog: {e}")
    st.stop()

col1, col2 = st.columns(2)
with col1:
    st.markdown("**Per card**")
    probabilities = engine.probabilities()
    st.dataframe(
        pd.DataFrame([
            {"Card": item.name, "Rarity": item.rarity, "Chance %": probabilities[item.id]}
            for item in engine.items
        ]),
        hide_index=True,
        use_container_width=True,
    )
with col2:
    st.markdown("**Per rarity**")
    st.dataframe(
        pd.DataFrame([
            {"Rarity": rarity, "Chance %": pct}
            for rarity, pct in engine.rarity_probabilities().items()
        ]),
        hide_index=True,
        use_container_width=True,
    )
    st.metric("Expected pulls to guaranteed rarity", f"{pity.expected_draws_to_guarantee():.1f}")

# =============================================================================
# PULLS
# =============================================================================
st.divider()
b1, b2, b3 = st.columns(3)
try:
    if b1.button("Draw x1", use_container_width=True):
        pull(pity, 1)
    if b2.button("Draw x10", use_container_width=True):
        pull(pity, 10)
    if b3.button("Draw x100", use_container_width=True):
        pull(pity, 100)
except GachaError as e:
    st.error(str(e))

info = pity.next_guarantee_info(st.session_state.pity_count)
m1, m2, m3 = st.columns(3)
m1.metric("Pity count", info.current_pity_count)
m2.metric("Remaining", info.remaining)
m3.metric("Total pulls", len(st.session_state.drawn))

if info.remaining == 0:
    st.warning(f"Next pull is a guaranteed {pity.guaranteed_rarity}!")

if st.session_state.drawn:
    summary = summarize_draws(engine.items, st.session_state.drawn, probabilities)
    st.plotly_chart(create_draw_distribution_chart(summary), use_container_width=True)
    st.plotly_chart(
        create_pity_history_chart(st.session_state.pity_history, pity.guarantee_limit),
        use_container_width=True,
    )

    st.subheader("Last 10 pulls")
    recent = DrawResult.from_items(reversed(st.session_state.drawn[-10:]))
    st.dataframe(pd.DataFrame([r.to_dict() for r in recent]), hide_index=True, use_container_width=True)
