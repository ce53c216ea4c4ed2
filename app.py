"""
Marketing Brief Builder — Streamlit front end.
Collects a brief, optionally drafts a campaign strategy with the LLM service,
and shows the top creatives ranked by the matching engine.
"""
import sys
import logging
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(PROJECT_ROOT))

import streamlit as st
import pandas as pd
import plotly.graph_objects as go

from models.brief import Brief, InvalidBrief
from engines.matching_engine import match
from engines.result_formatter import BREAKDOWN_FIELDS
from services.creatives_service import get_creatives, clear_cache
from services.llm_service import LLMServiceError, generate_campaign
from utils.similarity import THEME_TAXONOMY

# ─────────────────────────────────────
# Logging
# ─────────────────────────────────────
logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s — %(message)s")
logger = logging.getLogger(__name__)

# ─────────────────────────────────────
# Page Config — MUST be first Streamlit call
# ─────────────────────────────────────
st.set_page_config(
    page_title="Mohtawa · Brief Builder",
    page_icon="🎬",
    layout="wide",
)

st.markdown("""
<style>
    .block-container { padding-top: 1.5rem !important; }
    .match-card {
        background: linear-gradient(145deg, rgba(22, 27, 34, 0.9), rgba(13, 17, 23, 0.95));
        border: 1px solid rgba(99, 179, 237, 0.12);
        border-radius: 14px;
        padding: 0.9rem 1.2rem;
        margin-bottom: 0.6rem;
        color: #e6edf3;
    }
    .match-score { font-size: 1.6rem; font-weight: 800; color: #2ecc71; }
    .match-sub { font-size: 0.8rem; color: #8b949e; }
</style>
""", unsafe_allow_html=True)

CATEGORIES = list(THEME_TAXONOMY.keys())
CHANNELS = ["instagram", "tiktok", "youtube", "linkedin", "snapchat", "x"]
FORMATS = ["photo", "video", "animation", "illustration", "design", "copy", "social", "drone", "3d", "audio"]
BUDGETS = ["Low", "Medium", "High"]

# ─────────────────────────────────────
# Data
# ─────────────────────────────────────
try:
    roster = get_creatives()
except FileNotFoundError as e:
    st.error(f"Creative roster not found: {e}")
    st.stop()


def breakdown_chart(breakdown: dict, height: int = 260):
    """Horizontal bar chart of one match's score breakdown."""
    names = [n for n in BREAKDOWN_FIELDS if n != "language_bonus"]
    fig = go.Figure(go.Bar(
        x=[breakdown[n] for n in names],
        y=[n.replace("_", " ").title() for n in names],
        orientation="h",
        marker_color="#3a7bd5",
    ))
    fig.update_layout(
        height=height,
        margin=dict(l=0, r=10, t=10, b=0),
        xaxis=dict(range=[0, 1]),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
    )
    return fig


# ─────────────────────────────────────
# Brief form
# ─────────────────────────────────────
st.title("🎬 Marketing Brief Builder")
st.caption(f"{len(roster)} creatives in the roster")

with st.form("brief_form"):
    c1, c2 = st.columns(2)
    with c1:
        objective = st.text_input("Business objective *", placeholder="Launch new app in KSA")
        category = st.selectbox("Brand category *", CATEGORIES)
        audience = st.text_input("Target audience", placeholder="Young professionals, 22-35")
        region = st.text_input("Region", value="Global")
        budget = st.selectbox("Budget band", BUDGETS, index=1)
    with c2:
        channels = st.multiselect("Primary channels", CHANNELS, default=["instagram"])
        formats = st.multiselect("Formats", FORMATS, default=["video"])
        tone = st.text_input("Tone of voice", value="Professional")
        timeline = st.text_input("Timeline", value="4 weeks")
        assets = st.text_input("Brand assets", value="Logo and brand colors available")
    want_campaign = st.checkbox("Draft a campaign strategy (needs OPENAI_API_KEY)")
    submitted = st.form_submit_button("Find creatives", use_container_width=True)

if submitted:
    brief = Brief.from_dict({
        "objective": objective, "category": category, "audience": audience,
        "region": region, "channels": channels, "formats": formats,
        "tone": tone, "timeline": timeline, "budget": budget, "assets": assets,
    })

    if want_campaign:
        with st.spinner("Drafting campaign..."):
            try:
                st.session_state.campaign = generate_campaign(brief)
            except (InvalidBrief, LLMServiceError) as e:
                st.session_state.campaign = None
                st.warning(f"Campaign draft unavailable: {e}")

    try:
        st.session_state.result = match(brief, roster).to_dict()
    except InvalidBrief as e:
        st.session_state.result = None
        st.error(str(e))

# ─────────────────────────────────────
# Campaign draft
# ─────────────────────────────────────
campaign = st.session_state.get("campaign")
if campaign:
    with st.expander("📝 Campaign draft", expanded=False):
        for concept in campaign.get("content_concepts", []):
            st.markdown(f"**{concept.get('title', '')}** — {concept.get('description', '')}")
        st.json(campaign)

# ─────────────────────────────────────
# Matches
# ─────────────────────────────────────
result = st.session_state.get("result")
if result:
    summary = result["brief_summary"]
    st.subheader(
        f"Top matches · {summary['category']} · {summary['region']} · budget {summary['budget']}"
    )
    st.caption(
        f"{result['filtered_candidates']} shown of {result['total_candidates']} candidates"
    )

    matches = result["top_matches"]
    if not matches:
        st.info("No creatives passed the region and format filters.")
    else:
        left, right = st.columns([1.6, 1], gap="medium")
        with left:
            df = pd.DataFrame([
                {
                    "Rank": m["rank"],
                    "Name": m["name"],
                    "Location": m["location"],
                    "Rate": m["day_rate_band"],
                    "Availability": m["availability"],
                    "Rating": m["rating"],
                    "Score": m["total_score"],
                }
                for m in matches
            ])
            st.dataframe(df, hide_index=True, use_container_width=True)
        with right:
            best = matches[0]
            st.markdown(f"""
            <div class="match-card">
                <div class="match-sub">#1 · {best['location']}</div>
                <div><b>{best['name']}</b></div>
                <div class="match-score">{best['total_score']:.2f}</div>
                <div class="match-sub">language bonus ×{best['score_breakdown']['language_bonus']}</div>
            </div>
            """, unsafe_allow_html=True)
            st.plotly_chart(breakdown_chart(best["score_breakdown"]), use_container_width=True,
                            config={"displayModeBar": False})

if st.button("🔄  Reload roster"):
    clear_cache()
    st.rerun()
