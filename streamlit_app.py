# streamlit_app.py – AI Career Learning Path Generator
# Single-page demo: career goal + experience level → step-by-step learning path

import sys
from pathlib import Path

# make src/ importable without installing the package
sys.path.insert(0, str(Path(__file__).parent / "src"))

import streamlit as st

from career_path.config import configure_logging, get_settings
from career_path.errors import ConfigurationError
from career_path.guardrails import MAX_GOAL_LENGTH
from career_path.models import ExperienceLevel
from career_path.path_generator import PathGenerator, build_generator
from career_path.render import CYAN, TEXT_MUTED, render_path
from career_path.session import PathSession

# ─── Page config ─────────────────────────────────────────────────────────────
st.set_page_config(
    page_title="Learning Path Generator",
    page_icon="🧭",
    layout="centered",
)

configure_logging()
settings = get_settings()


@st.cache_resource
def _get_generator() -> PathGenerator:
    """Built once per server process; mock vs live never changes mid-run."""
    return build_generator(settings)


try:
    generator = _get_generator()
except ConfigurationError as e:
    st.error(f"Configuration error: {e}")
    st.stop()

if "path_session" not in st.session_state:
    st.session_state["path_session"] = PathSession()
session: PathSession = st.session_state["path_session"]

# ─── Sidebar: service status ─────────────────────────────────────────────────
with st.sidebar:
    st.markdown("### ⚙️ Service status")
    for _svc, _badge in settings.status_summary().items():
        st.markdown(f"**{_svc}**  \n{_badge}")
    if generator.mode == "mock" and not settings.genai.is_configured:
        st.caption("Set OPENAI_API_KEY in .env to generate personalised paths.")
    elif generator.mode == "mock":
        st.caption("FORCE_MOCK_MODE is on; unset it to use the live service.")


# ─── Header ──────────────────────────────────────────────────────────────────
st.markdown(
    f"<h1 style='text-align:center;color:{CYAN};'>Learning Path Generator</h1>"
    f"<p style='text-align:center;color:{TEXT_MUTED};'>"
    "Tell us where you want to go; get a step-by-step plan of courses and projects.</p>",
    unsafe_allow_html=True,
)

# ─── Form ────────────────────────────────────────────────────────────────────
_levels = list(ExperienceLevel)

with st.form("path_form", clear_on_submit=False):
    goal_input = st.text_input(
        "Your career goal",
        value=session.goal,
        placeholder="e.g. Machine Learning Engineer",
        help=f"Short goals work best (up to {MAX_GOAL_LENGTH} characters).",
    )
    level_input = st.selectbox(
        "Your experience level",
        options=_levels,
        index=_levels.index(ExperienceLevel(session.level)),
        format_func=lambda lvl: lvl.value,
    )
    submitted = st.form_submit_button(
        "⏳ Generating…" if session.is_submitting else "✨ Generate my learning path",
        type="primary",
        width="stretch",
        disabled=not session.can_submit,
    )

# ─── Handle submit ────────────────────────────────────────────────────────────
# begin() flips the state to Submitting and reruns so the button renders
# disabled while the generator call below is in flight.
if submitted and session.begin(goal_input, level_input):
    st.rerun()

if session.is_submitting:
    with st.spinner("🤖 Building your learning path…"):
        session.run(generator)
    st.rerun()


# ─── Results ─────────────────────────────────────────────────────────────────
if session.error:
    st.error(session.error)

if session.path:
    st.markdown("---")
    st.markdown(f"### 🧭 Your personalised learning path  <small style='color:grey;font-size:0.8rem;'>"
                f"({'🧪 Mock' if generator.mode == 'mock' else '☁️ Live'})</small>",
                unsafe_allow_html=True)
    st.markdown(render_path(session.path), unsafe_allow_html=True)

if session.path is not None or session.error:
    for v in session.warnings:
        st.warning(f"⚠️ [{v.code}] {v.message}")
