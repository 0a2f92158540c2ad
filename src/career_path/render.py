"""
HTML rendering of a learning path for the Streamlit page.

Each step becomes a card: type icon, ``TYPE • DURATION`` caption,
``"{step}. {title}"`` heading and description.  A vertical connector
joins a card to the next one; the last card has none.  All model text
is HTML-escaped before it reaches ``st.markdown(unsafe_allow_html=True)``.
"""

from __future__ import annotations

import html as _html

from career_path.models import LearningStep, StepType

# Color constants
BG_CARD = "#1E293B"
BORDER = "#334155"
CYAN = "#22D3EE"
EMERALD = "#34D399"
TEXT_PRIMARY = "#F1F5F9"
TEXT_MUTED = "#94A3B8"

STEP_ICON = {StepType.COURSE: "📘", StepType.PROJECT: "🛠️"}
STEP_COLOUR = {StepType.COURSE: CYAN, StepType.PROJECT: EMERALD}

CONNECTOR_HTML = f"<div class='lp-connector' style='width:1px;height:32px;background:{BORDER};margin-top:8px;'></div>"


def render_step(step: LearningStep, is_last: bool) -> str:
    colour    = STEP_COLOUR[step.type]
    icon      = STEP_ICON[step.type]
    connector = "" if is_last else CONNECTOR_HTML
    return f"""
    <div class="lp-step" style="display:flex;gap:16px;align-items:flex-start;padding:16px;margin-bottom:12px;
                background:{BG_CARD};border:1px solid {BORDER};border-radius:10px;">
      <div style="display:flex;flex-direction:column;align-items:center;">
        <div class="lp-icon" style="width:48px;height:48px;border-radius:50%;display:flex;align-items:center;
                    justify-content:center;font-size:1.4rem;background:{colour}33;">{icon}</div>
        {connector}
      </div>
      <div style="flex:1;">
        <div class="lp-caption" style="font-size:0.72rem;font-weight:600;text-transform:uppercase;
                    letter-spacing:0.08em;color:{TEXT_MUTED};">{_html.escape(step.caption)}</div>
        <div class="lp-title" style="font-size:1.1rem;font-weight:700;color:{TEXT_PRIMARY};margin-top:4px;">
          {step.step}. {_html.escape(step.title)}</div>
        <div class="lp-description" style="color:{TEXT_MUTED};margin-top:4px;">{_html.escape(step.description)}</div>
      </div>
    </div>
    """


def render_path(path: list[LearningStep]) -> str:
    """Concatenate the cards for *path* in the order given."""
    return "".join(
        render_step(s, is_last=(i == len(path) - 1))
        for i, s in enumerate(path)
    )
