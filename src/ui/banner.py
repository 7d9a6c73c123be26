"""Coloured "now serving" banner for the Streamlit dashboard.

The banner is raw HTML, so every user-entered field is escaped before it is
placed in the markup.
"""

import html

import streamlit as st

from src.triage.admission import PriorityLevel
from src.triage.ledger import ServedRecord
from src.ui.formatting import format_wait, priority_label

# ---------------------------------------------------------------------------
# Priority display config
# ---------------------------------------------------------------------------

COLOR_MAP: dict[PriorityLevel, dict[str, str]] = {
    PriorityLevel.CRITICAL: {"bg": "#DC2626", "fg": "#FFFFFF", "emoji": "\U0001f534"},
    PriorityLevel.SEVERE: {"bg": "#EA580C", "fg": "#FFFFFF", "emoji": "\U0001f7e0"},
    PriorityLevel.MODERATE: {"bg": "#CA8A04", "fg": "#000000", "emoji": "\U0001f7e1"},
    PriorityLevel.MINOR: {"bg": "#16A34A", "fg": "#FFFFFF", "emoji": "\U0001f7e2"},
    PriorityLevel.MINIMAL: {"bg": "#2563EB", "fg": "#FFFFFF", "emoji": "\U0001f535"},
}


def served_banner_html(record: ServedRecord, s: dict[str, str]) -> str:
    """Build the banner markup for a served case."""
    case = record.case
    colors = COLOR_MAP[PriorityLevel(case.priority_level)]
    return f"""
        <div style="
            background-color: {colors['bg']};
            color: {colors['fg']};
            padding: 1.5rem;
            border-radius: 0.75rem;
            text-align: center;
            margin-bottom: 1rem;
        ">
            <h2 style="margin: 0; color: {colors['fg']};">
                {colors['emoji']} #{case.id} {html.escape(case.label)}
            </h2>
            <p style="margin: 0.5rem 0 0 0; font-size: 1.1rem;">
                {html.escape(priority_label(case.priority_level, s))} &middot;
                {html.escape(s['field_wait'])}:
                <strong>{format_wait(record.wait)}</strong>
            </p>
        </div>
        """


def render_served_banner(record: ServedRecord, s: dict[str, str]) -> None:
    st.markdown(served_banner_html(record, s), unsafe_allow_html=True)
    if record.case.description:
        st.info(record.case.description)
