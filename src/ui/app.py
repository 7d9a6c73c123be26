"""Streamlit dashboard for the triage desk.

Usage:
    streamlit run src/ui/app.py
"""

import logging

import streamlit as st

from src.config.settings import configure_logging, load_settings
from src.pipeline.desk import TriageDesk
from src.triage.admission import (
    MAX_PRIORITY,
    MIN_PRIORITY,
    Case,
    InvalidPriority,
    TriageError,
)
from src.triage.ledger import ServedRecord
from src.ui.banner import render_served_banner
from src.ui.formatting import format_clock, format_wait, priority_label
from src.ui.sample_cases import load_sample_cases, seed_desk
from src.ui.strings import get_strings

logger = logging.getLogger(__name__)

_SETTINGS = load_settings()

# Show INFO-level logs in the terminal running streamlit
configure_logging(_SETTINGS.log_level)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Triage Desk",
    page_icon="\U0001f3e5",
    layout="wide",
)


# ---------------------------------------------------------------------------
# Session state initialisation
# ---------------------------------------------------------------------------


def _new_desk() -> TriageDesk:
    return TriageDesk(id_base=_SETTINGS.id_base)


def _init_session_state() -> None:
    defaults: dict[str, object] = {
        "desk": None,
        "last_served": None,
        "lang": _SETTINGS.lang,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value
    if st.session_state["desk"] is None:
        st.session_state["desk"] = _new_desk()


_init_session_state()


# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------


def _render_sidebar(s: dict[str, str], lang: str, desk: TriageDesk) -> None:
    with st.sidebar:
        lang_options = ["English", "Português"]
        lang_index = 1 if lang == "pt" else 0
        selected_lang = st.selectbox(
            s["language_label"],
            lang_options,
            index=lang_index,
            key="lang_selector",
        )
        new_lang = "pt" if selected_lang == "Português" else "en"
        if new_lang != st.session_state["lang"]:
            st.session_state["lang"] = new_lang
            st.rerun()

        st.divider()
        st.header(s["sidebar_header"])

        if st.button(s["load_samples"]):
            samples = load_sample_cases(_SETTINGS.sample_cases_path, lang)
            admitted = seed_desk(desk, samples)
            st.success(s["samples_loaded"].format(count=len(admitted)))

        st.divider()
        if st.button(s["reset_desk"]):
            st.session_state["desk"] = _new_desk()
            st.session_state["last_served"] = None
            logger.info("Desk reset from dashboard")
            st.rerun()


# ---------------------------------------------------------------------------
# Intake form
# ---------------------------------------------------------------------------


def _render_intake_form(s: dict[str, str], desk: TriageDesk) -> None:
    st.subheader(s["intake_header"])

    with st.form("intake_form", clear_on_submit=True):
        label = st.text_input(s["field_label"])
        priority = st.slider(
            s["field_priority"],
            min_value=MIN_PRIORITY,
            max_value=MAX_PRIORITY,
            value=3,
            format="%d",
        )
        st.caption(priority_label(priority, s))
        description = st.text_area(s["field_description"], height=68)

        submitted = st.form_submit_button(
            s["submit_button"],
            type="primary",
            use_container_width=True,
        )

    if submitted:
        try:
            case = desk.submit(label, priority, description)
        except InvalidPriority:
            st.error(s["invalid_priority"])
        except TriageError:
            st.error(s["label_required"])
        else:
            st.success(f"{s['case_added']} #{case.id} {case.label}")


# ---------------------------------------------------------------------------
# Result display
# ---------------------------------------------------------------------------


def _case_rows(cases: list[Case], s: dict[str, str]) -> list[dict[str, object]]:
    return [
        {
            s["col_id"]: c.id,
            s["col_label"]: c.label,
            s["col_priority"]: priority_label(c.priority_level, s),
            s["col_description"]: c.description,
            s["col_time"]: format_clock(c.submitted_at),
        }
        for c in cases
    ]


def _served_rows(
    records: list[ServedRecord], s: dict[str, str]
) -> list[dict[str, object]]:
    return [
        {
            s["col_id"]: r.case.id,
            s["col_label"]: r.case.label,
            s["col_priority"]: priority_label(r.case.priority_level, s),
            s["col_description"]: r.case.description,
            s["col_wait"]: format_wait(r.wait),
        }
        for r in records
    ]


def _render_dashboard(s: dict[str, str], desk: TriageDesk) -> None:
    st.subheader(s["dashboard_header"])
    stats = desk.stats()
    c1, c2, c3, c4 = st.columns(4)
    c1.metric(s["stat_waiting"], stats.waiting)
    c2.metric(s["stat_served"], stats.served)
    c3.metric(s["stat_total"], stats.total_processed)
    c4.metric(
        s["stat_avg_wait"],
        format_wait(stats.average_wait)
        if stats.average_wait is not None
        else s["not_available"],
    )
    longest = stats.longest_wait
    c5, c6 = st.columns([1, 3])
    c5.metric(
        s["stat_longest_wait"],
        format_wait(longest.wait) if longest is not None else s["not_available"],
        help=longest.case.label if longest is not None else None,
    )
    c6.markdown(
        f"**{s['stat_by_level']}:** "
        + ", ".join(
            f"{priority_label(level, s)} {count}"
            for level, count in stats.served_by_level.items()
        )
    )
    if stats.next_case is not None:
        nxt = stats.next_case
        st.markdown(
            f"**{s['next_case_header']}** {nxt.label} - "
            f"{priority_label(nxt.priority_level, s)} ({nxt.description})"
        )


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> None:
    """Main entry point for the Streamlit dashboard."""
    lang: str = st.session_state.get("lang", "en")
    s = get_strings(lang)
    desk: TriageDesk = st.session_state["desk"]

    st.title(s["page_title"])
    _render_sidebar(s, lang, desk)

    col_left, col_right = st.columns([2, 3], gap="large")

    with col_left:
        _render_intake_form(s, desk)

        st.divider()
        if st.button(s["serve_button"], use_container_width=True):
            record = desk.serve_next()
            st.session_state["last_served"] = record
            if record is None:
                st.info(s["queue_clear"])

        last = st.session_state.get("last_served")
        if last is not None:
            st.markdown(f"**{s['now_serving']}**")
            render_served_banner(last, s)

    with col_right:
        _render_dashboard(s, desk)

        waiting = desk.waiting()
        st.markdown(f"**{s['waiting_header'].format(count=len(waiting))}**")
        if waiting:
            st.dataframe(_case_rows(waiting, s), hide_index=True)
        else:
            st.caption(s["waiting_empty"])

        served = desk.served()
        st.markdown(f"**{s['served_header'].format(count=len(served))}**")
        if served:
            st.dataframe(_served_rows(served, s), hide_index=True)
        else:
            st.caption(s["served_empty"])


if __name__ == "__main__":
    main()
