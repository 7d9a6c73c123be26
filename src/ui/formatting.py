"""Text formatting shared by the console menu and the Streamlit dashboard."""

from datetime import datetime, timedelta, tzinfo
from typing import Optional, Sequence

from src.triage.admission import PriorityLevel

RULE_WIDTH = 80

# Column widths for ID, label, priority, description; last column is free
CASE_COLUMN_WIDTHS: tuple[int, ...] = (6, 20, 12, 25)


def priority_label(level: int, s: dict[str, str]) -> str:
    """Map a priority level to its localised name."""
    try:
        member = PriorityLevel(level)
    except ValueError:
        return s["level_unknown"]
    return s[f"level_{member.name.lower()}"]


def priority_display(level: int, s: dict[str, str]) -> str:
    """Name plus number, e.g. ``CRITICAL (5)``."""
    return f"{priority_label(level, s)} ({level})"


def format_clock(moment: datetime, tz: Optional[tzinfo] = None) -> str:
    """Render a timestamp as ``HH:MM:SS`` in ``tz`` (local time by default)."""
    return moment.astimezone(tz).strftime("%H:%M:%S")


def format_wait(waited: Optional[timedelta]) -> str:
    """Human duration: ``45s``, ``2m 05s``, ``1h 02m 05s``."""
    if waited is None:
        return "-"
    total = max(0, int(waited.total_seconds()))
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours:
        return f"{hours}h {minutes:02d}m {seconds:02d}s"
    if minutes:
        return f"{minutes}m {seconds:02d}s"
    return f"{seconds}s"


def _cell(text: str, width: Optional[int]) -> str:
    if width is None:
        return text
    if len(text) > width - 1:
        text = text[: width - 2] + "…"
    return text.ljust(width)


def format_row(cells: Sequence[str], widths: Sequence[int]) -> str:
    """Left-align cells to fixed widths; cells past ``widths`` are left free."""
    parts = [
        _cell(str(cell), widths[i] if i < len(widths) else None)
        for i, cell in enumerate(cells)
    ]
    return "".join(parts).rstrip()


def render_table(
    title: str,
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    widths: Sequence[int] = CASE_COLUMN_WIDTHS,
) -> str:
    """Fixed-width table with a title and ``=``/``-`` rules."""
    lines = [
        title,
        "=" * RULE_WIDTH,
        format_row(headers, widths),
        "-" * RULE_WIDTH,
    ]
    lines.extend(format_row(row, widths) for row in rows)
    return "\n".join(lines)
