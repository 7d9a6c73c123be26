"""Interactive console menu for the triage desk.

Usage:
    triage-desk [--lang pt] [--log-level DEBUG] [--seed-samples]
    python -m src.ui.console
"""

import argparse
import logging
import sys
from typing import Optional, TextIO

from src.config.settings import SUPPORTED_LANGS, configure_logging, load_settings
from src.pipeline.desk import TriageDesk
from src.triage.admission import Case, InvalidPriority, TriageError
from src.triage.ledger import ServedRecord
from src.ui.formatting import (
    format_clock,
    format_wait,
    priority_display,
    priority_label,
    render_table,
)
from src.ui.sample_cases import load_sample_cases, seed_desk
from src.ui.strings import get_strings

logger = logging.getLogger(__name__)

BANNER = "=" * 78

_MENU_KEYS = (
    "menu_add",
    "menu_serve",
    "menu_queue",
    "menu_served",
    "menu_dashboard",
    "menu_exit",
)


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------


def render_case(case: Case, s: dict[str, str], heading: str) -> str:
    lines = [
        heading,
        f"   {s['field_id']}: {case.id}",
        f"   {s['field_label']}: {case.label}",
        f"   {s['field_priority']}: {priority_display(case.priority_level, s)}",
        f"   {s['field_description']}: {case.description}",
    ]
    return "\n".join(lines)


def render_served(record: ServedRecord, s: dict[str, str]) -> str:
    return "\n".join(
        [
            render_case(record.case, s, s["now_serving"]),
            f"   {s['field_wait']}: {format_wait(record.wait)}",
        ]
    )


def render_waiting(cases: list[Case], s: dict[str, str]) -> str:
    if not cases:
        return s["waiting_empty"]
    rows = [
        [
            str(c.id),
            c.label,
            priority_label(c.priority_level, s),
            c.description,
            format_clock(c.submitted_at),
        ]
        for c in cases
    ]
    headers = [
        s["col_id"],
        s["col_label"],
        s["col_priority"],
        s["col_description"],
        s["col_time"],
    ]
    return render_table(s["waiting_header"].format(count=len(cases)), headers, rows)


def render_served_table(records: list[ServedRecord], s: dict[str, str]) -> str:
    if not records:
        return s["served_empty"]
    rows = [
        [
            str(r.case.id),
            r.case.label,
            priority_label(r.case.priority_level, s),
            r.case.description,
            format_wait(r.wait),
        ]
        for r in records
    ]
    headers = [
        s["col_id"],
        s["col_label"],
        s["col_priority"],
        s["col_description"],
        s["col_wait"],
    ]
    return render_table(s["served_header"].format(count=len(records)), headers, rows)


def render_dashboard(desk: TriageDesk, s: dict[str, str]) -> str:
    stats = desk.stats()
    avg = (
        format_wait(stats.average_wait)
        if stats.average_wait is not None
        else s["not_available"]
    )
    longest = stats.longest_wait
    longest_text = (
        f"{longest.case.label} ({format_wait(longest.wait)})"
        if longest is not None
        else s["not_available"]
    )
    by_level = ", ".join(
        f"{priority_label(level, s)} {count}"
        for level, count in stats.served_by_level.items()
    )
    lines = [
        BANNER,
        s["app_title"].center(78),
        BANNER,
        "",
        s["stats_header"],
        f"   {s['stat_waiting']}: {stats.waiting}",
        f"   {s['stat_served']}: {stats.served}",
        f"   {s['stat_total']}: {stats.total_processed}",
        f"   {s['stat_avg_wait']}: {avg}",
        f"   {s['stat_longest_wait']}: {longest_text}",
        f"   {s['stat_by_level']}: {by_level}",
    ]
    if stats.next_case is not None:
        nxt = stats.next_case
        lines += [
            "",
            s["next_case_header"],
            f"   {nxt.label} - {priority_label(nxt.priority_level, s)} "
            f"({nxt.description})",
        ]
    return "\n".join(lines)


def render_menu(s: dict[str, str]) -> str:
    lines = [BANNER, s["menu_title"].center(78), BANNER]
    lines += [f"  {i}. {s[key]}" for i, key in enumerate(_MENU_KEYS, start=1)]
    lines.append(BANNER)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Menu loop
# ---------------------------------------------------------------------------


class ConsoleMenu:
    """Reads menu choices and drives a TriageDesk."""

    def __init__(
        self,
        desk: TriageDesk,
        lang: str = "en",
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.desk = desk
        self.s = get_strings(lang)
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout

    def _say(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def _ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def add_case(self) -> Optional[Case]:
        label = self._ask("\n" + self.s["prompt_label"])
        raw_priority = self._ask(self.s["prompt_priority"])
        description = self._ask(self.s["prompt_description"])

        try:
            priority = int(raw_priority.strip())
        except ValueError:
            self._say("\n" + self.s["invalid_priority"])
            return None

        try:
            case = self.desk.submit(label, priority, description)
        except InvalidPriority:
            self._say("\n" + self.s["invalid_priority"])
            return None
        except TriageError:
            self._say("\n" + self.s["label_required"])
            return None

        self._say()
        self._say(render_case(case, self.s, self.s["case_added"]))
        self._say(f"   {self.s['field_time']}: {format_clock(case.submitted_at)}")
        return case

    def serve_next(self) -> Optional[ServedRecord]:
        record = self.desk.serve_next()
        self._say()
        if record is None:
            self._say(self.s["queue_clear"])
        else:
            self._say(render_served(record, self.s))
        return record

    def show_queue(self) -> None:
        self._say()
        self._say(render_waiting(self.desk.waiting(), self.s))

    def show_served(self) -> None:
        self._say()
        self._say(render_served_table(self.desk.served(), self.s))

    def show_dashboard(self) -> None:
        self._say()
        self._say(render_dashboard(self.desk, self.s))

    def run(self) -> None:
        """Loop until the user exits or input ends."""
        actions = {
            "1": self.add_case,
            "2": self.serve_next,
            "3": self.show_queue,
            "4": self.show_served,
            "5": self.show_dashboard,
        }
        self._say()
        self._say(self.s["welcome"])
        self._say(self.s["welcome_hint"])
        try:
            while True:
                self._say()
                self._say(render_menu(self.s))
                choice = self._ask(self.s["menu_prompt"]).strip()
                if choice == "6":
                    break
                action = actions.get(choice)
                if action is None:
                    self._say("\n" + self.s["menu_invalid"])
                    continue
                action()
        except EOFError:
            logger.debug("Input closed, leaving menu")
        self._say("\n" + self.s["goodbye"] + "\n")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Emergency room triage desk")
    parser.add_argument("--lang", choices=SUPPORTED_LANGS, help="UI language")
    parser.add_argument(
        "--log-level", help="Logging level (default from TRIAGE_LOG_LEVEL)"
    )
    parser.add_argument(
        "--seed-samples",
        action="store_true",
        help="Start with the sample waiting room loaded",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging((args.log_level or settings.log_level).upper())
    lang = args.lang or settings.lang

    desk = TriageDesk(id_base=settings.id_base)
    if args.seed_samples:
        seed_desk(desk, load_sample_cases(settings.sample_cases_path, lang))

    ConsoleMenu(desk, lang=lang).run()


if __name__ == "__main__":
    main()
