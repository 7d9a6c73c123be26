"""Tests for the interactive console menu."""

import io
from unittest.mock import patch

import pytest

from src.pipeline.desk import TriageDesk
from src.ui.console import (
    ConsoleMenu,
    build_parser,
    main,
    render_dashboard,
    render_menu,
    render_served_table,
    render_waiting,
)
from src.ui.strings import get_strings
from tests.clock import ManualClock

EN = get_strings("en")

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def run_menu(desk: TriageDesk, *lines: str, lang: str = "en") -> str:
    """Feed ``lines`` to a menu session and return everything printed."""
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    stdout = io.StringIO()
    ConsoleMenu(desk, lang=lang, stdin=stdin, stdout=stdout).run()
    return stdout.getvalue()


@pytest.fixture
def ticking_desk(ticking_clock: ManualClock) -> TriageDesk:
    return TriageDesk(clock=ticking_clock)


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------


class TestRenderers:
    def test_menu_lists_six_options(self) -> None:
        menu = render_menu(EN)
        for i in range(1, 7):
            assert f"  {i}. " in menu
        assert EN["menu_exit"] in menu

    def test_empty_waiting(self, desk: TriageDesk) -> None:
        assert render_waiting(desk.waiting(), EN) == EN["waiting_empty"]

    def test_empty_served(self, desk: TriageDesk) -> None:
        assert render_served_table(desk.served(), EN) == EN["served_empty"]

    def test_waiting_table_rows_in_serve_order(self, ticking_desk: TriageDesk) -> None:
        ticking_desk.submit("Alice", 3, "fever")
        ticking_desk.submit("Bob", 5, "chest pain")
        out = render_waiting(ticking_desk.waiting(), EN)
        assert out.splitlines()[0] == "WAITING QUEUE (2 cases)"
        assert out.index("Bob") < out.index("Alice")
        assert "CRITICAL" in out

    def test_served_table_shows_wait(
        self, ticking_clock: ManualClock, ticking_desk: TriageDesk
    ) -> None:
        ticking_desk.submit("Alice", 3, "fever")
        ticking_clock.advance(120)
        ticking_desk.serve_next()
        out = render_served_table(ticking_desk.served(), EN)
        assert "SERVED CASES (1 total)" in out
        assert "2m 01s" in out

    def test_dashboard(self, ticking_desk: TriageDesk) -> None:
        ticking_desk.submit("Alice", 3, "fever")
        ticking_desk.submit("Bob", 5, "chest pain")
        out = render_dashboard(ticking_desk, EN)
        assert "Cases Waiting: 2" in out
        assert "Cases Served: 0" in out
        assert "Total Processed: 2" in out
        assert "Average Wait: n/a" in out
        assert "Bob - CRITICAL (chest pain)" in out

    def test_dashboard_without_next_case(self, desk: TriageDesk) -> None:
        out = render_dashboard(desk, EN)
        assert EN["next_case_header"] not in out
        assert "Longest Wait: n/a" in out
        assert "Served by Priority: CRITICAL 0, SEVERE 0" in out

    def test_dashboard_longest_wait_and_levels(
        self, clock: ManualClock, desk: TriageDesk
    ) -> None:
        desk.submit("Alice", 3, "fever")
        desk.submit("Bob", 5, "chest pain")
        clock.advance(65)
        desk.serve_next()
        clock.advance(10)
        desk.serve_next()
        out = render_dashboard(desk, EN)
        assert "Longest Wait: Alice (1m 15s)" in out
        assert (
            "Served by Priority: CRITICAL 1, SEVERE 0, MODERATE 1, "
            "MINOR 0, MINIMAL 0"
        ) in out


# ---------------------------------------------------------------------------
# Menu loop
# ---------------------------------------------------------------------------


class TestConsoleMenu:
    def test_welcome_and_exit(self, desk: TriageDesk) -> None:
        out = run_menu(desk, "6")
        assert EN["welcome"] in out
        assert EN["goodbye"] in out

    def test_add_case(self, desk: TriageDesk) -> None:
        out = run_menu(desk, "1", "Alice", "4", "broken arm", "6")
        assert EN["case_added"] in out
        assert "ID: 1001" in out
        assert "Priority: SEVERE (4)" in out
        assert desk.admission.size() == 1

    def test_invalid_priority_number(self, desk: TriageDesk) -> None:
        out = run_menu(desk, "1", "Alice", "7", "x", "6")
        assert EN["invalid_priority"] in out
        assert desk.admission.size() == 0

    def test_non_numeric_priority(self, desk: TriageDesk) -> None:
        out = run_menu(desk, "1", "Alice", "high", "x", "6")
        assert EN["invalid_priority"] in out
        assert desk.admission.size() == 0

    def test_blank_label(self, desk: TriageDesk) -> None:
        out = run_menu(desk, "1", "   ", "3", "x", "6")
        assert EN["label_required"] in out
        assert desk.admission.size() == 0

    def test_serve_empty(self, desk: TriageDesk) -> None:
        out = run_menu(desk, "2", "6")
        assert EN["queue_clear"] in out

    def test_add_then_serve(self, desk: TriageDesk) -> None:
        out = run_menu(
            desk,
            "1", "A", "3", "fever",
            "1", "B", "5", "chest pain",
            "2",
            "6",
        )
        serving = out[out.index(EN["now_serving"]):]
        assert "Name: B" in serving
        assert "Waited: 0s" in serving
        assert desk.ledger.count() == 1

    def test_views(self, desk: TriageDesk) -> None:
        out = run_menu(desk, "1", "A", "3", "fever", "3", "4", "5", "6")
        assert "WAITING QUEUE (1 cases)" in out
        assert EN["served_empty"] in out
        assert "STATISTICS:" in out

    def test_invalid_choice(self, desk: TriageDesk) -> None:
        out = run_menu(desk, "9", "6")
        assert EN["menu_invalid"] in out

    def test_eof_exits_cleanly(self, desk: TriageDesk) -> None:
        out = run_menu(desk, "1", "A")
        assert EN["goodbye"] in out
        assert desk.admission.size() == 0

    def test_portuguese(self, desk: TriageDesk) -> None:
        out = run_menu(desk, "2", "6", lang="pt")
        assert get_strings("pt")["queue_clear"] in out


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


class TestMain:
    def test_parser_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.lang is None
        assert args.seed_samples is False

    def test_parser_rejects_unknown_lang(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--lang", "fr"])

    def test_main_runs_menu(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TRIAGE_LANG", raising=False)
        monkeypatch.setattr("sys.stdin", io.StringIO("6\n"))
        stdout = io.StringIO()
        monkeypatch.setattr("sys.stdout", stdout)
        with patch("src.ui.console.configure_logging") as configure:
            main(["--lang", "pt", "--log-level", "debug"])
        configure.assert_called_once_with("DEBUG")
        assert get_strings("pt")["goodbye"] in stdout.getvalue()

    def test_main_seeds_samples(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("3\n6\n"))
        stdout = io.StringIO()
        monkeypatch.setattr("sys.stdout", stdout)
        with patch("src.ui.console.configure_logging"), patch(
            "src.ui.console.load_sample_cases"
        ) as load, patch("src.ui.console.seed_desk") as seed:
            load.return_value = []
            main(["--seed-samples", "--lang", "en"])
        load.assert_called_once()
        seed.assert_called_once()
