"""Tests for environment-driven settings."""

from pathlib import Path
from unittest.mock import patch

import pytest

from src.config.settings import DEFAULT_SAMPLE_CASES, Settings, load_settings

_VARS = ("TRIAGE_ID_BASE", "TRIAGE_LANG", "TRIAGE_LOG_LEVEL", "TRIAGE_SAMPLE_CASES")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _no_dotenv():
    with patch("src.config.settings.load_dotenv") as load:
        yield load


class TestLoadSettings:
    def test_defaults(self) -> None:
        settings = load_settings()
        assert settings == Settings()
        assert settings.id_base == 1001
        assert settings.lang == "en"
        assert settings.log_level == "INFO"
        assert settings.sample_cases_path == DEFAULT_SAMPLE_CASES

    def test_reads_dotenv(self, _no_dotenv) -> None:
        load_settings()
        _no_dotenv.assert_called_once()

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRIAGE_ID_BASE", "1")
        monkeypatch.setenv("TRIAGE_LANG", "PT")
        monkeypatch.setenv("TRIAGE_LOG_LEVEL", "debug")
        monkeypatch.setenv("TRIAGE_SAMPLE_CASES", "/tmp/cases.json")
        settings = load_settings()
        assert settings.id_base == 1
        assert settings.lang == "pt"
        assert settings.log_level == "DEBUG"
        assert settings.sample_cases_path == Path("/tmp/cases.json")

    def test_empty_value_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRIAGE_LANG", "")
        assert load_settings().lang == "en"

    @pytest.mark.parametrize(
        "name,value",
        [
            ("TRIAGE_ID_BASE", "abc"),
            ("TRIAGE_ID_BASE", "-5"),
            ("TRIAGE_LANG", "fr"),
            ("TRIAGE_LOG_LEVEL", "LOUD"),
        ],
    )
    def test_invalid_values(
        self, monkeypatch: pytest.MonkeyPatch, name: str, value: str
    ) -> None:
        monkeypatch.setenv(name, value)
        with pytest.raises(EnvironmentError, match=name):
            load_settings()
