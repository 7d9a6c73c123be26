"""Runtime configuration from environment variables.

Variables may also come from a ``.env`` file in the working directory:

    TRIAGE_ID_BASE       first case id (default 1001)
    TRIAGE_LANG          UI language, "en" or "pt" (default "en")
    TRIAGE_LOG_LEVEL     logging level name (default "INFO")
    TRIAGE_SAMPLE_CASES  path to the sample waiting room JSON
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from src.triage.admission import DEFAULT_ID_BASE

logger = logging.getLogger(__name__)

SUPPORTED_LANGS = ("en", "pt")
DEFAULT_SAMPLE_CASES = Path("data/sample_cases/waiting_room.json")

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"

_ENV_FIELDS: dict[str, str] = {
    "TRIAGE_ID_BASE": "id_base",
    "TRIAGE_LANG": "lang",
    "TRIAGE_LOG_LEVEL": "log_level",
    "TRIAGE_SAMPLE_CASES": "sample_cases_path",
}


class Settings(BaseModel):
    """Validated desk settings."""

    id_base: int = Field(DEFAULT_ID_BASE, ge=0)
    lang: str = "en"
    log_level: str = "INFO"
    sample_cases_path: Path = DEFAULT_SAMPLE_CASES

    @field_validator("lang")
    @classmethod
    def _check_lang(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in SUPPORTED_LANGS:
            raise ValueError(f"unsupported language {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.strip().upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level {value!r}")
        return value


def load_settings() -> Settings:
    """Read settings from the environment (and ``.env``).

    Raises:
        EnvironmentError: If a variable is set to an invalid value.
    """
    load_dotenv()

    raw: dict[str, str] = {}
    for env_name, field in _ENV_FIELDS.items():
        value = os.environ.get(env_name)
        if value:
            raw[field] = value

    try:
        return Settings(**raw)
    except ValidationError as exc:
        bad = {str(err["loc"][0]) for err in exc.errors()}
        names = sorted(env for env, field in _ENV_FIELDS.items() if field in bad)
        raise EnvironmentError(
            f"Invalid value for {', '.join(names)}: {exc.errors()[0]['msg']}"
        ) from exc


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
