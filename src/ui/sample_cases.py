"""Synthetic waiting-room cases for demos.

Loads ``data/sample_cases/waiting_room.json`` and feeds it to a desk so
the console menu and the dashboard can start with a populated queue.
"""

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import BaseModel, Field, ValidationError

from src.pipeline.desk import TriageDesk
from src.triage.admission import Case, TriageError

logger = logging.getLogger(__name__)


class SampleCase(BaseModel):
    """One entry of the sample waiting room file."""

    label: str
    priority_level: int
    description: str = ""
    lang: str = Field("en", description="Language the entry is written in")


def load_sample_cases(path: Union[str, Path], lang: str = "en") -> list[SampleCase]:
    """Load sample cases for ``lang``, skipping malformed entries.

    A missing or unreadable file yields an empty list.
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError):
        logger.warning("Failed to load sample cases from %s", path, exc_info=True)
        return []

    if not isinstance(raw, list):
        logger.warning("Sample case file %s is not a JSON list, ignoring", path)
        return []

    cases: list[SampleCase] = []
    for index, entry in enumerate(raw):
        try:
            sample = SampleCase.model_validate(entry)
        except ValidationError:
            logger.warning("Skipping malformed sample case #%d in %s", index, path)
            continue
        if sample.lang == lang:
            cases.append(sample)
    return cases


def seed_desk(desk: TriageDesk, samples: list[SampleCase]) -> list[Case]:
    """Submit samples to ``desk``. Rejected entries are logged and skipped."""
    admitted: list[Case] = []
    for sample in samples:
        try:
            admitted.append(
                desk.submit(sample.label, sample.priority_level, sample.description)
            )
        except TriageError as exc:
            logger.warning("Sample case '%s' rejected: %s", sample.label, exc)
    logger.info("Seeded desk with %d of %d sample cases", len(admitted), len(samples))
    return admitted
