"""Append-only record of served cases and statistics derived from it."""

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict

from src.triage.admission import MAX_PRIORITY, MIN_PRIORITY, Case, utc_now

logger = logging.getLogger(__name__)


class ServedRecord(BaseModel):
    """A case together with the moment it was served."""

    model_config = ConfigDict(frozen=True)

    case: Case
    served_at: datetime

    @property
    def wait(self) -> timedelta:
        return wait_duration(self.case, self.served_at)


def wait_duration(case: Case, served_at: datetime) -> timedelta:
    """Time between submission and service, never negative.

    A served time earlier than the submission (wall-clock adjustments)
    clamps to zero.
    """
    waited = served_at - case.submitted_at
    if waited < timedelta(0):
        logger.warning(
            "Negative wait for case %d (%s), clamping to zero", case.id, waited
        )
        return timedelta(0)
    return waited


class TriageLedger:
    """Served cases in service order, oldest first."""

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._records: list[ServedRecord] = []
        self._clock = clock

    def record(self, case: Case, served_at: Optional[datetime] = None) -> ServedRecord:
        """Append a served case. ``served_at`` defaults to now."""
        entry = ServedRecord(
            case=case, served_at=served_at if served_at is not None else self._clock()
        )
        self._records.append(entry)
        logger.info(
            "Recorded case %d '%s' (waited %s)", case.id, case.label, entry.wait
        )
        return entry

    def all(self) -> list[Case]:
        return [r.case for r in self._records]

    def records(self) -> list[ServedRecord]:
        return list(self._records)

    def count(self) -> int:
        return len(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def wait_duration(self, case: Case, served_at: datetime) -> timedelta:
        return wait_duration(case, served_at)

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def average_wait(self) -> Optional[timedelta]:
        """Mean wait across all served cases, or None before the first."""
        if not self._records:
            return None
        total = sum((r.wait for r in self._records), timedelta(0))
        return total / len(self._records)

    def longest_wait(self) -> Optional[ServedRecord]:
        if not self._records:
            return None
        # max() keeps the first of equal waits, i.e. the earliest served
        return max(self._records, key=lambda r: r.wait)

    def count_by_level(self) -> dict[int, int]:
        """Served count per priority level, every level present."""
        counts = {level: 0 for level in range(MAX_PRIORITY, MIN_PRIORITY - 1, -1)}
        for r in self._records:
            counts[r.case.priority_level] += 1
        return counts
