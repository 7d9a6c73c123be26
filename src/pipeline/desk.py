"""Triage desk: admission and ledger wired together.

Connects the two components linearly:
    submit → pending set → serve next → ledger

The presentation layer (console menu, Streamlit dashboard) talks only to
this object.

Usage:
    from src.pipeline.desk import TriageDesk

    desk = TriageDesk()
    desk.submit("B", 5, "chest pain")
    record = desk.serve_next()
    print(record.case.label, record.wait)
"""

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from pydantic import BaseModel, Field

from src.triage.admission import DEFAULT_ID_BASE, Case, PriorityAdmission, utc_now
from src.triage.ledger import ServedRecord, TriageLedger

logger = logging.getLogger(__name__)


class DeskStats(BaseModel):
    """Snapshot of the dashboard figures."""

    waiting: int
    served: int
    total_processed: int
    next_case: Optional[Case] = None
    average_wait: Optional[timedelta] = None
    longest_wait: Optional[ServedRecord] = None
    served_by_level: dict[int, int] = Field(default_factory=dict)


class TriageDesk:
    """Single-caller facade over PriorityAdmission and TriageLedger."""

    def __init__(
        self,
        id_base: int = DEFAULT_ID_BASE,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._clock = clock
        self.admission = PriorityAdmission(id_base=id_base, clock=clock)
        self.ledger = TriageLedger(clock=clock)

    def submit(self, label: str, priority_level: int, description: str = "") -> Case:
        """Submit a case. Raises InvalidPriority / InvalidCase on rejection."""
        return self.admission.submit(label, priority_level, description)

    def peek_next(self) -> Optional[Case]:
        return self.admission.peek_next()

    def serve_next(self) -> Optional[ServedRecord]:
        """Serve the top case and record it.

        Returns:
            The ledger record, or None when nothing is pending. The ledger
            is untouched in that case.
        """
        case = self.admission.serve_next()
        if case is None:
            logger.info("Nothing pending, queue is clear")
            return None
        return self.ledger.record(case, served_at=self._clock())

    def waiting(self) -> list[Case]:
        return self.admission.snapshot_ordered()

    def served(self) -> list[ServedRecord]:
        return self.ledger.records()

    def stats(self) -> DeskStats:
        waiting = self.admission.size()
        served = self.ledger.count()
        return DeskStats(
            waiting=waiting,
            served=served,
            total_processed=waiting + served,
            next_case=self.admission.peek_next(),
            average_wait=self.ledger.average_wait(),
            longest_wait=self.ledger.longest_wait(),
            served_by_level=self.ledger.count_by_level(),
        )
