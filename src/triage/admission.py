"""Priority admission for the triage desk.

Holds the pending cases and decides which one is served next. Ordering is
by priority level (5 = most urgent) descending, then by submission time
ascending, then by id ascending, so every pair of pending cases has a
defined order.

Usage:
    from src.triage.admission import PriorityAdmission

    admission = PriorityAdmission()
    admission.submit("A", 3, "fever")
    admission.submit("B", 5, "chest pain")
    admission.serve_next().label  # "B"
"""

import heapq
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DEFAULT_ID_BASE = 1001

MIN_PRIORITY = 1
MAX_PRIORITY = 5


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TriageError(ValueError):
    """Base class for rejected triage operations."""


class InvalidPriority(TriageError):
    """Raised when a submission carries a priority outside 1-5."""

    def __init__(self, priority_level: object):
        self.priority_level = priority_level
        super().__init__(
            f"Invalid priority {priority_level!r}: "
            f"must be between {MIN_PRIORITY} and {MAX_PRIORITY}"
        )


class InvalidCase(TriageError):
    """Raised when a submission has a missing or non-text label."""


# ---------------------------------------------------------------------------
# Data models
# ---------------------------------------------------------------------------


class PriorityLevel(int, Enum):
    """Urgency levels, 5 being the most urgent."""

    CRITICAL = 5
    SEVERE = 4
    MODERATE = 3
    MINOR = 2
    MINIMAL = 1


class Case(BaseModel):
    """A submitted case. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: int
    label: str = Field(..., min_length=1, description="Display name")
    priority_level: int = Field(..., ge=MIN_PRIORITY, le=MAX_PRIORITY)
    description: str = ""
    submitted_at: datetime


def utc_now() -> datetime:
    """Default clock for the desk."""
    return datetime.now(timezone.utc)


def _sort_key(case: Case) -> tuple[int, datetime, int]:
    return (-case.priority_level, case.submitted_at, case.id)


# ---------------------------------------------------------------------------
# Pending set
# ---------------------------------------------------------------------------


class PriorityAdmission:
    """Pending cases kept in a binary heap.

    Heap entries are ``(-priority_level, submitted_at, id, case)``. Ids are
    unique, so comparison never reaches the ``Case`` itself.
    """

    def __init__(
        self,
        id_base: int = DEFAULT_ID_BASE,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._heap: list[tuple[int, datetime, int, Case]] = []
        self._clock = clock
        self.next_id = id_base

    def submit(self, label: str, priority_level: int, description: str = "") -> Case:
        """Validate and enqueue a new case.

        Args:
            label: Display name, must not be blank.
            priority_level: Urgency from 1 (minimal) to 5 (critical).
            description: Free text, may be empty.

        Returns:
            The created Case.

        Raises:
            InvalidPriority: If ``priority_level`` is outside 1-5. Nothing
                is enqueued and no id is consumed.
            InvalidCase: If ``label`` is blank or not a string. Same
                guarantees.
        """
        if (
            isinstance(priority_level, bool)
            or not isinstance(priority_level, int)
            or not MIN_PRIORITY <= priority_level <= MAX_PRIORITY
        ):
            logger.warning("Rejected submission %r: priority %r", label, priority_level)
            raise InvalidPriority(priority_level)

        if not isinstance(label, str):
            logger.warning("Rejected submission: label %r is not text", label)
            raise InvalidCase(f"Case label must be text, got {type(label).__name__}")

        label = label.strip()
        if not label:
            logger.warning("Rejected submission: blank label")
            raise InvalidCase("Case label must not be empty")

        case = Case(
            id=self.next_id,
            label=label,
            priority_level=int(priority_level),
            description=description or "",
            submitted_at=self._clock(),
        )
        self.next_id += 1

        heapq.heappush(self._heap, (*_sort_key(case), case))
        logger.info(
            "Admitted case %d '%s' at priority %d (%d pending)",
            case.id,
            case.label,
            case.priority_level,
            len(self._heap),
        )
        return case

    def peek_next(self) -> Optional[Case]:
        """Return the case that would be served next, or None if empty."""
        if not self._heap:
            return None
        return self._heap[0][-1]

    def serve_next(self) -> Optional[Case]:
        """Remove and return the top case, or None if nothing is pending."""
        if not self._heap:
            logger.debug("serve_next on empty pending set")
            return None
        case = heapq.heappop(self._heap)[-1]
        logger.info("Released case %d '%s' for service", case.id, case.label)
        return case

    def snapshot_ordered(self) -> list[Case]:
        """All pending cases in serve order. The heap is not modified."""
        return [entry[-1] for entry in sorted(self._heap)]

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)
