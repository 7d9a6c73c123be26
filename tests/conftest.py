"""Project-wide test fixtures.

Every component under test gets the same manual clock so submission and
service times are deterministic across the suite.
"""

import pytest

from src.pipeline.desk import TriageDesk
from src.triage.admission import PriorityAdmission
from src.triage.ledger import TriageLedger
from tests.clock import ManualClock


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def ticking_clock() -> ManualClock:
    return ManualClock(step=1.0)


@pytest.fixture
def admission(clock: ManualClock) -> PriorityAdmission:
    return PriorityAdmission(clock=clock)


@pytest.fixture
def ledger(clock: ManualClock) -> TriageLedger:
    return TriageLedger(clock=clock)


@pytest.fixture
def desk(clock: ManualClock) -> TriageDesk:
    return TriageDesk(clock=clock)
