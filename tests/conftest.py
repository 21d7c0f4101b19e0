# pyright: standard

import pytest

from calchistory.backends import MemoryBackend
from calchistory.store import CalculationHistoryStore
from tests.helpers import FakeClock


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(backend: MemoryBackend, clock: FakeClock) -> CalculationHistoryStore:
    return CalculationHistoryStore(backend, clock=clock)
