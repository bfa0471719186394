import pytest

from application.controller import JenController
from domain.state import JenState
from infrastructure.clock import ManualClock


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock(start=100.0)


@pytest.fixture
def state(clock: ManualClock) -> JenState:
    return JenState(clock)


@pytest.fixture
def controller(clock: ManualClock) -> JenController:
    return JenController(clock=clock)
