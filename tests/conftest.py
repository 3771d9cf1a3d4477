import pytest

from adaptive_lights.config import ControllerConfig
from adaptive_lights.timing.timing_fast import SimulatedWait


@pytest.fixture
def config():
    return ControllerConfig(cycles=2)


@pytest.fixture
def echoed():
    return []


@pytest.fixture
def fast_waiter(echoed):
    return SimulatedWait(echo=echoed.append)
