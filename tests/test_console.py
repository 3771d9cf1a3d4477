from datetime import datetime

from adaptive_lights.io.console import cycle_banner, format_event
from adaptive_lights.model.traffic_lights import LightState, PhaseEvent


STAMP = datetime(2024, 5, 1, 8, 5, 9)


def test_green_line():
    event = PhaseEvent(1, "North-South", LightState.GREEN, 23, (50, 50), STAMP)

    assert format_event(event) == "[08:05:09] North-South -> GREEN (will last 23s)"


def test_red_line_has_no_duration():
    event = PhaseEvent(1, "East-West", LightState.RED, 1, (50, 50), STAMP)

    assert format_event(event) == "[08:05:09] East-West -> RED (will last until other gets green)"


def test_cycle_banner():
    assert cycle_banner(3) == "=== Cycle 3 ==="
