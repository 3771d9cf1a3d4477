from adaptive_lights.config import ControllerConfig
from adaptive_lights.model.allocation import allocate
from adaptive_lights.model.traffic_lights import IntersectionController, Light, LightState, PhaseEvent
from adaptive_lights.timing import get_timing, TIMINGS


__all__ = [
    "ControllerConfig",
    "allocate",
    "IntersectionController",
    "Light",
    "LightState",
    "PhaseEvent",
    "get_timing",
    "TIMINGS",
]
