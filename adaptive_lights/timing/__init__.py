from typing import Dict, Type

from adaptive_lights.timing.base_timing import WaitStrategy
from adaptive_lights.timing.timing_realtime import RealTimeWait
from adaptive_lights.timing.timing_fast import SimulatedWait


TIMINGS: Dict[str, Type[WaitStrategy]] = {
    RealTimeWait.name: RealTimeWait,
    SimulatedWait.name: SimulatedWait,
}


def get_timing(name: str) -> Type[WaitStrategy]:
    try:
        return TIMINGS[name]
    except KeyError:
        raise ValueError(
            f"Unknown timing mode '{name}'. Available: {', '.join(TIMINGS.keys())}"
        )
