from dataclasses import dataclass, field
from typing import Any, Dict, Sequence

import numpy as np


@dataclass
class GreenStats:
    mean: float
    min: int
    max: int

    @classmethod
    def from_values(cls, values: Sequence[int]) -> "GreenStats":
        """Empty input gives all zeros."""
        if len(values) == 0:
            return cls(0.0, 0, 0)
        arr = np.asarray(values, dtype=np.int64)
        return cls(float(arr.mean()), int(arr.min()), int(arr.max()))


@dataclass
class RunResult:
    timing_mode: str
    config: Dict[str, Any]

    cycles_completed: int
    phase_events: int

    # total time
    wall_time_seconds: float
    # sum of every phase duration, as if run in real time
    total_simulated_time: int

    green_first: GreenStats
    green_second: GreenStats

    extra_stats: Dict[str, Any] = field(default_factory=dict)
