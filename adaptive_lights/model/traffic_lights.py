from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterable, Iterator, List, Tuple

from adaptive_lights.config import ControllerConfig
from adaptive_lights.io.logging_utils import logger
from adaptive_lights.timing.base_timing import WaitStrategy
from .allocation import allocate


class LightState(Enum):
    RED = "RED"
    GREEN = "GREEN"
    YELLOW = "YELLOW"


@dataclass
class Light:
    label: str
    state: LightState = LightState.RED
    green_duration: int = 10     # [s] recomputed every cycle
    yellow_duration: int = 3     # [s] fixed for the run
    red_duration: int = 0        # [s] time spent red while the other direction runs


@dataclass(frozen=True)
class PhaseEvent:
    cycle: int
    direction: str
    phase: LightState
    duration: int
    densities: Tuple[int, int]
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class CycleRecord:
    cycle: int
    densities: Tuple[int, int]
    greens: Tuple[int, int]


class IntersectionController:
    """
    Two-phase controller for one intersection:
    - first pair of opposing directions (NS) gets green, yellow, all-red
    - then the second pair (EW) does the same
    Green times are re-allocated from traffic density at the start of
    every cycle. NS always goes first.
    """

    def __init__(self, config: ControllerConfig, waiter: WaitStrategy) -> None:
        self.config = config
        self.waiter = waiter
        self.first = Light(config.first_label, yellow_duration=config.yellow_time)
        self.second = Light(config.second_label, yellow_duration=config.yellow_time)
        self.history: List[CycleRecord] = []

    @property
    def lights(self) -> Tuple[Light, Light]:
        return self.first, self.second

    def run_cycles(
        self,
        cycle_count: int,
        density_source: Iterable[Tuple[int, int]],
    ) -> Iterator[PhaseEvent]:
        """
        Drive cycle_count cycles, consuming one density pair per cycle.

        Each transition is yielded before its wait runs, so a consumer
        rendering the event sees it at the moment the light changes.
        Stops early if density_source runs out.
        """
        densities = iter(density_source)
        for cycle in range(1, cycle_count + 1):
            try:
                pair = next(densities)
            except StopIteration:
                logger.debug(f"Density source exhausted after {cycle - 1} cycles")
                return

            self._apply_densities(cycle, pair)
            yield from self._run_direction(cycle, pair, self.first)
            yield from self._run_direction(cycle, pair, self.second)

    def _apply_densities(self, cycle: int, pair: Tuple[int, int]) -> None:
        cfg = self.config
        ns_density, ew_density = pair
        ns_green, ew_green = allocate(ns_density, ew_density, cfg.min_green, cfg.max_green)

        self.first.green_duration = ns_green
        self.second.green_duration = ew_green
        self.first.red_duration = self._red_time_against(self.second)
        self.second.red_duration = self._red_time_against(self.first)

        self.history.append(CycleRecord(cycle, (ns_density, ew_density), (ns_green, ew_green)))
        logger.debug(
            f"Cycle {cycle}: densities NS={ns_density} EW={ew_density} "
            f"-> green NS={ns_green}s EW={ew_green}s"
        )

    def _red_time_against(self, other: Light) -> int:
        return other.green_duration + other.yellow_duration + 2 * self.config.all_red_time

    def _run_direction(
        self,
        cycle: int,
        pair: Tuple[int, int],
        light: Light,
    ) -> Iterator[PhaseEvent]:
        steps = (
            (LightState.GREEN, light.green_duration),
            (LightState.YELLOW, light.yellow_duration),
            # all-red gap before the other direction proceeds
            (LightState.RED, self.config.all_red_time),
        )
        for phase, duration in steps:
            light.state = phase
            yield PhaseEvent(cycle, light.label, phase, duration, pair)
            self.waiter.wait(duration)
