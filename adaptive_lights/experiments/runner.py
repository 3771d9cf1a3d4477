from typing import Callable, Iterable, List, Optional, Tuple

from adaptive_lights.config import ControllerConfig
from adaptive_lights.io.logging_utils import logger
from adaptive_lights.metrics.timers import Timer
from adaptive_lights.metrics.types import GreenStats, RunResult
from adaptive_lights.model.traffic_lights import IntersectionController, PhaseEvent
from adaptive_lights.timing import get_timing
from adaptive_lights.timing.base_timing import WaitStrategy


DensitySource = Iterable[Tuple[int, int]]


def run_single(
    config: ControllerConfig,
    density_source: DensitySource,
    on_event: Optional[Callable[[PhaseEvent], None]] = None,
    waiter: Optional[WaitStrategy] = None,
) -> RunResult:
    """
    Run config.cycles cycles and collect the summary.

    on_event is called for every phase transition before its wait starts.
    """
    if waiter is None:
        waiter = get_timing(config.timing_mode)()

    controller = IntersectionController(config, waiter)

    events = 0
    simulated = 0
    with Timer() as t:
        for event in controller.run_cycles(config.cycles, density_source):
            events += 1
            simulated += event.duration
            if on_event is not None:
                on_event(event)

    history = controller.history
    logger.debug(f"Completed {len(history)} cycles, {events} phase events")

    return RunResult(
        timing_mode=waiter.name,
        config=config.to_dict(),
        cycles_completed=len(history),
        phase_events=events,
        wall_time_seconds=t.elapsed,
        total_simulated_time=simulated,
        green_first=GreenStats.from_values([rec.greens[0] for rec in history]),
        green_second=GreenStats.from_values([rec.greens[1] for rec in history]),
        extra_stats={
            "started_at": t.started_at.strftime("%H:%M:%S"),
            "total_waited": waiter.total_waited,
            "densities": [list(rec.densities) for rec in history],
        },
    )


def run_parameter_sweep(
    base_config: ControllerConfig,
    param_name: str,
    values: Iterable[int],
    density_factory: Callable[[ControllerConfig], DensitySource],
) -> List[RunResult]:
    """
    Helper: changes one config parameter (e.g. max_green) and runs each variant.

    :param base_config: configuration shared by every run
    :param param_name: ControllerConfig field to vary
    :param values: values assigned to that field, one run each
    :param density_factory: builds a fresh density source for a given config
    :return: one RunResult per value, in order
    """

    results: List[RunResult] = []
    for v in values:
        cfg_dict = base_config.to_dict()
        cfg_dict[param_name] = v
        cfg = ControllerConfig(**cfg_dict)  # type: ignore[arg-type]
        res = run_single(cfg, density_factory(cfg))
        results.append(res)
    return results
