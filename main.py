import sys

from adaptive_lights.config import ControllerConfig
from adaptive_lights.experiments.runner import run_single
from adaptive_lights.io.console import (
    cycle_banner,
    format_event,
    manual_densities_header,
    random_densities_banner,
)
from adaptive_lights.io.logging_utils import setup_logging, logger
from adaptive_lights.model.densities import manual_densities, random_densities
from adaptive_lights.model.traffic_lights import PhaseEvent


MANUAL_MODE = 1


def read_int(prompt: str, default: int = 0) -> int:
    """Unparseable input or EOF falls back to default."""
    try:
        return int(input(prompt).strip())
    except (ValueError, EOFError):
        return default


def main() -> int:
    setup_logging()

    print("Adaptive Traffic Light Simulator")
    print("--------------------------------")

    try:
        cycles = int(input("Enter number of cycles to simulate (e.g., 3): ").strip())
    except (ValueError, EOFError):
        return 0
    if cycles < 0:
        return 0

    mode = read_int("Choose input mode: 1) Manual densities  2) Random densities\nEnter 1 or 2: ")
    realtime = read_int(
        "Run in real-time (sleep between phases)? 1=Yes 0=No (choose 0 for fast output): "
    ) != 0

    cfg = ControllerConfig(
        cycles=cycles,
        timing_mode="realtime" if realtime else "fast",
    )

    if mode == MANUAL_MODE:
        ns_d = max(0, read_int("Enter NS (North-South) traffic density (non-negative integer): "))
        ew_d = max(0, read_int("Enter EW (East-West) traffic density (non-negative integer): "))
        print(manual_densities_header(cycles, ns_d, ew_d))
        source = manual_densities(ns_d, ew_d)
    else:
        source = random_densities(cfg.density_low, cfg.density_high, cfg.random_seed)

    current_cycle = 0

    def render(event: PhaseEvent) -> None:
        nonlocal current_cycle
        if event.cycle != current_cycle:
            if current_cycle:
                print()
            current_cycle = event.cycle
            if mode != MANUAL_MODE:
                print(random_densities_banner(event.cycle, *event.densities))
            print(cycle_banner(event.cycle))
        print(format_event(event))

    result = run_single(cfg, source, on_event=render)

    print("\nSimulation finished.")
    logger.info(f"Cycles completed: {result.cycles_completed}")
    logger.info(f"Simulated time: {result.total_simulated_time} s")
    logger.info(
        f"Avg green {cfg.first_label}: {result.green_first.mean:.2f} s, "
        f"{cfg.second_label}: {result.green_second.mean:.2f} s"
    )
    logger.info(f"Wall time: {result.wall_time_seconds:.4f} s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
