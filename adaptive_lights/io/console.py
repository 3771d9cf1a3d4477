from adaptive_lights.model.traffic_lights import LightState, PhaseEvent


def format_event(event: PhaseEvent) -> str:
    """
    One line per transition, e.g.
    ``[14:02:07] North-South -> GREEN (will last 23s)``
    """
    if event.phase is LightState.RED:
        lasts = "until other gets green"
    else:
        lasts = f"{event.duration}s"
    stamp = event.timestamp.strftime("%H:%M:%S")
    return f"[{stamp}] {event.direction} -> {event.phase.value} (will last {lasts})"


def cycle_banner(cycle: int) -> str:
    return f"=== Cycle {cycle} ==="


def random_densities_banner(cycle: int, ns_density: int, ew_density: int) -> str:
    return f"\n--- Random densities for cycle {cycle} ---\nNS={ns_density}  EW={ew_density}"


def manual_densities_header(cycles: int, ns_density: int, ew_density: int) -> str:
    return f"\nSimulating {cycles} cycles with densities: NS={ns_density}  EW={ew_density}\n"
