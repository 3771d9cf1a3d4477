from adaptive_lights.config import ControllerConfig
from adaptive_lights.model.densities import manual_densities
from adaptive_lights.model.traffic_lights import IntersectionController, LightState


def test_single_cycle_order_and_durations(config, fast_waiter):
    controller = IntersectionController(config, fast_waiter)

    events = list(controller.run_cycles(1, [(100, 0)]))

    assert [(e.direction, e.phase) for e in events] == [
        ("North-South", LightState.GREEN),
        ("North-South", LightState.YELLOW),
        ("North-South", LightState.RED),
        ("East-West", LightState.GREEN),
        ("East-West", LightState.YELLOW),
        ("East-West", LightState.RED),
    ]
    assert [e.duration for e in events] == [40, 3, 1, 5, 3, 1]
    assert all(e.cycle == 1 and e.densities == (100, 0) for e in events)


def test_six_events_per_cycle(config, fast_waiter):
    controller = IntersectionController(config, fast_waiter)

    events = list(controller.run_cycles(4, manual_densities(10, 20)))

    assert len(events) == 24
    assert [e.cycle for e in events] == [c for c in range(1, 5) for _ in range(6)]


def test_zero_cycles_yields_nothing(config, fast_waiter):
    controller = IntersectionController(config, fast_waiter)

    assert list(controller.run_cycles(0, manual_densities(10, 20))) == []
    assert controller.history == []
    assert fast_waiter.total_waited == 0


def test_greens_reallocated_every_cycle(config, fast_waiter):
    controller = IntersectionController(config, fast_waiter)
    pairs = [(100, 0), (0, 0), (50, 50)]

    events = list(controller.run_cycles(3, pairs))

    greens = [e.duration for e in events if e.phase is LightState.GREEN]
    assert greens == [40, 5, 5, 5, 23, 23]
    assert [rec.greens for rec in controller.history] == [(40, 5), (5, 5), (23, 23)]


def test_stops_when_density_source_runs_out(config, fast_waiter):
    controller = IntersectionController(config, fast_waiter)

    events = list(controller.run_cycles(5, [(1, 1), (2, 2)]))

    assert len(events) == 12
    assert len(controller.history) == 2


def test_light_state_follows_events(config, fast_waiter):
    controller = IntersectionController(config, fast_waiter)
    ns, ew = controller.lights

    for event in controller.run_cycles(1, [(30, 70)]):
        light = ns if event.direction == ns.label else ew
        assert light.state is event.phase

    assert ns.state is LightState.RED
    assert ew.state is LightState.RED


def test_event_emitted_before_its_wait(config, fast_waiter, echoed):
    controller = IntersectionController(config, fast_waiter)
    events = controller.run_cycles(1, [(100, 0)])

    first = next(events)
    assert first.phase is LightState.GREEN
    assert echoed == []

    next(events)
    assert echoed == ["   (simulated 40s)"]


def test_yellow_fixed_and_red_duration_derived(fast_waiter):
    cfg = ControllerConfig(yellow_time=4, all_red_time=2)
    controller = IntersectionController(cfg, fast_waiter)
    ns, ew = controller.lights

    list(controller.run_cycles(1, [(100, 0)]))

    assert ns.yellow_duration == ew.yellow_duration == 4
    assert ns.red_duration == 5 + 4 + 2 * 2
    assert ew.red_duration == 40 + 4 + 2 * 2


def test_first_direction_always_goes_first(config, fast_waiter):
    controller = IntersectionController(config, fast_waiter)

    events = list(controller.run_cycles(3, [(0, 100), (0, 100), (0, 100)]))

    for cycle_events in (events[i:i + 6] for i in range(0, len(events), 6)):
        assert cycle_events[0].direction == "North-South"
        assert cycle_events[0].duration == 5

