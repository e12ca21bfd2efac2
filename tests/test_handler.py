"""
Tests for TrackMobilityHandler.

The handler is driven by hand with a minimal event loop and node stand-ins,
so no GrADyS-SIM simulation is started.
"""

import pytest
from track_mobility import (
    DEFAULT_POSITION_UPDATER_CONFIG,
    TrackMobilityConfiguration,
    TrackMobilityHandler,
)
from track_mobility.core import to_world


class FakeEventLoop:
    """Records scheduled events instead of running them."""

    def __init__(self):
        self.current_time = 0.0
        self.events = []

    def schedule_event(self, timestamp, callback, label=""):
        self.events.append((timestamp, callback, label))


class FakeEncapsulator:
    def __init__(self):
        self.telemetry = []

    def handle_telemetry(self, telemetry):
        self.telemetry.append(telemetry)


class FakeNode:
    def __init__(self, node_id, position=(0.0, 0.0, 0.0)):
        self.id = node_id
        self.position = position
        self.protocol_encapsulator = FakeEncapsulator()


def make_handler(**overrides):
    params = dict(
        update_rate=0.1,
        updater=DEFAULT_POSITION_UPDATER_CONFIG,
        track_center=(0.0, 0.0, 10.0),
        track_axis=(1.0, 0.0, 0.0),
        track_half_length=50.0,
    )
    params.update(overrides)
    handler = TrackMobilityHandler(TrackMobilityConfiguration(**params))
    loop = FakeEventLoop()
    handler.inject(loop)
    return handler, loop


def run_updates(handler, loop, count):
    """Fire the periodic update ``count`` times, advancing the loop clock."""
    for _ in range(count):
        loop.current_time += handler._config.update_rate
        handler._mobility_update()


class TestRegistration:
    """Test node registration and scheduling."""

    def test_label(self):
        handler, _ = make_handler()
        assert handler.get_label() == "TrackMobilityHandler"

    def test_node_starts_at_track_center(self):
        handler, _ = make_handler()
        node = FakeNode(0, position=(-25.0, -25.0, -25.0))
        handler.register_node(node)

        assert node.position == pytest.approx((0.0, 0.0, 10.0))
        assert handler.get_node_target(0) == 0.0
        assert handler.get_node_state(0).velocity == 0.0

    def test_initialize_schedules_first_update(self):
        handler, loop = make_handler()
        handler.register_node(FakeNode(0))
        handler.initialize()

        assert len(loop.events) == 1
        timestamp, callback, _ = loop.events[0]
        assert timestamp == pytest.approx(0.1)
        assert callback == handler._mobility_update

    def test_initialize_without_nodes_schedules_nothing(self):
        handler, loop = make_handler()
        handler.initialize()
        assert loop.events == []

    def test_unknown_node(self):
        handler, _ = make_handler()
        assert handler.get_node_state(7) is None
        assert handler.get_node_target(7) is None
        assert handler.get_node_target_velocity(7) is None
        assert handler.get_node_position(7) is None
        with pytest.raises(KeyError):
            handler.set_target(7, 0.5)


class TestTargets:
    """Test the target channel through the handler."""

    def test_set_target_is_clamped(self):
        handler, _ = make_handler()
        handler.register_node(FakeNode(0))
        handler.set_target(0, 4.0)
        assert handler.get_node_target(0) == 1.0

    def test_set_target_point_projects_onto_track(self):
        handler, _ = make_handler()
        handler.register_node(FakeNode(0))

        handler.set_target_point(0, (25.0, 7.0, 3.0))
        assert handler.get_node_target(0) == pytest.approx(0.5)

        handler.set_target_point(0, (-500.0, 0.0, 10.0))
        assert handler.get_node_target(0) == -1.0

    def test_targets_are_per_node(self):
        handler, _ = make_handler()
        handler.register_node(FakeNode(0))
        handler.register_node(FakeNode(1))
        handler.set_target(0, 0.5)
        handler.set_target(1, -0.5)
        assert handler.get_node_target(0) == 0.5
        assert handler.get_node_target(1) == -0.5


class TestMobilityUpdate:
    """Test the periodic update."""

    def test_node_moves_along_track(self):
        handler, loop = make_handler()
        node = FakeNode(0)
        handler.register_node(node)
        handler.set_target(0, 1.0)

        run_updates(handler, loop, 1)

        state = handler.get_node_state(0)
        assert state.position == pytest.approx(0.02)
        assert handler.get_node_target_velocity(0) == pytest.approx(2.0)
        assert node.position == pytest.approx((1.0, 0.0, 10.0))

    def test_node_reaches_track_end(self):
        handler, loop = make_handler()
        node = FakeNode(0)
        handler.register_node(node)
        handler.set_target(0, -1.0)

        run_updates(handler, loop, 60)

        assert handler.get_node_state(0).velocity == pytest.approx(0.0, abs=1e-9)
        assert node.position == pytest.approx((-50.0, 0.0, 10.0))
        assert handler.get_node_position(0) == pytest.approx(
            to_world(-1.0, (0.0, 0.0, 10.0), (1.0, 0.0, 0.0), 50.0)
        )

    def test_update_reschedules_itself(self):
        handler, loop = make_handler(send_telemetry=False)
        handler.register_node(FakeNode(0))

        run_updates(handler, loop, 3)

        assert len(loop.events) == 3
        assert loop.events[-1][0] == pytest.approx(loop.current_time + 0.1)


class TestTelemetry:
    """Test telemetry emission."""

    @staticmethod
    def _telemetry_events(loop):
        return [event for event in loop.events if "handle_telemetry" in event[2]]

    def test_decimation(self):
        handler, loop = make_handler(telemetry_decimation=2)
        handler.register_node(FakeNode(0))

        run_updates(handler, loop, 4)

        assert len(self._telemetry_events(loop)) == 2

    def test_disabled(self):
        handler, loop = make_handler(send_telemetry=False)
        handler.register_node(FakeNode(0))

        run_updates(handler, loop, 4)

        assert self._telemetry_events(loop) == []

    def test_delivered_to_protocol(self):
        handler, loop = make_handler()
        node = FakeNode(0)
        handler.register_node(node)
        handler.set_target(0, 0.5)

        run_updates(handler, loop, 1)
        for _, callback, _ in self._telemetry_events(loop):
            callback()

        assert len(node.protocol_encapsulator.telemetry) == 1
        assert node.protocol_encapsulator.telemetry[0].current_position == pytest.approx(node.position)
