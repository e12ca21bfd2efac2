"""
Track mobility handler for GrADyS-SIM NG.

This handler moves each node along a straight track with a PositionUpdater:
protocols write a target on the track and the handler drives the updater at
a fixed rate, mapping the normalized track position onto world coordinates.

Author: Laércio Lucchesi
Date: December 27, 2025
"""

import logging
from typing import Dict, Tuple

from gradysim.simulator.event import EventLoop
from gradysim.simulator.node import Node
from gradysim.simulator.handler.interface import INodeHandler
from gradysim.protocol.messages.telemetry import Telemetry

from .config import PositionUpdaterConfiguration, TrackMobilityConfiguration
from .core import to_normalized, to_world
from .updater import KinematicState, PositionUpdater


class TrackMobilityHandler(INodeHandler):
    """
    Target-driven track mobility handler for GrADyS-SIM NG.

    Each registered node owns a PositionUpdater. Every ``update_rate``
    seconds the handler ticks all updaters with ``dt = update_rate`` and moves
    the nodes to the matching world position.

    Usage:
        config = TrackMobilityConfiguration(
            update_rate=0.01,
            updater=DEFAULT_POSITION_UPDATER_CONFIG,
            track_center=(0.0, 0.0, 10.0),
            track_axis=(1.0, 0.0, 0.0),
            track_half_length=50.0,
        )
        handler = TrackMobilityHandler(config)

        # In your protocol handler:
        handler.set_target(node.identifier, 0.5)
    """

    def __init__(self, config: TrackMobilityConfiguration):
        """
        Initialize the track mobility handler.

        Args:
            config: Track geometry, updater limits and update rate.
        """
        self._config = config
        self._loop: EventLoop = None
        self._nodes: Dict[int, Node] = {}
        self._updaters: Dict[int, PositionUpdater] = {}

        # Telemetry tracking: count updates per node
        self._update_counter: Dict[int, int] = {}

        self._logger = logging.getLogger(__name__)

    def get_label(self) -> str:
        """Return the handler label for identification."""
        return "TrackMobilityHandler"

    def register_node(self, node: Node):
        """
        Register a node with this handler (called when node is created).

        The node starts at rest at the track center.
        """
        node_id = node.id
        self._nodes[node_id] = node
        self._updaters[node_id] = PositionUpdater(self._config.updater)
        self._update_counter[node_id] = 0
        node.position = self._world_position(self._updaters[node_id].position)

    def inject(self, event_loop: EventLoop):
        """Inject the event loop used to schedule periodic updates."""
        self._loop = event_loop

    def initialize(self):
        """Start the periodic update loop."""
        if self._nodes:
            self._loop.schedule_event(
                self._loop.current_time + self._config.update_rate,
                self._mobility_update
            )

    def handle_timer(self, timer: str):
        pass

    def handle_packet(self, message: str):
        pass

    def finish(self):
        pass

    def finalize(self):
        pass

    def after_simulation_step(self, iteration: int, time: float):
        pass

    def set_target(self, node_id: int, target: float) -> None:
        """
        Set the normalized target of a node.

        Values outside [-1, 1] are clamped by the node's updater.

        Raises:
            KeyError: If the node is not registered.
        """
        self._updaters[node_id].set_target(target)
        self._logger.debug("Node %s: target set to %.4f", node_id, self._updaters[node_id].target)

    def set_target_point(self, node_id: int, point: Tuple[float, float, float]) -> None:
        """
        Set the target of a node from a world point.

        The point is projected onto the track axis; points beyond the track
        ends select the nearest end.

        Raises:
            KeyError: If the node is not registered.
        """
        target = to_normalized(
            point,
            self._config.track_center,
            self._config.track_axis,
            self._config.track_half_length,
        )
        self.set_target(node_id, target)

    def get_updater_config(self) -> PositionUpdaterConfiguration:
        """Return the physical limits shared by every node's updater."""
        return self._config.updater

    def get_node_state(self, node_id: int) -> KinematicState | None:
        """Return a snapshot of the node's normalized kinematic state."""
        updater = self._updaters.get(node_id)
        return updater.state if updater is not None else None

    def get_node_target(self, node_id: int) -> float | None:
        """Return the node's clamped normalized target."""
        updater = self._updaters.get(node_id)
        return updater.target if updater is not None else None

    def get_node_target_velocity(self, node_id: int) -> float | None:
        """Return the velocity the node's updater is steering toward."""
        updater = self._updaters.get(node_id)
        return updater.target_velocity if updater is not None else None

    def get_node_position(self, node_id: int) -> Tuple[float, float, float] | None:
        """Return the node's position in world coordinates."""
        node = self._nodes.get(node_id)
        return node.position if node is not None else None

    def _world_position(self, position: float) -> Tuple[float, float, float]:
        return to_world(
            position,
            self._config.track_center,
            self._config.track_axis,
            self._config.track_half_length,
        )

    def _mobility_update(self):
        """
        Perform a single update step for all nodes and schedule the next one.
        """
        dt = self._config.update_rate

        for node_id, node in self._nodes.items():
            updater = self._updaters[node_id]
            was_moving = updater.target_velocity != 0.0

            updater.update(dt)
            node.position = self._world_position(updater.position)

            if was_moving and updater.target_velocity == 0.0:
                self._logger.debug(
                    "Node %s: arrived at %.4f (target %.4f)", node_id, updater.position, updater.target
                )

            self._update_counter[node_id] += 1
            if self._should_emit_telemetry(node_id):
                self._emit_telemetry(node)

        self._loop.schedule_event(
            self._loop.current_time + self._config.update_rate,
            self._mobility_update
        )

    def _should_emit_telemetry(self, node_id: int) -> bool:
        if not self._config.send_telemetry:
            return False

        count = self._update_counter[node_id]
        return (count % self._config.telemetry_decimation) == 0

    def _emit_telemetry(self, node: Node):
        """Schedule delivery of a Telemetry message to the node's protocol."""
        telemetry = Telemetry(current_position=node.position)

        def send_telemetry():
            node.protocol_encapsulator.handle_telemetry(telemetry)

        self._loop.schedule_event(
            self._loop.current_time,
            send_telemetry,
            f"Node {node.id} handle_telemetry"
        )
