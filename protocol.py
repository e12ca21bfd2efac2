"""
Protocol that steers a node along its track by writing targets to TrackMobilityHandler.

The protocol plays the role of an external input source: on a timer it moves
the target to the next setpoint, and on every telemetry it records the
updater's published state.
"""

import logging
import os
from typing import Optional

from gradysim.protocol.interface import IProtocol
from gradysim.protocol.messages.telemetry import Telemetry

import pandas as pd

from config_param import (
    TARGET_CHANGE_PERIOD,
    TARGET_CHANGE_TIMER_STR,
    TARGET_SETPOINTS,
    TELEMETRY_CSV_ENV,
)

TELEMETRY_COLUMNS = [
    "node_id",
    "timestamp",
    "position",
    "target",
    "velocity",
    "target_velocity",
    "acceleration",
    "speed_ratio",
    "acceleration_ratio",
    "peak_speed_ratio",
]


class TargetSeekingProtocol(IProtocol):
    """Protocol that commands track targets through TrackMobilityHandler."""

    def __init__(self):
        super().__init__()
        self._logger = logging.getLogger()
        self.node_id = None
        self.track_handler = None
        self.initial_position = None

        self._setpoints = tuple(TARGET_SETPOINTS)
        self._setpoint_index = 0
        self._peak_speed = 0.0

        # Telemetry logging (in-memory). main.py sets the CSV path via environment
        # variable to avoid tight coupling with the simulator builder.
        self._csv_path: Optional[str] = None
        self._telemetry_rows = []

    def initialize(self):
        """Locate the handler and command the first target."""
        self.node_id = self.provider.get_id()
        self._csv_path = os.environ.get(TELEMETRY_CSV_ENV)

        handlers = getattr(self.provider, "handlers", {}) or {}
        self.track_handler = handlers.get("TrackMobilityHandler")
        if self.track_handler is None:
            self._logger.warning("Node %s: TrackMobilityHandler not available", self.node_id)
            return

        self.initial_position = self.track_handler.get_node_position(self.node_id)
        self._setpoint_index = 0
        self._command_target(self._setpoints[self._setpoint_index])

        print(f"Node {self.node_id} initialized")
        if self.initial_position is not None:
            print(f"Initial position: ({self.initial_position[0]:.1f}, {self.initial_position[1]:.1f}, {self.initial_position[2]:.1f})")

        self._record_row()
        self.schedule_target_change_timer(TARGET_CHANGE_PERIOD)

    def schedule_target_change_timer(self, timeout: float):
        self.provider.schedule_timer(TARGET_CHANGE_TIMER_STR, self.provider.current_time() + timeout)

    def handle_timer(self, timer: str):
        """Advance through the setpoints; once at the last one, hold it."""
        if timer != TARGET_CHANGE_TIMER_STR or self.track_handler is None:
            return

        next_index = min(self._setpoint_index + 1, len(self._setpoints) - 1)
        if next_index != self._setpoint_index:
            self._setpoint_index = next_index
            self._command_target(self._setpoints[self._setpoint_index])
        self.schedule_target_change_timer(TARGET_CHANGE_PERIOD)

    def handle_packet(self, message: str):
        pass

    def handle_telemetry(self, telemetry: Telemetry) -> None:
        """Collect the updater's published state on telemetry."""
        if self.track_handler is None:
            return
        self._record_row()

    def _command_target(self, target: float) -> None:
        self.track_handler.set_target(self.node_id, target)
        # Peak speed is tracked per move, like a fresh drag gesture.
        self._peak_speed = 0.0
        self._logger.debug(
            "Node %s: new target %.3f (requested %.3f)",
            self.node_id,
            self.track_handler.get_node_target(self.node_id),
            target,
        )

    def _record_row(self) -> None:
        state = self.track_handler.get_node_state(self.node_id)
        if state is None:
            return

        limits = self.track_handler.get_updater_config()
        self._peak_speed = max(self._peak_speed, abs(state.velocity))
        self._telemetry_rows.append(
            {
                "node_id": self.node_id,
                "timestamp": self.provider.current_time(),
                "position": state.position,
                "target": self.track_handler.get_node_target(self.node_id),
                "velocity": state.velocity,
                "target_velocity": self.track_handler.get_node_target_velocity(self.node_id),
                "acceleration": state.acceleration,
                "speed_ratio": state.velocity / limits.max_speed,
                "acceleration_ratio": state.acceleration / limits.acceleration,
                "peak_speed_ratio": self._peak_speed / limits.max_speed,
            }
        )

    def finish(self):
        """Print a summary and write the telemetry CSV."""
        if self.track_handler is None:
            return

        state = self.track_handler.get_node_state(self.node_id)
        final_position = self.track_handler.get_node_position(self.node_id)
        if state is None or final_position is None:
            return

        print()
        print("=" * 60)
        print("SIMULATION RESULTS")
        print("=" * 60)
        print(f"Node {self.node_id}")
        print(f"  Final target:     {self.track_handler.get_node_target(self.node_id):.4f}")
        print(f"  Final position:   {state.position:.4f} (track)")
        print(f"  World position:   ({final_position[0]:.2f}, {final_position[1]:.2f}, {final_position[2]:.2f})")
        print(f"  Final velocity:   {state.velocity:.4f} units/s")
        print("=" * 60)

        if not self._csv_path or not self._telemetry_rows:
            return

        df = pd.DataFrame(self._telemetry_rows, columns=TELEMETRY_COLUMNS)
        try:
            file_exists = os.path.exists(self._csv_path)
            df.to_csv(self._csv_path, mode="a", header=not file_exists, index=False)
        except OSError as exc:
            self._logger.warning(
                "Node %s: failed to write telemetry CSV (%s): %r",
                self.node_id,
                exc,
                self._csv_path,
            )
            return

        df_max = df[["speed_ratio", "acceleration_ratio"]].abs().max()
        print(
            f"Telemetry: {len(df)} rows written to {self._csv_path} "
            f"(max |speed_ratio|={df_max['speed_ratio']:.2f}, "
            f"max |acceleration_ratio|={df_max['acceleration_ratio']:.2f})"
        )
