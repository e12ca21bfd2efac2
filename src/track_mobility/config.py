"""
Configuration dataclasses for the track position updater and its handler.

Author: Laércio Lucchesi
Date: December 27, 2025
"""

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PositionUpdaterConfiguration:
    """
    Physical limits of a PositionUpdater. Fixed for the updater's lifetime.

    Positions are normalized: the track spans [-1, 1], so speeds are in
    track units per second and accelerations in track units per second².

    Attributes:
        max_speed: Maximum magnitude of velocity. Must be > 0.
        acceleration: Maximum rate of speed increase while moving toward
            the target in the current direction. Must be > 0.
        deceleration: Maximum rate of speed decrease while braking or
            reversing direction. Also defines the braking distance used to
            derive the approach speed. Must be > 0.
        min_distance: Distance to the target at or below which the body is
            considered arrived and is stopped within one tick. Must be >= 0.
    """
    max_speed: float
    acceleration: float
    deceleration: float
    min_distance: float

    def __post_init__(self):
        for name in ("max_speed", "acceleration", "deceleration"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be > 0, got {value!r}")
        if not math.isfinite(self.min_distance) or self.min_distance < 0:
            raise ValueError(f"min_distance must be >= 0, got {self.min_distance!r}")


DEFAULT_POSITION_UPDATER_CONFIG = PositionUpdaterConfiguration(
    max_speed=4.0,
    acceleration=2.0,
    deceleration=2.0,
    min_distance=0.001,
)


@dataclass
class TrackMobilityConfiguration:
    """
    Configuration parameters for the TrackMobilityHandler.

    The normalized track [-1, 1] is laid out in world coordinates as the
    segment ``track_center ± track_axis * track_half_length``.

    Attributes:
        update_rate: Time interval (in seconds) between updater ticks. This is
            the ``dt`` handed to every PositionUpdater.
        updater: Physical limits shared by every node's PositionUpdater.
        track_center: World position (x, y, z) of normalized position 0.
        track_axis: Direction of the track in world coordinates. Normalized
            to unit length on construction.
        track_half_length: Distance (m) from the center to either end.
        send_telemetry: If True, emit Telemetry messages after position updates.
        telemetry_decimation: Emit telemetry every N updates (default: 1).
    """
    update_rate: float
    updater: PositionUpdaterConfiguration = DEFAULT_POSITION_UPDATER_CONFIG
    track_center: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    track_axis: Tuple[float, float, float] = (1.0, 0.0, 0.0)
    track_half_length: float = 50.0
    send_telemetry: bool = True
    telemetry_decimation: int = 1

    def __post_init__(self):
        if not math.isfinite(self.update_rate) or self.update_rate <= 0:
            raise ValueError(f"update_rate must be > 0, got {self.update_rate!r}")
        if not math.isfinite(self.track_half_length) or self.track_half_length <= 0:
            raise ValueError(f"track_half_length must be > 0, got {self.track_half_length!r}")
        if self.telemetry_decimation < 1:
            raise ValueError(f"telemetry_decimation must be >= 1, got {self.telemetry_decimation!r}")

        ax, ay, az = self.track_axis
        norm = math.sqrt(ax * ax + ay * ay + az * az)
        if not math.isfinite(norm) or norm == 0:
            raise ValueError(f"track_axis must be a non-zero vector, got {self.track_axis!r}")
        self.track_axis = (ax / norm, ay / norm, az / norm)
