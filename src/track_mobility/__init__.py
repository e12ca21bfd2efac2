"""Track mobility building blocks.

This package contains a braking-distance position updater for a body on a
one-dimensional normalized track, its pure math core, and a GrADyS-SIM NG
handler that drives it. It is intended to be imported by a larger project.

Author: Laércio Lucchesi
"""

from .config import (
    DEFAULT_POSITION_UPDATER_CONFIG,
    PositionUpdaterConfiguration,
    TrackMobilityConfiguration,
)
from .core import (
    AccelerationLimit,
    LimitKind,
    clamp,
    clamp_target,
    compute_acceleration,
    compute_target_speed,
    integrate_position,
    integrate_velocity,
    select_acceleration_limit,
    to_normalized,
    to_world,
)
from .handler import TrackMobilityHandler
from .updater import KinematicState, PositionUpdater

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_POSITION_UPDATER_CONFIG",
    "PositionUpdaterConfiguration",
    "TrackMobilityConfiguration",
    "TrackMobilityHandler",
    "KinematicState",
    "PositionUpdater",
    "AccelerationLimit",
    "LimitKind",
    "clamp",
    "clamp_target",
    "compute_acceleration",
    "compute_target_speed",
    "integrate_position",
    "integrate_velocity",
    "select_acceleration_limit",
    "to_normalized",
    "to_world",
]
