"""Pure mathematical functions for braking-distance position tracking.

This module contains stateless mathematical operations for:
- Target clamping
- Braking-distance target speed
- Acceleration limit selection
- Velocity and position integration
- Mapping between the normalized track and world coordinates

All functions operate on simple tuples and floats, making them
easy to test and reuse independently of the simulation framework.

Author: Laércio Lucchesi
Date: December 27, 2025
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

TRACK_MIN = -1.0
TRACK_MAX = 1.0


def clamp(value: float, low: float, high: float) -> float:
    """Saturate ``value`` at the nearer bound of [low, high]."""
    return max(low, min(high, value))


def sign(value: float) -> float:
    """Return -1.0, 0.0 or 1.0 following the sign of ``value``."""
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


def clamp_target(target: float) -> float:
    """Clamp a requested target onto the normalized track."""
    return clamp(target, TRACK_MIN, TRACK_MAX)


def compute_target_speed(dist: float, max_speed: float, deceleration: float) -> float:
    """Highest speed from which the body can still stop within ``dist``.

    Inverts the braking distance relation ``d = v² / (2 * deceleration)``:

        v = sqrt(2 * deceleration * d)

    capped by ``max_speed``.

    Args:
        dist: Remaining distance to the target (>= 0).
        max_speed: Maximum allowed speed.
        deceleration: Braking deceleration magnitude (> 0).

    Returns:
        Target speed in [0, max_speed].
    """
    return min(max_speed, math.sqrt(dist * 2.0 * deceleration))


class LimitKind(Enum):
    """Which physical limit bounds the acceleration of a tick."""
    ACCELERATE = "accelerate"
    BRAKE = "brake"


@dataclass(frozen=True)
class AccelerationLimit:
    """Result of the acceleration limit selection.

    Attributes:
        kind: ACCELERATE when steering toward the target in the current
            direction, BRAKE when slowing down or reversing.
        limit: Maximum acceleration magnitude for this tick.
        direction: Sign (-1.0, 0.0 or 1.0) the acceleration is applied in.
    """
    kind: LimitKind
    limit: float
    direction: float


def select_acceleration_limit(
    target_dir: float,
    target_speed: float,
    velocity: float,
    acceleration: float,
    deceleration: float,
) -> AccelerationLimit:
    """Choose the acceleration limit and direction for one tick.

    Braking applies when the direction must reverse or when the body is
    faster than ``target_speed``; the acceleration then opposes the current
    motion. Otherwise the body accelerates toward the target. A body at rest
    always takes the accelerate branch, toward ``target_dir``.

    Args:
        target_dir: Sign of (target - position).
        target_speed: Speed to steer toward, from compute_target_speed().
        velocity: Current signed velocity.
        acceleration: Maximum acceleration magnitude.
        deceleration: Maximum deceleration magnitude.

    Returns:
        The selected AccelerationLimit.
    """
    current_speed = abs(velocity)
    current_dir = sign(velocity)

    if target_dir * current_dir < 0 or target_speed < current_speed:
        return AccelerationLimit(LimitKind.BRAKE, deceleration, -current_dir)
    return AccelerationLimit(LimitKind.ACCELERATE, acceleration, target_dir)


def compute_acceleration(
    position: float,
    velocity: float,
    target: float,
    dt: float,
    max_speed: float,
    acceleration: float,
    deceleration: float,
    min_distance: float,
) -> Tuple[float, float]:
    """Compute the acceleration of one tick and the velocity steered toward.

    Within ``min_distance`` of the target the body is considered arrived and
    the returned acceleration cancels the current velocity within ``dt``.
    Otherwise the magnitude is the smaller of the selected limit and the
    acceleration needed to close the speed gap within this tick.

    Args:
        position: Current normalized position.
        velocity: Current velocity.
        target: Clamped target position.
        dt: Time step in seconds (> 0).
        max_speed: Maximum speed.
        acceleration: Maximum acceleration magnitude.
        deceleration: Maximum deceleration magnitude.
        min_distance: Arrival distance.

    Returns:
        (acceleration, target_velocity)

    Raises:
        ValueError: If ``dt`` is not a finite positive number.
    """
    if not dt > 0 or not math.isfinite(dt):
        raise ValueError("dt must be > 0")

    dist = abs(target - position)
    if dist <= min_distance:
        return (-velocity / dt, 0.0)

    target_dir = sign(target - position)
    target_speed = compute_target_speed(dist, max_speed, deceleration)

    selected = select_acceleration_limit(
        target_dir, target_speed, velocity, acceleration, deceleration
    )
    magnitude = min(selected.limit, abs(target_speed - abs(velocity)) / dt)

    return (magnitude * selected.direction, target_dir * target_speed)


def integrate_velocity(velocity: float, acceleration: float, dt: float, max_speed: float) -> float:
    """Euler step for velocity, saturated at ±max_speed."""
    return clamp(velocity + acceleration * dt, -max_speed, max_speed)


def integrate_position(position: float, velocity: float, dt: float) -> float:
    """Euler step for position, saturated at the track ends."""
    return clamp(position + velocity * dt, TRACK_MIN, TRACK_MAX)


def to_world(
    position: float,
    center: Tuple[float, float, float],
    axis: Tuple[float, float, float],
    half_length: float,
) -> Tuple[float, float, float]:
    """Map a normalized track position onto world coordinates.

    Position -1 lands on ``center - axis * half_length`` and +1 on
    ``center + axis * half_length``. ``axis`` is expected to be unit length.
    """
    cx, cy, cz = center
    ax, ay, az = axis
    offset = position * half_length

    return (
        cx + ax * offset,
        cy + ay * offset,
        cz + az * offset,
    )


def to_normalized(
    point: Tuple[float, float, float],
    center: Tuple[float, float, float],
    axis: Tuple[float, float, float],
    half_length: float,
) -> float:
    """Project a world point onto the track and return its normalized coordinate.

    The result is not clamped: points past the track ends give values
    outside [-1, 1].
    """
    px, py, pz = point
    cx, cy, cz = center
    ax, ay, az = axis

    along = (px - cx) * ax + (py - cy) * ay + (pz - cz) * az
    return along / half_length
