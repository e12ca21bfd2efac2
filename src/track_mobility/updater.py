"""Stateful one-dimensional position updater.

Wraps the pure functions of :mod:`track_mobility.core` around a single body
on the normalized track. The updater owns its kinematic state; callers read
it through properties or a frozen snapshot and steer it only by writing the
target.

Author: Laércio Lucchesi
Date: December 27, 2025
"""

import logging
from dataclasses import dataclass

from .config import PositionUpdaterConfiguration
from .core import (
    clamp_target,
    compute_acceleration,
    integrate_position,
    integrate_velocity,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KinematicState:
    """Read-only snapshot of a PositionUpdater's state."""
    position: float = 0.0
    velocity: float = 0.0
    acceleration: float = 0.0


class PositionUpdater:
    """Moves a body toward a target on the track [-1, 1].

    Usage:
        updater = PositionUpdater(DEFAULT_POSITION_UPDATER_CONFIG)
        updater.target = 0.8      # from any input source, between ticks
        updater.update(dt)        # from the periodic driver
        updater.position, updater.velocity, updater.target_velocity

    ``update`` is not reentrant; a single driver must call it.
    """

    def __init__(self, config: PositionUpdaterConfiguration):
        self._config = config
        self._state = KinematicState()
        self._target = 0.0
        self._target_velocity = 0.0

    @property
    def config(self) -> PositionUpdaterConfiguration:
        return self._config

    @property
    def target(self) -> float:
        """Current target, always within [-1, 1]."""
        return self._target

    @target.setter
    def target(self, value: float) -> None:
        self.set_target(value)

    def set_target(self, value: float) -> None:
        """Store ``value`` clamped onto the track as the new target."""
        self._target = clamp_target(value)
        logger.debug("Target set to %.4f (requested %r)", self._target, value)

    @property
    def state(self) -> KinematicState:
        return self._state

    @property
    def position(self) -> float:
        return self._state.position

    @property
    def velocity(self) -> float:
        return self._state.velocity

    @property
    def acceleration(self) -> float:
        return self._state.acceleration

    @property
    def target_velocity(self) -> float:
        """Signed velocity the last update steered toward (0 once arrived)."""
        return self._target_velocity

    def update(self, dt: float) -> None:
        """Advance the body by one tick of ``dt`` seconds.

        Raises:
            ValueError: If ``dt`` is not a finite positive number. The state
                is left unchanged in that case.
        """
        config = self._config
        position = self._state.position
        velocity = self._state.velocity

        a, target_velocity = compute_acceleration(
            position,
            velocity,
            self._target,
            dt,
            config.max_speed,
            config.acceleration,
            config.deceleration,
            config.min_distance,
        )
        v = integrate_velocity(velocity, a, dt, config.max_speed)
        p = integrate_position(position, v, dt)

        self._target_velocity = target_velocity
        self._state = KinematicState(position=p, velocity=v, acceleration=a)
