"""
Simple projectile motion under constant acceleration.

    projectile = Projectile(Timing.fps(60), Point(6.0, 100.0, 0.0), Vector(2.0, 0.0, 0.0), TERMINAL_GRAVITY)
    pos = projectile.update()    # once per frame

Background: https://en.wikipedia.org/wiki/Projectile_motion
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import math

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=False)
class Vector:
    """
    Point or vector in 3D. As a vector it is read as the arrow from the
    origin to (x, y, z): the magnitude is the euclidean distance and the
    direction points from the origin to the point.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def copy(self) -> Vector:
        return replace(self)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, values) -> Vector:
        x, y, z = (float(v) for v in values)
        return cls(x, y, z)

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__


Point = Vector

# Gravity with the origin in the top-left corner, so downward is +y:
#
#  -y            -y ±z
#   │             │ /
#   │             │/
#   └───── ±x     └───── ±x
GRAVITY = Vector(0.0, 9.81, 0.0)
TERMINAL_GRAVITY = GRAVITY


@dataclass(frozen=False)
class Projectile:
    delta_time: float
    position: Point
    velocity: Vector
    acceleration: Vector

    def __post_init__(self):
        # Own copies, so shared constants like GRAVITY are never mutated
        self.position = self.position.copy()
        self.velocity = self.velocity.copy()
        self.acceleration = self.acceleration.copy()
        logger.debug("Projectile at %s, velocity %s, acceleration %s, dt=%g",
                     self.position, self.velocity, self.acceleration, self.delta_time)

    def update(self) -> Point:
        """
        Explicit Euler step. Position moves with the velocity of the previous
        step before the velocity picks up the acceleration.
        Returns a copy of the new position.
        """
        pos, vel, acc, dt = self.position, self.velocity, self.acceleration, self.delta_time

        pos.x += vel.x * dt
        pos.y += vel.y * dt
        pos.z += vel.z * dt

        vel.x += acc.x * dt
        vel.y += acc.y * dt
        vel.z += acc.z * dt

        return pos.copy()
