"""
Closed-form damped harmonic oscillator.

A Spring caches the four coefficients that advance (position, velocity) by
exactly one fixed time step of a damped spring, following Ryan Juckett's
damped springs derivation (https://www.ryanjuckett.com/damped-springs/).
Build one per (time step, angular frequency, damping ratio) and update as
many positions with it as needed:

    spring = Spring(Timing.fps(60), 6.0, 0.5)
    x = Oscillator()
    y = Oscillator()
    spring.step(x, 10.0)
    spring.step(y, 20.0)

Damping ratio > 1: over-damped, never oscillates and settles slower than critical.
Damping ratio = 1: critically damped, settles as fast as possible without oscillating.
Damping ratio < 1: under-damped, overshoots and rings down.

The coefficients are only valid for the delta_time they were built with.
Inputs are never validated: NaN or infinite values propagate to the output.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
import logging
import numpy as np

from utils import Timing

logger = logging.getLogger(__name__)


class Damping(StrEnum):
    NONE = "none"
    UNDER = "under-damped"
    CRITICAL = "critically damped"
    OVER = "over-damped"


@dataclass(frozen=False)
class Oscillator:
    """Caller-owned spring state. Fields may be floats or numpy arrays."""
    position: float = 0.0
    velocity: float = 0.0


@dataclass(frozen=True)
class Spring:
    delta_time: float
    angular_frequency: float
    damping_ratio: float
    regime: Damping = field(init=False)
    pos_pos_coef: float = field(init=False)
    pos_vel_coef: float = field(init=False)
    vel_pos_coef: float = field(init=False)
    vel_vel_coef: float = field(init=False)

    def __post_init__(self):
        # Keep values in a legal range, NaN stays NaN
        angular_frequency = float(np.maximum(0.0, self.angular_frequency))
        damping_ratio = float(np.maximum(0.0, self.damping_ratio))
        object.__setattr__(self, "angular_frequency", angular_frequency)
        object.__setattr__(self, "damping_ratio", damping_ratio)

        # Non-finite parameters give NaN coefficients rather than math domain errors
        with np.errstate(invalid="ignore", over="ignore", divide="ignore"):
            regime, coefficients = self._coefficients(self.delta_time, angular_frequency, damping_ratio)
        object.__setattr__(self, "regime", regime)
        for name, value in zip(("pos_pos_coef", "pos_vel_coef", "vel_pos_coef", "vel_vel_coef"), coefficients):
            object.__setattr__(self, name, float(value))

        logger.debug("%s spring: dt=%g, omega=%g, zeta=%g", regime, self.delta_time, angular_frequency, damping_ratio)

    @staticmethod
    def _coefficients(dt, omega, zeta):
        eps = Timing.epsilon

        # No angular frequency, the spring does not move
        if omega < eps:
            return Damping.NONE, (1.0, 0.0, 0.0, 1.0)

        if zeta > 1.0 + eps:
            za = -omega * zeta
            zb = omega * np.sqrt(zeta * zeta - 1.0)
            z1 = za - zb
            z2 = za + zb

            e1 = np.exp(z1 * dt)
            e2 = np.exp(z2 * dt)

            inv_two_zb = 1.0 / (2.0 * zb)

            e1_over_two_zb = e1 * inv_two_zb
            e2_over_two_zb = e2 * inv_two_zb

            z1e1_over_two_zb = z1 * e1_over_two_zb
            z2e2_over_two_zb = z2 * e2_over_two_zb

            return Damping.OVER, (
                e1_over_two_zb * z2 - z2e2_over_two_zb + e2,
                -e1_over_two_zb + e2_over_two_zb,
                (z1e1_over_two_zb - z2e2_over_two_zb + e2) * z2,
                -z1e1_over_two_zb + z2e2_over_two_zb,
            )

        # Written as "not >=" so a NaN damping ratio lands here and propagates
        if not zeta >= 1.0 - eps:
            omega_zeta = omega * zeta
            alpha = omega * np.sqrt(1.0 - zeta * zeta)

            exp_term = np.exp(-omega_zeta * dt)
            cos_term = np.cos(alpha * dt)
            sin_term = np.sin(alpha * dt)

            inv_alpha = 1.0 / alpha

            exp_sin = exp_term * sin_term
            exp_cos = exp_term * cos_term
            exp_omega_zeta_sin_over_alpha = exp_term * omega_zeta * sin_term * inv_alpha

            return Damping.UNDER, (
                exp_cos + exp_omega_zeta_sin_over_alpha,
                exp_sin * inv_alpha,
                -exp_sin * alpha - omega_zeta * exp_omega_zeta_sin_over_alpha,
                exp_cos - exp_omega_zeta_sin_over_alpha,
            )

        # Within epsilon of 1: critically damped
        exp_term = np.exp(-omega * dt)
        time_exp = dt * exp_term
        time_exp_freq = time_exp * omega

        return Damping.CRITICAL, (
            time_exp_freq + exp_term,
            time_exp,
            -omega * time_exp_freq,
            -time_exp_freq + exp_term,
        )

    @property
    def coefficients(self):
        return self.pos_pos_coef, self.pos_vel_coef, self.vel_pos_coef, self.vel_vel_coef

    def retune(self, angular_frequency=None, damping_ratio=None, delta_time=None) -> Spring:
        """Spring with some parameters replaced. This spring is left untouched."""
        changes = {}
        if angular_frequency is not None:
            changes["angular_frequency"] = angular_frequency
        if damping_ratio is not None:
            changes["damping_ratio"] = damping_ratio
        if delta_time is not None:
            changes["delta_time"] = delta_time
        return replace(self, **changes)

    def update(self, position, velocity, equilibrium):
        """
        Advance position and velocity by one time step towards equilibrium.
        Works on floats and element-wise on numpy arrays.
        Returns: position_new, velocity_new
        """
        old_pos = position - equilibrium
        old_vel = velocity

        new_pos = old_pos * self.pos_pos_coef + old_vel * self.pos_vel_coef + equilibrium
        new_vel = old_pos * self.vel_pos_coef + old_vel * self.vel_vel_coef
        return new_pos, new_vel

    def step(self, oscillator: Oscillator, equilibrium) -> Oscillator:
        oscillator.position, oscillator.velocity = self.update(oscillator.position, oscillator.velocity, equilibrium)
        return oscillator

    def update_inplace(self, positions, velocities, equilibrium):
        """Overwrite numpy position and velocity buffers with their next step."""
        positions[...], velocities[...] = self.update(positions, velocities, equilibrium)
