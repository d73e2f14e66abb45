from config import SETTLE_BAND
from projectile import Point, Vector, Projectile
from spring import Damping, Spring
from utils import Utility
from dataclasses import dataclass, field
import numpy as np
import pandas as pd
import logging
import math
import time

logger = logging.getLogger(__name__)

@dataclass(frozen=False)
class SpringProfile:
    angular_frequency: float
    damping_ratio: float
    target: float
    initial_position: float = 0.0
    initial_velocity: float = 0.0

@dataclass(frozen=False)
class ProjectileProfile:
    initial_position: Point
    initial_velocity: Vector
    acceleration: Vector

@dataclass(frozen=False)
class SpringTrace(SpringProfile):
    regime: Damping = Damping.NONE
    times: np.ndarray = field(default_factory=lambda: np.zeros(0))
    positions: np.ndarray = field(default_factory=lambda: np.zeros(0))
    velocities: np.ndarray = field(default_factory=lambda: np.zeros(0))
    overshoot: float = 0.0
    settle_time: float = math.nan

@dataclass(frozen=False)
class ProjectileTrace(ProjectileProfile):
    times: np.ndarray = field(default_factory=lambda: np.zeros(0))
    positions: np.ndarray = field(default_factory=lambda: np.zeros((0, 3)))
    velocities: np.ndarray = field(default_factory=lambda: np.zeros((0, 3)))

def overshoot(positions, initial, target):
    """Largest excursion past target, measured in the direction of travel. 0 if it never crosses."""
    direction = np.sign(target - initial)
    if direction == 0:
        return 0.0
    return float(max(0.0, np.max((np.asarray(positions) - target) * direction)))

def settle_time(times, positions, initial, target, band=SETTLE_BAND):
    """
    First time after which the position stays within band * |target - initial|
    of the target. NaN when the recording ends outside the band.
    """
    tolerance = band * abs(target - initial)
    outside = np.flatnonzero(np.abs(np.asarray(positions) - target) > tolerance)
    if outside.size == 0:
        return float(times[0])
    if outside[-1] == len(positions) - 1:
        return math.nan
    return float(times[outside[-1] + 1])

class Model:
    def __init__(self, time_step, profiles, result):
        self.time_step = time_step
        self.profiles = profiles
        self.result = result

    def _spring_trace(self, profile: SpringProfile, frames):
        spring = Spring(self.time_step, profile.angular_frequency, profile.damping_ratio)

        times = np.arange(frames + 1) * self.time_step
        positions = np.empty(frames + 1)
        velocities = np.empty(frames + 1)

        position, velocity = profile.initial_position, profile.initial_velocity
        positions[0], velocities[0] = position, velocity
        for i in range(1, frames + 1):
            position, velocity = spring.update(position, velocity, profile.target)
            positions[i], velocities[i] = position, velocity

        return SpringTrace(profile.angular_frequency, profile.damping_ratio, profile.target,
                           profile.initial_position, profile.initial_velocity,
                           spring.regime, times, positions, velocities,
                           overshoot(positions, profile.initial_position, profile.target),
                           settle_time(times, positions, profile.initial_position, profile.target))

    def _projectile_trace(self, profile: ProjectileProfile, frames):
        projectile = Projectile(self.time_step, profile.initial_position, profile.initial_velocity, profile.acceleration)

        times = np.arange(frames + 1) * self.time_step
        positions = np.empty((frames + 1, 3))
        velocities = np.empty((frames + 1, 3))

        positions[0] = projectile.position.as_array()
        velocities[0] = projectile.velocity.as_array()
        for i in range(1, frames + 1):
            positions[i] = projectile.update().as_array()
            velocities[i] = projectile.velocity.as_array()

        return ProjectileTrace(profile.initial_position, profile.initial_velocity, profile.acceleration,
                               times, positions, velocities)

    def simulate(self, frames, logging: bool = False):
        if frames < 0:
            raise ValueError(f"Frame count must not be negative, got {frames}")

        start = time.perf_counter()
        prefix = f" Modelling {len(self.profiles)} Profiles ..."
        for i, profile in enumerate(self.profiles):
            Utility.progress_bar(i, len(self.profiles), prefix=prefix, suffix="Complete", bar_length=50) if logging else None
            if isinstance(profile, SpringProfile):
                trace = self._spring_trace(profile, frames)
            elif isinstance(profile, ProjectileProfile):
                trace = self._projectile_trace(profile, frames)
            else:
                raise TypeError(f"Unsupported profile type: {type(profile)}")
            self.result.append(trace)
        end = time.perf_counter()
        if logging:
            Utility.progress_bar(1, 1, prefix=prefix, suffix=f"Complete in {end - start:.2f} seconds\n", bar_length=50)
        logger.info("Simulated %d profile(s) over %d frames in %.3f s", len(self.profiles), frames, end - start)

def traces_to_dataframe(traces):
    rows = []
    for i, trace in enumerate(traces):
        row = {"Profile ID": i, "Duration (s)": float(trace.times[-1]) if len(trace.times) else 0.0}
        if isinstance(trace, SpringTrace):
            row.update({
                "Kind": "spring",
                "Angular Frequency": trace.angular_frequency,
                "Damping Ratio": trace.damping_ratio,
                "Regime": str(trace.regime),
                "Final Position": float(trace.positions[-1]),
                "Overshoot": trace.overshoot,
                "Settle Time (s)": trace.settle_time,
            })
        else:
            final = trace.positions[-1]
            row.update({
                "Kind": "projectile",
                "Final Distance": float(np.linalg.norm(final)),
                "Final X": float(final[0]),
                "Final Y": float(final[1]),
                "Final Z": float(final[2]),
                "Final Speed": float(np.linalg.norm(trace.velocities[-1])),
            })
        rows.append(row)
    df = pd.DataFrame(rows)
    if not df.empty:
        df.set_index("Profile ID", inplace=True)
    return df
