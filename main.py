from config import DEFAULT_ANGULAR_FREQUENCY, DEFAULT_DAMPING_RATIO, DEFAULT_FPS
from logging_config import setup_logging
from model import Model, ProjectileProfile, SpringProfile, traces_to_dataframe
from projectile import Point, Vector, TERMINAL_GRAVITY
from utils import Timing
import matplotlib.pyplot as plt
import matplotlib.ticker as tic

setup_logging()

dt = Timing.fps(DEFAULT_FPS)
frames = 3 * DEFAULT_FPS

spring_profiles = [
    SpringProfile(DEFAULT_ANGULAR_FREQUENCY, DEFAULT_DAMPING_RATIO, 10.0),
    SpringProfile(6.0, 0.5, 10.0),
    SpringProfile(6.0, 1.0, 10.0),
    SpringProfile(6.0, 2.0, 10.0),
    SpringProfile(0.0, 1.0, 10.0, 2.0)
]

projectile_profiles = [
    ProjectileProfile(Point(0.0, 0.0, 0.0), Vector(5.0, 5.0, 0.0), TERMINAL_GRAVITY),
    ProjectileProfile(Point(0.0, 0.0, 0.0), Vector(5.0, -5.0, 0.0), TERMINAL_GRAVITY),
    ProjectileProfile(Point(0.0, 0.0, 0.0), Vector(0.0, 0.0, 0.0), Vector(250.0, 0.0, 0.0))
]

spring_traces = []
projectile_traces = []
Model(dt, spring_profiles, spring_traces).simulate(frames, True)
Model(dt, projectile_profiles, projectile_traces).simulate(frames, True)

print(traces_to_dataframe(spring_traces + projectile_traces).to_string())

fig, ax = plt.subplots(figsize = (12, 9))
for i, trace in enumerate(spring_traces):
    ax.plot(trace.times, trace.positions, label = f"ω = {trace.angular_frequency:g}, ζ = {trace.damping_ratio:g} ({trace.regime})")
ax.axhline(10.0, linestyle = '--', color = 'gray', alpha = 0.7)
ax.set_xlabel("Time (s)")
ax.xaxis.set_major_locator(tic.MultipleLocator(0.5))
ax.xaxis.set_minor_locator(tic.AutoMinorLocator(5))
ax.set_ylabel("Position")
plt.title(f"Spring Response at {DEFAULT_FPS} fps")
plt.legend()
plt.grid(True, which='both', linestyle='--')
plt.show()

fig, ax = plt.subplots()
for i, trace in enumerate(projectile_traces[:2]):
    ax.plot(trace.positions[:, 0], trace.positions[:, 1], label = f"Projectile {i + 1}")
ax.set_xlabel("X")
ax.set_ylabel("Y (down)")
ax.invert_yaxis()
plt.title("Projectile Trajectories")
plt.legend()
plt.grid(True, which='both', linestyle='--')
plt.show()
