"""
Global constants
================
Frame timing and the default spring used by the demo and driver scripts.

Exports:
    NANOSECONDS_PER_SECOND (int): Tick granularity of frame durations.
    DEFAULT_FPS (int): Frame rate used when a script does not pick one.
    DEFAULT_ANGULAR_FREQUENCY (float): Angular frequency of the default spring (rad/s).
    DEFAULT_DAMPING_RATIO (float): Damping ratio of the default spring.
    SETTLE_BAND (float): Fraction of the initial displacement a spring must
        stay within to count as settled.
"""

NANOSECONDS_PER_SECOND: int = 1_000_000_000

DEFAULT_FPS: int = 60

DEFAULT_ANGULAR_FREQUENCY: float = 7.0
DEFAULT_DAMPING_RATIO: float = 0.15

SETTLE_BAND: float = 0.02
