from datetime import timedelta
import numpy as np
import numbers
import sys

from config import NANOSECONDS_PER_SECOND

class Timing:
    # Smallest d such that 1 + d != 1 in float64.
    epsilon = float(np.finfo(np.float64).eps)

    @staticmethod
    def fps(n):
        """
        Time delta in seconds for n frames per second.
        The frame duration is truncated to whole nanoseconds before the
        conversion, so fps(60) is 0.016666666 rather than 1 / 60.
        """
        if n <= 0:
            raise ValueError(f"Frame rate must be positive, got {n}")
        return (NANOSECONDS_PER_SECOND // int(n)) / NANOSECONDS_PER_SECOND

    @staticmethod
    def time_delta(duration):
        """
        Convert a frame duration to float seconds.
        Accepts datetime.timedelta, numpy.timedelta64 or a plain number of seconds.
        """
        if isinstance(duration, timedelta):
            return duration / timedelta(seconds=1)

        if isinstance(duration, np.timedelta64):
            return float(duration / np.timedelta64(1, "s"))

        if isinstance(duration, numbers.Real) and not isinstance(duration, bool):
            return float(duration)

        raise TypeError(f"Unsupported duration type: {type(duration)}")

class Utility:
    @staticmethod
    def progress_bar(current, total, prefix='', suffix='', bar_length=100):
        fraction = current / total if total else 1.0
        completed = int(bar_length * fraction)
        bar = '#' * completed + '-' * (bar_length - completed)
        sys.stdout.write(f'\r{prefix} |{bar}| {fraction * 100:.0f}% {suffix}')
        sys.stdout.flush()
