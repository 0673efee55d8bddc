"""Frame timing."""

from time import perf_counter


class Time:
    """Tracks time since start and time between frames, in seconds."""

    def __init__(self, clock=None):
        self._clock = clock or perf_counter
        now = self._clock()
        self._start_time = now
        self._frame_time = now
        self._time = 0.0
        self._delta_time = 0.0

    def tick(self):
        """Advance to a new frame, updating elapsed and delta time."""
        now = self._clock()
        self._time = now - self._start_time
        self._delta_time = now - self._frame_time
        self._frame_time = now

    def reset(self):
        """Restart the elapsed-time measurement from now."""
        self._start_time = self._clock()

    @property
    def time(self):
        """Seconds from start (or the last reset) to the last tick."""
        return self._time

    @property
    def delta_time(self):
        """Seconds between the last two ticks."""
        return self._delta_time