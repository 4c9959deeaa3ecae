"""
Clocks used to timestamp motion samples.

Integration only needs differences between instants, so any monotonic
source in seconds will do. ManualClock lets tests and replays control time.
"""

import time

class MonotonicClock:
    """Wall-clock independent monotonic time in seconds."""
    
    def now(self) -> float:
        return time.monotonic()

class ManualClock:
    """Clock that only moves when told to."""
    
    def __init__(self, start: float = 0.0):
        self._now = float(start)
    
    def now(self) -> float:
        return self._now
    
    def advance(self, dt: float) -> float:
        if dt < 0:
            raise ValueError("ManualClock cannot move backwards")
        self._now += dt
        return self._now
    
    def set(self, instant: float):
        self._now = float(instant)
