"""
Orientation reporting.

Orientation angles are reported exactly as the rotation sensor delivers
them. There is no filtering and no fusion with the accelerometer.
"""

from typing import Optional
from .samples import OrientationSample

class OrientationReporter:
    """Pass-through reporter for orientation samples."""
    
    def __init__(self):
        self.last_sample: Optional[OrientationSample] = None
        self.sample_count = 0
    
    def report(self, sample: OrientationSample) -> OrientationSample:
        self.last_sample = sample
        self.sample_count += 1
        return sample
