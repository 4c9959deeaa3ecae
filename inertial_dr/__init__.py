"""
Inertial dead reckoning from device motion sensors.

This package provides platform-independent implementations of:
- Gravity estimation and removal from accelerometer samples
- Velocity and position integration on a non-uniform sample clock
- Periodic velocity drift correction
- Orientation pass-through reporting and the tracking lifecycle
"""

__version__ = "1.0.0"
__author__ = "Inertial DR Team"

from .math import Vector3
from .sensors import MotionSample, OrientationSample
from .tracking import MotionTracker, TrackingSession, TrackingStatus
from .config import Config

__all__ = [
    "Vector3",
    "MotionSample",
    "OrientationSample",
    "MotionTracker",
    "TrackingSession",
    "TrackingStatus",
    "Config",
]
