"""
Dead reckoning state, integration, drift correction and tracking lifecycle.
"""

from .state import TrackerState
from .integrator import Integrator
from .drift import DriftCorrector
from .clock import MonotonicClock, ManualClock
from .timer import PeriodicTimer
from .tracker import MotionTracker, TrackerReadings
from .session import TrackingSession, TrackingStatus

__all__ = [
    "TrackerState",
    "Integrator",
    "DriftCorrector",
    "MonotonicClock",
    "ManualClock",
    "PeriodicTimer",
    "MotionTracker",
    "TrackerReadings",
    "TrackingSession",
    "TrackingStatus",
]
