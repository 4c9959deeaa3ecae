"""
Sensor sample types and per-sample processing.
"""

from .samples import MotionSample, OrientationSample
from .gravity import GravityEstimator, LinearAccelerationExtractor
from .orientation import OrientationReporter
from .permission import PermissionGate, StaticPermissionGate

__all__ = [
    "MotionSample",
    "OrientationSample",
    "GravityEstimator",
    "LinearAccelerationExtractor",
    "OrientationReporter",
    "PermissionGate",
    "StaticPermissionGate",
]
