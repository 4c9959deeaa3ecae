"""
Vector types and constants for inertial dead reckoning.
"""

from .vector import Vector3
from .constants import *

__all__ = ["Vector3"]
