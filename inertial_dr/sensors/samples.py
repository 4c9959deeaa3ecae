"""
Sensor sample types delivered by the device motion and orientation feeds.
"""

import numpy as np
from dataclasses import dataclass
from typing import Optional
from ..math.vector import Vector3

@dataclass
class MotionSample:
    """Accelerometer reading including gravity."""
    
    # Acceleration including gravity (m/s²)
    acceleration_including_gravity: Vector3
    
    # Monotonic timestamp in seconds. None means "stamp on arrival".
    timestamp: Optional[float] = None
    
    @classmethod
    def from_components(cls, ax: float, ay: float, az: float,
                        timestamp: Optional[float] = None) -> 'MotionSample':
        return cls(Vector3(ax, ay, az), timestamp)
    
    @property
    def acceleration(self) -> np.ndarray:
        """Get acceleration as numpy array."""
        return self.acceleration_including_gravity.as_array

@dataclass(frozen=True)
class OrientationSample:
    """
    Device orientation angles in degrees.
    
    - alpha: rotation around the z axis
    - beta: rotation around the x axis
    - gamma: rotation around the y axis
    
    Any angle may be None when the platform does not report it.
    """
    
    alpha: Optional[float] = None
    beta: Optional[float] = None
    gamma: Optional[float] = None
    
    def __str__(self) -> str:
        def fmt(angle):
            return "n/a" if angle is None else f"{angle:.2f}°"
        return f"α: {fmt(self.alpha)}, β: {fmt(self.beta)}, γ: {fmt(self.gamma)}"
