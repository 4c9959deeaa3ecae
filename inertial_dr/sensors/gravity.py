"""
Gravity estimation and removal for raw accelerometer samples.

The accelerometer reports acceleration including gravity. A single-pole
low-pass filter tracks the slowly varying gravity component; subtracting it
from the raw reading leaves the motion-induced (linear) acceleration.

The estimate starts at zero, so the first samples after start still carry
most of gravity in the linear output. That transient decays geometrically
(by the filter coefficient per sample) and is left visible on purpose.
"""

import numpy as np
from typing import Optional
from ..math.vector import Vector3
from ..math.constants import GRAVITY_FILTER_ALPHA

class GravityEstimator:
    """
    Running low-pass estimate of the gravity vector.
    
    Usage:
        estimator = GravityEstimator()
        gravity = estimator.update(Vector3(0.1, 0.2, 9.8))
    """
    
    def __init__(self, estimate: Optional[np.ndarray] = None,
                 alpha: float = GRAVITY_FILTER_ALPHA):
        """
        Initialize gravity estimator.
        
        Args:
            estimate: Array the estimate is kept in and mutated in place.
                      Pass the tracker state's gravity array to share it.
            alpha: Weight of the previous estimate (0-1)
        """
        if estimate is None:
            estimate = np.zeros(3)
        self.estimate = estimate
        self.alpha = alpha
        self.update_count = 0
    
    def update(self, raw: Vector3) -> Vector3:
        """
        Fold one raw reading into the estimate.
        
        Args:
            raw: Acceleration including gravity (m/s²)
            
        Returns:
            The new gravity estimate
        """
        self.estimate[:] = self.alpha * self.estimate + (1 - self.alpha) * raw.as_array
        self.update_count += 1
        return Vector3.from_array(self.estimate)
    
    @property
    def gravity(self) -> Vector3:
        return Vector3.from_array(self.estimate)

class LinearAccelerationExtractor:
    """Removes a gravity estimate from a raw reading."""
    
    @staticmethod
    def extract(raw: Vector3, gravity_estimate: Vector3) -> Vector3:
        return raw - gravity_estimate
