"""
Periodic velocity drift suppression.
"""

import numpy as np
from ..math.constants import DRIFT_VELOCITY_THRESHOLD, DRIFT_DAMPING_FACTOR
from .state import TrackerState

class DriftCorrector:
    """
    Bounds velocity drift from integrated sensor noise and bias.
    
    Meant to run on a fixed period regardless of sample arrival. Each tick,
    per axis:
    1. zero the velocity if its magnitude is below the noise threshold
    2. multiply it by the damping factor
    
    Position and the gravity estimate are never touched directly.
    """
    
    def __init__(self, velocity_threshold: float = DRIFT_VELOCITY_THRESHOLD,
                 damping_factor: float = DRIFT_DAMPING_FACTOR):
        self.velocity_threshold = velocity_threshold
        self.damping_factor = damping_factor
        self.tick_count = 0
    
    def tick(self, state: TrackerState):
        velocity = state.velocity
        velocity[np.abs(velocity) < self.velocity_threshold] = 0.0
        velocity *= self.damping_factor
        self.tick_count += 1
