"""
Double integration of linear acceleration on a non-uniform sample clock.
"""

import logging
from typing import Optional, Dict, Any
from ..math.vector import Vector3
from .state import TrackerState

logger = logging.getLogger(__name__)

class Integrator:
    """
    Advances velocity and position with semi-implicit Euler steps.
    
    Velocity is updated first and the new velocity advances the position.
    The step size is the time elapsed since the previous sample, so samples
    may arrive at any rate.
    
    Timestamps that go backwards are clamped to a zero step and counted as
    out-of-order samples. The state clock is not rewound, so the next
    in-order sample measures its step from the latest instant seen.
    """
    
    def __init__(self):
        self.integration_count = 0
        self.out_of_order_samples = 0
    
    def integrate(self, state: TrackerState, linear_accel: Vector3,
                  now: float) -> Optional[float]:
        """
        Integrate one sample into the state.
        
        Args:
            state: Tracker state, mutated in place
            linear_accel: Gravity-free acceleration (m/s²)
            now: Sample instant in seconds
            
        Returns:
            Step size applied in seconds, or None if this sample only
            seeded the clock
        """
        if state.last_timestamp is None:
            state.last_timestamp = now
            return None
        
        dt = now - state.last_timestamp
        if dt < 0:
            self.out_of_order_samples += 1
            logger.warning(
                "Out-of-order motion sample: %.6f s before previous sample, step clamped to 0",
                -dt
            )
            return 0.0
        
        state.velocity += linear_accel.as_array * dt
        state.position += state.velocity * dt
        state.last_timestamp = now
        
        self.integration_count += 1
        return dt
    
    def get_statistics(self) -> Dict[str, Any]:
        return {
            'integrations': self.integration_count,
            'out_of_order_samples': self.out_of_order_samples
        }
