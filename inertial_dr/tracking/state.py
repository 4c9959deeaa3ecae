"""
Mutable tracker state shared by sample integration and drift correction.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import Optional

@dataclass
class TrackerState:
    """
    Represents the dead reckoning state of one tracking session.
    
    - gravity_estimate: Low-pass gravity estimate in m/s² (sensor frame)
    - velocity: Velocity in m/s
    - position: Position in meters, relative to where tracking started
    - last_timestamp: Instant of the previous motion sample, None until the
      first sample arrives
    
    The vectors are numpy arrays updated in place so collaborators holding a
    reference (the gravity estimator) see every change.
    """
    
    gravity_estimate: np.ndarray = field(default_factory=lambda: np.zeros(3))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    last_timestamp: Optional[float] = None
    
    def reset(self):
        """Restore the initial zero state in place."""
        self.gravity_estimate[:] = 0.0
        self.velocity[:] = 0.0
        self.position[:] = 0.0
        self.last_timestamp = None
    
    @property
    def speed(self) -> float:
        """Get speed in m/s."""
        return float(np.linalg.norm(self.velocity))
    
    def copy(self) -> 'TrackerState':
        """Create a copy of the state."""
        return TrackerState(
            gravity_estimate=self.gravity_estimate.copy(),
            velocity=self.velocity.copy(),
            position=self.position.copy(),
            last_timestamp=self.last_timestamp
        )
    
    def __str__(self) -> str:
        return (
            f"TrackerState(pos=[{self.position[0]:.2f}, {self.position[1]:.2f}, {self.position[2]:.2f}], "
            f"vel=[{self.velocity[0]:.2f}, {self.velocity[1]:.2f}, {self.velocity[2]:.2f}], "
            f"gravity=[{self.gravity_estimate[0]:.2f}, {self.gravity_estimate[1]:.2f}, {self.gravity_estimate[2]:.2f}])"
        )
