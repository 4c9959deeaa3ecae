"""
Dead reckoning tracker combining gravity removal, integration and drift correction.
"""

import logging
import threading
import numpy as np
from dataclasses import dataclass
from typing import Optional, Dict, Any

from ..math.vector import Vector3
from ..math.constants import (
    GRAVITY_FILTER_ALPHA,
    DRIFT_VELOCITY_THRESHOLD,
    DRIFT_DAMPING_FACTOR,
)
from ..sensors.samples import MotionSample, OrientationSample
from ..sensors.gravity import GravityEstimator, LinearAccelerationExtractor
from ..sensors.orientation import OrientationReporter
from .state import TrackerState
from .integrator import Integrator
from .drift import DriftCorrector
from .clock import MonotonicClock

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class TrackerReadings:
    """Snapshot of everything a display layer may show."""
    
    linear_accel: Vector3
    velocity: Vector3
    position: Vector3
    gravity_estimate: Vector3
    orientation: Optional[OrientationSample]
    last_timestamp: Optional[float]

class MotionTracker:
    """
    Estimates velocity and position from accelerometer samples.
    
    Two entry points mutate the state: handle_motion() for every sample and
    tick() for the periodic drift correction. Each runs as one atomic update
    under the tracker lock, so they may be called from different threads.
    """
    
    def __init__(self, clock=None,
                 alpha: float = GRAVITY_FILTER_ALPHA,
                 velocity_threshold: float = DRIFT_VELOCITY_THRESHOLD,
                 damping_factor: float = DRIFT_DAMPING_FACTOR):
        """
        Initialize the tracker.
        
        Args:
            clock: Object with now() -> seconds, used for samples without a
                   timestamp. Defaults to MonotonicClock.
            alpha: Gravity low-pass filter coefficient
            velocity_threshold: Drift correction zeroing threshold (m/s)
            damping_factor: Drift correction per-tick damping
        """
        self.clock = clock or MonotonicClock()
        self.alpha = alpha
        
        self.state = TrackerState()
        self.gravity_estimator = GravityEstimator(self.state.gravity_estimate, alpha)
        self.extractor = LinearAccelerationExtractor()
        self.integrator = Integrator()
        self.drift_corrector = DriftCorrector(velocity_threshold, damping_factor)
        self.orientation_reporter = OrientationReporter()
        
        self.linear_accel = Vector3.zero()
        self.motion_sample_count = 0
        
        self._lock = threading.Lock()
    
    def handle_motion(self, sample: MotionSample) -> Vector3:
        """
        Process one accelerometer sample.
        
        Args:
            sample: Reading including gravity
            
        Returns:
            Linear (gravity-free) acceleration for this sample
        """
        raw = sample.acceleration_including_gravity
        
        with self._lock:
            now = sample.timestamp if sample.timestamp is not None else self.clock.now()
            gravity = self.gravity_estimator.update(raw)
            linear_accel = self.extractor.extract(raw, gravity)
            self.integrator.integrate(self.state, linear_accel, now)
            self.linear_accel = Vector3(*linear_accel)
            self.motion_sample_count += 1
            logger.debug("Motion sample at %.3f: linear accel %s, position %s",
                         now, linear_accel, Vector3.from_array(self.state.position))
        
        return linear_accel
    
    def handle_orientation(self, sample: OrientationSample) -> OrientationSample:
        """Report an orientation sample unchanged."""
        with self._lock:
            return self.orientation_reporter.report(sample)
    
    def tick(self):
        """Apply one drift correction step."""
        with self._lock:
            self.drift_corrector.tick(self.state)
    
    def reset(self):
        """Return to the initial zero state."""
        with self._lock:
            self.state.reset()
            self.linear_accel = Vector3.zero()
            self.orientation_reporter.last_sample = None
        logger.info("Tracker state reset")
    
    def readings(self) -> TrackerReadings:
        """Get a consistent snapshot of the current estimates."""
        with self._lock:
            return TrackerReadings(
                linear_accel=Vector3(*self.linear_accel),
                velocity=Vector3.from_array(self.state.velocity),
                position=Vector3.from_array(self.state.position),
                gravity_estimate=Vector3.from_array(self.state.gravity_estimate),
                orientation=self.orientation_reporter.last_sample,
                last_timestamp=self.state.last_timestamp
            )
    
    @property
    def position(self) -> np.ndarray:
        with self._lock:
            return self.state.position.copy()
    
    @property
    def velocity(self) -> np.ndarray:
        with self._lock:
            return self.state.velocity.copy()
    
    def get_statistics(self) -> Dict[str, Any]:
        """Get tracker statistics."""
        with self._lock:
            stats = {
                'motion_samples': self.motion_sample_count,
                'orientation_samples': self.orientation_reporter.sample_count,
                'drift_ticks': self.drift_corrector.tick_count,
                'speed': self.state.speed
            }
            stats.update(self.integrator.get_statistics())
        return stats
