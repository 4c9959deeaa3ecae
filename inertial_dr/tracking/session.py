"""
Tracking lifecycle: permission handshake, start and stop.

States:
    IDLE -> AWAITING_PERMISSION -> TRACKING     (platforms with a permission gate)
    AWAITING_PERMISSION -> DENIED               (refusal or request error)
    IDLE -> TRACKING                            (no permission gate)
    TRACKING -> IDLE                            (stop)
    AWAITING_PERMISSION -> IDLE                 (stop before the grant arrives)

DENIED is left only by a new start request. Every entry into TRACKING
starts from a fresh zero state.
"""

import enum
import logging
import threading
from typing import Callable, Optional

from ..errors import (
    TrackingError,
    PermissionDenied,
    PermissionRequestFailed,
    SensorUnavailable,
)
from ..math.constants import (
    DRIFT_PERIOD_S,
    GRAVITY_FILTER_ALPHA,
    DRIFT_VELOCITY_THRESHOLD,
    DRIFT_DAMPING_FACTOR,
)
from ..sensors.samples import MotionSample, OrientationSample
from ..sensors.permission import PermissionGate
from ..math.vector import Vector3
from .tracker import MotionTracker, TrackerReadings
from .timer import PeriodicTimer

logger = logging.getLogger(__name__)

class TrackingStatus(enum.Enum):
    IDLE = "idle"
    AWAITING_PERMISSION = "awaiting_permission"
    TRACKING = "tracking"
    DENIED = "denied"

class TrackingSession:
    """Owns one MotionTracker and its drift correction timer while tracking."""
    
    def __init__(self,
                 permission_gate: Optional[PermissionGate] = None,
                 sensor_probe: Optional[Callable[[], bool]] = None,
                 clock=None,
                 drift_period: float = DRIFT_PERIOD_S,
                 alpha: float = GRAVITY_FILTER_ALPHA,
                 velocity_threshold: float = DRIFT_VELOCITY_THRESHOLD,
                 damping_factor: float = DRIFT_DAMPING_FACTOR):
        """
        Initialize the session.
        
        Args:
            permission_gate: Gate to pass before tracking, None if the
                             platform has no permission step
            sensor_probe: Returns False (or raises) when the device has
                          no motion sensor
            clock: Clock handed to each new tracker
            drift_period: Drift correction period in seconds
            alpha: Gravity low-pass filter coefficient
            velocity_threshold: Drift correction zeroing threshold (m/s)
            damping_factor: Drift correction per-tick damping
        """
        self.permission_gate = permission_gate
        self.sensor_probe = sensor_probe
        self.clock = clock
        self.drift_period = drift_period
        self.alpha = alpha
        self.velocity_threshold = velocity_threshold
        self.damping_factor = damping_factor
        
        self.status = TrackingStatus.IDLE
        self.last_error: Optional[TrackingError] = None
        
        self._tracker: Optional[MotionTracker] = None
        self._timer: Optional[PeriodicTimer] = None
        self._lock = threading.Lock()
    
    @classmethod
    def from_config(cls, config, **kwargs) -> 'TrackingSession':
        """Create a session using tuning values from a Config."""
        return cls(
            drift_period=config.drift_period_s,
            alpha=config.gravity_filter_alpha,
            velocity_threshold=config.velocity_threshold,
            damping_factor=config.damping_factor,
            **kwargs
        )
    
    @property
    def tracking(self) -> bool:
        return self.status is TrackingStatus.TRACKING
    
    @property
    def tracker(self) -> Optional[MotionTracker]:
        return self._tracker
    
    @property
    def status_message(self) -> str:
        """Human readable status for a display layer."""
        if self.status is TrackingStatus.TRACKING:
            return "Tracking..."
        if self.status is TrackingStatus.AWAITING_PERMISSION:
            return "Waiting for sensor permission..."
        if isinstance(self.last_error, PermissionDenied):
            return "Permission denied"
        if isinstance(self.last_error, PermissionRequestFailed):
            return f"Error: {self.last_error}"
        if isinstance(self.last_error, SensorUnavailable):
            return "Motion sensor not available"
        return "Idle"
    
    def start(self) -> bool:
        """
        Request tracking.
        
        Returns:
            True if tracking is running after the call
        """
        with self._lock:
            if self.status is TrackingStatus.TRACKING:
                logger.info("Tracking already running")
                return True
            if self.status is TrackingStatus.AWAITING_PERMISSION:
                logger.info("Permission request already pending")
                return False
            self.last_error = None
            
            if not self._probe_sensor():
                return False
            
            if self.permission_gate is not None:
                self.status = TrackingStatus.AWAITING_PERMISSION
        
        if self.permission_gate is not None:
            # The gate may block on the user, so it runs outside the lock
            try:
                self.permission_gate.request()
            except (PermissionDenied, PermissionRequestFailed) as e:
                with self._lock:
                    # A stop() while the request was pending wins
                    if self.status is TrackingStatus.AWAITING_PERMISSION:
                        self.status = TrackingStatus.DENIED
                        self.last_error = e
                logger.warning("Tracking not started: %s", e)
                return False
        
        with self._lock:
            if self.permission_gate is not None and self.status is not TrackingStatus.AWAITING_PERMISSION:
                logger.info("Tracking cancelled while waiting for permission")
                return False
            self._enter_tracking()
        return True
    
    def stop(self):
        """Stop tracking and discard the tracker state."""
        with self._lock:
            if self.status is TrackingStatus.AWAITING_PERMISSION:
                self.status = TrackingStatus.IDLE
                logger.info("Pending start cancelled")
                return
            if self.status is not TrackingStatus.TRACKING:
                return
            timer, self._timer = self._timer, None
            self._tracker = None
            self.status = TrackingStatus.IDLE
        
        # Samples arriving from here on are ignored. The timer only ever
        # ticked the discarded tracker, so a last in-flight tick is harmless.
        if timer is not None:
            timer.stop()
        logger.info("Tracking stopped")
    
    def handle_motion(self, sample: MotionSample) -> Optional[Vector3]:
        """Feed a motion sample. Ignored unless tracking."""
        tracker = self._tracker
        if tracker is None:
            return None
        return tracker.handle_motion(sample)
    
    def handle_orientation(self, sample: OrientationSample) -> Optional[OrientationSample]:
        """Feed an orientation sample. Ignored unless tracking."""
        tracker = self._tracker
        if tracker is None:
            return None
        return tracker.handle_orientation(sample)
    
    def readings(self) -> Optional[TrackerReadings]:
        tracker = self._tracker
        if tracker is None:
            return None
        return tracker.readings()
    
    def _probe_sensor(self) -> bool:
        if self.sensor_probe is None:
            return True
        try:
            self._check_sensor()
        except SensorUnavailable as e:
            self.last_error = e
        else:
            return True
        self.status = TrackingStatus.IDLE
        logger.warning("Tracking not started: %s", self.last_error)
        return False
    
    def _check_sensor(self):
        try:
            available = self.sensor_probe()
        except SensorUnavailable:
            raise
        except Exception as e:
            raise SensorUnavailable(str(e)) from e
        
        if not available:
            raise SensorUnavailable("No motion sensor on this device")
    
    def _enter_tracking(self):
        tracker = MotionTracker(
            clock=self.clock,
            alpha=self.alpha,
            velocity_threshold=self.velocity_threshold,
            damping_factor=self.damping_factor
        )
        timer = PeriodicTimer(self.drift_period, tracker.tick, name="drift-correction")
        self._tracker = tracker
        self._timer = timer
        self.status = TrackingStatus.TRACKING
        timer.start()
        logger.info("Tracking started (drift correction every %.0f ms)", self.drift_period * 1000)
