"""
Replay of recorded sensor streams through the tracker.

A recording is a CSV file with one row per motion event:

    time_s, ax, ay, az[, alpha, beta, gamma]

time_s is a monotonic timestamp in seconds and ax/ay/az the acceleration
including gravity in m/s². The optional orientation columns carry the
orientation reported alongside that event (blank when none was reported).

Drift correction is driven by recording time: a tick fires at every
period boundary after the first sample, before the sample that crosses it
is integrated. This reproduces the fixed cadence of live tracking without
waiting in real time.
"""

import logging
import math
import numpy as np
import pandas as pd
from typing import List, Optional, Tuple

from .errors import RecordingFormatError
from .math.vector import Vector3
from .math.constants import (
    DRIFT_PERIOD_S,
    GRAVITY_FILTER_ALPHA,
    DRIFT_VELOCITY_THRESHOLD,
    DRIFT_DAMPING_FACTOR,
)
from .sensors.samples import MotionSample, OrientationSample
from .tracking.clock import ManualClock
from .tracking.tracker import MotionTracker

logger = logging.getLogger(__name__)

MOTION_COLUMNS = ["time_s", "ax", "ay", "az"]
ORIENTATION_COLUMNS = ["alpha", "beta", "gamma"]
# Gaps needing more drift ticks than this are reported
LARGE_GAP_TICKS = 1000

OUTPUT_COLUMNS = [
    "time_s",
    "lin_ax", "lin_ay", "lin_az",
    "vx", "vy", "vz",
    "px", "py", "pz",
    "gx", "gy", "gz",
    "alpha", "beta", "gamma",
]

Recording = List[Tuple[MotionSample, Optional[OrientationSample]]]

def _optional(value) -> Optional[float]:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return None
    return float(value)

def recording_from_frame(df: pd.DataFrame) -> Recording:
    """Convert a recording DataFrame into sample pairs."""
    missing = [c for c in MOTION_COLUMNS if c not in df.columns]
    if missing:
        raise RecordingFormatError(f"Recording is missing columns: {', '.join(missing)}")
    
    values = df[MOTION_COLUMNS].apply(pd.to_numeric, errors="coerce").to_numpy(dtype=float)
    bad_rows = df.index[~np.isfinite(values).all(axis=1)]
    if len(bad_rows):
        raise RecordingFormatError(
            f"Recording has blank or non-finite time_s/ax/ay/az in rows: "
            f"{', '.join(str(i) for i in bad_rows[:10])}"
        )
    
    has_orientation = all(c in df.columns for c in ORIENTATION_COLUMNS)
    recording = []
    for row in df.itertuples(index=False):
        motion = MotionSample(Vector3(row.ax, row.ay, row.az), float(row.time_s))
        orientation = None
        if has_orientation:
            angles = [_optional(getattr(row, c)) for c in ORIENTATION_COLUMNS]
            if any(a is not None for a in angles):
                orientation = OrientationSample(*angles)
        recording.append((motion, orientation))
    return recording

def load_recording(path: str) -> Recording:
    """Load a recorded CSV file."""
    df = pd.read_csv(path)
    recording = recording_from_frame(df)
    logger.info("Loaded %d samples from %s", len(recording), path)
    return recording

def replay(recording: Recording,
           drift_period: float = DRIFT_PERIOD_S,
           alpha: float = GRAVITY_FILTER_ALPHA,
           velocity_threshold: float = DRIFT_VELOCITY_THRESHOLD,
           damping_factor: float = DRIFT_DAMPING_FACTOR,
           drift_correction: bool = True) -> pd.DataFrame:
    """
    Run a recording through a fresh tracker.
    
    Args:
        recording: (motion, orientation) pairs in recording order
        drift_period: Drift correction period in recording seconds
        alpha: Gravity low-pass filter coefficient
        velocity_threshold: Drift correction zeroing threshold (m/s)
        damping_factor: Drift correction per-tick damping
        drift_correction: Disable to see raw integration drift
        
    Returns:
        DataFrame with one row of readings per motion sample
    """
    clock = ManualClock()
    tracker = MotionTracker(clock, alpha, velocity_threshold, damping_factor)
    
    rows = []
    next_tick = None
    for motion, orientation in recording:
        t = motion.timestamp if motion.timestamp is not None else clock.now()
        if t > clock.now():
            clock.set(t)
        
        if next_tick is None:
            next_tick = t + drift_period
        elif drift_correction and next_tick <= t:
            pending = math.floor((t - next_tick) / drift_period) + 1
            if pending > LARGE_GAP_TICKS:
                logger.warning("Gap of %.1f s in recording, applying %d drift ticks",
                               t - next_tick + drift_period, pending)
            for _ in range(pending):
                tracker.tick()
            next_tick += pending * drift_period
        
        if orientation is not None:
            tracker.handle_orientation(orientation)
        tracker.handle_motion(motion)
        
        readings = tracker.readings()
        angles = readings.orientation or OrientationSample()
        rows.append([
            t,
            *readings.linear_accel,
            *readings.velocity,
            *readings.position,
            *readings.gravity_estimate,
            np.nan if angles.alpha is None else angles.alpha,
            np.nan if angles.beta is None else angles.beta,
            np.nan if angles.gamma is None else angles.gamma,
        ])
    
    stats = tracker.get_statistics()
    if stats['out_of_order_samples']:
        logger.warning("Recording contained %d out-of-order samples", stats['out_of_order_samples'])
    logger.info("Replayed %d samples with %d drift ticks",
                stats['motion_samples'], stats['drift_ticks'])
    
    return pd.DataFrame(rows, columns=OUTPUT_COLUMNS)

def replay_with_config(recording: Recording, config, drift_correction: bool = True) -> pd.DataFrame:
    """Replay using tuning values from a Config."""
    return replay(
        recording,
        drift_period=config.drift_period_s,
        alpha=config.gravity_filter_alpha,
        velocity_threshold=config.velocity_threshold,
        damping_factor=config.damping_factor,
        drift_correction=drift_correction
    )

def samples_to_frame(recording: Recording) -> pd.DataFrame:
    """Convert sample pairs back to the recording CSV layout."""
    rows = []
    for motion, orientation in recording:
        a = motion.acceleration_including_gravity
        angles = orientation or OrientationSample()
        rows.append([
            motion.timestamp, a.x, a.y, a.z,
            np.nan if angles.alpha is None else angles.alpha,
            np.nan if angles.beta is None else angles.beta,
            np.nan if angles.gamma is None else angles.gamma,
        ])
    return pd.DataFrame(rows, columns=MOTION_COLUMNS + ORIENTATION_COLUMNS)
