#!/usr/bin/env python3
"""
Basic usage example of the inertial dead reckoning tracker.

This example feeds a simulated accelerometer stream through a live
TrackingSession (drift correction running on its own 100 ms timer) and
then replays the same stream offline on recording time.
"""

import sys
import os
import time
import numpy as np

# Add package to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from inertial_dr.config import Config, configure_logging
from inertial_dr.sensors import OrientationSample
from inertial_dr.sensors.simulator import AccelerometerSimulator
from inertial_dr.tracking import TrackingSession, TrackerReadings
from inertial_dr.replay import replay_with_config

def push_and_stop(t):
    """
    Linear acceleration profile: push along x for one second, brake for one
    second, then rest.
    
    Args:
        t: Time since start in seconds
        
    Returns:
        Linear acceleration (3,)
    """
    if t < 1.0:
        return np.array([1.0, 0.0, 0.0])
    if t < 2.0:
        return np.array([-1.0, 0.0, 0.0])
    return np.zeros(3)

def main():
    """Main example function."""
    print("Inertial Dead Reckoning - Basic Usage Example")
    print("=" * 50)
    
    config = Config()
    configure_logging(config)
    
    simulator = AccelerometerSimulator(rate_hz=60.0, random_state=np.random.default_rng(42))
    samples = simulator.generate(push_and_stop, duration=4.0)
    
    session = TrackingSession.from_config(config)
    if not session.start():
        print(f"Failed to start tracking: {session.status_message}")
        return 1
    
    print(f"Status: {session.status_message}")
    print(f"Streaming {len(samples)} samples in real time...")
    print()
    
    # Live samples are stamped by the session clock on arrival
    start = time.monotonic()
    last_print_time = 0.0
    print_interval = 1.0
    
    for sample in samples:
        delay = sample.timestamp - (time.monotonic() - start)
        if delay > 0:
            time.sleep(delay)
        sample.timestamp = None
        session.handle_motion(sample)
        session.handle_orientation(OrientationSample(alpha=0.0, beta=0.0, gamma=0.0))
        
        elapsed = time.monotonic() - start
        if elapsed - last_print_time >= print_interval:
            print_status(session.readings(), elapsed)
            last_print_time = elapsed
    
    print_status(session.readings(), time.monotonic() - start)
    stats = session.tracker.get_statistics()
    session.stop()
    
    print("=== Live Statistics ===")
    print(f"Motion samples: {stats['motion_samples']}")
    print(f"Drift ticks: {stats['drift_ticks']}")
    print(f"Out-of-order samples: {stats['out_of_order_samples']}")
    print()
    
    # Offline replay of the same stream on recording time
    replay_samples = simulator.generate(push_and_stop, duration=4.0)
    track = replay_with_config([(s, None) for s in replay_samples], config)
    final = track.iloc[-1]
    print("=== Offline Replay ===")
    print(f"Final position: [{final.px:.2f}, {final.py:.2f}, {final.pz:.2f}] m")
    print(f"Final velocity: [{final.vx:.2f}, {final.vy:.2f}, {final.vz:.2f}] m/s")
    return 0

def print_status(readings: TrackerReadings, elapsed: float):
    """Print current tracker readings."""
    print(f"Time: {elapsed:.1f}s")
    print(f"  Linear accel: {readings.linear_accel} m/s²")
    print(f"  Velocity:     {readings.velocity} m/s")
    print(f"  Position:     {readings.position} m")
    print(f"  Gravity:      {readings.gravity_estimate} m/s²")
    print(f"  Orientation:  {readings.orientation}")
    print()

if __name__ == "__main__":
    sys.exit(main())
