"""
simulator.py

Synthetic accelerometer streams for exercising the tracker without a device.
Ground-truth linear acceleration is turned into "acceleration including
gravity" readings by adding a fixed gravity vector in the sensor frame, a
constant bias and white noise. Sample intervals are jittered around the
nominal rate because real motion events do not arrive on a uniform clock.

Classes:
AccelerometerSimulator:
    Produces MotionSample lists from a linear acceleration profile.
"""

from __future__ import annotations

import numpy as np
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..math.constants import GRAVITY_MS2
from ..math.vector import Vector3
from .samples import MotionSample

AccelerationProfile = Callable[[float], np.ndarray]

def stationary(t: float) -> np.ndarray:
    """Profile of a device at rest."""
    return np.zeros(3)

@dataclass
class AccelerometerSimulator:
    """Simulate accelerometer readings from ground-truth linear acceleration.
    
    Parameters:
        gravity (np.ndarray): Gravity as seen in the sensor frame (3,). Defaults
            to a device lying flat, screen up.
        accel_bias (np.ndarray): Constant accelerometer bias (3,).
        accel_noise_std (float): Standard deviation of white noise (m/s^2).
        rate_hz (float): Nominal sample rate in Hz.
        jitter (float): Fraction of the nominal interval by which each interval
            may vary, uniformly distributed. 0 gives a uniform clock.
        random_state (Optional[np.random.Generator]): Random number generator for
            reproducibility. If None, a new default generator is created.
    """
    gravity: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, GRAVITY_MS2]))
    accel_bias: np.ndarray = field(default_factory=lambda: np.zeros(3))
    accel_noise_std: float = 0.02 # m/s^2
    rate_hz: float = 60.0 # Hz
    jitter: float = 0.2
    random_state: Optional[np.random.Generator] = field(default=None)

    def __post_init__(self):
        self.gravity = np.asarray(self.gravity, dtype=float)
        self.accel_bias = np.asarray(self.accel_bias, dtype=float)
        if self.rate_hz <= 0:
            raise ValueError("rate_hz must be positive")
        if not 0 <= self.jitter < 1:
            raise ValueError("jitter must be in [0, 1)")
        if self.random_state is None:
            self.rng = np.random.default_rng()
        else:
            self.rng = self.random_state

    def timestamps(self, duration: float, start: float = 0.0) -> np.ndarray:
        """ Generate non-uniform sample instants covering [start, start + duration].
        """
        nominal = 1.0 / self.rate_hz
        count = int(np.ceil(duration * self.rate_hz)) + 1
        intervals = nominal * (1 + self.rng.uniform(-self.jitter, self.jitter, size=count - 1))
        times = start + np.concatenate(([0.0], np.cumsum(intervals)))
        # Tolerance for rounding in the cumulative sum
        return times[times <= start + duration + 1e-9]

    def measure(self, linear_accel: np.ndarray) -> np.ndarray:
        """ Generate one accelerometer reading including gravity.

        Args:
            linear_accel (np.ndarray): True linear acceleration in sensor frame (3,).

        Returns:
            np.ndarray: Simulated reading (3,).
        """
        linear_accel = np.asarray(linear_accel, dtype=float)
        noise = self.rng.normal(scale=self.accel_noise_std, size=3) if self.accel_noise_std > 0 else 0.0
        return linear_accel + self.gravity + self.accel_bias + noise

    def generate(self, profile: AccelerationProfile, duration: float,
                 start: float = 0.0) -> List[MotionSample]:
        """ Generate a full sample stream for a linear acceleration profile.

        Args:
            profile: Function of time (s) returning linear acceleration (3,).
            duration: Stream length in seconds.
            start: Timestamp of the first sample.

        Returns:
            List of MotionSample in timestamp order.
        """
        samples = []
        for t in self.timestamps(duration, start):
            reading = self.measure(profile(t - start))
            samples.append(MotionSample(Vector3.from_array(reading), float(t)))
        return samples
