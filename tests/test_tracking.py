#!/usr/bin/env python3
"""
Unit tests for gravity removal, integration, drift correction and orientation.
"""

import unittest
import numpy as np
import sys
import os

# Add package to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from inertial_dr.math import Vector3
from inertial_dr.sensors import (
    MotionSample,
    OrientationSample,
    GravityEstimator,
    LinearAccelerationExtractor,
    OrientationReporter,
)
from inertial_dr.tracking import TrackerState, Integrator, DriftCorrector, ManualClock

class TestVector3(unittest.TestCase):
    """Test Vector3 class."""
    
    def test_defaults_to_zero(self):
        v = Vector3()
        self.assertEqual((v.x, v.y, v.z), (0.0, 0.0, 0.0))
        self.assertEqual(Vector3.zero(), v)
    
    def test_array_conversion(self):
        v = Vector3(1, 2, 3)
        self.assertIsInstance(v.x, float)
        np.testing.assert_array_equal(v.as_array, [1.0, 2.0, 3.0])
        self.assertEqual(v.as_array.dtype, np.float64)
        self.assertEqual(Vector3.from_array(np.array([1.0, 2.0, 3.0])), v)
    
    def test_from_array_rejects_wrong_shape(self):
        with self.assertRaises(ValueError):
            Vector3.from_array([1.0, 2.0])
    
    def test_arithmetic(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(0.5, 0.5, 0.5)
        self.assertEqual(a + b, Vector3(1.5, 2.5, 3.5))
        self.assertEqual(a - b, Vector3(0.5, 1.5, 2.5))
        self.assertEqual(a.scale(2.0), Vector3(2.0, 4.0, 6.0))
        self.assertAlmostEqual(Vector3(3.0, 4.0, 0.0).magnitude, 5.0)
        self.assertEqual(list(a), [1.0, 2.0, 3.0])

class TestTrackerState(unittest.TestCase):
    """Test TrackerState class."""
    
    def test_initial_state(self):
        state = TrackerState()
        np.testing.assert_array_equal(state.gravity_estimate, np.zeros(3))
        np.testing.assert_array_equal(state.velocity, np.zeros(3))
        np.testing.assert_array_equal(state.position, np.zeros(3))
        self.assertIsNone(state.last_timestamp)
    
    def test_reset_keeps_arrays(self):
        state = TrackerState()
        gravity = state.gravity_estimate
        state.gravity_estimate[:] = [0.0, 0.0, 9.8]
        state.velocity[:] = [1.0, 2.0, 3.0]
        state.position[:] = [4.0, 5.0, 6.0]
        state.last_timestamp = 12.5
        
        state.reset()
        
        self.assertIs(state.gravity_estimate, gravity)
        np.testing.assert_array_equal(state.gravity_estimate, np.zeros(3))
        np.testing.assert_array_equal(state.velocity, np.zeros(3))
        np.testing.assert_array_equal(state.position, np.zeros(3))
        self.assertIsNone(state.last_timestamp)
    
    def test_copy(self):
        original = TrackerState()
        original.velocity[:] = [3.0, 4.0, 0.0]
        copy = original.copy()
        
        self.assertAlmostEqual(copy.speed, 5.0)
        copy.velocity[0] = 100.0
        self.assertEqual(original.velocity[0], 3.0)

class TestGravityEstimator(unittest.TestCase):
    """Test GravityEstimator class."""
    
    def test_first_update_from_zero(self):
        estimator = GravityEstimator()
        gravity = estimator.update(Vector3(0.0, 0.0, 9.8))
        self.assertAlmostEqual(gravity.z, 0.2 * 9.8)
        self.assertEqual(gravity.x, 0.0)
    
    def test_geometric_convergence(self):
        r = np.array([0.5, -1.2, 9.8])
        estimator = GravityEstimator()
        
        for k in range(1, 41):
            gravity = estimator.update(Vector3.from_array(r))
            np.testing.assert_allclose(gravity.as_array, r * (1 - 0.8**k), rtol=1e-12)
    
    def test_within_one_percent_after_21_updates(self):
        r = 9.80665
        estimator = GravityEstimator()
        
        for _ in range(20):
            estimator.update(Vector3(0.0, 0.0, r))
        self.assertGreater(abs(r - estimator.gravity.z) / r, 0.01)
        
        estimator.update(Vector3(0.0, 0.0, r))
        self.assertLess(abs(r - estimator.gravity.z) / r, 0.01)
    
    def test_mutates_shared_array(self):
        state = TrackerState()
        estimator = GravityEstimator(state.gravity_estimate)
        estimator.update(Vector3(1.0, 2.0, 3.0))
        np.testing.assert_allclose(state.gravity_estimate, [0.2, 0.4, 0.6])
    
    def test_custom_alpha(self):
        estimator = GravityEstimator(alpha=0.5)
        estimator.update(Vector3(0.0, 0.0, 10.0))
        gravity = estimator.update(Vector3(0.0, 0.0, 10.0))
        self.assertAlmostEqual(gravity.z, 7.5)

class TestLinearAccelerationExtractor(unittest.TestCase):
    """Test LinearAccelerationExtractor class."""
    
    def test_extract(self):
        raw = Vector3(1.0, 2.0, 10.0)
        gravity = Vector3(0.5, 0.5, 9.8)
        linear = LinearAccelerationExtractor.extract(raw, gravity)
        np.testing.assert_allclose(linear.as_array, [0.5, 1.5, 0.2])
    
    def test_zero_gravity_passes_raw_through(self):
        raw = Vector3(1.0, -2.0, 9.8)
        self.assertEqual(LinearAccelerationExtractor().extract(raw, Vector3.zero()), raw)

class TestIntegrator(unittest.TestCase):
    """Test Integrator class."""
    
    def setUp(self):
        self.state = TrackerState()
        self.integrator = Integrator()
    
    def test_first_sample_seeds_clock(self):
        result = self.integrator.integrate(self.state, Vector3(5.0, 5.0, 5.0), 3.0)
        
        self.assertIsNone(result)
        self.assertEqual(self.state.last_timestamp, 3.0)
        np.testing.assert_array_equal(self.state.velocity, np.zeros(3))
        np.testing.assert_array_equal(self.state.position, np.zeros(3))
    
    def test_first_sample_at_time_zero_seeds_clock(self):
        self.integrator.integrate(self.state, Vector3(1.0, 0.0, 0.0), 0.0)
        self.assertEqual(self.state.last_timestamp, 0.0)
        
        self.integrator.integrate(self.state, Vector3(1.0, 0.0, 0.0), 0.5)
        self.assertAlmostEqual(self.state.velocity[0], 0.5)
    
    def test_semi_implicit_euler_step(self):
        self.state.last_timestamp = 0.0
        self.state.velocity[:] = [1.0, 0.0, 0.0]
        
        dt = self.integrator.integrate(self.state, Vector3(2.0, 0.0, 0.0), 0.5)
        
        self.assertEqual(dt, 0.5)
        self.assertAlmostEqual(self.state.velocity[0], 2.0)
        # New velocity advances the position: 2.0 * 0.5, not 1.0 * 0.5
        self.assertAlmostEqual(self.state.position[0], 1.0)
        self.assertEqual(self.state.last_timestamp, 0.5)
    
    def test_duplicate_timestamp_is_noop(self):
        self.state.last_timestamp = 1.0
        self.state.velocity[:] = [1.0, 2.0, 3.0]
        self.state.position[:] = [4.0, 5.0, 6.0]
        
        for accel in (Vector3(5.0, 5.0, 5.0), Vector3(-100.0, 0.0, 7.0)):
            dt = self.integrator.integrate(self.state, accel, 1.0)
            self.assertEqual(dt, 0.0)
            np.testing.assert_array_equal(self.state.velocity, [1.0, 2.0, 3.0])
            np.testing.assert_array_equal(self.state.position, [4.0, 5.0, 6.0])
        self.assertEqual(self.integrator.out_of_order_samples, 0)
    
    def test_constant_acceleration_closed_form(self):
        a = np.array([2.0, -1.0, 0.25])
        dt = 0.01
        n = 50
        
        self.integrator.integrate(self.state, Vector3.from_array(a), 0.0)
        for k in range(1, n + 1):
            self.integrator.integrate(self.state, Vector3.from_array(a), k * dt)
        
        np.testing.assert_allclose(self.state.velocity, a * n * dt, rtol=1e-9)
        np.testing.assert_allclose(self.state.position, a * dt**2 * n * (n + 1) / 2, rtol=1e-9)
        self.assertEqual(self.integrator.integration_count, n)
    
    def test_non_uniform_steps(self):
        a = Vector3(1.0, 0.0, 0.0)
        times = [0.0, 0.02, 0.05, 0.06, 0.1]
        for t in times:
            self.integrator.integrate(self.state, a, t)
        
        self.assertAlmostEqual(self.state.velocity[0], 0.1)
        # Sum of v_k * dt_k with v_k the velocity after step k
        expected = 0.02 * 0.02 + 0.05 * 0.03 + 0.06 * 0.01 + 0.1 * 0.04
        self.assertAlmostEqual(self.state.position[0], expected)
    
    def test_out_of_order_sample_is_clamped(self):
        a = Vector3(1.0, 0.0, 0.0)
        self.integrator.integrate(self.state, a, 1.0)
        self.integrator.integrate(self.state, a, 2.0)
        self.assertAlmostEqual(self.state.velocity[0], 1.0)
        self.assertAlmostEqual(self.state.position[0], 1.0)
        
        with self.assertLogs('inertial_dr.tracking.integrator', level='WARNING'):
            dt = self.integrator.integrate(self.state, a, 1.5)
        
        self.assertEqual(dt, 0.0)
        self.assertEqual(self.integrator.out_of_order_samples, 1)
        self.assertAlmostEqual(self.state.velocity[0], 1.0)
        self.assertAlmostEqual(self.state.position[0], 1.0)
        # Clock is not rewound
        self.assertEqual(self.state.last_timestamp, 2.0)
        
        self.integrator.integrate(self.state, a, 2.5)
        self.assertAlmostEqual(self.state.velocity[0], 1.5)
        self.assertAlmostEqual(self.state.position[0], 1.75)
    
    def test_get_statistics(self):
        stats = self.integrator.get_statistics()
        self.assertEqual(stats, {'integrations': 0, 'out_of_order_samples': 0})

class TestDriftCorrector(unittest.TestCase):
    """Test DriftCorrector class."""
    
    def setUp(self):
        self.state = TrackerState()
        self.corrector = DriftCorrector()
    
    def test_below_threshold_is_zeroed(self):
        self.state.velocity[:] = [0.03, -0.03, 0.0]
        self.corrector.tick(self.state)
        self.assertEqual(self.state.velocity[0], 0.0)
        self.assertEqual(self.state.velocity[1], 0.0)
        self.assertEqual(self.state.velocity[2], 0.0)
    
    def test_above_threshold_is_damped(self):
        self.state.velocity[:] = [0.10, -0.10, 2.0]
        self.corrector.tick(self.state)
        self.assertAlmostEqual(self.state.velocity[0], 0.095)
        self.assertAlmostEqual(self.state.velocity[1], -0.095)
        self.assertAlmostEqual(self.state.velocity[2], 1.9)
    
    def test_threshold_is_strict(self):
        self.state.velocity[:] = [0.05, 0.0, 0.0]
        self.corrector.tick(self.state)
        self.assertAlmostEqual(self.state.velocity[0], 0.0475)
    
    def test_axes_are_independent(self):
        self.state.velocity[:] = [0.03, 0.10, -0.04]
        self.corrector.tick(self.state)
        np.testing.assert_allclose(self.state.velocity, [0.0, 0.095, 0.0])
    
    def test_position_and_gravity_untouched(self):
        self.state.position[:] = [1.0, 2.0, 3.0]
        self.state.gravity_estimate[:] = [0.0, 0.0, 9.8]
        self.state.velocity[:] = [1.0, 1.0, 1.0]
        self.corrector.tick(self.state)
        np.testing.assert_array_equal(self.state.position, [1.0, 2.0, 3.0])
        np.testing.assert_array_equal(self.state.gravity_estimate, [0.0, 0.0, 9.8])
    
    def test_repeated_ticks_decay_to_zero(self):
        self.state.velocity[:] = [1.0, 0.0, 0.0]
        ticks = 0
        while self.state.velocity[0] != 0.0:
            self.corrector.tick(self.state)
            ticks += 1
            self.assertLess(ticks, 1000)
        # 1.0 * 0.95^k drops below 0.05 at k = 59, zeroed on the next tick
        self.assertEqual(ticks, 60)
        self.assertEqual(self.corrector.tick_count, 60)

class TestOrientationReporter(unittest.TestCase):
    """Test OrientationReporter class."""
    
    def test_pass_through(self):
        reporter = OrientationReporter()
        samples = [
            OrientationSample(0.0, 0.0, 0.0),
            OrientationSample(360.0, 180.0, 90.0),
            OrientationSample(-0.5, -180.0, -90.0),
            OrientationSample(123.456, 45.0, -12.0),
            OrientationSample(None, None, None),
        ]
        for sample in samples:
            reported = reporter.report(sample)
            self.assertEqual(reported, sample)
            self.assertIs(reported, sample)
        
        self.assertIs(reporter.last_sample, samples[-1])
        self.assertEqual(reporter.sample_count, len(samples))
    
    def test_str(self):
        self.assertEqual(str(OrientationSample(1.0, 2.5, -3.0)), "α: 1.00°, β: 2.50°, γ: -3.00°")
        self.assertIn("n/a", str(OrientationSample()))

class TestManualClock(unittest.TestCase):
    """Test ManualClock class."""
    
    def test_advance_and_set(self):
        clock = ManualClock(1.0)
        self.assertEqual(clock.now(), 1.0)
        self.assertEqual(clock.advance(0.5), 1.5)
        clock.set(10.0)
        self.assertEqual(clock.now(), 10.0)
    
    def test_cannot_go_backwards(self):
        with self.assertRaises(ValueError):
            ManualClock().advance(-0.1)

class TestMotionSample(unittest.TestCase):
    """Test MotionSample class."""
    
    def test_from_components(self):
        sample = MotionSample.from_components(1.0, 2.0, 9.8, timestamp=0.5)
        np.testing.assert_array_equal(sample.acceleration, [1.0, 2.0, 9.8])
        self.assertEqual(sample.timestamp, 0.5)
        self.assertIsNone(MotionSample(Vector3()).timestamp)

if __name__ == '__main__':
    unittest.main()
