"""
Physical constants and default tuning parameters for dead reckoning.
"""

# Earth parameters
GRAVITY_MS2 = 9.80665       # Standard gravity in m/s²

# Gravity low-pass filter
GRAVITY_FILTER_ALPHA = 0.8  # Weight of the previous estimate

# Drift correction
DRIFT_PERIOD_S = 0.1              # Tick period in seconds (100 ms)
DRIFT_VELOCITY_THRESHOLD = 0.05   # Below this a velocity axis is zeroed (m/s)
DRIFT_DAMPING_FACTOR = 0.95       # Per-tick velocity decay
