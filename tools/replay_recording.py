#!/usr/bin/env python3
"""
Replay a recorded motion CSV through the tracker and save the readings.

Input columns:  time_s, ax, ay, az[, alpha, beta, gamma]
Output columns: time_s, lin_a*, v*, p*, g*, alpha, beta, gamma
"""

import argparse
import logging
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from inertial_dr.config import Config, configure_logging
from inertial_dr.errors import RecordingFormatError
from inertial_dr.replay import load_recording, replay_with_config

logger = logging.getLogger("replay_recording")

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Replay a motion recording through the dead reckoning tracker")
    parser.add_argument("recording", help="Recorded samples CSV")
    parser.add_argument("-o", "--output", default="track.csv", help="Output CSV (default: track.csv)")
    parser.add_argument("-c", "--config", default=None, help="JSON configuration file")
    parser.add_argument("--no-drift-correction", action="store_true",
                        help="Integrate without periodic drift correction")
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    config = Config(args.config)
    configure_logging(config)
    
    try:
        recording = load_recording(args.recording)
    except (OSError, RecordingFormatError) as e:
        logger.error("Cannot read %s: %s", args.recording, e)
        return 1
    
    if not recording:
        logger.error("Recording %s has no samples", args.recording)
        return 1
    
    track = replay_with_config(recording, config, drift_correction=not args.no_drift_correction)
    track.to_csv(args.output, index=False)
    
    final = track.iloc[-1]
    print(f"Replayed {len(track)} samples over {final.time_s - track.iloc[0].time_s:.2f}s")
    print(f"Final position: [{final.px:.2f}, {final.py:.2f}, {final.pz:.2f}] m")
    print(f"Final velocity: [{final.vx:.2f}, {final.vy:.2f}, {final.vz:.2f}] m/s")
    print(f"Saved {args.output}")
    return 0

if __name__ == "__main__":
    sys.exit(main())

#Sample run command: python3 replay_recording.py recording.csv -o track.csv
