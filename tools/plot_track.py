#!/usr/bin/env python3
import sys
import pandas as pd
import matplotlib.pyplot as plt

# ------------------------------------------
# Read CSV file
# ------------------------------------------
if len(sys.argv) < 2:
    print("Usage: plot_track.py <track.csv>")
    sys.exit(1)

csvfile = sys.argv[1]

# Columns written by replay_recording.py:
# time_s, lin_ax,lin_ay,lin_az, vx,vy,vz, px,py,pz, gx,gy,gz, alpha,beta,gamma
df = pd.read_csv(csvfile)

required = ["time_s", "px", "py", "vx", "vy", "vz", "lin_ax", "lin_ay", "lin_az"]
missing = [c for c in required if c not in df.columns]
if missing:
    print(f"Not a track file, missing columns: {', '.join(missing)}")
    sys.exit(1)

t = df["time_s"] - df["time_s"].iloc[0]

# ------------------------------------------
# Plot
# ------------------------------------------
fig, (ax_path, ax_vel, ax_acc) = plt.subplots(1, 3, figsize=(15, 5))

ax_path.plot(df["px"], df["py"], 'b-', label="Dead Reckoning", linewidth=2)
ax_path.scatter(df["px"].iloc[0], df["py"].iloc[0], c='green', label="Start", zorder=3)
ax_path.scatter(df["px"].iloc[-1], df["py"].iloc[-1], c='red', label="End", zorder=3)
ax_path.set_xlabel("X (m)")
ax_path.set_ylabel("Y (m)")
ax_path.set_title("Trajectory (XY)")
ax_path.grid(True)
ax_path.axis('equal')
ax_path.legend()

for axis in ("x", "y", "z"):
    ax_vel.plot(t, df[f"v{axis}"], label=f"v{axis}")
    ax_acc.plot(t, df[f"lin_a{axis}"], label=f"a{axis}")

ax_vel.set_xlabel("Time (s)")
ax_vel.set_ylabel("Velocity (m/s)")
ax_vel.set_title("Velocity")
ax_vel.grid(True)
ax_vel.legend()

ax_acc.set_xlabel("Time (s)")
ax_acc.set_ylabel("Linear acceleration (m/s²)")
ax_acc.set_title("Linear Acceleration")
ax_acc.grid(True)
ax_acc.legend()

plt.tight_layout()
plt.show()


#Sample run command: python3 plot_track.py track.csv
