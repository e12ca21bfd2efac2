"""Plot track telemetry from track_telemetry.csv.

Creates one figure per node_id with:
- position and target vs timestamp
- velocity and target_velocity vs timestamp
- acceleration vs timestamp

Run:
    python plot_telemetry.py

By default, reads ./track_telemetry.csv (same directory as this script).
"""

from __future__ import annotations

import os

import pandas as pd
import matplotlib.pyplot as plt

from config_param import TELEMETRY_CSV_FILENAME

REQUIRED_COLUMNS = {
    "node_id",
    "timestamp",
    "position",
    "target",
    "velocity",
    "target_velocity",
    "acceleration",
}


def main() -> int:
    script_dir = os.path.dirname(os.path.abspath(__file__))
    csv_path = os.path.join(script_dir, TELEMETRY_CSV_FILENAME)

    if not os.path.exists(csv_path):
        print(f"CSV not found: {csv_path}")
        return 1

    df = pd.read_csv(csv_path)

    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        print(f"Missing columns in CSV: {sorted(missing)}")
        return 1

    if df.empty:
        print("CSV is empty.")
        return 0

    # Optional display ratios (speed / max_speed etc.)
    has_peak = "peak_speed_ratio" in df.columns

    # Ensure numeric types and sort by time.
    df = df.copy()
    df["node_id"] = pd.to_numeric(df["node_id"], errors="coerce").astype("Int64")
    for column in sorted(REQUIRED_COLUMNS - {"node_id"}):
        df[column] = pd.to_numeric(df[column], errors="coerce")
    if has_peak:
        df["peak_speed_ratio"] = pd.to_numeric(df["peak_speed_ratio"], errors="coerce")
    df = df.dropna(subset=sorted(REQUIRED_COLUMNS)).sort_values("timestamp")

    node_ids = sorted(df["node_id"].unique())
    if len(node_ids) == 0:
        print("No valid rows to plot.")
        return 0

    for node_id in node_ids:
        df_node = df[df["node_id"] == node_id].sort_values("timestamp")

        fig, (ax_p, ax_v, ax_a) = plt.subplots(3, 1, sharex=True, figsize=(10, 8))
        fig.suptitle(f"Track telemetry - node_id={int(node_id)}")

        ax_p.plot(df_node["timestamp"], df_node["position"], linewidth=1.2, label="position")
        ax_p.plot(
            df_node["timestamp"],
            df_node["target"],
            linewidth=1.0,
            linestyle="--",
            drawstyle="steps-post",
            label="target",
        )
        ax_p.set_ylabel("position (track)")
        ax_p.set_ylim(-1.1, 1.1)
        ax_p.grid(True, alpha=0.3)
        ax_p.legend(loc="best")

        ax_v.plot(df_node["timestamp"], df_node["velocity"], linewidth=1.2, label="velocity")
        ax_v.plot(
            df_node["timestamp"],
            df_node["target_velocity"],
            linewidth=1.0,
            linestyle="--",
            label="target_velocity",
        )
        ax_v.axhline(0.0, color="k", linewidth=0.8, alpha=0.4)
        ax_v.set_ylabel("velocity (units/s)")
        ax_v.grid(True, alpha=0.3)
        ax_v.legend(loc="best")
        if has_peak:
            peak = df_node["peak_speed_ratio"].max()
            ax_v.set_title(f"peak speed / max_speed = {peak:.2f}", fontsize=9, loc="right")

        ax_a.plot(df_node["timestamp"], df_node["acceleration"], linewidth=1.0)
        ax_a.axhline(0.0, color="k", linewidth=0.8, alpha=0.4)
        ax_a.set_ylabel("acceleration (units/s²)")
        ax_a.set_xlabel("timestamp (s)")
        ax_a.grid(True, alpha=0.3)

        fig.tight_layout()

    plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
