"""Track mobility example with visualization.

This script builds a GrADyS-SIM simulation with a single node driven along a
straight track by TrackMobilityHandler. The node's target is written by
TargetSeekingProtocol, which moves it to a new setpoint periodically.

Telemetry rows are appended to track_telemetry.csv next to this script; plot
them afterwards with plot_telemetry.py.
"""

import logging
import os

# Suppress websockets handshake warnings
logging.getLogger('websockets').setLevel(logging.CRITICAL)

from gradysim.simulator.handler.timer import TimerHandler
from gradysim.simulator.handler.visualization import VisualizationHandler, VisualizationConfiguration
from gradysim.simulator.simulation import SimulationBuilder, SimulationConfiguration
from track_mobility import PositionUpdaterConfiguration, TrackMobilityConfiguration, TrackMobilityHandler

from config_param import (
    CONTROL_PERIOD,
    PU_ACCELERATION,
    PU_DECELERATION,
    PU_MAX_SPEED,
    PU_MIN_DISTANCE,
    SIM_DEBUG,
    SIM_DURATION,
    SIM_REAL_TIME,
    TELEMETRY_CSV_ENV,
    TELEMETRY_CSV_FILENAME,
    TELEMETRY_DECIMATION,
    TELEMETRY_SEND,
    TRACK_AXIS,
    TRACK_CENTER,
    TRACK_HALF_LENGTH,
    VIS_OPEN_BROWSER,
    VIS_UPDATE_RATE,
)
from protocol import TargetSeekingProtocol


# ============================================================
# Updater presets (choose by editing ONE variable)
#
# Profiles: Default, Gentle, Snappy, Custom
# - Default matches the values in config_param.py.
# - Custom uses the explicit values defined below.
# ============================================================

UPDATER_PROFILE: str = "Default"  # Choose updater profile here


CUSTOM_UPDATER_CONFIG = PositionUpdaterConfiguration(
    max_speed=2.0,           # Max speed: 2 track units/s
    acceleration=1.0,        # Max acceleration toward target: 1 unit/s²
    deceleration=3.0,        # Max braking deceleration: 3 units/s²
    min_distance=0.005,      # Arrival distance
)


UPDATER_PRESETS: dict[str, PositionUpdaterConfiguration] = {
    "Default": PositionUpdaterConfiguration(
        max_speed=PU_MAX_SPEED,
        acceleration=PU_ACCELERATION,
        deceleration=PU_DECELERATION,
        min_distance=PU_MIN_DISTANCE,
    ),
    "Gentle": PositionUpdaterConfiguration(
        max_speed=0.8,
        acceleration=0.5,
        deceleration=0.5,
        min_distance=0.002,
    ),
    "Snappy": PositionUpdaterConfiguration(
        max_speed=6.0,
        acceleration=8.0,
        deceleration=10.0,
        min_distance=0.001,
    ),
    "Custom": CUSTOM_UPDATER_CONFIG,
}


def main():
    """Execute the track mobility simulation."""
    builder = SimulationBuilder(
        SimulationConfiguration(
            duration=SIM_DURATION,
            debug=SIM_DEBUG,
            real_time=SIM_REAL_TIME
        )
    )

    # Add the timer handler (drives TargetSeekingProtocol's setpoint changes)
    builder.add_handler(TimerHandler())

    profile = (UPDATER_PROFILE or "").strip()
    updater_config = UPDATER_PRESETS.get(profile)
    if updater_config is None:
        valid = ", ".join(sorted(UPDATER_PRESETS.keys()))
        raise ValueError(f"Unknown UPDATER_PROFILE={UPDATER_PROFILE!r}. Valid options: {valid}")

    print(
        "Updater preset: "
        f"{profile} "
        f"(max_speed={updater_config.max_speed}, acceleration={updater_config.acceleration}, "
        f"deceleration={updater_config.deceleration}, min_distance={updater_config.min_distance})"
    )
    track_handler = TrackMobilityHandler(
        TrackMobilityConfiguration(
            update_rate=CONTROL_PERIOD,
            updater=updater_config,
            track_center=TRACK_CENTER,
            track_axis=TRACK_AXIS,
            track_half_length=TRACK_HALF_LENGTH,
            send_telemetry=TELEMETRY_SEND,
            telemetry_decimation=TELEMETRY_DECIMATION,
        )
    )
    builder.add_handler(track_handler)

    # Add the visualization handler
    vis_config = VisualizationConfiguration(
        open_browser=VIS_OPEN_BROWSER,
        update_rate=VIS_UPDATE_RATE
    )
    builder.add_handler(VisualizationHandler(vis_config))

    # The handler snaps the node onto the track center when it registers.
    builder.add_node(TargetSeekingProtocol, TRACK_CENTER)

    script_dir = os.path.dirname(os.path.abspath(__file__))
    csv_path = os.path.join(script_dir, TELEMETRY_CSV_FILENAME)
    if os.path.exists(csv_path):
        os.remove(csv_path)
    os.environ[TELEMETRY_CSV_ENV] = csv_path

    # Build and start simulation
    simulation = builder.build()
    print("=" * 60)
    print("Starting track mobility simulation")
    print("Node target is written by TargetSeekingProtocol (changes periodically)")
    print(f"Track: center={TRACK_CENTER}, axis={TRACK_AXIS}, half length={TRACK_HALF_LENGTH} m")
    print("Visualization will open in browser automatically")
    print("=" * 60)
    try:
        simulation.start_simulation()
    except (BrokenPipeError, EOFError) as e:
        logging.getLogger(__name__).debug(f"Ignored visualization shutdown error: {e}")
    finally:
        print("=" * 60)
        print("Simulation completed!")
        print(f"Telemetry CSV: {csv_path}")
        print("=" * 60)


if __name__ == "__main__":
    main()
