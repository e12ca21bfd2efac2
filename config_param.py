"""Centralized parameter/config constants for the project.

This module is intended to be the single source of truth for shared
configuration parameters used by the simulation entry point and protocol.
"""

# --------------------------------------------------------------------------------------
# 1) Simulation framework (timing + simulator timers)
# --------------------------------------------------------------------------------------

# Base control loop period (seconds). Also the dt handed to every PositionUpdater.
CONTROL_PERIOD: float = 0.01

# Simulation defaults (used by main simulation entrypoints)
SIM_DURATION: float = 40            # Simulation duration (seconds)
SIM_REAL_TIME: bool = True          # Run in real time
SIM_DEBUG: bool = False             # Enable simulator debug mode

# --------------------------------------------------------------------------------------
# 2) Visualization (UI)
# --------------------------------------------------------------------------------------

VIS_OPEN_BROWSER: bool = True       # Open the visualization in a browser
VIS_UPDATE_RATE: float = 0.1        # Visualization update period (seconds)

# --------------------------------------------------------------------------------------
# 3) Position updater (normalized track units: the track spans [-1, 1])
# --------------------------------------------------------------------------------------

PU_MAX_SPEED: float = 4.0           # Max speed: 4 track units/s
PU_ACCELERATION: float = 2.0        # Max acceleration toward the target: 2 units/s²
PU_DECELERATION: float = 2.0        # Max braking / reversing deceleration: 2 units/s²
PU_MIN_DISTANCE: float = 0.001      # Arrival distance (units)

# --------------------------------------------------------------------------------------
# 4) Track geometry (world coordinates, meters)
# --------------------------------------------------------------------------------------

TRACK_CENTER: tuple = (0.0, 0.0, 10.0)
TRACK_AXIS: tuple = (1.0, 0.0, 0.0)
TRACK_HALF_LENGTH: float = 50.0

TELEMETRY_SEND: bool = True         # Enable telemetry
TELEMETRY_DECIMATION: int = 5       # Send telemetry every N updates

# --------------------------------------------------------------------------------------
# 5) Target actor
# --------------------------------------------------------------------------------------

# The protocol walks through these normalized targets, one every TARGET_CHANGE_PERIOD
# seconds, and then holds the last one. Values outside [-1, 1] are clamped.
TARGET_CHANGE_TIMER_STR: str = "target_change_timer"
TARGET_CHANGE_PERIOD: float = 5.0
TARGET_SETPOINTS: tuple = (1.0, -0.5, 0.25, -1.5, 0.0)

# Telemetry CSV. main.py exports the absolute path through this environment variable.
TELEMETRY_CSV_ENV: str = "TRACK_LOG_CSV_PATH"
TELEMETRY_CSV_FILENAME: str = "track_telemetry.csv"
