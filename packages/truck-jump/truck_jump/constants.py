"""Fixed game and physics constants. Units are screen pixels and frames."""

# Ground and start position (y grows downward)
GROUND_Y = 400.0
START_X = 50.0

# Physics, applied once per frame
GRAVITY = 0.5
LAUNCH_ANGLE_DEG = 45.0
MIN_SPEED = 5.0
SPEED_RANGE = 15.0

# Power meter
MAX_POWER = 100
POWER_STEP = 2
CHARGE_INTERVAL_MS = 50

# Goal placement
BASE_GOAL_X = 500.0
GOAL_STEP = 50.0
GOAL_Y = 300.0
GOAL_TOLERANCE = 80.0

# Outcome delays
SUCCESS_DELAY_MS = 2000
RETRY_DELAY_MS = 1500

DEFAULT_FPS = 60
