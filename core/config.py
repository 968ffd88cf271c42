import os


def _getenv_number(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    try:
        number = float(value)
    except ValueError:
        return default
    return int(number) if number.is_integer() else number


# Car shown on the dashboard
CAR_MAKE = os.getenv("CAR_MAKE", "Tesla")
CAR_MODEL = os.getenv("CAR_MODEL", "Model S")
CAR_MAX_SPEED = _getenv_number("CAR_MAX_SPEED", 150)   # mph

# Controls
DEFAULT_DELTA = _getenv_number("CAR_SPEED_DELTA", 10)  # mph per button press

# Display refresh
TICK_INTERVAL_MS = int(_getenv_number("DASHBOARD_TICK_MS", 50))
SMOOTHING_STEP = 2
SMOOTHING_THRESHOLD = 0.1

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Physics
MAX_RPM = 7000
RPM_PER_MPH = 50
IDLE_TEMPERATURE = 70
MAX_TEMPERATURE = 95
MPH_PER_DEGREE = 5
FULL_TANK = 100
FUEL_PER_ACCELERATION = 0.2
