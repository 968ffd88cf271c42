import sys

from PyQt6.QtWidgets import QApplication
from loguru import logger

from core import config
from core.actions import Controls
from core.car_state import VehicleState
from core.log import configure_logging
from core.smoother import DisplaySmoother
from ui.dashboard import Dashboard


def main():
    configure_logging(config.LOG_LEVEL)
    app = QApplication(sys.argv)

    # Shared State
    state = VehicleState(config.CAR_MAKE, config.CAR_MODEL, config.CAR_MAX_SPEED)
    controls = Controls(state, config.DEFAULT_DELTA)
    smoother = DisplaySmoother(state)
    logger.info(f"Starting dashboard for {state.make} {state.model} (max {state.max_speed} mph)")

    # UI
    window = Dashboard(state, controls, smoother)
    window.show()

    exit_code = app.exec()
    logger.info("Dashboard closed")
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
