from loguru import logger

from . import config
from .car_state import VehicleState


def accelerate(state: VehicleState, delta: float = config.DEFAULT_DELTA) -> str:
    message = state.accelerate(delta)
    logger.info(f"Accelerate +{delta}: {message}")
    return message


def brake(state: VehicleState, delta: float = config.DEFAULT_DELTA) -> str:
    message = state.brake(delta)
    logger.info(f"Brake -{delta}: {message}")
    return message


class Controls:
    """The dashboard's two buttons, bound to one car."""

    def __init__(self, state: VehicleState, delta: float = config.DEFAULT_DELTA):
        self.state = state
        self.delta = delta
        self._listeners = []

    def on_status_changed(self, callback):
        self._listeners.append(callback)
        return callback

    def accelerate_input(self) -> str:
        return self._notify(accelerate(self.state, self.delta))

    def brake_input(self) -> str:
        return self._notify(brake(self.state, self.delta))

    def _notify(self, message: str) -> str:
        for callback in self._listeners:
            callback(message)
        return message
