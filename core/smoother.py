from enum import Enum

from loguru import logger

from . import config
from .car_state import VehicleState


class SmootherPhase(Enum):
    CONVERGING = "converging"
    SETTLED = "settled"


class DisplaySmoother:
    """Eases the speed shown on the dashboard toward the car's real speed.

    Called once per timer tick. While the shown value lags the real one by
    more than ``threshold`` every tick moves it at most ``step`` closer and
    notifies the on_tick listeners; once it has caught up the smoother goes
    quiet until the car's speed changes again.
    """

    def __init__(self, state: VehicleState, step: float = config.SMOOTHING_STEP,
                 threshold: float = config.SMOOTHING_THRESHOLD):
        self.state = state
        self.step = step
        self.threshold = threshold
        self.target_speed = state.current_speed
        self.displayed_speed = state.current_speed
        self.phase = SmootherPhase.SETTLED
        self._listeners = []

    def on_tick(self, callback):
        """Register callback(displayed_speed, rpm, fuel, temperature)."""
        self._listeners.append(callback)
        return callback

    def tick(self) -> bool:
        reading = self.state.snapshot()
        self.target_speed = reading.current_speed

        # settled: displayed_speed only moves on ticks that render
        difference = self.target_speed - self.displayed_speed
        if abs(difference) <= self.threshold:
            self._set_phase(SmootherPhase.SETTLED)
            return False

        if difference > 0:
            self.displayed_speed += min(self.step, difference)
        else:
            self.displayed_speed -= min(self.step, -difference)

        self._set_phase(SmootherPhase.CONVERGING)
        for callback in self._listeners:
            callback(self.displayed_speed, reading.rpm, reading.fuel, reading.temperature)
        return True

    def _set_phase(self, phase: SmootherPhase):
        if phase is not self.phase:
            logger.debug(f"Display smoother {self.phase.value} -> {phase.value} "
                         f"(shown {self.displayed_speed:.1f}, target {self.target_speed})")
            self.phase = phase
