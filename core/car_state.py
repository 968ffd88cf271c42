import threading
from typing import NamedTuple

from loguru import logger

from . import config


class VehicleReading(NamedTuple):
    make: str
    model: str
    current_speed: float
    rpm: float
    fuel: float
    temperature: float


class VehicleState:
    """Physical state of the simulated car.

    Speed only changes through accelerate()/brake() or the guarded
    current_speed setter; rpm, fuel and temperature follow from it.
    """

    def __init__(self, make: str, model: str, max_speed: float = config.CAR_MAX_SPEED):
        if max_speed <= 0:
            raise ValueError(f"max_speed must be positive, got {max_speed}")

        self._make = make
        self._model = model
        self._max_speed = max_speed

        self._current_speed = 0
        self._rpm = 0
        self._fuel = config.FULL_TANK
        self._temperature = config.IDLE_TEMPERATURE

        self._lock = threading.Lock()

    def __repr__(self):
        return (f"VehicleState({self._make!r}, {self._model!r}, "
                f"speed={self._current_speed}/{self._max_speed})")

    # --- identity ---

    @property
    def make(self) -> str:
        return self._make

    @make.setter
    def make(self, value: str):
        self._make = value

    @property
    def model(self) -> str:
        return self._model

    @model.setter
    def model(self, value: str):
        self._model = value

    # --- guarded quantities ---

    @property
    def max_speed(self) -> float:
        return self._max_speed

    @max_speed.setter
    def max_speed(self, value: float):
        with self._lock:
            if value <= 0:
                logger.debug(f"Ignoring non-positive max_speed {value}")
                return
            self._max_speed = value
            if self._current_speed > value:
                self._current_speed = value
                self._update_rpm()

    @property
    def current_speed(self) -> float:
        return self._current_speed

    @current_speed.setter
    def current_speed(self, value: float):
        with self._lock:
            if not 0 <= value <= self._max_speed:
                logger.debug(f"Ignoring current_speed {value} outside [0, {self._max_speed}]")
                return
            self._current_speed = value
            self._update_rpm()

    # --- derived, read-only ---

    @property
    def rpm(self) -> float:
        return self._rpm

    @property
    def fuel(self) -> float:
        return self._fuel

    @property
    def temperature(self) -> float:
        return self._temperature

    # --- controls ---

    def accelerate(self, delta: float = config.DEFAULT_DELTA) -> str:
        with self._lock:
            new_speed = self._current_speed + delta

            if new_speed > self._max_speed:
                self._current_speed = self._max_speed
                self._update_rpm()
                return (f"The {self._make} {self._model} has reached its "
                        f"max speed of {self._max_speed} mph!")

            # negative delta slows the car down but never past standstill
            self._current_speed = max(0, new_speed)
            self._update_rpm()
            self._temperature = min(
                config.MAX_TEMPERATURE,
                config.IDLE_TEMPERATURE + self._current_speed / config.MPH_PER_DEGREE,
            )
            self._fuel = max(0, self._fuel - config.FUEL_PER_ACCELERATION)
            return f"Current speed is {self._current_speed} mph."

    def brake(self, delta: float = config.DEFAULT_DELTA) -> str:
        with self._lock:
            new_speed = self._current_speed - delta
            self._current_speed = min(self._max_speed, max(0, new_speed))
            self._update_rpm()
            self._temperature = max(config.IDLE_TEMPERATURE, self._temperature - 1)
            return f"Current speed is now {self._current_speed} mph."

    def snapshot(self) -> VehicleReading:
        with self._lock:
            return VehicleReading(
                self._make,
                self._model,
                self._current_speed,
                self._rpm,
                self._fuel,
                self._temperature,
            )

    def _update_rpm(self):
        self._rpm = min(config.MAX_RPM, self._current_speed * config.RPM_PER_MPH)
