import threading

import pytest

from core.car_state import VehicleState, VehicleReading


class TestInitialState:
    """A freshly built car is parked with a full tank and a cold engine."""

    def test_defaults(self, car):
        assert car.make == "Tesla"
        assert car.model == "Model S"
        assert car.max_speed == 150
        assert car.current_speed == 0
        assert car.rpm == 0
        assert car.fuel == 100
        assert car.temperature == 70

    @pytest.mark.parametrize("max_speed", [0, -10])
    def test_non_positive_max_speed_rejected(self, max_speed):
        with pytest.raises(ValueError):
            VehicleState("Ford", "Focus", max_speed)


class TestAccelerate:

    def test_first_press(self, car):
        message = car.accelerate(10)
        assert message == "Current speed is 10 mph."
        assert car.current_speed == 10
        assert car.rpm == 500
        assert car.fuel == pytest.approx(99.8)
        assert car.temperature == pytest.approx(72)

    def test_default_delta_is_ten(self, car):
        car.accelerate()
        assert car.current_speed == 10

    def test_clamps_at_max_speed(self, car):
        car.current_speed = 148
        message = car.accelerate(10)
        assert car.current_speed == 150
        assert "reached its max speed of 150 mph!" in message
        assert message == "The Tesla Model S has reached its max speed of 150 mph!"
        assert car.rpm == 7000

    def test_never_exceeds_max_speed(self, car):
        for _ in range(40):
            car.accelerate(7)
            assert 0 <= car.current_speed <= car.max_speed

    def test_temperature_caps_at_95(self, car):
        for _ in range(20):
            car.accelerate(10)
        assert car.temperature == 95

    def test_rpm_caps_at_7000(self):
        car = VehicleState("Bugatti", "Chiron", 260)
        for _ in range(20):
            car.accelerate(10)
        assert car.current_speed == 200
        assert car.rpm == 7000

    def test_fuel_never_below_zero(self, car):
        for _ in range(600):
            car.accelerate(0)
        assert car.fuel == 0

    def test_negative_delta_slows_down(self, car):
        car.current_speed = 50
        message = car.accelerate(-20)
        assert message == "Current speed is 30 mph."
        assert car.rpm == 1500

    def test_negative_delta_stops_at_zero(self, car):
        car.current_speed = 5
        car.accelerate(-20)
        assert car.current_speed == 0


class TestBrake:

    def test_clamps_at_zero(self, car):
        car.current_speed = 5
        message = car.brake(10)
        assert message == "Current speed is now 0 mph."
        assert car.current_speed == 0
        assert car.rpm == 0

    def test_cools_engine_by_one_degree(self, car):
        for _ in range(5):
            car.accelerate(10)
        assert car.temperature == pytest.approx(80)
        car.brake(10)
        assert car.temperature == pytest.approx(79)
        assert car.current_speed == 40

    def test_temperature_never_below_idle(self, car):
        for _ in range(5):
            car.brake(10)
        assert car.temperature == 70

    def test_fuel_unaffected(self, car):
        car.accelerate(30)
        fuel = car.fuel
        car.brake(10)
        car.brake(10)
        assert car.fuel == fuel


class TestInvariants:
    """Properties that hold across any sequence of button presses."""

    def test_mixed_sequence(self, car):
        presses = [car.accelerate, car.accelerate, car.brake] * 30 + [car.brake] * 40
        previous_fuel = car.fuel
        for press in presses:
            press(13)
            assert 0 <= car.current_speed <= car.max_speed
            assert car.rpm == min(7000, car.current_speed * 50)
            assert 70 <= car.temperature <= 95
            assert car.fuel <= previous_fuel
            previous_fuel = car.fuel


class TestAccessors:

    def test_max_speed_ignores_non_positive(self, car):
        car.max_speed = 0
        car.max_speed = -5
        assert car.max_speed == 150

    def test_max_speed_accepts_positive(self, car):
        car.max_speed = 200
        assert car.max_speed == 200

    def test_lowering_max_speed_pulls_current_speed_down(self, car):
        car.current_speed = 120
        car.max_speed = 100
        assert car.current_speed == 100
        assert car.rpm == 5000

    @pytest.mark.parametrize("speed", [-1, 151, 1000])
    def test_current_speed_ignores_out_of_range(self, car, speed):
        car.current_speed = 40
        car.current_speed = speed
        assert car.current_speed == 40

    def test_current_speed_refreshes_rpm(self, car):
        car.current_speed = 60
        assert car.rpm == 3000

    def test_ignored_assignment_is_logged(self, car, log_messages):
        car.current_speed = 999
        assert any(r["level"].name == "DEBUG" and "999" in r["message"] for r in log_messages)

    def test_make_and_model_settable(self, car):
        car.make = "Ford"
        car.model = "Mustang"
        assert car.accelerate(200) == "The Ford Mustang has reached its max speed of 150 mph!"

    def test_derived_values_are_read_only(self, car):
        with pytest.raises(AttributeError):
            car.rpm = 100
        with pytest.raises(AttributeError):
            car.fuel = 100
        with pytest.raises(AttributeError):
            car.temperature = 80


class TestSnapshot:

    def test_snapshot_matches_state(self, car):
        car.accelerate(20)
        reading = car.snapshot()
        assert isinstance(reading, VehicleReading)
        assert reading == ("Tesla", "Model S", 20, 1000, car.fuel, car.temperature)


class TestConcurrentWriters:
    """Setters validate under the lock, so a writer racing on max_speed cannot break the speed bound."""

    class _LoweringLock:
        """Lock that lets another writer lower max_speed just before it is acquired."""

        def __init__(self, car, lower_to):
            self._lock = threading.Lock()
            self._car = car
            self._lower_to = lower_to

        def __enter__(self):
            if self._lower_to is not None:
                self._car._max_speed = self._lower_to
                self._lower_to = None
            return self._lock.__enter__()

        def __exit__(self, *exc_info):
            return self._lock.__exit__(*exc_info)

    def test_current_speed_checked_against_max_speed_set_meanwhile(self, car):
        car._lock = self._LoweringLock(car, lower_to=100)
        car.current_speed = 140
        assert car.max_speed == 100
        assert car.current_speed == 0
        assert car.current_speed <= car.max_speed

    def test_accepted_speed_within_max_speed_set_meanwhile(self, car):
        car._lock = self._LoweringLock(car, lower_to=100)
        car.current_speed = 90
        assert car.current_speed == 90
        assert car.rpm == 4500
