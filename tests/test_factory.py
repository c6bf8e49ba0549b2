import pytest

from dispatch import CarFactory, CarTimings, CarType, DoorState, MotionState, UnknownCarType


@pytest.mark.parametrize("tag", [CarType.PASSENGER, CarType.SERVICE, "passenger", "SERVICE"])
def test_create_returns_car_in_initial_state(tag):
    car = CarFactory().create(tag)
    assert car.car_type is CarType.parse(tag)
    assert car.current_floor == 1
    assert car.motion_state is MotionState.IDLE
    assert car.door_state is DoorState.CLOSED
    assert car.emergency_active is False
    assert car.clock == 0


@pytest.mark.parametrize("tag", ["freight", "", 3, None])
def test_unknown_car_type(tag):
    with pytest.raises(UnknownCarType):
        CarFactory().create(tag)


def test_factory_shares_timings_with_cars():
    timings = CarTimings(travel_seconds=1, door_dwell_seconds=1, home_floor=0)
    car = CarFactory(timings=timings).create("passenger")
    assert car.timings is timings
    assert car.current_floor == 0


def test_each_create_returns_a_new_car():
    factory = CarFactory()
    assert factory.create("service") is not factory.create("service")
