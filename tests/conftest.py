from __future__ import annotations

from typing import Callable, List

import pytest

from dispatch import CAR_EVENTS, CarFactory, CarTimings, CarType
from dispatch.controller import DispatchController


@pytest.fixture
def factory() -> CarFactory:
    return CarFactory(timings=CarTimings(travel_seconds=2.5, door_dwell_seconds=3.0))


@pytest.fixture
def controller(factory: CarFactory) -> DispatchController:
    return DispatchController(factory)


@pytest.fixture
def passenger_car(factory: CarFactory):
    return factory.create(CarType.PASSENGER)


@pytest.fixture
def service_car(factory: CarFactory):
    return factory.create(CarType.SERVICE)


@pytest.fixture
def record_events() -> Callable:
    """Attach to every phase of a car (or controller) and log state per event."""

    def attach(target, car=None) -> List[dict]:
        log: List[dict] = []

        def hook(name: str):
            def callback(payload: dict) -> None:
                entry = {"event": name, **payload}
                if car is not None:
                    entry["door_state"] = car.door_state
                    entry["current_floor"] = car.current_floor
                log.append(entry)

            return callback

        for name in CAR_EVENTS:
            target.on_event(name, hook(name))
        return log

    return attach
