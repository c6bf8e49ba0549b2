from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from scheduler import FifoScheduler, Scheduler, SweepScheduler, get_scheduler

from .car import Car, CarType
from .errors import InvalidRequest, NoSuchCar
from .factory import CarFactory
from .request import MotionState, Request

logger = logging.getLogger(__name__)


class DispatchController:
    """Single entry point owning one passenger car and one service car.

    Enqueueing and batch runs are expected to be serialized by the caller;
    nothing here is safe to interleave with a run in progress.
    """

    def __init__(self, factory: Optional[CarFactory] = None) -> None:
        self.factory = factory or CarFactory()
        self._schedulers: Dict[CarType, Scheduler] = {}
        for car_type in (CarType.PASSENGER, CarType.SERVICE):
            self._schedulers[car_type] = get_scheduler(self.factory.create(car_type))

    @property
    def passenger(self) -> SweepScheduler:
        return self._schedulers[CarType.PASSENGER]

    @property
    def service(self) -> FifoScheduler:
        return self._schedulers[CarType.SERVICE]

    @property
    def passenger_car(self) -> Car:
        return self.passenger.car

    @property
    def service_car(self) -> Car:
        return self.service.car

    def scheduler_for(self, car_type: CarType | str) -> Scheduler:
        try:
            key = CarType.parse(car_type)
        except ValueError as exc:
            raise NoSuchCar(str(exc)) from exc
        scheduler = self._schedulers.get(key)
        if scheduler is None:
            raise NoSuchCar(f"Controller has no {key.value} car")
        return scheduler

    def car(self, car_type: CarType | str) -> Car:
        return self.scheduler_for(car_type).car

    def route(
        self,
        car_type: CarType | str,
        request: Request,
        direction: Optional[MotionState] = None,
    ) -> None:
        """Send a request to the named car.

        The passenger car needs an explicit ``direction`` (or an external
        request whose own direction is known) to pick a queue.
        """
        scheduler = self.scheduler_for(car_type)
        if isinstance(scheduler, SweepScheduler):
            direction = direction or request.direction
            if direction is MotionState.GOING_UP:
                scheduler.enqueue_up(request)
            elif direction is MotionState.GOING_DOWN:
                scheduler.enqueue_down(request)
            else:
                raise InvalidRequest("Passenger requests need an up or down direction")
        else:
            scheduler.enqueue(request)
        logger.debug("Routed %s to %s car", request, scheduler.car.car_type.value)

    def route_up(self, request: Request) -> None:
        self.passenger.enqueue_up(request)

    def route_down(self, request: Request) -> None:
        self.passenger.enqueue_down(request)

    def route_service(self, request: Request) -> None:
        self.service.enqueue(request)

    def run_passenger_batch(self) -> List[int]:
        return self.passenger.process_all()

    def run_service_batch(self) -> List[int]:
        return self.service.process_all()

    def trigger_emergency(self) -> None:
        for scheduler in self._schedulers.values():
            scheduler.process_emergency()

    def on_event(self, event: str, callback: Callable[[dict], None]) -> None:
        for scheduler in self._schedulers.values():
            scheduler.car.on_event(event, callback)

    def snapshot(self) -> dict:
        return {
            car_type.value: {**scheduler.car.snapshot(), "pending": scheduler.pending()}
            for car_type, scheduler in self._schedulers.items()
        }
