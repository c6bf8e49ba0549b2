from __future__ import annotations

from typing import Callable, Optional

from .car import Car, CarType
from .config import CarTimings


class CarFactory:
    """Builds cars parked on the home floor, idle, with doors closed."""

    def __init__(
        self,
        timings: Optional[CarTimings] = None,
        delay: Optional[Callable[[float], None]] = None,
    ) -> None:
        self.timings = timings or CarTimings()
        self.delay = delay

    def create(self, car_type: CarType | str) -> Car:
        return Car(CarType.parse(car_type), timings=self.timings, delay=self.delay)
