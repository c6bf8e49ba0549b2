from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Type

from dispatch.car import CarType
from dispatch.errors import UnknownCarType

from .fifo import FifoScheduler
from .interface import Scheduler
from .sweep import SweepScheduler
from .utils import StopQueue

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from dispatch.car import Car

__all__ = [
    "FifoScheduler",
    "Scheduler",
    "StopQueue",
    "SweepScheduler",
    "get_scheduler",
]


SCHEDULER_REGISTRY: Dict[CarType, Type[Scheduler]] = {
    CarType.PASSENGER: SweepScheduler,
    CarType.SERVICE: FifoScheduler,
}


def get_scheduler(car: "Car") -> Scheduler:
    cls = SCHEDULER_REGISTRY.get(car.car_type)
    if cls is None:
        raise UnknownCarType(f"No scheduler registered for car type '{car.car_type}'")
    return cls(car)
