"""Request model, car state machine and car factory for LiftDispatch.

The controller lives in :mod:`dispatch.controller` since it depends on
the ``scheduler`` package, which in turn builds on these primitives.
"""

from .car import CAR_EVENTS, Car, CarType, DoorState
from .config import CarTimings
from .errors import ElevatorError, InvalidRequest, NoSuchCar, UnknownCarType
from .factory import CarFactory
from .request import (
    MotionState,
    Request,
    RequestOrigin,
    make_external_request,
    make_internal_request,
)

__all__ = [
    "CAR_EVENTS",
    "Car",
    "CarFactory",
    "CarTimings",
    "CarType",
    "DoorState",
    "ElevatorError",
    "InvalidRequest",
    "MotionState",
    "NoSuchCar",
    "Request",
    "RequestOrigin",
    "UnknownCarType",
    "make_external_request",
    "make_internal_request",
]
