from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import InvalidRequest


class RequestOrigin(str, Enum):
    INTERNAL = "internal"
    EXTERNAL = "external"


class MotionState(str, Enum):
    """Travel direction of a car, also used as the direction of a request."""

    IDLE = "idle"
    GOING_UP = "going_up"
    GOING_DOWN = "going_down"


@dataclass(frozen=True)
class Request:
    """A pickup (External) or dropoff (Internal) call.

    External calls carry the floor the passenger is waiting on; Internal
    calls only know where the rider wants to go, so their direction stays
    idle until a scheduler compares them against the car's floor.
    """

    origin: RequestOrigin
    destination_floor: int
    origin_floor: Optional[int] = None

    def __post_init__(self) -> None:
        _check_floor(self.destination_floor, "destination_floor")
        if self.origin is RequestOrigin.EXTERNAL:
            if self.origin_floor is None:
                raise InvalidRequest("External requests need an origin floor")
            _check_floor(self.origin_floor, "origin_floor")
        elif self.origin_floor is not None:
            raise InvalidRequest("Internal requests cannot carry an origin floor")

    @property
    def is_external(self) -> bool:
        return self.origin is RequestOrigin.EXTERNAL

    @property
    def direction(self) -> MotionState:
        if self.origin_floor is None or self.origin_floor == self.destination_floor:
            return MotionState.IDLE
        if self.origin_floor < self.destination_floor:
            return MotionState.GOING_UP
        return MotionState.GOING_DOWN

    def pickup(self) -> "Request":
        """Return the stop at the caller's floor that precedes the ride."""
        if not self.is_external:
            raise InvalidRequest("Only external requests have a pickup stop")
        return Request(
            origin=RequestOrigin.EXTERNAL,
            destination_floor=self.origin_floor,
            origin_floor=self.origin_floor,
        )

    def to_dict(self) -> dict:
        return {
            "origin": self.origin.value,
            "origin_floor": self.origin_floor,
            "destination_floor": self.destination_floor,
            "direction": self.direction.value,
        }


def make_external_request(origin_floor: int, destination_floor: int) -> Request:
    if origin_floor == destination_floor:
        raise InvalidRequest(
            f"External request from floor {origin_floor} has no direction"
        )
    return Request(
        origin=RequestOrigin.EXTERNAL,
        destination_floor=destination_floor,
        origin_floor=origin_floor,
    )


def make_internal_request(destination_floor: int) -> Request:
    return Request(origin=RequestOrigin.INTERNAL, destination_floor=destination_floor)


def _check_floor(value: object, name: str) -> None:
    # bool is an int subclass but never a floor
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRequest(f"{name} must be an integer, got {value!r}")
