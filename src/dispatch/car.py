from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional

from .config import CarTimings
from .errors import UnknownCarType
from .request import MotionState

logger = logging.getLogger(__name__)

CAR_EVENTS = (
    "travel",
    "arrived",
    "door_open",
    "dwell",
    "door_close",
    "skip",
    "reverse",
    "idle",
    "emergency",
)


class CarType(str, Enum):
    PASSENGER = "passenger"
    SERVICE = "service"

    @classmethod
    def parse(cls, tag: "CarType | str") -> "CarType":
        if isinstance(tag, cls):
            return tag
        if isinstance(tag, str):
            try:
                return cls(tag.lower())
            except ValueError:
                pass
        raise UnknownCarType(
            f"Unknown car type {tag!r}. Available: {', '.join(t.value for t in cls)}"
        )


class DoorState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class Car:
    """State machine for one elevator car.

    The car only knows how to move to a floor and cycle its doors; the
    order of stops is decided by the scheduler that owns it. Phase
    durations advance a simulated clock and are optionally handed to a
    ``delay`` callable for real pacing.
    """

    def __init__(
        self,
        car_type: CarType,
        timings: Optional[CarTimings] = None,
        delay: Optional[Callable[[float], None]] = None,
    ) -> None:
        self._car_type = car_type
        self.timings = timings or CarTimings()
        self._delay = delay
        self._current_floor = self.timings.home_floor
        self._motion_state = MotionState.IDLE
        self._door_state = DoorState.CLOSED
        self._emergency_active = False
        self._clock = 0.0
        self.event_hooks: Dict[str, List[Callable[[dict], None]]] = {}

    @property
    def car_type(self) -> CarType:
        return self._car_type

    @property
    def current_floor(self) -> int:
        return self._current_floor

    @property
    def motion_state(self) -> MotionState:
        return self._motion_state

    @property
    def door_state(self) -> DoorState:
        return self._door_state

    @property
    def emergency_active(self) -> bool:
        return self._emergency_active

    @property
    def clock(self) -> float:
        return self._clock

    def on_event(self, event: str, callback: Callable[[dict], None]) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    def set_motion(self, state: MotionState) -> None:
        self._motion_state = state

    def travel_to(self, floor: int) -> None:
        """Movement phase: the floor only changes once travel has elapsed."""
        logger.info("%s car at floor %s, next stop %s", self._car_type.value, self._current_floor, floor)
        self.emit("travel", {"from": self._current_floor, "to": floor})
        self._wait(self.timings.travel_seconds)
        self._current_floor = floor
        logger.info("%s car arrived at %s", self._car_type.value, floor)
        self.emit("arrived")

    def cycle_doors(self) -> None:
        self.open_doors()
        self.emit("dwell", {"seconds": self.timings.door_dwell_seconds})
        self._wait(self.timings.door_dwell_seconds)
        self.close_doors()

    def open_doors(self) -> None:
        self._door_state = DoorState.OPEN
        logger.info("Doors are open on floor %s", self._current_floor)
        self.emit("door_open")

    def close_doors(self) -> None:
        self._door_state = DoorState.CLOSED
        logger.info("Doors are closed")
        self.emit("door_close")

    def skip_stop(self) -> None:
        logger.info("Currently on floor %s, no movement needed", self._current_floor)
        self.emit("skip")

    def settle(self) -> None:
        self._motion_state = MotionState.IDLE
        logger.info("All requests fulfilled, %s car is idle", self._car_type.value)
        self.emit("idle")

    def emergency_reset(self) -> None:
        self._current_floor = self.timings.home_floor
        self._motion_state = MotionState.IDLE
        self.open_doors()
        self._emergency_active = True
        logger.warning(
            "Emergency on %s car: queues cleared, parked at floor %s with doors open",
            self._car_type.value,
            self._current_floor,
        )
        self.emit("emergency")

    def snapshot(self) -> dict:
        return {
            "type": self._car_type.value,
            "floor": self._current_floor,
            "motion_state": self._motion_state.value,
            "door_state": self._door_state.value,
            "emergency_active": self._emergency_active,
            "clock": self._clock,
        }

    def _wait(self, seconds: float) -> None:
        self._clock += seconds
        if self._delay is not None and seconds > 0:
            self._delay(seconds)

    def emit(self, event: str, payload: Optional[dict] = None) -> None:
        message = {
            "car": self._car_type.value,
            "floor": self._current_floor,
            "clock": self._clock,
        }
        if payload:
            message.update(payload)
        for callback in self.event_hooks.get(event, []):
            callback(message)
