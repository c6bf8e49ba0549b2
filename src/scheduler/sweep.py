from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from dispatch.request import MotionState, Request

from .utils import StopQueue

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from dispatch.car import Car

logger = logging.getLogger(__name__)


class SweepScheduler:
    """Passenger car scheduling: finish one direction, then reverse.

    Up stops are served in ascending destination order and down stops in
    descending order. A request stays in the queue it was routed to even
    if the car has since moved past it.
    """

    def __init__(self, car: "Car") -> None:
        self.car = car
        self.up_queue = StopQueue()
        self.down_queue = StopQueue(descending=True)
        self.visited: List[int] = []

    def enqueue_up(self, request: Request) -> None:
        self._enqueue(self.up_queue, request)

    def enqueue_down(self, request: Request) -> None:
        self._enqueue(self.down_queue, request)

    def pending(self) -> int:
        return len(self.up_queue) + len(self.down_queue)

    def process_all(self) -> List[int]:
        run: List[int] = []
        while self.up_queue or self.down_queue:
            if self.car.motion_state in (MotionState.GOING_UP, MotionState.IDLE):
                first, second = self.up_queue, self.down_queue
            else:
                first, second = self.down_queue, self.up_queue
            run.extend(self._drain(first))
            if second:
                self.car.emit("reverse", {"towards": "down" if second.descending else "up"})
                run.extend(self._drain(second))
        self.car.settle()
        return run

    def process_emergency(self) -> None:
        self.up_queue.clear()
        self.down_queue.clear()
        self.car.emergency_reset()

    def _enqueue(self, queue: StopQueue, request: Request) -> None:
        if request.is_external:
            queue.push(request.pickup())
        queue.push(request)

    def _drain(self, queue: StopQueue) -> List[int]:
        stops: List[int] = []
        while queue:
            request = queue.pop()
            floor = request.destination_floor
            if floor == self.car.current_floor:
                self.car.skip_stop()
                continue
            self.car.travel_to(floor)
            self.car.cycle_doors()
            stops.append(floor)
            self.visited.append(floor)
        logger.debug(
            "Finished %s sweep for %s car",
            "down" if queue.descending else "up",
            self.car.car_type.value,
        )
        return stops
