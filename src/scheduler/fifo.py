from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Deque, List

from dispatch.request import Request

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from dispatch.car import Car


class FifoScheduler:
    """Service car scheduling: requests are served strictly in arrival order."""

    def __init__(self, car: "Car") -> None:
        self.car = car
        self.queue: Deque[Request] = deque()
        self.visited: List[int] = []

    def enqueue(self, request: Request) -> None:
        self.queue.append(request)

    def pending(self) -> int:
        return len(self.queue)

    def process_all(self) -> List[int]:
        run: List[int] = []
        while self.queue:
            request = self.queue.popleft()
            self.car.travel_to(request.destination_floor)
            self.car.set_motion(request.direction)
            self.car.cycle_doors()
            run.append(request.destination_floor)
            self.visited.append(request.destination_floor)
        self.car.settle()
        return run

    def process_emergency(self) -> None:
        self.queue.clear()
        self.car.emergency_reset()
