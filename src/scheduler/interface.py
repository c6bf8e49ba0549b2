from __future__ import annotations

from typing import TYPE_CHECKING, List, Protocol

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from dispatch.car import Car


class Scheduler(Protocol):
    """Strategy interface for ordering the stops of a single car."""

    car: "Car"
    visited: List[int]

    def pending(self) -> int:
        """Number of queued stops, synthetic pickups included."""
        ...

    def process_all(self) -> List[int]:
        """
        Drain every queued stop and return the floors visited in order.

        Runs to completion; callers must not enqueue into the same
        scheduler while a run is in progress.
        """
        ...

    def process_emergency(self) -> None:
        """Drop all queued work and park the car with its doors open."""
        ...
