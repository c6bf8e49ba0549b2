from __future__ import annotations

import heapq
import itertools
from typing import List, Tuple

from dispatch.request import Request


class StopQueue:
    """Priority queue of requests ordered by destination floor.

    ``descending`` flips the order for downward sweeps. Requests with the
    same destination leave in the order they were pushed.
    """

    def __init__(self, descending: bool = False) -> None:
        self.descending = descending
        self._heap: List[Tuple[int, int, Request]] = []
        self._counter = itertools.count()

    def push(self, request: Request) -> None:
        key = -request.destination_floor if self.descending else request.destination_floor
        heapq.heappush(self._heap, (key, next(self._counter), request))

    def pop(self) -> Request:
        return heapq.heappop(self._heap)[2]

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
