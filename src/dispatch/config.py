from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Mapping


@dataclass
class CarTimings:
    """Phase durations (simulated seconds) applied to every car."""

    travel_seconds: float = 2.5
    door_dwell_seconds: float = 3.0
    home_floor: int = 1

    def __post_init__(self) -> None:
        for name in ("travel_seconds", "door_dwell_seconds"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")
            if value < 0:
                raise ValueError("Phase durations must be non-negative")
        if isinstance(self.home_floor, bool) or not isinstance(self.home_floor, int):
            raise ValueError(f"home_floor must be an integer, got {self.home_floor!r}")

    @classmethod
    def from_dict(cls, values: Mapping[str, object]) -> "CarTimings":
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown timing keys: {', '.join(sorted(unknown))}")
        return cls(**values)
