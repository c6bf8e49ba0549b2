from __future__ import annotations


class ElevatorError(Exception):
    """Base class for dispatch failures."""


class InvalidRequest(ElevatorError, ValueError):
    """Raised for malformed pickup or dropoff requests."""


class UnknownCarType(ElevatorError, ValueError):
    """Raised when a car type tag is not recognised."""


class NoSuchCar(ElevatorError, LookupError):
    """Raised when routing to a car the controller does not own."""
