"""Custom exception hierarchy for boundary validation and plan decoding."""

from __future__ import annotations


class SmokeEngineError(Exception):
    """Base exception for all smoke_engine errors."""


class CookInputError(SmokeEngineError):
    """A caller-supplied value is missing or of the wrong kind."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class OutOfRangeError(CookInputError):
    """A numeric value falls outside its accepted range."""

    def __init__(self, field: str, value: float, minimum: float, maximum: float) -> None:
        super().__init__(
            f"{field} must be between {minimum:g} and {maximum:g}, got {value:g}",
            field=field,
            value=value,
        )
        self.minimum = minimum
        self.maximum = maximum


class PlanFormatError(SmokeEngineError):
    """A serialized plan could not be decoded."""
