"""Exceptions raised while assembling HAL responses."""

from typing import Any


class HalError(Exception):
    """Base class for HAL assembly failures."""


class InvalidHeaderName(HalError, ValueError):
    """Header name is not a valid HTTP token."""

    def __init__(self, name: Any) -> None:
        self.name = name
        super().__init__(f"Invalid header name: {name!r}")


class InvalidHeaderValue(HalError, ValueError):
    """Header value cannot be represented on the wire."""

    def __init__(self, name: str, value: Any, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value for header {name!r}: {reason}")


class BuilderFinalizedError(HalError, RuntimeError):
    """A HAL builder was used after its body was produced."""

    def __init__(self) -> None:
        super().__init__("HAL respondable has already been finalized.")


class ReservedFieldError(HalError):
    """Payload declares a field that clashes with a reserved HAL member."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Payload field {field!r} is reserved by HAL.")


class PayloadShapeError(HalError, TypeError):
    """Payload does not serialize to a JSON object and cannot be flattened."""

    def __init__(self, payload: Any) -> None:
        self.payload_type = type(payload).__name__
        super().__init__(
            f"HAL payload must serialize to a JSON object, got {self.payload_type}."
        )
