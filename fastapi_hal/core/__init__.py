"""Core HAL link, header and document helpers."""

from .errors import (
    BuilderFinalizedError,
    HalError,
    InvalidHeaderName,
    InvalidHeaderValue,
    PayloadShapeError,
    ReservedFieldError,
)
from .links import Link, Links, Multiple, Single
from .headers import CacheControl, ETag, Headers, Location, TypedHeader
from .document import HalPayload, HalRespondable
from .resource import IntoHal, build_respondable, into_hal

__all__ = [
    "BuilderFinalizedError",
    "CacheControl",
    "ETag",
    "HalError",
    "HalPayload",
    "HalRespondable",
    "Headers",
    "IntoHal",
    "InvalidHeaderName",
    "InvalidHeaderValue",
    "Link",
    "Links",
    "Location",
    "Multiple",
    "PayloadShapeError",
    "ReservedFieldError",
    "Single",
    "TypedHeader",
    "build_respondable",
    "into_hal",
]
