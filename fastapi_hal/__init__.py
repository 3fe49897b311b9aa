"""HAL (Hypertext Application Language) responses for FastAPI."""

from .core import (
    HalError,
    HalPayload,
    HalRespondable,
    Headers,
    IntoHal,
    Link,
    Links,
    Multiple,
    Single,
    build_respondable,
    into_hal,
)
from .middleware import HalErrorMiddleware
from .responses import HalResponse, Respondable
from .routers import HalRouter

__all__ = [
    "HalError",
    "HalErrorMiddleware",
    "HalPayload",
    "HalRespondable",
    "HalResponse",
    "HalRouter",
    "Headers",
    "IntoHal",
    "Link",
    "Links",
    "Multiple",
    "Respondable",
    "Single",
    "build_respondable",
    "into_hal",
]
