"""Render HAL assembly failures as HAL error documents."""

import logging
from typing import Any

from fastapi_hal.config import get_settings
from fastapi_hal.core.document import HalRespondable
from fastapi_hal.core.errors import HalError
from fastapi_hal.responses import HalResponse

logger = logging.getLogger(__name__)


class HalErrorMiddleware:
    """Convert ``HalError`` raised by downstream apps into a 500 HAL response.

    Any other exception is left to propagate.
    """

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Run the downstream app and answer with an error document on failure."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except HalError as exc:
            logger.exception(
                "Failed to build HAL response for %s %s",
                scope.get("method", ""),
                scope.get("path", ""),
            )
            response = HalResponse(
                HalRespondable(error_payload(exc)).with_status_code(500)
            )
            await response(scope, receive, send)


def error_payload(exc: HalError) -> dict[str, str]:
    """Return the fields of the error document for ``exc``."""
    if get_settings().error_detail:
        message = str(exc)
    else:
        message = "The resource representation could not be built."
    return {"error": type(exc).__name__, "message": message}
