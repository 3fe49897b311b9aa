"""Starlette response rendering for HAL respondables."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Protocol

from pydantic import BaseModel
from starlette.background import BackgroundTask
from starlette.responses import JSONResponse

from .config import get_settings
from .core.headers import Headers


class Respondable(Protocol):
    """Anything that can hand over a body, a status code and headers."""

    @property
    def status_code(self) -> int: ...

    @property
    def headers(self) -> Headers: ...

    def body(self) -> Any: ...


class HalResponse(JSONResponse):
    """JSON response built from a respondable such as ``HalRespondable``.

    Status code and headers are read before ``body()`` finalizes the
    respondable. Repeated header values are kept, and since the respondable
    already declares a content type Starlette does not add its own.
    """

    media_type = "application/hal+json"

    def __init__(
        self,
        respondable: Respondable,
        background: BackgroundTask | None = None,
    ) -> None:
        status_code = respondable.status_code
        headers = respondable.headers
        body = respondable.body()
        content = body.model_dump(mode="json") if isinstance(body, BaseModel) else body
        super().__init__(
            content,
            status_code=status_code,
            headers=headers.as_mutable_headers(),
            media_type=get_settings().media_type,
            background=background,
        )


@lru_cache
def hal_response_class(media_type: str) -> type[HalResponse]:
    """Return a ``HalResponse`` class whose ``media_type`` is ``media_type``.

    FastAPI reads ``media_type`` from the class when it documents a route,
    so a configured media type needs its own subclass.
    """
    if media_type == HalResponse.media_type:
        return HalResponse
    return type(HalResponse.__name__, (HalResponse,), {"media_type": media_type})
