"""Router scaffolding for endpoints that answer with HAL resources."""

import inspect
from typing import Any, Callable

from fastapi import APIRouter
from starlette.concurrency import run_in_threadpool
from starlette.responses import Response

from fastapi_hal.core.document import HalRespondable
from fastapi_hal.core.resource import IntoHal, into_hal
from fastapi_hal.config import get_settings
from fastapi_hal.responses import HalResponse, hal_response_class


def to_response(result: Any) -> Response:
    """Turn an endpoint result into a Starlette response.

    ``IntoHal`` resources and ``HalRespondable`` builders become
    ``HalResponse`` objects; responses are passed through unchanged.
    """
    if isinstance(result, Response):
        return result
    if isinstance(result, IntoHal):
        return into_hal(result)
    if isinstance(result, HalRespondable):
        return HalResponse(result)
    raise TypeError(
        f"HAL endpoints must return IntoHal, HalRespondable or Response, "
        f"got {type(result).__name__}."
    )


def hal_endpoint(endpoint: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap ``endpoint`` so its result goes through ``to_response``.

    The wrapper keeps the endpoint's signature, so FastAPI still resolves
    path parameters and dependencies from it. Sync endpoints run in the
    threadpool as FastAPI would run them.
    """
    if inspect.iscoroutinefunction(endpoint):

        async def wrapper(*args: Any, **kwargs: Any) -> Response:
            return to_response(await endpoint(*args, **kwargs))

    else:

        async def wrapper(*args: Any, **kwargs: Any) -> Response:
            return to_response(await run_in_threadpool(endpoint, *args, **kwargs))

    # No __wrapped__: FastAPI must see an async callable with the endpoint's signature.
    for attr in ("__module__", "__name__", "__qualname__", "__doc__"):
        if hasattr(endpoint, attr):
            setattr(wrapper, attr, getattr(endpoint, attr))
    wrapper.__signature__ = inspect.signature(endpoint, eval_str=True)  # type: ignore[attr-defined]
    return wrapper


class HalRouter(APIRouter):
    """APIRouter whose HAL routes convert resources into HAL responses."""

    def add_hal_route(
        self,
        path: str,
        endpoint: Callable[..., Any],
        *,
        methods: list[str],
        name: str | None = None,
        **kwargs: Any,
    ) -> None:
        """Add a route with HAL defaults.

        ``status_code`` only documents the route; the status sent is the one
        the returned resource declares. The documented media type is the one
        configured when the route is added.
        """
        kwargs.setdefault("response_model", None)
        kwargs.setdefault("status_code", 200)
        media_type = get_settings().media_type
        kwargs.setdefault("response_class", hal_response_class(media_type))
        self.add_api_route(
            path,
            hal_endpoint(endpoint),
            methods=methods,
            name=name or endpoint.__name__,
            **kwargs,
        )

    def hal_route(
        self,
        path: str,
        *,
        methods: list[str],
        name: str | None = None,
        **kwargs: Any,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator form of ``add_hal_route``."""

        def decorator(endpoint: Callable[..., Any]) -> Callable[..., Any]:
            self.add_hal_route(path, endpoint, methods=methods, name=name, **kwargs)
            return endpoint

        return decorator
