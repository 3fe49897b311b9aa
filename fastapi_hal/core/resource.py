"""Hooks that let a domain resource describe its HAL representation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from starlette import status

from .document import HalRespondable
from .headers import Headers
from .links import LinkLike

if TYPE_CHECKING:
    from ..responses import HalResponse


class IntoHal:
    """Declare what a resource's HAL response contains.

    Subclasses implement ``payload()`` and override any of the other hooks.
    They only say what goes into the response; ``into_hal`` decides how the
    declarations are assembled.

    ``payload()`` is always called last, after the other hooks, so it may
    hand over state the resource no longer needs.
    """

    def status_code(self) -> int:
        """Return the status code of the response."""
        return status.HTTP_200_OK

    def headers(self, headers: Headers) -> None:
        """Append response headers to ``headers``."""

    def links(self) -> Iterable[tuple[str, LinkLike]]:
        """Return ``(relation, link)`` pairs in declaration order."""
        return ()

    def payload(self) -> Any:
        """Return the object whose fields form the body of the document."""
        raise NotImplementedError

    def into_hal(self) -> "HalResponse":
        """Convert this resource into a HAL response."""
        return into_hal(self)


def build_respondable(resource: IntoHal) -> HalRespondable[Any]:
    """Run the resource hooks and return an unfinalized respondable."""
    headers = Headers()
    resource.headers(headers)
    status_code = resource.status_code()
    links = list(resource.links())
    payload = resource.payload()

    respondable = HalRespondable(payload).with_status_code(status_code)
    for name, value in headers:
        respondable.with_header_value(name, value)
    for name, link in links:
        respondable.with_link(name, link)
    return respondable


def into_hal(resource: IntoHal) -> "HalResponse":
    """Convert ``resource`` into a transport-ready HAL response."""
    from ..responses import HalResponse

    return HalResponse(build_respondable(resource))
