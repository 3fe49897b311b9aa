"""HAL document construction: the wire payload and the response builder."""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, model_serializer, model_validator
from pydantic_core import to_jsonable_python

from ..config import get_settings
from .errors import BuilderFinalizedError, PayloadShapeError, ReservedFieldError
from .headers import Headers, HeaderValueLike, TypedHeader
from .links import Link, LinkLike, Links, Multiple, Single

logger = logging.getLogger(__name__)

LINKS_FIELD = "_links"

T = TypeVar("T")


def payload_fields(payload: Any) -> dict[str, Any]:
    """Return the JSON object members ``payload`` contributes to a HAL document.

    Raises ``PayloadShapeError`` when the payload is not object-shaped and
    ``ReservedFieldError`` when it would shadow ``_links``.
    """
    fields = to_jsonable_python(payload, by_alias=True)
    if not isinstance(fields, dict):
        raise PayloadShapeError(payload)
    if LINKS_FIELD in fields:
        raise ReservedFieldError(LINKS_FIELD)
    return fields


def _detached(links: Links) -> Links:
    if isinstance(links, Multiple):
        return Multiple(list(links.root))
    return links


class HalPayload(BaseModel, Generic[T]):
    """The JSON body of a HAL resource.

    Serializes as a single object: ``_links`` first, with relations in
    lexicographic order, followed by the payload's own fields flattened to
    the same level.
    """

    links: dict[str, Links] = Field(default_factory=dict)
    payload: T

    @model_validator(mode="after")
    def _check_payload(self) -> "HalPayload[T]":
        payload_fields(self.payload)
        return self

    @model_serializer(mode="plain")
    def _serialize(self) -> dict[str, Any]:
        document: dict[str, Any] = {
            LINKS_FIELD: {name: self.links[name] for name in sorted(self.links)}
        }
        document.update(payload_fields(self.payload))
        return document


class HalRespondable(Generic[T]):
    """Collect the status code, headers and links of a HAL resource.

    Every ``with_*`` call mutates the builder and returns it so calls can be
    chained. ``body()`` finalizes the builder; any later call that would
    change or re-read the body raises ``BuilderFinalizedError``.
    """

    def __init__(self, payload: T) -> None:
        """Create a respondable with status 200 and a HAL content type."""
        self._payload = payload
        self._status_code = 200
        self._headers = Headers().with_header_value(
            "Content-Type", get_settings().media_type
        )
        self._links: dict[str, Links] = {}
        self._finalized = False

    def _ensure_open(self) -> None:
        if self._finalized:
            raise BuilderFinalizedError()

    def with_status_code(self, status_code: int) -> "HalRespondable[T]":
        """Set the status code; the last call wins."""
        self._ensure_open()
        self._status_code = int(status_code)
        return self

    def with_header_value(self, name: str, value: HeaderValueLike) -> "HalRespondable[T]":
        """Append a header value, keeping any values already set for ``name``."""
        self._ensure_open()
        self._headers.with_header_value(name, value)
        return self

    def with_header(self, header: TypedHeader) -> "HalRespondable[T]":
        """Append a typed header."""
        self._ensure_open()
        self._headers.with_header(header)
        return self

    def with_link(self, name: str, link: LinkLike) -> "HalRespondable[T]":
        """Add a link under relation ``name``.

        The first link for a relation is kept as a single link object; any
        further link promotes the relation to an array in declaration order.
        """
        self._ensure_open()
        link = Link.coerce(link)
        existing = self._links.get(name)
        self._links[name] = Single(link) if existing is None else existing.push(link)
        return self

    @property
    def status_code(self) -> int:
        """Return the status code declared so far."""
        return self._status_code

    @property
    def headers(self) -> Headers:
        """Return a copy of the headers declared so far."""
        return self._headers.copy()

    @property
    def links(self) -> dict[str, Links]:
        """Return a copy of the relation map in lexicographic order."""
        return {name: _detached(self._links[name]) for name in sorted(self._links)}

    @property
    def finalized(self) -> bool:
        """Return whether ``body()`` has already been produced."""
        return self._finalized

    def body(self) -> HalPayload[T]:
        """Produce the HAL document and finalize the builder."""
        self._ensure_open()
        document = HalPayload(links=self.links, payload=self._payload)
        self._finalized = True
        logger.debug(
            "Finalized HAL document: status=%s relations=%d headers=%d",
            self._status_code,
            len(self._links),
            len(self._headers),
        )
        return document
